import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException, Request, status

from config.settings import settings
from models.bakery import Bakery, Cupcake
from utils.hateoas import HATEOASResponse, hateoas_response

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix=settings.API_PREFIX,
    tags=["Bakeries"],
)


# -----------------------------------------------------------------------------
# In-memory data
# -----------------------------------------------------------------------------
_cupcakes: Dict[int, Cupcake] = {
    1: Cupcake(id=1, name="red velvet"),
    2: Cupcake(id=2, name="lemon"),
    3: Cupcake(id=3, name="carrot"),
}

_bakeries: Dict[int, Bakery] = {
    1: Bakery(id=1, name="Sweet Corner", cupcake=_cupcakes[1], cupcakes=[_cupcakes[1], _cupcakes[2]]),
    2: Bakery(id=2, name="Crumbs", cupcakes=[_cupcakes[3]]),
}


# -----------------------------------------------------------------------------
# GET Endpoints
# -----------------------------------------------------------------------------
@router.get("/bakeries", name="list_bakeries", response_class=HATEOASResponse)
async def list_bakeries():
    bakeries: List[Bakery] = list(_bakeries.values())
    return HATEOASResponse(bakeries)


@router.get("/bakeries/{bakery_id}", name="get_bakery")
async def get_bakery(request: Request, bakery_id: int):
    bakery = _bakeries.get(bakery_id)
    if bakery is None:
        logger.debug("Bakery %s not found", bakery_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bakery not found",
        )

    return hateoas_response(request, bakery)


@router.get("/cupcakes/{cupcake_id}", name="get_cupcake", response_class=HATEOASResponse)
async def get_cupcake(cupcake_id: int):
    cupcake = _cupcakes.get(cupcake_id)
    if cupcake is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Cupcake not found",
        )

    return HATEOASResponse(cupcake)
