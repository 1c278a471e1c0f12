from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from models.bakery import register_bakery_links
from routers import bakeries
from services.registry import default_link_registry

port = int(os.environ.get("FASTAPIPORT", 8000))

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Links are registered once, before any request is served
    register_bakery_links(default_link_registry)
    logger.info("Registered links for %d type(s)", len(default_link_registry))
    yield


app = FastAPI(
    title="Bakery API",
    description="Example service whose responses carry HATEOAS links.",
    version="0.1.0",
    lifespan=lifespan,
)

# -----------------------------------------------------------------------------
# Routers to public RESTful resources
# -----------------------------------------------------------------------------

app.include_router(router=bakeries.router)


# -----------------------------------------------------------------------------
# Root
# -----------------------------------------------------------------------------
@app.get("/")
def root():
    return {"message": "Welcome to the Bakery API. See /docs for OpenAPI UI."}

# -----------------------------------------------------------------------------
# Entrypoint for `python main.py`
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
