from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from config.settings import settings
from services.options import (
    custom_link,
    delete_link,
    index_link,
    patch_link,
    post_link,
    self_link,
)
from services.registry import LinkRegistry, register_on
from models.hateoas import LinkInfo


# -----------------------------------------------------------------------------
# Pydantic Schemas
# -----------------------------------------------------------------------------
class Cupcake(BaseModel):
    id: int = Field(
        ...,
        description="Unique identifier for this cupcake"
    )
    name: str = Field(
        ...,
        description="Name of the cupcake",
        examples=["red velvet"]
    )
    # Cyclic on purpose, a cupcake may point back to its bakery
    bakery: Optional[Bakery] = Field(
        None,
        description="Bakery selling this cupcake"
    )


class Bakery(BaseModel):
    id: int = Field(
        ...,
        description="Unique identifier for this bakery"
    )
    name: str = Field(
        ...,
        description="Name of the bakery"
    )
    cupcake: Optional[Cupcake] = Field(
        None,
        description="Cupcake of the day"
    )
    cupcakes: List[Cupcake] = Field(
        default_factory=list,
        description="All cupcakes on offer"
    )


Cupcake.model_rebuild()


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------
def register_bakery_links(registry: LinkRegistry) -> None:
    prefix = settings.API_PREFIX

    register_on(
        registry,
        Bakery,
        self_link(f"{prefix}/bakeries/{{id}}", "get a bakery by id"),
        index_link(f"{prefix}/bakeries", "get all bakeries"),
        post_link(f"{prefix}/bakeries", "create a new bakery"),
        patch_link(f"{prefix}/bakeries/{{id}}", "partially update a bakery"),
        delete_link(f"{prefix}/bakeries/{{id}}", "delete this bakery"),
    )

    register_on(
        registry,
        Cupcake,
        self_link(f"{prefix}/cupcakes/{{id}}", "get a cupcake by id"),
        index_link(f"{prefix}/cupcakes", "get all cupcakes"),
        custom_link("by_name", LinkInfo(
            method="GET",
            href=f"{prefix}/cupcakes?name={{name}}",
            comment="find cupcakes by name",
        )),
    )
