"""Shared fixtures for the link injection tests."""

import pytest

from models.bakery import register_bakery_links
from services.registry import LinkRegistry, new_link_registry


@pytest.fixture
def registry() -> LinkRegistry:
    """A fresh registry with the bakery and cupcake links registered."""
    links = new_link_registry()
    register_bakery_links(links)
    return links
