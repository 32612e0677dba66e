"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from landscape_grid.main import app as fastapi_app
from landscape_grid.models.layout import GridCategoryLayoutInput, SubcategoryDetails


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def make_layout_input():
    """Build a GridCategoryLayoutInput from (name, items, featured) tuples."""

    def _make(
        subcategories: list[tuple[str, int, int]],
        container_width: float = 1000,
        item_width: float = 20,
        is_overriden: bool = False,
    ) -> GridCategoryLayoutInput:
        return GridCategoryLayoutInput(
            category_name="Observability and Analysis",
            subcategories=[
                SubcategoryDetails(name=name, items_count=items, items_featured_count=featured)
                for name, items, featured in subcategories
            ],
            is_overriden=is_overriden,
            container_width=container_width,
            item_width=item_width,
        )

    return _make


@pytest.fixture
def layout_payload():
    """Layout request body as sent by the web UI (camelCase)."""
    return {
        "categoryName": "Observability and Analysis",
        "subcategories": [
            {"name": "Monitoring", "itemsCount": 10, "itemsFeaturedCount": 0},
            {"name": "Tracing", "itemsCount": 5, "itemsFeaturedCount": 0},
        ],
        "isOverriden": False,
        "containerWidth": 1000,
        "itemWidth": 100,
    }
