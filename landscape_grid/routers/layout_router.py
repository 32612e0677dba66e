"""Grid layout API routes."""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from landscape_grid.config import Settings, get_settings
from landscape_grid.models.layout import (
    GridCategoryLayoutInput,
    GridCategoryLayoutResponse,
    GridLayoutValidationResponse,
)
from landscape_grid.services import grid_layout_planner

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _layout_rate_limit() -> str:
    return get_settings().layout_rate_limit


LAYOUT_EXAMPLE = {
    "categoryName": "Observability",
    "subcategories": [
        {"name": "Monitoring", "itemsCount": 10, "itemsFeaturedCount": 0},
        {"name": "Tracing", "itemsCount": 5, "itemsFeaturedCount": 0},
    ],
    "isOverriden": False,
    "containerWidth": 1000,
    "itemWidth": 100,
}


@router.post(
    "/grid",
    response_model=GridCategoryLayoutResponse,
    summary="Compute grid category layout",
    description="""
    Distributes the subcategories of a category in rows and computes the
    width percentage of each subcategory column within its row.

    Columns get a share proportional to their items (featured items count
    as four) and are never narrower than four item cards.

    **Rate Limited:** configurable, 120 requests/minute by default
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "categoryName": "Observability",
                        "rowsCount": 1,
                        "minPercentage": 44.0,
                        "rows": [
                            [
                                {"subcategoryName": "Monitoring", "percentage": 56.0},
                                {"subcategoryName": "Tracing", "percentage": 44.0},
                            ]
                        ],
                    }
                }
            },
        },
        422: {"description": "Layout input does not meet the planner's preconditions"},
    },
    openapi_extra={"requestBody": {"content": {"application/json": {"example": LAYOUT_EXAMPLE}}}},
)
@limiter.limit(_layout_rate_limit)
async def compute_grid_layout(
    request: Request,
    layout_input: GridCategoryLayoutInput,
    settings: Settings = Depends(get_settings),
) -> GridCategoryLayoutResponse:
    """Compute the grid layout of a category.

    Args:
        request: FastAPI request object
        layout_input: Category, subcategories and container dimensions
        settings: Settings instance

    Returns:
        GridCategoryLayoutResponse with the layout rows
    """
    rows = grid_layout_planner.compute_grid_category_layout(layout_input, validate=settings.validate_layouts)
    return GridCategoryLayoutResponse(
        category_name=layout_input.category_name,
        rows_count=len(rows),
        min_percentage=grid_layout_planner.compute_min_percentage(
            layout_input.container_width, layout_input.item_width
        ),
        rows=rows,
    )


@router.post(
    "/grid/validate",
    response_model=GridLayoutValidationResponse,
    summary="Validate grid layout input",
    description="Reports every precondition the input does not meet, without computing the layout.",
)
@limiter.limit(_layout_rate_limit)
async def validate_grid_layout(request: Request, layout_input: GridCategoryLayoutInput) -> GridLayoutValidationResponse:
    """Validate a layout input.

    Args:
        request: FastAPI request object
        layout_input: Category, subcategories and container dimensions

    Returns:
        GridLayoutValidationResponse listing the issues found
    """
    issues = grid_layout_planner.validate_grid_layout_input(layout_input)
    return GridLayoutValidationResponse(valid=not issues, issues=issues)
