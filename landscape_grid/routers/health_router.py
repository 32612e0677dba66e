"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from landscape_grid import __version__
from landscape_grid.models import DetailedHealthResponse, HealthResponse
from landscape_grid.models.layout import GridCategoryLayoutInput, SubcategoryDetails
from landscape_grid.services import grid_layout_planner

router = APIRouter()

# Known input used by the readiness probe: two subcategories in a single row
PROBE_LAYOUT_INPUT = GridCategoryLayoutInput(
    category_name="health-probe",
    subcategories=[
        SubcategoryDetails(name="a", items_count=10, items_featured_count=0),
        SubcategoryDetails(name="b", items_count=5, items_featured_count=0),
    ],
    is_overriden=False,
    container_width=1000,
    item_width=100,
)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For detailed health status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/live", response_model=HealthResponse)
async def liveness_check():
    """Liveness probe - is the application running?"""
    return HealthResponse(status="alive", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check():
    """Readiness probe - can the application serve traffic?

    Runs a known layout through the planner and checks every row adds up to 100%.

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Application is not ready
    """
    checks = {}

    try:
        rows = grid_layout_planner.compute_grid_category_layout(PROBE_LAYOUT_INPUT)
        balanced = all(abs(sum(c.percentage for c in row) - 100) < 1e-6 for row in rows)
        checks["layout_planner"] = "ok" if balanced else "failed: unbalanced rows"
    except Exception as e:
        checks["layout_planner"] = f"error: {str(e)[:50]}"

    all_healthy = all(result == "ok" for result in checks.values())
    status_code = 200 if all_healthy else 503
    status = "healthy" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status=status,
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
