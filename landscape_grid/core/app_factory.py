"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from landscape_grid import __version__
from landscape_grid.config import get_settings
from landscape_grid.core.lifespan import lifespan
from landscape_grid.core.middleware import setup_middleware
from landscape_grid.middleware.error_handlers import register_error_handlers
from landscape_grid.routers import health_router, layout_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Landscape Grid API",
        description="""
        **Landscape Grid** - Responsive grid layouts for landscape categories

        ## Layouts
        - `POST /api/layout/grid` - Rows and column widths for a category's subcategories
        - `POST /api/layout/grid/validate` - Check a layout input without computing it

        ## Health & Monitoring
        - `/health` - Basic health check (Docker/K8s)
        - `/health/live` - Liveness probe (is app running?)
        - `/health/ready` - Readiness probe (can serve traffic?)
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "Apache-2.0",
        },
    )

    # Configure middleware
    setup_middleware(app, settings)

    # Register exception handlers
    register_error_handlers(app)

    # Health endpoints
    app.include_router(health_router.router, tags=["health"])

    # API routes
    app.include_router(layout_router.router, prefix="/api/layout", tags=["layout"])

    return app
