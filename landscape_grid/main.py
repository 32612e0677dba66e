"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from landscape_grid.core.app_factory import create_app
from landscape_grid.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

# Create application
app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Landscape Grid API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    from landscape_grid.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "landscape_grid.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
