from pathlib import Path

from limits import parse
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # landscape-grid/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the service starts without a .env file.
    Values are read from environment variables (case-insensitive) or .env.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Comma separated list of origins allowed to call the API from a browser
    cors_origins: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        description="Allowed CORS origins (comma separated)",
    )

    # Layout endpoints
    layout_rate_limit: str = Field(default="120/minute", description="Rate limit for layout endpoints")
    validate_layouts: bool = Field(
        default=True,
        description="Reject layout requests that would produce non-finite or empty rows",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("layout_rate_limit", mode="after")
    @classmethod
    def validate_layout_rate_limit(cls, v: str) -> str:
        """Ensure the rate limit is a valid limit string (e.g. '60/minute')."""
        v = v.strip()
        try:
            parse(v)
        except ValueError as e:
            raise ValueError(f"layout_rate_limit must be a valid rate limit string: {e}") from e
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list, empty entries dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
