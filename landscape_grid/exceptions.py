"""Custom exceptions for Landscape Grid with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    LANDSCAPE_ERROR = "LANDSCAPE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Layout errors
    LAYOUT_ERROR = "LAYOUT_ERROR"
    LAYOUT_INVALID_INPUT = "LAYOUT_INVALID_INPUT"
    LAYOUT_CONTAINER_TOO_NARROW = "LAYOUT_CONTAINER_TOO_NARROW"
    LAYOUT_NO_ITEMS = "LAYOUT_NO_ITEMS"
    LAYOUT_EMPTY_ROW = "LAYOUT_EMPTY_ROW"
    LAYOUT_DUPLICATE_SUBCATEGORY = "LAYOUT_DUPLICATE_SUBCATEGORY"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"


class LandscapeException(Exception):
    """Base exception for landscape grid errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LANDSCAPE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize landscape exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class LayoutException(LandscapeException):
    """Grid layout computation errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LAYOUT_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LayoutValidationException(LayoutException):
    """Layout input does not meet the planner's preconditions."""

    def __init__(
        self,
        message: str = "Invalid grid layout input",
        issues: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ):
        merged = dict(details or {})
        merged["issues"] = issues or []
        super().__init__(
            message,
            code=ErrorCode.LAYOUT_INVALID_INPUT,
            status_code=422,
            details=merged,
        )

    @property
    def issues(self) -> list[dict[str, Any]]:
        return self.details["issues"]


class ConfigurationException(LandscapeException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
