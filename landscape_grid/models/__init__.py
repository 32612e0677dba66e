"""Landscape Grid models"""

from landscape_grid.models.base_models import DetailedHealthResponse, HealthResponse
from landscape_grid.models.layout import (
    GridCategoryLayout,
    GridCategoryLayoutInput,
    GridCategoryLayoutResponse,
    GridLayoutValidationResponse,
    LayoutColumn,
    LayoutRow,
    LayoutValidationIssue,
    SubcategoryDetails,
    WeightedSubcategory,
)

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "GridCategoryLayout",
    "GridCategoryLayoutInput",
    "GridCategoryLayoutResponse",
    "GridLayoutValidationResponse",
    "LayoutColumn",
    "LayoutRow",
    "LayoutValidationIssue",
    "SubcategoryDetails",
    "WeightedSubcategory",
]
