"""Pydantic models for grid category layouts.

Python attributes are snake_case; JSON payloads use the camelCase names the
landscape web UI sends and expects (``itemsCount``, ``subcategoryName``, ...).
Both forms are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from landscape_grid.constants import FEATURED_ITEM_EXTRA_WEIGHT
from landscape_grid.exceptions import ErrorCode


class CamelModel(BaseModel):
    """Base model serializing field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubcategoryDetails(CamelModel):
    """Some details about a subcategory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Subcategory name, unique within the category")
    items_count: int = Field(ge=0, description="Number of regular items")
    items_featured_count: int = Field(ge=0, description="Number of featured items")


class WeightedSubcategory(SubcategoryDetails):
    """Subcategory extended with its weight in the layout."""

    normalized_items_count: int = Field(ge=0)

    @classmethod
    def from_details(cls, details: SubcategoryDetails) -> "WeightedSubcategory":
        """Weigh a subcategory by the space its items take once rendered.

        Featured items are displayed larger, each one taking the space of
        about four regular items.
        """
        return cls(
            name=details.name,
            items_count=details.items_count,
            items_featured_count=details.items_featured_count,
            normalized_items_count=details.items_count + details.items_featured_count * FEATURED_ITEM_EXTRA_WEIGHT,
        )


class LayoutColumn(CamelModel):
    """A column in a row of the layout."""

    subcategory_name: str
    percentage: float = 0.0


# A row in the layout (an array of columns)
LayoutRow = list[LayoutColumn]

# How the subcategories of a category are distributed in rows and columns
GridCategoryLayout = list[LayoutRow]


class GridCategoryLayoutInput(CamelModel):
    """Input used to calculate the grid category layout."""

    category_name: str = Field(min_length=1)
    subcategories: list[SubcategoryDetails] = Field(default_factory=list)
    is_overriden: bool = Field(default=False, description="One subcategory per row, input order kept")
    container_width: float = Field(gt=0, description="Width of the grid container in px")
    item_width: float = Field(gt=0, description="Width of a regular item card in px")


class LayoutValidationIssue(CamelModel):
    """A precondition the layout input does not meet."""

    code: ErrorCode
    message: str
    subcategory_name: str | None = None
    row_index: int | None = None


class GridCategoryLayoutResponse(CamelModel):
    """Computed layout returned by the API."""

    category_name: str
    rows_count: int
    min_percentage: float
    rows: GridCategoryLayout


class GridLayoutValidationResponse(CamelModel):
    """Result of validating a layout input without computing it."""

    valid: bool
    issues: list[LayoutValidationIssue] = Field(default_factory=list)
