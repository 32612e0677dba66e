"""Grid layout planner for landscape categories.

Decides how the subcategories of a category are distributed in rows and how
wide each subcategory column is within its row. The computation runs in four
stages, each one a plain function:

1. Row count resolution (``resolve_rows_count``)
2. Weighting and row assignment (``weigh_subcategories``, ``assign_rows``)
3. Percentage distribution (``distribute_percentages``)
4. Minimum width enforcement (``compute_min_percentage``, ``enforce_min_width``)

``compute_grid_category_layout`` chains them. Every call works on freshly
built rows, so the planner holds no state between calls.
"""

import math
from collections import Counter
from collections.abc import Sequence

from landscape_grid.constants import (
    COLUMN_RESERVED_WIDTH,
    CONTAINER_PADDING,
    ITEMS_SPACING,
    MIN_COLUMN_ITEMS,
)
from landscape_grid.exceptions import ErrorCode, LayoutValidationException
from landscape_grid.logging_config import get_logger, log_with_context
from landscape_grid.models.layout import (
    GridCategoryLayout,
    GridCategoryLayoutInput,
    LayoutColumn,
    LayoutRow,
    LayoutValidationIssue,
    SubcategoryDetails,
    WeightedSubcategory,
)

logger = get_logger(__name__)


def resolve_rows_count(subcategories_count: int, is_overriden: bool, container_width: float) -> int:
    """Calculate the number of rows needed to display the subcategories.

    Overridden layouts get one row per subcategory. Otherwise as many columns
    as fit in the container (``COLUMN_RESERVED_WIDTH`` each) go in a row.

    Raises:
        ZeroDivisionError: If the container is narrower than one reserved column
            and the layout is not overridden
    """
    if is_overriden:
        return subcategories_count
    max_columns = math.floor(container_width / COLUMN_RESERVED_WIDTH)
    return math.ceil(subcategories_count / max_columns)


def weigh_subcategories(subcategories: Sequence[SubcategoryDetails]) -> list[WeightedSubcategory]:
    """Extend subcategories with their normalized items count."""
    return [WeightedSubcategory.from_details(s) for s in subcategories]


def _group_in_rows(
    weighted: Sequence[WeightedSubcategory],
    rows_count: int,
    is_overriden: bool,
) -> list[list[WeightedSubcategory]]:
    # Next available largest subcategory goes to the next row, round robin
    ordered = list(weighted)
    if not is_overriden:
        ordered.sort(key=lambda s: s.normalized_items_count, reverse=True)

    groups: list[list[WeightedSubcategory]] = [[] for _ in range(rows_count)]
    current_row = 0
    for subcategory in ordered:
        groups[current_row].append(subcategory)
        current_row = 0 if current_row == rows_count - 1 else current_row + 1
    return groups


def assign_rows(
    weighted: Sequence[WeightedSubcategory],
    rows_count: int,
    is_overriden: bool,
) -> GridCategoryLayout:
    """Distribute subcategories in rows, one column per subcategory.

    Unless the layout is overridden, subcategories are sorted by weight
    (largest first, ties keep their input order) and dealt to the rows in
    turn so the rows end up with a similar weight. Overridden layouts keep
    the input order.

    All columns start with a percentage of 0.
    """
    return [
        [LayoutColumn(subcategory_name=s.name, percentage=0.0) for s in group]
        for group in _group_in_rows(weighted, rows_count, is_overriden)
    ]


def distribute_percentages(rows: GridCategoryLayout, weighted: Sequence[WeightedSubcategory]) -> None:
    """Set each column's width percentage from its subcategory weight.

    The weight of a subcategory is its share of the normalized items count of
    the whole category. Within a row, weights are normalized again so the
    percentages of the row add up to 100.

    Raises:
        ZeroDivisionError: If the category has no items, or a row has none
    """
    total_items_count = sum(s.normalized_items_count for s in weighted)
    weights = {s.name: s.normalized_items_count / total_items_count for s in weighted}

    for row in rows:
        row_weight = sum(weights[column.subcategory_name] for column in row)
        for column in row:
            column.percentage = (weights[column.subcategory_name] / row_weight) * 100


def compute_min_percentage(container_width: float, item_width: float) -> float:
    """Minimum column width, as a percentage of the container width.

    A column must fit ``MIN_COLUMN_ITEMS`` items side by side, plus the
    spacing between them and the container padding.
    """
    min_width = 2 * CONTAINER_PADDING + (MIN_COLUMN_ITEMS - 1) * ITEMS_SPACING + item_width * MIN_COLUMN_ITEMS
    return (min_width * 100) / container_width


def _enforce_row_min_width(row: LayoutRow, min_percentage: float) -> float:
    owers: list[LayoutColumn] = []
    owed = 0.0

    # Pass 1: increase percentage of columns not reaching the minimum
    for column in row:
        if column.percentage < min_percentage:
            owed += min_percentage - column.percentage
            column.percentage = min_percentage
        else:
            owers.append(column)

    # Pass 2: take percentage owed from the other columns
    if owed > 0 and owers:
        debt = owed / len(owers)
        for column in owers:
            column.percentage -= debt

    return owed if not owers else 0.0


def enforce_min_width(rows: GridCategoryLayout, min_percentage: float) -> None:
    """Adjust columns percentages to respect the minimum width for a column.

    Columns below ``min_percentage`` are raised to it. The width they gain is
    taken in equal parts from the rest of the columns of the row. This is a
    single correction pass: a column that drops below the minimum while
    giving width away is not corrected again.
    """
    for row_index, row in enumerate(rows):
        unfunded = _enforce_row_min_width(row, min_percentage)

        if unfunded > 0:
            log_with_context(
                logger,
                "warning",
                "No column left to fund minimum width, row exceeds 100%",
                row_index=row_index,
                owed_percentage=unfunded,
                event_type="layout_min_width_unfunded",
            )
            continue

        below_min = [c.subcategory_name for c in row if c.percentage < min_percentage]
        if below_min:
            log_with_context(
                logger,
                "warning",
                "Columns pushed below minimum width while funding other columns",
                row_index=row_index,
                min_percentage=min_percentage,
                subcategories=below_min,
                event_type="layout_min_width_unsatisfied",
            )


def validate_grid_layout_input(layout_input: GridCategoryLayoutInput) -> list[LayoutValidationIssue]:
    """Check the preconditions of the layout computation.

    The planner itself does not guard its arithmetic. Inputs reported here
    would make it divide by zero or emit columns without width.

    Returns:
        Issues found, empty when the input can be laid out
    """
    issues: list[LayoutValidationIssue] = []
    subcategories = layout_input.subcategories

    name_counts = Counter(s.name for s in subcategories)
    for name, count in name_counts.items():
        if count > 1:
            issues.append(
                LayoutValidationIssue(
                    code=ErrorCode.LAYOUT_DUPLICATE_SUBCATEGORY,
                    message=f"Subcategory '{name}' appears {count} times",
                    subcategory_name=name,
                )
            )

    if not subcategories:
        return issues

    too_narrow = not layout_input.is_overriden and layout_input.container_width < COLUMN_RESERVED_WIDTH
    if too_narrow:
        issues.append(
            LayoutValidationIssue(
                code=ErrorCode.LAYOUT_CONTAINER_TOO_NARROW,
                message=(
                    f"Container width {layout_input.container_width:g}px is smaller than "
                    f"the {COLUMN_RESERVED_WIDTH}px reserved for a column"
                ),
            )
        )

    weighted = weigh_subcategories(subcategories)
    if sum(s.normalized_items_count for s in weighted) == 0:
        issues.append(
            LayoutValidationIssue(
                code=ErrorCode.LAYOUT_NO_ITEMS,
                message=f"Category '{layout_input.category_name}' has no items",
            )
        )
        return issues

    if too_narrow:
        return issues

    rows_count = resolve_rows_count(len(weighted), layout_input.is_overriden, layout_input.container_width)
    groups = _group_in_rows(weighted, rows_count, layout_input.is_overriden)
    for row_index, group in enumerate(groups):
        if sum(s.normalized_items_count for s in group) == 0:
            issues.append(
                LayoutValidationIssue(
                    code=ErrorCode.LAYOUT_EMPTY_ROW,
                    message=f"Row {row_index} only holds subcategories without items",
                    row_index=row_index,
                    subcategory_name=group[0].name if len(group) == 1 else None,
                )
            )

    return issues


def ensure_valid_grid_layout_input(layout_input: GridCategoryLayoutInput) -> None:
    """Raise if the layout input does not meet the planner's preconditions.

    Raises:
        LayoutValidationException: With every issue found in its details
    """
    issues = validate_grid_layout_input(layout_input)
    if not issues:
        return

    log_with_context(
        logger,
        "warning",
        "Invalid grid layout input",
        category_name=layout_input.category_name,
        issue_codes=[issue.code.value for issue in issues],
        event_type="layout_validation_failed",
    )
    raise LayoutValidationException(
        f"Invalid grid layout input for category '{layout_input.category_name}'",
        issues=[issue.model_dump(mode="json", by_alias=True, exclude_none=True) for issue in issues],
    )


def compute_grid_category_layout(
    layout_input: GridCategoryLayoutInput,
    *,
    validate: bool = True,
) -> GridCategoryLayout:
    """Get the grid layout of the category provided.

    Args:
        layout_input: Category, subcategories and container dimensions
        validate: Check preconditions first. When False the raw computation
            runs and ill-formed inputs surface as ZeroDivisionError or as
            out of range percentages.

    Returns:
        Rows of columns; percentages in each row add up to 100 unless the
        minimum width could not be met

    Raises:
        LayoutValidationException: If validate is True and the input is invalid
    """
    if validate:
        ensure_valid_grid_layout_input(layout_input)

    if not layout_input.subcategories:
        return []

    rows_count = resolve_rows_count(
        len(layout_input.subcategories),
        layout_input.is_overriden,
        layout_input.container_width,
    )
    weighted = weigh_subcategories(layout_input.subcategories)
    rows = assign_rows(weighted, rows_count, layout_input.is_overriden)
    distribute_percentages(rows, weighted)

    min_percentage = compute_min_percentage(layout_input.container_width, layout_input.item_width)
    enforce_min_width(rows, min_percentage)

    log_with_context(
        logger,
        "debug",
        "Grid layout computed",
        category_name=layout_input.category_name,
        subcategories_count=len(weighted),
        rows_count=rows_count,
        min_percentage=min_percentage,
        is_overriden=layout_input.is_overriden,
        event_type="layout_computed",
    )
    return rows
