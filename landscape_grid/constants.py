"""Layout policy constants for the landscape grid.

These values are fixed by the rendering surface and are not exposed through
settings. All widths are in pixels.
"""

# Width reserved for each column in a row. Used to decide how many columns fit
# in a row; columns may end up narrower when they hold few items.
COLUMN_RESERVED_WIDTH = 500

# Minimum number of (non featured) items that must fit side by side in a column.
MIN_COLUMN_ITEMS = 4

# Lateral padding of the container the items are displayed in.
CONTAINER_PADDING = 11

# Space between items.
ITEMS_SPACING = 6

# A featured item takes the space of ~4 regular items: its own slot plus 3 extra.
FEATURED_ITEM_EXTRA_WEIGHT = 3
