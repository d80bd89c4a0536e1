"""
Grid layout.

Tiles drawing elements into uniform cells sized to the largest element
plus padding, filling the canvas area inside the margins in row-major
order. When the grid would run past the bottom margin the row count is
capped and columns are added instead, so overflow happens horizontally.
"""

from __future__ import annotations

import math

from .config import LayoutConfig, LayoutResult
from .geom import CanvasSize
from .shapes import DrawingElement, RelationshipElement


def _cells_that_fit(available: float, cell: float, count: int) -> int:
    """Whole cells of the given size that fit, at least one."""
    if cell == 0:
        # Zero-sized cells fit without bound
        return max(1, count)
    return max(1, int(available / cell))


def grid_dimensions(
    count: int,
    cell_width: float,
    cell_height: float,
    available_width: float,
    available_height: float
) -> tuple[int, int]:
    """
    Compute grid shape for count cells.

    Returns:
        Tuple of (rows, cols)
    """
    cols = _cells_that_fit(available_width, cell_width, count)
    rows = math.ceil(count / cols)

    if rows * cell_height > available_height:
        rows = _cells_that_fit(available_height, cell_height, count)
        cols = math.ceil(count / rows)

    return rows, cols


def arrange_grid(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    """
    Arrange drawing elements in a grid.

    Relationships are ignored.

    Args:
        drawings: Elements to position, in placement order
        relationships: Unused
        canvas: Canvas dimensions
        config: Padding and margins

    Returns:
        Layout result; total_area is the usable area inside the margins
    """
    if not drawings:
        return LayoutResult.nothing_to_arrange()

    available_width = config.available_width(canvas)
    available_height = config.available_height(canvas)

    max_width = 0.0
    max_height = 0.0
    for d in drawings:
        max_width = max(max_width, d.size.width)
        max_height = max(max_height, d.size.height)

    cell_width = max_width + config.padding
    cell_height = max_height + config.padding

    rows, cols = grid_dimensions(
        len(drawings), cell_width, cell_height, available_width, available_height
    )

    for index, d in enumerate(drawings):
        row, col = divmod(index, cols)
        d.set_position(
            config.margin_left + col * cell_width,
            config.margin_top + row * cell_height
        )

    return LayoutResult(
        success=True,
        elements_arranged=len(drawings),
        total_area=available_width * available_height
    )
