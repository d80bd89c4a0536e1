"""
Circular layout: drawing elements evenly spaced on a circle centred in
the canvas, box centres on the circle. Relationships are ignored.
"""

from __future__ import annotations

import math

from .config import LayoutConfig, LayoutResult
from .geom import CanvasSize
from .shapes import DrawingElement, RelationshipElement

RADIUS_INSET = 100.0


def circle_radius(canvas: CanvasSize, config: LayoutConfig) -> float:
    """Half the smaller usable dimension, less RADIUS_INSET. May be negative."""
    return min(config.available_width(canvas), config.available_height(canvas)) / 2 - RADIUS_INSET


def arrange_circular(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    if not drawings:
        return LayoutResult.nothing_to_arrange()

    cx = canvas.width / 2
    cy = canvas.height / 2
    radius = circle_radius(canvas, config)
    n = len(drawings)

    for i, d in enumerate(drawings):
        angle = 2.0 * math.pi * i / n
        d.set_position(
            cx + radius * math.cos(angle) - d.size.width / 2,
            cy + radius * math.sin(angle) - d.size.height / 2
        )

    return LayoutResult(
        success=True,
        elements_arranged=n,
        total_area=math.pi * radius * radius
    )
