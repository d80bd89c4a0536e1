"""
diaglayout: 2D layout engine for diagram authoring

Positions boxes and connectors on a canvas using grid, hierarchical,
force-directed or circular placement.
"""

__version__ = "0.1.0"

from .geom import Position, Size, CanvasSize
from .shapes import (
    ElementType,
    ShapeElement,
    DrawingElement,
    RelationshipElement,
    drawing_elements,
    relationship_elements,
)
from .config import LayoutStrategy, LayoutConfig, LayoutResult
from .rectangle import Rectangle, check_overlap, count_overlaps
from .layout import EventType, LayoutEngine

__all__ = [
    "Position",
    "Size",
    "CanvasSize",
    "ElementType",
    "ShapeElement",
    "DrawingElement",
    "RelationshipElement",
    "drawing_elements",
    "relationship_elements",
    "LayoutStrategy",
    "LayoutConfig",
    "LayoutResult",
    "Rectangle",
    "check_overlap",
    "count_overlaps",
    "EventType",
    "LayoutEngine",
]
