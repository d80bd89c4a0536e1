"""
Shape model for diagram layout.

Two closed variants share the ShapeElement base:
- DrawingElement: a named box that occupies canvas area
- RelationshipElement: a directed connector between two drawing elements,
  with no footprint of its own

Strategies filter a mixed collection with drawing_elements() and
relationship_elements(), both of which keep the input order.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional
import weakref

from .geom import Position, Size


class ElementType(IntEnum):
    """Discriminant for the two shape variants."""
    drawing = 0
    relationship = 1


class ShapeElement:
    """
    Base for all shape elements.

    Attributes:
        id: Caller-assigned identifier
        position: Top-left corner, written by the layout engine
        size: Box extent
    """

    def __init__(self, id: str = "", position: Optional[Position] = None, size: Optional[Size] = None):
        self.id = id
        self.position = position if position is not None else Position()
        self.size = size if size is not None else Size()

    @property
    def element_type(self) -> ElementType:
        raise NotImplementedError

    def set_position(self, x: float, y: float) -> None:
        """Replace the position."""
        self.position = Position(x, y)

    def set_size(self, width: float, height: float) -> None:
        """Replace the size."""
        self.size = Size(width, height)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, "
            f"position={self.position!r}, size={self.size!r})"
        )


class DrawingElement(ShapeElement):
    """
    Box representing a diagram node.

    Attributes:
        name: Display name
        shape_type: Free-form style tag
        color: Fill colour
    """

    DEFAULT_WIDTH = 100.0
    DEFAULT_HEIGHT = 60.0

    def __init__(
        self,
        name: str = "",
        shape_type: str = "rectangle",
        color: str = "#FFFFFF",
        **kwargs
    ):
        kwargs.setdefault('size', Size(self.DEFAULT_WIDTH, self.DEFAULT_HEIGHT))
        super().__init__(**kwargs)
        self.name = name
        self.shape_type = shape_type
        self.color = color

    @property
    def element_type(self) -> ElementType:
        return ElementType.drawing


class RelationshipElement(ShapeElement):
    """
    Directed connector from connector1 (parent) to connector2 (child).

    Endpoints are held weakly: the caller's collection owns the drawing
    elements, and an endpoint whose element has been released reads as None.
    """

    def __init__(
        self,
        connector1: Optional[DrawingElement] = None,
        connector2: Optional[DrawingElement] = None,
        relationship_type: str = "association",
        label: str = "",
        **kwargs
    ):
        kwargs.setdefault('size', Size(0.0, 0.0))
        super().__init__(**kwargs)
        self._connector1: Optional[weakref.ref] = None
        self._connector2: Optional[weakref.ref] = None
        self.connector1 = connector1
        self.connector2 = connector2
        self.relationship_type = relationship_type
        self.label = label

    @property
    def element_type(self) -> ElementType:
        return ElementType.relationship

    @property
    def connector1(self) -> Optional[DrawingElement]:
        return self._connector1() if self._connector1 is not None else None

    @connector1.setter
    def connector1(self, element: Optional[DrawingElement]) -> None:
        self._connector1 = weakref.ref(element) if element is not None else None

    @property
    def connector2(self) -> Optional[DrawingElement]:
        return self._connector2() if self._connector2 is not None else None

    @connector2.setter
    def connector2(self, element: Optional[DrawingElement]) -> None:
        self._connector2 = weakref.ref(element) if element is not None else None


def drawing_elements(elements: Iterable[Optional[ShapeElement]]) -> list[DrawingElement]:
    """Drawing elements of a mixed collection, in input order."""
    return [e for e in elements if e is not None and e.element_type == ElementType.drawing]


def relationship_elements(elements: Iterable[Optional[ShapeElement]]) -> list[RelationshipElement]:
    """Relationship elements of a mixed collection, in input order."""
    return [e for e in elements if e is not None and e.element_type == ElementType.relationship]
