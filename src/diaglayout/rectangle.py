"""
Rectangle geometry and the overlap oracle.

Overlap is tested on bounding boxes inflated by the padding on their
trailing (right and bottom) edges only. Relationship elements have no
footprint and never overlap anything.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .shapes import ElementType, ShapeElement


class Rectangle:
    """Axis-aligned rectangle."""

    def __init__(self, x: float, X: float, y: float, Y: float):
        """
        Initialize rectangle.

        Args:
            x: Left edge
            X: Right edge
            y: Top edge
            Y: Bottom edge
        """
        self.x = x
        self.X = X
        self.y = y
        self.Y = Y

    @staticmethod
    def from_element(element: ShapeElement, padding: float = 0.0) -> Rectangle:
        """Bounding box of an element, padded on the right and bottom."""
        pos = element.position
        size = element.size
        return Rectangle(
            pos.x,
            pos.x + size.width + padding,
            pos.y,
            pos.y + size.height + padding
        )

    def cx(self) -> float:
        """Get x center."""
        return (self.x + self.X) / 2.0

    def cy(self) -> float:
        """Get y center."""
        return (self.y + self.Y) / 2.0

    def width(self) -> float:
        return self.X - self.x

    def height(self) -> float:
        return self.Y - self.y

    def intersects(self, r: Rectangle) -> bool:
        """True if the interiors intersect on both axes; touching edges do not count."""
        return (
            self.X > r.x and r.X > self.x and
            self.Y > r.y and r.Y > self.y
        )

    def __repr__(self) -> str:
        return f"Rectangle(x={self.x!r}, X={self.X!r}, y={self.y!r}, Y={self.Y!r})"


def check_overlap(
    a: Optional[ShapeElement],
    b: Optional[ShapeElement],
    padding: float = 0.0
) -> bool:
    """
    Test whether two elements overlap.

    Args:
        a, b: Elements to test; None is allowed
        padding: Gap added to the trailing edges of both boxes

    Returns:
        False if either element is missing or is not a drawing element,
        otherwise whether the padded boxes intersect
    """
    if a is None or b is None:
        return False
    if a.element_type != ElementType.drawing or b.element_type != ElementType.drawing:
        return False
    return Rectangle.from_element(a, padding).intersects(Rectangle.from_element(b, padding))


def count_overlaps(elements: Sequence[Optional[ShapeElement]], padding: float = 0.0) -> int:
    """Number of overlapping pairs among elements."""
    count = 0
    n = len(elements)
    for i in range(n):
        for j in range(i + 1, n):
            if check_overlap(elements[i], elements[j], padding):
                count += 1
    return count
