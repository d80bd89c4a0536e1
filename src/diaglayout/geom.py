"""
Geometry primitives for diagram layout.

Plain mutable value types: positions are top-left corners of boxes,
sizes are box extents, and the canvas size bounds every strategy.
"""

from __future__ import annotations

from typing import Iterator


class Position:
    """2D point (top-left corner of a box)."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Position(x={self.x!r}, y={self.y!r})"


class Size:
    """
    Box extent.

    Negative values are stored as given; strategies tolerate them but the
    resulting coordinates are meaningless.
    """

    def __init__(self, width: float = 0.0, height: float = 0.0):
        self.width = float(width)
        self.height = float(height)

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Size(width={self.width!r}, height={self.height!r})"


class CanvasSize:
    """Canvas dimensions the strategies target."""

    def __init__(self, width: float = 1920.0, height: float = 1080.0):
        self.width = float(width)
        self.height = float(height)

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height

    def area(self) -> float:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanvasSize):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"CanvasSize(width={self.width!r}, height={self.height!r})"
