"""
Layout configuration and result types.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Union

from .geom import CanvasSize


class LayoutStrategy(IntEnum):
    """
    Placement algorithms:
    - grid: uniform cells in row-major order
    - hierarchical: layers by depth inferred from relationships
    - force: spring/repulsion relaxation
    - circular: evenly spaced on a circle
    """
    grid = 0
    hierarchical = 1
    force = 2
    circular = 3


class LayoutConfig:
    """
    Strategy selection and spacing parameters.

    Attributes:
        strategy: Placement algorithm
        padding: Minimum gap between element bounding boxes
        margin_top, margin_bottom, margin_left, margin_right: Canvas insets
        respect_connections: Stored for callers; no strategy branches on it
    """

    FIELDS = (
        'strategy', 'padding',
        'margin_top', 'margin_bottom', 'margin_left', 'margin_right',
        'respect_connections',
    )

    def __init__(
        self,
        strategy: Union[LayoutStrategy, int] = LayoutStrategy.grid,
        padding: float = 20.0,
        margin_top: float = 50.0,
        margin_bottom: float = 50.0,
        margin_left: float = 50.0,
        margin_right: float = 50.0,
        respect_connections: bool = True
    ):
        self.strategy = strategy
        self.padding = padding
        self.margin_top = margin_top
        self.margin_bottom = margin_bottom
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.respect_connections = respect_connections

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LayoutConfig:
        """
        Build a config from a plain mapping.

        Strategy may be given as a LayoutStrategy, its integer value or its
        name (case-insensitive).

        Raises:
            ValueError: on unknown keys
            KeyError: on unknown strategy names
        """
        unknown = set(d) - set(cls.FIELDS)
        if unknown:
            raise ValueError(f"unknown layout config keys: {sorted(unknown)}")

        kwargs = dict(d)
        strategy = kwargs.get('strategy')
        if isinstance(strategy, str):
            kwargs['strategy'] = LayoutStrategy[strategy.lower()]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def copy(self) -> LayoutConfig:
        return LayoutConfig(**self.to_dict())

    def available_width(self, canvas: CanvasSize) -> float:
        """Canvas width minus left and right margins."""
        return canvas.width - self.margin_left - self.margin_right

    def available_height(self, canvas: CanvasSize) -> float:
        """Canvas height minus top and bottom margins."""
        return canvas.height - self.margin_top - self.margin_bottom

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"LayoutConfig({args})"


class LayoutResult:
    """
    Outcome of a single arrange call.

    Attributes:
        success: False only when a strategy failed
        error_message: Failure description, empty on success
        elements_arranged: Number of drawing elements positioned
        total_area: Area the strategy laid out into (strategy specific)
    """

    def __init__(
        self,
        success: bool = False,
        error_message: str = "",
        elements_arranged: int = 0,
        total_area: float = 0.0
    ):
        self.success = success
        self.error_message = error_message
        self.elements_arranged = elements_arranged
        self.total_area = total_area

    @classmethod
    def nothing_to_arrange(cls) -> LayoutResult:
        return cls(success=True, elements_arranged=0, total_area=0.0)

    def __repr__(self) -> str:
        return (
            f"LayoutResult(success={self.success!r}, error_message={self.error_message!r}, "
            f"elements_arranged={self.elements_arranged!r}, total_area={self.total_area!r})"
        )
