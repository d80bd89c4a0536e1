"""
Layout engine.

The LayoutEngine class holds a canvas size and the last layout
configuration used, and provides:
- a single arrange() entry point dispatching to one of four strategies
- overlap queries over the arranged elements
- an event system (start/tick/end events)

Only the position of drawing elements in the caller's collection is
written; elements are never created or removed.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Optional, Sequence, TypedDict, Union

from .circular import arrange_circular
from .config import LayoutConfig, LayoutResult, LayoutStrategy
from .force import arrange_force
from .geom import CanvasSize
from .grid import arrange_grid
from .hierarchy import arrange_hierarchical
from .rectangle import check_overlap, count_overlaps
from .shapes import ShapeElement, drawing_elements, relationship_elements

logger = logging.getLogger(__name__)


class EventType(IntEnum):
    """
    The arrange call fires three events:
    - start: a strategy is about to run
    - tick: fired once per force-directed iteration, listen to this to animate
    - end: the strategy finished, the event carries the result
    """
    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event dictionary passed to event listeners."""
    type: EventType
    strategy: LayoutStrategy
    iteration: int
    result: LayoutResult


STRATEGIES = {
    LayoutStrategy.grid: arrange_grid,
    LayoutStrategy.hierarchical: arrange_hierarchical,
    LayoutStrategy.circular: arrange_circular,
}


class LayoutEngine:
    """
    Computes 2D positions for drawing elements.

    Accessors follow a get-or-set style: called without an argument they
    return the current value, with an argument they set it and return
    self for chaining.

    One engine instance should be driven by a single thread at a time.
    """

    def __init__(self, canvas_size: Optional[CanvasSize] = None):
        self._canvasSize: CanvasSize = canvas_size if canvas_size is not None else CanvasSize()
        self._config: LayoutConfig = LayoutConfig()
        self.event: Optional[dict] = None

    def on(self, e: Union[EventType, str], listener: Callable[[Event], None]) -> LayoutEngine:
        """
        Subscribe a listener to an event.

        Args:
            e: Event type (EventType enum or string name)
            listener: Function to call when event fires

        Returns:
            self for method chaining
        """
        if self.event is None:
            self.event = {}

        if isinstance(e, str):
            e = EventType[e]
        self.event[e] = listener
        return self

    def trigger(self, e: Event) -> None:
        """Call the listener registered for the event's type, if any."""
        if self.event and e['type'] in self.event:
            self.event[e['type']](e)

    def canvas_size(
        self,
        v: Optional[Union[CanvasSize, Sequence[float]]] = None
    ) -> Union[CanvasSize, LayoutEngine]:
        """
        Get or set canvas size.

        Args:
            v: CanvasSize or (width, height) pair

        Returns:
            Current size if v is None, otherwise self for chaining
        """
        if v is None:
            return self._canvasSize

        if isinstance(v, CanvasSize):
            self._canvasSize = v
        else:
            width, height = v
            self._canvasSize = CanvasSize(width, height)
        return self

    def config(self, v: Optional[LayoutConfig] = None) -> Union[LayoutConfig, LayoutEngine]:
        """
        Get or set the layout configuration used when arrange() is called
        without one. A copy is stored, so the caller's object is never
        changed by later calls.
        """
        if v is None:
            return self._config

        self._config = v.copy()
        return self

    def strategy(
        self,
        v: Optional[Union[LayoutStrategy, str]] = None
    ) -> Union[LayoutStrategy, LayoutEngine]:
        """Get or set the strategy of the current configuration."""
        if v is None:
            return self._config.strategy

        if isinstance(v, str):
            v = LayoutStrategy[v.lower()]
        self._config.strategy = v
        return self

    def arrange(
        self,
        elements: Sequence[Optional[ShapeElement]],
        config: Optional[LayoutConfig] = None
    ) -> LayoutResult:
        """
        Position the drawing elements of a mixed collection.

        Args:
            elements: Drawing and relationship elements; drawing element
                positions are updated in place
            config: Configuration to use and store; the stored one is
                reused when omitted

        Returns:
            Layout result. Never raises: a failing strategy or event
            listener is reported with success False and the error message.
        """
        if config is not None:
            self._config = config.copy()
        config = self._config

        drawings = drawing_elements(elements)
        relationships = relationship_elements(elements)

        try:
            strategy = LayoutStrategy(config.strategy)
        except (ValueError, TypeError):
            logger.warning("Unknown layout strategy %r, using grid", config.strategy)
            strategy = LayoutStrategy.grid

        logger.debug(
            "Arranging %d drawing elements (%d relationships) with %s strategy on %r",
            len(drawings), len(relationships), strategy.name, self._canvasSize
        )

        try:
            self.trigger({'type': EventType.start, 'strategy': strategy})
            if strategy == LayoutStrategy.force:
                result = arrange_force(
                    drawings, relationships, self._canvasSize, config,
                    on_tick=self._tick
                )
            else:
                result = STRATEGIES[strategy](
                    drawings, relationships, self._canvasSize, config
                )
        except Exception as exc:
            logger.exception("%s layout failed", strategy.name)
            result = LayoutResult(success=False, error_message=str(exc) or type(exc).__name__)

        try:
            self.trigger({'type': EventType.end, 'strategy': strategy, 'result': result})
        except Exception as exc:
            logger.exception("end listener failed after %s layout", strategy.name)
            result = LayoutResult(
                success=False,
                error_message=str(exc) or type(exc).__name__,
                elements_arranged=result.elements_arranged,
                total_area=result.total_area
            )
        return result

    def _tick(self, iteration: int) -> None:
        self.trigger({
            'type': EventType.tick,
            'strategy': LayoutStrategy.force,
            'iteration': iteration
        })

    def check_overlap(self, a: Optional[ShapeElement], b: Optional[ShapeElement]) -> bool:
        """Whether two elements overlap, using the current padding."""
        return check_overlap(a, b, self._config.padding)

    def count_overlaps(self, elements: Sequence[Optional[ShapeElement]]) -> int:
        """Number of overlapping element pairs, using the current padding."""
        return count_overlaps(elements, self._config.padding)
