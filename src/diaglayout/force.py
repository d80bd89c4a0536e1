"""
Force-directed layout.

Relaxes drawing element positions with inverse-square repulsion between
every pair of elements and linear springs along relationships. The
simulation is deterministic: elements are seeded on a circle around the
canvas centre in input order, and exactly ITERATIONS rounds are run with
no convergence test. Positions are clamped inside the margins after
every round.

Forces act on the top-left corners held in a 2 x n coordinate array.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

import numpy as np

from .config import LayoutConfig, LayoutResult
from .geom import CanvasSize
from .shapes import DrawingElement, RelationshipElement

logger = logging.getLogger(__name__)

ITERATIONS = 50
SPRING_CONSTANT = 100.0
REPULSION = 5000.0
DAMPING = 0.8
TARGET_LENGTH = 200.0
SEED_RADIUS = 200.0
MIN_DISTANCE = 1.0


def seed_positions(n: int, canvas: CanvasSize) -> np.ndarray:
    """Place n points evenly on a circle of SEED_RADIUS around the canvas centre."""
    angles = 2.0 * math.pi * np.arange(n) / n
    return np.vstack([
        canvas.width / 2 + SEED_RADIUS * np.cos(angles),
        canvas.height / 2 + SEED_RADIUS * np.sin(angles)
    ])


def edge_indices(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement]
) -> np.ndarray:
    """
    Index pairs (2 x m) of relationships whose endpoints are both drawn.

    Relationships with a missing endpoint, or an endpoint outside
    drawings, are skipped.
    """
    # An element listed twice resolves to its first occurrence
    index = {}
    for i, d in enumerate(drawings):
        index.setdefault(id(d), i)
    edges = []
    for r in relationships:
        c1 = r.connector1
        c2 = r.connector2
        if c1 is None or c2 is None:
            continue
        i = index.get(id(c1))
        j = index.get(id(c2))
        if i is None or j is None:
            continue
        edges.append((i, j))
    if not edges:
        return np.zeros((2, 0), dtype=int)
    return np.array(edges, dtype=int).T


def compute_forces(x: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """
    Net force on each point.

    Args:
        x: Coordinates (2 x n)
        edges: Index pairs (2 x m)

    Returns:
        Forces (2 x n)
    """
    # Repulsion: for every pair, push apart along the line between them
    dx = x[:, :, np.newaxis] - x[:, np.newaxis, :]
    dist = np.sqrt(dx[0] ** 2 + dx[1] ** 2)
    dist = np.maximum(dist, MIN_DISTANCE)
    magnitude = REPULSION / (dist * dist)
    forces = (magnitude * dx / dist).sum(axis=2)

    if edges.shape[1] > 0:
        i, j = edges
        d = x[:, j] - x[:, i]
        length = np.sqrt(d[0] ** 2 + d[1] ** 2)
        length = np.maximum(length, MIN_DISTANCE)
        spring = SPRING_CONSTANT * (length - TARGET_LENGTH) / length
        f = spring * d / length
        np.add.at(forces, (slice(None), i), f)
        np.subtract.at(forces, (slice(None), j), f)

    return forces


def _update_positions(drawings: list[DrawingElement], x: np.ndarray) -> None:
    """Copy coordinates back onto the elements."""
    for i, d in enumerate(drawings):
        d.set_position(float(x[0, i]), float(x[1, i]))


def arrange_force(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig,
    on_tick: Optional[Callable[[int], None]] = None
) -> LayoutResult:
    """
    Arrange drawing elements with a force-directed simulation.

    Args:
        drawings: Elements to position
        relationships: Springs; endpoints outside drawings are ignored
        canvas: Canvas dimensions
        config: Margins used as the clamping bounds
        on_tick: Called with the iteration index after every round

    Returns:
        Layout result; total_area is the whole canvas
    """
    if not drawings:
        return LayoutResult.nothing_to_arrange()

    n = len(drawings)
    x = seed_positions(n, canvas)
    edges = edge_indices(drawings, relationships)

    widths = np.array([d.size.width for d in drawings], dtype=float)
    heights = np.array([d.size.height for d in drawings], dtype=float)
    upper = np.vstack([
        canvas.width - config.margin_right - widths,
        canvas.height - config.margin_bottom - heights
    ])
    lower = np.array([[config.margin_left], [config.margin_top]])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Force layout: %d elements, %d springs, %d iterations",
            n, edges.shape[1], ITERATIONS
        )

    for iteration in range(ITERATIONS):
        forces = compute_forces(x, edges)
        x = x + forces * DAMPING
        x = np.maximum(lower, np.minimum(x, upper))
        _update_positions(drawings, x)
        if on_tick is not None:
            on_tick(iteration)

    return LayoutResult(
        success=True,
        elements_arranged=n,
        total_area=canvas.area()
    )
