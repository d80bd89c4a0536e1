"""
Hierarchical layout.

Layers drawing elements by depth inferred from relationships
(connector1 is the parent, connector2 the child).

Levels are assigned in a single pass over the relationships in input
order: a child gets its parent's level plus one only if the parent
already has a level when the relationship is visited. Children reached
through a parent that is levelled later keep their earlier level (or
none), and a child with several parents keeps the last assignment.
Unlevelled elements go to level 0.
"""

from __future__ import annotations

from sortedcontainers import SortedDict

from .config import LayoutConfig, LayoutResult
from .geom import CanvasSize
from .shapes import DrawingElement, RelationshipElement

LEVEL_SPACING = 150.0


def find_roots(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement]
) -> list[DrawingElement]:
    """
    Drawing elements that are never the child of a relationship.

    If every element has a parent (cyclic or fully connected graph) all
    elements are roots.
    """
    children = {id(r.connector2) for r in relationships if r.connector2 is not None}
    roots = [d for d in drawings if id(d) not in children]
    return roots if roots else list(drawings)


def assign_levels(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement]
) -> dict[int, int]:
    """
    Single-pass level assignment.

    Returns:
        Mapping from id(element) to level; may include relationship
        endpoints that are not in drawings
    """
    levels = {id(root): 0 for root in find_roots(drawings, relationships)}

    for r in relationships:
        parent = r.connector1
        child = r.connector2
        if parent is None or child is None:
            continue
        if id(parent) in levels:
            levels[id(child)] = levels[id(parent)] + 1

    return levels


def arrange_hierarchical(
    drawings: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    """
    Arrange drawing elements in horizontal layers.

    Each layer of k elements is spread across the available width with
    k + 1 equal gaps, box centres on the slots. Layer n sits at
    margin_top + n * LEVEL_SPACING.
    """
    if not drawings:
        return LayoutResult.nothing_to_arrange()

    levels = assign_levels(drawings, relationships)

    buckets: SortedDict = SortedDict()
    for d in drawings:
        buckets.setdefault(levels.get(id(d), 0), []).append(d)

    available_width = config.available_width(canvas)

    for level, members in buckets.items():
        spacing = available_width / (len(members) + 1)
        y = config.margin_top + level * LEVEL_SPACING
        for i, d in enumerate(members):
            x = config.margin_left + (i + 1) * spacing - d.size.width / 2
            d.set_position(x, y)

    return LayoutResult(
        success=True,
        elements_arranged=len(drawings),
        total_area=available_width * config.available_height(canvas)
    )
