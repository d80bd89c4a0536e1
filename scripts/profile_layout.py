"""
Profiling script for diaglayout strategy performance.

Profiles each layout strategy on randomly connected diagrams to identify
bottlenecks.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from diaglayout import (
    CanvasSize, DrawingElement, RelationshipElement,
    LayoutConfig, LayoutEngine, LayoutStrategy
)


def create_diagram(n_boxes, n_relationships):
    """Create n boxes and approximately n_relationships random connectors."""
    drawings = [DrawingElement(f"box{i}") for i in range(n_boxes)]

    relationships = []
    np.random.seed(42)
    for _ in range(n_relationships):
        source = np.random.randint(0, n_boxes)
        target = np.random.randint(0, n_boxes)
        if source != target:
            relationships.append(RelationshipElement(drawings[source], drawings[target]))

    return drawings + relationships


def profile_strategy(strategy, n_boxes, n_relationships, stats_limit=10):
    """
    Arrange a random diagram under cProfile.

    Returns:
        Tuple of (result, overlaps, elapsed seconds, profiler)
    """
    elements = create_diagram(n_boxes, n_relationships)
    engine = LayoutEngine(CanvasSize(4000, 3000))

    profiler = cProfile.Profile()
    start_time = time.perf_counter()
    profiler.enable()
    result = engine.arrange(elements, LayoutConfig(strategy=strategy))
    profiler.disable()
    elapsed = time.perf_counter() - start_time

    overlaps = engine.count_overlaps(elements)

    s = io.StringIO()
    pstats.Stats(profiler, stream=s).sort_stats(SortKey.TIME).print_stats(stats_limit)
    print(f"\n--- {strategy.name}: {n_boxes} boxes, {n_relationships} relationships ---")
    print(s.getvalue())

    return result, overlaps, elapsed, profiler


def main():
    """Profile every strategy and print a per-strategy summary."""
    sizes = [(20, 30), (200, 400)]

    rows = []
    for strategy in LayoutStrategy:
        for n_boxes, n_relationships in sizes:
            result, overlaps, elapsed, profiler = profile_strategy(strategy, n_boxes, n_relationships)
            profiler.dump_stats(f"profile_{strategy.name}_{n_boxes}.prof")
            rows.append((strategy.name, n_boxes, result, overlaps, elapsed))

    print(f"\n{'strategy':<14}{'boxes':>7}{'arranged':>10}{'overlaps':>10}{'area':>14}{'time (s)':>10}")
    for name, n_boxes, result, overlaps, elapsed in rows:
        print(
            f"{name:<14}{n_boxes:>7}{result.elements_arranged:>10}"
            f"{overlaps:>10}{result.total_area:>14.0f}{elapsed:>10.3f}"
        )


if __name__ == "__main__":
    main()
