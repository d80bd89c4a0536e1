"""Tests for the layout engine."""

import logging

import pytest
from diaglayout import layout as layout_module
from diaglayout.config import LayoutConfig, LayoutResult, LayoutStrategy
from diaglayout.force import ITERATIONS
from diaglayout.geom import CanvasSize, Position
from diaglayout.layout import EventType, LayoutEngine
from diaglayout.shapes import DrawingElement, RelationshipElement


@pytest.fixture
def diagram():
    """Five 120x80 classes and four relationships, drawings first."""
    drawings = []
    for name in ["UserClass", "OrderClass", "ProductClass", "PaymentClass", "ShippingClass"]:
        d = DrawingElement(name, shape_type="class")
        d.set_size(120, 80)
        drawings.append(d)
    user, order, product, payment, shipping = drawings
    relationships = [
        RelationshipElement(user, order, label="places"),
        RelationshipElement(order, product, relationship_type="contains", label="contains"),
        RelationshipElement(order, payment, relationship_type="uses", label="pays with"),
        RelationshipElement(order, shipping, relationship_type="uses", label="ships via"),
    ]
    return drawings + relationships


class TestEventType:
    """Test EventType enum."""

    def test_event_values(self):
        assert EventType.start == 0
        assert EventType.tick == 1
        assert EventType.end == 2

    def test_string_access(self):
        assert EventType['tick'] == EventType.tick


class TestLayoutEngineAccessors:
    """Test get-or-set accessors."""

    def test_defaults(self):
        engine = LayoutEngine()
        assert engine.canvas_size() == CanvasSize(1920, 1080)
        assert engine.config() == LayoutConfig()
        assert engine.strategy() == LayoutStrategy.grid

    def test_constructor_canvas(self):
        engine = LayoutEngine(CanvasSize(1600, 900))
        assert engine.canvas_size() == CanvasSize(1600, 900)

    def test_canvas_size_from_pair(self):
        engine = LayoutEngine()
        assert engine.canvas_size([800, 600]) is engine
        assert engine.canvas_size() == CanvasSize(800, 600)

    def test_config_chaining(self):
        config = LayoutConfig(padding=5)
        engine = LayoutEngine().config(config)
        assert engine.config() == config
        assert engine.config() is not config

    def test_strategy_setter_leaves_caller_config_alone(self):
        config = LayoutConfig()
        engine = LayoutEngine().config(config)
        engine.strategy('hierarchical')
        assert config.strategy == LayoutStrategy.grid
        assert engine.strategy() == LayoutStrategy.hierarchical

    def test_strategy_by_name(self):
        engine = LayoutEngine().strategy('Circular')
        assert engine.strategy() == LayoutStrategy.circular
        assert engine.config().strategy == LayoutStrategy.circular


class TestArrange:
    """Test arrange method."""

    def test_grid_end_to_end(self, diagram):
        engine = LayoutEngine(CanvasSize(1600, 900))
        result = engine.arrange(diagram, LayoutConfig(strategy=LayoutStrategy.grid, padding=30))

        assert result.success
        assert result.error_message == ""
        assert result.elements_arranged == 5
        xs = [e.position.x for e in diagram[:5]]
        ys = [e.position.y for e in diagram[:5]]
        assert xs == [50, 200, 350, 500, 650]
        assert ys == [50] * 5
        assert engine.count_overlaps(diagram) == 0

    def test_relationships_untouched(self, diagram):
        engine = LayoutEngine()
        for strategy in LayoutStrategy:
            engine.arrange(diagram, LayoutConfig(strategy=strategy))
            for r in diagram[5:]:
                assert r.position == Position(0, 0)

    @pytest.mark.parametrize("strategy", list(LayoutStrategy))
    def test_nothing_to_arrange(self, strategy):
        a, b = DrawingElement("A"), DrawingElement("B")
        rels = [RelationshipElement(a, b), RelationshipElement()]
        result = LayoutEngine().arrange(rels, LayoutConfig(strategy=strategy))
        assert result.success
        assert result.elements_arranged == 0
        assert result.total_area == 0.0
        assert a.position == Position(0, 0)

    def test_empty_collection(self):
        result = LayoutEngine().arrange([])
        assert result.success
        assert result.elements_arranged == 0

    def test_config_is_stored(self, diagram):
        engine = LayoutEngine()
        config = LayoutConfig(strategy=LayoutStrategy.hierarchical)
        engine.arrange(diagram, config)
        assert engine.config() == config

    def test_caller_config_not_changed_after_arrange(self, diagram):
        engine = LayoutEngine()
        caller = LayoutConfig()
        engine.arrange(diagram, caller)
        engine.strategy('force')
        caller.padding = 0
        assert caller.strategy == LayoutStrategy.grid
        assert engine.config().padding == 20.0

    def test_reuses_last_config(self, diagram):
        engine = LayoutEngine(CanvasSize(1600, 900))
        engine.arrange(diagram, LayoutConfig(strategy=LayoutStrategy.hierarchical))
        for e in diagram[:5]:
            e.set_position(0, 0)

        result = engine.arrange(diagram)
        assert result.success
        assert diagram[1].position == Position(740, 200)

    def test_unknown_strategy_falls_back_to_grid(self, diagram, caplog):
        engine = LayoutEngine(CanvasSize(1600, 900))
        config = LayoutConfig(padding=30)
        config.strategy = 99
        with caplog.at_level(logging.WARNING, logger="diaglayout.layout"):
            result = engine.arrange(diagram, config)

        assert result.success
        assert [e.position.x for e in diagram[:5]] == [50, 200, 350, 500, 650]
        assert "Unknown layout strategy" in caplog.text

    def test_strategy_failure_is_reported(self, diagram, monkeypatch, caplog):
        def broken(*args):
            raise RuntimeError("canvas constraints unreachable")

        monkeypatch.setitem(layout_module.STRATEGIES, LayoutStrategy.grid, broken)
        with caplog.at_level(logging.ERROR, logger="diaglayout.layout"):
            result = LayoutEngine().arrange(diagram, LayoutConfig())

        assert isinstance(result, LayoutResult)
        assert result.success is False
        assert result.error_message == "canvas constraints unreachable"
        assert "grid layout failed" in caplog.text

    def test_force_within_canvas(self, diagram):
        engine = LayoutEngine(CanvasSize(1600, 900))
        result = engine.arrange(diagram, LayoutConfig(strategy=LayoutStrategy.force))

        assert result.success
        assert result.total_area == 1600 * 900
        for e in diagram[:5]:
            assert 50 <= e.position.x <= 1600 - 50 - 120
            assert 50 <= e.position.y <= 900 - 50 - 80

    def test_respect_connections_does_not_change_layout(self, diagram):
        engine = LayoutEngine()
        engine.arrange(diagram, LayoutConfig(strategy=LayoutStrategy.force))
        first = [tuple(e.position) for e in diagram[:5]]
        engine.arrange(
            diagram, LayoutConfig(strategy=LayoutStrategy.force, respect_connections=False)
        )
        assert [tuple(e.position) for e in diagram[:5]] == first


class TestOverlapQueries:
    """Test overlap queries use the current padding."""

    def test_padding_from_config(self):
        a, b = DrawingElement("A"), DrawingElement("B")
        b.set_position(110, 0)
        engine = LayoutEngine()
        assert engine.check_overlap(a, b)
        engine.config(LayoutConfig(padding=0))
        assert not engine.check_overlap(a, b)

    def test_count_overlaps(self, diagram):
        engine = LayoutEngine()
        # everything starts at the origin
        assert engine.count_overlaps(diagram) == 10


class TestEvents:
    """Test event system."""

    def test_force_events(self, diagram):
        events = []
        engine = LayoutEngine()
        for e in EventType:
            engine.on(e, events.append)
        engine.arrange(diagram, LayoutConfig(strategy=LayoutStrategy.force))

        types = [e['type'] for e in events]
        assert types == [EventType.start] + [EventType.tick] * ITERATIONS + [EventType.end]
        assert events[1]['iteration'] == 0
        assert events[-1]['result'].elements_arranged == 5

    def test_grid_has_no_ticks(self, diagram):
        events = []
        engine = LayoutEngine().on('start', events.append).on('end', events.append).on('tick', events.append)
        engine.arrange(diagram)
        assert [e['type'] for e in events] == [EventType.start, EventType.end]
        assert events[0]['strategy'] == LayoutStrategy.grid

    def test_no_listeners(self, diagram):
        result = LayoutEngine().arrange(diagram, LayoutConfig(strategy=LayoutStrategy.force))
        assert result.success

    def test_failing_start_listener_is_reported(self, diagram, caplog):
        def boom(event):
            raise RuntimeError("listener")

        engine = LayoutEngine().on('start', boom)
        with caplog.at_level(logging.ERROR, logger="diaglayout.layout"):
            result = engine.arrange(diagram)

        assert result.success is False
        assert result.error_message == "listener"
        assert diagram[0].position == Position(0, 0)

    def test_failing_end_listener_is_reported(self, diagram, caplog):
        def boom(event):
            raise RuntimeError("listener")

        engine = LayoutEngine().on(EventType.end, boom)
        with caplog.at_level(logging.ERROR, logger="diaglayout.layout"):
            result = engine.arrange(diagram)

        assert result.success is False
        assert result.error_message == "listener"
        assert result.elements_arranged == 5
        assert "end listener failed" in caplog.text
