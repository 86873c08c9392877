"""Tests for the event bus and the stock listeners."""

import logging

import pytest

from tailsmith import Generator
from tailsmith.events import (
    ClassGenerated,
    ClassRejected,
    EventBus,
    GenerationCompleted,
    GenerationEvent,
    GenerationStarted,
    GenerationStats,
    logging_listener,
    stats_listener,
)


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------


class TestEventBus:
    def test_subscribe_by_type(self):
        bus = EventBus()
        seen = []
        bus.subscribe(GenerationStarted, seen.append)
        bus.emit(GenerationStarted(class_count=3))
        bus.emit(GenerationCompleted(class_count=3, rule_count=3, failure_count=0, elapsed=0.0))
        assert seen == [GenerationStarted(class_count=3)]

    def test_on_all_runs_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(GenerationStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))
        bus.emit(GenerationStarted(class_count=0))
        assert order == ["global", "typed"]

    def test_has_listeners(self):
        bus = EventBus()
        assert not bus.has_listeners
        bus.on_all(lambda e: None)
        assert bus.has_listeners

    def test_base_class_subscription(self):
        bus = EventBus()
        seen = []
        bus.subscribe(GenerationEvent, seen.append)
        bus.emit(GenerationStarted(class_count=1))
        bus.emit(ClassRejected(class_name="x", kind="UnknownUtility", reason="r"))
        bus.emit("not an event")
        assert [type(e) for e in seen] == [GenerationStarted, ClassRejected]

    def test_specific_before_base(self):
        bus = EventBus()
        order = []
        bus.subscribe(GenerationEvent, lambda e: order.append("base"))
        bus.subscribe(GenerationStarted, lambda e: order.append("specific"))
        assert bus.emit(GenerationStarted(class_count=0)) == 2
        assert order == ["specific", "base"]

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        bus.subscribe(GenerationStarted, seen.append)
        assert bus.unsubscribe(GenerationStarted, seen.append)
        assert not bus.unsubscribe(GenerationStarted, seen.append)
        assert bus.emit(GenerationStarted(class_count=0)) == 0
        assert seen == []
        assert not bus.has_listeners

    def test_subscribing_during_dispatch(self):
        bus = EventBus()
        late = []

        def register_late(event):
            bus.subscribe(GenerationStarted, late.append)

        bus.subscribe(GenerationStarted, register_late)
        bus.emit(GenerationStarted(class_count=0))
        assert late == []

    def test_listener_errors_propagate(self):
        bus = EventBus()

        def boom(event):
            raise RuntimeError("listener failed")

        bus.on_all(boom)
        with pytest.raises(RuntimeError):
            bus.emit(GenerationStarted(class_count=0))


# ---------------------------------------------------------------------------
# Event sequence from a generation call
# ---------------------------------------------------------------------------


class TestGenerationEvents:
    def test_sequence(self):
        bus = EventBus()
        events = []
        bus.on_all(events.append)
        Generator(event_bus=bus).generate(["p-4", "foo", "sm:p-4", "p-4"])

        assert [type(e) for e in events] == [
            GenerationStarted,
            ClassGenerated,
            ClassRejected,
            ClassGenerated,
            GenerationCompleted,
        ]
        assert events[0].class_count == 3
        assert events[1] == ClassGenerated(
            class_name="p-4", selector=".p-4", media_query=None, specificity=10
        )
        assert events[2].kind == "UnknownUtility"
        assert events[3].media_query == "@media (min-width: 640px)"

        completed = events[-1]
        assert completed.class_count == 3
        assert completed.rule_count == 2
        assert completed.failure_count == 1
        assert completed.elapsed >= 0


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------


class TestLoggingListener:
    def test_logs_lifecycle(self, caplog):
        bus = EventBus()
        bus.on_all(logging_listener())
        with caplog.at_level(logging.DEBUG, logger="tailsmith"):
            Generator(event_bus=bus).generate(["p-4", "foo"])

        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Generation started: classes=2"
        assert any(
            m.startswith("Class generated: class=p-4 selector=.p-4 media=-") for m in messages
        )
        assert any(m.startswith("Class rejected: class=foo kind=UnknownUtility") for m in messages)
        assert messages[-1].startswith(
            "Generation completed: classes=2 rules=1 failures=1 elapsed="
        )

    def test_levels(self, caplog):
        listener = logging_listener()
        with caplog.at_level(logging.DEBUG, logger="tailsmith"):
            listener(ClassRejected(class_name="x", kind="UnknownUtility", reason="nope"))
            listener(ClassGenerated(class_name="p-4", selector=".p-4", media_query=None,
                                    specificity=10))
        assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.DEBUG]

    def test_custom_logger(self, caplog):
        logger = logging.getLogger("myapp.css")
        listener = logging_listener(logger)
        with caplog.at_level(logging.INFO, logger="myapp.css"):
            listener(GenerationStarted(class_count=1))
        assert caplog.records[0].name == "myapp.css"

    def test_ignores_unknown_events(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tailsmith"):
            logging_listener()(object())
        assert caplog.records == []


class TestStatsListener:
    def test_accumulates_across_runs(self):
        stats = GenerationStats()
        bus = EventBus()
        bus.on_all(stats_listener(stats))
        gen = Generator(event_bus=bus)
        gen.generate(["p-4", "foo", "bg-[#0af"])
        gen.generate(["m-2", "bar"])

        assert stats.runs == 2
        assert stats.generated == 2
        assert stats.rejected == 3
        assert stats.rejections_by_kind == {
            "UnknownUtility": 2,
            "MalformedArbitraryValue": 1,
        }
