"""Tests for the event bus."""

from __future__ import annotations

import logging

from humanizer.events.bus import Event, EventBus, EventLogger
from humanizer.events.types import RUN_COMPLETED, RUN_FAILED, RUN_STARTED


class TestEvent:
    def test_timestamp_filled(self):
        event = Event(event_type=RUN_STARTED, run_id="abc")
        assert event.timestamp
        assert event.data == {}

    def test_explicit_timestamp_kept(self):
        event = Event(event_type=RUN_STARTED, run_id="abc", timestamp="2026-01-01T00:00:00")
        assert event.timestamp == "2026-01-01T00:00:00"


class TestEventBus:
    def test_subscribe_and_emit(self):
        bus = EventBus()
        received = []
        bus.subscribe(RUN_STARTED, received.append)

        bus.emit(Event(event_type=RUN_STARTED, run_id="r1"))
        bus.emit(Event(event_type=RUN_COMPLETED, run_id="r1"))

        assert [e.event_type for e in received] == [RUN_STARTED]

    def test_subscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)

        bus.emit(Event(event_type=RUN_STARTED, run_id="r1"))
        bus.emit(Event(event_type=RUN_FAILED, run_id="r1"))

        assert len(received) == 2

    def test_unsubscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)
        bus.unsubscribe_all(received.append)
        bus.emit(Event(event_type=RUN_STARTED, run_id="r1"))
        assert received == []

    def test_failing_handler_does_not_break_emit(self):
        bus = EventBus()
        received = []

        def broken(event: Event) -> None:
            raise RuntimeError("boom")

        bus.subscribe_all(broken)
        bus.subscribe_all(received.append)
        bus.emit(Event(event_type=RUN_STARTED, run_id="r1"))

        assert len(received) == 1

    def test_history_limit(self):
        bus = EventBus(max_history=3)
        for i in range(5):
            bus.emit(Event(event_type=RUN_STARTED, run_id=str(i)))
        assert [e.run_id for e in bus.recent_events()] == ["2", "3", "4"]

    def test_recent_events_limit(self):
        bus = EventBus()
        for i in range(5):
            bus.emit(Event(event_type=RUN_STARTED, run_id=str(i)))
        assert [e.run_id for e in bus.recent_events(limit=2)] == ["3", "4"]

    def test_catch_all_handlers_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(RUN_STARTED, lambda e: order.append("typed"))
        bus.subscribe_all(lambda e: order.append("all"))

        bus.emit(Event(event_type=RUN_STARTED, run_id="r1"))

        assert order == ["all", "typed"]


class TestEventLogger:
    def test_logs_every_event(self, caplog):
        bus = EventBus()
        EventLogger().attach(bus)

        with caplog.at_level(logging.INFO, logger="humanizer.events"):
            bus.emit(Event(event_type=RUN_FAILED, run_id="r9", data={"step": "humanizing"}))

        assert "event=run_failed" in caplog.text
        assert "run=r9" in caplog.text
        assert "humanizing" in caplog.text
