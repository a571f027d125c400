"""Events panel: live log of run lifecycle events."""

from __future__ import annotations

from textual.widgets import DataTable

from humanizer.events.bus import Event
from humanizer.events.types import (
    RUN_COMPLETED,
    RUN_FAILED,
    RUN_STARTED,
    RUN_STATUS_CHANGED,
)

_TYPE_COLORS = {
    RUN_STARTED: "#818cf8",
    RUN_STATUS_CHANGED: "#a78bfa",
    RUN_COMPLETED: "#10b981",
    RUN_FAILED: "#f43f5e",
}


def describe_event(event: Event) -> str:
    data = event.data
    if event.event_type == RUN_STATUS_CHANGED:
        return f"{data.get('from', '?')} -> {data.get('to', '?')}"
    if event.event_type == RUN_STARTED:
        return f"{data.get('chars', 0)} chars"
    if event.event_type == RUN_COMPLETED:
        return (
            f"ai {data.get('ai_score_before', 0):g} -> "
            f"{data.get('ai_score_after', 0):g}"
        )
    if event.event_type == RUN_FAILED:
        return f"{data.get('step', '?')}: {data.get('error_type', 'Error')}"
    return ""


class EventPanel(DataTable):
    """Table of run events, newest last."""

    DEFAULT_CSS = """
    EventPanel {
        height: 1fr;
    }
    """

    def on_mount(self) -> None:
        self.add_columns("Time", "Run", "Type", "Detail")
        self.cursor_type = "row"

    def add_event(self, event: Event) -> None:
        color = _TYPE_COLORS.get(event.event_type, "")
        label = f"[{color}]{event.event_type}[/]" if color else event.event_type
        self.add_row(event.timestamp[11:19], event.run_id, label, describe_event(event))
