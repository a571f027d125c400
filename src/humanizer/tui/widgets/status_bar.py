"""Status bar widget for the bottom of the TUI."""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Status line showing run state, model and last run latency."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: $surface;
        color: $text-muted;
        padding: 0 1;
    }
    """

    state: reactive[str] = reactive("idle")
    model_name: reactive[str] = reactive("")
    last_run_seconds: reactive[float] = reactive(0.0)

    def render(self) -> str:
        parts: list[str] = [self.state]
        if self.model_name:
            parts.append(self.model_name)
        if self.last_run_seconds:
            parts.append(f"last run {self.last_run_seconds:.1f}s")
        return "[dim]" + " | ".join(parts) + "[/dim]"
