"""Before/after analysis panels."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from humanizer.state.run_state import AnalysisResult
from humanizer.tui.widgets.score_gauge import ScoreGauge


def format_reasons(reasons: tuple[str, ...]) -> str:
    if not reasons:
        return "[dim]-[/dim]"
    return "\n".join(f"• {escape(reason)}" for reason in reasons)


class AnalysisPanel(Vertical):
    """Two gauges (AI and human score), readability and reasons."""

    DEFAULT_CSS = """
    AnalysisPanel {
        width: 1fr;
        height: auto;
        border: round $panel;
        padding: 0 1;
    }
    AnalysisPanel .panel-title {
        text-style: bold;
        color: $text-muted;
    }
    AnalysisPanel Horizontal {
        height: auto;
    }
    AnalysisPanel .reasons {
        height: auto;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        title: str,
        *,
        ai_label: str,
        human_label: str,
        readability_label: str,
        ai_color: str,
        human_color: str,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._ai_label = ai_label
        self._human_label = human_label
        self._readability_label = readability_label
        self._ai_color = ai_color
        self._human_color = human_color

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="panel-title")
        with Horizontal():
            yield ScoreGauge(self._ai_label, self._ai_color, classes="ai-gauge")
            yield ScoreGauge(self._human_label, self._human_color, classes="human-gauge")
        yield Static("", classes="readability")
        yield Static("", classes="reasons")

    def show(self, analysis: AnalysisResult) -> None:
        self.query_one(".ai-gauge", ScoreGauge).score = analysis.ai_score
        self.query_one(".human-gauge", ScoreGauge).score = analysis.human_score
        readability = escape(analysis.readability) or "-"
        self.query_one(".readability", Static).update(
            f"[bold]{escape(self._readability_label)}:[/bold] {readability}"
        )
        self.query_one(".reasons", Static).update(format_reasons(analysis.reasons))
