"""TUI widget components."""

from humanizer.tui.widgets.comparison import AnalysisPanel
from humanizer.tui.widgets.event_panel import EventPanel
from humanizer.tui.widgets.score_gauge import ScoreGauge
from humanizer.tui.widgets.status_bar import StatusBar

__all__ = [
    "AnalysisPanel",
    "EventPanel",
    "ScoreGauge",
    "StatusBar",
]
