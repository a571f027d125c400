"""Score gauge: a score rendered as a filled share of a fixed-size ring."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rich.markup import escape
from textual.reactive import reactive
from textual.widgets import Static

from humanizer.tui.theme import SLATE

GAUGE_RADIUS = 36
GAUGE_CELLS = 20


def gauge_percent(score: float) -> int:
    """Round a score half up and clamp it to 0..100."""
    return max(0, min(100, math.floor(score + 0.5)))


@dataclass(frozen=True)
class GaugeGeometry:
    percent: int
    circumference: float
    dash_offset: float
    sweep_degrees: float

    @property
    def filled_cells(self) -> int:
        return round(self.sweep_degrees / 360.0 * GAUGE_CELLS)


def gauge_geometry(score: float, radius: float = GAUGE_RADIUS) -> GaugeGeometry:
    """Map a score linearly onto the arc of a ring of the given radius."""
    percent = gauge_percent(score)
    circumference = 2 * math.pi * radius
    return GaugeGeometry(
        percent=percent,
        circumference=circumference,
        dash_offset=circumference - (percent / 100) * circumference,
        sweep_degrees=percent * 3.6,
    )


class ScoreGauge(Static):
    """One labelled score, drawn as a bar of ring segments."""

    DEFAULT_CSS = """
    ScoreGauge {
        width: 26;
        height: 4;
        padding: 0 1;
        content-align: center middle;
        border: round $panel;
    }
    """

    score: reactive[float] = reactive(0.0)

    def __init__(self, label: str, color: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._label = label
        self._color = color

    def render(self) -> str:
        geometry = gauge_geometry(self.score)
        filled = geometry.filled_cells
        bar = (
            f"[{self._color}]" + "█" * filled + "[/]"
            + f"[{SLATE}]" + "░" * (GAUGE_CELLS - filled) + "[/]"
        )
        return f"{bar}\n[bold]{geometry.percent}%[/bold] [dim]{escape(self._label)}[/dim]"
