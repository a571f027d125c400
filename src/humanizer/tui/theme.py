"""Humanizer Dark theme: indigo/violet palette for the TUI."""

from __future__ import annotations

from textual.theme import Theme

HUMANIZER_DARK = Theme(
    name="humanizer-dark",
    primary="#818cf8",
    secondary="#a78bfa",
    accent="#6366f1",
    warning="#fbbf24",
    error="#f43f5e",
    success="#10b981",
    foreground="#e2e8f0",
    background="#020617",
    surface="#0f172a",
    panel="#1e293b",
    dark=True,
)

# Semantic color constants for Rich markup in widgets.
ROSE = "#f43f5e"
EMERALD = "#10b981"
INDIGO = "#818cf8"
SLATE = "#334155"
