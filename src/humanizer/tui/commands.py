"""Command palette provider for the Humanizer TUI."""

from __future__ import annotations

from functools import partial

from textual.command import Hit, Hits, Provider

_COMMANDS = [
    ("Humanize text", "humanize", "Score, rewrite and re-score the input"),
    ("Copy result", "copy_result", "Copy the rewritten text to the clipboard"),
    ("Clear input", "clear_input", "Clear the input and hints"),
    ("Switch to Humanize tab", "tab_main", "Focus the Humanize tab"),
    ("Switch to Events tab", "tab_events", "Focus the Events tab"),
    ("Quit", "quit", "Exit Humanizer"),
]


class HumanizerCommands(Provider):
    """Custom commands for the Ctrl+P command palette."""

    async def search(self, query: str) -> Hits:
        matcher = self.matcher(query)
        for label, action, help_text in _COMMANDS:
            score = matcher.match(label)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(label),
                    command=partial(
                        self.app.run_action, f"palette_command('{action}')",
                    ),
                    help=help_text,
                )
