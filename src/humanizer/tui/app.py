"""Humanizer TUI.

Single-screen interface over the run orchestrator:

  +----------------------------------------+----------------+
  | text area                              | audience       |
  |                                        | tone           |
  |                        120 chars | 20  | [ Humanize ]   |
  |                                        | error banner   |
  +----------------------------------------+----------------+
  | before: [AI gauge] [human gauge]  | after: [..] [..]    |
  | final text                               [ Copy ]       |
  +---------------------------------------------------------+
  | state | model | last run                                |
  +---------------------------------------------------------+

The orchestrator owns all run state; the app only subscribes to its
events and re-renders from ``orchestrator.state``.
"""

from __future__ import annotations

import logging
import time

from rich.markup import escape
from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Static,
    TabbedContent,
    TabPane,
    TextArea,
)

from humanizer.engine.orchestrator import Orchestrator
from humanizer.events.bus import Event
from humanizer.exceptions import RunInProgressError
from humanizer.messages import DEFAULT_LOCALE, message
from humanizer.models.base import ModelProvider
from humanizer.state.run_state import Options, RunStatus
from humanizer.tui.commands import HumanizerCommands
from humanizer.tui.theme import EMERALD, HUMANIZER_DARK, INDIGO, ROSE, SLATE
from humanizer.tui.widgets import AnalysisPanel, EventPanel, StatusBar
from humanizer.utils.text import char_count, word_count

logger = logging.getLogger(__name__)


class HumanizerApp(App):
    """Humanizer TUI: input, settings, comparison results."""

    TITLE = "Humanizer"
    COMMANDS = {HumanizerCommands}

    CSS = """
    #input-row {
        height: auto;
    }
    #input-col {
        width: 2fr;
        height: auto;
    }
    #input-text {
        height: 16;
    }
    #counts {
        color: $text-muted;
        padding: 0 1;
    }
    #settings {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border: round $panel;
    }
    #submit {
        width: 100%;
        margin-top: 1;
    }
    #error-banner {
        display: none;
        margin-top: 1;
        padding: 0 1;
        color: $error;
        border: round $error;
    }
    #results {
        display: none;
        height: auto;
        margin-top: 1;
    }
    #panels {
        height: auto;
    }
    #final-header {
        height: auto;
        margin-top: 1;
    }
    #final-title {
        width: 1fr;
        text-style: bold;
    }
    #final-text {
        height: auto;
        padding: 1 2;
        border: round $primary;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "humanize", "Humanize", show=True),
        Binding("ctrl+y", "copy_result", "Copy", show=True),
        Binding("ctrl+1", "tab_main", "Humanize"),
        Binding("ctrl+2", "tab_events", "Events"),
    ]

    def __init__(
        self,
        orchestrator: Orchestrator,
        *,
        provider: ModelProvider | None = None,
        model_name: str = "",
        locale: str = DEFAULT_LOCALE,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._orchestrator = orchestrator
        self._provider = provider
        self._model_name = model_name or (provider.name if provider else "")
        self._locale = locale
        self._run_started_at = 0.0

    def _msg(self, key: str, **values: object) -> str:
        return message(key, self._locale, **values)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with TabbedContent(id="tabs"):
            with TabPane("Humanize", id="tab-main"):
                with VerticalScroll():
                    with Horizontal(id="input-row"):
                        with Vertical(id="input-col"):
                            yield TextArea(id="input-text")
                            yield Static(self._counts_label(""), id="counts")
                        with Vertical(id="settings"):
                            yield Label(self._msg("audience"))
                            yield Input(
                                placeholder=self._msg("audience_placeholder"),
                                id="audience",
                            )
                            yield Label(self._msg("tone"))
                            yield Input(
                                placeholder=self._msg("tone_placeholder"),
                                id="tone",
                            )
                            yield Button(
                                self._msg("start"),
                                id="submit",
                                variant="primary",
                                disabled=True,
                            )
                            yield Static("", id="error-banner")
                    with Vertical(id="results"):
                        with Horizontal(id="panels"):
                            yield AnalysisPanel(
                                self._msg("before"),
                                ai_label=self._msg("ai_score"),
                                human_label=self._msg("human_score"),
                                readability_label=self._msg("readability"),
                                ai_color=ROSE,
                                human_color=SLATE,
                                id="before-panel",
                            )
                            yield AnalysisPanel(
                                self._msg("after"),
                                ai_label=self._msg("ai_score"),
                                human_label=self._msg("human_score"),
                                readability_label=self._msg("readability"),
                                ai_color=EMERALD,
                                human_color=INDIGO,
                                id="after-panel",
                            )
                        with Horizontal(id="final-header"):
                            yield Static(self._msg("final_text"), id="final-title")
                            yield Button(self._msg("copy"), id="copy")
                        yield Static("", id="final-text")
            with TabPane("Events", id="tab-events"):
                yield EventPanel(id="events-panel")
        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(HUMANIZER_DARK)
        self.theme = "humanizer-dark"
        self._orchestrator.events.subscribe_all(self._on_run_event)
        status = self.query_one("#status-bar", StatusBar)
        status.model_name = self._model_name
        self._render_state()
        self.query_one("#input-text", TextArea).focus()

    async def on_unmount(self) -> None:
        self._orchestrator.events.unsubscribe_all(self._on_run_event)
        if self._provider is not None:
            await self._provider.close()

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def _counts_label(self, text: str) -> str:
        return self._msg("counts", chars=char_count(text), words=word_count(text))

    @on(TextArea.Changed, "#input-text")
    def _on_text_changed(self, event: TextArea.Changed) -> None:
        text = event.text_area.text
        self.query_one("#counts", Static).update(self._counts_label(text))
        self._render_state()

    @on(Button.Pressed, "#submit")
    def _on_submit_pressed(self) -> None:
        self.action_humanize()

    @on(Button.Pressed, "#copy")
    def _on_copy_pressed(self) -> None:
        self.action_copy_result()

    def action_humanize(self) -> None:
        text = self.query_one("#input-text", TextArea).text
        if not text.strip() or self._orchestrator.state.busy:
            return
        options = Options(
            audience=self.query_one("#audience", Input).value,
            tone=self.query_one("#tone", Input).value,
        )
        self._run(text, options)

    @work(exclusive=True)
    async def _run(self, text: str, options: Options) -> None:
        self._run_started_at = time.monotonic()
        try:
            await self._orchestrator.submit(text, options)
        except RunInProgressError as e:
            logger.warning("Submit rejected: %s", e)
            self.notify(str(e), severity="warning", timeout=3)
            return
        status = self.query_one("#status-bar", StatusBar)
        status.last_run_seconds = time.monotonic() - self._run_started_at

    def action_copy_result(self) -> None:
        result = self._orchestrator.state.result
        if result is None:
            return
        self.copy_to_clipboard(result.transformed_text)
        # The terminal gives no confirmation; report success regardless.
        self.notify(self._msg("copied"), timeout=3)

    def action_clear_input(self) -> None:
        if self._orchestrator.state.busy:
            return
        self.query_one("#input-text", TextArea).text = ""
        self.query_one("#audience", Input).value = ""
        self.query_one("#tone", Input).value = ""
        self.query_one("#counts", Static).update(self._counts_label(""))
        self._render_state()

    def action_tab_main(self) -> None:
        self.query_one("#tabs", TabbedContent).active = "tab-main"

    def action_tab_events(self) -> None:
        self.query_one("#tabs", TabbedContent).active = "tab-events"

    async def action_palette_command(self, command: str) -> None:
        """Dispatch command palette actions."""
        actions = {
            "humanize": self.action_humanize,
            "copy_result": self.action_copy_result,
            "clear_input": self.action_clear_input,
            "tab_main": self.action_tab_main,
            "tab_events": self.action_tab_events,
            "quit": self.exit,
        }
        action_fn = actions.get(command)
        if action_fn:
            action_fn()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_run_event(self, event: Event) -> None:
        self.query_one("#events-panel", EventPanel).add_event(event)
        self._render_state()

    def _submit_label(self, status: RunStatus) -> str:
        if status in (RunStatus.ANALYZING, RunStatus.ANALYZING_REWRITE):
            return self._msg("analyzing")
        if status == RunStatus.HUMANIZING:
            return self._msg("humanizing")
        return self._msg("start")

    def _render_state(self) -> None:
        state = self._orchestrator.state
        text_area = self.query_one("#input-text", TextArea)

        submit = self.query_one("#submit", Button)
        submit.label = self._submit_label(state.status)
        submit.disabled = state.busy or not text_area.text.strip()
        text_area.disabled = state.busy
        self.query_one("#status-bar", StatusBar).state = str(state.status)

        banner = self.query_one("#error-banner", Static)
        if state.status == RunStatus.ERROR and state.error:
            banner.update(escape(state.error))
            banner.display = True
        else:
            banner.display = False

        results = self.query_one("#results", Vertical)
        result = state.result
        if state.status != RunStatus.COMPLETED or result is None:
            results.display = False
            return
        self.query_one("#before-panel", AnalysisPanel).show(result.original_analysis)
        self.query_one("#after-panel", AnalysisPanel).show(result.transformed_analysis)
        self.query_one("#final-text", Static).update(escape(result.transformed_text))
        results.display = True
