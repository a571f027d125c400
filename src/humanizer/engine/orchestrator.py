"""Run orchestrator.

Drives one run: score the input, rewrite it, score the rewrite. The three
model calls always execute in that order, one at a time. The orchestrator
owns the ``RunState`` and is its only writer.

    IDLE/COMPLETED/ERROR --submit--> ANALYZING --> HUMANIZING
        --> ANALYZING_REWRITE --> COMPLETED
    any step failing --> ERROR
    cancelled mid-run --> IDLE
"""

from __future__ import annotations

import asyncio
import logging
import uuid

from humanizer.engine.client import TextModel
from humanizer.events.bus import Event, EventBus
from humanizer.events.types import (
    RUN_COMPLETED,
    RUN_FAILED,
    RUN_STARTED,
    RUN_STATUS_CHANGED,
)
from humanizer.exceptions import RunInProgressError, ValidationError
from humanizer.messages import DEFAULT_LOCALE, message
from humanizer.state.run_state import HumanizedOutput, Options, RunState, RunStatus

logger = logging.getLogger(__name__)


def validate_input(text: str) -> str:
    """Return text unchanged, or raise ValidationError if it is blank."""
    if not text or not text.strip():
        raise ValidationError("Input text is empty")
    return text


class Orchestrator:
    """Sequences score -> rewrite -> score and tracks the run status.

    At most one run is in flight. Submitting blank text is a no-op;
    submitting while a run is in flight raises RunInProgressError.
    Any failure moves the state to ERROR with a fixed localized message
    and discards everything the run produced so far.
    """

    def __init__(
        self,
        model: TextModel,
        event_bus: EventBus | None = None,
        locale: str = DEFAULT_LOCALE,
        state: RunState | None = None,
    ):
        self._model = model
        self._events = event_bus or EventBus()
        self._locale = locale
        self._state = state or RunState()
        self._run_id = ""

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def events(self) -> EventBus:
        return self._events

    async def submit(self, text: str, options: Options | None = None) -> RunState:
        """Run the full sequence for ``text`` and return the final state."""
        try:
            validate_input(text)
        except ValidationError:
            logger.debug("Ignoring submit with empty input")
            return self._state
        if self._state.busy:
            raise RunInProgressError(
                f"Run {self._run_id} is still {self._state.status}"
            )

        options = options or Options()
        self._run_id = uuid.uuid4().hex[:8]
        self._state.result = None
        self._state.error = None
        self._emit(RUN_STARTED, {
            "chars": len(text),
            "audience": options.audience,
            "tone": options.tone,
        })

        try:
            self._set_status(RunStatus.ANALYZING)
            original_analysis = await self._model.score(text)

            self._set_status(RunStatus.HUMANIZING)
            transformed_text = await self._model.rewrite(text, options)

            self._set_status(RunStatus.ANALYZING_REWRITE)
            transformed_analysis = await self._model.score(transformed_text)
        except asyncio.CancelledError:
            logger.warning("Run %s cancelled during %s", self._run_id, self._state.status)
            self._state.result = None
            self._set_status(RunStatus.IDLE)
            raise
        except Exception as e:
            failed_step = self._state.status
            logger.exception("Run %s failed during %s", self._run_id, failed_step)
            self._state.result = None
            self._state.error = message("run_error", self._locale)
            self._set_status(RunStatus.ERROR)
            self._emit(RUN_FAILED, {
                "step": str(failed_step),
                "error": str(e),
                "error_type": type(e).__name__,
            })
            return self._state

        self._state.result = HumanizedOutput(
            original_text=text,
            transformed_text=transformed_text,
            original_analysis=original_analysis,
            transformed_analysis=transformed_analysis,
        )
        self._set_status(RunStatus.COMPLETED)
        self._emit(RUN_COMPLETED, {
            "ai_score_before": original_analysis.ai_score,
            "ai_score_after": transformed_analysis.ai_score,
            "chars_after": len(transformed_text),
        })
        return self._state

    def _set_status(self, status: RunStatus) -> None:
        previous = self._state.status
        self._state.status = status
        logger.info("Run %s: %s -> %s", self._run_id, previous, status)
        self._emit(RUN_STATUS_CHANGED, {"from": str(previous), "to": str(status)})

    def _emit(self, event_type: str, data: dict) -> None:
        self._events.emit(Event(event_type=event_type, run_id=self._run_id, data=data))
