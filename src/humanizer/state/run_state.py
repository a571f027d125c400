"""Run state and result types.

One ``RunState`` object holds everything the presentation layer reads:
the current status, the result of the last completed run, and the
error message of the last failed one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


class RunStatus(StrEnum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    HUMANIZING = "humanizing"
    ANALYZING_REWRITE = "analyzing_rewrite"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def in_flight(self) -> bool:
        return self in _IN_FLIGHT


_IN_FLIGHT = frozenset({
    RunStatus.ANALYZING,
    RunStatus.HUMANIZING,
    RunStatus.ANALYZING_REWRITE,
})


def _coerce_score(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


@dataclass(frozen=True)
class AnalysisResult:
    """Model-estimated authorship scores for one piece of text."""

    human_score: float = 0.0
    ai_score: float = 0.0
    readability: str = ""
    reasons: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> AnalysisResult:
        return cls()

    @classmethod
    def from_payload(cls, payload: object) -> AnalysisResult:
        """Build a result from a decoded JSON payload, best effort.

        Missing or wrong-typed fields fall back to zero/empty values
        instead of raising.
        """
        if not isinstance(payload, dict):
            return cls.empty()

        raw_reasons = payload.get("reasons")
        if isinstance(raw_reasons, list):
            reasons = tuple(str(r) for r in raw_reasons if r is not None)
        elif isinstance(raw_reasons, str) and raw_reasons.strip():
            reasons = (raw_reasons.strip(),)
        else:
            reasons = ()

        readability = payload.get("readability")
        return cls(
            human_score=_coerce_score(payload.get("humanScore")),
            ai_score=_coerce_score(payload.get("aiScore")),
            readability=readability if isinstance(readability, str) else "",
            reasons=reasons,
        )

    def to_dict(self) -> dict:
        return {
            "humanScore": self.human_score,
            "aiScore": self.ai_score,
            "readability": self.readability,
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class Options:
    """Free-form rewrite hints, passed through verbatim."""

    audience: str = ""
    tone: str = ""


@dataclass(frozen=True)
class HumanizedOutput:
    original_text: str
    transformed_text: str
    original_analysis: AnalysisResult
    transformed_analysis: AnalysisResult

    def to_dict(self) -> dict:
        return {
            "originalText": self.original_text,
            "transformedText": self.transformed_text,
            "originalAnalysis": self.original_analysis.to_dict(),
            "transformedAnalysis": self.transformed_analysis.to_dict(),
        }


@dataclass
class RunState:
    """Mutable slot owned by the orchestrator; read by the presentation."""

    status: RunStatus = RunStatus.IDLE
    result: HumanizedOutput | None = None
    error: str | None = None

    @property
    def busy(self) -> bool:
        return self.status.in_flight
