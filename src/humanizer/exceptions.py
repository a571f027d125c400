"""Humanizer exception hierarchy.

Provides a structured exception tree so catch blocks can be specific
and callers can distinguish between different failure modes.
"""

from __future__ import annotations


class HumanizerError(Exception):
    """Base for all Humanizer exceptions."""


class ValidationError(HumanizerError):
    """Input rejected before any model call (e.g. empty text)."""


class EngineError(HumanizerError):
    """Orchestrator failures."""


class RunInProgressError(EngineError):
    """Raised when a run is submitted while another is still in flight."""


class ModelError(HumanizerError):
    """Provider connection, timeout, parse failures."""


class TransportError(ModelError):
    """A remote model call failed (network, auth, HTTP status, bad body).

    All transport failures collapse into this one type; callers do not
    distinguish between them.
    """

    def __init__(self, message: str, original: Exception | None = None):
        super().__init__(message)
        self.original = original


class SchemaError(ModelError):
    """Structured output did not match the expected analysis shape."""
