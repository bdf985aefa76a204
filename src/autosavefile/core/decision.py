"""Decision outcomes produced by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DecisionOutcome(Enum):
    MISSING = auto()
    CLEAN = auto()
    READ_ONLY = auto()
    IGNORED = auto()
    SAVED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class Decision:
    """Result of evaluating one document.

    Attributes:
        outcome: Which rule decided the outcome.
        path: Document path, if one was readable.
        message: The log line emitted for this decision, if any.
        error: Failure detail when the outcome is FAILED.
    """

    outcome: DecisionOutcome
    path: str | None = None
    message: str | None = None
    error: str | None = None

    @property
    def saved(self) -> bool:
        return self.outcome is DecisionOutcome.SAVED

    @property
    def failed(self) -> bool:
        return self.outcome is DecisionOutcome.FAILED
