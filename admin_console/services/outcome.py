"""Outcome of a gated mutation.

Gated operations never raise on a failed role check: they leave state
untouched and report ``DENIED`` so the caller can show a message.
"""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class Outcome(str, enum.Enum):
    APPLIED = "applied"
    DENIED = "denied"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class MutationResult(Generic[T]):
    outcome: Outcome
    value: T | None = None

    @property
    def applied(self) -> bool:
        return self.outcome is Outcome.APPLIED

    @property
    def denied(self) -> bool:
        return self.outcome is Outcome.DENIED
