from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import OutcomeKind


@dataclass(frozen=True)
class Outcome:
    """Typed result of a service operation.

    Services return one of these for every expected condition instead of
    raising; only storage faults propagate as exceptions.
    """

    kind: OutcomeKind
    message: str
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    @classmethod
    def success(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.OK, message)

    @classmethod
    def invalid(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.VALIDATION_ERROR, message)

    @classmethod
    def conflict(cls, message: str, *, field: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.CONFLICT, message, field)

    @classmethod
    def not_found(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.NOT_FOUND, message)
