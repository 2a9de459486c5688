"""Probe execution domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

INITIALIZATION_PROBE_NAME = "Initialization"


class ProbeStatus(str, Enum):
    """Outcome status of one probe."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of executing one probe."""

    name: str
    detail: str
    status: ProbeStatus

    @property
    def is_success(self) -> bool:
        return self.status == ProbeStatus.SUCCESS

    @staticmethod
    def succeeded(name: str, detail: str) -> ProbeOutcome:
        return ProbeOutcome(name=name, detail=detail, status=ProbeStatus.SUCCESS)

    @staticmethod
    def failed(name: str, error: BaseException) -> ProbeOutcome:
        return ProbeOutcome(
            name=name,
            detail=f"Error: {describe_error(error)}",
            status=ProbeStatus.ERROR,
        )

    @staticmethod
    def fatal(error: BaseException) -> ProbeOutcome:
        return ProbeOutcome(
            name=INITIALIZATION_PROBE_NAME,
            detail=f"Fatal Error: {describe_error(error)}",
            status=ProbeStatus.ERROR,
        )


@dataclass(frozen=True)
class RunReport:
    """Ordered outcomes of one run, in probe definition order."""

    outcomes: tuple[ProbeOutcome, ...]
    started_at: datetime | None = None
    finished_at: datetime | None = None
    is_fatal: bool = False

    @property
    def passed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.is_success)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.passed

    @property
    def all_passed(self) -> bool:
        return bool(self.outcomes) and self.failed == 0

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(outcome.name for outcome in self.outcomes)


EMPTY_REPORT = RunReport(outcomes=())


def describe_error(error: BaseException) -> str:
    """Return the error message, falling back to the exception type name."""
    return str(error) or error.__class__.__name__
