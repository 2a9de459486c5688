"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gasless_sdk_tester.probe_execution.probe_outcomes import RunReport


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    config_path: str | None
    output_path: str | None
    dry_run: bool = False


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    report: RunReport
    output_path: Path | None
    dry_run: bool

    @property
    def all_passed(self) -> bool:
        return self.report.all_passed
