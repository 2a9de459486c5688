"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from gasless_sdk_tester.probe_execution.probe_outcomes import ProbeOutcome, RunReport
from gasless_sdk_tester.run_execution.run_contracts import RunOutcome, RunRequest


def test_run_request_defaults_to_live_mode() -> None:
    request = RunRequest(config_path="gasless-tester.yaml", output_path=None)

    assert request.dry_run is False


def test_run_outcome_reports_all_passed_from_report() -> None:
    outcome = RunOutcome(
        report=RunReport(outcomes=(ProbeOutcome.succeeded("Hello World", "hi"),)),
        output_path=Path("/tmp/results.xlsx"),
        dry_run=True,
    )

    assert outcome.output_path is not None
    assert outcome.output_path.name == "results.xlsx"
    assert outcome.all_passed is True


def test_run_outcome_with_fatal_report_is_not_all_passed() -> None:
    outcome = RunOutcome(
        report=RunReport(outcomes=(ProbeOutcome.fatal(ValueError("bad")),), is_fatal=True),
        output_path=None,
        dry_run=False,
    )

    assert outcome.all_passed is False
