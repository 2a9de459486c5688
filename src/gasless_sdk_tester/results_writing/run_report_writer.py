"""Run report rendering and results workbook writer."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from gasless_sdk_tester.probe_execution.probe_outcomes import ProbeOutcome, RunReport

from .report_models import OutcomeLabel, RunMetadata

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
RESULT_COLUMNS = ("Probe", "Status", "Detail")

_STATUS_FILLS = {
    OutcomeLabel.PASS: PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid"),
    OutcomeLabel.FAIL: PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid"),
}


def outcome_label(outcome: ProbeOutcome) -> OutcomeLabel:
    return OutcomeLabel.PASS if outcome.is_success else OutcomeLabel.FAIL


def format_outcome_line(outcome: ProbeOutcome) -> str:
    """Render one outcome as a single console line."""
    return f"{outcome_label(outcome).value} {outcome.name}: {outcome.detail}"


def write_results_workbook(
    report: RunReport,
    run_metadata: RunMetadata,
    output_path: Path | str,
) -> Path:
    """Write the run report to an `.xlsx` workbook and return the resolved path."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = RESULTS_SHEET_NAME
    _write_results_sheet(sheet, report)
    _write_run_info_sheet(workbook, report, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_results_sheet(sheet, report: RunReport) -> None:
    for column, header in enumerate(RESULT_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column, value=header)
        cell.font = Font(bold=True)

    for row, outcome in enumerate(report.outcomes, start=2):
        label = outcome_label(outcome)
        sheet.cell(row=row, column=1, value=outcome.name)
        status_cell = sheet.cell(row=row, column=2, value=label.value)
        status_cell.fill = _STATUS_FILLS[label]
        sheet.cell(row=row, column=3, value=outcome.detail)

    sheet.column_dimensions[get_column_letter(1)].width = 28
    sheet.column_dimensions[get_column_letter(2)].width = 10
    sheet.column_dimensions[get_column_letter(3)].width = 90


def _write_run_info_sheet(workbook, report: RunReport, run_metadata: RunMetadata) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    config_source = str(run_metadata.config_path) if run_metadata.config_path else "<defaults>"
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("run_end", report.finished_at.isoformat() if report.finished_at else None),
        ("config_path", config_source),
        ("output_path", str(run_metadata.output_path)),
        ("chain_id", run_metadata.chain_id),
        ("rpc_url", run_metadata.rpc_url),
        ("relayer_url", run_metadata.relayer_url),
        ("sdk_factory", run_metadata.sdk_factory),
        ("dry_run", run_metadata.dry_run),
        ("initialization_failed", report.is_fatal),
        ("total", len(report.outcomes)),
        ("passed", report.passed),
        ("failed", report.failed),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
