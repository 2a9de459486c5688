"""Results writing domain exports."""

from .report_models import OutcomeLabel, RunMetadata
from .run_report_writer import (
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    format_outcome_line,
    write_results_workbook,
)

__all__ = [
    "OutcomeLabel",
    "RunMetadata",
    "RESULTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "format_outcome_line",
    "write_results_workbook",
]
