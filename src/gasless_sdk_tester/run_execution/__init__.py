"""Run execution domain exports."""

from .probe_run_use_case import RunExecutionError, execute_gasless_probe_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_gasless_probe_run",
]
