"""Probe execution domain exports."""

from .probe_definitions import (
    GET_CONFIG_PROBE_NAME,
    HELLO_WORLD_PROBE_NAME,
    MOCK_TRANSFER_PROBE_NAME,
    PROBE_DEFINITIONS,
    ProbeContext,
    ProbeDefinition,
)
from .probe_outcomes import (
    INITIALIZATION_PROBE_NAME,
    ProbeOutcome,
    ProbeStatus,
    RunReport,
)
from .probe_runner import ProbeRunner

__all__ = [
    "GET_CONFIG_PROBE_NAME",
    "HELLO_WORLD_PROBE_NAME",
    "MOCK_TRANSFER_PROBE_NAME",
    "INITIALIZATION_PROBE_NAME",
    "PROBE_DEFINITIONS",
    "ProbeContext",
    "ProbeDefinition",
    "ProbeOutcome",
    "ProbeStatus",
    "RunReport",
    "ProbeRunner",
]
