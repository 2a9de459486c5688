"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class OutcomeLabel(str, Enum):
    """Rendered label for one probe outcome."""

    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    config_path: Path | None
    output_path: Path
    chain_id: int
    rpc_url: str
    relayer_url: str
    sdk_factory: str
    dry_run: bool
