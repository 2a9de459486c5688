"""Sequential probe runner with per-probe failure isolation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any

from gasless_sdk_tester.configuration.runtime_settings import TransferSettings

from .probe_definitions import PROBE_DEFINITIONS, ProbeContext, ProbeDefinition
from .probe_outcomes import EMPTY_REPORT, ProbeOutcome, RunReport

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Any]
OutcomeObserver = Callable[[ProbeOutcome], None]


class ProbeRunner:
    """Runs the probe sequence against one freshly constructed client per run.

    Only one run may be active at a time. `report` and `is_running` are the
    only state exposed to callers; the report is replaced once at run start
    and once when the run ends.
    """

    def __init__(
        self,
        client_factory: ClientFactory,
        transfer: TransferSettings,
        *,
        probes: Sequence[ProbeDefinition] = PROBE_DEFINITIONS,
        on_outcome: OutcomeObserver | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._context = ProbeContext(transfer=transfer)
        self._probes = tuple(probes)
        self._on_outcome = on_outcome
        self._is_running = False
        self._report = EMPTY_REPORT

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def report(self) -> RunReport:
        return self._report

    async def run(self) -> RunReport | None:
        """Execute one run and return its report, or None if a run is in progress.

        Never raises: a client construction failure yields a single fatal
        "Initialization" entry, and probe failures are recorded per probe.
        """
        if self._is_running:
            logger.warning("Probe run requested while another run is in progress; ignoring.")
            return None
        self._is_running = True
        self._report = EMPTY_REPORT
        started_at = datetime.now(UTC)
        try:
            try:
                client = self._client_factory()
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.error("Client initialization failed: %s", exc)
                fatal = ProbeOutcome.fatal(exc)
                self._notify(fatal)
                self._report = RunReport(
                    outcomes=(fatal,),
                    started_at=started_at,
                    finished_at=datetime.now(UTC),
                    is_fatal=True,
                )
                return self._report

            outcomes: list[ProbeOutcome] = []
            for probe in self._probes:
                outcome = await self._execute_probe(probe, client)
                outcomes.append(outcome)
                self._notify(outcome)
            self._report = RunReport(
                outcomes=tuple(outcomes),
                started_at=started_at,
                finished_at=datetime.now(UTC),
            )
            logger.info(
                "Probe run finished: %d passed, %d failed",
                self._report.passed,
                self._report.failed,
            )
            return self._report
        finally:
            self._is_running = False

    async def _execute_probe(self, probe: ProbeDefinition, client: Any) -> ProbeOutcome:
        logger.debug("Running probe %s", probe.name)
        try:
            detail = await probe.operation(client, self._context)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.info("Probe %s failed: %s", probe.name, exc)
            return ProbeOutcome.failed(probe.name, exc)
        return ProbeOutcome.succeeded(probe.name, detail)

    def _notify(self, outcome: ProbeOutcome) -> None:
        if self._on_outcome is None:
            return
        try:
            self._on_outcome(outcome)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Outcome observer failed for probe %s", outcome.name)
