"""Run execution use-case service."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from gasless_sdk_tester.configuration import (
    ConfigurationError,
    HarnessConfiguration,
    RunConfiguration,
    build_default_configuration,
    load_configuration,
)
from gasless_sdk_tester.probe_execution import ProbeOutcome, ProbeRunner, RunReport
from gasless_sdk_tester.results_writing import RunMetadata, write_results_workbook
from gasless_sdk_tester.sdk_client import (
    GaslessClient,
    JsonRpcChainReader,
    OfflineGaslessClient,
    SdkFactory,
    construct_client,
    load_sdk_factory,
)

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)

ChainReaderFactory = Callable[[RunConfiguration], Any]

OFFLINE_SDK_FACTORY_LABEL = "<offline>"


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_gasless_probe_run(
    request: RunRequest,
    *,
    sdk_factory: SdkFactory | None = None,
    chain_reader_factory: ChainReaderFactory | None = None,
    on_outcome: Callable[[ProbeOutcome], None] | None = None,
) -> RunOutcome:
    """Execute one probe run and return its outcome.

    Configuration and output errors raise `RunExecutionError`. Client
    construction and probe failures never raise; they are part of the report.
    """
    configuration = _load_harness_configuration(request.config_path)
    resolved_chain_reader_factory = chain_reader_factory or _default_chain_reader
    resolved_sdk_factory = _select_sdk_factory(configuration, request.dry_run, sdk_factory)

    run_start = datetime.now(UTC)
    report = asyncio.run(
        _run_probes(
            configuration=configuration,
            sdk_factory=resolved_sdk_factory,
            chain_reader_factory=resolved_chain_reader_factory,
            on_outcome=on_outcome,
        )
    )

    output_path = None
    if request.output_path:
        output_path = _write_report(
            report=report,
            output_path=Path(request.output_path),
            run_metadata=RunMetadata(
                run_start=run_start,
                config_path=configuration.path.resolve() if configuration.path else None,
                output_path=Path(request.output_path).resolve(),
                chain_id=configuration.network.chain_id,
                rpc_url=configuration.network.rpc_url,
                relayer_url=configuration.network.relayer_url,
                sdk_factory=(
                    OFFLINE_SDK_FACTORY_LABEL if request.dry_run else configuration.sdk.factory
                ),
                dry_run=request.dry_run,
            ),
        )
    return RunOutcome(report=report, output_path=output_path, dry_run=request.dry_run)


def _load_harness_configuration(config_path: str | None) -> HarnessConfiguration:
    if config_path is None:
        return build_default_configuration()
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _select_sdk_factory(
    configuration: HarnessConfiguration,
    dry_run: bool,
    sdk_factory: SdkFactory | None,
) -> SdkFactory:
    if dry_run:
        return OfflineGaslessClient
    if sdk_factory is not None:
        return sdk_factory
    import_path = configuration.sdk.factory

    def _imported_sdk_factory(config: RunConfiguration, chain_reader: Any) -> GaslessClient:
        return load_sdk_factory(import_path)(config, chain_reader)

    return _imported_sdk_factory


def _default_chain_reader(network: RunConfiguration) -> JsonRpcChainReader:
    return JsonRpcChainReader(network.rpc_url, network.chain_id)


async def _run_probes(
    *,
    configuration: HarnessConfiguration,
    sdk_factory: SdkFactory,
    chain_reader_factory: ChainReaderFactory,
    on_outcome: Callable[[ProbeOutcome], None] | None,
) -> RunReport:
    network = configuration.network
    chain_readers: list[Any] = []

    def _build_client() -> GaslessClient:
        chain_reader = chain_reader_factory(network)
        chain_readers.append(chain_reader)
        return construct_client(network, chain_reader, sdk_factory=sdk_factory)

    runner = ProbeRunner(_build_client, configuration.transfer, on_outcome=on_outcome)
    try:
        report = await runner.run()
    finally:
        for chain_reader in chain_readers:
            await _close_chain_reader(chain_reader)
    if report is None:
        raise RunExecutionError("A probe run is already in progress.")
    return report


async def _close_chain_reader(chain_reader: Any) -> None:
    close = getattr(chain_reader, "aclose", None)
    if close is None:
        return
    result = close()
    if inspect.isawaitable(result):
        await result


def _write_report(*, report: RunReport, output_path: Path, run_metadata: RunMetadata) -> Path:
    try:
        written = write_results_workbook(report, run_metadata, output_path)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write results workbook: {exc}") from exc
    logger.info("Results workbook written to %s", written)
    return written
