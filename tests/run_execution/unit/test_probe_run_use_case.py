"""Tests for the probe run use-case service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from gasless_sdk_tester.configuration.runtime_settings import RunConfiguration, TransferRequest
from gasless_sdk_tester.probe_execution.probe_outcomes import ProbeOutcome, ProbeStatus
from gasless_sdk_tester.results_writing import RESULTS_SHEET_NAME
from gasless_sdk_tester.run_execution.probe_run_use_case import (
    RunExecutionError,
    execute_gasless_probe_run,
)
from gasless_sdk_tester.run_execution.run_contracts import RunRequest
from gasless_sdk_tester.sdk_client.client_contracts import TransferResult
from openpyxl import load_workbook


def _write_config(
    tmp_path: Path,
    *,
    forwarder_address: str = "0x1234567890123456789012345678901234567890",
    sdk_factory: str | None = None,
) -> Path:
    config: dict[str, Any] = {
        "network": {
            "chain_id": 11155111,
            "rpc_url": "https://rpc.sepolia.example.com",
            "relayer_url": "https://relayer.example.com",
            "forwarder_address": forwarder_address,
        },
        "transfer": {"amount": "1000000000000000000"},
    }
    if sdk_factory is not None:
        config["sdk"] = {"factory": sdk_factory}
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


class _RelayerDownSdk:
    def __init__(self, config: RunConfiguration, chain_reader: Any) -> None:
        self._config = config
        self.chain_reader = chain_reader

    def hello_world(self) -> str:
        return "Hello from Gasless SDK!"

    def get_config(self) -> RunConfiguration:
        return self._config

    async def transfer_gasless(self, request: TransferRequest) -> TransferResult:
        raise ConnectionError("relayer unreachable")


class _ClosableReader:
    def __init__(self, network: RunConfiguration) -> None:
        self.network = network
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


def test_dry_run_with_defaults_passes_every_probe() -> None:
    outcome = execute_gasless_probe_run(
        RunRequest(config_path=None, output_path=None, dry_run=True)
    )

    assert outcome.dry_run is True
    assert outcome.output_path is None
    assert outcome.all_passed is True
    assert outcome.report.names == ("Hello World", "Get Config", "Mock Gasless Transfer")
    assert outcome.report.outcomes[1].detail == "Chain ID: 1, RPC: https://eth.llamarpc.com"


def test_dry_run_writes_results_workbook(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "results" / "run.xlsx"

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(config_path), output_path=str(output_path), dry_run=True)
    )

    assert outcome.output_path == output_path.resolve()
    sheet = load_workbook(output_path)[RESULTS_SHEET_NAME]
    assert sheet.cell(row=3, column=3).value == (
        "Chain ID: 11155111, RPC: https://rpc.sepolia.example.com"
    )
    assert [sheet.cell(row=row, column=2).value for row in range(2, 5)] == ["PASS"] * 3


def test_injected_sdk_failure_is_reported_without_raising(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    readers: list[_ClosableReader] = []

    def _reader_factory(network: RunConfiguration) -> _ClosableReader:
        reader = _ClosableReader(network)
        readers.append(reader)
        return reader

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(config_path), output_path=None),
        sdk_factory=_RelayerDownSdk,
        chain_reader_factory=_reader_factory,
    )

    assert [item.status for item in outcome.report.outcomes] == [
        ProbeStatus.SUCCESS,
        ProbeStatus.SUCCESS,
        ProbeStatus.ERROR,
    ]
    assert outcome.report.outcomes[2].detail == "Error: relayer unreachable"
    assert outcome.all_passed is False
    assert readers[0].network.chain_id == 11155111
    assert readers[0].closed is True


def test_invalid_forwarder_address_yields_initialization_entry(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, forwarder_address="0xnot-hex")

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(config_path), output_path=None, dry_run=True)
    )

    assert outcome.report.is_fatal is True
    assert outcome.report.names == ("Initialization",)
    assert "invalid forwarder address" in outcome.report.outcomes[0].detail


def test_unimportable_sdk_factory_yields_initialization_entry(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, sdk_factory="no_such_gasless_sdk_module:GaslessSDK")

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(config_path), output_path=None),
        chain_reader_factory=_ClosableReader,
    )

    assert outcome.report.names == ("Initialization",)
    assert "Cannot import SDK module 'no_such_gasless_sdk_module'" in (
        outcome.report.outcomes[0].detail
    )


def test_sdk_factory_is_loaded_from_configured_import_path(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        sdk_factory="gasless_sdk_tester.sdk_client.offline_client:OfflineGaslessClient",
    )

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(config_path), output_path=None),
        chain_reader_factory=_ClosableReader,
    )

    assert outcome.all_passed is True


def test_outcome_observer_sees_each_probe(tmp_path: Path) -> None:
    seen: list[ProbeOutcome] = []

    execute_gasless_probe_run(
        RunRequest(config_path=str(_write_config(tmp_path)), output_path=None, dry_run=True),
        on_outcome=seen.append,
    )

    assert [item.name for item in seen] == ["Hello World", "Get Config", "Mock Gasless Transfer"]


def test_missing_configuration_file_raises_run_execution_error(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="Configuration file not found"):
        execute_gasless_probe_run(
            RunRequest(config_path=str(tmp_path / "missing.yaml"), output_path=None)
        )


def test_unwritable_output_raises_run_execution_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(RunExecutionError, match="Failed to write results workbook"):
        execute_gasless_probe_run(
            RunRequest(
                config_path=None,
                output_path=str(blocker / "results.xlsx"),
                dry_run=True,
            )
        )


def test_failing_chain_reader_factory_yields_initialization_entry() -> None:
    def _broken_reader_factory(network: RunConfiguration) -> _ClosableReader:
        raise ValueError("bad transport")

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=None, output_path=None),
        sdk_factory=_RelayerDownSdk,
        chain_reader_factory=_broken_reader_factory,
    )

    assert outcome.report.is_fatal is True
    assert outcome.report.names == ("Initialization",)
    assert outcome.report.outcomes[0].detail == "Fatal Error: bad transport"


def test_chain_reader_is_closed_when_sdk_construction_fails(tmp_path: Path) -> None:
    readers: list[_ClosableReader] = []

    def _reader_factory(network: RunConfiguration) -> _ClosableReader:
        reader = _ClosableReader(network)
        readers.append(reader)
        return reader

    def _broken_sdk(config: RunConfiguration, chain_reader: Any) -> _RelayerDownSdk:
        raise RuntimeError("sdk exploded")

    outcome = execute_gasless_probe_run(
        RunRequest(config_path=str(_write_config(tmp_path)), output_path=None),
        sdk_factory=_broken_sdk,
        chain_reader_factory=_reader_factory,
    )

    assert outcome.report.names == ("Initialization",)
    assert readers[0].closed is True
