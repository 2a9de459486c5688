"""Tests for individual probe definitions."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest
from gasless_sdk_tester.configuration.defaults import DEFAULT_TRANSFER
from gasless_sdk_tester.probe_execution.probe_definitions import (
    PROBE_DEFINITIONS,
    ProbeContext,
    format_value,
    probe_get_config,
    probe_hello_world,
    probe_mock_transfer,
    read_field,
)

CONTEXT = ProbeContext(transfer=DEFAULT_TRANSFER)


def test_probe_definitions_are_ordered() -> None:
    assert [probe.name for probe in PROBE_DEFINITIONS] == [
        "Hello World",
        "Get Config",
        "Mock Gasless Transfer",
    ]


def test_hello_world_returns_greeting_verbatim() -> None:
    client = SimpleNamespace(hello_world=lambda: "  Hello, gasless!  ")

    assert asyncio.run(probe_hello_world(client, CONTEXT)) == "  Hello, gasless!  "


def test_get_config_formats_chain_id_and_rpc_url() -> None:
    client = SimpleNamespace(
        get_config=lambda: SimpleNamespace(chain_id=10, rpc_url="https://mainnet.optimism.io")
    )

    detail = asyncio.run(probe_get_config(client, CONTEXT))

    assert detail == "Chain ID: 10, RPC: https://mainnet.optimism.io"


def test_get_config_missing_field_raises() -> None:
    client = SimpleNamespace(get_config=lambda: SimpleNamespace(chain_id=1))

    with pytest.raises(AttributeError, match="no 'rpc_url' field"):
        asyncio.run(probe_get_config(client, CONTEXT))


def test_mock_transfer_passes_validated_request() -> None:
    received = []

    async def _transfer(request):
        received.append(request)
        return {"success": True, "hash": "0xfeed"}

    client = SimpleNamespace(transfer_gasless=_transfer)

    detail = asyncio.run(probe_mock_transfer(client, CONTEXT))

    assert detail == "Success: true, Hash: 0xfeed"
    assert received[0].to == DEFAULT_TRANSFER.to
    assert received[0].amount == 10**18


def test_mock_transfer_accepts_synchronous_transfer_result() -> None:
    client = SimpleNamespace(
        transfer_gasless=lambda request: SimpleNamespace(success=False, hash="0x0")
    )

    assert asyncio.run(probe_mock_transfer(client, CONTEXT)) == "Success: false, Hash: 0x0"


def test_read_field_prefers_name_then_aliases() -> None:
    assert read_field({"chainId": 5}, "chain_id", "chainId") == 5
    assert read_field({"chain_id": 1, "chainId": 5}, "chain_id", "chainId") == 1
    assert read_field(SimpleNamespace(rpcUrl="u"), "rpc_url", "rpcUrl") == "u"


def test_read_field_on_mapping_does_not_fall_back_to_attributes() -> None:
    with pytest.raises(AttributeError, match="dict result has no 'keys' field"):
        read_field({}, "keys")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "true"), (False, "false"), (1, "1"), ("yes", "yes"), (None, "None")],
)
def test_format_value(value: object, expected: str) -> None:
    assert format_value(value) == expected
