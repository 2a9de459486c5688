"""Definitions of the probes executed against a gasless client."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from gasless_sdk_tester.configuration.runtime_settings import TransferRequest, TransferSettings

HELLO_WORLD_PROBE_NAME = "Hello World"
GET_CONFIG_PROBE_NAME = "Get Config"
MOCK_TRANSFER_PROBE_NAME = "Mock Gasless Transfer"


@dataclass(frozen=True)
class ProbeContext:
    """Inputs shared by all probes of one run."""

    transfer: TransferSettings


ProbeOperation = Callable[[Any, ProbeContext], Awaitable[str]]


@dataclass(frozen=True)
class ProbeDefinition:
    """Named probe operation returning the success detail or raising."""

    name: str
    operation: ProbeOperation


async def resolve(value: Any) -> Any:
    """Await the value when the client returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


async def probe_hello_world(client: Any, context: ProbeContext) -> str:
    greeting = await resolve(client.hello_world())
    return str(greeting)


async def probe_get_config(client: Any, context: ProbeContext) -> str:
    config = await resolve(client.get_config())
    chain_id = read_field(config, "chain_id", "chainId")
    rpc_url = read_field(config, "rpc_url", "rpcUrl")
    return f"Chain ID: {chain_id}, RPC: {rpc_url}"


async def probe_mock_transfer(client: Any, context: ProbeContext) -> str:
    request = TransferRequest.from_settings(context.transfer)
    result = await resolve(client.transfer_gasless(request))
    success = read_field(result, "success")
    tx_hash = read_field(result, "hash")
    return f"Success: {format_value(success)}, Hash: {tx_hash}"


PROBE_DEFINITIONS: tuple[ProbeDefinition, ...] = (
    ProbeDefinition(HELLO_WORLD_PROBE_NAME, probe_hello_world),
    ProbeDefinition(GET_CONFIG_PROBE_NAME, probe_get_config),
    ProbeDefinition(MOCK_TRANSFER_PROBE_NAME, probe_mock_transfer),
)


def read_field(payload: Any, name: str, *aliases: str) -> Any:
    """Read a result field from an attribute object or a mapping.

    Raises:
      AttributeError: If neither the name nor any alias is present.
    """
    for key in (name, *aliases):
        if isinstance(payload, Mapping):
            if key in payload:
                return payload[key]
        elif hasattr(payload, key):
            return getattr(payload, key)
    raise AttributeError(f"{type(payload).__name__} result has no '{name}' field")


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
