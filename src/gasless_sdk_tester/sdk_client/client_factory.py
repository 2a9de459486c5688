"""Client construction service."""

from __future__ import annotations

import logging
from typing import Any

from gasless_sdk_tester.configuration.runtime_settings import (
    RunConfiguration,
    is_well_formed_address,
)

from .client_contracts import GaslessClient, SdkFactory

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


class ConstructionError(Exception):
    """Raised when a gasless client cannot be constructed."""


def construct_client(
    config: RunConfiguration,
    chain_reader: Any,
    *,
    sdk_factory: SdkFactory,
) -> GaslessClient:
    """Build one client from a validated configuration and an external chain reader.

    Construction is local wiring only. Any exception raised by the SDK factory is
    re-raised as `ConstructionError` carrying the original message.
    """
    validate_run_configuration(config)
    try:
        client = sdk_factory(config, chain_reader)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ConstructionError(str(exc) or exc.__class__.__name__) from exc
    if client is None:
        raise ConstructionError("SDK factory returned no client.")
    logger.debug(
        "Constructed gasless client %s for chain %s", type(client).__name__, config.chain_id
    )
    return client


def validate_run_configuration(config: RunConfiguration) -> None:
    """Raise `ConstructionError` unless all run configuration fields are well-formed."""
    if isinstance(config.chain_id, bool) or not isinstance(config.chain_id, int):
        raise ConstructionError(f"invalid chain id: {config.chain_id!r}")
    if config.chain_id <= 0:
        raise ConstructionError(f"invalid chain id: {config.chain_id}")
    for label, value in (("rpc", config.rpc_url), ("relayer", config.relayer_url)):
        if not isinstance(value, str) or not value.startswith(_URL_SCHEMES):
            raise ConstructionError(f"invalid {label} url: {value}")
    if not is_well_formed_address(config.forwarder_address):
        raise ConstructionError(f"invalid forwarder address: {config.forwarder_address}")
