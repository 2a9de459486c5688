"""Deterministic local client used for dry runs."""

from __future__ import annotations

import asyncio
import hashlib
from typing import Any

from gasless_sdk_tester.configuration.runtime_settings import RunConfiguration, TransferRequest

from .client_contracts import TransferResult

OFFLINE_GREETING = "Hello from the offline gasless client!"


class OfflineGaslessClient:
    """Client that honours the SDK call contract without any network access.

    The transfer hash is a SHA-256 digest of the request and forwarder, so the
    same request always yields the same hash.
    """

    def __init__(self, config: RunConfiguration, chain_reader: Any = None) -> None:
        self._config = config
        self._chain_reader = chain_reader

    def hello_world(self) -> str:
        return OFFLINE_GREETING

    def get_config(self) -> RunConfiguration:
        return self._config

    async def transfer_gasless(self, request: TransferRequest) -> TransferResult:
        await asyncio.sleep(0)
        payload = "|".join(
            (
                str(self._config.chain_id),
                self._config.forwarder_address.lower(),
                request.token.lower(),
                request.to.lower(),
                request.user_address.lower(),
                str(request.amount),
            )
        )
        digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
        return TransferResult(success=True, hash=f"0x{digest}")
