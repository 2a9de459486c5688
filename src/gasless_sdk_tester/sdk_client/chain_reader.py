"""Read-only JSON-RPC chain accessor handed to the SDK."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ChainReadError(Exception):
    """Raised when a JSON-RPC read call fails."""


class JsonRpcChainReader:
    """Minimal async JSON-RPC client bound to one network and endpoint.

    Creating the reader does no I/O; the HTTP client is opened on first use.
    """

    def __init__(
        self,
        rpc_url: str,
        chain_id: int,
        *,
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.chain_id = chain_id
        self._timeout_seconds = timeout_seconds
        self._client = client
        self._owns_client = client is None
        self._request_ids = itertools.count(1)

    async def request(self, method: str, params: list[Any] | None = None) -> Any:
        """Send one JSON-RPC call and return its `result` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params or [],
        }
        logger.debug("JSON-RPC %s -> %s", method, self.rpc_url)
        try:
            response = await self._http_client().post(self.rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ChainReadError(f"{method} failed: {exc}") from exc
        if not isinstance(body, dict):
            raise ChainReadError(f"{method} returned a malformed response.")
        if body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise ChainReadError(f"{method} failed: {message}")
        return body.get("result")

    async def get_chain_id(self) -> int:
        return int(await self.request("eth_chainId"), 16)

    async def get_block_number(self) -> int:
        return int(await self.request("eth_blockNumber"), 16)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self._client
