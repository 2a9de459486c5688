"""Call contract of the gasless SDK client and its collaborators."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

from gasless_sdk_tester.configuration.runtime_settings import RunConfiguration, TransferRequest


class SdkConfigView(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of the SDK configuration read by the "Get Config" probe."""

    @property
    def chain_id(self) -> int: ...

    @property
    def rpc_url(self) -> str: ...


class TransferResultView(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of the transfer result read by the "Mock Gasless Transfer" probe."""

    @property
    def success(self) -> bool: ...

    @property
    def hash(self) -> str: ...


class GaslessClient(Protocol):
    """Operations exercised by the probe runner.

    `hello_world` and `get_config` are expected to be synchronous, but the
    runner awaits any awaitable they return.
    """

    def hello_world(self) -> str: ...

    def get_config(self) -> SdkConfigView: ...

    def transfer_gasless(self, request: TransferRequest) -> Awaitable[TransferResultView]: ...


# The chain reader argument is opaque to the harness and passed through untouched.
SdkFactory = Callable[[RunConfiguration, Any], GaslessClient]


@dataclass(frozen=True)
class TransferResult:
    """Transfer outcome returned by clients shipped with the harness."""

    success: bool
    hash: str
