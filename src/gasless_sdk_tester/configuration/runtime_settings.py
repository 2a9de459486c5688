"""Configuration domain entities."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_well_formed_address(value: object) -> bool:
    """Return True when the value is a `0x`-prefixed 40-hex-digit address string."""
    return isinstance(value, str) and ADDRESS_PATTERN.match(value) is not None


@dataclass(frozen=True)
class RunConfiguration:
    """Settings describing how to reach the gasless service."""

    chain_id: int
    rpc_url: str
    relayer_url: str
    forwarder_address: str


@dataclass(frozen=True)
class TransferSettings:
    """Raw transfer fixture as read from configuration, not yet validated."""

    token: str
    to: str
    amount: int
    user_address: str


@dataclass(frozen=True)
class TransferRequest:
    """Validated input for the transfer probe."""

    token: str
    to: str
    amount: int
    user_address: str

    def __post_init__(self) -> None:
        for label, value in (
            ("token", self.token),
            ("to", self.to),
            ("user_address", self.user_address),
        ):
            if not is_well_formed_address(value):
                raise ValueError(f"invalid {label} address: {value}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"transfer amount must be an integer: {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"transfer amount must not be negative: {self.amount}")

    @classmethod
    def from_settings(cls, settings: TransferSettings) -> TransferRequest:
        return cls(
            token=settings.token,
            to=settings.to,
            amount=settings.amount,
            user_address=settings.user_address,
        )


@dataclass(frozen=True)
class SdkSettings:
    """Where the gasless SDK client factory is imported from."""

    factory: str


@dataclass(frozen=True)
class HarnessConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None
    network: RunConfiguration
    transfer: TransferSettings
    sdk: SdkSettings
