"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .defaults import DEFAULT_SDK_FACTORY, DEFAULT_TRANSFER
from .runtime_settings import (
    HarnessConfiguration,
    RunConfiguration,
    SdkSettings,
    TransferSettings,
)

_DECIMAL_DIGITS = re.compile(r"^[0-9]+$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> HarnessConfiguration:
    """Load and validate the harness configuration file.

    Only presence and primitive types are checked here. Address formats are
    checked later by the client factory and the transfer probe, so that a
    malformed value shows up in the run report rather than aborting the CLI.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return HarnessConfiguration(
        path=path,
        network=_parse_network_section(parsed.get("network")),
        transfer=_parse_transfer_section(parsed.get("transfer")),
        sdk=_parse_sdk_section(parsed.get("sdk")),
    )


def _parse_network_section(value: Any) -> RunConfiguration:
    section = _require_mapping(value, "network")
    return RunConfiguration(
        chain_id=_require_positive_int(section.get("chain_id"), "network.chain_id"),
        rpc_url=_require_non_empty_string(section.get("rpc_url"), "network.rpc_url"),
        relayer_url=_require_non_empty_string(section.get("relayer_url"), "network.relayer_url"),
        forwarder_address=_require_non_empty_string(
            section.get("forwarder_address"), "network.forwarder_address"
        ),
    )


def _parse_transfer_section(value: Any) -> TransferSettings:
    if value is None:
        return DEFAULT_TRANSFER
    section = _require_mapping(value, "transfer")
    return TransferSettings(
        token=_require_non_empty_string(
            section.get("token", DEFAULT_TRANSFER.token), "transfer.token"
        ),
        to=_require_non_empty_string(section.get("to", DEFAULT_TRANSFER.to), "transfer.to"),
        amount=_require_amount(section.get("amount", DEFAULT_TRANSFER.amount), "transfer.amount"),
        user_address=_require_non_empty_string(
            section.get("user_address", DEFAULT_TRANSFER.user_address),
            "transfer.user_address",
        ),
    )


def _parse_sdk_section(value: Any) -> SdkSettings:
    if value is None:
        return SdkSettings(factory=DEFAULT_SDK_FACTORY)
    section = _require_mapping(value, "sdk")
    factory = _require_non_empty_string(section.get("factory", DEFAULT_SDK_FACTORY), "sdk.factory")
    if ":" not in factory:
        raise ConfigurationError("sdk.factory must use the 'package.module:attribute' form.")
    return SdkSettings(factory=factory)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_amount(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if isinstance(value, float):
        raise ConfigurationError(
            f"{field_name} must be an integer or a string of digits, not a float."
        )
    if isinstance(value, str):
        stripped = value.strip().replace("_", "")
        if not _DECIMAL_DIGITS.match(stripped):
            raise ConfigurationError(f"{field_name} must be a string of decimal digits.")
        return int(stripped)
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
