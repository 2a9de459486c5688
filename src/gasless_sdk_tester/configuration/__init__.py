"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .defaults import build_default_configuration
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    HarnessConfiguration,
    RunConfiguration,
    SdkSettings,
    TransferRequest,
    TransferSettings,
    is_well_formed_address,
)

__all__ = [
    "HarnessConfiguration",
    "RunConfiguration",
    "SdkSettings",
    "TransferRequest",
    "TransferSettings",
    "is_well_formed_address",
    "ConfigurationError",
    "load_configuration",
    "build_default_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
