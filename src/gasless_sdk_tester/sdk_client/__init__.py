"""Gasless SDK client exports."""

from .chain_reader import ChainReadError, JsonRpcChainReader
from .client_contracts import GaslessClient, SdkFactory, TransferResult
from .client_factory import ConstructionError, construct_client, validate_run_configuration
from .offline_client import OfflineGaslessClient
from .sdk_loading import load_sdk_factory

__all__ = [
    "ChainReadError",
    "JsonRpcChainReader",
    "GaslessClient",
    "SdkFactory",
    "TransferResult",
    "ConstructionError",
    "construct_client",
    "validate_run_configuration",
    "OfflineGaslessClient",
    "load_sdk_factory",
]
