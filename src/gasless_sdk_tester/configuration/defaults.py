"""Built-in harness defaults used when no configuration file is given."""

from __future__ import annotations

from .runtime_settings import (
    HarnessConfiguration,
    RunConfiguration,
    SdkSettings,
    TransferSettings,
)

DEFAULT_SDK_FACTORY = "gasless_sdk:GaslessSDK"

DEFAULT_NETWORK = RunConfiguration(
    chain_id=1,
    rpc_url="https://eth.llamarpc.com",
    relayer_url="https://your-relayer.com",
    forwarder_address="0x1234567890123456789012345678901234567890",
)

# 1 token with 18 decimals.
DEFAULT_TRANSFER = TransferSettings(
    token="0xA0b86a33E6441E1063D8Bb9Afe3c8A1e67CD7C4d",
    to="0x742d35Cc6634C0532925a3b8D4c9db96C0F4E7d8",
    amount=10**18,
    user_address="0x8ba1f109551bD432803012645Aac136c52DCfAd5",
)


def build_default_configuration() -> HarnessConfiguration:
    """Return the harness configuration used by `run` without `--config`."""
    return HarnessConfiguration(
        path=None,
        network=DEFAULT_NETWORK,
        transfer=DEFAULT_TRANSFER,
        sdk=SdkSettings(factory=DEFAULT_SDK_FACTORY),
    )
