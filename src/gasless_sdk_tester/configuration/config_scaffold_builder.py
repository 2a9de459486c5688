"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "gasless-tester.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Harness configuration for gasless-sdk-tester.
# Replace every <REQUIRED> placeholder before running `run --config`.
# The transfer and sdk sections are optional; omitted values fall back to built-in defaults.

network:
  # Chain id of the network the SDK talks to (1 = Ethereum mainnet).
  chain_id: "<REQUIRED>"
  rpc_url: "<REQUIRED>"
  relayer_url: "<REQUIRED>"
  # Forwarder contract address: 0x followed by 40 hex digits.
  forwarder_address: "<REQUIRED>"

transfer:
  # Fixture sent by the "Mock Gasless Transfer" probe.
  token: "0xA0b86a33E6441E1063D8Bb9Afe3c8A1e67CD7C4d"
  to: "0x742d35Cc6634C0532925a3b8D4c9db96C0F4E7d8"
  user_address: "0x8ba1f109551bD432803012645Aac136c52DCfAd5"
  # Base units. Quote large values to keep them exact in every YAML tool.
  amount: "1000000000000000000"

sdk:
  # Import path of a callable taking (run_configuration, chain_reader) and returning a client.
  factory: "gasless_sdk:GaslessSDK"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML harness configuration with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
