"""Starknet access layer."""

from .starknet import (
    ConfigurationError,
    ContractInterfaceError,
    StarknetConfig,
    fetch_contract,
    get_starknet_account,
    get_starknet_provider,
    submit_move,
    validate_starknet_config,
)

__all__ = [
    "ConfigurationError",
    "ContractInterfaceError",
    "StarknetConfig",
    "fetch_contract",
    "get_starknet_account",
    "get_starknet_provider",
    "submit_move",
    "validate_starknet_config",
]
