"""Starknet access helpers: configuration checks, clients and move submission."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional, Protocol, Union

from pydantic import BaseModel, Field, ValidationError, field_validator
from starknet_py.contract import Contract
from starknet_py.net.account.account import Account
from starknet_py.net.client_models import DeprecatedContractClass
from starknet_py.net.full_node_client import FullNodeClient
from starknet_py.net.models.chains import StarknetChainId
from starknet_py.net.signer.stark_curve_signer import KeyPair

from mancala_agent.models.content import MoveGameContent, TransactionResult

logger = logging.getLogger(__name__)

MOVE_FUNCTION = "move"

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")


class ConfigurationError(RuntimeError):
    """Raised when the Starknet settings are missing or malformed."""


class ContractInterfaceError(RuntimeError):
    """Raised when a contract's ABI cannot be resolved."""


class SettingsSource(Protocol):
    def get_setting(self, key: str) -> Optional[str]: ...


class StarknetConfig(BaseModel):
    """Settings required to sign and send Starknet transactions."""

    STARKNET_ACCOUNT_ADDRESS: str = Field(..., min_length=1)
    STARKNET_PRIVATE_KEY: str = Field(..., min_length=1)
    STARKNET_PROVIDER_URL: str = Field(..., min_length=1)
    STARKNET_CHAIN: str = "SEPOLIA"

    @field_validator("STARKNET_ACCOUNT_ADDRESS", "STARKNET_PRIVATE_KEY")
    @classmethod
    def check_hex(cls, value: str) -> str:
        if not _HEX_RE.match(value):
            raise ValueError("must be a 0x-prefixed hex string")
        return value

    @field_validator("STARKNET_PROVIDER_URL")
    @classmethod
    def check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value

    @field_validator("STARKNET_CHAIN")
    @classmethod
    def check_chain(cls, value: str) -> str:
        name = value.upper()
        if name not in StarknetChainId.__members__:
            known = ", ".join(StarknetChainId.__members__)
            raise ValueError(f"unknown chain {value!r} (expected one of {known})")
        return name

    @property
    def chain_id(self) -> StarknetChainId:
        return StarknetChainId[self.STARKNET_CHAIN]


def validate_starknet_config(runtime: SettingsSource) -> StarknetConfig:
    """Read and check the Starknet settings exposed by ``runtime``."""

    values = {}
    for key in StarknetConfig.model_fields:
        value = runtime.get_setting(key)
        if value:
            values[key] = value

    try:
        return StarknetConfig(**values)
    except ValidationError as exc:
        problems = "\n".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(
            f"Starknet configuration validation failed:\n{problems}"
        ) from exc


def get_starknet_provider(runtime: SettingsSource) -> FullNodeClient:
    config = validate_starknet_config(runtime)
    return FullNodeClient(node_url=config.STARKNET_PROVIDER_URL)


def get_starknet_account(
    runtime: SettingsSource, client: Optional[FullNodeClient] = None
) -> Account:
    """Build the signing account described by the runtime settings."""

    config = validate_starknet_config(runtime)
    return Account(
        client=client or get_starknet_provider(runtime),
        address=config.STARKNET_ACCOUNT_ADDRESS,
        key_pair=KeyPair.from_private_key(int(config.STARKNET_PRIVATE_KEY, 16)),
        chain=config.chain_id,
    )


def to_felt(value: str) -> Union[int, str]:
    """Convert a hex or decimal identifier to a felt.

    Anything else is left alone and encoded by the client as a short string.
    """

    if _HEX_RE.match(value):
        return int(value, 16)
    if value.isdigit():
        return int(value)
    return value


def format_tx_hash(tx_hash: Any) -> str:
    if isinstance(tx_hash, int):
        return hex(tx_hash)
    return str(tx_hash)


def _parse_abi(raw_abi: Any) -> List[dict]:
    if not raw_abi:
        return []
    if isinstance(raw_abi, str):
        return json.loads(raw_abi)
    return list(raw_abi)


async def fetch_contract(
    contract_address: str, provider: FullNodeClient, account: Account
) -> Contract:
    """Fetch the ABI deployed at ``contract_address`` and bind it to ``account``."""

    contract_class = await provider.get_class_at(contract_address=contract_address)
    abi = _parse_abi(getattr(contract_class, "abi", None))
    if not abi:
        raise ContractInterfaceError("Contract ABI not found")

    cairo_version = 0 if isinstance(contract_class, DeprecatedContractClass) else 1
    logger.debug(
        "Resolved ABI for %s (%d entries, cairo %d)", contract_address, len(abi), cairo_version
    )
    return Contract(
        address=contract_address,
        abi=abi,
        provider=account,
        cairo_version=cairo_version,
    )


async def submit_move(
    provider: FullNodeClient,
    account: Account,
    proposal: MoveGameContent,
    contract_address: str,
) -> TransactionResult:
    """Send one ``move(gameId, selectedPit)`` transaction.

    Every call submits a new transaction; duplicates are left to the contract.
    """

    selected_pit = proposal.selected_pit
    if isinstance(selected_pit, float) and selected_pit.is_integer():
        selected_pit = int(selected_pit)

    contract = await fetch_contract(contract_address, provider, account)
    invoke_result = await contract.functions[MOVE_FUNCTION].invoke_v3(
        to_felt(proposal.game_id),
        selected_pit,
        auto_estimate=True,
    )

    return TransactionResult(
        txHash=format_tx_hash(invoke_result.hash),
        gameId=proposal.game_id,
        selectedPit=proposal.selected_pit,
    )
