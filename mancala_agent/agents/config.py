"""Configuration helpers for the Mancala chat agent."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _get_env(*keys: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first environment variable that is set."""

    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return default


@dataclass(slots=True)
class AgentConfig:
    """Runtime configuration for one agent process."""

    api_key: str
    model: str = "claude-sonnet-4-5-20250929"
    temperature: float = 0.7
    max_tokens: int = 4096
    conversation_length: int = 32
    max_context_tokens: int = 150000
    starknet_account_address: Optional[str] = None
    starknet_private_key: Optional[str] = None
    starknet_provider_url: Optional[str] = None
    starknet_chain: str = "SEPOLIA"
    strict_move_validation: bool = False

    def get(self, key: str) -> Optional[str]:
        """Look up a setting by its environment variable name."""

        mapping = {
            "ANTHROPIC_API_KEY": self.api_key,
            "ANTHROPIC_MODEL": self.model,
            "STARKNET_ACCOUNT_ADDRESS": self.starknet_account_address,
            "STARKNET_PRIVATE_KEY": self.starknet_private_key,
            "STARKNET_PROVIDER_URL": self.starknet_provider_url,
            "STARKNET_CHAIN": self.starknet_chain,
        }
        return mapping.get(key)

    @classmethod
    def from_env(cls) -> "AgentConfig":
        """Load configuration from environment variables."""

        api_key = _get_env("ANTHROPIC_API_KEY")
        if not api_key:
            raise RuntimeError("ANTHROPIC_API_KEY environment variable is required")

        model = _get_env("ANTHROPIC_MODEL", default="claude-sonnet-4-5-20250929")
        temperature = float(_get_env("MODEL_TEMPERATURE", default="0.7"))
        max_tokens = int(_get_env("MODEL_MAX_TOKENS", default="4096"))
        conversation_length = int(_get_env("CONVERSATION_LENGTH", default="32"))
        max_context_tokens = int(_get_env("MAX_CONTEXT_TOKENS", default="150000"))

        strict = _get_env("STRICT_MOVE_VALIDATION", default="false")

        return cls(
            api_key=api_key,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            conversation_length=conversation_length,
            max_context_tokens=max_context_tokens,
            starknet_account_address=_get_env("STARKNET_ACCOUNT_ADDRESS"),
            starknet_private_key=_get_env("STARKNET_PRIVATE_KEY"),
            starknet_provider_url=_get_env("STARKNET_PROVIDER_URL"),
            starknet_chain=_get_env("STARKNET_CHAIN", default="SEPOLIA"),
            strict_move_validation=strict.lower() in _TRUTHY,
        )
