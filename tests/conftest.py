"""Shared fixtures for the agent test suite."""
from __future__ import annotations

import json

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from mancala_agent.agents.config import AgentConfig
from mancala_agent.agents.runtime import AgentRuntime
from mancala_agent.character import MANCALA_CHARACTER


def make_config(**overrides) -> AgentConfig:
    """Return an :class:`AgentConfig` with working Starknet settings."""

    base = {
        "api_key": "test-key",
        "starknet_account_address": "0x0123abc",
        "starknet_private_key": "0x02be3b",
        "starknet_provider_url": "https://rpc.example.com",
    }
    base.update(overrides)
    return AgentConfig(**base)


def json_reply(payload) -> str:
    """Wrap ``payload`` the way the model is asked to answer."""

    return f"Here is my move.\n```json\n{json.dumps(payload)}\n```"


@pytest.fixture
def valid_candidate() -> dict:
    return {
        "gameId": "0xabc",
        "selectedPit": 3,
        "opponentPits": [4, 4, 4, 4, 4, 4],
        "opponentMancala": 10,
    }


@pytest.fixture
def make_runtime():
    """Factory building a runtime whose model replies with ``responses`` in order."""

    def _make(responses=None, **config_overrides) -> AgentRuntime:
        llm = FakeListChatModel(responses=list(responses or ["no move"]))
        return AgentRuntime(make_config(**config_overrides), MANCALA_CHARACTER, llm=llm)

    return _make
