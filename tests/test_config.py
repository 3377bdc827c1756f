import pytest

from mancala_agent.agents.config import AgentConfig, _get_env

ALL_KEYS = [
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "MODEL_TEMPERATURE",
    "MODEL_MAX_TOKENS",
    "CONVERSATION_LENGTH",
    "MAX_CONTEXT_TOKENS",
    "STARKNET_ACCOUNT_ADDRESS",
    "STARKNET_PRIVATE_KEY",
    "STARKNET_PROVIDER_URL",
    "STARKNET_CHAIN",
    "STRICT_MOVE_VALIDATION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ALL_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_get_env_returns_first_set(monkeypatch):
    """Test _get_env returns first environment variable that is set"""
    monkeypatch.setenv("TEST_VAR_1", "value1")
    monkeypatch.setenv("TEST_VAR_2", "value2")

    assert _get_env("TEST_VAR_MISSING", "TEST_VAR_1", "TEST_VAR_2") == "value1"


def test_get_env_returns_default_when_none_set():
    assert _get_env("MISSING_VAR_1", "MISSING_VAR_2", default="default_value") == "default_value"


def test_get_env_returns_none_when_no_default():
    assert _get_env("MISSING_VAR_1", "MISSING_VAR_2") is None


def test_from_env_missing_api_key():
    """Test AgentConfig.from_env raises error when the API key is missing"""
    with pytest.raises(RuntimeError, match="ANTHROPIC_API_KEY environment variable is required"):
        AgentConfig.from_env()


def test_from_env_with_defaults(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

    config = AgentConfig.from_env()

    assert config.api_key == "test_key"
    assert config.model == "claude-sonnet-4-5-20250929"
    assert config.temperature == 0.7
    assert config.max_tokens == 4096
    assert config.conversation_length == 32
    assert config.max_context_tokens == 150000
    assert config.starknet_account_address is None
    assert config.starknet_chain == "SEPOLIA"
    assert config.strict_move_validation is False


def test_from_env_with_all_vars(monkeypatch):
    values = {
        "ANTHROPIC_API_KEY": "test_key",
        "ANTHROPIC_MODEL": "claude-test",
        "MODEL_TEMPERATURE": "0.2",
        "MODEL_MAX_TOKENS": "1024",
        "CONVERSATION_LENGTH": "8",
        "MAX_CONTEXT_TOKENS": "5000",
        "STARKNET_ACCOUNT_ADDRESS": "0x1",
        "STARKNET_PRIVATE_KEY": "0x2",
        "STARKNET_PROVIDER_URL": "https://rpc.example.com",
        "STARKNET_CHAIN": "MAINNET",
        "STRICT_MOVE_VALIDATION": "yes",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)

    config = AgentConfig.from_env()

    assert config.model == "claude-test"
    assert config.temperature == 0.2
    assert config.max_tokens == 1024
    assert config.conversation_length == 8
    assert config.max_context_tokens == 5000
    assert config.starknet_account_address == "0x1"
    assert config.starknet_private_key == "0x2"
    assert config.starknet_provider_url == "https://rpc.example.com"
    assert config.starknet_chain == "MAINNET"
    assert config.strict_move_validation is True


def test_get_maps_setting_names():
    config = AgentConfig(api_key="key", starknet_provider_url="https://rpc.example.com")

    assert config.get("STARKNET_PROVIDER_URL") == "https://rpc.example.com"
    assert config.get("STARKNET_PRIVATE_KEY") is None
    assert config.get("UNKNOWN") is None
