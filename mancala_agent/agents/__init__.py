"""Agent runtime, configuration and memory for the Mancala character."""

from .config import AgentConfig
from .runtime import AgentRuntime

__all__ = ["AgentConfig", "AgentRuntime"]
