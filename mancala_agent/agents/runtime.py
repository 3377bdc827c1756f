"""
Agent runtime for the Mancala character.

Owns the chat model, the conversation history and the registered actions.
Action handlers use it to compose conversation state, run structured
extraction against the model and read settings.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.utils.json import parse_json_markdown

from mancala_agent.actions.base import Action, HandlerCallback
from mancala_agent.agents.config import AgentConfig
from mancala_agent.agents.memory_policy import MancalaMemoryPolicy, message_text
from mancala_agent.agents.state import MancalaAgentState
from mancala_agent.models.character import Character

logger = logging.getLogger(__name__)


class AgentRuntime:
    """
    Runtime that actions execute against.

    This runtime provides:
    - Settings lookup (character secrets first, then process configuration)
    - Conversation memory with a bounded recent window
    - Structured extraction through the configured chat model
    - An action registry addressed by name or simile
    """

    def __init__(
        self,
        config: AgentConfig,
        character: Character,
        llm: Optional[BaseChatModel] = None,
    ):
        """
        Initialize the runtime.

        Args:
            config: Process configuration
            character: Persona the agent speaks as
            llm: Chat model to use; a ChatAnthropic client is built when omitted
        """
        self.config = config
        self.character = character
        if llm is None:
            llm = ChatAnthropic(
                model=config.model,
                api_key=config.api_key,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
            )
        self.llm = llm
        self.memory_policy = MancalaMemoryPolicy(
            max_tokens=config.max_context_tokens,
            conversation_length=config.conversation_length,
        )
        self.messages: List[BaseMessage] = []
        self.actions: Dict[str, Action] = {}

    @property
    def agent_name(self) -> str:
        return self.character.name

    def get_setting(self, key: str) -> Optional[str]:
        """Resolve a setting from character secrets, config, then the environment."""
        secret = self.character.settings.secrets.get(key)
        if secret:
            return secret
        value = self.config.get(key)
        if value:
            return value
        return os.getenv(key)

    # Memory

    def remember(self, message: BaseMessage) -> None:
        self.messages.append(message)

    def _record_incoming(self, message: BaseMessage) -> None:
        if not self.messages or self.messages[-1] is not message:
            self.remember(message)

    async def compose_state(self, message: BaseMessage) -> MancalaAgentState:
        """Build a fresh state from the history plus ``message``."""
        self._record_incoming(message)

        recent = self.memory_policy.recent(self.messages)
        return {
            "messages": list(recent),
            "agent_name": self.agent_name,
            "sender_name": message.name or "user",
            "system": self.character.system,
            "bio": " ".join(self.character.bio),
            "recent_messages": self.memory_policy.format_messages(recent, self.agent_name),
        }

    async def update_recent_message_state(
        self,
        state: MancalaAgentState,
        message: Optional[BaseMessage] = None,
    ) -> MancalaAgentState:
        """Refresh the message window of an existing state.

        ``message``, when given, is recorded first so the turn being handled is
        part of the window.
        """
        if message is not None:
            self._record_incoming(message)

        recent = self.memory_policy.recent(self.messages)
        updated = dict(state)
        updated["messages"] = list(recent)
        updated["recent_messages"] = self.memory_policy.format_messages(
            recent, self.agent_name
        )
        return updated  # type: ignore[return-value]

    # Model

    async def generate_object(self, context: str) -> Optional[Dict[str, Any]]:
        """
        Ask the model for a JSON object described by ``context``.

        Returns:
            The parsed mapping, or None when the reply holds no JSON object.
            Errors from the model client propagate.
        """
        response = await self.llm.ainvoke(
            [SystemMessage(content=self.character.system), HumanMessage(content=context)]
        )
        text = message_text(response)

        try:
            parsed = parse_json_markdown(text)
        except (json.JSONDecodeError, ValueError):
            logger.warning("Model reply did not contain a JSON object: %.200s", text)
            return None

        if not isinstance(parsed, dict):
            logger.warning("Model reply was JSON but not an object: %r", parsed)
            return None
        return parsed

    # Actions

    def register_action(self, action: Action) -> None:
        self.actions[action.name] = action

    def find_action(self, name: str) -> Optional[Action]:
        """Return the action whose name or simile matches ``name``."""
        wanted = name.strip().upper()
        for action in self.actions.values():
            if action.name.upper() == wanted:
                return action
            if wanted in (simile.upper() for simile in action.similes):
                return action
        return None

    async def process_action(
        self,
        name: str,
        message: BaseMessage,
        callback: Optional[HandlerCallback] = None,
        state: Optional[MancalaAgentState] = None,
    ) -> bool:
        """Validate and run the named action for ``message``."""
        action = self.find_action(name)
        if action is None:
            raise KeyError(f"Unknown action: {name}")

        if not await action.validate(self, message):
            logger.info("Action %s is not eligible for this message", action.name)
            return False

        return await action.handler(self, message, state, {}, callback)
