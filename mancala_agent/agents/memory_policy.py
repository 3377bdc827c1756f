"""
Memory policy for the Mancala agent.

Decides which part of the conversation is rendered into prompts and trims the
history when it approaches the model's context limit.
"""

import logging
from typing import List

from langchain_core.messages import AIMessage, BaseMessage, SystemMessage
from langchain_core.messages.utils import count_tokens_approximately, trim_messages

logger = logging.getLogger(__name__)


class MancalaMemoryPolicy:
    """
    Keeps the recent window of a conversation within a token budget.

    - System messages never count towards the window
    - Only the last ``conversation_length`` messages are rendered
    - Older messages are dropped first when the token threshold is crossed
    """

    def __init__(self, max_tokens: int = 150000, conversation_length: int = 32):
        """
        Initialize memory policy.

        Args:
            max_tokens: Maximum tokens before trimming
            conversation_length: Number of recent messages rendered into prompts
        """
        self.max_tokens = max_tokens
        self.conversation_length = conversation_length
        # Trigger compression at 70% of max
        self.compression_threshold = int(max_tokens * 0.7)

    def should_trim_memory(self, messages: List[BaseMessage]) -> bool:
        """Return True when the history is over the compression threshold."""
        return count_tokens_approximately(messages) > self.compression_threshold

    def trim_conversation(self, messages: List[BaseMessage]) -> List[BaseMessage]:
        """Drop the oldest messages until the history fits the threshold."""
        status = self.get_compression_status(messages)
        result = trim_messages(
            messages,
            max_tokens=self.compression_threshold,
            strategy="last",
            token_counter=count_tokens_approximately,
        )
        logger.info(
            "Trimmed conversation at %.0f%% of budget: %d -> %d messages, %d -> %d tokens",
            status["usage_percent"],
            status["message_count"],
            len(result),
            status["current_tokens"],
            count_tokens_approximately(result),
        )
        return result

    def recent(self, messages: List[BaseMessage]) -> List[BaseMessage]:
        """Return the window of messages that should appear in prompts."""
        window = [m for m in messages if not isinstance(m, SystemMessage)]
        window = window[-self.conversation_length:] if self.conversation_length > 0 else []
        if self.should_trim_memory(window):
            window = self.trim_conversation(window)
        return window

    def format_messages(self, messages: List[BaseMessage], agent_name: str) -> str:
        """Render messages as ``speaker: text`` lines."""
        lines = []
        for message in messages:
            if isinstance(message, AIMessage):
                speaker = agent_name
            else:
                speaker = message.name or "user"
            lines.append(f"{speaker}: {message_text(message)}")
        return "\n".join(lines)

    def get_compression_status(self, messages: List[BaseMessage]) -> dict:
        """Report token usage for the given history."""
        current_tokens = count_tokens_approximately(messages)
        return {
            "current_tokens": current_tokens,
            "max_tokens": self.max_tokens,
            "compression_threshold": self.compression_threshold,
            "usage_percent": (current_tokens / self.max_tokens) * 100,
            "needs_trimming": current_tokens > self.compression_threshold,
            "message_count": len(messages),
        }


def message_text(message: BaseMessage) -> str:
    """Flatten string or content-block message bodies to plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
