"""
Conversation state handed to action handlers and prompt templates.
"""

from typing import TypedDict, List, Annotated
from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages


class MancalaAgentState(TypedDict):
    """
    State composed from the conversation for one action invocation.

    Template placeholders such as ``{{recent_messages}}`` are filled from the
    string fields of this mapping.
    """

    # Conversation history with automatic message accumulation
    messages: Annotated[List[BaseMessage], add_messages]

    agent_name: str
    sender_name: str
    system: str
    bio: str

    # Rendered "speaker: text" lines for the trimmed history
    recent_messages: str
