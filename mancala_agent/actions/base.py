"""Base class for runtime actions."""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional, Union

from langchain_core.messages import BaseMessage

from mancala_agent.models.content import ActionResponse

if TYPE_CHECKING:
    from mancala_agent.agents.runtime import AgentRuntime
    from mancala_agent.agents.state import MancalaAgentState

HandlerCallback = Callable[[ActionResponse], Union[Awaitable[Any], Any]]


async def deliver(callback: Optional[HandlerCallback], response: ActionResponse) -> None:
    """Invoke ``callback`` with ``response``, awaiting it when it is async."""

    if callback is None:
        return
    result = callback(response)
    if inspect.isawaitable(result):
        await result


class Action:
    """Something the agent can do in reply to a message.

    Subclasses set the class attributes and implement :meth:`validate` and
    :meth:`handler`.
    """

    name: str = ""
    similes: List[str] = []
    description: str = ""
    examples: List[List[Dict[str, Any]]] = []

    async def validate(self, runtime: "AgentRuntime", message: BaseMessage) -> bool:
        raise NotImplementedError

    async def handler(
        self,
        runtime: "AgentRuntime",
        message: BaseMessage,
        state: Optional["MancalaAgentState"] = None,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[HandlerCallback] = None,
    ) -> bool:
        raise NotImplementedError
