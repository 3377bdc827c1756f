"""Run the Mancala agent from the command line."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from langchain_core.messages import AIMessage, HumanMessage

from mancala_agent.actions.move_game import move_game_action
from mancala_agent.agents.config import AgentConfig
from mancala_agent.agents.runtime import AgentRuntime
from mancala_agent.character import MANCALA_CHARACTER
from mancala_agent.chain.starknet import ConfigurationError
from mancala_agent.logging_utils import configure_root_logger
from mancala_agent.models.content import ActionResponse

logger = logging.getLogger("mancala_agent.cli")


def build_runtime(config: AgentConfig, llm=None) -> AgentRuntime:
    """Create a runtime with every action registered."""

    runtime = AgentRuntime(config, MANCALA_CHARACTER, llm=llm)
    runtime.register_action(move_game_action)
    return runtime


def make_printer(runtime: AgentRuntime):
    """Return a callback that prints replies and records them in memory."""

    def _print_reply(response: ActionResponse) -> None:
        print(f"{runtime.agent_name}: {response.text}")
        runtime.remember(AIMessage(content=response.text))

    return _print_reply


async def handle_message(
    runtime: AgentRuntime, text: str, action: str, sender: str = "user"
) -> bool:
    message = HumanMessage(content=text, name=sender)
    return await runtime.process_action(action, message, callback=make_printer(runtime))


async def run(message: Optional[str], action: str, sender: str) -> int:
    config = AgentConfig.from_env()
    runtime = build_runtime(config)

    if runtime.find_action(action) is None:
        logger.error("Unknown action %s", action)
        return 2

    try:
        if message is not None:
            ok = await handle_message(runtime, message, action, sender)
            return 0 if ok else 1

        print(f"Chatting with {runtime.agent_name}. Empty line or Ctrl-D to quit.")
        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            if not line.strip():
                break
            await handle_message(runtime, line, action, sender)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point"""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Play Mancala on Starknet with an LLM agent")
    parser.add_argument(
        "--message",
        "-m",
        type=str,
        help="Handle a single message and exit (interactive when omitted)",
    )
    parser.add_argument(
        "--action",
        type=str,
        default="MOVE_GAME",
        help="Action name or simile to dispatch (default: MOVE_GAME)",
    )
    parser.add_argument(
        "--sender",
        type=str,
        default="user",
        help="Speaker name recorded for incoming messages (default: user)",
    )
    args = parser.parse_args(argv)

    configure_root_logger()

    try:
        return asyncio.run(run(args.message, args.action, args.sender))
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
