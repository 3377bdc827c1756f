"""MOVE_GAME: pick a pit with the model and play it on the Mancala contract."""

import logging
from typing import Any, Dict, Optional, TypedDict

from langchain_core.messages import BaseMessage
from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, StateGraph

from mancala_agent.actions.base import Action, HandlerCallback, deliver
from mancala_agent.agents.prompts import MOVE_GAME_TEMPLATE, compose_context
from mancala_agent.chain.starknet import (
    get_starknet_account,
    get_starknet_provider,
    submit_move,
    validate_starknet_config,
)
from mancala_agent.models.content import (
    ActionResponse,
    MoveGameContent,
    is_move_game_content,
)

logger = logging.getLogger(__name__)

CONTRACT_ADDRESS = "0x073d5f249b9519777bcca407e74b7230c935abded8b1f21717f75a5a8ce962a5"

INVALID_CONTENT_TEXT = (
    "Could not determine game state or select a valid move. "
    "Please provide game ID and current board state."
)


class MoveGameFlow(TypedDict, total=False):
    """Graph state for one MOVE_GAME invocation."""

    context: str
    candidate: Optional[Dict[str, Any]]
    valid: bool
    response: ActionResponse
    success: bool


def _runtime(config: RunnableConfig):
    return config["configurable"]["runtime"]


async def extract_move(state: MoveGameFlow, config: RunnableConfig) -> MoveGameFlow:
    """Ask the model for a move candidate and check its shape."""

    runtime = _runtime(config)
    try:
        candidate = await runtime.generate_object(state["context"])
    except Exception:
        logger.exception("Model call failed while extracting the move")
        return {"candidate": None, "valid": False}

    logger.debug("Move game content: %.500s", candidate)
    try:
        valid = is_move_game_content(
            candidate, strict=runtime.config.strict_move_validation
        )
    except Exception:
        logger.exception("Could not check the extracted move")
        valid = False
    return {"candidate": candidate, "valid": valid}


async def reject_move(state: MoveGameFlow) -> MoveGameFlow:
    logger.error("Invalid content for MOVE_GAME action.")
    return {
        "success": False,
        "response": ActionResponse(
            text=INVALID_CONTENT_TEXT,
            content={"error": "Invalid move content"},
        ),
    }


async def play_move(state: MoveGameFlow, config: RunnableConfig) -> MoveGameFlow:
    """Submit the validated move; every failure becomes an error response."""

    runtime = _runtime(config)
    try:
        proposal = MoveGameContent.from_candidate(state["candidate"])
        provider = get_starknet_provider(runtime)
        account = get_starknet_account(runtime, provider)
        result = await submit_move(provider, account, proposal, CONTRACT_ADDRESS)
    except Exception as error:
        message = str(error) or error.__class__.__name__
        logger.error("Error making move: %s", message, exc_info=True)
        return {
            "success": False,
            "response": ActionResponse(
                text=f"Error making move: {message}",
                content={"error": message},
            ),
        }

    logger.info(
        "Successfully made move on pit %s in game %s! tx: %s",
        result.selected_pit,
        result.game_id,
        result.tx_hash,
    )
    return {
        "success": True,
        "response": ActionResponse(
            text=(
                f"I've selected pit {result.selected_pit} for my move. "
                f"Transaction hash: {result.tx_hash}"
            ),
            content=result.to_content(),
        ),
    }


def _route_candidate(state: MoveGameFlow) -> str:
    return "submit" if state.get("valid") else "reject"


def build_move_graph():
    """Compile the extract -> (submit | reject) graph."""

    builder = StateGraph(MoveGameFlow)
    builder.add_node("extract", extract_move)
    builder.add_node("reject", reject_move)
    builder.add_node("submit", play_move)
    builder.set_entry_point("extract")
    builder.add_conditional_edges(
        "extract",
        _route_candidate,
        {"submit": "submit", "reject": "reject"},
    )
    builder.add_edge("reject", END)
    builder.add_edge("submit", END)
    return builder.compile()


class MoveGameAction(Action):
    """Make a move in a Mancala game on Starknet."""

    name = "MOVE_GAME"
    similes = ["MAKE_MOVE", "PLAY_MOVE", "SELECT_PIT"]
    description = "Use this action when it's your turn to make a move in a Mancala game."
    examples = [
        [
            {
                "user": "{{user1}}",
                "content": {
                    "text": "It's your turn in game 0x123. Opponent's pits are [4,4,4,4,4,4] with 10 in mancala",
                },
            },
            {
                "user": "{{agent}}",
                "content": {
                    "text": "I'll analyze the position and make a strategic move from pit 3.",
                },
            },
        ],
    ]

    def __init__(self) -> None:
        self._graph = build_move_graph()

    async def validate(self, runtime, message: BaseMessage) -> bool:
        validate_starknet_config(runtime)
        return True

    async def handler(
        self,
        runtime,
        message: BaseMessage,
        state=None,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[HandlerCallback] = None,
    ) -> bool:
        logger.info("Starting MOVE_GAME handler...")

        if state is None:
            state = await runtime.compose_state(message)
        else:
            state = await runtime.update_recent_message_state(state, message)

        context = compose_context(state, MOVE_GAME_TEMPLATE)
        outcome = await self._graph.ainvoke(
            {"context": context},
            config={"configurable": {"runtime": runtime}},
        )

        await deliver(callback, outcome["response"])
        return outcome["success"]


move_game_action = MoveGameAction()
