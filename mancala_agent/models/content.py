"""Pydantic models for move proposals and action responses."""
from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

PITS_PER_SIDE = 6

Number = Union[int, float]


def _is_number(value: Any) -> bool:
    """Return True for ints and floats, excluding booleans."""

    return isinstance(value, Real) and not isinstance(value, bool)


def _is_whole(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_count(value: Any) -> bool:
    return _is_whole(value) and value >= 0


def is_move_game_content(candidate: Any, *, strict: bool = False) -> bool:
    """Check the shape of a model-produced move candidate.

    Only types and the pit-row length are checked. With ``strict`` enabled the
    selected pit must also be a whole number in 1..6 and every seed count a
    non-negative whole number.
    """

    if not isinstance(candidate, Mapping):
        return False

    game_id = candidate.get("gameId")
    selected_pit = candidate.get("selectedPit")
    opponent_pits = candidate.get("opponentPits")
    opponent_mancala = candidate.get("opponentMancala")

    valid = (
        isinstance(game_id, str)
        and _is_number(selected_pit)
        and isinstance(opponent_pits, (list, tuple))
        and len(opponent_pits) == PITS_PER_SIDE
        and _is_number(opponent_mancala)
    )
    if not valid or not strict:
        return valid

    return (
        _is_count(selected_pit)
        and 1 <= selected_pit <= PITS_PER_SIDE
        and all(_is_count(seeds) for seeds in opponent_pits)
        and _is_count(opponent_mancala)
    )


class MoveGameContent(BaseModel):
    """A move proposal extracted from the conversation."""

    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(..., alias="gameId", description="On-chain game identifier")
    selected_pit: Number = Field(..., alias="selectedPit", description="Pit to sow from (1-6)")
    opponent_pits: List[Any] = Field(
        ..., alias="opponentPits", description="Seed counts in the opponent's six pits"
    )
    opponent_mancala: Number = Field(
        ..., alias="opponentMancala", description="Seeds in the opponent's store"
    )

    @classmethod
    def from_candidate(cls, candidate: Mapping[str, Any]) -> "MoveGameContent":
        """Build a proposal from a candidate that passed :func:`is_move_game_content`."""

        return cls(
            gameId=candidate["gameId"],
            selectedPit=candidate["selectedPit"],
            opponentPits=list(candidate["opponentPits"]),
            opponentMancala=candidate["opponentMancala"],
        )


class TransactionResult(BaseModel):
    """Outcome of a submitted move transaction."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Whether the move was submitted")
    tx_hash: str = Field(..., alias="txHash", description="Transaction hash")
    game_id: str = Field(..., alias="gameId", description="Game the move was made in")
    selected_pit: Number = Field(..., alias="selectedPit", description="Pit that was played")

    def to_content(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ActionResponse(BaseModel):
    """Payload delivered to a handler callback."""

    text: str = Field(..., description="Human-readable message for the conversation")
    content: Dict[str, Any] = Field(default_factory=dict, description="Structured result")
