"""Data models"""
from mancala_agent.models.character import (
    Character,
    CharacterSettings,
    CharacterStyle,
    MessageExample,
)
from mancala_agent.models.content import (
    PITS_PER_SIDE,
    ActionResponse,
    MoveGameContent,
    TransactionResult,
    is_move_game_content,
)

__all__ = [
    "Character",
    "CharacterSettings",
    "CharacterStyle",
    "MessageExample",
    "PITS_PER_SIDE",
    "ActionResponse",
    "MoveGameContent",
    "TransactionResult",
    "is_move_game_content",
]
