"""Actions the agent runtime can dispatch."""

from .base import Action, HandlerCallback
from .move_game import MoveGameAction, move_game_action

__all__ = ["Action", "HandlerCallback", "MoveGameAction", "move_game_action"]
