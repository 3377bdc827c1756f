"""Prompt templates and context composition."""
from __future__ import annotations

import re
from typing import Any, Mapping

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def compose_context(state: Mapping[str, Any], template: str) -> str:
    """Fill ``{{key}}`` placeholders in ``template`` from ``state``.

    Unknown keys render as empty strings.
    """

    def _replace(match: re.Match[str]) -> str:
        value = state.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_replace, template)


MOVE_GAME_TEMPLATE = """Respond with a JSON markdown block containing the extracted game information and your strategic pit selection. Use null for any values that cannot be determined.

Example response:
```json
{
    "gameId": "0x123...",
    "selectedPit": 3,
    "opponentPits": [4,4,4,4,4,4],
    "opponentMancala": 10
}
```

{{recent_messages}}

Important Mancala Rules to Consider:
1. Distribution Rules:
   - Seeds are distributed counter-clockwise, one in each pit
   - Skip opponent's Mancala (pit 7) during distribution
   - If last seed lands in your Mancala, you get another turn
   - If last seed lands in an empty pit on your side, capture opposite pit's seeds

2. Capture Logic:
   - When last seed lands in empty pit on your side
   - You capture all seeds from opponent's opposite pit
   - Both captured seeds and capturing seed go to your Mancala
   - Can only capture if opposite pit has seeds

3. Game End:
   - Game ends when all pits on one side are empty
   - Remaining seeds go to owner's Mancala

Strategic Considerations:
1. Prioritize moves that:
   - Land in your Mancala for extra turns
   - Create capture opportunities
   - Protect your seeds from captures
2. Avoid moves that:
   - Leave your pits vulnerable to captures
   - Distribute seeds to opponent's strong positions

Given the recent messages about the Mancala game state:
1. Extract the game ID
2. Extract opponent's pit values
3. Extract opponent's mancala value
4. Analyze the position considering above rules
5. Select best pit to move from (1-6)

Respond with a JSON markdown block containing the game state and your selected move."""
