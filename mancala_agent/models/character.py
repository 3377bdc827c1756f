"""Character (persona) model for the chat agent."""

from typing import Dict, List

from pydantic import BaseModel, Field


class MessageExample(BaseModel):
    """One turn of an example conversation."""

    user: str = Field(..., description="Speaker name or placeholder such as {{user1}}")
    text: str = Field(..., description="Message text")
    action: str | None = Field(None, description="Action the agent would run for this turn")


class CharacterStyle(BaseModel):
    """Writing style hints grouped by channel."""

    all: List[str] = Field(default_factory=list)
    chat: List[str] = Field(default_factory=list)
    post: List[str] = Field(default_factory=list)


class CharacterSettings(BaseModel):
    """Per-character settings. Secrets override the process configuration."""

    secrets: Dict[str, str] = Field(default_factory=dict)


class Character(BaseModel):
    """Persona data handed to the agent runtime."""

    name: str = Field(..., description="Name the agent speaks as")
    system: str = Field(..., description="System prompt")
    model_provider: str = Field("anthropic", description="Model provider identifier")
    plugins: List[str] = Field(default_factory=list)
    clients: List[str] = Field(default_factory=list)
    bio: List[str] = Field(default_factory=list)
    lore: List[str] = Field(default_factory=list)
    message_examples: List[List[MessageExample]] = Field(default_factory=list)
    post_examples: List[str] = Field(default_factory=list)
    adjectives: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    style: CharacterStyle = Field(default_factory=CharacterStyle)
    settings: CharacterSettings = Field(default_factory=CharacterSettings)
