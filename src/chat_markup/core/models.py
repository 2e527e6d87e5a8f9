"""Chat message models for exported conversations."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who wrote a message."""

    USER = "user"
    INFLUENCER = "influencer"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single stored chat message.

    Attributes:
        id: Message identifier (stringified if numeric)
        sender: Author of the message
        content: Raw message text with inline markup
        created_at: When the message was stored, if known
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    sender: Sender = Sender.INFLUENCER
    content: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


class Transcript(BaseModel):
    """An ordered conversation between a user and a persona."""

    model_config = ConfigDict(extra="ignore")

    persona_name: Optional[str] = None
    messages: list[ChatMessage] = Field(default_factory=list)
