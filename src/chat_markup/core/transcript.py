"""Transcript loading and bubble expansion.

A stored message may span several lines. The chat view shows every
line as its own bubble, so a transcript is expanded into bubbles before
formatting, skipping lines that are empty or whitespace-only.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from chat_markup.config import get_settings
from chat_markup.core.models import ChatMessage, Sender, Transcript
from chat_markup.formatting.ir import RenderedDocument
from chat_markup.formatting.parser import MessageFormatter

logger = logging.getLogger(__name__)

SYSTEM_LABEL = "System"


class TranscriptError(Exception):
    """Transcript data could not be loaded or validated."""

    pass


@dataclass
class Bubble:
    """One displayed chat bubble.

    Attributes:
        id: Bubble identifier (``"{message_id}-{index}"`` for split messages)
        sender: Author of the source message
        label: Display name for the sender
        document: Formatted content of this bubble
    """

    id: str
    sender: Sender
    label: str
    document: RenderedDocument

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


@dataclass
class FormattedTranscript:
    """A transcript expanded into formatted bubbles."""

    bubbles: list[Bubble] = field(default_factory=list)
    persona_name: str = ""

    @property
    def plain_text(self) -> str:
        return "\n".join(
            f"{bubble.label}: {bubble.document.plain_text}"
            for bubble in self.bubbles
        )

    def __len__(self) -> int:
        return len(self.bubbles)


def parse_transcript(data: Any) -> Transcript:
    """Validate decoded JSON into a Transcript.

    Accepts either a list of message objects or an object with a
    ``messages`` list.

    Raises:
        TranscriptError: If the data does not match the message schema
    """
    if isinstance(data, list):
        data = {"messages": data}
    if not isinstance(data, dict):
        raise TranscriptError(
            f"Expected a list of messages or an object, got {type(data).__name__}"
        )

    # Stored ids are often integers
    messages = data.get("messages")
    if isinstance(messages, list):
        data = {
            **data,
            "messages": [
                {**message, "id": str(message["id"])}
                if isinstance(message, dict) and isinstance(message.get("id"), int)
                else message
                for message in messages
            ],
        }

    try:
        return Transcript.model_validate(data)
    except ValidationError as e:
        raise TranscriptError(f"Invalid transcript: {e}") from e


def load_transcript(source: Union[Path, str]) -> Transcript:
    """Load a transcript from a JSON file path or a JSON string."""
    if isinstance(source, Path):
        try:
            raw = source.read_text(encoding="utf-8")
        except OSError as e:
            raise TranscriptError(f"Cannot read transcript {source}: {e}") from e
    else:
        raw = source

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TranscriptError(f"Transcript is not valid JSON: {e}") from e

    return parse_transcript(data)


class TranscriptFormatter:
    """Expand transcript messages into formatted chat bubbles."""

    def __init__(
        self,
        formatter: Optional[MessageFormatter] = None,
        persona_name: Optional[str] = None,
        user_label: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.formatter = formatter or MessageFormatter()
        self.persona_name = persona_name or settings.persona_name
        self.user_label = user_label or settings.user_label

    def label_for(self, sender: Sender, persona_name: Optional[str] = None) -> str:
        """Get the display label for a sender."""
        if sender is Sender.USER:
            return self.user_label
        if sender is Sender.SYSTEM:
            return SYSTEM_LABEL
        return persona_name or self.persona_name

    def expand(self, message: ChatMessage) -> list[tuple[str, str]]:
        """Split a message into (bubble_id, line) pairs.

        Multi-line messages get one bubble per line with ids suffixed by
        the line index. Blank and whitespace-only lines are skipped.
        """
        content = message.content or ""
        if "\n" in content:
            pairs = [
                (f"{message.id}-{index}", line)
                for index, line in enumerate(content.split("\n"))
            ]
        else:
            pairs = [(message.id, content)]
        return [(bubble_id, line) for bubble_id, line in pairs if line.strip()]

    def format(self, transcript: Transcript) -> FormattedTranscript:
        """Format every message in a transcript into bubbles."""
        persona = transcript.persona_name or self.persona_name
        result = FormattedTranscript(persona_name=persona)

        for message in transcript.messages:
            label = self.label_for(message.sender, persona)
            for bubble_id, line in self.expand(message):
                result.bubbles.append(
                    Bubble(
                        id=bubble_id,
                        sender=message.sender,
                        label=label,
                        document=self.formatter.format(line),
                    )
                )

        logger.debug(
            "Expanded %d message(s) into %d bubble(s)",
            len(transcript.messages),
            len(result.bubbles),
        )
        return result
