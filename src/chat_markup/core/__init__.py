"""Chat transcript models and formatting."""

from chat_markup.core.models import Sender, ChatMessage, Transcript
from chat_markup.core.transcript import (
    Bubble,
    FormattedTranscript,
    TranscriptError,
    TranscriptFormatter,
    load_transcript,
    parse_transcript,
)

__all__ = [
    "Sender",
    "ChatMessage",
    "Transcript",
    "Bubble",
    "FormattedTranscript",
    "TranscriptError",
    "TranscriptFormatter",
    "load_transcript",
    "parse_transcript",
]
