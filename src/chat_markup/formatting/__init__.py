"""Formatting utilities for parsing and rendering chat message markup."""

from chat_markup.formatting.ir import (
    FragmentKind,
    MarkupSpan,
    Fragment,
    RenderedLine,
    RenderedDocument,
)
from chat_markup.formatting.parser import MessageFormatter, format_message

__all__ = [
    "FragmentKind",
    "MarkupSpan",
    "Fragment",
    "RenderedLine",
    "RenderedDocument",
    "MessageFormatter",
    "format_message",
]
