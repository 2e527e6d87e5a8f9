"""Output format handlers for Chat Markup."""

from chat_markup.formats.base import FormatHandler, TextFormatHandler
from chat_markup.formats.txt_handler import TXTHandler
from chat_markup.formats.markdown_handler import MarkdownHandler
from chat_markup.formats.html_handler import HTMLHandler
from chat_markup.formats.json_handler import JSONHandler
from chat_markup.formats.docx_handler import DOCXHandler
from chat_markup.formats.console import ConsoleRenderer

__all__ = [
    "FormatHandler",
    "TextFormatHandler",
    "TXTHandler",
    "MarkdownHandler",
    "HTMLHandler",
    "JSONHandler",
    "DOCXHandler",
    "ConsoleRenderer",
]

# Map output file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TXTHandler,
    ".md": MarkdownHandler,
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
    ".json": JSONHandler,
    ".docx": DOCXHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for an output file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported output format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
