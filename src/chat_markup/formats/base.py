"""Abstract base classes for output format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from chat_markup.core.transcript import FormattedTranscript
from chat_markup.formatting.ir import RenderedDocument


class FormatHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler writes either a single formatted message or a whole
    formatted transcript to a file in its format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.html',))."""
        ...

    @abstractmethod
    def write(self, document: RenderedDocument, path: Path) -> None:
        """Write a formatted message to file.

        Args:
            document: The RenderedDocument to write
            path: Path to write the output file
        """
        ...

    @abstractmethod
    def write_transcript(self, transcript: FormattedTranscript, path: Path) -> None:
        """Write a formatted transcript to file.

        Args:
            transcript: The FormattedTranscript to write
            path: Path to write the output file
        """
        ...


class TextFormatHandler(FormatHandler):
    """Base class for handlers whose output is UTF-8 text."""

    @abstractmethod
    def render(self, document: RenderedDocument) -> str:
        """Render a formatted message to a string."""
        ...

    @abstractmethod
    def render_transcript(self, transcript: FormattedTranscript) -> str:
        """Render a formatted transcript to a string."""
        ...

    def write(self, document: RenderedDocument, path: Path) -> None:
        path.write_text(self.render(document), encoding="utf-8")

    def write_transcript(self, transcript: FormattedTranscript, path: Path) -> None:
        path.write_text(self.render_transcript(transcript), encoding="utf-8")
