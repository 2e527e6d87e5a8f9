"""Main rendering orchestrator."""

import logging
from pathlib import Path
from typing import Optional, Union

from chat_markup.core.transcript import (
    FormattedTranscript,
    TranscriptError,
    TranscriptFormatter,
    load_transcript,
)
from chat_markup.formats import FormatHandler, get_handler
from chat_markup.formatting.ir import RenderedDocument
from chat_markup.formatting.parser import MessageFormatter

logger = logging.getLogger(__name__)

# Inputs holding a single raw message
MESSAGE_EXTENSIONS = (".txt", ".md")
TRANSCRIPT_EXTENSIONS = (".json",)
INPUT_EXTENSIONS = MESSAGE_EXTENSIONS + TRANSCRIPT_EXTENSIONS


class RenderError(Exception):
    """Error while rendering a message or transcript to a file."""

    pass


class MessageRenderer:
    """Orchestrates reading, formatting and writing chat content.

    Pipeline:
    1. Read input file (raw message text or transcript JSON)
    2. Format message markup into rendered documents
    3. Pick an output handler from the output extension
    4. Write the output file
    """

    def __init__(
        self,
        persona_name: Optional[str] = None,
        formatter: Optional[MessageFormatter] = None,
    ) -> None:
        self.formatter = formatter or MessageFormatter()
        self.transcript_formatter = TranscriptFormatter(
            formatter=self.formatter,
            persona_name=persona_name,
        )

    def render_text(self, content: Optional[str]) -> RenderedDocument:
        """Format raw message text."""
        return self.formatter.format(content)

    def render_transcript(self, source: Union[Path, str]) -> FormattedTranscript:
        """Load and format a transcript from a JSON path or string.

        Raises:
            RenderError: If the transcript cannot be loaded
        """
        try:
            transcript = load_transcript(source)
        except TranscriptError as e:
            raise RenderError(str(e)) from e
        return self.transcript_formatter.format(transcript)

    def load(self, input_path: Path) -> Union[RenderedDocument, FormattedTranscript]:
        """Read and format an input file.

        Raises:
            RenderError: If the file is missing, unreadable or unsupported
        """
        if not input_path.exists():
            raise RenderError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext in TRANSCRIPT_EXTENSIONS:
            return self.render_transcript(input_path)
        if ext not in MESSAGE_EXTENSIONS:
            raise RenderError(
                f"Unsupported input format: {ext}. "
                f"Supported: {', '.join(INPUT_EXTENSIONS)}"
            )

        try:
            content = input_path.read_text(encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Cannot read {input_path}: {e}") from e
        return self.render_text(content)

    def get_output_handler(self, output_path: Path) -> FormatHandler:
        try:
            handler_class = get_handler(output_path.suffix)
        except ValueError as e:
            raise RenderError(str(e)) from e
        logger.debug("Using %s for %s", handler_class.__name__, output_path)
        return handler_class()

    def write(
        self,
        result: Union[RenderedDocument, FormattedTranscript],
        output_path: Path,
    ) -> None:
        """Write a formatted message or transcript with the matching handler."""
        handler = self.get_output_handler(output_path)
        try:
            if isinstance(result, FormattedTranscript):
                handler.write_transcript(result, output_path)
            else:
                handler.write(result, output_path)
        except OSError as e:
            raise RenderError(f"Cannot write {output_path}: {e}") from e

    def render_file(
        self,
        input_path: Path,
        output_path: Path,
    ) -> Union[RenderedDocument, FormattedTranscript]:
        """Render an input file to an output file.

        Args:
            input_path: Path to a message (.txt, .md) or transcript (.json)
            output_path: Path for the output; its extension picks the format

        Returns:
            The RenderedDocument or FormattedTranscript that was written

        Raises:
            RenderError: If rendering fails
        """
        # Fail on the output format before doing any work
        self.get_output_handler(output_path)

        result = self.load(input_path)
        self.write(result, output_path)
        return result
