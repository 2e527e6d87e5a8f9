"""Tests for TXT handler."""

from pathlib import Path

from chat_markup.core.transcript import TranscriptFormatter, parse_transcript
from chat_markup.formats.txt_handler import TXTHandler
from chat_markup.formatting.ir import (
    Fragment,
    FragmentKind,
    RenderedDocument,
    RenderedLine,
)
from chat_markup.formatting.parser import format_message


class TestTXTHandler:
    """Tests for the TXT format handler."""

    def test_supported_extensions(self):
        """Test that handler supports .txt extension."""
        handler = TXTHandler()
        assert ".txt" in handler.supported_extensions

    def test_write_plain_text(self, tmp_path: Path):
        """Test writing plain text without formatting."""
        doc = RenderedDocument(lines=[RenderedLine([Fragment("Hello, world!")])])

        output_path = tmp_path / "output.txt"
        TXTHandler().write(doc, output_path)

        assert output_path.read_text(encoding="utf-8") == "Hello, world!"

    def test_write_drops_markup(self, tmp_path: Path):
        """Test that styled fragments are written as bare text."""
        doc = RenderedDocument(
            lines=[
                RenderedLine(
                    [
                        Fragment("Hello "),
                        Fragment("world", FragmentKind.BOLD),
                        Fragment("!"),
                    ]
                )
            ]
        )

        output_path = tmp_path / "output.txt"
        TXTHandler().write(doc, output_path)

        assert output_path.read_text(encoding="utf-8") == "Hello world!"

    def test_lines_joined_by_newline(self):
        """Test writing multiple lines."""
        doc = format_message("First *line*.\nSecond line.")

        assert TXTHandler().render(doc) == "First line.\nSecond line."

    def test_empty_document(self):
        assert TXTHandler().render(format_message("")) == ""

    def test_render_transcript(self, tmp_path: Path):
        transcript = TranscriptFormatter(persona_name="Ivy").format(
            parse_transcript(
                [
                    {"id": "1", "sender": "user", "content": "hi"},
                    {"id": "2", "sender": "influencer", "content": "~~no~~ yes"},
                ]
            )
        )

        output_path = tmp_path / "chat.txt"
        TXTHandler().write_transcript(transcript, output_path)

        assert output_path.read_text(encoding="utf-8") == "You: hi\nIvy: no yes"
