"""Tests for HTML handler."""

import pytest
from pathlib import Path

from chat_markup.core.transcript import TranscriptFormatter, parse_transcript
from chat_markup.formats.html_handler import HTMLHandler, escape_html
from chat_markup.formatting.parser import format_message


class TestHTMLHandler:
    """Tests for the HTML format handler."""

    @pytest.fixture
    def handler(self) -> HTMLHandler:
        return HTMLHandler()

    def test_supported_extensions(self, handler: HTMLHandler):
        assert ".html" in handler.supported_extensions
        assert ".htm" in handler.supported_extensions

    def test_fragment_tags(self, handler: HTMLHandler):
        """Test each kind maps to its element and class."""
        html = handler.render(format_message("a **b** *c* `d` ~~e~~"))

        assert "<span>a </span>" in html
        assert '<strong class="font-bold">b</strong>' in html
        assert '<em class="italic">c</em>' in html
        assert (
            '<code class="bg-gray-700 px-1 py-0.5 rounded text-sm font-mono">d</code>'
            in html
        )
        assert '<del class="line-through">e</del>' in html

    def test_line_gap_after_first_line(self, handler: HTMLHandler):
        """Test that only lines after the first get the gap class."""
        html = handler.render(format_message("line1\nline2"))

        assert html == (
            '<div class="whitespace-pre-wrap break-words">'
            "<div><span>line1</span></div>"
            '<div class="mt-2"><span>line2</span></div>'
            "</div>"
        )

    def test_custom_classes(self):
        handler = HTMLHandler(line_gap_class="gap", wrapper_class="msg")
        html = handler.render(format_message("a\nb"))

        assert html.startswith('<div class="msg">')
        assert '<div class="gap">' in html

    def test_classes_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHAT_MARKUP_LINE_GAP_CLASS", "mt-4")

        html = HTMLHandler().render(format_message("a\nb"))

        assert '<div class="mt-4">' in html

    def test_escapes_special_chars(self, handler: HTMLHandler):
        """Test HTML special characters are escaped."""
        html = handler.render(format_message("<script>alert('x')</script> **&**"))

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert '<strong class="font-bold">&amp;</strong>' in html

    def test_escape_html_quotes(self):
        assert escape_html('"a"') == "&quot;a&quot;"

    def test_empty_document_renders_nothing(self, handler: HTMLHandler):
        assert handler.render(format_message(None)) == ""

    def test_render_transcript_bubbles(self, handler: HTMLHandler):
        """Test user bubbles align right and persona bubbles align left."""
        transcript = TranscriptFormatter().format(
            parse_transcript(
                {
                    "persona_name": "Selena",
                    "messages": [
                        {"id": "1", "sender": "user", "content": "hi"},
                        {"id": "2", "sender": "influencer", "content": "*hey*"},
                    ],
                }
            )
        )

        html = handler.render_transcript(transcript)

        assert "<h2>Selena</h2>" in html
        assert 'class="flex items-end justify-end" data-id="1"' in html
        assert 'class="flex items-end justify-start" data-id="2"' in html
        assert "bg-primary text-primary-foreground" in html
        assert "bg-secondary text-secondary-foreground" in html
        assert '<em class="italic">hey</em>' in html

    def test_write(self, handler: HTMLHandler, tmp_path: Path):
        output_path = tmp_path / "out.html"
        handler.write(format_message("**hi**"), output_path)

        assert "font-bold" in output_path.read_text(encoding="utf-8")
