"""Tests for JSON handler."""

import json

from pathlib import Path

from chat_markup.core.transcript import TranscriptFormatter, parse_transcript
from chat_markup.formats.json_handler import JSONHandler
from chat_markup.formatting.parser import format_message


class TestJSONHandler:
    """Tests for the JSON format handler."""

    def test_render_lines_of_fragments(self):
        """Test the list-of-lines wire shape."""
        data = json.loads(JSONHandler().render(format_message("**hi** there\nbye")))

        assert data == [
            [
                {"kind": "bold", "text": "hi"},
                {"kind": "plain", "text": " there"},
            ],
            [{"kind": "plain", "text": "bye"}],
        ]

    def test_empty_document(self):
        assert json.loads(JSONHandler().render(format_message(""))) == []

    def test_non_ascii_kept(self):
        rendered = JSONHandler().render(format_message("*café* 💬"))

        assert "café" in rendered
        assert "💬" in rendered

    def test_write_transcript(self, tmp_path: Path):
        transcript = TranscriptFormatter().format(
            parse_transcript(
                {
                    "persona_name": "Selena",
                    "messages": [
                        {"id": 4, "sender": "influencer", "content": "a\n`b`"},
                    ],
                }
            )
        )

        output_path = tmp_path / "chat.json"
        JSONHandler().write_transcript(transcript, output_path)
        data = json.loads(output_path.read_text(encoding="utf-8"))

        assert data["persona_name"] == "Selena"
        assert [b["id"] for b in data["bubbles"]] == ["4-0", "4-1"]
        assert data["bubbles"][1]["sender"] == "influencer"
        assert data["bubbles"][1]["lines"] == [[{"kind": "code", "text": "b"}]]
