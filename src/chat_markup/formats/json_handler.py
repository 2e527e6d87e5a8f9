"""JSON output handler for structured rendering data."""

import json

from chat_markup.core.transcript import FormattedTranscript
from chat_markup.formats.base import TextFormatHandler
from chat_markup.formatting.ir import RenderedDocument


class JSONHandler(TextFormatHandler):
    """Handler for JSON (.json) output.

    A message is written as a list of lines, each a list of
    ``{"kind": ..., "text": ...}`` fragments.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def render(self, document: RenderedDocument) -> str:
        return json.dumps(document.to_list(), indent=self.indent, ensure_ascii=False)

    def render_transcript(self, transcript: FormattedTranscript) -> str:
        data = {
            "persona_name": transcript.persona_name,
            "bubbles": [
                {
                    "id": bubble.id,
                    "sender": bubble.sender.value,
                    "label": bubble.label,
                    "lines": bubble.document.to_list(),
                }
                for bubble in transcript.bubbles
            ],
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
