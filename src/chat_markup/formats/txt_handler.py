"""Plain text output handler."""

from chat_markup.core.transcript import FormattedTranscript
from chat_markup.formats.base import TextFormatHandler
from chat_markup.formatting.ir import RenderedDocument


class TXTHandler(TextFormatHandler):
    """Handler for plain text (.txt) output.

    All markup is dropped; only the inner text of each fragment is kept.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def render(self, document: RenderedDocument) -> str:
        return document.plain_text

    def render_transcript(self, transcript: FormattedTranscript) -> str:
        return transcript.plain_text
