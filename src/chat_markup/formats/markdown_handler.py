"""Markdown output handler."""

from chat_markup.core.transcript import FormattedTranscript
from chat_markup.formats.base import TextFormatHandler
from chat_markup.formatting.ir import FragmentKind, RenderedDocument, RenderedLine


# Delimiters re-emitted around each styled fragment
DELIMITERS: dict[FragmentKind, str] = {
    FragmentKind.BOLD: "**",
    FragmentKind.ITALIC: "*",
    FragmentKind.CODE: "`",
    FragmentKind.STRIKETHROUGH: "~~",
}


class MarkdownHandler(TextFormatHandler):
    """Handler for markdown (.md) output.

    The output preserves markdown formatting so it can be read
    in any text editor or rendered by markdown viewers.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md",)

    def render_line(self, line: RenderedLine) -> str:
        parts: list[str] = []
        for fragment in line.fragments:
            delimiter = DELIMITERS.get(fragment.kind, "")
            parts.append(f"{delimiter}{fragment.text}{delimiter}")
        return "".join(parts)

    def render(self, document: RenderedDocument) -> str:
        return "\n".join(self.render_line(line) for line in document.lines)

    def render_transcript(self, transcript: FormattedTranscript) -> str:
        # Blank line between bubbles so each renders as its own paragraph
        return "\n\n".join(
            f"**{bubble.label}:** {self.render(bubble.document)}"
            for bubble in transcript.bubbles
        )
