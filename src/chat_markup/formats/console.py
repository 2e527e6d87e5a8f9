"""Terminal rendering with rich."""

from typing import Optional

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from chat_markup.config import get_settings
from chat_markup.core.transcript import Bubble, FormattedTranscript
from chat_markup.formatting.ir import FragmentKind, RenderedDocument


class ConsoleRenderer:
    """Render formatted messages as rich renderables."""

    def __init__(self, code_style: Optional[str] = None) -> None:
        settings = get_settings()
        self.styles: dict[FragmentKind, str] = {
            FragmentKind.PLAIN: "",
            FragmentKind.BOLD: "bold",
            FragmentKind.ITALIC: "italic",
            FragmentKind.CODE: code_style or settings.code_style,
            FragmentKind.STRIKETHROUGH: "strike",
        }

    def to_text(self, document: RenderedDocument) -> Text:
        """Convert a document into a single rich Text, lines split by newlines."""
        text = Text()
        for index, line in enumerate(document.lines):
            if index > 0:
                text.append("\n")
            for fragment in line.fragments:
                text.append(fragment.text, style=self.styles[fragment.kind])
        return text

    def bubble_panel(self, bubble: Bubble) -> Align:
        panel = Panel(
            self.to_text(bubble.document),
            title=bubble.label,
            title_align="right" if bubble.is_user else "left",
            border_style="blue" if bubble.is_user else "magenta",
            expand=False,
        )
        return Align.right(panel) if bubble.is_user else Align.left(panel)

    def transcript_group(self, transcript: FormattedTranscript) -> Group:
        return Group(*(self.bubble_panel(bubble) for bubble in transcript.bubbles))

    def print(self, console: Console, document: RenderedDocument) -> None:
        console.print(self.to_text(document))

    def print_transcript(self, console: Console, transcript: FormattedTranscript) -> None:
        console.print(self.transcript_group(transcript))
