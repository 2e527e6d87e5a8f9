"""HTML output handler using the chat site's utility classes."""

from typing import Optional

from chat_markup.config import get_settings
from chat_markup.core.transcript import Bubble, FormattedTranscript
from chat_markup.formats.base import TextFormatHandler
from chat_markup.formatting.ir import (
    Fragment,
    FragmentKind,
    RenderedDocument,
    RenderedLine,
)


# (tag, class) per fragment kind
FRAGMENT_TAGS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.PLAIN: ("span", ""),
    FragmentKind.BOLD: ("strong", "font-bold"),
    FragmentKind.ITALIC: ("em", "italic"),
    FragmentKind.CODE: (
        "code",
        "bg-gray-700 px-1 py-0.5 rounded text-sm font-mono",
    ),
    FragmentKind.STRIKETHROUGH: ("del", "line-through"),
}

USER_ROW_CLASS = "flex items-end justify-end"
PERSONA_ROW_CLASS = "flex items-end justify-start"
USER_BUBBLE_CLASS = (
    "p-3 rounded-xl max-w-xs lg:max-w-md bg-primary text-primary-foreground"
)
PERSONA_BUBBLE_CLASS = (
    "p-3 rounded-xl max-w-xs lg:max-w-md bg-secondary text-secondary-foreground"
)


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


class HTMLHandler(TextFormatHandler):
    """Handler for HTML (.html, .htm) output.

    Lines after the first get the line gap class so consecutive
    lines read as separate paragraphs.
    """

    def __init__(
        self,
        line_gap_class: Optional[str] = None,
        wrapper_class: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.line_gap_class = line_gap_class or settings.line_gap_class
        self.wrapper_class = wrapper_class or settings.wrapper_class

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def _fragment_to_html(self, fragment: Fragment) -> str:
        tag, css_class = FRAGMENT_TAGS[fragment.kind]
        class_attr = f' class="{css_class}"' if css_class else ""
        return f"<{tag}{class_attr}>{escape_html(fragment.text)}</{tag}>"

    def _line_to_html(self, line: RenderedLine, index: int) -> str:
        class_attr = f' class="{self.line_gap_class}"' if index > 0 else ""
        inner = "".join(self._fragment_to_html(f) for f in line.fragments)
        return f"<div{class_attr}>{inner}</div>"

    def render(self, document: RenderedDocument) -> str:
        """Render a message as a wrapper div holding one div per line."""
        if document.is_empty:
            return ""
        lines = "".join(
            self._line_to_html(line, i) for i, line in enumerate(document.lines)
        )
        return f'<div class="{self.wrapper_class}">{lines}</div>'

    def _bubble_to_html(self, bubble: Bubble) -> str:
        row_class = USER_ROW_CLASS if bubble.is_user else PERSONA_ROW_CLASS
        bubble_class = USER_BUBBLE_CLASS if bubble.is_user else PERSONA_BUBBLE_CLASS
        return (
            f'<div class="{row_class}" data-id="{escape_html(bubble.id)}" '
            f'data-sender="{bubble.sender.value}">'
            f'<div class="{bubble_class}">{self.render(bubble.document)}</div>'
            f"</div>"
        )

    def render_transcript(self, transcript: FormattedTranscript) -> str:
        html_parts = [
            '<div class="chat-transcript">',
            f"  <h2>{escape_html(transcript.persona_name)}</h2>",
        ]
        html_parts.extend(
            f"  {self._bubble_to_html(bubble)}" for bubble in transcript.bubbles
        )
        html_parts.append("</div>")
        return "\n".join(html_parts)
