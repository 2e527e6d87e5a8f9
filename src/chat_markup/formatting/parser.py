"""Inline markup formatter for chat message text."""

import logging
import re
from typing import Optional

from chat_markup.formatting.ir import (
    FragmentKind,
    MarkupSpan,
    RenderedLine,
    RenderedDocument,
)

logger = logging.getLogger(__name__)


class MessageFormatter:
    """Format chat message markup into a RenderedDocument.

    Each line goes through three steps:
    1. classify - every pattern is matched independently
    2. resolve - overlapping matches are dropped, leftmost wins
    3. render_line - plain and styled fragments are emitted in order

    Styling is flat: text inside an accepted span is never parsed again,
    so ``**bold *nested* text**`` keeps its inner asterisks.
    """

    # Precedence table: at equal start offsets, earlier entries win.
    # Empty matches such as "**" consume their delimiters but are not
    # reported as spans.
    PATTERNS: tuple[tuple[FragmentKind, re.Pattern], ...] = (
        (FragmentKind.BOLD, re.compile(r"\*\*(.*?)\*\*")),
        (FragmentKind.ITALIC, re.compile(r"\*(.*?)\*")),
        (FragmentKind.CODE, re.compile(r"`(.*?)`")),
        (FragmentKind.STRIKETHROUGH, re.compile(r"~~(.*?)~~")),
    )

    PRECEDENCE: dict[FragmentKind, int] = {
        kind: index for index, (kind, _) in enumerate(PATTERNS)
    }

    def format(self, content: Optional[str]) -> RenderedDocument:
        """Format message text into a RenderedDocument.

        Args:
            content: Raw message text, possibly multi-line, or None

        Returns:
            RenderedDocument with one line per ``\\n``-separated input line,
            or an empty document for empty/missing input
        """
        doc = RenderedDocument()
        if not content:
            return doc

        for line in content.split("\n"):
            spans = self.resolve(self.classify(line))
            doc.add_line(self.render_line(line, spans))

        return doc

    def classify(self, line: str) -> list[MarkupSpan]:
        """Find every markup match in a single line.

        Patterns are applied independently, so the result may contain
        overlapping spans. Ordering follows the precedence table, then
        match position.
        """
        spans: list[MarkupSpan] = []
        for kind, pattern in self.PATTERNS:
            for match in pattern.finditer(line):
                if not match.group(1):
                    continue
                spans.append(
                    MarkupSpan(
                        start=match.start(),
                        end=match.end(),
                        raw_text=match.group(0),
                        inner_text=match.group(1),
                        kind=kind,
                    )
                )
        return spans

    def resolve(self, spans: list[MarkupSpan]) -> list[MarkupSpan]:
        """Select a non-overlapping subset of spans, leftmost first.

        Returns:
            Spans ordered by start offset where each span ends at or
            before the next one starts
        """
        ordered = sorted(
            spans, key=lambda span: (span.start, self.PRECEDENCE[span.kind])
        )

        # Accepted spans are disjoint and ordered, so the last one has the
        # furthest end and is the only one a later candidate can overlap.
        accepted: list[MarkupSpan] = []
        for span in ordered:
            if accepted and span.overlaps(accepted[-1]):
                continue
            accepted.append(span)

        if len(accepted) != len(spans):
            logger.debug(
                "Dropped %d overlapping span(s), kept %d",
                len(spans) - len(accepted),
                len(accepted),
            )
        return accepted

    def render_line(self, line: str, spans: list[MarkupSpan]) -> RenderedLine:
        """Build a RenderedLine from a line and its resolved spans."""
        rendered = RenderedLine()
        if not spans:
            # Blank lines keep an empty fragment so they hold their position
            rendered.append(line)
            return rendered

        cursor = 0
        for span in spans:
            if cursor < span.start:
                rendered.append(line[cursor : span.start])
            rendered.append(span.inner_text, span.kind)
            cursor = span.end

        if cursor < len(line):
            rendered.append(line[cursor:])

        return rendered

    def to_plain_text(self, doc: RenderedDocument) -> str:
        """Convert a RenderedDocument to plain text."""
        return doc.plain_text


_default_formatter = MessageFormatter()


def format_message(content: Optional[str]) -> RenderedDocument:
    """Format message text with a shared MessageFormatter."""
    return _default_formatter.format(content)
