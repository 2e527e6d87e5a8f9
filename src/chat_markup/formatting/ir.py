"""Intermediate Representation for formatted chat messages.

This module defines the data structures that sit between raw message
text and a view layer. A message is formatted into a RenderedDocument
of lines, each line an ordered list of fragments tagged with a kind.
Handlers for HTML, terminal, Word and plain text paint this structure
without knowing anything about the markup grammar.
"""

from dataclasses import dataclass, field
from enum import Enum


class FragmentKind(str, Enum):
    """Presentation kind of a fragment."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True)
class MarkupSpan:
    """A located inline markup match within one line.

    Attributes:
        start: Offset of the opening delimiter (inclusive)
        end: Offset just past the closing delimiter (exclusive)
        raw_text: The matched text including delimiters
        inner_text: The text between the delimiters
        kind: Which markup produced the match
    """

    start: int
    end: int
    raw_text: str
    inner_text: str
    kind: FragmentKind

    def overlaps(self, other: "MarkupSpan") -> bool:
        """Check if the [start, end) ranges of two spans intersect."""
        return self.start < other.end and self.end > other.start


@dataclass
class Fragment:
    """A contiguous run of message text with a single presentation.

    Attributes:
        text: The text content, delimiters removed
        kind: Presentation kind (plain or a markup kind)
    """

    text: str
    kind: FragmentKind = FragmentKind.PLAIN

    @property
    def is_plain(self) -> bool:
        return self.kind is FragmentKind.PLAIN

    @property
    def bold(self) -> bool:
        return self.kind is FragmentKind.BOLD

    @property
    def italic(self) -> bool:
        return self.kind is FragmentKind.ITALIC

    @property
    def code(self) -> bool:
        return self.kind is FragmentKind.CODE

    @property
    def strikethrough(self) -> bool:
        return self.kind is FragmentKind.STRIKETHROUGH

    def to_dict(self) -> dict[str, str]:
        """Convert to the ``{"kind", "text"}`` wire shape."""
        return {"kind": self.kind.value, "text": self.text}

    def __str__(self) -> str:
        return self.text


@dataclass
class RenderedLine:
    """One source line after markup substitution."""

    fragments: list[Fragment] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the line text with delimiters stripped."""
        return "".join(fragment.text for fragment in self.fragments)

    @property
    def styled_fragments(self) -> list[Fragment]:
        return [f for f in self.fragments if not f.is_plain]

    def append(self, text: str, kind: FragmentKind = FragmentKind.PLAIN) -> None:
        """Append a new fragment to this line."""
        self.fragments.append(Fragment(text=text, kind=kind))

    def to_list(self) -> list[dict[str, str]]:
        return [fragment.to_dict() for fragment in self.fragments]

    def __str__(self) -> str:
        return self.plain_text


@dataclass
class RenderedDocument:
    """A formatted message: one RenderedLine per input line.

    An empty document (from empty or missing input) has no lines and
    renders nothing.

    Attributes:
        lines: Rendered lines in source order
    """

    lines: list[RenderedLine] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get all text content without styling, lines joined by newlines."""
        return "\n".join(line.plain_text for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def add_line(self, line: RenderedLine) -> None:
        """Add a rendered line to the document."""
        self.lines.append(line)

    def to_list(self) -> list[list[dict[str, str]]]:
        """Convert to a list of lines, each a list of fragment dicts."""
        return [line.to_list() for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)
