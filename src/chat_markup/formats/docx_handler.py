"""Microsoft Word (.docx) output handler."""

from pathlib import Path
from typing import Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from chat_markup.config import get_settings
from chat_markup.core.transcript import Bubble, FormattedTranscript
from chat_markup.formats.base import FormatHandler
from chat_markup.formatting.ir import Fragment, RenderedDocument, RenderedLine


CODE_BG_COLOR = "E8EAED"  # Light grey
LABEL_COLOR = RGBColor(100, 100, 100)


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) files.

    Uses python-docx with one paragraph per rendered line and one
    run per fragment, so bold, italic, code and strikethrough map to
    run-level formatting.
    """

    def __init__(
        self,
        font_name: Optional[str] = None,
        code_font_name: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.font_name = font_name or settings.docx_font
        self.code_font_name = code_font_name or settings.docx_code_font

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def _new_document(self) -> Document:
        doc = Document()
        font = doc.styles["Normal"].font
        font.name = self.font_name
        font.size = Pt(11)
        return doc

    def write(self, document: RenderedDocument, path: Path) -> None:
        """Write a formatted message, one paragraph per line."""
        doc = self._new_document()
        for line in document.lines:
            self._add_line(doc.add_paragraph(), line)
        doc.save(path)

    def write_transcript(self, transcript: FormattedTranscript, path: Path) -> None:
        """Write a transcript with a label paragraph above each bubble."""
        doc = self._new_document()

        if transcript.persona_name:
            doc.add_heading(transcript.persona_name, level=1)

        for bubble in transcript.bubbles:
            self._add_bubble(doc, bubble)

        doc.save(path)

    def _add_bubble(self, doc: Document, bubble: Bubble) -> None:
        alignment = (
            WD_ALIGN_PARAGRAPH.RIGHT if bubble.is_user else WD_ALIGN_PARAGRAPH.LEFT
        )

        label_para = doc.add_paragraph()
        label_para.alignment = alignment
        label_run = label_para.add_run(bubble.label)
        label_run.bold = True
        label_run.font.size = Pt(9)
        label_run.font.color.rgb = LABEL_COLOR

        for line in bubble.document.lines:
            para = doc.add_paragraph()
            para.alignment = alignment
            self._add_line(para, line)

    def _add_line(self, para, line: RenderedLine) -> None:
        for fragment in line.fragments:
            self._add_fragment(para, fragment)

    def _add_fragment(self, para, fragment: Fragment) -> None:
        run = para.add_run(fragment.text)
        run.bold = fragment.bold
        run.italic = fragment.italic
        if fragment.strikethrough:
            run.font.strike = True
        if fragment.code:
            run.font.name = self.code_font_name
            run.font.size = Pt(10)
            self._set_run_shading(run, CODE_BG_COLOR)

    def _set_run_shading(self, run, color: str) -> None:
        """Set the background shading of a run."""
        r_pr = run._r.get_or_add_rPr()
        shading = OxmlElement("w:shd")
        shading.set(qn("w:val"), "clear")
        shading.set(qn("w:color"), "auto")
        shading.set(qn("w:fill"), color)
        r_pr.append(shading)
