"""Word document rendering sink built on python-docx."""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

import docx
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor
from docx.text.paragraph import Paragraph

from ..config import (
    BASE_FONT_SIZE,
    FOOTER_COLOR,
    FOOTER_FONT_SIZE,
    LINE_HEIGHT_FACTOR,
    PAGE_MARGIN,
)
from ..models.commands import Align, Space, StartPage, WriteRun
from .base import ReportSink

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Align.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Align.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Align.JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def _rgb(color: str) -> RGBColor:
    return RGBColor.from_string(color.lstrip("#").upper())


def _add_page_field(paragraph: Paragraph):
    """Append a PAGE field run to a paragraph."""
    run = paragraph.add_run()
    begin = OxmlElement("w:fldChar")
    begin.set(qn("w:fldCharType"), "begin")
    instruction = OxmlElement("w:instrText")
    instruction.set(qn("xml:space"), "preserve")
    instruction.text = " PAGE "
    end = OxmlElement("w:fldChar")
    end.set(qn("w:fldCharType"), "end")
    run._r.append(begin)
    run._r.append(instruction)
    run._r.append(end)
    return run


class DocxSink(ReportSink):
    """Writes commands into a .docx document.

    Page numbers are rendered by Word through a PAGE field in the footer.
    The first page uses its own (empty) footer so the cover stays
    unnumbered.
    """

    def __init__(self, output: Union[str, Path, BinaryIO]):
        """Initialize the Word sink.

        Args:
            output: File path or writable binary stream
        """
        super().__init__()
        self.output = str(output) if isinstance(output, Path) else output
        self.document = docx.Document()
        self._paragraph: Optional[Paragraph] = None
        self._pending_space = 0.0
        self._line_height = BASE_FONT_SIZE * LINE_HEIGHT_FACTOR
        self._setup_page()

    def _setup_page(self) -> None:
        section = self.document.sections[0]
        section.left_margin = section.right_margin = Pt(PAGE_MARGIN)
        section.top_margin = section.bottom_margin = Pt(PAGE_MARGIN)
        section.different_first_page_header_footer = True

        footer = section.footer
        footer.is_linked_to_previous = False
        paragraph = footer.paragraphs[0]
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        for run in (paragraph.add_run("Page "), _add_page_field(paragraph)):
            run.font.size = Pt(FOOTER_FONT_SIZE)
            run.font.color.rgb = _rgb(FOOTER_COLOR)

    def start_page(self, command: StartPage) -> None:
        self._paragraph = None
        self._pending_space = 0.0
        if self.page_count > 1:
            self.document.add_page_break()

    def write_run(self, command: WriteRun) -> None:
        style = command.style
        if self._paragraph is None:
            self._paragraph = self.document.add_paragraph()
            self._paragraph.alignment = ALIGNMENTS[style.align]
            paragraph_format = self._paragraph.paragraph_format
            paragraph_format.space_before = Pt(self._pending_space)
            paragraph_format.space_after = Pt(0)
            if style.indent:
                paragraph_format.left_indent = Pt(style.indent)
            self._pending_space = 0.0

        run = self._paragraph.add_run(command.run.text)
        run.bold = command.run.bold
        run.italic = style.italic
        run.underline = style.underline
        run.font.size = Pt(style.size)
        run.font.color.rgb = _rgb(style.color)
        self._line_height = style.size * LINE_HEIGHT_FACTOR

        if not command.run.continued:
            self._paragraph = None

    def space(self, command: Space) -> None:
        self._paragraph = None
        self._pending_space += command.lines * self._line_height

    def close(self) -> None:
        """Save the document to the output."""
        logger.info(f"Saving Word document with {len(self.document.paragraphs)} paragraphs")
        self.document.save(self.output)
