"""PDF rendering sink built on ReportLab Platypus."""

import logging
from pathlib import Path
from typing import BinaryIO, List, Tuple, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer

from ..config import BASE_FONT_SIZE, BODY_FONT, LINE_HEIGHT_FACTOR, PAGE_MARGIN
from ..models.commands import Align, Space, StartPage, TextStyle, WriteRun
from .base import ReportSink
from .pagination import stamp_page_number

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Align.LEFT: TA_LEFT,
    Align.CENTER: TA_CENTER,
    Align.JUSTIFY: TA_JUSTIFY,
}


def run_markup(command: WriteRun, line_style: TextStyle) -> str:
    """Inline Platypus markup for a single run."""
    text = escape(command.run.text)
    style = command.style
    if command.run.bold:
        text = f"<b>{text}</b>"
    if style.italic:
        text = f"<i>{text}</i>"
    if style.underline:
        text = f"<u>{text}</u>"
    if style.size != line_style.size or style.color != line_style.color:
        text = f'<font size="{style.size}" color="{style.color}">{text}</font>'
    return text


class PDFSink(ReportSink):
    """Collects commands as flowables and builds the PDF on close."""

    def __init__(
        self,
        output: Union[str, Path, BinaryIO],
        page_size: Tuple[float, float] = A4,
        margin: float = PAGE_MARGIN
    ):
        """Initialize the PDF sink.

        Args:
            output: File path or writable binary stream
            page_size: Page size in points
            margin: Margin on every side in points
        """
        super().__init__()
        self.output = str(output) if isinstance(output, Path) else output
        self.page_size = page_size
        self.margin = margin
        self.story: List = []
        self._line: List[WriteRun] = []
        self._line_height = BASE_FONT_SIZE * LINE_HEIGHT_FACTOR
        self._styles = {}

    def _paragraph_style(self, style: TextStyle) -> ParagraphStyle:
        key = (style.size, style.color, style.align, style.indent)
        if key not in self._styles:
            self._styles[key] = ParagraphStyle(
                f"Run{len(self._styles)}",
                fontName=BODY_FONT,
                fontSize=style.size,
                leading=style.size * LINE_HEIGHT_FACTOR,
                textColor=colors.HexColor(style.color),
                alignment=ALIGNMENTS[style.align],
                leftIndent=style.indent,
            )
        return self._styles[key]

    def _flush_line(self) -> None:
        if not self._line:
            return
        line_style = self._line[0].style
        markup = "".join(run_markup(command, line_style) for command in self._line)
        self.story.append(Paragraph(markup, self._paragraph_style(line_style)))
        self._line_height = line_style.size * LINE_HEIGHT_FACTOR
        self._line = []

    def start_page(self, command: StartPage) -> None:
        self._flush_line()
        if self.page_count > 1:
            self.story.append(PageBreak())

    def write_run(self, command: WriteRun) -> None:
        self._line.append(command)
        if not command.run.continued:
            self._flush_line()

    def space(self, command: Space) -> None:
        self._flush_line()
        self.story.append(Spacer(1, command.lines * self._line_height))

    def _on_page(self, canvas, doc) -> None:
        stamp_page_number(canvas, canvas.getPageNumber(), doc.pagesize)

    def close(self) -> None:
        """Lay out the collected flowables and write the PDF."""
        self._flush_line()
        document = SimpleDocTemplate(
            self.output,
            pagesize=self.page_size,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
        )
        logger.info(f"Building PDF with {len(self.story)} flowables over {self.page_count} logical pages")
        document.build(self.story, onFirstPage=self._on_page, onLaterPages=self._on_page)
