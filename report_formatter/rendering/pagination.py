"""Page number footer stamping."""

from typing import Optional, Tuple

from reportlab.lib import colors

from ..config import BODY_FONT, FOOTER_COLOR, FOOTER_FONT_SIZE, FOOTER_OFFSET


def page_label(page_number: int) -> Optional[str]:
    """Footer label for a page; the cover page is not numbered."""
    if page_number <= 1:
        return None
    return f"Page {page_number}"


def stamp_page_number(canvas, page_number: int, page_size: Tuple[float, float]) -> None:
    """Draw the page number centred near the bottom of the page.

    The canvas graphics state is saved and restored around the drawing so
    the font and colour in use by the caller are left untouched.

    Args:
        canvas: ReportLab canvas of the page just created
        page_number: 1-based page index
        page_size: (width, height) of the page in points
    """
    label = page_label(page_number)
    if label is None:
        return

    width, _ = page_size
    canvas.saveState()
    canvas.setFont(BODY_FONT, FOOTER_FONT_SIZE)
    canvas.setFillColor(colors.HexColor(FOOTER_COLOR))
    canvas.drawCentredString(width / 2, FOOTER_OFFSET, label)
    canvas.restoreState()
