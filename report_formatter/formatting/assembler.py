"""Document assembly: cover page, table of contents and section pages."""

import logging
from datetime import datetime
from typing import Iterator, List, Optional, Sequence

from ..config import (
    BANNER_COLOR,
    BANNER_FONT_SIZE,
    BASE_FONT_SIZE,
    COVER_BANNER,
    COVER_BANNER_SPACE,
    COVER_DATE_SPACE,
    COVER_TITLE_SPACE,
    DATE_COLOR,
    DATE_FONT_SIZE,
    DEFAULT_TITLE,
    FALLBACK_NOTICE,
    HEADING_COLOR,
    NOTICE_COLOR,
    NOTICE_FONT_SIZE,
    SECTION_HEADING_FONT_SIZE,
    SECTION_HEADING_SPACE,
    TITLE_COLOR,
    TITLE_FONT_SIZE,
    TOC_ENTRY_FONT_SIZE,
    TOC_ENTRY_INDENT,
    TOC_ENTRY_SPACE,
    TOC_HEADING,
    TOC_HEADING_FONT_SIZE,
    TOC_HEADING_SPACE,
)
from ..models.commands import Align, Command, PageKind, Run, Space, StartPage, TextStyle, WriteRun
from ..models.section import Section
from .inline_renderer import InlineRunRenderer

logger = logging.getLogger(__name__)


def resolve_title(sections: Sequence[Section]) -> str:
    """Return the content of the first title section, or the default title."""
    for section in sections:
        if section.is_title:
            return section.content or DEFAULT_TITLE
    return DEFAULT_TITLE


def format_date(moment: datetime) -> str:
    """Format a date as M/D/YYYY."""
    return f"{moment.month}/{moment.day}/{moment.year}"


def toc_entries(sections: Sequence[Section]) -> List[str]:
    """Numbered table of contents labels for every non-title section."""
    body = [section for section in sections if not section.is_title]
    return [f"{index}. {section.label}" for index, section in enumerate(body, start=1)]


class DocumentAssembler:
    """Lays out sections as a cover page, a contents page and section pages."""

    def __init__(self, base_size: float = BASE_FONT_SIZE, renderer: Optional[InlineRunRenderer] = None):
        """Initialize the assembler.

        Args:
            base_size: Font size for section bodies
            renderer: Inline renderer for section bodies
        """
        self.base_size = base_size
        self.renderer = renderer or InlineRunRenderer(base_size=base_size)

    def _cover(self, title: str, used_fallback: bool, generated_at: datetime) -> Iterator[Command]:
        yield StartPage(PageKind.COVER)
        yield WriteRun(
            Run(COVER_BANNER, bold=True),
            TextStyle(size=BANNER_FONT_SIZE, color=BANNER_COLOR, align=Align.CENTER)
        )
        yield Space(COVER_BANNER_SPACE)
        yield WriteRun(
            Run(title, bold=True),
            TextStyle(size=TITLE_FONT_SIZE, color=TITLE_COLOR, align=Align.CENTER)
        )
        yield Space(COVER_TITLE_SPACE)
        yield WriteRun(
            Run(f"Generated: {format_date(generated_at)}"),
            TextStyle(size=DATE_FONT_SIZE, color=DATE_COLOR, align=Align.CENTER)
        )
        yield Space(COVER_DATE_SPACE)
        if used_fallback:
            yield WriteRun(
                Run(FALLBACK_NOTICE),
                TextStyle(size=NOTICE_FONT_SIZE, color=NOTICE_COLOR, align=Align.CENTER, italic=True)
            )

    def _table_of_contents(self, sections: Sequence[Section]) -> Iterator[Command]:
        yield StartPage(PageKind.TOC)
        yield WriteRun(
            Run(TOC_HEADING, bold=True),
            TextStyle(size=TOC_HEADING_FONT_SIZE, color=HEADING_COLOR, align=Align.CENTER, underline=True)
        )
        yield Space(TOC_HEADING_SPACE)
        entry_style = TextStyle(size=TOC_ENTRY_FONT_SIZE, color=HEADING_COLOR, indent=TOC_ENTRY_INDENT)
        for entry in toc_entries(sections):
            yield WriteRun(Run(entry), entry_style)
            yield Space(TOC_ENTRY_SPACE)

    def _section_page(self, section: Section) -> Iterator[Command]:
        yield StartPage(PageKind.SECTION, section=section)
        yield WriteRun(
            Run(section.label, bold=True),
            TextStyle(size=SECTION_HEADING_FONT_SIZE, color=HEADING_COLOR, underline=True)
        )
        yield Space(SECTION_HEADING_SPACE)
        if section.content.strip():
            yield from self.renderer.render(section.content)

    def assemble(
        self,
        sections: Sequence[Section],
        used_fallback: bool,
        generated_at: datetime
    ) -> Iterator[Command]:
        """Produce the full command stream for a document.

        Args:
            sections: Sections in source order
            used_fallback: Whether the text is placeholder content
            generated_at: Timestamp shown on the cover page

        Yields:
            Rendering commands in document order
        """
        title = resolve_title(sections)
        logger.info(f"Assembling '{title}' with {len(sections)} section(s)")

        yield from self._cover(title, used_fallback, generated_at)
        yield from self._table_of_contents(sections)
        for section in sections:
            if section.is_title:
                continue
            logger.debug(f"Rendering {section.type.value} page ({len(section.content)} chars)")
            yield from self._section_page(section)


def assemble_document(
    sections: Sequence[Section],
    used_fallback: bool = False,
    generated_at: Optional[datetime] = None
) -> List[Command]:
    """Assemble sections into a list of commands with the default layout."""
    return list(DocumentAssembler().assemble(sections, used_fallback, generated_at or datetime.now()))
