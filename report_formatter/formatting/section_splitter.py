"""Section splitter for generated report text."""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..models.section import Section, SectionType

logger = logging.getLogger(__name__)

HeadingRule = Tuple[Callable[[str], bool], SectionType]

# Ordered heading rules, tested against the lower-cased line
DEFAULT_HEADING_RULES: List[HeadingRule] = [
    (lambda line: "title:" in line, SectionType.TITLE),
    (lambda line: line.startswith("abstract"), SectionType.ABSTRACT),
    (lambda line: line.startswith("introduction"), SectionType.INTRODUCTION),
    (lambda line: "main body" in line, SectionType.MAIN_BODY),
    (lambda line: line.startswith("conclusion"), SectionType.CONCLUSION),
    (lambda line: line.startswith("references"), SectionType.REFERENCES),
]

TITLE_PREFIX = re.compile(r"^title:\s*", re.IGNORECASE)


class SectionSplitter:
    """Splits loosely structured report text into typed sections."""

    def __init__(self, heading_rules: Optional[List[HeadingRule]] = None):
        """Initialize the section splitter.

        Args:
            heading_rules: Ordered (predicate, section type) pairs. The first
                predicate accepting a lower-cased line wins.
        """
        self.heading_rules = DEFAULT_HEADING_RULES if heading_rules is None else heading_rules

    def _normalize_lines(self, text: str) -> List[str]:
        lines = (line.strip() for line in text.split("\n"))
        return [line for line in lines if line]

    def match_heading(self, line: str) -> Optional[SectionType]:
        """Return the section type a line opens, or None for content lines."""
        lower = line.lower()
        for predicate, section_type in self.heading_rules:
            if predicate(lower):
                return section_type
        return None

    def split(self, text: str) -> List[Section]:
        """Split text into sections in source order.

        Lines before the first heading are dropped. A repeated heading opens
        a new section of the same type.

        Args:
            text: Raw report text

        Returns:
            List of sections
        """
        sections: List[Section] = []
        current_type: Optional[SectionType] = None
        current_lines: List[str] = []
        dropped = 0

        for line in self._normalize_lines(text):
            section_type = self.match_heading(line)
            if section_type is None:
                if current_type is None:
                    dropped += 1
                else:
                    current_lines.append(line)
                continue

            if current_type is not None:
                sections.append(self._close(current_type, current_lines))

            current_type = section_type
            if section_type is SectionType.TITLE:
                current_lines = [TITLE_PREFIX.sub("", line)]
            else:
                current_lines = []

        # A trailing heading with nothing after it is dropped
        if current_type is not None and current_lines:
            sections.append(self._close(current_type, current_lines))

        if dropped:
            logger.debug(f"Dropped {dropped} line(s) before the first heading")
        logger.debug(f"Detected {len(sections)} section(s): {[s.type.value for s in sections]}")
        return sections

    @staticmethod
    def _close(section_type: SectionType, lines: List[str]) -> Section:
        return Section(type=section_type, content="\n".join(lines).strip())


def split_sections(text: str) -> List[Section]:
    """Split text into sections using the default heading rules."""
    return SectionSplitter().split(text)
