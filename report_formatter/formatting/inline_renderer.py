"""Inline markup rendering for section bodies.

Turns section content into an ordered stream of rendering commands. Two
conventions are recognized:

1. ``* item`` at the start of a line marks a bullet
2. ``**text**`` marks a bold span; spans never contain ``*``

Every visual line is emitted as one or more runs where all but the last
run carry ``continued=True``.
"""

import re
from typing import Any, Dict, Iterator, List, Optional, Pattern, Tuple

from ..config import (
    BASE_FONT_SIZE,
    BODY_COLOR,
    BULLET_GLYPH,
    BULLET_SPACE_AFTER,
    BULLET_SPACE_BEFORE,
    PARAGRAPH_SPACE,
)
from ..models.commands import Align, Command, Run, Space, TextStyle, WriteRun

SpanRule = Tuple[Pattern, Dict[str, Any]]

# Ordered inline span rules: (pattern with one group for the inner text, run attributes)
DEFAULT_SPAN_RULES: List[SpanRule] = [
    (re.compile(r"\*\*([^*]+)\*\*"), {"bold": True}),
]

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
BULLET_MARKER = "* "
SPAN_MARKER = "**"


class InlineRunRenderer:
    """Renders marked-up section content into runs and spacing commands."""

    def __init__(
        self,
        base_size: float = BASE_FONT_SIZE,
        color: str = BODY_COLOR,
        span_rules: Optional[List[SpanRule]] = None
    ):
        """Initialize the renderer.

        Args:
            base_size: Font size for body text
            color: Body text color
            span_rules: Ordered inline span rules, bold spans by default
        """
        self.base_size = base_size
        self.span_rules = DEFAULT_SPAN_RULES if span_rules is None else span_rules
        self.body_style = TextStyle(size=base_size, color=color, align=Align.JUSTIFY)
        self.bullet_style = TextStyle(size=base_size, color=color, align=Align.LEFT)

    def split_spans(self, text: str) -> List[Tuple[str, Dict[str, Any]]]:
        """Split a line into (chunk, run attributes) pairs.

        Plain chunks get an empty attribute dict. Empty chunks are never
        returned.
        """
        chunks: List[Tuple[str, Dict[str, Any]]] = []
        pos = 0
        while pos < len(text):
            best = None
            for pattern, attrs in self.span_rules:
                match = pattern.search(text, pos)
                if match and (best is None or match.start() < best[0].start()):
                    best = (match, attrs)
            if best is None:
                break
            match, attrs = best
            if match.start() > pos:
                chunks.append((text[pos:match.start()], {}))
            chunks.append((match.group(1), attrs))
            pos = match.end()
        if pos < len(text):
            chunks.append((text[pos:], {}))
        return chunks

    def _span_runs(self, text: str, style: TextStyle, is_bullet: bool = False) -> Iterator[WriteRun]:
        chunks = self.split_spans(text)
        for index, (chunk, attrs) in enumerate(chunks):
            run = Run(
                text=chunk,
                is_bullet=is_bullet,
                continued=index < len(chunks) - 1,
                **attrs
            )
            yield WriteRun(run, style)

    def _render_bullet(self, line: str) -> Iterator[Command]:
        item = line[len(BULLET_MARKER):].strip()
        yield Space(BULLET_SPACE_BEFORE)
        yield WriteRun(Run(text=BULLET_GLYPH, is_bullet=True, continued=True), self.bullet_style)
        yield from self._span_runs(item, self.bullet_style, is_bullet=True)
        yield Space(BULLET_SPACE_AFTER)

    def _render_line(self, line: str) -> Iterator[Command]:
        if line.startswith(BULLET_MARKER):
            yield from self._render_bullet(line)
        elif SPAN_MARKER in line:
            yield from self._span_runs(line, self.body_style)
            # Lines ending in a colon introduce what follows
            if not line.endswith(":"):
                yield Space(PARAGRAPH_SPACE)
        else:
            yield WriteRun(Run(text=line), self.body_style)
            yield Space(PARAGRAPH_SPACE)

    def render(self, content: str) -> Iterator[Command]:
        """Render section content.

        Args:
            content: Section body text

        Yields:
            Rendering commands in document order
        """
        if not content or not content.strip():
            return

        paragraphs = PARAGRAPH_BREAK.split(content)
        for index, paragraph in enumerate(paragraphs):
            if not paragraph.strip():
                continue
            for line in paragraph.split("\n"):
                line = line.strip()
                if line:
                    yield from self._render_line(line)
            if index < len(paragraphs) - 1:
                yield Space(PARAGRAPH_SPACE)


def render_inline(content: str, base_size: float = BASE_FONT_SIZE) -> List[Command]:
    """Render section content with the default inline rules."""
    return list(InlineRunRenderer(base_size=base_size).render(content))
