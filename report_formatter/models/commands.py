"""Rendering commands streamed from the formatter to a sink."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ..config import BASE_FONT_SIZE, BODY_COLOR
from .section import Section


class PageKind(str, Enum):
    COVER = "cover"
    TOC = "toc"
    SECTION = "section"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class TextStyle:
    """Explicit style attached to every written run."""
    size: float = BASE_FONT_SIZE
    color: str = BODY_COLOR
    align: Align = Align.LEFT
    underline: bool = False
    italic: bool = False
    indent: float = 0


@dataclass(frozen=True)
class Run:
    """A styled inline text unit.

    ``continued`` joins the run with the next one on the same visual line;
    the last run of a line always has ``continued=False``.
    """
    text: str
    bold: bool = False
    is_bullet: bool = False
    continued: bool = False


@dataclass(frozen=True)
class StartPage:
    kind: PageKind
    section: Optional[Section] = None


@dataclass(frozen=True)
class WriteRun:
    run: Run
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(frozen=True)
class Space:
    """Vertical gap measured in lines of the current font."""
    lines: float


Command = Union[StartPage, WriteRun, Space]
