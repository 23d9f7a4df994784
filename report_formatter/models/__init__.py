"""Models package for shared data structures."""

from .section import Section, SectionType
from .commands import Align, Command, PageKind, Run, Space, StartPage, TextStyle, WriteRun

__all__ = [
    'Section',
    'SectionType',
    'Align',
    'Command',
    'PageKind',
    'Run',
    'Space',
    'StartPage',
    'TextStyle',
    'WriteRun',
]
