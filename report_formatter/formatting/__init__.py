"""Formatting package: section detection, inline markup and document assembly."""

from .section_splitter import SectionSplitter, split_sections
from .inline_renderer import InlineRunRenderer, render_inline
from .assembler import DocumentAssembler, assemble_document

__all__ = [
    'SectionSplitter',
    'split_sections',
    'InlineRunRenderer',
    'render_inline',
    'DocumentAssembler',
    'assemble_document',
]
