"""
Structured report formatter package.
"""

from .exceptions import InvalidInputError, ReportError, SinkError
from .models import Section, SectionType
from .pipeline import render_report, write_report

__all__ = ['InvalidInputError', 'ReportError', 'SinkError', 'Section', 'SectionType', 'render_report', 'write_report']
