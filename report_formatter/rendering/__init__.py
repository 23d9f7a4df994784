"""Rendering sinks for formatted reports.

The formatter streams commands; a sink turns them into a concrete document:

1. RecordingSink: keeps the command stream in memory
2. PDFSink: renders a PDF with ReportLab
3. DocxSink: renders a Word document with python-docx

Example usage:
    from report_formatter.rendering import create_sink

    sink = create_sink("report.pdf")
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..config import SUPPORTED_FORMATS
from .base import ReportSink
from .docx_sink import DocxSink
from .pagination import page_label, stamp_page_number
from .pdf_sink import PDFSink
from .recording import RecordingSink


def resolve_format(output: Union[str, Path, BinaryIO], fmt: Optional[str] = None) -> str:
    """Pick the output format from an explicit name or the file suffix.

    Raises:
        ValueError: If the format is not supported
    """
    if fmt is None:
        suffix = Path(output).suffix.lower().lstrip(".") if isinstance(output, (str, Path)) else ""
        fmt = suffix or "pdf"
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported output format '{fmt}', expected one of {', '.join(SUPPORTED_FORMATS)}")
    return fmt


def create_sink(output: Union[str, Path, BinaryIO], fmt: Optional[str] = None) -> ReportSink:
    """Create the sink matching the output format."""
    if resolve_format(output, fmt) == "docx":
        return DocxSink(output)
    return PDFSink(output)


__all__ = [
    'ReportSink',
    'RecordingSink',
    'PDFSink',
    'DocxSink',
    'page_label',
    'stamp_page_number',
    'resolve_format',
    'create_sink',
]
