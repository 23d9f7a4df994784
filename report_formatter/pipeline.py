"""Core functionality: text in, rendered report out."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from .exceptions import InvalidInputError, SinkError
from .formatting.assembler import DocumentAssembler
from .formatting.section_splitter import split_sections
from .models.section import Section
from .rendering import ReportSink, create_sink, resolve_format

logger = logging.getLogger(__name__)


def validate_text(text: Optional[str]) -> str:
    """Reject missing or whitespace-only input.

    Raises:
        InvalidInputError: If there is no usable text
    """
    if text is None or not str(text).strip():
        raise InvalidInputError("No input text provided")
    return str(text)


def render_report(
    text: str,
    sink: ReportSink,
    used_fallback: bool = False,
    generated_at: Optional[datetime] = None
) -> List[Section]:
    """Format report text into a sink.

    Input is validated before the sink sees any command. Pages already
    handed to the sink are not rolled back on failure.

    Args:
        text: Raw report text
        sink: Rendering target
        used_fallback: Whether the text is placeholder content
        generated_at: Timestamp for the cover page, defaults to now

    Returns:
        The detected sections

    Raises:
        InvalidInputError: If the text is empty
        SinkError: If the sink fails while rendering
    """
    text = validate_text(text)
    sections = split_sections(text)
    logger.info(f"Formatting report with {len(sections)} section(s)")

    commands = DocumentAssembler().assemble(sections, used_fallback, generated_at or datetime.now())
    for command in commands:
        _call_sink(sink, sink.apply, command)
    _call_sink(sink, sink.close)

    return sections


def _call_sink(sink: ReportSink, method, *args) -> None:
    try:
        method(*args)
    except Exception as e:
        logger.error(f"Rendering failed after {sink.page_count} page(s): {str(e)}")
        raise SinkError(f"Failed to render report: {str(e)}") from e


def write_report(
    text: str,
    output: Union[str, Path, BinaryIO],
    fmt: Optional[str] = None,
    used_fallback: bool = False,
    generated_at: Optional[datetime] = None
) -> List[Section]:
    """Render report text to a PDF or Word file.

    Paths are rendered into a temporary file next to the destination and
    moved into place only once the document is complete, so a failed run
    never touches an existing file at ``output``.

    Args:
        text: Raw report text
        output: Destination path or binary stream
        fmt: "pdf" or "docx"; inferred from the path suffix when omitted
        used_fallback: Whether the text is placeholder content
        generated_at: Timestamp for the cover page, defaults to now

    Returns:
        The detected sections
    """
    text = validate_text(text)
    fmt = resolve_format(output, fmt)
    if not isinstance(output, (str, Path)):
        return render_report(text, create_sink(output, fmt), used_fallback, generated_at)

    destination = Path(output)
    fd, temp_name = tempfile.mkstemp(
        dir=destination.parent, prefix=f".{destination.name}.", suffix=".partial"
    )
    os.close(fd)
    temp_path = Path(temp_name)
    try:
        sections = render_report(text, create_sink(temp_path, fmt), used_fallback, generated_at)
        os.replace(temp_path, destination)
    finally:
        if temp_path.exists():
            logger.warning(f"Removing incomplete output {temp_path}")
            temp_path.unlink()

    logger.info(f"Report written to {destination}")
    return sections
