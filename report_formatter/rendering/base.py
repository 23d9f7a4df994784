"""Base class for rendering sinks.

A sink receives the ordered command stream produced by the formatter and
turns it into a concrete document. The formatter never reads sink state; it
only issues commands through :meth:`ReportSink.apply`.
"""

from abc import ABC, abstractmethod

from ..models.commands import Command, Space, StartPage, WriteRun


class ReportSink(ABC):
    """Append-only, page-oriented rendering target."""

    def __init__(self):
        self.page_count = 0

    def apply(self, command: Command) -> None:
        """Dispatch a single command to the matching handler.

        Args:
            command: Command to render

        Raises:
            TypeError: If the command type is unknown
        """
        if isinstance(command, StartPage):
            self.page_count += 1
            self.start_page(command)
            self.on_page_created(self.page_count)
        elif isinstance(command, WriteRun):
            self.write_run(command)
        elif isinstance(command, Space):
            self.space(command)
        else:
            raise TypeError(f"Unsupported command: {command!r}")

    @abstractmethod
    def start_page(self, command: StartPage) -> None:
        """Begin a new page. ``page_count`` already includes it."""
        pass

    @abstractmethod
    def write_run(self, command: WriteRun) -> None:
        """Write a styled run, joining it with the next one if continued."""
        pass

    @abstractmethod
    def space(self, command: Space) -> None:
        """Insert vertical space."""
        pass

    def on_page_created(self, page_number: int) -> None:
        """Called once per started page with its 1-based index."""
        pass

    def close(self) -> None:
        """Finish the document and release the output."""
        pass
