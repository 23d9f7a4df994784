"""In-memory sink that records the command stream."""

from typing import List, Tuple

from ..models.commands import Command, PageKind, Space, StartPage, WriteRun
from .base import ReportSink
from .pagination import page_label


class RecordingSink(ReportSink):
    """Keeps every command and the footer label stamped on each page."""

    def __init__(self):
        super().__init__()
        self.commands: List[Command] = []
        self.footers: List[Tuple[int, str]] = []
        self.closed = False

    def start_page(self, command: StartPage) -> None:
        self.commands.append(command)

    def write_run(self, command: WriteRun) -> None:
        self.commands.append(command)

    def space(self, command: Space) -> None:
        self.commands.append(command)

    def on_page_created(self, page_number: int) -> None:
        label = page_label(page_number)
        if label is not None:
            self.footers.append((page_number, label))

    def close(self) -> None:
        self.closed = True

    def pages(self) -> List[List[Command]]:
        """Commands grouped per page, each group starting with its StartPage."""
        pages: List[List[Command]] = []
        for command in self.commands:
            if isinstance(command, StartPage):
                pages.append([])
            if pages:
                pages[-1].append(command)
        return pages

    def page_kinds(self) -> List[PageKind]:
        return [c.kind for c in self.commands if isinstance(c, StartPage)]

    def lines(self) -> List[str]:
        """Text of every visual line, joining continued runs."""
        lines: List[str] = []
        current = ""
        for command in self.commands:
            if not isinstance(command, WriteRun):
                continue
            current += command.run.text
            if not command.run.continued:
                lines.append(current)
                current = ""
        return lines
