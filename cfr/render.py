# cfr/render.py
# Presentation of diff rows: unified text, a rich two-column table, or a capture sink.
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .errors import SinkWriteError
from .types import DiffRow, MIN_COLUMN_WIDTH

ELLIPSIS = "..."

DIFF_THEME = Theme({
    "removed": "bold red",
    "added": "bold green",
    "header": "bold cyan",
})


def truncate(line: str, width: int) -> str:
    """
    Cut `line` to `width` characters, ending with '...' when it does not fit.
    Widths below MIN_COLUMN_WIDTH are clamped so at least one character survives.
    """
    width = max(width, MIN_COLUMN_WIDTH)
    if len(line) > width:
        return line[: width - len(ELLIPSIS)] + ELLIPSIS
    return line


def pad(line: str, width: int) -> str:
    width = max(width, MIN_COLUMN_WIDTH)
    return truncate(line, width).ljust(width)


def printable(text: str) -> str:
    # undecodable output bytes arrive as surrogate escapes; show them as U+FFFD
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def table_width(width: int) -> int:
    """Cells a two-column table of `width`-wide columns needs, borders and padding included."""
    return 2 * max(width, MIN_COLUMN_WIDTH) + 7


class Renderer:
    def message(self, text: str) -> None:
        raise NotImplementedError

    def render(self, rows: List[DiffRow]) -> None:
        raise NotImplementedError


class UnifiedRenderer(Renderer):
    """Only differing rows, as '- expected' / '+ actual' pairs."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def _write(self, text: str) -> None:
        out = self.out if self.out is not None else sys.stdout
        try:
            out.write(printable(text) + "\n")
        except OSError as e:
            raise SinkWriteError(f"cannot write diff: {e}") from e

    def message(self, text: str) -> None:
        self._write(text)

    def render(self, rows: List[DiffRow]) -> None:
        self._write("--- expected_output")
        self._write("+++ actual_output")
        for row in rows:
            if row.differing:
                self._write(f"- {row.expected}")
                self._write(f"+ {row.actual}")


class TableRenderer(Renderer):
    """Every row side by side; differing cells colored removed/added."""

    def __init__(
        self,
        width: int = 38,
        console: Optional[Console] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.width = max(width, MIN_COLUMN_WIDTH)
        if console is None:
            console = Console(file=out, theme=DIFF_THEME, highlight=False)
            # a narrower console would make rich shrink the columns and crop the ellipsis
            if console.width < table_width(self.width):
                console.width = table_width(self.width)
        self.console = console

    def build_table(self, rows: List[DiffRow]) -> Table:
        table = Table(show_lines=False, header_style="header", expand=False)
        for title in ("Expected (-)", "Actual (+)"):
            table.add_column(title, width=self.width, min_width=self.width, no_wrap=True, overflow="crop")
        for row in rows:
            left = pad(printable(row.expected), self.width)
            right = pad(printable(row.actual), self.width)
            if row.differing:
                table.add_row(Text(left, style="removed"), Text(right, style="added"))
            else:
                table.add_row(Text(left), Text(right))
        return table

    def _print(self, renderable) -> None:
        try:
            self.console.print(renderable)
        except OSError as e:
            raise SinkWriteError(f"cannot write diff: {e}") from e

    def message(self, text: str) -> None:
        self._print(Text(printable(text)))

    def render(self, rows: List[DiffRow]) -> None:
        self._print(self.build_table(rows))


class CaptureRenderer(Renderer):
    """Keeps the rows and messages instead of printing them."""

    def __init__(self) -> None:
        self.calls: List[List[DiffRow]] = []
        self.messages: List[str] = []

    @property
    def rows(self) -> List[DiffRow]:
        return self.calls[-1] if self.calls else []

    def message(self, text: str) -> None:
        self.messages.append(text)

    def render(self, rows: List[DiffRow]) -> None:
        self.calls.append(list(rows))


def make_renderer(style: str, width: int = 38, out: Optional[TextIO] = None) -> Renderer:
    if style == "table":
        return TableRenderer(width=width, out=out)
    return UnifiedRenderer(out=out)
