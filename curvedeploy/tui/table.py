"""Fixed-width table rendering and small terminal helpers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Sequence, Union

_RESET = "\x1b[0m"


def _colorize(code: int, text: str) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def green(text: str) -> str:
    """Wrap text in the ANSI green colour."""
    return _colorize(32, text)


def red(text: str) -> str:
    """Wrap text in the ANSI red colour."""
    return _colorize(31, text)


def yellow(text: str) -> str:
    """Wrap text in the ANSI yellow colour."""
    return _colorize(33, text)


def blue(text: str) -> str:
    """Wrap text in the ANSI blue colour."""
    return _colorize(34, text)


@dataclass(frozen=True)
class DecoratedMessage:
    """A cell whose width is measured on `message` but printed decorated."""

    message: str
    decorate: Callable[[str], str]

    def __str__(self) -> str:
        return self.decorate(self.message)


Cell = Union[str, DecoratedMessage]


def _origin(cell: Cell) -> str:
    if isinstance(cell, DecoratedMessage):
        return cell.message
    return str(cell)


def _rendered(cell: Cell) -> str:
    if isinstance(cell, DecoratedMessage):
        return cell.decorate(cell.message)
    return str(cell)


def _column_widths(lines: Sequence[Sequence[Cell]]) -> list[int]:
    if not lines:
        return []
    ncols = len(lines[0])
    return [max(len(_origin(row[col])) for row in lines) for col in range(ncols)]


def fixed_format(lines: Sequence[Sequence[Cell]], nspace: int) -> str:
    """Render rows as aligned columns separated by `nspace` spaces.

    Columns whose cells are all empty are left out entirely.
    """
    spacing = " " * nspace
    widths = _column_widths(lines)
    output = []
    for row in lines:
        cells = [
            _rendered(row[col]) + " " * (width - len(_origin(row[col])))
            for col, width in enumerate(widths)
            if width != 0
        ]
        output.append(spacing.join(cells) + "\n")
    return "".join(output)


def format_title(title: Sequence[str]) -> tuple[list[Cell], list[Cell]]:
    """Return the title row and a row of dashes underlining it."""
    first: list[Cell] = list(title)
    second: list[Cell] = ["-" * len(item) for item in title]
    return first, second


def cut_column(lines: Sequence[list[Cell]], column: int) -> None:
    """Blank out one column in every row, so that it is not rendered."""
    for row in lines:
        row[column] = ""


def trim_container_id(container_id: str) -> str:
    """Shorten a container id to its first 12 characters."""
    return container_id.rstrip("\r\n")[:12]


def trim_plugin_description(description: str) -> str:
    """Cut a description longer than 50 characters, ending it with '...'."""
    if len(description) > 50:
        return description[:47] + "..."
    return description


def _ask(question: str) -> str:
    if question:
        question += " "
    print(question, end="", flush=True)
    answer = sys.stdin.readline()
    if not answer.endswith("\n"):
        # end of input reached before a full line
        return ""
    return answer[:-1]


def confirm_yes(message: str, *args: object) -> bool:
    """Ask a yes/no question on the terminal; only 'yes' confirms."""
    text = message % args if args else message
    answer = _ask(text + " [yes/no]: (default=no)")
    return answer.strip() == "yes"