"""Host line-accessor protocol and an in-memory implementation.

The indentation core never owns text.  It talks to the host editor
through ``LineAccessor``: read a line, read a line's current indentation
width, and set a line's indentation.  ``TextBuffer`` is the reference
host used by the CLI and the test suite.
"""
from __future__ import annotations

import logging
import re
from typing import Final, Protocol

logger = logging.getLogger(__name__)

_LEADING_WS: Final[re.Pattern[str]] = re.compile(r"[ \t]*")


class LineAccessor(Protocol):
    """What the indentation core needs from a host buffer."""

    def line_count(self) -> int: ...

    def line(self, line_no: int) -> str: ...

    def indentation(self, line_no: int) -> int: ...

    def set_indentation(self, line_no: int, columns: int) -> None: ...


def measure_indentation(text: str, tab_width: int = 8) -> int:
    """Return the column width of the leading whitespace of ``text``.

    Tabs advance to the next multiple of ``tab_width``.
    """
    col = 0
    for ch in _LEADING_WS.match(text).group(0):  # type: ignore[union-attr]
        if ch == "\t":
            col = (col // tab_width + 1) * tab_width
        else:
            col += 1
    return col


class TextBuffer:
    """A list of lines with editor-style indentation accessors.

    Parameters
    ----------
    text:
        Initial buffer contents.  Split on newlines; a trailing newline
        does not create an extra empty line.
    tab_width:
        Column width of a tab when measuring existing indentation.
    """

    __slots__ = ("_lines", "_tab_width", "_trailing_newline")

    def __init__(self, text: str = "", tab_width: int = 8) -> None:
        self._trailing_newline: bool = text.endswith("\n")
        body = text[:-1] if self._trailing_newline else text
        self._lines: list[str] = body.split("\n") if body else [""]
        self._tab_width: int = tab_width

    @classmethod
    def from_lines(cls, lines: list[str], tab_width: int = 8) -> "TextBuffer":
        """Build a buffer from already-split lines."""
        return cls("\n".join(lines), tab_width=tab_width)

    # ------------------------------------------------------------------
    # LineAccessor
    # ------------------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def line(self, line_no: int) -> str:
        self._check(line_no)
        return self._lines[line_no]

    def indentation(self, line_no: int) -> int:
        return measure_indentation(self.line(line_no), self._tab_width)

    def set_indentation(self, line_no: int, columns: int) -> None:
        """Replace the leading whitespace of ``line_no`` with ``columns`` spaces.

        Raises
        ------
        IndexError
            If ``line_no`` is outside the buffer.
        ValueError
            If ``columns`` is negative.
        """
        if columns < 0:
            raise ValueError(f"Indentation must be non-negative, got {columns}")
        text = self.line(line_no)
        stripped = text.lstrip(" \t")
        self._lines[line_no] = " " * columns + stripped
        logger.debug("Line %d indented to %d column(s)", line_no, columns)

    # ------------------------------------------------------------------
    # Whole-buffer views
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        """A copy of the current lines."""
        return list(self._lines)

    @property
    def text(self) -> str:
        """The buffer contents joined with newlines."""
        joined = "\n".join(self._lines)
        return joined + "\n" if self._trailing_newline else joined

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"TextBuffer(lines={len(self._lines)}, tab_width={self._tab_width})"

    def _check(self, line_no: int) -> None:
        if not 0 <= line_no < len(self._lines):
            raise IndexError(
                f"Line {line_no} is outside the buffer (0..{len(self._lines) - 1})"
            )
