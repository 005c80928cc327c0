"""Line shapes for Turtle indentation.

A ``LineShape`` summarizes what a single raw line of Turtle text does to
the block structure, judged only from its leading and trailing
characters.  Shapes are recomputed from text on every call; nothing is
cached between lines.

Shape table (first match wins, trailing whitespace ignored):

    HEADER          ``<uri>`` or ``prefix:name`` alone on the line
    STATEMENT_END   ends with ``.``
    CONTINUATION    ends with ``;``
    LIST_ITEM       ends with ``,``
    BLOCK_OPEN      ends with ``[``
    BLOCK_CLOSE     ends with ``]``
    OTHER           anything else, including blank lines
"""
from __future__ import annotations

import re
from enum import Enum, auto
from typing import Final


class LineShape(Enum):
    """Block-structure role of a single line."""

    HEADER = auto()
    STATEMENT_END = auto()
    CONTINUATION = auto()
    LIST_ITEM = auto()
    BLOCK_OPEN = auto()
    BLOCK_CLOSE = auto()
    OTHER = auto()


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_URI: Final[str] = r"<[^<>\s]*>"
_PNAME: Final[str] = r"(?:[A-Za-z_][\w-]*)?:(?:[\w-]+(?:\.[\w-]+)*)?"

_HEADER: Final[re.Pattern[str]] = re.compile(rf"^\s*(?:{_URI}|{_PNAME})\s*$")

# Closing an anonymous node, optionally followed by one ``,`` or ``;``,
# or closing one and opening the next on the same line: ``], [``.
_CLOSES_NODE: Final[re.Pattern[str]] = re.compile(r".*\]\s*[,;]?\s*$")
_CLOSES_AND_REOPENS: Final[re.Pattern[str]] = re.compile(r".*\]\s*,\s*\[\s*$")

_TRAILING: Final[tuple[tuple[re.Pattern[str], LineShape], ...]] = (
    (re.compile(r"\.\s*$"), LineShape.STATEMENT_END),
    (re.compile(r";\s*$"), LineShape.CONTINUATION),
    (re.compile(r",\s*$"), LineShape.LIST_ITEM),
    (re.compile(r"\[\s*$"), LineShape.BLOCK_OPEN),
    (re.compile(r"\]\s*$"), LineShape.BLOCK_CLOSE),
)


def is_header(line: str) -> bool:
    """Return True if ``line`` is a bare resource header."""
    return _HEADER.match(line) is not None


def closes_node(line: str) -> bool:
    """Return True if ``line`` closes an anonymous node.

    Matches ``]``, ``],``, ``];`` and ``], [`` at the end of the line.
    """
    return bool(_CLOSES_NODE.match(line) or _CLOSES_AND_REOPENS.match(line))


def classify_line(line: str) -> LineShape:
    """Classify ``line`` by its leading/trailing shape.

    Parameters
    ----------
    line:
        One line of text without its newline.

    Returns
    -------
    LineShape
        The first matching shape from the module-level table.
    """
    if is_header(line):
        return LineShape.HEADER
    for pattern, shape in _TRAILING:
        if pattern.search(line):
            return shape
    return LineShape.OTHER
