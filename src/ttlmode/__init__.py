"""ttl-mode: Turtle/N3 editing mode core, indentation inference and highlighting.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import ttlmode

    buf = ttlmode.TextBuffer('''<http://ex.org/a>
    a <http://ex.org/Type> ;
    <http://ex.org/p> "v" .
    ''')

    # Indentation for a single line (columns)
    ttlmode.infer_indent(buf, 1, indent_width=2)

    # Re-indent the whole buffer in place
    ttlmode.indent_region(buf, indent_width=2)

    # Styled spans for a region of text
    spans = ttlmode.classify(buf.text)

    ttlmode.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ttlmode.buffer import LineAccessor, TextBuffer

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from ttlmode.highlight.styles import StyledSpan


def infer_indent(buffer: LineAccessor, line_no: int, indent_width: int = 4) -> int:
    """Return the indentation, in columns, that a line should have.

    Parameters
    ----------
    buffer:
        Host buffer providing line text and existing indentation.
    line_no:
        0-based index of the line to indent.
    indent_width:
        Columns per indentation level.

    Returns
    -------
    int
        A non-negative column count.  The buffer is not modified.
    """
    from ttlmode.indent.indenter import infer_indent as _infer_indent

    return _infer_indent(buffer, line_no, indent_width)


def indent_region(
    buffer: LineAccessor,
    start: int = 0,
    end: int | None = None,
    indent_width: int = 4,
) -> list[int]:
    """Re-indent lines ``[start, end)`` of ``buffer`` from top to bottom.

    Returns
    -------
    list[int]
        The applied column count for every line in the region.
    """
    from ttlmode.indent.indenter import indent_region as _indent_region

    return _indent_region(buffer, start, end, indent_width)


def classify(text: str, start: int = 0, end: int | None = None) -> list["StyledSpan"]:
    """Return styled spans for ``text[start:end]`` after region widening.

    Parameters
    ----------
    text:
        The complete buffer text.
    start, end:
        Region the host wants re-scanned; ``end`` defaults to the end
        of the text.

    Returns
    -------
    list[StyledSpan]
        Non-overlapping spans with offsets into ``text``.
    """
    from ttlmode.highlight.highlighter import classify as _classify

    return _classify(text, start, end)


def extend_region(text: str, start: int, end: int) -> tuple[int, int]:
    """Widen a re-scan region so it never splits a triple-quoted string."""
    from ttlmode.highlight.highlighter import extend_region as _extend_region

    return _extend_region(text, start, end)


__all__ = [
    "__version__",
    "LineAccessor",
    "TextBuffer",
    "classify",
    "extend_region",
    "indent_region",
    "infer_indent",
]
