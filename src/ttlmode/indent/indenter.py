"""Indentation inference for Turtle buffers.

``infer_indent`` decides how far a line should be indented by looking
at the line itself and walking backward through the lines above it.
It never parses; it reads the *existing* indentation of the preceding
line from the host buffer and adjusts it by one unit according to the
shape of that line (see ``ttlmode.indent.shapes``).

Decision order:

1. The current line closes an anonymous node (``]``, ``],``, ``];``,
   ``], [``): one unit less than the preceding line.
2. Otherwise, by the shape of the preceding line:

   - no preceding line: 0
   - resource header: one unit more
   - ends with ``.``: 0
   - ends with ``;``: one unit less if the line before it ends with
     ``,``, else unchanged
   - ends with ``,``: unchanged if the line before it also ends with
     ``,``, else one unit more
   - ends with ``[``: one unit more
   - anything else: unchanged

3. The result is clamped at zero.

Usage
-----
::

    from ttlmode.buffer import TextBuffer
    from ttlmode.indent import Indenter

    buf = TextBuffer("<http://ex.org/a>\\na <http://ex.org/T> .\\n")
    Indenter(indent_width=2).indent_region(buf)
"""
from __future__ import annotations

import logging

from ttlmode.buffer.buffer import LineAccessor
from ttlmode.indent.shapes import LineShape, classify_line, closes_node

logger = logging.getLogger(__name__)

DEFAULT_INDENT_WIDTH = 4


class Indenter:
    """Computes and applies indentation for lines of a host buffer.

    Parameters
    ----------
    indent_width:
        Number of columns in one indentation level.
    """

    __slots__ = ("indent_width",)

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH) -> None:
        self.indent_width = indent_width

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def infer(self, buffer: LineAccessor, line_no: int) -> int:
        """Return the indentation, in columns, that ``line_no`` should have.

        Reads ``buffer`` only; nothing is modified.

        Parameters
        ----------
        buffer:
            The host buffer.
        line_no:
            0-based index of the line to indent.

        Returns
        -------
        int
            A non-negative column count.
        """
        width = self.indent_width
        current = buffer.line(line_no)

        if closes_node(current):
            if line_no == 0:
                return 0
            result = buffer.indentation(line_no - 1) - width
            logger.debug("Line %d closes a node: %d", line_no, max(0, result))
            return max(0, result)

        if line_no == 0:
            return 0

        prev_no = line_no - 1
        shape = classify_line(buffer.line(prev_no))
        prev_indent = buffer.indentation(prev_no)

        if shape is LineShape.HEADER:
            result = prev_indent + width
        elif shape is LineShape.STATEMENT_END:
            result = 0
        elif shape is LineShape.CONTINUATION:
            if self._shape_before(buffer, prev_no) is LineShape.LIST_ITEM:
                result = prev_indent - width
            else:
                result = prev_indent
        elif shape is LineShape.LIST_ITEM:
            if self._shape_before(buffer, prev_no) is LineShape.LIST_ITEM:
                result = prev_indent
            else:
                result = prev_indent + width
        elif shape is LineShape.BLOCK_OPEN:
            result = prev_indent + width
        else:
            result = prev_indent

        logger.debug(
            "Line %d after %s line at %d: %d",
            line_no,
            shape.name,
            prev_indent,
            max(0, result),
        )
        return max(0, result)

    def indent_line(self, buffer: LineAccessor, line_no: int) -> int:
        """Infer the indentation of ``line_no`` and apply it to ``buffer``.

        Returns the applied column count.
        """
        columns = self.infer(buffer, line_no)
        if columns != buffer.indentation(line_no):
            buffer.set_indentation(line_no, columns)
        return columns

    def indent_region(
        self, buffer: LineAccessor, start: int = 0, end: int | None = None
    ) -> list[int]:
        """Re-indent lines ``[start, end)`` from top to bottom.

        Each line is inferred after the lines above it have been
        re-indented, the way an editor's indent-region command runs.

        Returns
        -------
        list[int]
            The applied column count for every line in the region.
        """
        stop = buffer.line_count() if end is None else min(end, buffer.line_count())
        return [self.indent_line(buffer, n) for n in range(max(0, start), stop)]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _shape_before(buffer: LineAccessor, line_no: int) -> LineShape | None:
        """Shape of the line above ``line_no``, or None at the buffer start."""
        if line_no == 0:
            return None
        return classify_line(buffer.line(line_no - 1))

    def __repr__(self) -> str:
        return f"Indenter(indent_width={self.indent_width})"


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def infer_indent(
    buffer: LineAccessor, line_no: int, indent_width: int = DEFAULT_INDENT_WIDTH
) -> int:
    """Return the inferred indentation of ``line_no`` in columns.

    See ``Indenter.infer``.
    """
    return Indenter(indent_width).infer(buffer, line_no)


def indent_line(
    buffer: LineAccessor, line_no: int, indent_width: int = DEFAULT_INDENT_WIDTH
) -> int:
    """Infer and apply the indentation of ``line_no``."""
    return Indenter(indent_width).indent_line(buffer, line_no)


def indent_region(
    buffer: LineAccessor,
    start: int = 0,
    end: int | None = None,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> list[int]:
    """Re-indent lines ``[start, end)`` of ``buffer`` top to bottom."""
    return Indenter(indent_width).indent_region(buffer, start, end)
