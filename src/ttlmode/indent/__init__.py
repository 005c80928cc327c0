"""Indentation module.

Exports the ``Indenter`` class, the line-shape classifier, and the
``infer_indent`` / ``indent_line`` / ``indent_region`` convenience functions.
"""
from __future__ import annotations

from ttlmode.indent.indenter import (
    DEFAULT_INDENT_WIDTH,
    Indenter,
    indent_line,
    indent_region,
    infer_indent,
)
from ttlmode.indent.shapes import LineShape, classify_line, closes_node, is_header

__all__ = [
    "DEFAULT_INDENT_WIDTH",
    "Indenter",
    "LineShape",
    "classify_line",
    "closes_node",
    "indent_line",
    "indent_region",
    "infer_indent",
    "is_header",
]
