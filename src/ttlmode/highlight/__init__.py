"""Highlighting module.

Exports the ``Highlighter`` class, the rule table, and the ``classify`` /
``extend_region`` convenience functions.
"""
from __future__ import annotations

from ttlmode.highlight.highlighter import Highlighter, classify, extend_region
from ttlmode.highlight.styles import RULES, HighlightRule, StyledSpan, StyleTag

__all__ = [
    "Highlighter",
    "HighlightRule",
    "RULES",
    "StyleTag",
    "StyledSpan",
    "classify",
    "extend_region",
]
