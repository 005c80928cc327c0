"""Turtle highlighter: rule table → styled spans.

The highlighter runs every ``HighlightRule`` of ``RULES`` over a scan
region of the text and returns coalesced ``StyledSpan`` objects with
offsets into the full text.

Multi-line strings can reach arbitrarily far, so the scan region a host
asks for is widened first (``extend_region``).  ``\"\"\"`` delimiters pair
up from the start of the text, so the widened region:

- starts at the opening ``\"\"\"`` when the region start falls inside a
  long string, at the start of the text when no ``\"\"\"`` precedes it,
  and otherwise at the start of its line (never before the end of the
  last closed string);
- ends at the end of the line holding the nearest ``\"\"\"`` after the
  region end, pushed further until it is outside every long string.

A host that re-highlights incrementally therefore never cuts a
triple-quoted string in two, and the spans of a widened region match
what a full scan produces there.  An unterminated ``\"\"\"`` makes the
region reach the end of the text.
"""
from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Sequence
from typing import Final

from ttlmode.highlight.styles import RULES, HighlightRule, StyledSpan, StyleTag

logger = logging.getLogger(__name__)

TRIPLE_QUOTE: Final[str] = '"""'


def _delimiters(text: str) -> list[int]:
    """Offsets of every ``\"\"\"`` in ``text``, scanned left to right."""
    found: list[int] = []
    pos = text.find(TRIPLE_QUOTE)
    while pos != -1:
        found.append(pos)
        pos = text.find(TRIPLE_QUOTE, pos + len(TRIPLE_QUOTE))
    return found


def _line_end(text: str, pos: int) -> int:
    eol = text.find("\n", pos)
    return len(text) if eol == -1 else eol


def _settle_end(text: str, delimiters: list[int], pos: int) -> int:
    """Move ``pos`` forward until it is outside every long string."""
    width = len(TRIPLE_QUOTE)
    while True:
        count = bisect_left(delimiters, pos)
        if count % 2:
            # Inside a string opened by delimiters[count - 1].
            if count == len(delimiters):
                return len(text)
            close = delimiters[count]
        elif count and delimiters[count - 1] + width > pos:
            # Cuts through a closing delimiter.
            close = delimiters[count - 1]
        else:
            return pos
        pos = _line_end(text, close + width)


def extend_region(text: str, start: int, end: int) -> tuple[int, int]:
    """Widen ``[start, end)`` so it never splits a triple-quoted string.

    Delimiters pair up from the start of the text, so an odd number of
    them before an offset means the offset sits inside a long string.

    Parameters
    ----------
    text:
        The complete buffer text.
    start, end:
        The region the host proposes to re-scan.  Out-of-range values
        are clamped to the text.

    Returns
    -------
    tuple[int, int]
        The widened ``(start, end)``.
    """
    size = len(text)
    start = max(0, min(start, size))
    end = max(start, min(end, size))
    width = len(TRIPLE_QUOTE)
    delimiters = _delimiters(text)

    before = bisect_left(delimiters, start)
    if before == 0:
        new_start = 0
    elif before % 2:
        new_start = delimiters[before - 1]
    elif delimiters[before - 1] + width > start:
        # Starts inside a closing delimiter: take its opener.
        new_start = delimiters[before - 2]
    else:
        line_start = text.rfind("\n", 0, start) + 1
        new_start = max(line_start, delimiters[before - 1] + width)

    new_end = end
    following = bisect_left(delimiters, end)
    if following < len(delimiters):
        new_end = _line_end(text, delimiters[following] + width)
    new_end = _settle_end(text, delimiters, new_end)

    if (new_start, new_end) != (start, end):
        logger.debug("Region %d-%d widened to %d-%d", start, end, new_start, new_end)
    return new_start, new_end


class Highlighter:
    """Applies a highlighting rule table to Turtle text.

    Parameters
    ----------
    rules:
        Rules in application order.  Defaults to ``RULES``.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Sequence[HighlightRule] = RULES) -> None:
        self._rules: tuple[HighlightRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[HighlightRule, ...]:
        return self._rules

    def classify(self, text: str, start: int = 0, end: int | None = None) -> list[StyledSpan]:
        """Style the region ``[start, end)`` of ``text``.

        The region is widened with ``extend_region`` before any rule
        runs.  Within one rule every match paints its group.  A rule
        without ``override`` skips matches that begin on text an earlier
        rule styled, and never repaints styled characters.

        Returns
        -------
        list[StyledSpan]
            Non-overlapping spans in text order, offsets into ``text``.
        """
        if end is None:
            end = len(text)
        start, end = extend_region(text, start, end)
        styles: list[StyleTag | None] = [None] * (end - start)

        # Scanning with pos/endpos lets lookbehinds see text before the region.
        for rule in self._rules:
            for match in rule.pattern.finditer(text, start, end):
                lo, hi = match.span(rule.group)
                if lo < 0 or lo == hi:
                    continue
                lo -= start
                hi -= start
                if not rule.override and styles[lo] is not None:
                    continue
                for i in range(lo, hi):
                    if rule.override or styles[i] is None:
                        styles[i] = rule.style

        return _coalesce(styles, start)


def _coalesce(styles: list[StyleTag | None], offset: int) -> list[StyledSpan]:
    """Merge runs of equal styles into spans, dropping unstyled runs."""
    spans: list[StyledSpan] = []
    run_start = 0
    for i in range(1, len(styles) + 1):
        if i < len(styles) and styles[i] == styles[run_start]:
            continue
        style = styles[run_start]
        if style is not None:
            spans.append(StyledSpan(offset + run_start, offset + i, style))
        run_start = i
    return spans


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def classify(text: str, start: int = 0, end: int | None = None) -> list[StyledSpan]:
    """Style ``text`` with the default rule table.

    Example
    -------
    ::

        from ttlmode.highlight import classify
        spans = classify('<http://ex.org/a> a ex:Thing .')
    """
    return Highlighter().classify(text, start, end)
