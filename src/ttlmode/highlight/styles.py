"""Style tags and the Turtle highlighting rule table.

Every rule is a ``HighlightRule``: a compiled pattern, the capture group
to paint, the ``StyleTag`` to paint it with, and whether the rule may
repaint characters an earlier rule already styled.  Rules are applied in
table order by ``ttlmode.highlight.highlighter``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final


class StyleTag(Enum):
    """Lexical categories a host maps onto faces or colors."""

    KEYWORD = auto()        # @prefix, @base
    NAMESPACE = auto()      # the prefix declared by @prefix
    STRING = auto()         # "..." and """..."""
    DATATYPE_URI = auto()   # ^^<...>
    DATATYPE_NAME = auto()  # ^^prefix:name
    LANGUAGE = auto()       # @en, @en-GB after a string
    URI = auto()            # <...>
    BLANK_NODE = auto()     # _:label
    PREFIXED_NAME = auto()  # prefix:name
    PUNCTUATION = auto()    # a [ ] , ; . between whitespace
    COMMENT = auto()        # # to end of line


@dataclass(frozen=True)
class StyledSpan:
    """A half-open ``[start, end)`` character range painted with ``style``."""

    start: int
    end: int
    style: StyleTag

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class HighlightRule:
    """One entry of the highlighting table.

    Parameters
    ----------
    name:
        Short identifier, used in debug logs.
    pattern:
        Compiled regular expression, matched with ``finditer``.
    style:
        Tag painted over the selected group.
    group:
        Capture group to paint; ``0`` paints the whole match.
    override:
        When ``False`` only characters no earlier rule styled are painted.
    """

    name: str
    pattern: re.Pattern[str]
    style: StyleTag
    group: int = field(default=0)
    override: bool = field(default=False)


def _rule(
    name: str, pattern: str, style: StyleTag, group: int = 0, override: bool = False
) -> HighlightRule:
    return HighlightRule(name, re.compile(pattern, re.MULTILINE), style, group, override)


_PN_PREFIX: Final[str] = r"[A-Za-z][\w.-]*"
_PN_LOCAL: Final[str] = r"[\w-]+(?:\.[\w-]+)*"

# Order matters: strings and comments claim their text first so that
# URIs and names inside them stay unstyled.
RULES: Final[tuple[HighlightRule, ...]] = (
    # An unterminated long string runs to the end of the scanned text.
    _rule("long-string", r'"""(?:[^"\\]|\\.|"(?!""))*(?:"""|\Z)', StyleTag.STRING),
    _rule("string", r'"(?:[^"\\\n]|\\.)*"', StyleTag.STRING),
    _rule("comment", r"(?:^|(?<=\s))(#.*)$", StyleTag.COMMENT, group=1),
    _rule("prefix-keyword", r"(?:^|(?<=\s))(@prefix)\b", StyleTag.KEYWORD, group=1),
    _rule(
        "prefix-namespace",
        rf"@prefix\s+((?:{_PN_PREFIX})?:)",
        StyleTag.NAMESPACE,
        group=1,
    ),
    _rule("base-keyword", r"(?:^|(?<=\s))(@base)\b", StyleTag.KEYWORD, group=1),
    _rule("datatype-uri", r"\^\^(<[^<>\s]*>)", StyleTag.DATATYPE_URI, group=1),
    _rule(
        "datatype-name",
        rf"\^\^((?:{_PN_PREFIX})?:(?:{_PN_LOCAL})?)",
        StyleTag.DATATYPE_NAME,
        group=1,
    ),
    _rule("language", r'(?<=")(@[A-Za-z]+(?:-[A-Za-z0-9]+)*)', StyleTag.LANGUAGE, group=1),
    _rule("uri", r"<[^<>\s]*>", StyleTag.URI),
    _rule("blank-node", rf"_:{_PN_LOCAL}", StyleTag.BLANK_NODE),
    _rule(
        "prefixed-name",
        rf"(?<![\w:<@])(?:{_PN_PREFIX})?:(?:{_PN_LOCAL})?",
        StyleTag.PREFIXED_NAME,
    ),
    _rule("punctuation", r"(?:^|(?<=\s))([a\[\],;.])(?=\s|$)", StyleTag.PUNCTUATION, group=1),
)
