#!/usr/bin/env python3
"""Example: Quickstart for ttl-mode

Minimal working example: re-indent a Turtle document the way an
editor's indent-region command would, then list its highlighted spans.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install ttl-mode
"""
from __future__ import annotations

import ttlmode

TURTLE_SOURCE = '''@prefix ex: <http://example.org/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:alice
a ex:Person ;
ex:knows ex:bob ,
ex:carol ;
ex:address [
ex:city "Lyon" ;
ex:zip "69001"^^xsd:string
] ;
ex:bio """Likes
long walks.""" .
'''


def main() -> None:
    print(f"ttl-mode version: {ttlmode.__version__}")

    # Step 1: Re-indent every line, top to bottom
    buf = ttlmode.TextBuffer(TURTLE_SOURCE)
    columns = ttlmode.indent_region(buf, indent_width=2)
    print(f"Indented {len(columns)} lines:")
    print(buf.text)

    # Step 2: Ask for the indentation of a single line without applying it
    print(f"Line 5 wants {ttlmode.infer_indent(buf, 5, indent_width=2)} columns")

    # Step 3: Highlight a region that starts inside the multi-line string
    text = buf.text
    start = text.index("long walks")
    lo, hi = ttlmode.extend_region(text, start, start + 4)
    print(f"\nRegion {start}-{start + 4} widened to {lo}-{hi}")
    for span in ttlmode.classify(text, start, start + 4):
        print(f"  {span.style.name:<14} {text[span.start:span.end]!r}")


if __name__ == "__main__":
    main()
