"""Host buffer module.

Exports the ``LineAccessor`` protocol and the in-memory ``TextBuffer``.
"""
from __future__ import annotations

from ttlmode.buffer.buffer import LineAccessor, TextBuffer, measure_indentation

__all__ = ["LineAccessor", "TextBuffer", "measure_indentation"]
