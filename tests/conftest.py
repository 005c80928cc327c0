"""Shared test fixtures for ttl-mode.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest

from ttlmode.buffer import TextBuffer


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "ttlmode"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def make_buffer() -> Callable[..., TextBuffer]:
    """Return a factory building a ``TextBuffer`` from positional lines."""

    def _make(*lines: str, tab_width: int = 8) -> TextBuffer:
        return TextBuffer.from_lines(list(lines), tab_width=tab_width)

    return _make


@pytest.fixture()
def unindented_turtle() -> str:
    """A small Turtle document with every line flush left."""
    return (
        "@prefix ex: <http://ex.org/> .\n"
        "ex:s\n"
        "ex:p ex:o ;\n"
        "ex:q ex:r .\n"
    )
