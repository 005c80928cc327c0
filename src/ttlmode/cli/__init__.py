"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations.  It imports only from the public modules of
the parent package.
"""
from __future__ import annotations
