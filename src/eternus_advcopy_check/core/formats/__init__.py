"""Session listing parsers.

Contains the row parser for the ETERNUS ``show advanced-copy-sessions`` table.
"""

from __future__ import annotations

from .advcopy import COLUMNS, AdvancedCopySessionParser
from .base import SessionParser

__all__ = [
    "COLUMNS",
    "AdvancedCopySessionParser",
    "SessionParser",
]
