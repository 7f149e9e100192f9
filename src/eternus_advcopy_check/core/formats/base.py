"""Parser interface for session listing lines."""

from __future__ import annotations

from typing import Protocol

from ..models import SessionRecord


class SessionParser(Protocol):
    """Parser interface: return SessionRecord if line matches, else None."""

    def parse(self, line: str) -> SessionRecord | None:
        """Parse one listing line into a SessionRecord if recognized."""
        ...
