"""Parser for ``show advanced-copy-sessions`` table rows."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import SessionRecord

# Column order of the session table; one capture group per column.
COLUMNS: tuple[str, ...] = (
    "sid",
    "generation",
    "type",
    "volume_type",
    "source_no",
    "source",
    "destination_no",
    "destination",
    "state",
    "phase",
    "error_code",
    "requestor",
)


@dataclass(frozen=True, slots=True)
class AdvancedCopySessionParser:
    """Parse one session row of the ETERNUS CLI listing.

    Free-text columns may hold several words separated by single spaces; the
    device pads columns with runs of spaces, so a free-text value never spans
    a wider gap. Rows that do not carry all twelve columns are rejected.
    """

    _row = re.compile(
        r"^\s*(?P<sid>\d+)\s+"
        r"(?P<generation>\S+)\s+"
        r"(?P<type>\S+)\s+"
        r"(?P<volume_type>\S+(?: \S+)*?)\s+"
        r"(?P<source_no>\d+)\s+"
        r"(?P<source>\S+)\s+"
        r"(?P<destination_no>\d+)\s+"
        r"(?P<destination>\S+)\s+"
        r"(?P<state>\S+(?: \S+)*)\s+"
        r"(?P<phase>\S+(?: \S+)*?)\s+"
        r"(?P<error_code>\S+)\s+"
        r"(?P<requestor>\S+)\s*$"
    )

    def parse(self, line: str) -> SessionRecord | None:
        """Parse a table row into a SessionRecord."""
        m = self._row.match(line)
        if not m:
            return None

        return SessionRecord(
            sid=int(m.group("sid")),
            type=m.group("type"),
            source=m.group("source"),
            destination=m.group("destination"),
            state=m.group("state"),
            fields=tuple(m.group(name) for name in COLUMNS),
            raw=line,
        )
