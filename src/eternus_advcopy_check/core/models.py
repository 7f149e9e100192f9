"""Core data models for the Advanced Copy check."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Monitoring outcome reported to the scheduler."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        """Plugin exit code for this severity (0/1/2/3)."""
        return _EXIT_CODES[self]


_EXIT_CODES: dict[Severity, int] = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}


class TypeCategory(str, Enum):
    """Session type families that share one state table."""

    COPY = "copy"  # EC, OPC, QuickOPC, SnapOPC, SnapOPC+, Monitor
    REMOTE = "remote"  # REC
    OFFLOAD = "offload"  # ODX
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class SessionRecord:
    """One row of the ``show advanced-copy-sessions`` table."""

    sid: int
    type: str
    source: str
    destination: str
    state: str
    fields: tuple[str, ...]  # all captured columns, in table order
    raw: str | None = None


@dataclass(frozen=True, slots=True)
class Classification:
    """Severity and report line for a single session."""

    severity: Severity
    message: str
    record: SessionRecord | None = None


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Overall outcome of one check run."""

    severity: Severity = Severity.OK
    messages: tuple[str, ...] = ()
    session_count: int | None = 0  # None when the device was never reached
    summary: str = ""
