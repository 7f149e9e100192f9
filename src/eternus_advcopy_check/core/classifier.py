"""Session health classification.

Maps a session's type and reported state to a Severity and a report line.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from .models import Classification, SessionRecord, Severity, TypeCategory

_CATEGORY_PATTERNS: tuple[tuple[TypeCategory, re.Pattern[str]], ...] = (
    (TypeCategory.COPY, re.compile(r"^(EC|OPC|QuickOPC|SnapOPC|SnapOPC\+|Monitor)$")),
    (TypeCategory.REMOTE, re.compile(r"^REC$")),
    (TypeCategory.OFFLOAD, re.compile(r"^ODX$")),
)

STATE_TABLE: Mapping[TypeCategory, Mapping[str, Severity]] = MappingProxyType(
    {
        TypeCategory.COPY: MappingProxyType(
            {
                "Active": Severity.OK,
                "Reserved": Severity.OK,
                "Suspend": Severity.OK,
                "Error Suspend": Severity.CRITICAL,
                "Unknown": Severity.WARNING,
            }
        ),
        TypeCategory.REMOTE: MappingProxyType(
            {
                "Active": Severity.OK,
                "Reserved": Severity.OK,
                "Suspend": Severity.OK,
                "Halt": Severity.CRITICAL,
                "Error Suspend": Severity.CRITICAL,
                "Unknown": Severity.WARNING,
            }
        ),
        TypeCategory.OFFLOAD: MappingProxyType(
            {
                "Active": Severity.OK,
                "Reserved": Severity.OK,
                "Error Suspend": Severity.CRITICAL,
                "Unknown": Severity.WARNING,
            }
        ),
    }
)

UNKNOWN_TYPE_PREFIX = "UNKNOWN TYPE - "


def categorize(session_type: str) -> TypeCategory:
    """Return the category whose pattern matches the whole type field."""
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.match(session_type):
            return category
    return TypeCategory.UNRECOGNIZED


def severity_for(category: TypeCategory, state: str) -> Severity:
    """Look up a state in the category table; unlisted states are UNKNOWN."""
    table = STATE_TABLE.get(category)
    if table is None:
        return Severity.UNKNOWN
    return table.get(state, Severity.UNKNOWN)


def message_prefix(severity: Severity) -> str:
    """Report prefix for a severity (none for OK)."""
    if severity is Severity.OK:
        return ""
    return f"{severity.value} - "


def describe(record: SessionRecord) -> str:
    """Format ``<type> (<source> > <destination>) is <state>``."""
    return f"{record.type} ({record.source} > {record.destination}) is {record.state}"


def classify(record: SessionRecord) -> Classification:
    """Classify one session record."""
    category = categorize(record.type)
    if category is TypeCategory.UNRECOGNIZED:
        return Classification(
            severity=Severity.UNKNOWN,
            message=UNKNOWN_TYPE_PREFIX + describe(record),
            record=record,
        )

    severity = severity_for(category, record.state)
    return Classification(
        severity=severity,
        message=message_prefix(severity) + describe(record),
        record=record,
    )
