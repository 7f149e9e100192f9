"""Fold per-session classifications into one check result."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .models import AggregateResult, Classification, Severity

CONNECT_FAILED = "Unable to establish connection"
AUTH_FAILED = "Unable to authenticate"


def escalate(current: Severity, new: Severity) -> Severity:
    """Return the overall severity after observing ``new``.

    CRITICAL is absorbing, WARNING overrides everything but CRITICAL, and
    UNKNOWN only overrides OK. An OK observation never changes the result.
    """
    if new is Severity.CRITICAL:
        return Severity.CRITICAL
    if new is Severity.WARNING and current is not Severity.CRITICAL:
        return Severity.WARNING
    if new is Severity.UNKNOWN and current not in (Severity.CRITICAL, Severity.WARNING):
        return Severity.UNKNOWN
    return current


def fold(result: AggregateResult, item: Classification) -> AggregateResult:
    """Add one classified session to a running result."""
    return replace(
        result,
        severity=escalate(result.severity, item.severity),
        messages=(*result.messages, item.message),
        session_count=(result.session_count or 0) + 1,
    )


def session_summary(count: int) -> str:
    return f"{count} session(s)"


def aggregate(items: Iterable[Classification]) -> AggregateResult:
    """Fold classifications in encounter order and attach the summary."""
    result = AggregateResult()
    for item in items:
        result = fold(result, item)
    count = result.session_count or 0
    return replace(result, session_count=count, summary=session_summary(count))


def transport_failure(message: str) -> AggregateResult:
    """Result for a run that never reached the session listing."""
    return AggregateResult(
        severity=Severity.WARNING,
        messages=(),
        session_count=None,
        summary=message,
    )
