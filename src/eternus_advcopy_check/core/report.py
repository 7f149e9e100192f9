"""Plugin output rendering."""

from __future__ import annotations

from .models import AggregateResult

MSG_HEADER = "Advanced Copy"


def render_summary(result: AggregateResult, *, header: str = MSG_HEADER) -> str:
    """First output line: ``<header> <SEVERITY>: <summary>``."""
    return f"{header} {result.severity.value}: {result.summary}"


def render_details(result: AggregateResult) -> str:
    """Extended output: one line per classified session, in encounter order."""
    return "\n".join(result.messages)


def render(result: AggregateResult, *, header: str = MSG_HEADER) -> str:
    """Full plugin output (summary line plus optional detail block)."""
    out = render_summary(result, header=header) + "\n"
    details = render_details(result)
    if details:
        out += details + "\n"
    return out
