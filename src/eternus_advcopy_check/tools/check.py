"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from eternus_advcopy_check.core.check_service import evaluate_output, run_check
from eternus_advcopy_check.core.config import ConnectionSettings
from eternus_advcopy_check.core.models import AggregateResult
from eternus_advcopy_check.core.report import render

MAX_OUTPUT_CHARS = 1_000_000


def result_to_dict(result: AggregateResult) -> dict[str, Any]:
    """Convert an AggregateResult into a JSON-serializable dict."""
    return {
        "severity": result.severity.value,
        "exit_code": result.severity.exit_code,
        "summary": result.summary,
        "session_count": result.session_count,
        "details": list(result.messages),
        "report": render(result),
    }


def evaluate_output_impl(
    *,
    output: str,
    skip_head: int = 0,
    skip_tail: int = 0,
) -> dict[str, Any]:
    """Implementation for the `evaluate_advanced_copy_output` MCP tool."""
    if len(output) > MAX_OUTPUT_CHARS:
        raise ValueError(f"output is too large (max {MAX_OUTPUT_CHARS} characters)")
    result = evaluate_output(output, skip_head=skip_head, skip_tail=skip_tail)
    return result_to_dict(result)


def check_advanced_copy_impl(
    *,
    hostname: str,
    username: str,
    password: str,
    port: int = 22,
    shell_wait: float | None = None,
    transport=None,
) -> dict[str, Any]:
    """Implementation for the `check_advanced_copy` MCP tool.

    Notes
    -----
    - Invalid connection settings raise ValueError with pydantic's message.
    - Connection and authentication failures are part of the result
      (severity WARNING), not exceptions.
    """
    values: dict[str, Any] = {
        "hostname": hostname,
        "port": port,
        "username": username,
        "password": password,
    }
    if shell_wait is not None:
        values["shell_wait"] = shell_wait
    try:
        settings = ConnectionSettings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid connection settings: {e}") from e

    return result_to_dict(run_check(settings, transport=transport))
