"""Check pipeline: captured listing -> sessions -> classifications -> result.

This module is the main integration point used by the CLI and the MCP tools.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Protocol

import aiofiles
from aiofiles.threadpool import wrap

from .aggregator import AUTH_FAILED, CONNECT_FAILED, aggregate, transport_failure
from .classifier import classify
from .config import ConnectionSettings, resolve_settings
from .formats import AdvancedCopySessionParser, SessionParser
from .models import AggregateResult, Classification, SessionRecord
from .transport import AuthenticationError, ConnectError, ShellTransport

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can return the raw listing output."""

    def capture(self, command: str | None = None) -> str: ...


def default_parser() -> SessionParser:
    return AdvancedCopySessionParser()


def _trim(lines: list[str], *, skip_head: int, skip_tail: int) -> list[str]:
    if skip_head < 0 or skip_tail < 0:
        raise ValueError("skip_head and skip_tail must be >= 0")
    end = len(lines) - skip_tail
    return lines[skip_head:end] if end > skip_head else []


def iter_sessions(
    text: str,
    *,
    parser: SessionParser | None = None,
    skip_head: int = 0,
    skip_tail: int = 0,
) -> Iterator[SessionRecord]:
    """Yield a record for every line that matches the session row grammar."""
    parser = parser or default_parser()
    lines = _trim(text.splitlines(), skip_head=skip_head, skip_tail=skip_tail)
    for line_no, line in enumerate(lines, start=skip_head + 1):
        record = parser.parse(line)
        if record is None:
            if line.strip():
                logger.debug("Skipping non-session line %d: %r", line_no, line)
            continue
        yield record


def classify_output(text: str, **kwargs) -> list[Classification]:
    """Classify every session in a captured listing, in encounter order."""
    return [classify(record) for record in iter_sessions(text, **kwargs)]


def evaluate_output(text: str, **kwargs) -> AggregateResult:
    """Aggregate all sessions of a captured listing into one result."""
    result = aggregate(classify_output(text, **kwargs))
    logger.info("Evaluated %s: %s", result.summary, result.severity.value)
    return result


def run_check(
    settings: ConnectionSettings,
    *,
    transport: Transport | None = None,
    skip_head: int = 0,
    skip_tail: int = 0,
) -> AggregateResult:
    """Query the device and evaluate its session listing.

    Connection and authentication failures are reported as a WARNING result;
    the listing is never parsed in that case.
    """
    settings = resolve_settings(settings)
    transport = transport or ShellTransport(settings)
    try:
        output = transport.capture(settings.command)
    except AuthenticationError as e:
        logger.warning("%s", e.message)
        return transport_failure(AUTH_FAILED)
    except ConnectError as e:
        logger.warning("%s", e.message)
        return transport_failure(CONNECT_FAILED)

    return evaluate_output(output, skip_head=skip_head, skip_tail=skip_tail)


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a capture file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


async def load_capture(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> str:
    """Read a previously captured listing from disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Capture file not found: {path}")
    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        return await f.read()
