"""Connection settings, environment overrides and logging setup."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_COMMAND = "show advanced-copy-sessions -type all"
SHELL_WAIT_ENV = "ADVCOPY_SHELL_WAIT"
CONNECT_TIMEOUT_ENV = "ADVCOPY_CONNECT_TIMEOUT"
LOG_LEVEL_ENV = "ADVCOPY_LOG_LEVEL"

MAX_SHELL_WAIT = 60.0


class ConnectionSettings(BaseModel):
    """How to reach the array's management shell."""

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(min_length=1, description="IP address or hostname of the ETERNUS device.")
    port: int = Field(default=22, ge=1, le=65535, description="SSH port.")
    username: str = Field(min_length=1, description="Account with at least the Monitor role.")
    password: SecretStr
    connect_timeout: float = Field(default=10.0, gt=0, description="TCP/SSH connect timeout (s).")
    shell_wait: float = Field(
        default=2.0,
        ge=0,
        le=MAX_SHELL_WAIT,
        description="Seconds to wait for the listing after sending the command.",
    )
    command: str = DEFAULT_COMMAND
    terminal: str = "vt102"


def _env_float(name: str, *, minimum: float, maximum: float | None = None) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < minimum or (maximum is not None and value > maximum):
        bound = f"between {minimum:g} and {maximum:g}" if maximum is not None else f">= {minimum:g}"
        raise ValueError(f"{name} must be {bound}")
    return value


def resolve_settings(settings: ConnectionSettings) -> ConnectionSettings:
    """Return settings with optional env overrides applied."""
    updates: dict[str, float] = {}

    wait = _env_float(SHELL_WAIT_ENV, minimum=0.0, maximum=MAX_SHELL_WAIT)
    if wait is not None:
        updates["shell_wait"] = wait

    timeout = _env_float(CONNECT_TIMEOUT_ENV, minimum=0.1)
    if timeout is not None:
        updates["connect_timeout"] = timeout

    if not updates:
        return settings
    return settings.model_copy(update=updates)


def configure_logging(default_level: str = "WARNING") -> None:
    """Configure stderr logging; stdout is reserved for the plugin report."""
    level_name = os.getenv(LOG_LEVEL_ENV, default_level).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
