"""SSH shell transport for the ETERNUS CLI.

The array's CLI is an interactive shell rather than an exec channel, so the
listing command is typed into a pseudo-terminal and its output is drained after
a bounded wait.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass

import paramiko

from .config import ConnectionSettings

logger = logging.getLogger(__name__)

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")
_RECV_BYTES = 65535


class TransportError(Exception):
    """The device could not be queried."""

    def __init__(self, message: str, host: str | None = None):
        self.message = message
        self.host = host
        super().__init__(message)


class ConnectError(TransportError):
    """TCP or SSH session setup failed."""


class AuthenticationError(TransportError):
    """The device rejected the credentials."""


def clean_output(text: str) -> str:
    """Drop terminal escape sequences and carriage returns."""
    text = _ANSI_RE.sub("", text)
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(frozen=True, slots=True)
class ShellTransport:
    """Run one CLI command through an interactive SSH shell."""

    settings: ConnectionSettings

    def _connect(self) -> paramiko.SSHClient:
        s = self.settings
        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        try:
            client.connect(
                s.hostname,
                port=s.port,
                username=s.username,
                password=s.password.get_secret_value(),
                timeout=s.connect_timeout,
                look_for_keys=False,
                allow_agent=False,
            )
        except paramiko.AuthenticationException as e:
            client.close()
            raise AuthenticationError(f"Authentication failed for {s.hostname}", host=s.hostname) from e
        except (paramiko.SSHException, OSError) as e:
            client.close()
            raise ConnectError(f"Failed to connect to {s.hostname}:{s.port}: {e}", host=s.hostname) from e
        return client

    def _drain(self, shell: paramiko.Channel) -> str:
        chunks: list[str] = []
        while shell.recv_ready():
            chunk = shell.recv(_RECV_BYTES)
            if not chunk:
                break
            chunks.append(chunk.decode("utf-8", errors="replace"))
        return "".join(chunks)

    def capture(self, command: str | None = None) -> str:
        """Send ``command`` (default: the configured listing) and return its output."""
        s = self.settings
        command = command or s.command

        logger.info("Connecting to %s:%s as %s", s.hostname, s.port, s.username)
        client = self._connect()
        try:
            try:
                shell = client.invoke_shell(term=s.terminal, width=200, height=1000)
            except (paramiko.SSHException, OSError) as e:
                raise ConnectError(f"Could not open a shell on {s.hostname}: {e}", host=s.hostname) from e

            try:
                shell.send(command + "\n")
                time.sleep(s.shell_wait)
                output = self._drain(shell)
                shell.send("exit\n")
                shell.close()
            except (paramiko.SSHException, OSError) as e:
                raise ConnectError(f"Shell session to {s.hostname} dropped: {e}", host=s.hostname) from e
        finally:
            client.close()

        logger.info("Captured %d characters from %s", len(output), s.hostname)
        return clean_output(output)
