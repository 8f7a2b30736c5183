"""Privileged CLI session to a Cisco device on top of a shell transport."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from napalm_ciscocli.client.errors import (
    CiscoAuthError,
    CiscoCommandError,
    CiscoError,
    CiscoPrivilegeError,
)
from napalm_ciscocli.client.events import DiagnosticEvent, EventKind, EventSink, log_event
from napalm_ciscocli.client.prompt import (
    LOGIN_PROMPT,
    LOGIN_RESULT_PROMPT,
    PASSWORD_PROMPT,
    UNPRIVILEGED_PROMPT,
)
from napalm_ciscocli.parser.common import content_lines
from napalm_ciscocli.vendor.cisco.commands import ENABLE, SHOW_VLAN_BRIEF, TERMINAL_LENGTH

logger = logging.getLogger(__name__)

_ERROR_MARKER_RE: re.Pattern[str] = re.compile(r"^%|^Command rejected:", re.MULTILINE)

# The "^" line IOS prints under the offending token of a rejected command.
_CARET_LINE_RE: re.Pattern[str] = re.compile(r"^\s*\^\s*$")


class Transport(Protocol):
    """What :class:`CiscoSession` needs from a byte-stream transport."""

    host: str

    @property
    def handles_login(self) -> bool: ...

    def open(self) -> str | None: ...

    def close(self) -> None: ...

    def read_until(self, prompt: re.Pattern[str], timeout_s: float | None = None) -> str | None: ...

    def command(
        self,
        cmd: str,
        prompt: re.Pattern[str] | None = None,
        timeout_s: float | None = None,
    ) -> str | None: ...


@dataclass(frozen=True)
class CiscoCredentials:
    """Immutable login data for a Cisco device.

    Args:
        username: Login username; empty when the device only asks for a
            password.
        password: Login password.
        enable_password: Secret for privileged mode, if one is configured.
    """

    username: str
    password: str
    enable_password: str | None = None


class Capability(Enum):
    UNKNOWN = "unknown"
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command.

    Attributes:
        command: The command line that was sent.
        output: Device output with the echoed command removed, or ``None``
            if the stream ended before the next prompt.
        is_error: Whether the device flagged the command as failed.
        error_text: What the device said, when ``is_error`` is set.
    """

    command: str
    output: str | None
    is_error: bool = False
    error_text: str | None = None


class CiscoSession:
    """Sequences login, privilege escalation and command execution.

    All device access goes through :meth:`connected` (or :meth:`command`,
    which uses it), which holds a lock for the whole
    connect/execute/disconnect cycle so that only one command is ever in
    flight on the underlying channel.

    Args:
        transport: Shell transport, normally :class:`~.ssh.CiscoSSH`.
        credentials: Username/password/enable secret.
        event_sink: Receives :class:`~.events.DiagnosticEvent` objects;
            defaults to :func:`~.events.log_event`.
    """

    def __init__(
        self,
        transport: Transport,
        credentials: CiscoCredentials,
        event_sink: EventSink | None = None,
    ) -> None:
        self._transport = transport
        self._credentials = credentials
        self._event_sink: EventSink = event_sink or log_event
        self._lock = threading.Lock()
        self._owner: int | None = None
        self.authenticated: bool = False
        self.privileged: bool = False
        self.vlan_brief: Capability = Capability.UNKNOWN

    @property
    def host(self) -> str:
        return self._transport.host

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the transport, log in, enter privileged mode and detect capabilities.

        Raises:
            CiscoConnectError: If the transport cannot be opened.
            CiscoAuthError: If the credentials are rejected.
            CiscoPrivilegeError: If enable mode is needed but unavailable.
        """
        self.emit(EventKind.CONNECT, f"connecting to {self.host}")
        self._transport.open()
        self.login()
        out = self._transport.command(TERMINAL_LENGTH)
        if out is not None and UNPRIVILEGED_PROMPT.search(out):
            self.enable()
        else:
            self.privileged = out is not None
        self.find_capabilities()

    def disconnect(self) -> None:
        """Close the transport and forget per-connection state."""
        self._transport.close()
        self.authenticated = False
        self.privileged = False
        self.vlan_brief = Capability.UNKNOWN

    def login(self) -> None:
        """Authenticate at the CLI when the transport did not already."""
        if self._transport.handles_login:
            self.authenticated = True
            return
        if self._credentials.username != "":
            self._transport.command(self._credentials.username, prompt=PASSWORD_PROMPT)
        else:
            self._transport.read_until(PASSWORD_PROMPT)
        out = self._transport.command(self._credentials.password, prompt=LOGIN_RESULT_PROMPT)
        if out is None:
            raise CiscoAuthError(f"{self.host} closed the session after the password was sent")
        if LOGIN_PROMPT.search(out):
            raise CiscoAuthError(f"{self.host} rejected the login credentials")
        self.authenticated = True

    def enable(self) -> None:
        """Enter privileged exec mode.

        Raises:
            CiscoPrivilegeError: If no enable secret is configured, or the
                device does not accept it.
        """
        secret = self._credentials.enable_password
        if not secret:
            raise CiscoPrivilegeError(
                "Can't issue \"enable\" to enter privileged, no enable password set"
            )
        self._transport.command(ENABLE, prompt=PASSWORD_PROMPT)
        out = self._transport.command(secret)
        if out is None or UNPRIVILEGED_PROMPT.search(out):
            raise CiscoPrivilegeError(f"{self.host} rejected the enable password")
        self.privileged = True

    def find_capabilities(self) -> None:
        """Check once per connection whether ``show vlan brief`` exists."""
        result = self.execute(SHOW_VLAN_BRIEF)
        lines = [
            line for line in content_lines(result.output) if not _CARET_LINE_RE.match(line)
        ]
        if result.output is not None and lines and lines[0].startswith("%"):
            self.vlan_brief = Capability.UNSUPPORTED
        else:
            self.vlan_brief = Capability.SUPPORTED
        logger.debug("%s: show vlan brief %s", self.host, self.vlan_brief.value)

    @property
    def supports_vlan_brief(self) -> bool:
        return self.vlan_brief is Capability.SUPPORTED

    @contextmanager
    def connected(self) -> Iterator[CiscoSession]:
        """Connect, yield the session, and always disconnect afterwards.

        Raises:
            CiscoError: If called again from inside an open connection on the
                same thread, e.g. from a :meth:`command` callback.  Use the
                session passed to the callback instead.
        """
        if self._owner == threading.get_ident():
            raise CiscoError(
                f"session to {self.host} already connected; nested connections are not supported"
            )
        with self._lock:
            self._owner = threading.get_ident()
            try:
                self.connect()
                yield self
            finally:
                try:
                    self.disconnect()
                finally:
                    self._owner = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def command(
        self,
        cmd: str | None = None,
        callback: Callable[[CiscoSession], Any] | None = None,
    ) -> str | None:
        """Run *cmd* and/or *callback* inside one connection.

        Args:
            cmd: Command to execute, if any.
            callback: Called with the connected session after *cmd*.

        Returns:
            The output of *cmd*, or ``None`` if no command was given.
        """
        out: str | None = None
        with self.connected():
            if cmd:
                out = self.execute(cmd).output
            if callback is not None:
                callback(self)
        return out

    def execute(self, cmd: str) -> CommandResult:
        """Send *cmd* on the open connection and collect its output.

        Device-side errors do not raise; they are reported to the event sink
        and flagged on the returned :class:`CommandResult`.
        """
        out = self._transport.command(cmd)
        if out is None:
            return CommandResult(command=cmd, output=None)
        if out.startswith(cmd):
            out = out[len(cmd):]
        if _ERROR_MARKER_RE.search(out):
            error = CiscoCommandError(command=cmd, output=out.strip())
            self.emit(EventKind.COMMAND_ERROR, str(error), command=cmd, error=error)
            return CommandResult(command=cmd, output=out, is_error=True, error_text=error.output)
        return CommandResult(command=cmd, output=out)

    def emit(self, kind: EventKind, message: str, **details: Any) -> None:
        """Hand a diagnostic event to the configured sink."""
        self._event_sink(DiagnosticEvent(kind=kind, message=message, host=self.host, details=details))
