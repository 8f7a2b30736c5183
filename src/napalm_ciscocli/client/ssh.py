"""Interactive SSH shell channel for prompt-driven Cisco CLIs.

Wraps a :class:`paramiko.Channel` opened with ``invoke_shell()`` and turns the
unframed character stream into a synchronous send/expect API.
"""

from __future__ import annotations

import codecs
import logging
import re
import select
import socket
import time
from collections.abc import Callable, Iterator

import paramiko

from napalm_ciscocli.client.errors import (
    CiscoAuthError,
    CiscoConnectError,
    CiscoTimeoutError,
)
from napalm_ciscocli.client.prompt import DEFAULT_PROMPT, prompt_matched

logger = logging.getLogger(__name__)

# Upper bound for a single recv(); keeps one poll iteration short.
_READ_CHUNK: int = 1024

# How long one select() waits for the channel before re-checking state.
_POLL_INTERVAL_S: float = 0.1


class CiscoSSH:
    """SSH shell transport to a single device.

    Handles the SSH handshake (including password authentication), opens a
    PTY-backed shell channel and implements prompt-delimited reads.  After the
    connection is up, I/O failures are reported as end of stream instead of
    exceptions; callers see ``None`` from :meth:`read_until`.

    Args:
        host: Device hostname or IP address.
        username: SSH username.
        password: SSH password.
        port: SSH TCP port (default 22).
        timeout_s: Timeout for establishing the SSH connection.
        command_timeout_s: Default deadline for a single prompt wait;
            ``None`` waits indefinitely.
        verbose: Log every line sent and every completed read at debug level.
        client_factory: Callable returning a :class:`paramiko.SSHClient`.
    """

    default_prompt: re.Pattern[str] = DEFAULT_PROMPT

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        port: int = 22,
        timeout_s: float = 60.0,
        command_timeout_s: float | None = None,
        verbose: bool = False,
        client_factory: Callable[[], paramiko.SSHClient] = paramiko.SSHClient,
    ) -> None:
        self.host = host
        self.username = username
        self.password = password
        self.port = port
        self.timeout_s = timeout_s
        self.command_timeout_s = command_timeout_s
        self.verbose = verbose
        self._client_factory = client_factory
        self._client: paramiko.SSHClient | None = None
        self._channel: paramiko.Channel | None = None
        self._buf: str = ""
        self._eof: bool = False
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    @property
    def handles_login(self) -> bool:
        """SSH authenticates during the handshake, not at a CLI prompt."""
        return True

    @property
    def eof(self) -> bool:
        """True once the remote end has closed the channel."""
        return self._eof

    def open(self) -> str | None:
        """Connect, start a shell and wait for the first prompt.

        Returns:
            The banner and first prompt, or ``None`` if the device hung up
            before showing a prompt.

        Raises:
            CiscoTimeoutError: If the TCP/SSH handshake times out.
            CiscoAuthError: If the device rejects the credentials.
            CiscoConnectError: On any other SSH or socket failure.
        """
        logger.debug("connecting to %s:%d as %s", self.host, self.port, self.username)
        client = self._client_factory()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        try:
            client.connect(
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                timeout=self.timeout_s,
                allow_agent=False,
                look_for_keys=False,
            )
            channel = client.invoke_shell()
        except socket.timeout as exc:
            client.close()
            raise CiscoTimeoutError(
                self.host, "timed out while opening an ssh connection to the host"
            ) from exc
        except paramiko.AuthenticationException as exc:
            client.close()
            raise CiscoAuthError(
                f"SSH authentication failure connecting to {self.host} as {self.username}"
            ) from exc
        except (paramiko.SSHException, OSError) as exc:
            client.close()
            raise CiscoConnectError(self.host, exc) from exc

        channel.set_combine_stderr(True)
        self._client = client
        self._channel = channel
        self._buf = ""
        self._eof = False
        self._decoder.reset()
        return self.read_until(self.default_prompt)

    def close(self) -> None:
        """Close the shell channel and the SSH connection."""
        try:
            if self._channel is not None:
                self._channel.close()
            if self._client is not None:
                self._client.close()
        except (OSError, EOFError, paramiko.SSHException):
            logger.debug("device terminated ssh session impolitely", exc_info=True)
        finally:
            self._channel = None
            self._client = None

    # ------------------------------------------------------------------
    # Send / expect
    # ------------------------------------------------------------------

    def send(self, line: str) -> None:
        """Send *line* followed by a newline."""
        if self.verbose:
            logger.debug("ssh: send %s", line)
        if self._channel is None or self._eof:
            self._eof = True
            return
        try:
            self._channel.sendall((line + "\n").encode("utf-8"))
        except (OSError, EOFError, paramiko.SSHException):
            logger.debug("send to %s failed; treating as end of stream", self.host)
            self._eof = True

    def expect(
        self,
        prompt: re.Pattern[str],
        timeout_s: float | None = None,
    ) -> Iterator[str | None]:
        """Yield the accumulated output each time new data arrives.

        The sequence ends once *prompt* matches with no further data pending.
        If the channel closes first, a final ``None`` is yielded unless the
        output accumulated so far already matches *prompt*.

        Args:
            prompt: Pattern marking the end of the command output.
            timeout_s: Deadline for the whole wait; ``None`` means no limit.

        Raises:
            CiscoTimeoutError: If the deadline passes without a prompt.
        """
        deadline = time.monotonic() + timeout_s if timeout_s is not None else None
        line = ""
        while True:
            if line and prompt_matched(line, prompt, pending=self._pending()):
                break
            if self._eof:
                if prompt.search(line) is None:
                    yield None
                break
            self._process(prompt, deadline)
            if self._buf:
                line = (line + self._buf).replace("\r\n", "\n")
                self._buf = ""
                yield line
        if self.verbose:
            logger.debug("ssh: expected %s", line)

    def read_until(
        self,
        prompt: re.Pattern[str],
        timeout_s: float | None = None,
    ) -> str | None:
        """Consume :meth:`expect` and return its final value."""
        if timeout_s is None:
            timeout_s = self.command_timeout_s
        out: str | None = None
        for out in self.expect(prompt, timeout_s):
            pass
        return out

    def command(
        self,
        cmd: str,
        prompt: re.Pattern[str] | None = None,
        timeout_s: float | None = None,
    ) -> str | None:
        """Send *cmd* and return everything up to the next *prompt*."""
        self.send(cmd)
        return self.read_until(prompt or self.default_prompt, timeout_s)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _pending(self) -> bool:
        if self._buf:
            return True
        if self._channel is None or self._eof:
            return False
        return bool(self._channel.recv_ready())

    def _process(self, prompt: re.Pattern[str], deadline: float | None) -> None:
        """Block until some data is buffered or the channel reaches EOF."""
        channel = self._channel
        if channel is None:
            self._eof = True
            return
        while not self._buf and not self._eof:
            if deadline is not None and time.monotonic() >= deadline:
                raise CiscoTimeoutError(
                    self.host, f"no prompt matching {prompt.pattern!r} before the deadline"
                )
            try:
                if channel.recv_ready():
                    data = channel.recv(_READ_CHUNK)
                    if not data:
                        self._eof = True
                    else:
                        self._buf += self._decoder.decode(data)
                elif channel.closed or channel.eof_received:
                    self._eof = True
                else:
                    select.select([channel], [], [], _POLL_INTERVAL_S)
            except (OSError, EOFError, paramiko.SSHException):
                logger.debug("ssh read from %s failed; end of stream", self.host, exc_info=True)
                self._eof = True
