"""Shared fakes for napalm-ciscocli unit tests.

``FakeChannel`` stands in for a :class:`paramiko.Channel` at the byte level;
``FakeTransport`` stands in for :class:`~napalm_ciscocli.client.ssh.CiscoSSH`
at the command level and behaves like a small scripted IOS device.
"""

from __future__ import annotations

import pathlib
import re
from collections import deque
from unittest.mock import MagicMock

import pytest

from napalm_ciscocli.client.prompt import PASSWORD_PROMPT

FIXTURES = pathlib.Path(__file__).parent.parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text().rstrip("\n")


def body_of(fixture: str) -> str:
    """Strip the echo line and trailing prompt off a fixture file."""
    lines = load_fixture(fixture).split("\n")
    return "\n".join(lines[1:-1]) + "\n"


# ---------------------------------------------------------------------------
# Byte-level fake
# ---------------------------------------------------------------------------


class FakeChannel:
    """Scripted paramiko channel.

    *chunks* are delivered one per ``recv()`` call.  *replies* maps a command
    line to the text the device prints for it; on ``sendall`` the echo, the
    reply and the prompt are queued as one chunk.  When nothing is queued the
    channel reports EOF unless *hang_up_when_idle* is false.
    """

    def __init__(
        self,
        chunks: list[bytes] | None = None,
        replies: dict[str, str] | None = None,
        prompt: str = "switch1#",
        hang_up_when_idle: bool = True,
    ) -> None:
        self._queue: deque[bytes] = deque(chunks or [])
        self.replies = replies or {}
        self.prompt = prompt
        self.hang_up_when_idle = hang_up_when_idle
        self.sent: list[str] = []
        self.closed = False
        self.recv_error: Exception | None = None

    def recv_ready(self) -> bool:
        return bool(self._queue)

    def recv(self, nbytes: int) -> bytes:
        if self.recv_error is not None:
            raise self.recv_error
        return self._queue.popleft()

    @property
    def eof_received(self) -> bool:
        return self.hang_up_when_idle and not self._queue

    def sendall(self, data: bytes) -> None:
        line = data.decode("utf-8").rstrip("\n")
        self.sent.append(line)
        if line in self.replies:
            text = f"{line}\r\n{self.replies[line]}{self.prompt}"
            self._queue.append(text.replace("\n", "\r\n").replace("\r\r\n", "\r\n").encode())

    def set_combine_stderr(self, combine: bool) -> None:
        pass

    def close(self) -> None:
        self.closed = True


def make_client(channel: FakeChannel) -> MagicMock:
    """A mock paramiko.SSHClient whose shell is *channel*."""
    client = MagicMock()
    client.invoke_shell.return_value = channel
    return client


# ---------------------------------------------------------------------------
# Command-level fake
# ---------------------------------------------------------------------------


class FakeTransport:
    """Scripted device speaking the CiscoSSH command contract.

    Args:
        replies: Command → output body.  ``None`` simulates the device
            closing the stream; a ``(body, prompt)`` tuple also changes the
            prompt shown after the command.
        prompt: Prompt shown after login.
        handles_login: Whether the transport authenticates by itself.
    """

    host = "10.0.0.1"

    def __init__(
        self,
        replies: dict[str, object] | None = None,
        prompt: str = "switch1#",
        handles_login: bool = True,
    ) -> None:
        self.replies: dict[str, object] = {
            "terminal length 0": "",
            "show vlan brief": body_of("show_vlan_brief.txt"),
        }
        self.replies.update(replies or {})
        self.prompt = prompt
        self.handles_login = handles_login
        self.sent: list[str] = []
        self.opened = 0
        self.closed = 0

    def open(self) -> str | None:
        self.opened += 1
        return f"\n{self.prompt}"

    def close(self) -> None:
        self.closed += 1

    def read_until(self, prompt: re.Pattern[str], timeout_s: float | None = None) -> str | None:
        return "User Access Verification\n\nPassword: "

    def command(
        self,
        cmd: str,
        prompt: re.Pattern[str] | None = None,
        timeout_s: float | None = None,
    ) -> str | None:
        self.sent.append(cmd)
        if prompt is PASSWORD_PROMPT:
            return f"{cmd}\nPassword: "
        reply = self.replies.get(cmd, "")
        if reply is None:
            return None
        if isinstance(reply, tuple):
            reply, self.prompt = reply
        return f"{cmd}\n{reply}{self.prompt}"


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
