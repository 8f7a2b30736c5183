"""Custom exceptions for the napalm-ciscocli SSH client."""

from __future__ import annotations

from dataclasses import dataclass


class CiscoError(Exception):
    """Base exception for all napalm-ciscocli errors."""


class CiscoConnectError(CiscoError):
    """Raised when the SSH byte stream to the device cannot be established."""

    def __init__(self, host: str, cause: Exception | str) -> None:
        self.host = host
        self.cause = cause
        super().__init__(f"SSH connection to {host!r} failed: {cause}")


class CiscoTimeoutError(CiscoConnectError):
    """Raised when connecting, or waiting for a prompt, exceeds its deadline."""


class CiscoAuthError(CiscoError):
    """Raised when the device rejects the login credentials."""


class CiscoPrivilegeError(CiscoError):
    """Raised when privileged (enable) mode cannot be entered."""


class CiscoParseError(CiscoError):
    """Raised when device output does not match a recognised dialect."""


class CiscoValidationError(CiscoError):
    """Raised when caller-supplied data violates a device naming constraint."""


@dataclass
class CiscoCommandError(CiscoError):
    """A device error marker (``%`` or ``Command rejected:``) seen in output.

    Never raised by :meth:`CiscoSession.execute`; it is attached to the
    diagnostic event so that callers can inspect what the device said.
    """

    command: str
    output: str

    def __post_init__(self) -> None:
        super().__init__(
            f"Error while executing {self.command!r}, device returned: {self.output}"
        )
