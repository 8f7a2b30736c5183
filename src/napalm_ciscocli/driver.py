"""Cisco CLI NAPALM driver: top-level NetworkDriver implementation."""

from __future__ import annotations

import logging
from typing import Any

from napalm.base.base import NetworkDriver

from napalm_ciscocli.client.device_ops import (
    read_facts,
    read_interface,
    read_interface_names,
    read_vlans,
)
from napalm_ciscocli.client.errors import CiscoError
from napalm_ciscocli.client.interface_ops import CiscoInterface
from napalm_ciscocli.client.session import CiscoCredentials, CiscoSession
from napalm_ciscocli.client.ssh import CiscoSSH
from napalm_ciscocli.client.vlan_ops import update_vlan
from napalm_ciscocli.model.interface import InterfaceRecord
from napalm_ciscocli.model.vlan import VlanRecord
from napalm_ciscocli.parser.interface import parse_interface_status
from napalm_ciscocli.utils.normalize import canonicalize_ifname
from napalm_ciscocli.vendor.cisco.commands import SHOW_INTERFACE

logger = logging.getLogger(__name__)

_VENDOR: str = "Cisco"


class CiscoCliDriver(NetworkDriver):  # type: ignore[misc]
    """NAPALM driver for Cisco IOS switches managed over an SSH shell.

    Every operation is one scoped connection: connect, log in, enter enable
    mode, detect capabilities, run the commands, disconnect.

    Args:
        hostname: IP address or hostname of the switch.
        username: SSH username.
        password: SSH password.
        timeout: SSH connect timeout in seconds.
        optional_args: Optional driver configuration overrides.
            Supported keys:

            - ``port`` (int): SSH port (default 22).
            - ``secret`` / ``enable_password`` (str): enable secret.
            - ``command_timeout`` (float): deadline for each prompt wait
              (default: *timeout*).
            - ``event_sink`` (callable): receives
              :class:`~napalm_ciscocli.client.events.DiagnosticEvent`.
            - ``verbose`` (bool): log all SSH traffic at debug level.
    """

    def __init__(
        self,
        hostname: str,
        username: str,
        password: str,
        timeout: int = 60,
        optional_args: dict[str, Any] | None = None,
    ) -> None:
        self.hostname = hostname
        self.username = username
        self.password = password
        self.timeout = timeout
        self.optional_args: dict[str, Any] = optional_args or {}

        self._port: int = int(self.optional_args.get("port", 22))
        self._enable_password: str | None = self.optional_args.get(
            "secret", self.optional_args.get("enable_password")
        )
        self._command_timeout: float = float(
            self.optional_args.get("command_timeout", self.timeout)
        )
        self._session: CiscoSession | None = None

        logger.debug(
            "CiscoCliDriver initialised: host=%s port=%d user=%s",
            self.hostname,
            self._port,
            self.username,
        )

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Create the session and verify that login and enable succeed.

        Raises:
            CiscoConnectError: If the SSH connection cannot be made.
            CiscoAuthError: If the credentials are rejected.
            CiscoPrivilegeError: If enable mode is required but unavailable.
        """
        logger.info("Opening connection to %s:%d", self.hostname, self._port)
        transport = CiscoSSH(
            host=self.hostname,
            username=self.username,
            password=self.password,
            port=self._port,
            timeout_s=float(self.timeout),
            command_timeout_s=self._command_timeout,
            verbose=bool(self.optional_args.get("verbose", False)),
        )
        creds = CiscoCredentials(
            username=self.username,
            password=self.password,
            enable_password=self._enable_password,
        )
        self._session = CiscoSession(
            transport, creds, event_sink=self.optional_args.get("event_sink")
        )
        self._session.command()

    def close(self) -> None:
        """Forget the session; connections are already closed after each call."""
        if self._session is not None:
            logger.info("Closing connection to %s", self.hostname)
            self._session = None

    def is_alive(self) -> dict[str, bool]:
        """Return whether the driver holds an open session."""
        return {"is_alive": self._session is not None}

    # ------------------------------------------------------------------
    # Device operations
    # ------------------------------------------------------------------

    def command(
        self,
        cmd: str | None = None,
        callback: Any = None,
    ) -> str | None:
        """Run *cmd* (and *callback* with the connected session) in one connection."""
        return self._require_session().command(cmd, callback)

    def cli(self, commands: list[str], encoding: str = "text") -> dict[str, str]:
        """Execute raw CLI commands and return their output keyed by command.

        Raises:
            NotImplementedError: For any *encoding* other than ``"text"``.
        """
        if encoding != "text":
            raise NotImplementedError(f"{encoding} is not a supported encoding")
        result: dict[str, str] = {}
        with self._require_session().connected() as session:
            for cmd in commands:
                result[cmd] = session.execute(cmd).output or ""
        return result

    def interface(self, name: str) -> InterfaceRecord:
        """Return the merged state of interface *name*."""
        with self._require_session().connected() as session:
            return read_interface(session, name)

    def new_interface(self, name: str) -> CiscoInterface:
        """Return an updater for interface *name*.

        Call :meth:`CiscoInterface.update` from a :meth:`command` callback
        or :meth:`update_interface`.
        """
        return CiscoInterface(canonicalize_ifname(name), self._require_session())

    def update_interface(
        self,
        name: str,
        current: dict[str, Any],
        desired: dict[str, Any],
    ) -> list[str]:
        """Converge interface *name* from *current* to *desired* properties."""
        interface = self.new_interface(name)
        with self._require_session().connected():
            return interface.update(current, desired)

    def vlans(self) -> dict[str, VlanRecord]:
        """Return the VLAN table keyed by VLAN id."""
        with self._require_session().connected() as session:
            return read_vlans(session)

    def update_vlan(
        self,
        vlan_id: int | str,
        current: dict[str, Any] | None = None,
        desired: dict[str, Any] | None = None,
    ) -> bool:
        """Create, rename or delete a VLAN; see :func:`.vlan_ops.update_vlan`."""
        with self._require_session().connected() as session:
            return update_vlan(session, vlan_id, current, desired)

    def facts(self) -> dict[str, Any]:
        """Return the flat facts mapping from ``show version``."""
        with self._require_session().connected() as session:
            return read_facts(session)

    # ------------------------------------------------------------------
    # NAPALM getters
    # ------------------------------------------------------------------

    def get_facts(self) -> dict[str, Any]:
        """Return general device facts conforming to the NAPALM schema."""
        facts = self.facts()
        hostname = facts.get("hostname") or self.hostname
        return {
            "hostname": hostname,
            "fqdn": hostname,
            "vendor": _VENDOR,
            "model": facts.get("model") or "unknown",
            "serial_number": facts.get("serial_number") or "",
            "os_version": facts.get("os_version") or "",
            "uptime": facts.get("uptime_seconds", 0.0),
            "interface_list": facts.get("interfaces", []),
        }

    def get_interfaces(self) -> dict[str, Any]:
        """Return interface information conforming to the NAPALM schema.

        Lists interfaces with ``show ip interface brief`` and reads each one
        with ``show interfaces <name>``.
        """
        result: dict[str, Any] = {}
        with self._require_session().connected() as session:
            for name in read_interface_names(session):
                status = parse_interface_status(
                    session.execute(SHOW_INTERFACE.format(name=name)).output
                )
                speed = status.get("speed")
                result[name] = {
                    "is_up": status.get("ensure") == "present",
                    "is_enabled": status.get("ensure") == "present",
                    "description": status.get("description", ""),
                    "last_flapped": -1.0,
                    "speed": float(speed) if speed and speed.isdigit() else 0.0,
                    "mtu": 0,
                    "mac_address": "",
                }
        return result

    def get_vlans(self) -> dict[int, Any]:
        """Return VLAN information conforming to the NAPALM schema.

        Returns:
            Dict keyed by integer VLAN ID, each value being::

                {"name": str, "interfaces": [str, ...]}
        """
        return {
            int(vid): {"name": vlan.name, "interfaces": list(vlan.interfaces)}
            for vid, vlan in self.vlans().items()
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_session(self) -> CiscoSession:
        """Return the active session or raise :exc:`.CiscoError`."""
        if self._session is None:
            raise CiscoError("Session not open; call open() first.")
        return self._session
