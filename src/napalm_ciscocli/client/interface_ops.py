"""Interface write operations for Cisco IOS switches.

Changes are applied in interface configuration mode, in a fixed property
order that IOS accepts (e.g. the trunk encapsulation must be set before the
port can be switched to trunk mode):

    conf t
    interface <name>
    [no] shutdown
    description ... / speed ... / duplex ... / switchport ... /
    channel-group ... / ip address ...
    exit
    exit
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Any

from napalm_ciscocli.client.session import CiscoSession
from napalm_ciscocli.model.interface import IpAddress
from napalm_ciscocli.vendor.cisco.commands import CONFIGURE, EXIT

logger = logging.getLogger(__name__)

# property -> command template, in application order.
_COMMANDS: dict[str, str] = {
    "description": "description {}",
    "speed": "speed {}",
    "duplex": "duplex {}",
    "native_vlan": "switchport trunk native vlan {}",
    "encapsulation": "switchport trunk encapsulation {}",
    "mode": "switchport mode {}",
    "access_vlan": "switchport access vlan {}",
    "allowed_trunk_vlans": "switchport trunk allowed vlan {}",
    "etherchannel": "channel-group {} mode on",
}


def ip_address_command(ip: IpAddress) -> str:
    """Render the interface command that configures *ip*."""
    if ip.address.version == 4:
        cmd = f"ip address {ip.address} {_prefix_to_netmask(ip.prefix_length)}"
    else:
        cmd = f"ipv6 address {ip.address}/{ip.prefix_length}"
    if ip.tag:
        cmd += f" {ip.tag}"
    return cmd


def _prefix_to_netmask(prefix_length: int) -> str:
    return str(ipaddress.IPv4Network(f"0.0.0.0/{prefix_length}").netmask)


class CiscoInterface:
    """Applies property changes to one interface.

    Args:
        name: Canonical interface name.
        session: Connected session used to send the commands.
    """

    def __init__(self, name: str, session: CiscoSession) -> None:
        self.name = name
        self._session = session

    def update(
        self,
        current: dict[str, Any] | None = None,
        desired: dict[str, Any] | None = None,
    ) -> list[str]:
        """Converge the interface from *current* to *desired*.

        Properties with equal values are skipped.  A property present in
        *current* and set to ``None`` in *desired* is removed with the
        ``no`` form of its command; keys missing from *desired* are left
        alone.

        Returns:
            The configuration commands that were sent, in order.
        """
        current = current or {}
        desired = desired or {}
        commands: list[str] = []

        if "ensure" in desired and desired["ensure"] != current.get("ensure"):
            commands.append("shutdown" if desired["ensure"] == "absent" else "no shutdown")

        for prop, template in _COMMANDS.items():
            old = current.get(prop)
            new = desired.get(prop)
            if old == new or prop not in desired:
                continue
            if new is None:
                commands.append("no " + template.format(old))
            else:
                commands.append(template.format(new))

        if "ip_addresses" in desired:
            commands.extend(
                self._ip_address_commands(
                    current.get("ip_addresses") or [],
                    desired.get("ip_addresses") or [],
                )
            )

        if not commands:
            logger.debug("Interface %s already in desired state", self.name)
            return []

        self._session.execute(CONFIGURE)
        self._session.execute(f"interface {self.name}")
        for cmd in commands:
            self._session.execute(cmd)
        self._session.execute(EXIT)
        self._session.execute(EXIT)
        logger.info("Interface %s configuration applied: %s", self.name, commands)
        return commands

    @staticmethod
    def _ip_address_commands(current: list[IpAddress], desired: list[IpAddress]) -> list[str]:
        removed = [ip for ip in current if ip not in desired]
        added = [ip for ip in desired if ip not in current]
        # Secondaries go before the primary on removal and after it on add.
        removed.sort(key=lambda ip: ip.tag is None)
        added.sort(key=lambda ip: ip.tag is not None)
        commands = ["no " + ip_address_command(ip) for ip in removed]
        commands.extend(ip_address_command(ip) for ip in added)
        return commands
