"""Typed models for interface data."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Literal


@dataclass(frozen=True)
class IpAddress:
    """One address configured on an interface.

    Attributes:
        prefix_length: Network prefix length (from the netmask for IPv4).
        address: The interface address.
        tag: ``None`` for a primary IPv4 address, otherwise ``"secondary"``,
            ``"eui-64"`` or ``"link-local"``.
    """

    prefix_length: int
    address: IPv4Address | IPv6Address
    tag: str | None = None


@dataclass
class InterfaceRecord:
    """Merged view of an interface built from several ``show`` commands.

    Attributes:
        name: Canonical interface name (e.g. ``"FastEthernet0/1"``).
        ensure: ``"present"`` if the interface is up, ``"absent"`` otherwise
            or when the device does not know it.
        speed: ``"auto"`` or a numeric Mb/s string such as ``"100"``.
        duplex: ``"auto"``, ``"half"`` or ``"full"``.
        description: Free-text interface description.
        ip_addresses: Addresses in running-config order.
        etherchannel: Channel-group number, if the port is bundled.
        mode: ``"access"``, ``"trunk"``, ``"dynamic auto"`` or
            ``"dynamic desirable"``.
        encapsulation: ``"dot1q"``, ``"isl"`` or ``"negotiate"``.
        access_vlan: Access VLAN id.
        native_vlan: Trunk native VLAN id.
        allowed_trunk_vlans: ``"all"``, ``"none"`` or the device's id list
            (e.g. ``"1,10-20"``).
    """

    name: str
    ensure: Literal["present", "absent"] = "absent"
    speed: str | None = None
    duplex: str | None = None
    description: str | None = None
    ip_addresses: list[IpAddress] = field(default_factory=list)
    etherchannel: str | None = None
    mode: str | None = None
    encapsulation: str | None = None
    access_vlan: str | None = None
    native_vlan: str | None = None
    allowed_trunk_vlans: str | None = None

    def merge(self, partial: dict[str, Any]) -> None:
        """Copy the keys of a parser result onto this record."""
        for key, value in partial.items():
            if key == "ip_addresses":
                self.ip_addresses.extend(value)
            else:
                setattr(self, key, value)

    def as_dict(self) -> dict[str, Any]:
        """Return the properties that carry a value, keyed by field name."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == []:
                continue
            result[f.name] = list(value) if isinstance(value, list) else value
        return result
