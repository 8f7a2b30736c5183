"""Typed model for VLAN data."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VlanRecord:
    """Represents a single row group of ``show vlan brief``.

    Attributes:
        vlan_id: 802.1Q VLAN identifier as printed by the device.
        name: VLAN name.
        status: VLAN status (``"active"``, ``"act/unsup"``, ...).
        interfaces: Canonical names of member ports, in device order,
            without duplicates.
    """

    vlan_id: str
    name: str
    status: str
    interfaces: list[str] = field(default_factory=list)

    def add_interfaces(self, names: list[str]) -> None:
        """Append *names*, skipping ports already listed."""
        for name in names:
            if name not in self.interfaces:
                self.interfaces.append(name)
