"""Parser for ``show interfaces <name> switchport`` (trunking state)."""

from __future__ import annotations

import re
from typing import Any

from napalm_ciscocli.client.errors import CiscoParseError
from napalm_ciscocli.parser.common import content_lines
from napalm_ciscocli.vendor.cisco.mappings import SWITCHPORT_MODES, TRUNK_ENCAPSULATIONS

_MODE_RE: re.Pattern[str] = re.compile(r"^Administrative mode:\s+(.*)$", re.IGNORECASE)
_ENCAPSULATION_RE: re.Pattern[str] = re.compile(r"^Administrative Trunking Encapsulation:\s+(.*)$")
_ACCESS_VLAN_RE: re.Pattern[str] = re.compile(r"^Access Mode VLAN:\s+(.*) \((.*)\)$")
_NATIVE_VLAN_RE: re.Pattern[str] = re.compile(r"^Trunking Native Mode VLAN:\s+(.*) \(.*\)$")
_ALLOWED_VLANS_RE: re.Pattern[str] = re.compile(r"^Trunking VLANs Enabled:\s+(.*)$")


def parse_switchport(output: str | None, interface: str = "") -> dict[str, Any]:
    """Parse switchport/trunking attributes of one interface.

    Labels are matched in the order the device prints them; the
    administrative mode controls how later labels are read: on an access
    port the trunk encapsulation and allowed VLAN list are ignored.

    Args:
        output: Raw command output including echo and trailing prompt.
        interface: Interface name, used in error messages only.

    Returns:
        Partial interface properties among ``mode``, ``encapsulation``,
        ``access_vlan``, ``native_vlan`` and ``allowed_trunk_vlans``.

    Raises:
        CiscoParseError: If the administrative mode or the trunk
            encapsulation is not one this driver understands.
    """
    trunking: dict[str, Any] = {}
    for line in content_lines(output):
        line = line.rstrip()

        m = _MODE_RE.match(line)
        if m:
            value = m.group(1).strip()
            if value not in SWITCHPORT_MODES:
                raise CiscoParseError(
                    f"Unknown switchport mode: {value!r} for {interface or 'interface'}"
                )
            trunking["mode"] = SWITCHPORT_MODES[value]
            continue

        m = _ENCAPSULATION_RE.match(line)
        if m:
            value = m.group(1).strip()
            if value not in TRUNK_ENCAPSULATIONS:
                raise CiscoParseError(
                    f"Unknown switchport encapsulation: {value!r} for {interface or 'interface'}"
                )
            if trunking.get("mode") != "access":
                trunking["encapsulation"] = value
            continue

        m = _ACCESS_VLAN_RE.match(line)
        if m:
            if m.group(2) != "Inactive":
                trunking["access_vlan"] = m.group(1)
            continue

        m = _NATIVE_VLAN_RE.match(line)
        if m:
            trunking["native_vlan"] = m.group(1)
            continue

        m = _ALLOWED_VLANS_RE.match(line)
        if m:
            if trunking.get("mode") == "access":
                continue
            vlans = m.group(1).strip()
            if re.search(r"all", vlans, re.IGNORECASE):
                trunking["allowed_trunk_vlans"] = "all"
            elif re.search(r"none", vlans, re.IGNORECASE):
                trunking["allowed_trunk_vlans"] = "none"
            else:
                trunking["allowed_trunk_vlans"] = vlans
    return trunking
