"""Parser for ``show vlan brief`` / ``show vlan-switch brief``."""

from __future__ import annotations

import re

from napalm_ciscocli.client.errors import CiscoParseError
from napalm_ciscocli.model.vlan import VlanRecord
from napalm_ciscocli.parser.common import content_lines
from napalm_ciscocli.utils.normalize import split_interface_list

# "10   SALES    active    Fa0/1, Te1/1/1:1" -- the port list is optional.
_HEADER_ROW_RE: re.Pattern[str] = re.compile(r"^(\d+)\s+(\S+)\s+(\S+)(?:\s+(\S.*?))?\s*$")

# "                                                Fa0/3, Fa0/4"
_CONTINUATION_ROW_RE: re.Pattern[str] = re.compile(r"^\s+([A-Za-z].*?)\s*$")

_VLAN_ID_RE: re.Pattern[str] = re.compile(r"^\d")


def parse_vlan_brief(output: str | None) -> dict[str, VlanRecord]:
    """Parse the VLAN summary table.

    The table layout is::

        VLAN Name                             Status    Ports
        ---- -------------------------------- --------- ------------------------
        1    default                          active    Fa0/1, Fa0/2, Fa0/3,
                                                        Fa0/4
        10   SALES                            active

    A row starting with a VLAN id opens a record; an indented row carries more
    member ports of the record opened last.

    Args:
        output: Raw command output including echo and trailing prompt.

    Returns:
        Mapping of VLAN id (string, as printed) to :class:`VlanRecord`, in
        table order.

    Raises:
        CiscoParseError: If a continuation row appears before any VLAN row,
            or a row starting with a VLAN id does not have the row layout.
    """
    vlans: dict[str, VlanRecord] = {}
    vlan: VlanRecord | None = None
    for line in content_lines(output, header_lines=3):
        m = _HEADER_ROW_RE.match(line)
        if m:
            vlan = VlanRecord(vlan_id=m.group(1), name=m.group(2), status=m.group(3))
            vlan.add_interfaces(split_interface_list(m.group(4) or ""))
            vlans[vlan.vlan_id] = vlan
            continue
        m = _CONTINUATION_ROW_RE.match(line)
        if m:
            if vlan is None:
                raise CiscoParseError("invalid vlan summary output")
            vlan.add_interfaces(split_interface_list(m.group(1)))
            continue
        if _VLAN_ID_RE.match(line):
            raise CiscoParseError(f"unrecognised vlan summary row: {line.strip()!r}")
    return vlans
