"""Parsers for ``show interfaces`` and ``show running-config interface``.

Each parser is a table of ``(pattern, extractor)`` pairs.  Every content line
is tested against every pattern, so any subset of them may fire on one line;
later pairs override earlier ones for the same key.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable
from typing import Any

from napalm_ciscocli.model.interface import IpAddress
from napalm_ciscocli.parser.common import content_lines
from napalm_ciscocli.utils.normalize import canonicalize_ifname, netmask_to_prefix
from napalm_ciscocli.vendor.cisco.mappings import IPV6_ADDRESS_TAGS

Extractor = Callable[[re.Match[str], dict[str, Any]], None]

_IPV4 = r"\d{1,3}(?:\.\d{1,3}){3}"
_IPV6_TAG = "|".join(sorted(IPV6_ADDRESS_TAGS))


# ---------------------------------------------------------------------------
# show interfaces <name>
# ---------------------------------------------------------------------------


def _set_ensure(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["ensure"] = "present" if m.group(1) == "up" else "absent"


def _set_speed_auto(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["speed"] = "auto"


def _set_speed(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["speed"] = m.group(1)


def _set_duplex_auto(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["duplex"] = "auto"


def _set_duplex(m: re.Match[str], resource: dict[str, Any]) -> None:
    word = m.group(1)
    resource["duplex"] = "auto" if word == "Auto" else word.lower()


def _set_description(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["description"] = m.group(1)


# Several phrasings of "auto" exist across IOS releases; any of them counts.
_STATUS_PATTERNS: list[tuple[re.Pattern[str], Extractor]] = [
    (re.compile(r"^\S.* is (.+?), line protocol is "), _set_ensure),
    (re.compile(r"Auto Speed \(.+\),"), _set_speed_auto),
    (re.compile(r"Auto Speed ,"), _set_speed_auto),
    (re.compile(r"Auto-speed"), _set_speed_auto),
    (re.compile(r",\s*(\d+)\s*Mb/s"), _set_speed),
    (re.compile(r"\s+Auto-duplex \((.{4})\),"), _set_duplex_auto),
    (re.compile(r"\s+([A-Za-z]+)-duplex"), _set_duplex),
    (re.compile(r"Description: (.+)"), _set_description),
]


def parse_interface_status(output: str | None) -> dict[str, Any]:
    """Parse ``show interfaces <name>``.

    Args:
        output: Raw command output including echo and trailing prompt.

    Returns:
        Partial interface properties: ``ensure``, ``speed``, ``duplex`` and
        ``description`` when present.  An empty dict means the device printed
        nothing recognisable, i.e. the interface does not exist.
    """
    resource: dict[str, Any] = {}
    for line in content_lines(output):
        for pattern, extract in _STATUS_PATTERNS:
            m = pattern.search(line)
            if m:
                extract(m, resource)
    return resource


# ---------------------------------------------------------------------------
# show running-config interface <name> | begin interface
# ---------------------------------------------------------------------------


def _add_secondary(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["ip_addresses"].append(
        IpAddress(netmask_to_prefix(m.group(2)), ipaddress.IPv4Address(m.group(1)), "secondary")
    )


def _add_primary(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["ip_addresses"].append(
        IpAddress(netmask_to_prefix(m.group(2)), ipaddress.IPv4Address(m.group(1)))
    )


def _add_ipv6(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["ip_addresses"].append(
        IpAddress(int(m.group(2)), ipaddress.IPv6Address(m.group(1)), m.group(3))
    )


def _set_etherchannel(m: re.Match[str], resource: dict[str, Any]) -> None:
    resource["etherchannel"] = m.group(1)


_CONFIG_PATTERNS: list[tuple[re.Pattern[str], Extractor]] = [
    (re.compile(rf"ip address ({_IPV4}) ({_IPV4})\s+secondary\s*$"), _add_secondary),
    (re.compile(rf"ip address ({_IPV4}) ({_IPV4})\s*$"), _add_primary),
    (re.compile(rf"ipv6 address ([0-9A-Fa-f:.]+)/(\d+)(?:\s+({_IPV6_TAG}))?\s*$"), _add_ipv6),
    (re.compile(r"channel-group\s+(\d+)"), _set_etherchannel),
]


def parse_interface_config(output: str | None) -> dict[str, Any]:
    """Parse the running configuration of one interface.

    Args:
        output: Raw command output including echo and trailing prompt.

    Returns:
        ``{"ip_addresses": [...]}`` in configuration order, plus
        ``etherchannel`` when the port is a channel-group member.
    """
    resource: dict[str, Any] = {"ip_addresses": []}
    for line in content_lines(output):
        for pattern, extract in _CONFIG_PATTERNS:
            m = pattern.search(line)
            if m:
                extract(m, resource)
    return resource


# ---------------------------------------------------------------------------
# show ip interface brief
# ---------------------------------------------------------------------------

_BRIEF_ROW_RE: re.Pattern[str] = re.compile(
    r"^(\S+)\s+(\S+)\s+(?:YES|NO)\s+\S+\s+(.+?)\s+(\S+)\s*$"
)


def parse_interface_brief(output: str | None) -> list[str]:
    """Return the canonical names listed by ``show ip interface brief``.

    The header row (``Interface IP-Address OK? Method Status Protocol``) does
    not match the row pattern and is skipped.
    """
    names: list[str] = []
    for line in content_lines(output):
        m = _BRIEF_ROW_RE.match(line)
        if m:
            names.append(canonicalize_ifname(m.group(1)))
    return names
