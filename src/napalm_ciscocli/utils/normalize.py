"""Normalization helpers for interface names and addressing.

Canonical interface names are the merge key between the outputs of several
``show`` commands, so every parser routes names through
:func:`canonicalize_ifname`.
"""

from __future__ import annotations

import ipaddress
import re

from napalm_ciscocli.vendor.cisco.mappings import INTERFACE_FAMILIES

_WHITESPACE_RE: re.Pattern[str] = re.compile(r"\s+")


def _compile_families() -> list[tuple[str, list[tuple[str, re.Pattern[str]]]]]:
    families = []
    for canonical, abbreviations in INTERFACE_FAMILIES.items():
        ordered = sorted(abbreviations, key=len, reverse=True)
        families.append(
            (
                canonical,
                [
                    (abbr, re.compile(rf"^{re.escape(abbr)}\s*\d", re.IGNORECASE))
                    for abbr in ordered
                ],
            )
        )
    return families


_FAMILIES = _compile_families()


def canonicalize_ifname(interface: str) -> str:
    """Return the canonical spelling of *interface*.

    ``"Fa0/1"``, ``"fast 0/1"`` and ``"FastEthernet0/1"`` all become
    ``"FastEthernet0/1"``.  Names that belong to no known family are returned
    unchanged.

    Args:
        interface: Interface name as typed by a user or printed by the device.

    Returns:
        ``<Family><suffix>`` with all whitespace removed from the suffix, or
        *interface* itself when no family matches.
    """
    for canonical, patterns in _FAMILIES:
        for abbr, pattern in patterns:
            if pattern.match(interface):
                suffix = interface[len(abbr):]
                return canonical + _WHITESPACE_RE.sub("", suffix)
    return interface


def split_interface_list(text: str) -> list[str]:
    """Split a comma-separated port list and canonicalize each entry."""
    text = text.strip()
    if not text:
        return []
    return [canonicalize_ifname(name) for name in re.split(r"\s*,\s*", text) if name]


def netmask_to_prefix(netmask: str) -> int:
    """Convert a dotted netmask (``255.255.255.0``) to a prefix length (``24``)."""
    return ipaddress.IPv4Network(f"0.0.0.0/{netmask}").prefixlen
