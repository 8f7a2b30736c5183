"""Unit tests for napalm_ciscocli.parser.trunk."""

from __future__ import annotations

import pytest
from conftest import load_fixture

from napalm_ciscocli.client.errors import CiscoParseError
from napalm_ciscocli.parser.trunk import parse_switchport


def _switchport(*lines: str) -> str:
    body = "\n".join(lines)
    return f"show interfaces Fa0/1 switchport\n{body}\nswitch1#"


# ---------------------------------------------------------------------------
# Trunk ports
# ---------------------------------------------------------------------------


def test_trunk_fixture() -> None:
    result = parse_switchport(load_fixture("show_switchport_trunk.txt"))
    assert result == {
        "mode": "trunk",
        "encapsulation": "dot1q",
        "access_vlan": "1",
        "native_vlan": "99",
        "allowed_trunk_vlans": "10,20,30-40",
    }


@pytest.mark.parametrize(
    ("printed", "expected"),
    [("ALL", "all"), ("all", "all"), ("NONE", "none"), ("none", "none"), ("1-4094", "1-4094")],
)
def test_allowed_vlans_keywords(printed: str, expected: str) -> None:
    out = _switchport("Administrative Mode: trunk", f"Trunking VLANs Enabled: {printed}")
    assert parse_switchport(out)["allowed_trunk_vlans"] == expected


def test_dynamic_modes() -> None:
    for printed in ("dynamic auto", "dynamic desirable"):
        out = _switchport(f"Administrative Mode: {printed}")
        assert parse_switchport(out)["mode"] == printed


def test_encapsulation_isl_and_negotiate() -> None:
    for printed in ("isl", "negotiate"):
        out = _switchport(
            "Administrative Mode: trunk",
            f"Administrative Trunking Encapsulation: {printed}",
        )
        assert parse_switchport(out)["encapsulation"] == printed


# ---------------------------------------------------------------------------
# Access ports
# ---------------------------------------------------------------------------


def test_static_access_ignores_trunk_settings() -> None:
    out = _switchport(
        "Name: Fa0/1",
        "Switchport: Enabled",
        "Administrative Mode: static access",
        "Operational Mode: static access",
        "Administrative Trunking Encapsulation: dot1q",
        "Access Mode VLAN: 10 (SALES)",
        "Trunking Native Mode VLAN: 1 (default)",
        "Trunking VLANs Enabled: ALL",
    )
    assert parse_switchport(out) == {
        "mode": "access",
        "access_vlan": "10",
        "native_vlan": "1",
    }


def test_inactive_access_vlan_skipped() -> None:
    out = _switchport(
        "Administrative Mode: static access",
        "Access Mode VLAN: 30 (Inactive)",
    )
    assert "access_vlan" not in parse_switchport(out)


# ---------------------------------------------------------------------------
# Unknown dialects
# ---------------------------------------------------------------------------


def test_unknown_mode_raises() -> None:
    out = _switchport("Administrative Mode: private-vlan host")
    with pytest.raises(CiscoParseError, match="Unknown switchport mode"):
        parse_switchport(out, "FastEthernet0/1")


def test_unknown_encapsulation_raises() -> None:
    out = _switchport(
        "Administrative Mode: trunk",
        "Administrative Trunking Encapsulation: vxlan",
    )
    with pytest.raises(CiscoParseError, match="FastEthernet0/7"):
        parse_switchport(out, "FastEthernet0/7")


def test_routed_port_output_is_empty() -> None:
    out = _switchport("Name: Vl10", "Switchport: Disabled")
    assert parse_switchport(out) == {}
