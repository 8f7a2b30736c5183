"""Unit tests for napalm_ciscocli.client.interface_ops."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

import pytest
from conftest import FakeTransport

from napalm_ciscocli.client.interface_ops import CiscoInterface, ip_address_command
from napalm_ciscocli.client.session import CiscoCredentials, CiscoSession
from napalm_ciscocli.model.interface import IpAddress

PRIMARY = IpAddress(24, IPv4Address("192.168.10.1"))
SECONDARY = IpAddress(25, IPv4Address("10.10.10.1"), "secondary")


def _interface(transport: FakeTransport, name: str = "FastEthernet0/1") -> CiscoInterface:
    session = CiscoSession(transport, CiscoCredentials("admin", "secret"))
    session.connect()
    transport.sent.clear()
    return CiscoInterface(name, session)


def _body(transport: FakeTransport) -> list[str]:
    """Commands sent between ``interface X`` and the closing exits."""
    assert transport.sent[0] == "conf t"
    assert transport.sent[1].startswith("interface ")
    assert transport.sent[-2:] == ["exit", "exit"]
    return transport.sent[2:-2]


# ---------------------------------------------------------------------------
# ip_address_command
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("ip", "expected"),
    [
        (PRIMARY, "ip address 192.168.10.1 255.255.255.0"),
        (SECONDARY, "ip address 10.10.10.1 255.255.255.128 secondary"),
        (IpAddress(64, IPv6Address("2001:db8::1")), "ipv6 address 2001:db8::1/64"),
        (IpAddress(64, IPv6Address("2001:db8::"), "eui-64"), "ipv6 address 2001:db8::/64 eui-64"),
    ],
)
def test_ip_address_command(ip: IpAddress, expected: str) -> None:
    assert ip_address_command(ip) == expected


# ---------------------------------------------------------------------------
# CiscoInterface.update
# ---------------------------------------------------------------------------


def test_no_changes_sends_nothing(transport: FakeTransport) -> None:
    iface = _interface(transport)
    state = {"ensure": "present", "description": "uplink", "speed": "100"}
    assert iface.update(state, dict(state)) == []
    assert transport.sent == []


def test_changed_properties_in_order(transport: FakeTransport) -> None:
    iface = _interface(transport)
    current = {"ensure": "present", "description": "old", "mode": "access", "access_vlan": "1"}
    desired = {
        "ensure": "present",
        "access_vlan": "10",
        "mode": "trunk",
        "encapsulation": "dot1q",
        "description": "new",
    }
    commands = iface.update(current, desired)
    assert commands == [
        "description new",
        "switchport trunk encapsulation dot1q",
        "switchport mode trunk",
        "switchport access vlan 10",
    ]
    assert transport.sent[:2] == ["conf t", "interface FastEthernet0/1"]
    assert _body(transport) == commands


def test_shutdown_and_no_shutdown(transport: FakeTransport) -> None:
    iface = _interface(transport)
    assert iface.update({"ensure": "present"}, {"ensure": "absent"}) == ["shutdown"]
    transport.sent.clear()
    assert iface.update({"ensure": "absent"}, {"ensure": "present"}) == ["no shutdown"]


def test_none_removes_property(transport: FakeTransport) -> None:
    iface = _interface(transport)
    commands = iface.update(
        {"description": "uplink", "etherchannel": "2"},
        {"description": None, "etherchannel": None},
    )
    assert commands == ["no description uplink", "no channel-group 2 mode on"]


def test_missing_keys_left_alone(transport: FakeTransport) -> None:
    iface = _interface(transport)
    commands = iface.update({"description": "uplink", "speed": "100"}, {"speed": "auto"})
    assert commands == ["speed auto"]


def test_ip_addresses_diff(transport: FakeTransport) -> None:
    iface = _interface(transport, "VLAN10")
    new_secondary = IpAddress(24, IPv4Address("172.16.0.1"), "secondary")
    new_primary = IpAddress(24, IPv4Address("192.168.20.1"))
    commands = iface.update(
        {"ip_addresses": [PRIMARY, SECONDARY]},
        {"ip_addresses": [new_secondary, new_primary]},
    )
    assert commands == [
        "no ip address 10.10.10.1 255.255.255.128 secondary",
        "no ip address 192.168.10.1 255.255.255.0",
        "ip address 192.168.20.1 255.255.255.0",
        "ip address 172.16.0.1 255.255.255.0 secondary",
    ]
    assert transport.sent[1] == "interface VLAN10"


def test_ip_addresses_unchanged(transport: FakeTransport) -> None:
    iface = _interface(transport, "VLAN10")
    assert iface.update({"ip_addresses": [PRIMARY]}, {"ip_addresses": [PRIMARY]}) == []
