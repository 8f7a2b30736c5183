"""Unit tests for napalm_ciscocli.client.vlan_ops."""

from __future__ import annotations

import pytest
from conftest import FakeTransport

from napalm_ciscocli.client.errors import CiscoValidationError
from napalm_ciscocli.client.events import DiagnosticEvent, EventKind
from napalm_ciscocli.client.session import CiscoCredentials, CiscoSession
from napalm_ciscocli.client.vlan_ops import update_vlan, validate_vlan_name


def _connected(transport: FakeTransport) -> tuple[CiscoSession, list[DiagnosticEvent]]:
    events: list[DiagnosticEvent] = []
    session = CiscoSession(
        transport, CiscoCredentials("admin", "secret"), event_sink=events.append
    )
    session.connect()
    transport.sent.clear()
    return session, events


# ---------------------------------------------------------------------------
# validate_vlan_name
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", ["SALES", "vlan_10", "Eng2", None])
def test_valid_names(name: str | None) -> None:
    validate_vlan_name(name)


@pytest.mark.parametrize("name", ["Sales Dept", "a-b", "x.y", "guest!", "Café", "ＶＬＡＮ１"])
def test_invalid_names(name: str) -> None:
    with pytest.raises(CiscoValidationError, match="alphanumeric"):
        validate_vlan_name(name)


# ---------------------------------------------------------------------------
# update_vlan
# ---------------------------------------------------------------------------


def test_delete_vlan(transport: FakeTransport) -> None:
    session, _ = _connected(transport)
    assert update_vlan(session, 5, {"description": "OLD"}, {"ensure": "absent"}) is True
    assert transport.sent == ["conf t", "no vlan 5", "exit"]


def test_delete_ignores_invalid_name(transport: FakeTransport) -> None:
    session, _ = _connected(transport)
    desired = {"ensure": "absent", "description": "not valid"}
    assert update_vlan(session, 5, {}, desired) is True
    assert transport.sent == ["conf t", "no vlan 5", "exit"]


def test_create_vlan_with_name(transport: FakeTransport) -> None:
    session, _ = _connected(transport)
    assert update_vlan(session, 30, {}, {"ensure": "present", "description": "VOICE"}) is True
    assert transport.sent == ["conf t", "vlan 30", "name VOICE", "exit", "exit"]


def test_rename_vlan(transport: FakeTransport) -> None:
    session, _ = _connected(transport)
    update_vlan(session, "10", {"description": "SALES"}, {"description": "MARKETING"})
    assert transport.sent == ["conf t", "vlan 10", "name MARKETING", "exit", "exit"]


def test_only_description_is_pushed(transport: FakeTransport) -> None:
    session, _ = _connected(transport)
    update_vlan(session, 20, {"status": "active"}, {"status": "suspend", "interfaces": ["Fa0/1"]})
    assert transport.sent == ["conf t", "vlan 20", "exit", "exit"]


def test_invalid_name_sends_nothing(transport: FakeTransport) -> None:
    session, events = _connected(transport)
    assert update_vlan(session, 10, {}, {"description": "Sales Dept"}) is False
    assert transport.sent == []
    assert events[-1].kind is EventKind.VALIDATION_ERROR
    assert events[-1].details["vlan_id"] == 10
    assert isinstance(events[-1].details["error"], CiscoValidationError)


def test_non_ascii_name_sends_nothing(transport: FakeTransport) -> None:
    session, events = _connected(transport)
    assert update_vlan(session, 30, {}, {"description": "Café"}) is False
    assert transport.sent == []
    assert events[-1].kind is EventKind.VALIDATION_ERROR
