"""Read operations that assemble typed records from several commands.

Each function expects a connected :class:`~napalm_ciscocli.client.session.CiscoSession`
(i.e. it is called inside :meth:`CiscoSession.connected` or as a
:meth:`CiscoSession.command` callback).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from napalm_ciscocli.client.errors import CiscoParseError
from napalm_ciscocli.client.events import EventKind
from napalm_ciscocli.client.session import CiscoSession
from napalm_ciscocli.model.interface import InterfaceRecord
from napalm_ciscocli.model.vlan import VlanRecord
from napalm_ciscocli.parser.device import parse_show_version
from napalm_ciscocli.parser.interface import (
    parse_interface_brief,
    parse_interface_config,
    parse_interface_status,
)
from napalm_ciscocli.parser.trunk import parse_switchport
from napalm_ciscocli.parser.vlan import parse_vlan_brief
from napalm_ciscocli.utils.normalize import canonicalize_ifname
from napalm_ciscocli.vendor.cisco.commands import (
    SHOW_INTERFACE,
    SHOW_INTERFACE_CONFIG,
    SHOW_INTERFACE_SWITCHPORT,
    SHOW_IP_INTERFACE_BRIEF,
    SHOW_VERSION,
    SHOW_VLAN_BRIEF,
    SHOW_VLAN_SWITCH_BRIEF,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_interface(session: CiscoSession, name: str) -> InterfaceRecord:
    """Read status, running config and switchport state of one interface.

    Args:
        session: Connected session.
        name: Interface name in any recognised spelling.

    Returns:
        The merged :class:`InterfaceRecord`.  If the status command shows the
        interface as unknown or not up, only the status properties are read
        and ``ensure`` is ``"absent"``.

    Raises:
        CiscoParseError: If the switchport output uses an unknown dialect.
    """
    ifname = canonicalize_ifname(name)
    record = InterfaceRecord(name=ifname)

    status = parse_interface_status(
        session.execute(SHOW_INTERFACE.format(name=ifname)).output
    )
    if not status:
        return record
    record.merge(status)
    if record.ensure == "absent":
        return record

    record.merge(
        parse_interface_config(session.execute(SHOW_INTERFACE_CONFIG.format(name=ifname)).output)
    )
    out = session.execute(SHOW_INTERFACE_SWITCHPORT.format(name=ifname)).output
    record.merge(_parse_or_report(session, parse_switchport, out, ifname))
    return record


def read_interface_names(session: CiscoSession) -> list[str]:
    """Return canonical names of all interfaces known to the device."""
    return parse_interface_brief(session.execute(SHOW_IP_INTERFACE_BRIEF).output)


def read_vlans(session: CiscoSession) -> dict[str, VlanRecord]:
    """Read the VLAN table using the command form the device supports.

    Raises:
        CiscoParseError: If the table is malformed.
    """
    cmd = SHOW_VLAN_BRIEF if session.supports_vlan_brief else SHOW_VLAN_SWITCH_BRIEF
    out = session.execute(cmd).output
    return _parse_or_report(session, parse_vlan_brief, out)


def read_facts(session: CiscoSession) -> dict[str, Any]:
    """Collect the flat facts mapping: ``show version`` plus interface list."""
    facts = parse_show_version(session.execute(SHOW_VERSION).output).as_dict()
    facts["interfaces"] = read_interface_names(session)
    return facts


def _parse_or_report(
    session: CiscoSession,
    parser: Callable[..., T],
    output: str | None,
    *args: Any,
) -> T:
    """Run *parser*; report a dialect error to the event sink and re-raise."""
    try:
        return parser(output, *args)
    except CiscoParseError as exc:
        session.emit(EventKind.PARSE_ERROR, str(exc), error=exc)
        raise
