"""VLAN write operations for Cisco IOS switches.

Command sequences (global configuration mode):

    DELETE:
        conf t
        no vlan <id>
        exit

    CREATE / UPDATE:
        conf t
        vlan <id>
        name <description>
        exit
        exit
"""

from __future__ import annotations

import logging
import re
from typing import Any

from napalm_ciscocli.client.errors import CiscoValidationError
from napalm_ciscocli.client.events import EventKind
from napalm_ciscocli.client.session import CiscoSession
from napalm_ciscocli.vendor.cisco.commands import CONFIGURE, EXIT

logger = logging.getLogger(__name__)

_INVALID_NAME_CHAR_RE: re.Pattern[str] = re.compile(r"[^\w]", re.ASCII)


def validate_vlan_name(name: str | None) -> None:
    """Check that *name* is usable as a Cisco VLAN name.

    Raises:
        CiscoValidationError: If *name* contains anything but letters,
            digits and underscores.
    """
    if name is not None and _INVALID_NAME_CHAR_RE.search(str(name)):
        raise CiscoValidationError(
            f"Invalid VLAN name {name!r} for Cisco device. "
            "VLAN name must be alphanumeric, no spaces or special characters."
        )


def update_vlan(
    session: CiscoSession,
    vlan_id: int | str,
    current: dict[str, Any] | None = None,
    desired: dict[str, Any] | None = None,
) -> bool:
    """Create, rename or remove a VLAN.

    Only the ``description`` property is pushed to the device (as the VLAN
    ``name``); other keys of *current*/*desired* are looked at and logged but
    not applied.

    Args:
        session: Connected session.
        vlan_id: 802.1Q VLAN identifier.
        current: Properties the VLAN has now (empty if it does not exist).
        desired: Properties it should have; ``{"ensure": "absent"}`` deletes.

    Returns:
        ``True`` if commands were sent, ``False`` if the desired name was
        rejected before touching the device.
    """
    current = current or {}
    desired = desired or {}

    if desired.get("ensure") == "absent":
        logger.info("Removing %s from device vlan", vlan_id)
        session.execute(CONFIGURE)
        session.execute(f"no vlan {vlan_id}")
        session.execute(EXIT)
        return True

    try:
        validate_vlan_name(desired.get("description"))
    except CiscoValidationError as exc:
        session.emit(EventKind.VALIDATION_ERROR, str(exc), vlan_id=vlan_id, error=exc)
        return False

    session.execute(CONFIGURE)
    session.execute(f"vlan {vlan_id}")
    for prop in dict.fromkeys([*current, *desired]):
        logger.debug("trying property: %s: %s", prop, desired.get(prop))
        if prop != "description" or desired.get(prop) is None:
            continue
        session.execute(f"name {desired[prop]}")
    session.execute(EXIT)
    session.execute(EXIT)
    return True
