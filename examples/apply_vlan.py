#!/usr/bin/env python3
"""Example: create, rename or delete VLANs on a Cisco switch.

Only the VLANs listed in ``DESIRED_VLANS`` are touched.  Each entry carries
an ``ensure`` field:

    ensure="present"  create the VLAN, or rename it to ``description``.
    ensure="absent"   delete the VLAN.

VLAN names must be alphanumeric; an invalid name is reported and skipped.

Usage (dry run, default):

    CISCO_HOST=192.0.2.1 python examples/apply_vlan.py

Usage (live apply):

    APPLY=1 CISCO_HOST=192.0.2.1 python examples/apply_vlan.py

Environment variables:
    CISCO_HOST        Switch IP or hostname (required).
    CISCO_USERNAME    Login username (default: admin).
    CISCO_PASSWORD    Login password (default: admin).
    CISCO_SECRET      Enable secret (optional).
    APPLY             Set to "1" to actually apply changes (default: dry-run).
"""

from __future__ import annotations

import os
import sys

from napalm_ciscocli.client.events import DiagnosticEvent
from napalm_ciscocli.driver import CiscoCliDriver

# ---------------------------------------------------------------------------
# VLAN change set; only these VLANs will be touched.
# ---------------------------------------------------------------------------
DESIRED_VLANS: dict[int, dict[str, str]] = {
    222: {"ensure": "present", "description": "test222"},
    # 10: {"ensure": "absent"},  # uncomment to delete VLAN 10
}

# ---------------------------------------------------------------------------
# Read configuration from environment
# ---------------------------------------------------------------------------
host = os.environ.get("CISCO_HOST", "")
if not host:
    print("ERROR: CISCO_HOST environment variable is required.", file=sys.stderr)
    sys.exit(1)

username = os.environ.get("CISCO_USERNAME", "admin")
password = os.environ.get("CISCO_PASSWORD", "admin")
secret = os.environ.get("CISCO_SECRET")
apply_changes = os.environ.get("APPLY", "0") == "1"


def print_event(event: DiagnosticEvent) -> None:
    print(f"  [{event.kind.value}] {event.message}")


# ---------------------------------------------------------------------------
# Driver setup and apply
# ---------------------------------------------------------------------------
print(f"Target switch : {host}")
print(f"Apply changes : {apply_changes}")
print()

driver = CiscoCliDriver(
    hostname=host,
    username=username,
    password=password,
    optional_args={"secret": secret, "event_sink": print_event},
)

try:
    driver.open()
    current = driver.vlans()

    print("=== PLAN ===")
    for vlan_id, desired in DESIRED_VLANS.items():
        vlan = current.get(str(vlan_id))
        if desired["ensure"] == "absent":
            action = "delete" if vlan else "skip (absent)"
        elif vlan is None:
            action = "create"
        elif vlan.name != desired.get("description"):
            action = f"rename {vlan.name!r} -> {desired['description']!r}"
        else:
            action = "skip (unchanged)"
        print(f"  VLAN {vlan_id}: {action}")
    print()

    if not apply_changes:
        print("Dry-run only -- set APPLY=1 to apply changes.")
        sys.exit(0)

    print("=== APPLYING ===")
    for vlan_id, desired in DESIRED_VLANS.items():
        vlan = current.get(str(vlan_id))
        existing = {"ensure": "present", "description": vlan.name} if vlan else {}
        applied = driver.update_vlan(vlan_id, existing, desired)
        print(f"  VLAN {vlan_id}: {'applied' if applied else 'rejected'}")
    print()
    print("Done.")

except Exception as exc:  # noqa: BLE001
    print(f"ERROR: {exc}", file=sys.stderr)
    sys.exit(1)
finally:
    driver.close()
