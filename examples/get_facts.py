#!/usr/bin/env python3
"""Smoke-test script: retrieve facts, interfaces and VLANs from a Cisco switch.

Usage::

    export CISCO_HOST="192.168.61.20"
    export CISCO_USERNAME="admin"
    export CISCO_PASSWORD="your-password"
    export CISCO_SECRET="enable-secret"   # optional
    export CISCO_PORT="22"                # optional
    python examples/get_facts.py

Exit codes:
    0: facts retrieved and printed successfully.
    1: missing environment variable or driver error.
"""

from __future__ import annotations

import json
import logging
import os
import sys


def _env(name: str, default: str | None = None) -> str:
    value = os.environ.get(name, default)
    if value is None:
        print(f"ERROR: required environment variable {name!r} is not set.", file=sys.stderr)
        sys.exit(1)
    return value


def main() -> None:
    host = _env("CISCO_HOST")
    username = _env("CISCO_USERNAME")
    password = _env("CISCO_PASSWORD")
    optional_args: dict[str, object] = {"port": int(_env("CISCO_PORT", "22"))}
    if os.environ.get("CISCO_SECRET"):
        optional_args["secret"] = os.environ["CISCO_SECRET"]
    if os.environ.get("CISCO_VERBOSE"):
        logging.basicConfig(level=logging.DEBUG)
        optional_args["verbose"] = True

    # Import here so import errors surface after env var check.
    from napalm_ciscocli.driver import CiscoCliDriver

    driver = CiscoCliDriver(
        hostname=host,
        username=username,
        password=password,
        optional_args=optional_args,
    )

    try:
        driver.open()
        result = {
            "facts": driver.get_facts(),
            "interfaces": driver.get_interfaces(),
            "vlans": driver.get_vlans(),
        }
    except Exception as exc:  # noqa: BLE001
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        driver.close()

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
