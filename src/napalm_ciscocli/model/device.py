"""Typed model for device information parsed from ``show version``."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class DeviceFacts:
    """General device information.

    Attributes:
        hostname: Device hostname from the uptime line.
        uptime: Raw uptime string (e.g. ``"1 week, 2 days, 3 hours, 4 minutes"``).
        uptime_seconds: Uptime converted to seconds.
        model: Hardware model (e.g. ``"WS-C2960-24TT-L"``).
        memory: Memory size as printed (e.g. ``"65536K"``).
        serial_number: Processor board ID.
        os: Operating system family (``"IOS"``).
        os_version: Software release (e.g. ``"12.2(55)SE"``).
        image: System image file.
    """

    hostname: str | None = None
    uptime: str | None = None
    uptime_seconds: float = 0.0
    model: str | None = None
    memory: str | None = None
    serial_number: str | None = None
    os: str | None = None
    os_version: str | None = None
    image: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Flat mapping of the facts that were found."""
        return {k: v for k, v in asdict(self).items() if v is not None}
