"""Parser for ``show version``."""

from __future__ import annotations

import re

from napalm_ciscocli.model.device import DeviceFacts
from napalm_ciscocli.parser.common import content_lines

# "switch1 uptime is 1 week, 2 days, 3 hours, 4 minutes"
_UPTIME_LINE_RE: re.Pattern[str] = re.compile(r"^(\S+) uptime is (.+)$")

# "cisco WS-C2960-24TT-L (PowerPC405) processor (revision B0) with 65536K bytes of memory."
# "Cisco 1841 (revision 5.0) with 355328K/37888K bytes of memory."
_HARDWARE_RE: re.Pattern[str] = re.compile(
    r"^[Cc]isco (\S+) \(.+\).* with (\S+) bytes of memory"
)

# "Cisco IOS Software, C2960 Software (C2960-LANBASEK9-M), Version 12.2(55)SE, RELEASE SOFTWARE"
# "IOS (tm) C2900XL Software (C2900XL-C3H2S-M), Version 12.0(5)WC10, RELEASE SOFTWARE"
_IOS_VERSION_RE: re.Pattern[str] = re.compile(r"IOS.* Software.*, Version ([^,\s]+)")

_SERIAL_RE: re.Pattern[str] = re.compile(r"^Processor board ID (\S+)")
_IMAGE_RE: re.Pattern[str] = re.compile(r'^System image file is "(.+)"')

# "1 week, 2 days, 3 hours, 4 minutes" -- every component is optional.
_UPTIME_PART_RE: re.Pattern[str] = re.compile(r"(\d+)\s+(year|week|day|hour|minute|second)s?")

_UNIT_SECONDS: dict[str, int] = {
    "year": 365 * 86400,
    "week": 7 * 86400,
    "day": 86400,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}


def parse_show_version(output: str | None) -> DeviceFacts:
    """Parse ``show version`` into a :class:`.DeviceFacts`.

    Unrecognised lines are ignored; facts that are not printed stay ``None``.
    """
    facts = DeviceFacts()
    for line in content_lines(output):
        line = line.rstrip()
        m = _UPTIME_LINE_RE.match(line)
        if m:
            facts.hostname = m.group(1)
            facts.uptime = m.group(2)
            facts.uptime_seconds = parse_uptime_seconds(m.group(2))
            continue
        m = _HARDWARE_RE.match(line)
        if m:
            facts.model = m.group(1)
            facts.memory = m.group(2)
            continue
        m = _IOS_VERSION_RE.search(line)
        if m and facts.os_version is None:
            facts.os = "IOS"
            facts.os_version = m.group(1)
            continue
        m = _SERIAL_RE.match(line)
        if m:
            facts.serial_number = m.group(1)
            continue
        m = _IMAGE_RE.match(line)
        if m:
            facts.image = m.group(1)
    return facts


def parse_uptime_seconds(uptime_str: str | None) -> float:
    """Convert an IOS uptime string to total seconds.

    Supports strings like ``"2 years, 1 week, 3 days, 4 hours, 5 minutes"``.
    Returns ``0.0`` if *uptime_str* is ``None`` or has no recognised parts.
    """
    if not uptime_str:
        return 0.0
    total = 0
    for count, unit in _UPTIME_PART_RE.findall(uptime_str):
        total += int(count) * _UNIT_SECONDS[unit]
    return float(total)
