"""Version information and the User-Agent used in requests."""

from __future__ import annotations

import platform
import re
import sys
from datetime import datetime, timedelta, timezone

VERSION = "0.2.0"
BUILD_TIME = ""
GIT_COMMIT = ""
IS_RELEASE = False

_PRODUCT = "gdrivecore"

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.\d+)?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    if match.group(7):
        tz = timezone.utc
    else:
        sign = -1 if match.group(8) == "-" else 1
        offset = timedelta(hours=int(match.group(9)), minutes=int(match.group(10)))
        tz = timezone(sign * offset)
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError:
        return None


def _rfc1123(t: datetime) -> str:
    zone = "UTC" if not t.utcoffset() else t.strftime("%z")
    return (
        f"{_DAYS[t.weekday()]}, {t.day:02d} {_MONTHS[t.month - 1]} {t.year:04d} "
        f"{t:%H:%M:%S} {zone}"
    )


def _os_arch() -> str:
    return f"{sys.platform}/{platform.machine()}"


def get_user_agent() -> str:
    """The User-Agent string sent with API requests."""
    agent = f"{_PRODUCT}/{VERSION}"
    if GIT_COMMIT:
        agent += f" git/{GIT_COMMIT[:8]}"
    agent += f" python/{platform.python_version()} {_os_arch()}"
    return agent


def get_version_info() -> str:
    """Multi-line version information."""
    lines = [f"{_PRODUCT} v{VERSION}"]
    if GIT_COMMIT:
        lines.append(f"Git commit: {GIT_COMMIT}")
    if BUILD_TIME:
        parsed = _parse_rfc3339(BUILD_TIME)
        lines.append(f"Build time: {_rfc1123(parsed) if parsed else BUILD_TIME}")
    lines.append(f"Python version: {platform.python_version()}")
    lines.append(f"OS/Arch: {_os_arch()}")
    return "".join(line + "\n" for line in lines)