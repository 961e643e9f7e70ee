"""Best-effort user agent parsing."""

from __future__ import annotations

import re

from .models import UNKNOWN, DeviceInfo

_MOBILE_PATTERN = re.compile(r"Mobile|Android|iPhone|iPad|iPod|BlackBerry|Windows Phone")
_TABLET_PATTERN = re.compile(r"iPad|Tablet|PlayBook")

_WINDOWS_VERSIONS = {
    "10.0": "Windows 10/11",
    "6.3": "Windows 8.1",
    "6.2": "Windows 8",
    "6.1": "Windows 7",
    "6.0": "Windows Vista",
}


def _capture(pattern: str, user_agent: str) -> str:
    match = re.search(pattern, user_agent)
    return match.group(1) if match else ""


def windows_version(raw: str) -> str:
    """Map a ``Windows NT`` version number to its marketing name."""

    return _WINDOWS_VERSIONS.get(raw, f"Windows {raw}")


def _detect_browser(user_agent: str) -> tuple[str, str]:
    if "Chrome/" in user_agent:
        return "Chrome", _capture(r"Chrome/([0-9.]+)", user_agent)
    if "Firefox/" in user_agent:
        return "Firefox", _capture(r"Firefox/([0-9.]+)", user_agent)
    if "Safari/" in user_agent and "Chrome" not in user_agent:
        return "Safari", _capture(r"Version/([0-9.]+)", user_agent)
    if "Edge/" in user_agent:
        return "Edge", _capture(r"Edge/([0-9.]+)", user_agent)
    return UNKNOWN, ""


def _detect_os(user_agent: str) -> tuple[str, str]:
    if "Windows NT" in user_agent:
        return "Windows", windows_version(_capture(r"Windows NT ([0-9.]+)", user_agent))
    if "Mac OS X" in user_agent:
        return "macOS", _capture(r"Mac OS X ([0-9_]+)", user_agent).replace("_", ".")
    if "Linux" in user_agent:
        return "Linux", ""
    if "Android" in user_agent:
        return "Android", _capture(r"Android ([0-9.]+)", user_agent)
    if "iPhone OS" in user_agent or "OS " in user_agent:
        return "iOS", _capture(r"OS ([0-9_]+)", user_agent).replace("_", ".")
    return UNKNOWN, ""


def _detect_device(user_agent: str, is_mobile: bool, is_tablet: bool) -> str:
    if "iPhone" in user_agent:
        return "iPhone"
    if "iPad" in user_agent:
        return "iPad"
    if "Android" in user_agent and is_mobile:
        return "Android Phone"
    if "Android" in user_agent and is_tablet:
        return "Android Tablet"
    if is_mobile:
        return "Mobile Device"
    if is_tablet:
        return "Tablet"
    return "Desktop"


def parse_user_agent(user_agent: str | None) -> DeviceInfo:
    """Classify a user agent string into browser, OS and form factor.

    Detection is ordered and the first match wins. A tablet token takes
    precedence over the generic mobile tokens so exactly one of the three
    form factor flags is set.
    """
    user_agent = user_agent or ""

    is_tablet = bool(_TABLET_PATTERN.search(user_agent))
    is_mobile = bool(_MOBILE_PATTERN.search(user_agent)) and not is_tablet
    is_desktop = not is_mobile and not is_tablet

    browser, browser_version = _detect_browser(user_agent)
    os_name, os_version = _detect_os(user_agent)

    return DeviceInfo(
        browser=browser,
        browser_version=browser_version,
        os=os_name,
        os_version=os_version,
        device=_detect_device(user_agent, is_mobile, is_tablet),
        is_mobile=is_mobile,
        is_tablet=is_tablet,
        is_desktop=is_desktop,
    )
