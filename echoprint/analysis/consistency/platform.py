"""Cross-checks between the user agent and the OS-level signals.

Covers UA vs ``navigator.platform``, UA vs GPU, mobile UA vs screen
size, Client Hints vs UA, and the system font set expected for the OS.
"""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.consistency import base
from echoprint.models import signals

_APPLE_GPU_MARKERS = ("apple", "m1", "m2", "m3")


def check_ua_platform(bundle: signals.SignalBundle) -> base.RuleOutcome:
    mismatches = signal_patterns.platform_mismatches(bundle.navigator.user_agent, bundle.navigator.platform)
    if mismatches:
        return base.failed(f"UA indicates {mismatches[0]}, but platform = {bundle.navigator.platform}")
    return base.passed("UA and platform match")


def check_ua_gpu(bundle: signals.SignalBundle) -> base.RuleOutcome:
    """macOS should report an Apple GPU, or Intel/AMD on older Macs."""
    ua = bundle.navigator.user_agent.lower()
    renderer = bundle.webgl.renderer.lower()

    if "mac" in ua and renderer != "unknown":
        known_mac_gpu = any(marker in renderer for marker in _APPLE_GPU_MARKERS) or any(
            vendor in renderer for vendor in ("intel", "amd", "radeon")
        )
        if not known_mac_gpu:
            return base.failed(f"UA indicates macOS, but GPU = {bundle.webgl.renderer}")

    return base.passed("GPU matches the operating system")


def check_mobile_screen(bundle: signals.SignalBundle) -> base.RuleOutcome:
    ua = bundle.navigator.user_agent.lower()
    screen = bundle.hardware.screen

    is_mobile_ua = "mobile" in ua or "android" in ua or "iphone" in ua
    is_small_screen = min(screen.width, screen.height) < 768

    if is_mobile_ua and not is_small_screen and "ipad" not in ua:
        return base.failed("Mobile UA, but desktop-sized screen")
    return base.passed("Screen size matches the device type")


def check_client_hints(bundle: signals.SignalBundle) -> base.RuleOutcome:
    ua_data = bundle.navigator.user_agent_data
    if ua_data is None:
        return base.passed("Client Hints not supported")

    hinted = ua_data.platform.lower()
    ua = bundle.navigator.user_agent.lower()
    for os_marker in ("windows", "mac", "linux"):
        if os_marker in hinted and os_marker not in ua:
            return base.failed("Client Hints platform does not match the UA")

    return base.passed("Client Hints agree with the UA")


def check_fonts_os(bundle: signals.SignalBundle) -> base.RuleOutcome:
    ua = bundle.navigator.user_agent.lower()
    fonts = [font.lower() for font in bundle.fonts.available]

    message = "System fonts present"
    if "windows" in ua and not any(font in fonts for font in signal_patterns.WINDOWS_FONTS):
        message = "No typical Windows fonts found"
    if "mac" in ua and not any(mac_font in font for mac_font in signal_patterns.MAC_FONTS for font in fonts):
        message = "No typical macOS fonts found"

    return base.passed(message)


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="ua_platform_match",
        name="UA-platform match",
        description="Checks that the User-Agent and navigator.platform agree",
        category="user_agent",
        severity="high",
        check=check_ua_platform,
    ),
    base.ConsistencyRule(
        id="ua_gpu_match",
        name="UA-GPU match",
        description="Checks that the GPU is plausible for the operating system",
        category="hardware",
        severity="medium",
        check=check_ua_gpu,
    ),
    base.ConsistencyRule(
        id="ua_screen_mobile",
        name="Mobile screen",
        description="Checks that a mobile UA comes with a mobile-sized screen",
        category="screen",
        severity="low",
        check=check_mobile_screen,
    ),
    base.ConsistencyRule(
        id="fonts_os_match",
        name="Fonts-OS match",
        description="Checks for the system fonts expected on the operating system",
        category="fonts",
        severity="medium",
        check=check_fonts_os,
        informational=True,
    ),
    base.ConsistencyRule(
        id="client_hints_consistency",
        name="Client Hints consistency",
        description="Checks that Client Hints agree with the User-Agent",
        category="browser",
        severity="medium",
        check=check_client_hints,
    ),
)
