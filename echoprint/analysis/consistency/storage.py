"""Storage, cookie and WebRTC address checks."""

from __future__ import annotations

from echoprint.analysis.consistency import base
from echoprint.models import signals

_MAX_PLAUSIBLE_LOCAL_IPS = 10


def check_storage_available(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if not bundle.storage.local_storage and not bundle.storage.session_storage:
        return base.failed("Storage APIs unavailable")
    return base.passed("Storage APIs available")


def check_cookie_storage(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if bundle.navigator.cookie_enabled and not bundle.storage.local_storage:
        return base.failed("Cookies enabled, but localStorage unavailable")
    return base.passed("Cookies and storage agree")


def check_webrtc_ips(bundle: signals.SignalBundle) -> base.RuleOutcome:
    ips = bundle.webrtc.local_ips
    if len(ips) > _MAX_PLAUSIBLE_LOCAL_IPS:
        return base.failed(f"Too many IP addresses: {len(ips)}")
    if any(ip.startswith("0.") for ip in ips):
        return base.failed("Suspicious IP addresses detected")
    return base.passed(f"{len(ips)} local IP addresses")


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="storage_available",
        name="Storage availability",
        description="Checks that the Web Storage APIs are available",
        category="storage",
        severity="low",
        check=check_storage_available,
    ),
    base.ConsistencyRule(
        id="cookie_enabled_match",
        name="Cookie availability",
        description="Checks that cookieEnabled agrees with storage availability",
        category="storage",
        severity="low",
        check=check_cookie_storage,
    ),
    base.ConsistencyRule(
        id="webrtc_realistic_ips",
        name="WebRTC IP plausibility",
        description="Checks that the leaked local IP addresses are plausible",
        category="network",
        severity="medium",
        check=check_webrtc_ips,
    ),
)
