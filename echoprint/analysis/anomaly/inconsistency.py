"""Signals that contradict each other: timezone offset, screen areas, UA vs platform."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.anomaly import base
from echoprint.models import signals

# Real offsets stay within ±12 hours of UTC (in minutes).
_MAX_TIMEZONE_OFFSET = 720


def detect_timezone_offset(bundle: signals.SignalBundle) -> base.Detection:
    offset = bundle.misc.timezone_offset
    evidence = []
    if abs(offset) > _MAX_TIMEZONE_OFFSET:
        evidence.append(f"Abnormal timezone offset: {offset} minutes")
    return base.Detection.from_evidence(evidence)


def detect_screen_mismatch(bundle: signals.SignalBundle) -> base.Detection:
    screen = bundle.hardware.screen
    evidence = []
    if screen.avail_width > screen.width or screen.avail_height > screen.height:
        evidence.append("Available screen is larger than the total screen")
    if screen.avail_width < screen.width * 0.5 or screen.avail_height < screen.height * 0.5:
        evidence.append("Available screen is much smaller than the total screen")
    return base.Detection.from_evidence(evidence)


def detect_language_mismatch(bundle: signals.SignalBundle) -> base.Detection:
    navigator = bundle.navigator
    evidence = []
    if navigator.languages and navigator.language not in navigator.languages:
        evidence.append(f"navigator.language {navigator.language} is missing from navigator.languages")
    return base.Detection.from_evidence(evidence)


def detect_ua_platform_mismatch(bundle: signals.SignalBundle) -> base.Detection:
    platform = bundle.navigator.platform
    mismatches = signal_patterns.platform_mismatches(bundle.navigator.user_agent, platform, strict_mac=True)
    return base.Detection.from_evidence([f"UA: {os_name}, Platform: {platform}" for os_name in mismatches])


INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    base.AnomalyIndicator(
        id="inconsistency_timezone",
        name="Timezone mismatch",
        description="The timezone does not fit the other locale signals",
        type="inconsistency",
        severity="medium",
        detect=detect_timezone_offset,
    ),
    base.AnomalyIndicator(
        id="inconsistency_screen",
        name="Screen mismatch",
        description="Screen parameters contradict each other",
        type="inconsistency",
        severity="low",
        detect=detect_screen_mismatch,
    ),
    base.AnomalyIndicator(
        id="inconsistency_language",
        name="Language mismatch",
        description="The primary language is not among the preferred languages",
        type="inconsistency",
        severity="low",
        detect=detect_language_mismatch,
    ),
    base.AnomalyIndicator(
        id="inconsistency_ua_platform",
        name="UA-platform mismatch",
        description="The User-Agent and platform disagree",
        type="inconsistency",
        severity="high",
        detect=detect_ua_platform_mismatch,
    ),
)
