"""Device-emulation signatures: mobile UA on a desktop screen, desktop with touch."""

from __future__ import annotations

from echoprint.analysis.anomaly import base
from echoprint.models import signals


def detect_mobile_emulation(bundle: signals.SignalBundle) -> base.Detection:
    screen = bundle.hardware.screen
    is_mobile_ua = bundle.parsed_ua.device.type in ("mobile", "tablet")
    has_touch = bundle.hardware.max_touch_points > 0
    is_small_screen = min(screen.width, screen.height) < 768

    evidence = []
    if is_mobile_ua and not is_small_screen and not has_touch:
        evidence.append("Mobile UA but a desktop screen without touch")
    return base.Detection.from_evidence(evidence)


def detect_touch_emulation(bundle: signals.SignalBundle) -> base.Detection:
    evidence = []
    if bundle.hardware.max_touch_points > 0 and bundle.parsed_ua.device.type == "desktop":
        evidence.append("Touch points on a desktop device")
    return base.Detection.from_evidence(evidence)


def detect_orientation_mismatch(bundle: signals.SignalBundle) -> base.Detection:
    screen = bundle.hardware.screen
    orientation = (screen.orientation or "").lower()
    evidence = []
    if orientation.startswith("portrait") and screen.width > screen.height:
        evidence.append(f"Portrait orientation on a {screen.width}x{screen.height} screen")
    elif orientation.startswith("landscape") and screen.width < screen.height:
        evidence.append(f"Landscape orientation on a {screen.width}x{screen.height} screen")
    return base.Detection.from_evidence(evidence)


INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    base.AnomalyIndicator(
        id="emulation_mobile",
        name="Mobile emulation",
        description="A desktop browser is emulating a mobile device",
        type="emulation",
        severity="medium",
        detect=detect_mobile_emulation,
    ),
    base.AnomalyIndicator(
        id="emulation_touch",
        name="Touch emulation",
        description="Touch events are being emulated",
        type="emulation",
        severity="low",
        detect=detect_touch_emulation,
    ),
    base.AnomalyIndicator(
        id="emulation_orientation",
        name="Orientation mismatch",
        description="The reported orientation does not match the screen size",
        type="emulation",
        severity="low",
        detect=detect_orientation_mismatch,
    ),
)
