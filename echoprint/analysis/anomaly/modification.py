"""Signs that rendering APIs were tampered with, or privacy tools are active."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.anomaly import base
from echoprint.models import signals


def detect_modified_canvas(bundle: signals.SignalBundle) -> base.Detection:
    canvas = bundle.canvas
    evidence = []
    if canvas.text_hash == canvas.geometry_hash:
        evidence.append("Canvas text and geometry share the same hash")
    if len(canvas.text_hash) < 4:
        evidence.append("Canvas hash is unusually short")
    if not canvas.supported and bundle.webgl.supported:
        evidence.append("Canvas is not supported, but WebGL is")
    return base.Detection.from_evidence(evidence)


def detect_modified_webgl(bundle: signals.SignalBundle) -> base.Detection:
    webgl = bundle.webgl
    evidence = []
    if webgl.supported and webgl.vendor == "unknown":
        evidence.append("WebGL vendor is unknown")
    if webgl.supported and webgl.renderer == "unknown":
        evidence.append("WebGL renderer is unknown")

    suspicious = [
        ext for ext in webgl.extensions if any(marker in ext.lower() for marker in signal_patterns.SPOOFED_EXTENSION_MARKERS)
    ]
    if suspicious:
        evidence.append(f"Suspicious extensions: {', '.join(suspicious)}")
    return base.Detection.from_evidence(evidence)


def detect_modified_audio(bundle: signals.SignalBundle) -> base.Detection:
    evidence = []
    if not bundle.audio.supported and bundle.canvas.supported:
        evidence.append("AudioContext is not supported")
    if bundle.audio.hash == "error":
        evidence.append("Audio fingerprint could not be computed")
    return base.Detection.from_evidence(evidence)


def detect_modified_fonts(bundle: signals.SignalBundle) -> base.Detection:
    evidence = []
    if bundle.fonts.count == 0:
        evidence.append("No fonts were detected, font enumeration may be blocked")
    return base.Detection.from_evidence(evidence)


def detect_privacy_tools(bundle: signals.SignalBundle) -> base.Detection:
    """Fingerprints of Resist Fingerprinting, Brave and Tor Browser."""
    browser = bundle.parsed_ua.browser.name
    screen = bundle.hardware.screen
    is_firefox = browser == "Firefox"
    standard_screen = screen.width == 1920 and screen.height == 1080

    evidence = []
    if is_firefox and bundle.audio.sample_rate == 44100 and standard_screen:
        evidence.append("Firefox Resist Fingerprinting may be in use")
    if browser == "Brave":
        evidence.append("Brave has built-in anti-fingerprinting")

    utc_clock = bundle.misc.timezone == "UTC" or bundle.misc.timezone_offset == 0
    if is_firefox and standard_screen and screen.color_depth == 24 and utc_clock:
        evidence.append("Tor Browser may be in use")
    return base.Detection.from_evidence(evidence)


INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    base.AnomalyIndicator(
        id="modified_canvas",
        name="Modified canvas",
        description="Canvas output may have been altered",
        type="modification",
        severity="medium",
        detect=detect_modified_canvas,
    ),
    base.AnomalyIndicator(
        id="modified_webgl",
        name="Modified WebGL",
        description="WebGL parameters may have been altered",
        type="modification",
        severity="medium",
        detect=detect_modified_webgl,
    ),
    base.AnomalyIndicator(
        id="modified_audio",
        name="Modified audio",
        description="The audio fingerprint may have been altered",
        type="modification",
        severity="low",
        detect=detect_modified_audio,
    ),
    base.AnomalyIndicator(
        id="modified_fonts",
        name="Blocked fonts",
        description="Font enumeration returned nothing",
        type="modification",
        severity="low",
        detect=detect_modified_fonts,
    ),
    base.AnomalyIndicator(
        id="privacy_tools",
        name="Privacy tools",
        description="Signs of privacy tools were found",
        type="modification",
        severity="low",
        detect=detect_privacy_tools,
    ),
)
