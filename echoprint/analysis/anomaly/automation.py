"""Automation signatures: WebDriver, ChromeDriver globals and headless browsers."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.anomaly import base
from echoprint.models import signals


def detect_webdriver(bundle: signals.SignalBundle) -> base.Detection:
    evidence = []
    if bundle.navigator.webdriver:
        evidence.append("navigator.webdriver = true")

    injected = set(bundle.automation.injected_globals)
    evidence.extend(f"{name} exists" for name in signal_patterns.AUTOMATION_GLOBALS if name in injected)
    return base.Detection.from_evidence(evidence)


def detect_chrome_driver(bundle: signals.SignalBundle) -> base.Detection:
    return base.Detection.from_evidence(
        [
            f"ChromeDriver variable: {name}"
            for name in bundle.automation.injected_globals
            if name.startswith(signal_patterns.CHROMEDRIVER_PREFIXES)
        ]
    )


def detect_headless(bundle: signals.SignalBundle) -> base.Detection:
    ua = bundle.navigator.user_agent.lower()
    evidence = []

    if "headless" in ua:
        evidence.append('User-Agent contains "headless"')
    if "phantom" in ua:
        evidence.append("PhantomJS User-Agent")
    if "chrome" in ua and not bundle.automation.has_chrome_object:
        evidence.append("Chrome UA but no window.chrome object")
    if not bundle.navigator.languages:
        evidence.append("navigator.languages is empty")

    return base.Detection.from_evidence(evidence)


INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    base.AnomalyIndicator(
        id="automation_webdriver",
        name="WebDriver detected",
        description="The browser is running under automation",
        type="automation",
        severity="high",
        detect=detect_webdriver,
    ),
    base.AnomalyIndicator(
        id="automation_chrome_driver",
        name="ChromeDriver detected",
        description="ChromeDriver variables were found on the window",
        type="automation",
        severity="high",
        detect=detect_chrome_driver,
    ),
    base.AnomalyIndicator(
        id="automation_headless",
        name="Headless browser",
        description="Signs of headless mode",
        type="automation",
        severity="high",
        detect=detect_headless,
    ),
)
