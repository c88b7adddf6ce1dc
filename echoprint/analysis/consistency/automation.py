"""Automation flags: the WebDriver flag and a Chrome UA without ``window.chrome``."""

from __future__ import annotations

from echoprint.analysis.consistency import base
from echoprint.models import signals


def check_webdriver(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if bundle.navigator.webdriver:
        return base.failed("WebDriver flag is set - a sign of automation")
    return base.passed("WebDriver flag is not set")


def check_headless_chrome(bundle: signals.SignalBundle) -> base.RuleOutcome:
    is_chrome_ua = "chrome" in bundle.navigator.user_agent.lower()
    if is_chrome_ua and not bundle.automation.has_chrome_object:
        return base.failed("Chrome UA but no window.chrome - a headless sign")
    return base.passed("No headless signs detected")


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="webdriver_flag",
        name="WebDriver flag",
        description="Checks the navigator.webdriver automation flag",
        category="automation",
        severity="critical",
        check=check_webdriver,
    ),
    base.ConsistencyRule(
        id="headless_chrome",
        name="Headless Chrome signs",
        description="Checks for signs of a headless browser",
        category="automation",
        severity="high",
        check=check_headless_chrome,
    ),
)
