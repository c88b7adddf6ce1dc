"""Browser identity checks: engine pairing, version age, languages, DNT, plugins."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.consistency import base
from echoprint.models import signals


def check_browser_engine(bundle: signals.SignalBundle) -> base.RuleOutcome:
    """Chromium browsers must run Blink, Firefox Gecko and Safari WebKit."""
    browser = bundle.parsed_ua.browser.name.lower()
    engine = bundle.parsed_ua.engine.name.lower()

    expected_engines = (
        (signal_patterns.BLINK_BROWSERS, "blink", "Blink"),
        (signal_patterns.GECKO_BROWSERS, "gecko", "Gecko"),
        (signal_patterns.WEBKIT_BROWSERS, "webkit", "WebKit"),
    )
    for family, engine_id, engine_label in expected_engines:
        if browser in family and engine != engine_id:
            return base.failed(f"{browser} should use {engine_label}, but found {engine}")

    return base.passed("Browser and engine match")


def check_browser_version(bundle: signals.SignalBundle) -> base.RuleOutcome:
    browser = bundle.parsed_ua.browser
    expected = signal_patterns.EXPECTED_BROWSER_VERSIONS.get(browser.name)
    if expected and browser.major < expected - 30:
        return base.passed(f"Outdated {browser.name} version: {browser.major}")
    return base.passed(f"{browser.name} {browser.major} is current")


def check_timezone_language(bundle: signals.SignalBundle) -> base.RuleOutcome:
    timezone = bundle.misc.timezone
    language = bundle.navigator.language
    expected = signal_patterns.TIMEZONE_LANGUAGES.get(timezone)
    if expected and not any(language.startswith(code.split("-")[0]) for code in expected):
        return base.passed(f"Timezone {timezone} does not match language {language}")
    return base.passed("Timezone and language match")


def check_languages(bundle: signals.SignalBundle) -> base.RuleOutcome:
    languages = bundle.navigator.languages
    if not languages:
        return base.failed("No languages set")
    return base.passed(f"{len(languages)} languages")


def check_do_not_track(bundle: signals.SignalBundle) -> base.RuleOutcome:
    dnt = bundle.navigator.do_not_track
    if dnt == "1":
        return base.passed("Do Not Track enabled")
    return base.passed(f"DNT: {dnt or 'not set'}")


def check_plugins(bundle: signals.SignalBundle) -> base.RuleOutcome:
    plugins = bundle.misc.plugins
    if not plugins:
        return base.passed("No plugins (normal for modern browsers)")
    return base.passed(f"{len(plugins)} plugins")


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="browser_engine_match",
        name="Browser-engine match",
        description="Checks that the browser reports its expected rendering engine",
        category="browser",
        severity="medium",
        check=check_browser_engine,
    ),
    base.ConsistencyRule(
        id="browser_version_current",
        name="Current browser version",
        description="Reports whether the browser version is outdated",
        category="browser",
        severity="low",
        check=check_browser_version,
        informational=True,
    ),
    base.ConsistencyRule(
        id="timezone_language_match",
        name="Timezone-language match",
        description="Reports whether the timezone fits the browser language",
        category="network",
        severity="low",
        check=check_timezone_language,
        informational=True,
    ),
    base.ConsistencyRule(
        id="languages_set",
        name="Languages set",
        description="Checks that navigator.languages is populated",
        category="browser",
        severity="low",
        check=check_languages,
    ),
    base.ConsistencyRule(
        id="do_not_track_header",
        name="DNT header",
        description="Reports the Do Not Track setting",
        category="privacy",
        severity="low",
        check=check_do_not_track,
        informational=True,
    ),
    base.ConsistencyRule(
        id="plugins_empty",
        name="No plugins",
        description="Reports the installed browser plugins",
        category="automation",
        severity="low",
        check=check_plugins,
        informational=True,
    ),
)
