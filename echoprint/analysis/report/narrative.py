"""Natural-language report synthesised from the three analyses.

Every sentence is derived from the structured results; nothing here
changes a score.  Recommendations are capped at six and privacy tips
at five, both deduplicated and kept in the order they were produced.
"""

from __future__ import annotations

from echoprint.analysis import anomaly as anomaly_detector
from echoprint.analysis import consistency as consistency_engine
from echoprint.analysis import uniqueness as uniqueness_analyzer
from echoprint.data import loader
from echoprint.models import analysis, signals

MAX_RECOMMENDATIONS = 6
MAX_PRIVACY_TIPS = 5

_LARGE_FONT_LIBRARY = 200


def format_signal_name(signal: str) -> str:
    """Human-readable label for a signal id; unknown ids pass through."""
    return loader.get_signal_names().get(signal, signal)


def _dedupe(items: list[str], limit: int) -> list[str]:
    return list(dict.fromkeys(items))[:limit]


# ── Summary & assessments ───────────────────────────────────────


def build_summary(bundle: signals.SignalBundle, uniqueness: analysis.UniquenessAnalysis, consistency_score: int) -> str:
    parsed = bundle.parsed_ua
    score = uniqueness.overall_score
    if score >= 80:
        verdict = "a very unique"
    elif score >= 60:
        verdict = "a moderately unique"
    else:
        verdict = "a common"

    return (
        f'Your device "{parsed.browser.name} {parsed.browser.version}" on {parsed.os.name} '
        f"has {verdict} fingerprint. "
        f"Uniqueness: {score}%. Consistency: {consistency_score}%."
    )


def assess_uniqueness(uniqueness: analysis.UniquenessAnalysis) -> str:
    band = uniqueness_analyzer.interpret_uniqueness_score(uniqueness.overall_score)
    parts = [f"{band.level}.", band.description]
    if uniqueness.rarest_signals:
        rarest = uniqueness.rarest_signals[0]
        parts.append(f"Rarest characteristic: {format_signal_name(rarest.signal)} (rarity {rarest.rarity}%).")
    if uniqueness.common_signals:
        common = uniqueness.common_signals[0]
        parts.append(f"Most common: {format_signal_name(common.signal)} (rarity {common.rarity}%).")
    return " ".join(parts)


def assess_consistency(consistency: analysis.ConsistencyAnalysis) -> str:
    band = consistency_engine.interpret_consistency_score(consistency.overall_score)
    parts = [f"{band.level}.", band.description]

    failed = [r for r in consistency.rules if not r.passed]
    if not failed:
        parts.append("All parameters are consistent and logical.")
        return " ".join(parts)

    parts.append(f"Found {len(failed)} inconsistencies.")
    serious = [r.name for r in failed if r.severity in ("critical", "high")]
    if serious:
        parts.append(f"Serious: {', '.join(serious)}.")
    return " ".join(parts)


def assess_anomalies(anomaly: analysis.AnomalyAnalysis) -> str:
    band = anomaly_detector.interpret_anomaly_score(anomaly.overall_score)
    parts = [f"{band.level}.", band.description]

    counts: dict[str, int] = {}
    for result in anomaly.detected_anomalies:
        counts[result.type] = counts.get(result.type, 0) + 1

    for anomaly_type, label in (
        ("virtualization", "Virtualization signs"),
        ("automation", "Automation signs"),
        ("modification", "Modification signs"),
    ):
        if counts.get(anomaly_type):
            parts.append(f"{label}: {counts[anomaly_type]}.")
    return " ".join(parts)


# ── Recommendations & tips ──────────────────────────────────────


def build_recommendations(
    bundle: signals.SignalBundle,
    uniqueness: analysis.UniquenessAnalysis,
    consistency: analysis.ConsistencyAnalysis,
    anomaly: analysis.AnomalyAnalysis,
) -> list[str]:
    """Actionable advice driven by score thresholds and detected conditions."""
    recommendations: list[str] = []
    browser = bundle.parsed_ua.browser.name

    if uniqueness.overall_score >= 80:
        recommendations.append(
            "Your device is very unique. Consider a browser with anti-fingerprinting protection."
        )
        recommendations.append("Switch to a more common screen setup (for example 1920x1080).")
    elif uniqueness.overall_score < 30:
        recommendations.append("Your device looks like many others. That is good for privacy.")
        recommendations.append(
            "If you need a more distinctive profile (for testing, say), install additional fonts."
        )

    if any(not r.passed and r.severity == "critical" for r in consistency.rules):
        recommendations.append(
            "Critical fingerprint inconsistencies can break some websites. Check your browser settings."
        )

    if anomaly.virtualization_probability > 0.5:
        recommendations.append("Virtualization signs were found. That is expected if you use a VM.")
    if anomaly.automation_probability > 0.5:
        recommendations.append("Automation signs were found. Some websites may block you.")

    if browser == "Chrome":
        recommendations.append(
            "Chrome exposes a lot of fingerprint data. Consider Firefox or Brave for better privacy."
        )
    elif browser == "Firefox":
        recommendations.append(
            "Firefox has built-in fingerprinting protection. Enable Resist Fingerprinting in about:config."
        )
    elif browser == "Brave":
        recommendations.append("Brave has strong built-in fingerprinting protection.")

    if bundle.webrtc.local_ips:
        recommendations.append(
            "WebRTC leaks your IP: block WebRTC with an extension or disable it in the browser settings."
        )

    if bundle.fonts.count > _LARGE_FONT_LIBRARY:
        recommendations.append("A large font library increases uniqueness. Stick to the default fonts.")

    return _dedupe(recommendations, MAX_RECOMMENDATIONS)


def build_privacy_tips(bundle: signals.SignalBundle, uniqueness: analysis.UniquenessAnalysis) -> list[str]:
    tips = [
        "Keep your browser updated, new releases often improve protection.",
        "Use private browsing for sensitive sessions.",
    ]
    browser = bundle.parsed_ua.browser.name

    if uniqueness.overall_score > 70:
        tips.append("Install a fingerprint randomisation extension such as Canvas Defender.")
    if bundle.webrtc.local_ips:
        tips.append("Use a VPN with WebRTC leak protection.")

    if browser == "Firefox":
        tips.append("Set privacy.resistFingerprinting = true in about:config.")
        tips.append("Set extensions.pocket.enabled = false to shrink your fingerprint.")
    elif browser == "Chrome":
        tips.append("Consider switching to Brave or Firefox.")
        tips.append("Install uBlock Origin to block trackers.")

    tips.append("Use Tor Browser for anonymous browsing.")
    tips.append("Use Firefox containers to isolate websites from each other.")

    return _dedupe(tips, MAX_PRIVACY_TIPS)


def build_report(
    bundle: signals.SignalBundle,
    uniqueness: analysis.UniquenessAnalysis,
    consistency: analysis.ConsistencyAnalysis,
    anomaly: analysis.AnomalyAnalysis,
) -> analysis.AIReport:
    """Assemble the full narrative report."""
    return analysis.AIReport(
        summary=build_summary(bundle, uniqueness, consistency.overall_score),
        uniqueness_assessment=assess_uniqueness(uniqueness),
        consistency_assessment=assess_consistency(consistency),
        anomaly_assessment=assess_anomalies(anomaly),
        recommendations=build_recommendations(bundle, uniqueness, consistency, anomaly),
        privacy_tips=build_privacy_tips(bundle, uniqueness),
    )
