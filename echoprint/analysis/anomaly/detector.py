"""Anomaly detection — runs every indicator and scores what was found.

The score is a "normalcy" score: it starts at 100 and each detected
indicator subtracts its severity penalty, floored at 0.  Per-type
probabilities use a saturating linear model over the number of
detected indicators of that type.
"""

from __future__ import annotations

from echoprint.analysis.anomaly import automation, base, emulation, inconsistency, modification, virtualization
from echoprint.models import analysis, signals
from echoprint.utils import logger

log = logger.create_logger("Anomaly")

ANOMALY_INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    *virtualization.INDICATORS,
    *automation.INDICATORS,
    *emulation.INDICATORS,
    *modification.INDICATORS,
    *inconsistency.INDICATORS,
)


def analyze_anomalies(
    bundle: signals.SignalBundle,
    indicators: tuple[base.AnomalyIndicator, ...] = ANOMALY_INDICATORS,
) -> analysis.AnomalyAnalysis:
    """Evaluate all anomaly indicators against *bundle*.

    Args:
        bundle: Fully populated signal bundle.
        indicators: Indicators to evaluate; defaults to the full registry.

    Returns:
        The detected indicators in registry order, the normalcy score
        and the virtualization, automation and modification probabilities.
    """
    detected = [result for result in (i.evaluate(bundle) for i in indicators) if result.detected]

    penalty = sum(base.SEVERITY_PENALTIES[r.severity] for r in detected)
    score = max(0, 100 - penalty)

    counts: dict[str, int] = {}
    for result in detected:
        counts[result.type] = counts.get(result.type, 0) + 1

    if detected:
        log.info("Anomalies detected", {"indicators": [r.id for r in detected], "score": score})
    else:
        log.debug("No anomalies detected", {"indicators": len(indicators)})

    return analysis.AnomalyAnalysis(
        overall_score=score,
        detected_anomalies=detected,
        virtualization_probability=base.type_probability("virtualization", counts.get("virtualization", 0)),
        automation_probability=base.type_probability("automation", counts.get("automation", 0)),
        modification_probability=base.type_probability("modification", counts.get("modification", 0)),
    )


def interpret_anomaly_score(score: int) -> analysis.ScoreInterpretation:
    """Map an anomaly (normalcy) score to its level, description and risk band."""
    if score >= 90:
        return analysis.ScoreInterpretation(
            level="No anomalies",
            description="The browser looks like an ordinary user browser.",
            risk_level="none",
        )
    if score >= 70:
        return analysis.ScoreInterpretation(
            level="Minor anomalies",
            description="A few unusual characteristics were found, possibly from browser extensions.",
            risk_level="low",
        )
    if score >= 50:
        return analysis.ScoreInterpretation(
            level="Moderate anomalies",
            description="Signs of modification or virtualization were found.",
            risk_level="medium",
        )
    return analysis.ScoreInterpretation(
        level="Severe anomalies",
        description="Strong signs of automation, virtualization or fingerprint spoofing.",
        risk_level="high",
    )
