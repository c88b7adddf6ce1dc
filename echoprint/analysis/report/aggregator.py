"""Report aggregator — combines the three analyses into one verdict.

The overall score is a fixed-weight blend of the uniqueness,
consistency and anomaly scores.  The privacy-risk ladder below is
evaluated first-match-wins and ignores the anomaly score in its two
upper rungs, so neighbouring inputs can land in non-adjacent tiers.
"""

from __future__ import annotations

import asyncio
import datetime

from echoprint import config
from echoprint.analysis import anomaly as anomaly_detector
from echoprint.analysis import consistency as consistency_engine
from echoprint.analysis import uniqueness as uniqueness_analyzer
from echoprint.analysis.report import narrative
from echoprint.models import analysis, export, signals
from echoprint.utils import logger
from echoprint.utils.risk import clamp_score, trackability_level

log = logger.create_logger("Report")

# ── Weights ─────────────────────────────────────────────────────

UNIQUENESS_WEIGHT = 0.40
CONSISTENCY_WEIGHT = 0.35
ANOMALY_WEIGHT = 0.25


def overall_score(uniqueness_score: int, consistency_score: int, anomaly_score: int) -> int:
    return clamp_score(
        uniqueness_score * UNIQUENESS_WEIGHT
        + consistency_score * CONSISTENCY_WEIGHT
        + anomaly_score * ANOMALY_WEIGHT
    )


def privacy_risk_level(uniqueness_score: int, consistency_score: int, anomaly_score: int) -> analysis.RiskTier:
    """Map the three axis scores to a privacy-risk tier, first match wins."""
    if uniqueness_score >= 80 and consistency_score >= 80:
        return "very_high"
    if uniqueness_score >= 60 and consistency_score >= 70:
        return "high"
    if uniqueness_score < 40 or anomaly_score < 60:
        return "low"
    # Unreachable in practice: every score below 25 already matched the rung above.
    if uniqueness_score < 25:
        return "very_low"
    return "medium"


# ── Aggregation ─────────────────────────────────────────────────


def combine(
    bundle: signals.SignalBundle,
    uniqueness: analysis.UniquenessAnalysis,
    consistency: analysis.ConsistencyAnalysis,
    anomaly: analysis.AnomalyAnalysis,
) -> analysis.AnalysisResult:
    """Build the final result from already computed axis analyses."""
    u, c, a = uniqueness.overall_score, consistency.overall_score, anomaly.overall_score
    result = analysis.AnalysisResult(
        uniqueness=uniqueness,
        consistency=consistency,
        anomaly=anomaly,
        overall_score=overall_score(u, c, a),
        privacy_risk_level=privacy_risk_level(u, c, a),
        trackability_level=trackability_level(u),
        ai_report=narrative.build_report(bundle, uniqueness, consistency, anomaly),
    )

    log.success(
        "Fingerprint analysed",
        {
            "uniqueness": u,
            "consistency": c,
            "anomaly": a,
            "overall": result.overall_score,
            "privacyRisk": result.privacy_risk_level,
        },
    )
    return result


def analyze_fingerprint(bundle: signals.SignalBundle) -> analysis.AnalysisResult:
    """Run all three analyses on *bundle* and aggregate them.

    Pure function of the bundle: identical bundles always produce
    identical results.

    Args:
        bundle: Fully populated signal bundle.

    Returns:
        The complete analysis result including the narrative report.
    """
    log.start_timer("analysis")
    result = combine(
        bundle,
        uniqueness_analyzer.analyze_uniqueness(bundle),
        consistency_engine.analyze_consistency(bundle),
        anomaly_detector.analyze_anomalies(bundle),
    )
    log.end_timer("analysis", "Analysis complete")
    return result


async def analyze_fingerprint_async(bundle: signals.SignalBundle) -> analysis.AnalysisResult:
    """Like :func:`analyze_fingerprint`, running the three analyzers concurrently.

    Each analyzer runs in a worker thread; they share no mutable
    state, so the result equals the synchronous one.
    """
    uniqueness, consistency, anomaly = await asyncio.gather(
        asyncio.to_thread(uniqueness_analyzer.analyze_uniqueness, bundle),
        asyncio.to_thread(consistency_engine.analyze_consistency, bundle),
        asyncio.to_thread(anomaly_detector.analyze_anomalies, bundle),
    )
    return combine(bundle, uniqueness, consistency, anomaly)


# ── Export ──────────────────────────────────────────────────────


def build_export_report(
    bundle: signals.SignalBundle,
    result: analysis.AnalysisResult,
    settings: config.Settings | None = None,
) -> export.ExportReport:
    """Package *bundle* and its *result* as a downloadable document."""
    settings = settings or config.get_settings()
    return export.ExportReport(
        version=settings.export_version,
        generated_at=datetime.datetime.now(datetime.timezone.utc).isoformat(),
        fingerprint=bundle,
        analysis=result,
        disclaimer=settings.disclaimer,
    )
