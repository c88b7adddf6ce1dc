"""Consistency analysis — runs every rule and scores the failures.

The score starts at 100 and loses a fixed penalty per failed rule
according to its severity (see :data:`base.SEVERITY_PENALTIES`),
clamped to 0–100.
"""

from __future__ import annotations

from echoprint.analysis.consistency import automation, base, browser, hardware, platform, rendering, storage
from echoprint.models import analysis, signals
from echoprint.utils import logger

log = logger.create_logger("Consistency")

CONSISTENCY_RULES: tuple[base.ConsistencyRule, ...] = (
    *platform.RULES,
    *hardware.RULES,
    *browser.RULES,
    *rendering.RULES,
    *automation.RULES,
    *storage.RULES,
)


def score_results(results: list[analysis.ConsistencyRuleResult]) -> int:
    """Apply the severity penalties of every failed rule to a base of 100."""
    penalty = sum(base.SEVERITY_PENALTIES[r.severity] for r in results if not r.passed)
    return max(0, min(100, 100 - penalty))


def analyze_consistency(
    bundle: signals.SignalBundle,
    rules: tuple[base.ConsistencyRule, ...] = CONSISTENCY_RULES,
) -> analysis.ConsistencyAnalysis:
    """Evaluate all consistency rules against *bundle*.

    Args:
        bundle: Fully populated signal bundle.
        rules: Rules to evaluate; defaults to the full registry.

    Returns:
        Per-rule outcomes in registry order, pass counts, the score,
        and the failed critical rules.
    """
    results = [rule.evaluate(bundle) for rule in rules]
    failed = [r for r in results if not r.passed]
    score = score_results(results)

    if failed:
        log.info(
            "Consistency rules failed",
            {"failed": [r.id for r in failed], "score": score},
        )
    else:
        log.debug("All consistency rules passed", {"rules": len(results)})

    return analysis.ConsistencyAnalysis(
        overall_score=score,
        passed_rules=len(results) - len(failed),
        total_rules=len(results),
        rules=results,
        critical_issues=[r for r in failed if r.severity == "critical"],
    )


def interpret_consistency_score(score: int) -> analysis.ScoreInterpretation:
    """Map a consistency score to its level, description and risk band."""
    if score >= 90:
        return analysis.ScoreInterpretation(
            level="Excellent consistency",
            description="All device parameters are logical and consistent. The browser looks realistic.",
            risk_level="none",
        )
    if score >= 75:
        return analysis.ScoreInterpretation(
            level="Good consistency",
            description="Most parameters are consistent. Minor mismatches may come from browser quirks.",
            risk_level="low",
        )
    if score >= 50:
        return analysis.ScoreInterpretation(
            level="Fair consistency",
            description=(
                "Some parameters contradict each other. This may indicate a modified browser or a VPN."
            ),
            risk_level="medium",
        )
    return analysis.ScoreInterpretation(
        level="Poor consistency",
        description=(
            "Serious mismatches were found. This may indicate virtualization, emulation "
            "or anti-fingerprinting tools."
        ),
        risk_level="high",
    )
