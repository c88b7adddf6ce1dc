"""Pydantic models for analysis results, rule outcomes, and the report."""

from __future__ import annotations

from typing import Any, Literal

import pydantic

from echoprint.utils.serialization import snake_to_camel

RuleSeverity = Literal["low", "medium", "high", "critical"]
IndicatorSeverity = Literal["low", "medium", "high"]
AnomalyType = Literal["virtualization", "emulation", "automation", "modification", "inconsistency"]
RiskTier = Literal["very_low", "low", "medium", "high", "very_high"]
BandRisk = Literal["none", "low", "medium", "high"]


class ResultModel(pydantic.BaseModel):
    """Base for engine outputs: immutable, camelCase on the wire."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Uniqueness ──────────────────────────────────────────────────


class SignalObservation(ResultModel):
    """Entropy and rarity estimate for one inspected signal."""

    signal: str
    value: Any = None
    entropy: float
    rarity: int


class RankedSignal(ResultModel):
    """A signal as listed in the rarest / most common rankings."""

    signal: str
    rarity: int
    value: Any = None


class UniquenessAnalysis(ResultModel):
    """How identifying the fingerprint is."""

    overall_score: int
    entropy: float
    bits_of_entropy: float
    rarest_signals: list[RankedSignal] = pydantic.Field(default_factory=list)
    common_signals: list[RankedSignal] = pydantic.Field(default_factory=list)
    category_scores: dict[str, float] = pydantic.Field(default_factory=dict)


# ── Consistency ─────────────────────────────────────────────────


class ConsistencyRuleResult(ResultModel):
    """Outcome of one consistency rule."""

    id: str
    name: str
    description: str
    category: str
    severity: RuleSeverity
    passed: bool
    message: str
    informational: bool = False


class ConsistencyAnalysis(ResultModel):
    """Aggregate of all consistency rule outcomes."""

    overall_score: int
    passed_rules: int
    total_rules: int
    rules: list[ConsistencyRuleResult] = pydantic.Field(default_factory=list)
    critical_issues: list[ConsistencyRuleResult] = pydantic.Field(default_factory=list)


# ── Anomalies ───────────────────────────────────────────────────


class AnomalyIndicatorResult(ResultModel):
    """Outcome of one anomaly indicator, with collected evidence."""

    id: str
    name: str
    description: str
    type: AnomalyType
    severity: IndicatorSeverity
    detected: bool
    evidence: list[str] = pydantic.Field(default_factory=list)


class AnomalyAnalysis(ResultModel):
    """Detected anomalies and per-type probability estimates."""

    overall_score: int
    detected_anomalies: list[AnomalyIndicatorResult] = pydantic.Field(default_factory=list)
    virtualization_probability: float = 0.0
    automation_probability: float = 0.0
    modification_probability: float = 0.0


# ── Interpretation bands ────────────────────────────────────────


class UniquenessInterpretation(ResultModel):
    """Discrete band for a uniqueness score."""

    level: str
    description: str
    trackability: RiskTier


class ScoreInterpretation(ResultModel):
    """Discrete band for a consistency or anomaly score."""

    level: str
    description: str
    risk_level: BandRisk


# ── Report ──────────────────────────────────────────────────────


class AIReport(ResultModel):
    """Natural-language report synthesised from the three analyses."""

    summary: str
    uniqueness_assessment: str
    consistency_assessment: str
    anomaly_assessment: str
    recommendations: list[str] = pydantic.Field(default_factory=list)
    privacy_tips: list[str] = pydantic.Field(default_factory=list)


class AnalysisResult(ResultModel):
    """Final result of one analysis run."""

    uniqueness: UniquenessAnalysis
    consistency: ConsistencyAnalysis
    anomaly: AnomalyAnalysis
    overall_score: int
    privacy_risk_level: RiskTier
    trackability_level: RiskTier
    ai_report: AIReport
