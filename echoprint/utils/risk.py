"""Shared risk-level and score helpers used by the analyzers and the report."""

from __future__ import annotations

import math

from echoprint.models.analysis import RiskTier

_RISK_DESCRIPTIONS: dict[str, str] = {
    "very_low": "Very low risk - your device is practically impossible to track",
    "low": "Low risk - tracking is difficult",
    "medium": "Medium risk - partial tracking is possible",
    "high": "High risk - you are easy to identify",
    "very_high": "Very high risk - your device is unique and easy to track",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Round *value* and clamp it into the 0-100 score range."""
    return max(0, min(100, round_half_up(value)))


def trackability_level(uniqueness_score: int) -> RiskTier:
    """Map a 0-100 uniqueness score to a trackability tier."""
    if uniqueness_score >= 85:
        return "very_high"
    if uniqueness_score >= 70:
        return "high"
    if uniqueness_score >= 50:
        return "medium"
    if uniqueness_score >= 30:
        return "low"
    return "very_low"


def risk_level_description(level: str) -> str:
    """Return a one-sentence description of a privacy-risk level."""
    return _RISK_DESCRIPTIONS.get(level, "Unknown risk level")
