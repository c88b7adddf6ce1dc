"""Indicator records, severity penalties and probability weights for anomaly detection."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from echoprint.models import analysis, signals

SEVERITY_PENALTIES: dict[analysis.IndicatorSeverity, int] = {
    "high": 15,
    "medium": 8,
    "low": 3,
}

# Per-indicator contribution to the type probability, saturating below certainty.
PROBABILITY_WEIGHTS: dict[analysis.AnomalyType, float] = {
    "virtualization": 0.30,
    "automation": 0.35,
    "modification": 0.25,
}
PROBABILITY_CAP = 0.95


@dataclasses.dataclass(frozen=True)
class Detection:
    """What an indicator reports for one bundle."""

    detected: bool
    evidence: tuple[str, ...] = ()

    @classmethod
    def from_evidence(cls, evidence: list[str]) -> Detection:
        """Detected exactly when at least one piece of evidence was collected."""
        return cls(detected=bool(evidence), evidence=tuple(evidence))


@dataclasses.dataclass(frozen=True)
class AnomalyIndicator:
    """A declarative anomaly indicator."""

    id: str
    name: str
    description: str
    type: analysis.AnomalyType
    severity: analysis.IndicatorSeverity
    detect: Callable[[signals.SignalBundle], Detection]

    def evaluate(self, bundle: signals.SignalBundle) -> analysis.AnomalyIndicatorResult:
        """Run the detector and package its outcome with the indicator metadata."""
        detection = self.detect(bundle)
        return analysis.AnomalyIndicatorResult(
            id=self.id,
            name=self.name,
            description=self.description,
            type=self.type,
            severity=self.severity,
            detected=detection.detected,
            evidence=list(detection.evidence),
        )


def type_probability(anomaly_type: analysis.AnomalyType, count: int) -> float:
    """Probability estimate for *count* detected indicators of one type."""
    weight = PROBABILITY_WEIGHTS.get(anomaly_type, 0.0)
    return min(count * weight, PROBABILITY_CAP)
