"""Anomaly detector.

Indicators are grouped by the kind of anomaly they look for and
assembled into a single registry evaluated by :func:`analyze_anomalies`.
"""

from __future__ import annotations

from echoprint.analysis.anomaly.detector import (
    ANOMALY_INDICATORS,
    analyze_anomalies,
    interpret_anomaly_score,
)

__all__ = ["ANOMALY_INDICATORS", "analyze_anomalies", "interpret_anomaly_score"]
