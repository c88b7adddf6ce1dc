"""Report aggregation and narrative synthesis."""

from __future__ import annotations

from echoprint.analysis.report.aggregator import (
    analyze_fingerprint,
    analyze_fingerprint_async,
    build_export_report,
    privacy_risk_level,
)
from echoprint.analysis.report.narrative import format_signal_name

__all__ = [
    "analyze_fingerprint",
    "analyze_fingerprint_async",
    "build_export_report",
    "format_signal_name",
    "privacy_risk_level",
]
