"""Consistency rule engine.

Rules live in one module per signal area and are assembled into a
single registry evaluated by :func:`analyze_consistency`.
"""

from __future__ import annotations

from echoprint.analysis.consistency.analyzer import (
    CONSISTENCY_RULES,
    analyze_consistency,
    interpret_consistency_score,
)

__all__ = ["CONSISTENCY_RULES", "analyze_consistency", "interpret_consistency_score"]
