"""Pydantic model for the downloadable JSON report."""

from __future__ import annotations

import pydantic

from echoprint.models import analysis, signals
from echoprint.utils.serialization import snake_to_camel


class ExportReport(pydantic.BaseModel):
    """Signal bundle and analysis packaged for export."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True, frozen=True
    )

    version: str
    generated_at: str
    fingerprint: signals.SignalBundle
    analysis: analysis.AnalysisResult
    disclaimer: str
