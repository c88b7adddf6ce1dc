"""Shared serialization helpers for camelCase conversion.

Provides a single ``snake_to_camel`` implementation used by
Pydantic model configs so that every engine model serialises
to the camelCase wire format the presentation layer expects.
"""

from __future__ import annotations

from typing import Any

import pydantic


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"overall_score"``.

    Returns:
        The camelCase equivalent, e.g. ``"overallScore"``.
    """
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])


def to_wire(obj: pydantic.BaseModel) -> dict[str, Any]:
    """Dump a model to a JSON-compatible dict using camelCase aliases."""
    return obj.model_dump(mode="json", by_alias=True)
