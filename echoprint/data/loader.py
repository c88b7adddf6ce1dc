"""
Data loader for the entropy, rarity and signal-name reference tables.

The JSON data files live alongside this module. Each table is loaded
on first use, cached for the life of the process, and handed out as a
read-only mapping so no caller can mutate shared state.
"""

from __future__ import annotations

import json
import pathlib
import types
from collections.abc import Mapping
from typing import Any

# Resolve path to the data directory (same directory as this module)
_DATA_DIR = pathlib.Path(__file__).resolve().parent

# ============================================================================
# JSON File Loading
# ============================================================================


def _load_json(relative_path: str) -> Any:
    """Load and parse a JSON file relative to the data directory.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    full_path = _DATA_DIR / relative_path
    if not full_path.exists():
        raise FileNotFoundError(f"Data file not found: {relative_path}")
    with open(full_path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {relative_path}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


# ============================================================================
# Entropy Estimates
# ============================================================================

_entropy_estimates: Mapping[str, float] | None = None


def get_entropy_estimates() -> Mapping[str, float]:
    """Get estimated bits of entropy per signal category (lazy loaded and cached).

    Keys are lowercase signal names; key order is preserved from the
    file because partial-match lookups return the first hit.
    """
    global _entropy_estimates
    if _entropy_estimates is None:
        raw: dict[str, float] = _load_json("entropy-estimates.json")
        _entropy_estimates = types.MappingProxyType({key.lower(): float(bits) for key, bits in raw.items()})
    return _entropy_estimates


# ============================================================================
# Popular Value Distributions
# ============================================================================

_popular_values: Mapping[str, tuple[tuple[str, float], ...]] | None = None


def get_popular_values() -> Mapping[str, tuple[tuple[str, float], ...]]:
    """Get the known popular values per signal category (lazy loaded and cached).

    Each category maps to ``(value, frequency)`` pairs. Frequencies
    cover only well-known values and need not sum to 1.
    """
    global _popular_values
    if _popular_values is None:
        raw: dict[str, list[dict[str, Any]]] = _load_json("popular-values.json")
        _popular_values = types.MappingProxyType(
            {
                category: tuple((str(entry["value"]), float(entry["frequency"])) for entry in entries)
                for category, entries in raw.items()
            }
        )
    return _popular_values


# ============================================================================
# Signal Display Names
# ============================================================================

_signal_names: Mapping[str, str] | None = None


def get_signal_names() -> Mapping[str, str]:
    """Get human-readable labels for signal identifiers (lazy loaded and cached)."""
    global _signal_names
    if _signal_names is None:
        _signal_names = types.MappingProxyType(dict(_load_json("signal-names.json")))
    return _signal_names
