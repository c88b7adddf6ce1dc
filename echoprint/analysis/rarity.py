"""Population-frequency rarity model.

Frequencies come from static distributions of well-known values.
Anything not listed is treated as rare rather than as an error.
"""

from __future__ import annotations

from echoprint.data import loader
from echoprint.utils.risk import round_half_up

UNSEEN_FREQUENCY = 0.01


def normalize_value(value: object) -> str:
    """Render a signal value the way the distribution tables spell it.

    Whole floats drop their fractional part (``1.0`` -> ``"1"``) and
    booleans are lowercase, so ``pixel_ratio=2.0`` matches ``"2"``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def frequency_of(category: str, value: object) -> float:
    """Estimated share of the population with *value* for *category*.

    Unknown categories and unlisted values return
    :data:`UNSEEN_FREQUENCY`.
    """
    distribution = loader.get_popular_values().get(category)
    if not distribution:
        return UNSEEN_FREQUENCY

    wanted = normalize_value(value)
    for known, frequency in distribution:
        if known == wanted:
            return frequency
    return UNSEEN_FREQUENCY


def rarity_of(frequency: float) -> int:
    """Map a frequency in [0, 1] to a 0–100 rarity (100 = rarest)."""
    clamped = min(max(frequency, 0.0), 1.0)
    return round_half_up((1 - clamped) * 100)


def rarity_for(category: str, value: object) -> int:
    """Shortcut for ``rarity_of(frequency_of(category, value))``."""
    return rarity_of(frequency_of(category, value))
