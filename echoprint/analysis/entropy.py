"""Shannon-entropy estimates for fingerprint signals.

Per-signal entropy comes from a static table of illustrative
population estimates (not live telemetry). The helpers below also
cover empirical entropy over observed samples and the conversion
from total bits to a 0–100 uniqueness sub-score.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from echoprint.data import loader

DEFAULT_ENTROPY_BITS = 5.0

# ~33 bits singles out one person among ~8 billion.
FULL_UNIQUENESS_BITS = 33.0

_DEFAULT_CORRELATION = 0.3

_NON_NAME_CHARS = re.compile(r"[^a-z_]")


def estimate_entropy(category_name: str) -> float:
    """Return the estimated bits of entropy for a signal category.

    The name is lowercased and any character other than a letter or
    underscore becomes ``_``. Lookup tries an exact key, then the
    first table key that overlaps the name as a substring in either
    direction, then falls back to :data:`DEFAULT_ENTROPY_BITS`.
    Never raises.
    """
    table = loader.get_entropy_estimates()
    normalized = _NON_NAME_CHARS.sub("_", category_name.lower())

    if normalized in table:
        return table[normalized]

    if normalized.strip("_"):
        for key, bits in table.items():
            if key in normalized or normalized in key:
                return bits

    return DEFAULT_ENTROPY_BITS


def entropy_to_score(bits: float) -> float:
    """Convert total entropy to a 0–100 uniqueness sub-score (unrounded)."""
    return min(max(bits, 0.0) / FULL_UNIQUENESS_BITS, 1.0) * 100


def calculate_shannon_entropy(values: Iterable[str]) -> float:
    """Empirical Shannon entropy, in bits, of a list of observed values."""
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        return 0.0

    entropy = 0.0
    for count in counts.values():
        probability = count / total
        entropy -= probability * math.log2(probability)
    return entropy


def bits_of_entropy(value: str, distribution: Mapping[str, int], total_samples: int) -> float:
    """Surprisal of *value* within an observed count distribution.

    Returns 0 when the value was never observed or there are no samples.
    """
    count = distribution.get(value, 0)
    if count == 0 or total_samples <= 0:
        return 0.0
    return -math.log2(count / total_samples)


def summarize_entropy(signals: Mapping[str, float]) -> dict[str, object]:
    """Summarise per-signal entropy contributions.

    Args:
        signals: Signal name to estimated bits.

    Returns:
        A dict with ``total_entropy``, ``average_entropy``,
        ``max_entropy`` and the ten largest ``contributing_signals``
        as ``(signal, bits)`` pairs, largest first.
    """
    total = sum(signals.values())
    ranked = sorted(signals.items(), key=lambda item: item[1], reverse=True)
    return {
        "total_entropy": total,
        "average_entropy": total / len(signals) if signals else 0.0,
        "max_entropy": ranked[0][1] if ranked else 0.0,
        "contributing_signals": ranked[:10],
    }


def combined_entropy(entropies: Sequence[float], correlations: Sequence[float] = ()) -> float:
    """Joint entropy of several signals, discounted for correlation.

    The first signal counts in full. Each later signal ``i`` is scaled
    by ``1 - c * 0.5`` where ``c`` is ``correlations[i]`` (0.3 when not
    given), approximating ``H(X) + H(Y|X)``.
    """
    if not entropies:
        return 0.0

    combined = entropies[0]
    for i, bits in enumerate(entropies[1:], start=1):
        correlation = correlations[i] if i < len(correlations) else _DEFAULT_CORRELATION
        combined += bits * (1 - correlation * 0.5)
    return combined


def estimate_population_size(bits: float) -> float:
    """Number of distinguishable devices for *bits* of entropy (2^bits)."""
    return math.pow(2, bits)
