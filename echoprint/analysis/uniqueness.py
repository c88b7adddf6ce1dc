"""Uniqueness analysis — how identifying a fingerprint is.

Builds one :class:`SignalObservation` per inspected signal, pairing
the estimated entropy with a rarity score, then combines them into
an overall 0–100 uniqueness score, rankings and per-category
sub-scores.
"""

from __future__ import annotations

from echoprint.analysis import entropy, rarity
from echoprint.models import analysis, signals
from echoprint.utils import logger
from echoprint.utils.risk import clamp_score

log = logger.create_logger("Uniqueness")

# Rendering hashes are close to unique per device, so they use
# fixed rarities instead of the population tables.
_CANVAS_RARITY = {"canvas_text": 90, "canvas_geometry": 88, "canvas_gradient": 85}
_WEBGL_VENDOR_RARITY = 75
_AUDIO_RARITY = 80
_FPJS_ENTROPY = 33.0
_FPJS_RARITY = 100

_RANKING_SIZE = 5

CATEGORY_GROUPS: dict[str, tuple[str, ...]] = {
    "canvas": ("canvas_text", "canvas_geometry", "canvas_gradient"),
    "webgl": ("webgl_vendor", "webgl_renderer", "webgl_extensions"),
    "hardware": ("screen_resolution", "hardware_concurrency", "device_memory", "pixel_ratio", "color_depth"),
    "browser": ("platform", "language", "browser_name", "browser_version"),
    "network": ("timezone", "webrtc_local_ips"),
}


def _observe(signal: str, value: object, bits: float, rarity_score: int) -> analysis.SignalObservation:
    return analysis.SignalObservation(signal=signal, value=value, entropy=bits, rarity=rarity_score)


def _observe_popular(signal: str, value: object, category: str | None = None) -> analysis.SignalObservation:
    """Observation whose rarity comes from the popular-value tables."""
    return _observe(signal, value, entropy.estimate_entropy(signal), rarity.rarity_for(category or signal, value))


def _font_rarity(count: int) -> int:
    if count > 100:
        return 30
    if count > 50:
        return 50
    return 70


def collect_observations(bundle: signals.SignalBundle) -> list[analysis.SignalObservation]:
    """Build the per-signal observations inspected by the uniqueness score.

    Device memory is skipped when unknown and the FingerprintJS visitor
    ID only when the external library produced one.
    """
    hardware = bundle.hardware
    screen = hardware.screen
    browser = bundle.parsed_ua.browser
    local_ip_count = len(bundle.webrtc.local_ips)

    canvas_hashes = {
        "canvas_text": bundle.canvas.text_hash,
        "canvas_geometry": bundle.canvas.geometry_hash,
        "canvas_gradient": bundle.canvas.gradient_hash,
    }
    observations = [
        _observe(name, value, entropy.estimate_entropy(name), _CANVAS_RARITY[name])
        for name, value in canvas_hashes.items()
    ]

    observations += [
        _observe("webgl_vendor", bundle.webgl.vendor, entropy.estimate_entropy("webgl_vendor"), _WEBGL_VENDOR_RARITY),
        _observe_popular("webgl_renderer", bundle.webgl.renderer),
        _observe("webgl_extensions", len(bundle.webgl.extensions), 6.5, 50),
        _observe("audio_hash", bundle.audio.hash, entropy.estimate_entropy("audio_hash"), _AUDIO_RARITY),
        _observe("fonts_count", bundle.fonts.count, entropy.estimate_entropy("fonts_list"), _font_rarity(bundle.fonts.count)),
        _observe_popular("screen_resolution", f"{screen.width}x{screen.height}"),
        _observe_popular("hardware_concurrency", hardware.cpu_cores),
    ]

    if hardware.memory:
        observations.append(_observe_popular("device_memory", hardware.memory))

    observations += [
        _observe_popular("pixel_ratio", screen.pixel_ratio),
        _observe_popular("color_depth", screen.color_depth),
        _observe_popular("platform", bundle.navigator.platform),
        _observe_popular("language", bundle.navigator.language),
        _observe_popular("timezone", bundle.misc.timezone),
        _observe("browser_name", browser.name, 3.5, 20 if browser.name == "Chrome" else 60),
        _observe("browser_version", browser.version, 4.0, 50),
        _observe(
            "max_touch_points",
            hardware.max_touch_points,
            entropy.estimate_entropy("max_touch_points"),
            30 if hardware.max_touch_points > 0 else 50,
        ),
        _observe("webrtc_local_ips", local_ip_count, 4.5, 40 if local_ip_count > 0 else 60),
        _observe("cameras", bundle.media_devices.cameras, 3.0, 20 if bundle.media_devices.cameras == 1 else 50),
    ]

    if bundle.fpjs is not None:
        observations.append(_observe("fpjs_visitor_id", bundle.fpjs.visitor_id, _FPJS_ENTROPY, _FPJS_RARITY))

    return observations


def _rank(observation: analysis.SignalObservation) -> analysis.RankedSignal:
    return analysis.RankedSignal(signal=observation.signal, rarity=observation.rarity, value=observation.value)


def _category_scores(observations: list[analysis.SignalObservation]) -> dict[str, float]:
    """Mean rarity of the observed signals in each category group."""
    by_signal = {o.signal: o.rarity for o in observations}
    scores: dict[str, float] = {}
    for category, members in CATEGORY_GROUPS.items():
        present = [by_signal[name] for name in members if name in by_signal]
        scores[category] = sum(present) / len(present) if present else 0.0
    return scores


def analyze_uniqueness(bundle: signals.SignalBundle) -> analysis.UniquenessAnalysis:
    """Score how identifying the fingerprint in *bundle* is.

    ``overall_score`` averages the entropy sub-score (total bits
    against the 33-bit ceiling) with the mean rarity of all
    observations, then clamps to 0–100.

    Args:
        bundle: Fully populated signal bundle.

    Returns:
        The uniqueness analysis with rankings and category scores.
    """
    observations = collect_observations(bundle)

    total_entropy = sum(o.entropy for o in observations)
    avg_rarity = sum(o.rarity for o in observations) / len(observations)
    overall_score = clamp_score((entropy.entropy_to_score(total_entropy) + avg_rarity) / 2)

    # sorted() is stable, so ties keep observation order in both rankings.
    by_rarity = sorted(observations, key=lambda o: o.rarity, reverse=True)
    rarest = [_rank(o) for o in by_rarity[:_RANKING_SIZE]]
    common = [_rank(o) for o in reversed(by_rarity[-_RANKING_SIZE:])]

    log.debug(
        "Uniqueness computed",
        {
            "signals": len(observations),
            "totalEntropy": round(total_entropy, 2),
            "avgRarity": round(avg_rarity, 2),
            "score": overall_score,
        },
    )

    return analysis.UniquenessAnalysis(
        overall_score=overall_score,
        entropy=total_entropy,
        bits_of_entropy=total_entropy,
        rarest_signals=rarest,
        common_signals=common,
        category_scores=_category_scores(observations),
    )


def interpret_uniqueness_score(score: int) -> analysis.UniquenessInterpretation:
    """Map a uniqueness score to its level, description and trackability tier."""
    if score >= 90:
        return analysis.UniquenessInterpretation(
            level="Extremely unique",
            description=(
                "Your device has a very rare combination of characteristics. "
                "You are easy to single out among millions of users."
            ),
            trackability="very_high",
        )
    if score >= 75:
        return analysis.UniquenessInterpretation(
            level="Very unique",
            description="Your fingerprint contains many rare signals. You are easy to track.",
            trackability="high",
        )
    if score >= 50:
        return analysis.UniquenessInterpretation(
            level="Moderately unique",
            description="Your device has an average level of uniqueness. Some characteristics make you recognisable.",
            trackability="medium",
        )
    if score >= 25:
        return analysis.UniquenessInterpretation(
            level="Slightly unique",
            description="Your characteristics are fairly common. Tracking you is harder, but still possible.",
            trackability="low",
        )
    return analysis.UniquenessInterpretation(
        level="Mass-market device",
        description=(
            "Your device looks like millions of others. That is good for privacy, "
            "but may also indicate anti-fingerprinting tools."
        ),
        trackability="very_low",
    )
