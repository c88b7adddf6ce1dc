"""Canvas, WebGL and audio checks, including virtual-GPU detection."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.consistency import base
from echoprint.models import signals

_UNCOMPUTED_HASHES = frozenset({"error", "not_supported"})


def check_webgl_extensions(bundle: signals.SignalBundle) -> base.RuleOutcome:
    count = len(bundle.webgl.extensions)
    if count == 0:
        return base.failed("No WebGL extensions (suspicious)")
    if count < 10:
        return base.passed(f"Few extensions ({count}), possibly a mobile device")
    if count > 150:
        return base.passed(f"Many extensions ({count})")
    return base.passed(f"{count} WebGL extensions")


def check_max_texture_size(bundle: signals.SignalBundle) -> base.RuleOutcome:
    size = bundle.webgl.max_texture_size
    if size < 1024:
        return base.failed(f"Very small max texture size: {size}")
    if size > 32768:
        return base.passed(f"Very large max texture size: {size}")
    return base.passed(f"Max texture size: {size}")


def check_canvas_supported(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if not bundle.canvas.supported:
        return base.failed("Canvas is not supported")
    return base.passed("Canvas is supported")


def check_canvas_hash(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if bundle.canvas.text_hash in _UNCOMPUTED_HASHES:
        return base.failed("Canvas hash cannot be computed")
    return base.passed("Canvas hash computed correctly")


def check_audio_supported(bundle: signals.SignalBundle) -> base.RuleOutcome:
    if not bundle.audio.supported:
        return base.passed("AudioContext is not supported")
    return base.passed("AudioContext is supported")


def check_sample_rate(bundle: signals.SignalBundle) -> base.RuleOutcome:
    rate = bundle.audio.sample_rate
    if rate == 0:
        return base.passed("Sample rate unknown")
    if rate not in signal_patterns.COMMON_SAMPLE_RATES:
        return base.passed(f"Unusual sample rate: {rate} Hz")
    return base.passed(f"Sample rate: {rate} Hz")


def check_gpu_virtualization(bundle: signals.SignalBundle) -> base.RuleOutcome:
    renderer = bundle.webgl.renderer.lower()
    keyword = next((kw for kw in signal_patterns.VIRTUAL_GPU_KEYWORDS if kw in renderer), None)
    if keyword:
        return base.failed(f"GPU indicates virtualization: {keyword}")
    return base.passed("No signs of GPU virtualization")


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="webgl_extensions_count",
        name="WebGL extension count",
        description="Checks that the number of WebGL extensions is plausible",
        category="webgl",
        severity="low",
        check=check_webgl_extensions,
    ),
    base.ConsistencyRule(
        id="webgl_max_texture_size",
        name="Max texture size",
        description="Checks that MAX_TEXTURE_SIZE is plausible",
        category="webgl",
        severity="low",
        check=check_max_texture_size,
    ),
    base.ConsistencyRule(
        id="canvas_supported",
        name="Canvas support",
        description="Checks that the Canvas API is available",
        category="canvas",
        severity="medium",
        check=check_canvas_supported,
    ),
    base.ConsistencyRule(
        id="canvas_hash_valid",
        name="Canvas hash validity",
        description="Checks that the canvas hash was computed",
        category="canvas",
        severity="medium",
        check=check_canvas_hash,
    ),
    base.ConsistencyRule(
        id="audio_supported",
        name="AudioContext support",
        description="Reports whether AudioContext is available",
        category="audio",
        severity="low",
        check=check_audio_supported,
        informational=True,
    ),
    base.ConsistencyRule(
        id="audio_sample_rate",
        name="Audio sample rate",
        description="Reports whether the audio sample rate is typical",
        category="audio",
        severity="low",
        check=check_sample_rate,
        informational=True,
    ),
    base.ConsistencyRule(
        id="gpu_virtualization",
        name="GPU virtualization",
        description="Checks the GPU renderer for virtual-machine signatures",
        category="virtualization",
        severity="high",
        check=check_gpu_virtualization,
    ),
)
