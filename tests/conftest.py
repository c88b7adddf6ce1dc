"""Shared fixtures for the test suite."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import pytest

from echoprint.models import signals

BundleFactory = Callable[..., signals.SignalBundle]

_CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

_WEBGL_EXTENSIONS = [
    "ANGLE_instanced_arrays",
    "EXT_blend_minmax",
    "EXT_color_buffer_half_float",
    "EXT_float_blend",
    "EXT_frag_depth",
    "EXT_shader_texture_lod",
    "EXT_texture_compression_bptc",
    "EXT_texture_compression_rgtc",
    "EXT_texture_filter_anisotropic",
    "EXT_sRGB",
    "KHR_parallel_shader_compile",
    "OES_element_index_uint",
    "OES_fbo_render_mipmap",
    "OES_standard_derivatives",
    "OES_texture_float",
    "OES_texture_float_linear",
    "OES_texture_half_float",
    "OES_texture_half_float_linear",
    "OES_vertex_array_object",
    "WEBGL_color_buffer_float",
    "WEBGL_compressed_texture_s3tc",
    "WEBGL_debug_renderer_info",
    "WEBGL_debug_shaders",
    "WEBGL_depth_texture",
    "WEBGL_draw_buffers",
    "WEBGL_lose_context",
    "WEBGL_multi_draw",
]


# ── Signal Bundle Factories ─────────────────────────────────────


def _baseline_bundle() -> dict[str, Any]:
    """Wire-format bundle for an ordinary Chrome-on-Windows desktop."""
    return {
        "canvas": {
            "textHash": "a1b2c3d4e5f6",
            "geometryHash": "0f9e8d7c6b5a",
            "gradientHash": "5a6b7c8d9e0f",
            "supported": True,
        },
        "webgl": {
            "vendor": "Google Inc. (NVIDIA)",
            "renderer": "ANGLE (NVIDIA, NVIDIA GeForce RTX 3060 Direct3D11 vs_5_0 ps_5_0, D3D11)",
            "extensions": list(_WEBGL_EXTENSIONS),
            "maxTextureSize": 16384,
            "maxViewportDims": [32767, 32767],
            "supported": True,
        },
        "audio": {"hash": "124.04347527516074", "sampleRate": 48000, "maxChannelCount": 2, "supported": True},
        "fonts": {"available": ["Arial", "Calibri", "Segoe UI", "Times New Roman"], "count": 120},
        "webrtc": {"localIPs": [], "publicIP": None, "enabled": True},
        "mediaDevices": {"cameras": 1, "microphones": 1, "speakers": 1},
        "hardware": {
            "cpuCores": 8,
            "memory": 8,
            "screen": {
                "width": 1920,
                "height": 1080,
                "availWidth": 1920,
                "availHeight": 1040,
                "colorDepth": 24,
                "pixelRatio": 1,
                "orientation": "landscape-primary",
            },
            "maxTouchPoints": 0,
            "gpu": {"vendor": "NVIDIA Corporation", "renderer": "NVIDIA GeForce RTX 3060"},
        },
        "navigator": {
            "userAgent": _CHROME_WINDOWS_UA,
            "platform": "Win32",
            "vendor": "Google Inc.",
            "language": "en-US",
            "languages": ["en-US", "en"],
            "cookieEnabled": True,
            "doNotTrack": None,
            "webdriver": False,
            "userAgentData": {
                "mobile": False,
                "platform": "Windows",
                "brands": [{"brand": "Chromium", "version": "124"}, {"brand": "Google Chrome", "version": "124"}],
            },
        },
        "parsedUA": {
            "browser": {"name": "Chrome", "version": "124.0.0.0", "major": 124},
            "os": {"name": "Windows", "version": "10"},
            "device": {"type": "desktop"},
            "engine": {"name": "Blink", "version": "124.0.0.0"},
        },
        "battery": {"level": 0.8, "charging": True, "supported": True},
        "storage": {"localStorage": True, "sessionStorage": True, "indexedDB": True, "cookiesEnabled": True},
        "misc": {"timezone": "America/New_York", "timezoneOffset": 300, "plugins": ["PDF Viewer"]},
        "automation": {"hasChromeObject": True, "injectedGlobals": []},
        "timestamp": "2026-01-01T00:00:00Z",
        "scanDuration": 1234.5,
        "totalSignals": 120,
    }


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge *overrides* into *base*; nested dicts merge, anything else replaces."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


@pytest.fixture()
def bundle_data() -> dict[str, Any]:
    """Wire-format (camelCase) data for the baseline bundle."""
    return _baseline_bundle()


@pytest.fixture()
def make_bundle() -> BundleFactory:
    """Factory building a bundle from the baseline plus nested overrides.

    Example: ``make_bundle({"navigator": {"webdriver": True}})``.
    """

    def _make(overrides: dict[str, Any] | None = None) -> signals.SignalBundle:
        data = _deep_merge(copy.deepcopy(_baseline_bundle()), overrides or {})
        return signals.SignalBundle.model_validate(data)

    return _make


@pytest.fixture()
def bundle(make_bundle: BundleFactory) -> signals.SignalBundle:
    """The baseline Chrome-on-Windows bundle."""
    return make_bundle()
