"""Pydantic models for the collected signal bundle.

The collector layer produces one :class:`SignalBundle` per scan.
The engine treats it as read-only input: every model here is
frozen, and fields mirror the camelCase keys emitted by the
browser-side collectors.
"""

from __future__ import annotations

from typing import Any, Literal

import pydantic

from echoprint.utils.serialization import snake_to_camel


class SignalRecord(pydantic.BaseModel):
    """Base for all bundle sub-records: frozen, camelCase on the wire."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Rendering signals ───────────────────────────────────────────


class CanvasFingerprint(SignalRecord):
    """Hashes of the canvas rendering probes."""

    text_hash: str
    geometry_hash: str
    gradient_hash: str
    emoji_hash: str = ""
    raw_data_url: str = pydantic.Field(default="", alias="rawDataURL")
    supported: bool


class ShaderPrecision(SignalRecord):
    """Precision format reported for a shader type."""

    range_min: int
    range_max: int
    precision: int


class WebGLFingerprint(SignalRecord):
    """GPU identity and capability limits exposed through WebGL."""

    vendor: str
    renderer: str
    extensions: list[str] = pydantic.Field(default_factory=list)
    max_texture_size: int
    max_viewport_dims: tuple[int, int] = (0, 0)
    max_anisotropy: float | None = None
    vertex_shader_precision: ShaderPrecision | None = None
    fragment_shader_precision: ShaderPrecision | None = None
    parameters: dict[str, int | float | str] = pydantic.Field(default_factory=dict)
    rendered_hash: str = ""
    supported: bool


class AudioFingerprint(SignalRecord):
    """Offline AudioContext rendering hash and device properties."""

    hash: str
    sample_rate: int
    max_channel_count: int = 0
    channel_count: int = 0
    supported: bool


class FontsInfo(SignalRecord):
    """Result of font enumeration."""

    available: list[str] = pydantic.Field(default_factory=list)
    count: int
    default_fonts: list[str] = pydantic.Field(default_factory=list)
    detection_time: float = 0.0


# ── Network & devices ───────────────────────────────────────────


class WebRTCLeak(SignalRecord):
    """Addresses gathered from WebRTC ICE candidates."""

    local_ips: list[str] = pydantic.Field(default_factory=list, alias="localIPs")
    public_ip: str | None = pydantic.Field(default=None, alias="publicIP")
    enabled: bool
    stun_server: str = ""


class MediaDevicesInfo(SignalRecord):
    """Counts of enumerated media devices."""

    cameras: int
    microphones: int
    speakers: int
    device_labels: list[str] = pydantic.Field(default_factory=list)
    has_permission: bool = False


class ScreenInfo(SignalRecord):
    """Screen geometry as reported by ``window.screen``."""

    width: int
    height: int
    avail_width: int
    avail_height: int
    color_depth: int
    pixel_ratio: float
    orientation: str | None = None


class GpuInfo(SignalRecord):
    """Unmasked GPU identity."""

    vendor: str
    renderer: str


class HardwareInfo(SignalRecord):
    """CPU, memory, screen, and touch capabilities."""

    cpu_cores: int
    memory: float | None = None
    screen: ScreenInfo
    max_touch_points: int
    gpu: GpuInfo


# ── Navigator & user agent ──────────────────────────────────────


class BrandVersion(SignalRecord):
    """One brand entry from User-Agent Client Hints."""

    brand: str
    version: str


class HighEntropyHints(SignalRecord):
    """High-entropy Client Hints values, when granted."""

    architecture: str | None = None
    bitness: str | None = None
    full_version_list: list[BrandVersion] | None = None
    model: str | None = None
    platform_version: str | None = None


class UserAgentData(SignalRecord):
    """``navigator.userAgentData`` (Client Hints)."""

    mobile: bool
    platform: str
    brands: list[BrandVersion] = pydantic.Field(default_factory=list)
    high_entropy: HighEntropyHints | None = None


class NavigatorInfo(SignalRecord):
    """Raw ``navigator`` properties."""

    user_agent: str
    platform: str
    vendor: str = ""
    language: str
    languages: list[str] = pydantic.Field(default_factory=list)
    cookie_enabled: bool
    do_not_track: str | None = None
    webdriver: bool
    user_agent_data: UserAgentData | None = None


class NamedVersion(SignalRecord):
    """A name/version pair from the parsed user agent."""

    name: str
    version: str


class ParsedBrowser(NamedVersion):
    """Browser name, version string and major version."""

    major: int


class ParsedDevice(SignalRecord):
    """Device class derived from the user agent."""

    type: Literal["desktop", "mobile", "tablet", "unknown"]
    model: str = ""


class ParsedUserAgent(SignalRecord):
    """User agent broken into browser, OS, device and engine."""

    browser: ParsedBrowser
    os: NamedVersion
    device: ParsedDevice
    engine: NamedVersion


# ── Device APIs ─────────────────────────────────────────────────


class SensorsInfo(SignalRecord):
    """Availability of motion and ambient sensors."""

    accelerometer: bool = False
    gyroscope: bool = False
    device_orientation: bool = False
    device_motion: bool = False
    ambient_light: bool = False


class BatteryInfo(SignalRecord):
    """Battery Status API values."""

    level: float
    charging: bool
    charging_time: float | None = None
    discharging_time: float | None = None
    supported: bool


class MediaQueriesInfo(SignalRecord):
    """CSS media-feature preferences."""

    prefers_color_scheme: Literal["light", "dark"] = "light"
    prefers_reduced_motion: bool = False
    prefers_contrast: Literal["no-preference", "high", "more"] = "no-preference"
    color_gamut: Literal["srgb", "p3", "rec2020"] = "srgb"
    forced_colors: bool = False
    hover: Literal["hover", "none"] = "hover"
    pointer: Literal["fine", "coarse", "none"] = "fine"


class StorageInfo(SignalRecord):
    """Availability flags for client-side storage APIs."""

    local_storage: bool
    session_storage: bool
    indexed_db: bool = pydantic.Field(alias="indexedDB")
    service_worker: bool = False
    cookies_enabled: bool
    storage_quota: float | None = None


class HeapMemory(SignalRecord):
    """``performance.memory`` (Chromium only)."""

    used_js_heap_size: int = pydantic.Field(alias="usedJSHeapSize")
    total_js_heap_size: int = pydantic.Field(alias="totalJSHeapSize")
    js_heap_size_limit: int = pydantic.Field(alias="jsHeapSizeLimit")


class PerformanceInfo(SignalRecord):
    """Navigation timing samples."""

    dom_content_loaded: float | None = None
    load_complete: float | None = None
    dom_interactive: float | None = None
    memory: HeapMemory | None = None
    timing_anomaly: bool = False


class SpeechVoice(SignalRecord):
    lang: str
    name: str


class ConnectionInfo(SignalRecord):
    """Network Information API values."""

    effective_type: str
    downlink: float
    rtt: float
    save_data: bool


class MiscInfo(SignalRecord):
    """Timezone, plugins, connection and other loose signals."""

    timezone: str
    timezone_offset: int
    speech_voices: list[SpeechVoice] = pydantic.Field(default_factory=list)
    connection: ConnectionInfo | None = None
    plugins: list[str] = pydantic.Field(default_factory=list)
    pdf_viewer_enabled: bool = False
    java_enabled: bool | None = None


class AutomationProbe(SignalRecord):
    """Window-level automation traces observed by the collector.

    ``has_chrome_object`` reports whether ``window.chrome`` exists and
    ``injected_globals`` lists window property names the collector found
    (only names; values are never captured).
    """

    has_chrome_object: bool = True
    injected_globals: list[str] = pydantic.Field(default_factory=list)


class FingerprintComponent(SignalRecord):
    value: Any = None
    duration: float = 0.0


class FingerprintJSResult(SignalRecord):
    """Output of the external FingerprintJS library."""

    visitor_id: str
    components: dict[str, FingerprintComponent] = pydantic.Field(default_factory=dict)


# ── Full bundle ─────────────────────────────────────────────────


class SignalBundle(SignalRecord):
    """Every signal gathered during one scan."""

    canvas: CanvasFingerprint
    webgl: WebGLFingerprint
    audio: AudioFingerprint
    fonts: FontsInfo
    webrtc: WebRTCLeak
    media_devices: MediaDevicesInfo
    hardware: HardwareInfo
    navigator: NavigatorInfo
    parsed_ua: ParsedUserAgent = pydantic.Field(alias="parsedUA")
    sensors: SensorsInfo = pydantic.Field(default_factory=SensorsInfo)
    battery: BatteryInfo
    media_queries: MediaQueriesInfo = pydantic.Field(default_factory=MediaQueriesInfo)
    storage: StorageInfo
    performance: PerformanceInfo = pydantic.Field(default_factory=PerformanceInfo)
    misc: MiscInfo
    automation: AutomationProbe = pydantic.Field(default_factory=AutomationProbe)
    fpjs: FingerprintJSResult | None = None

    timestamp: str = ""
    scan_duration: float = 0.0
    total_signals: int = 0
