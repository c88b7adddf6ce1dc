"""
Known signal signatures used by the consistency rules and anomaly indicators.

Keyword tables for virtual GPUs, automation globals, browser engines,
OS font sets and realistic hardware values, plus the shared
user-agent / platform cross-check.
"""

from __future__ import annotations

# ============================================================================
# Virtualization
# ============================================================================

# Substrings of the WebGL renderer that indicate a virtual or software GPU.
VIRTUAL_GPU_KEYWORDS: tuple[str, ...] = (
    "virtualbox",
    "vmware",
    "parallels",
    "qemu",
    "virtual",
    "svga",
    "gallium",
    "llvmpipe",
    "swiftshader",
    "microsoft basic render",
)

# Same idea with a display label per hypervisor / rasteriser.
VM_RENDERER_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("virtualbox", "VirtualBox"),
    ("vmware", "VMware"),
    ("parallels", "Parallels"),
    ("qemu", "QEMU"),
    ("svga", "SVGA (VMware)"),
    ("gallium", "Gallium (Mesa VM)"),
    ("llvmpipe", "LLVMpipe (Software)"),
    ("swiftshader", "SwiftShader (Software)"),
    ("microsoft basic render", "Microsoft Basic Render"),
    ("nvlddmkm", "Remote Desktop"),
)

# ============================================================================
# Automation
# ============================================================================

AUTOMATION_GLOBALS: tuple[str, ...] = (
    "__webdriver_script_fn",
    "__driver_evaluate",
    "__selenium_evaluate",
    "__nightmare",
    "_phantom",
    "callPhantom",
)

CHROMEDRIVER_PREFIXES: tuple[str, ...] = ("cdc_", "wdc_")

# WebGL extension names that only spoofing extensions inject.
SPOOFED_EXTENSION_MARKERS: tuple[str, ...] = ("spoof", "fake", "random")

# ============================================================================
# Browsers & engines
# ============================================================================

BLINK_BROWSERS: frozenset[str] = frozenset({"chrome", "edge", "brave", "opera", "vivaldi"})
GECKO_BROWSERS: frozenset[str] = frozenset({"firefox"})
WEBKIT_BROWSERS: frozenset[str] = frozenset({"safari"})

# Major versions considered current; anything 30+ majors behind is outdated.
EXPECTED_BROWSER_VERSIONS: dict[str, int] = {
    "Chrome": 100,
    "Firefox": 100,
    "Edge": 100,
    "Safari": 15,
    "Opera": 80,
}

# ============================================================================
# Fonts & locale
# ============================================================================

WINDOWS_FONTS: tuple[str, ...] = ("arial", "times new roman", "tahoma", "verdana", "segoe ui")
MAC_FONTS: tuple[str, ...] = ("helvetica", "sf pro", "lucida grande", "geneva")

TIMEZONE_LANGUAGES: dict[str, tuple[str, ...]] = {
    "Europe/Moscow": ("ru", "ru-RU"),
    "America/New_York": ("en", "en-US"),
    "Europe/London": ("en", "en-GB"),
    "Asia/Tokyo": ("ja", "ja-JP"),
    "Europe/Paris": ("fr", "fr-FR"),
    "Europe/Berlin": ("de", "de-DE"),
}

# ============================================================================
# Realistic hardware values
# ============================================================================

COMMON_CPU_CORES: frozenset[int] = frozenset({1, 2, 4, 6, 8, 10, 12, 14, 16, 20, 24, 32, 48, 64, 128})

# navigator.deviceMemory is bucketed and capped at 8 GiB.
DEVICE_MEMORY_BUCKETS: frozenset[float] = frozenset({0.25, 0.5, 1, 2, 4, 8})

COMMON_SAMPLE_RATES: frozenset[int] = frozenset({22050, 44100, 48000, 96000})

COMMON_COLOR_DEPTHS: frozenset[int] = frozenset({24, 30, 32})


# ============================================================================
# User agent vs platform
# ============================================================================


def platform_mismatches(user_agent: str, platform: str, *, strict_mac: bool = False) -> list[str]:
    """List the operating systems the UA claims that ``navigator.platform`` contradicts.

    Checks run in the order Windows, macOS, Linux, Android, iOS.
    With ``strict_mac`` the UA must name ``mac os``/``macintosh``
    (and not iPhone/iPad) to count as macOS; otherwise any non-mobile
    UA containing ``mac`` does.
    """
    ua = user_agent.lower()
    plat = platform.lower()

    is_ios_ua = "iphone" in ua or "ipad" in ua
    if strict_mac:
        is_mac_ua = ("mac os" in ua or "macintosh" in ua) and not is_ios_ua
    else:
        is_mac_ua = "mac" in ua and "mobile" not in ua

    claims = [
        ("Windows", "windows" in ua, "win" in plat),
        ("macOS", is_mac_ua, "mac" in plat),
        ("Linux", "linux" in ua and "android" not in ua, "linux" in plat),
        ("Android", "android" in ua, "linux" in plat),
        ("iOS", is_ios_ua, "iphone" in plat or "ipad" in plat or "mac" in plat),
    ]
    return [os_name for os_name, claimed, matches in claims if claimed and not matches]
