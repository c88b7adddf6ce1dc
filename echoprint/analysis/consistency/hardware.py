"""Realistic-range checks for CPU, memory, screen, battery and devices."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.consistency import base
from echoprint.models import signals
from echoprint.utils.risk import round_half_up


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def check_cpu_cores(bundle: signals.SignalBundle) -> base.RuleOutcome:
    cores = bundle.hardware.cpu_cores
    if cores == 0:
        return base.failed("CPU core count is 0 (unrealistic)")
    if cores not in signal_patterns.COMMON_CPU_CORES:
        return base.passed(f"Unusual CPU core count: {cores}")
    return base.passed(f"CPU core count ({cores}) is realistic")


def check_memory(bundle: signals.SignalBundle) -> base.RuleOutcome:
    memory = bundle.hardware.memory
    if memory is None:
        return base.passed("Memory information unavailable")
    if memory not in signal_patterns.DEVICE_MEMORY_BUCKETS:
        return base.failed(f"Unusual memory value: {_format_number(memory)} GB")
    return base.passed(f"Memory ({_format_number(memory)} GB) is realistic")


def check_screen_resolution(bundle: signals.SignalBundle) -> base.RuleOutcome:
    width, height = bundle.hardware.screen.width, bundle.hardware.screen.height
    if width == 0 or height == 0:
        return base.failed("Zero screen resolution")
    if width < 320 or height < 240:
        return base.failed(f"Very small resolution: {width}x{height}")
    if width > 7680 or height > 4320:
        return base.passed(f"Very high resolution: {width}x{height}")
    return base.passed(f"Resolution {width}x{height} is realistic")


def check_pixel_ratio(bundle: signals.SignalBundle) -> base.RuleOutcome:
    ratio = bundle.hardware.screen.pixel_ratio
    if ratio < 1 or ratio > 4:
        return base.failed(f"Unusual pixel ratio: {_format_number(ratio)}")
    return base.passed(f"Pixel ratio {_format_number(ratio)} is realistic")


def check_color_depth(bundle: signals.SignalBundle) -> base.RuleOutcome:
    depth = bundle.hardware.screen.color_depth
    if depth not in signal_patterns.COMMON_COLOR_DEPTHS:
        return base.passed(f"Unusual colour depth: {depth}")
    return base.passed(f"Colour depth: {depth}-bit")


def check_touch_points(bundle: signals.SignalBundle) -> base.RuleOutcome:
    touch_points = bundle.hardware.max_touch_points
    screen = bundle.hardware.screen
    if touch_points > 0 and min(screen.width, screen.height) >= 1024:
        return base.passed("Touch screen on a large display (tablet or touch laptop)")
    return base.passed(f"Touch points: {touch_points}")


def check_battery(bundle: signals.SignalBundle) -> base.RuleOutcome:
    battery = bundle.battery
    if not battery.supported:
        return base.passed("Battery API not supported")
    if battery.level < 0 or battery.level > 1:
        return base.failed(f"Invalid battery level: {_format_number(battery.level)}")
    return base.passed(f"Battery: {round_half_up(battery.level * 100)}%")


def check_media_devices(bundle: signals.SignalBundle) -> base.RuleOutcome:
    devices = bundle.media_devices
    if devices.cameras > 5 or devices.microphones > 10 or devices.speakers > 10:
        return base.passed("Unusually many media devices")
    return base.passed(f"Media: {devices.cameras} cameras, {devices.microphones} microphones")


RULES: tuple[base.ConsistencyRule, ...] = (
    base.ConsistencyRule(
        id="cpu_cores_realistic",
        name="Realistic CPU core count",
        description="Checks that hardwareConcurrency is plausible",
        category="hardware",
        severity="low",
        check=check_cpu_cores,
    ),
    base.ConsistencyRule(
        id="memory_realistic",
        name="Realistic memory size",
        description="Checks that deviceMemory is one of the reported buckets",
        category="hardware",
        severity="low",
        check=check_memory,
    ),
    base.ConsistencyRule(
        id="screen_resolution_realistic",
        name="Realistic resolution",
        description="Checks that the screen resolution is plausible",
        category="screen",
        severity="low",
        check=check_screen_resolution,
    ),
    base.ConsistencyRule(
        id="pixel_ratio_realistic",
        name="Realistic pixel ratio",
        description="Checks that devicePixelRatio is plausible",
        category="screen",
        severity="low",
        check=check_pixel_ratio,
    ),
    base.ConsistencyRule(
        id="color_depth_realistic",
        name="Colour depth",
        description="Checks that the colour depth is plausible",
        category="screen",
        severity="low",
        check=check_color_depth,
    ),
    base.ConsistencyRule(
        id="touch_points_screen",
        name="Touch-screen match",
        description="Checks that touch support fits the device type",
        category="hardware",
        severity="low",
        check=check_touch_points,
        informational=True,
    ),
    base.ConsistencyRule(
        id="battery_level",
        name="Battery level",
        description="Checks that the battery level is within range",
        category="hardware",
        severity="low",
        check=check_battery,
    ),
    base.ConsistencyRule(
        id="media_devices_consistency",
        name="Media devices consistency",
        description="Checks that the number of media devices is plausible",
        category="hardware",
        severity="low",
        check=check_media_devices,
        informational=True,
    ),
)
