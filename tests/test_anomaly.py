"""Tests for echoprint.analysis.anomaly — indicators, scoring and probabilities."""

from __future__ import annotations

import pytest

from echoprint.analysis import anomaly
from echoprint.analysis.anomaly import base
from echoprint.models import analysis

_IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_4 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Mobile/15E148 Safari/604.1"
)
_FIREFOX_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:125.0) Gecko/20100101 Firefox/125.0"
_FIREFOX = {
    "navigator": {"userAgent": _FIREFOX_UA, "userAgentData": None},
    "parsedUA": {
        "browser": {"name": "Firefox", "version": "125.0", "major": 125},
        "engine": {"name": "Gecko", "version": "125.0"},
    },
    "automation": {"hasChromeObject": False},
}


def _detected(result: analysis.AnomalyAnalysis) -> dict[str, analysis.AnomalyIndicatorResult]:
    return {a.id: a for a in result.detected_anomalies}


class TestRegistry:
    def test_indicator_count(self) -> None:
        assert len(anomaly.ANOMALY_INDICATORS) == 18

    def test_ids_unique(self) -> None:
        ids = [i.id for i in anomaly.ANOMALY_INDICATORS]
        assert len(ids) == len(set(ids))

    def test_every_type_covered(self) -> None:
        types = {i.type for i in anomaly.ANOMALY_INDICATORS}
        assert types == {"virtualization", "emulation", "automation", "modification", "inconsistency"}


class TestAnalyzeAnomalies:
    def test_clean_bundle(self, bundle) -> None:
        result = anomaly.analyze_anomalies(bundle)
        assert result.overall_score == 100
        assert result.detected_anomalies == []
        assert result.virtualization_probability == 0.0
        assert result.automation_probability == 0.0
        assert result.modification_probability == 0.0

    def test_virtualbox_renderer(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"webgl": {"renderer": "ANGLE (VirtualBox)"}}))
        found = _detected(result)
        assert found["vm_gpu"].type == "virtualization"
        assert found["vm_gpu"].evidence == ['GPU renderer contains "virtualbox" (VirtualBox)']
        assert result.virtualization_probability > 0
        assert result.overall_score == 85

    def test_minimal_vm_hardware(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"hardware": {"cpuCores": 1, "memory": 2}}))
        found = _detected(result)
        assert set(found) == {"vm_cpu_cores", "vm_memory"}
        assert found["vm_memory"].evidence == ["Only 2 GB RAM - typical of a minimal VM"]
        assert result.virtualization_probability == pytest.approx(0.6)

    def test_unknown_memory_is_not_an_anomaly(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"hardware": {"memory": None}}))
        assert "vm_memory" not in _detected(result)

    def test_webdriver_and_injected_globals(self, make_bundle) -> None:
        bundle = make_bundle(
            {
                "navigator": {"webdriver": True},
                "automation": {"injectedGlobals": ["__selenium_evaluate", "cdc_adoQpoasnfa76pfcZLmcfl_Array"]},
            }
        )
        found = _detected(anomaly.analyze_anomalies(bundle))
        assert found["automation_webdriver"].evidence == [
            "navigator.webdriver = true",
            "__selenium_evaluate exists",
        ]
        assert found["automation_chrome_driver"].evidence == [
            "ChromeDriver variable: cdc_adoQpoasnfa76pfcZLmcfl_Array"
        ]

    def test_headless_signatures(self, make_bundle) -> None:
        ua = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) HeadlessChrome/124.0 Safari/537.36"
        bundle = make_bundle(
            {
                "navigator": {"userAgent": ua, "languages": []},
                "automation": {"hasChromeObject": False},
            }
        )
        evidence = _detected(anomaly.analyze_anomalies(bundle))["automation_headless"].evidence
        assert 'User-Agent contains "headless"' in evidence
        assert "Chrome UA but no window.chrome object" in evidence
        assert "navigator.languages is empty" in evidence

    def test_probability_capped(self, make_bundle) -> None:
        bundle = make_bundle(
            {
                "navigator": {"webdriver": True, "languages": []},
                "automation": {"injectedGlobals": ["cdc_x"]},
            }
        )
        result = anomaly.analyze_anomalies(bundle)
        assert result.automation_probability == base.PROBABILITY_CAP

    def test_mobile_emulation(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"parsedUA": {"device": {"type": "mobile"}}}))
        assert "emulation_mobile" in _detected(result)

    def test_touch_on_desktop(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"hardware": {"maxTouchPoints": 10}}))
        assert "emulation_touch" in _detected(result)

    def test_orientation_mismatch(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(
            make_bundle({"hardware": {"screen": {"orientation": "portrait-primary"}}})
        )
        assert "emulation_orientation" in _detected(result)

    def test_modified_canvas(self, make_bundle) -> None:
        bundle = make_bundle({"canvas": {"textHash": "abc", "geometryHash": "abc"}})
        evidence = _detected(anomaly.analyze_anomalies(bundle))["modified_canvas"].evidence
        assert len(evidence) == 2

    def test_modified_webgl(self, make_bundle) -> None:
        bundle = make_bundle({"webgl": {"vendor": "unknown", "extensions": ["WEBGL_spoof_info"]}})
        evidence = _detected(anomaly.analyze_anomalies(bundle))["modified_webgl"].evidence
        assert evidence == ["WebGL vendor is unknown", "Suspicious extensions: WEBGL_spoof_info"]

    def test_modified_audio(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"audio": {"hash": "error"}}))
        assert "modified_audio" in _detected(result)

    def test_blocked_fonts(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"fonts": {"count": 0}}))
        assert "modified_fonts" in _detected(result)

    def test_firefox_resist_fingerprinting(self, make_bundle) -> None:
        bundle = make_bundle({**_FIREFOX, "audio": {"sampleRate": 44100}})
        evidence = _detected(anomaly.analyze_anomalies(bundle))["privacy_tools"].evidence
        assert "Firefox Resist Fingerprinting may be in use" in evidence

    def test_tor_browser(self, make_bundle) -> None:
        bundle = make_bundle({**_FIREFOX, "misc": {"timezone": "UTC", "timezoneOffset": 0}})
        evidence = _detected(anomaly.analyze_anomalies(bundle))["privacy_tools"].evidence
        assert "Tor Browser may be in use" in evidence

    def test_brave(self, make_bundle) -> None:
        bundle = make_bundle({"parsedUA": {"browser": {"name": "Brave"}}})
        assert "privacy_tools" in _detected(anomaly.analyze_anomalies(bundle))

    @pytest.mark.parametrize(("offset", "detected"), [(900, True), (-721, True), (720, False), (-720, False)])
    def test_timezone_offset(self, make_bundle, offset: int, detected: bool) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"misc": {"timezoneOffset": offset}}))
        assert ("inconsistency_timezone" in _detected(result)) is detected

    @pytest.mark.parametrize(
        "screen",
        [
            {"availWidth": 2000},
            {"availHeight": 400},
        ],
    )
    def test_screen_mismatch(self, make_bundle, screen: dict) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"hardware": {"screen": screen}}))
        assert "inconsistency_screen" in _detected(result)

    def test_language_mismatch(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"navigator": {"language": "de-DE"}}))
        assert "inconsistency_language" in _detected(result)

    def test_ua_platform_mismatch(self, make_bundle) -> None:
        result = anomaly.analyze_anomalies(make_bundle({"navigator": {"platform": "MacIntel"}}))
        indicator = _detected(result)["inconsistency_ua_platform"]
        assert indicator.evidence == ["UA: Windows, Platform: MacIntel"]
        assert indicator.severity == "high"

    def test_iphone_is_not_reported_as_macos(self, make_bundle) -> None:
        bundle = make_bundle({"navigator": {"userAgent": _IPHONE_UA, "platform": "iPhone"}})
        assert "inconsistency_ua_platform" not in _detected(anomaly.analyze_anomalies(bundle))

    def test_score_floor(self, make_bundle) -> None:
        bundle = make_bundle(
            {
                "webgl": {"renderer": "VMware SVGA 3D", "vendor": "unknown", "extensions": ["fake_ext"]},
                "hardware": {"cpuCores": 1, "memory": 1, "maxTouchPoints": 5},
                "navigator": {"webdriver": True, "languages": [], "platform": "MacIntel"},
                "automation": {"hasChromeObject": False, "injectedGlobals": ["cdc_1"]},
                "canvas": {"textHash": "x", "geometryHash": "x"},
                "audio": {"hash": "error"},
                "misc": {"timezoneOffset": 9999},
            }
        )
        result = anomaly.analyze_anomalies(bundle)
        assert result.overall_score == 0

    def test_custom_indicator_list(self, bundle) -> None:
        always = base.AnomalyIndicator(
            id="always",
            name="Always",
            description="Test indicator",
            type="modification",
            severity="medium",
            detect=lambda _bundle: base.Detection.from_evidence(["yes"]),
        )
        result = anomaly.analyze_anomalies(bundle, indicators=(always,))
        assert result.overall_score == 92
        assert result.modification_probability == pytest.approx(0.25)


class TestTypeProbability:
    @pytest.mark.parametrize(
        ("anomaly_type", "count", "expected"),
        [
            ("virtualization", 0, 0.0),
            ("virtualization", 1, 0.30),
            ("automation", 2, 0.70),
            ("modification", 3, 0.75),
            ("automation", 3, 0.95),
            ("emulation", 3, 0.0),
        ],
    )
    def test_probability(self, anomaly_type: str, count: int, expected: float) -> None:
        assert base.type_probability(anomaly_type, count) == pytest.approx(expected)

    def test_monotonic_and_capped(self) -> None:
        values = [base.type_probability("automation", n) for n in range(10)]
        assert values == sorted(values)
        assert max(values) == base.PROBABILITY_CAP


class TestDetection:
    def test_from_empty_evidence(self) -> None:
        assert base.Detection.from_evidence([]) == base.Detection(detected=False)

    def test_from_evidence(self) -> None:
        detection = base.Detection.from_evidence(["a"])
        assert detection.detected
        assert detection.evidence == ("a",)


class TestInterpretAnomalyScore:
    @pytest.mark.parametrize(
        ("score", "risk"),
        [
            (100, "none"),
            (90, "none"),
            (89, "low"),
            (70, "low"),
            (69, "medium"),
            (50, "medium"),
            (49, "high"),
            (0, "high"),
        ],
    )
    def test_boundaries(self, score: int, risk: str) -> None:
        assert anomaly.interpret_anomaly_score(score).risk_level == risk
