"""Tests for echoprint.analysis.report — aggregation, narrative and export."""

from __future__ import annotations

import asyncio

import pytest

from echoprint import config
from echoprint.analysis import report
from echoprint.analysis.report import aggregator, narrative


class TestPrivacyRiskLevel:
    @pytest.mark.parametrize(
        ("u", "c", "a", "expected"),
        [
            (80, 80, 0, "very_high"),
            (95, 100, 100, "very_high"),
            (79, 80, 100, "high"),
            (60, 70, 0, "high"),
            (59, 75, 100, "medium"),
            (60, 69, 100, "medium"),
            (39, 100, 100, "low"),
            (10, 10, 10, "low"),
            (50, 50, 59, "low"),
            (50, 50, 60, "medium"),
        ],
    )
    def test_ladder(self, u: int, c: int, a: int, expected: str) -> None:
        assert report.privacy_risk_level(u, c, a) == expected

    def test_first_match_wins_over_anomalies(self) -> None:
        # Heavy anomalies do not lower the tier once the upper rungs match.
        assert report.privacy_risk_level(85, 90, 0) == "very_high"


class TestOverallScore:
    @pytest.mark.parametrize(
        ("u", "c", "a", "expected"),
        [
            (100, 100, 100, 100),
            (0, 0, 0, 0),
            (80, 100, 100, 92),
            (50, 50, 50, 50),
            (1, 1, 1, 1),
        ],
    )
    def test_weighted_blend(self, u: int, c: int, a: int, expected: int) -> None:
        assert aggregator.overall_score(u, c, a) == expected


class TestAnalyzeFingerprint:
    def test_complete_result(self, bundle) -> None:
        result = report.analyze_fingerprint(bundle)
        assert 0 <= result.overall_score <= 100
        assert result.privacy_risk_level in {"very_low", "low", "medium", "high", "very_high"}
        assert result.trackability_level in {"very_low", "low", "medium", "high", "very_high"}
        assert result.ai_report.summary

    def test_overall_uses_axis_scores(self, bundle) -> None:
        result = report.analyze_fingerprint(bundle)
        expected = aggregator.overall_score(
            result.uniqueness.overall_score,
            result.consistency.overall_score,
            result.anomaly.overall_score,
        )
        assert result.overall_score == expected

    def test_idempotent(self, bundle) -> None:
        assert report.analyze_fingerprint(bundle) == report.analyze_fingerprint(bundle)

    def test_platform_mismatch_still_completes(self, make_bundle) -> None:
        result = report.analyze_fingerprint(make_bundle({"navigator": {"platform": "MacIntel"}}))
        assert result.privacy_risk_level in {"very_low", "low", "medium", "high", "very_high"}

    def test_async_matches_sync(self, bundle) -> None:
        sync_result = report.analyze_fingerprint(bundle)
        async_result = asyncio.run(report.analyze_fingerprint_async(bundle))
        assert async_result == sync_result

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"navigator": {"webdriver": True}},
            {"webgl": {"renderer": "ANGLE (VirtualBox)"}},
            {"hardware": {"memory": None}, "fpjs": {"visitorId": "abc123"}},
            {"hardware": {"cpuCores": 0, "screen": {"width": 0, "height": 0}}},
        ],
    )
    def test_scores_bounded(self, make_bundle, overrides: dict) -> None:
        result = report.analyze_fingerprint(make_bundle(overrides))
        for score in (
            result.overall_score,
            result.uniqueness.overall_score,
            result.consistency.overall_score,
            result.anomaly.overall_score,
        ):
            assert isinstance(score, int)
            assert 0 <= score <= 100


class TestNarrative:
    def test_summary_names_browser_and_os(self, bundle) -> None:
        summary = report.analyze_fingerprint(bundle).ai_report.summary
        assert summary.startswith('Your device "Chrome 124.0.0.0" on Windows has')
        assert "Consistency: 100%." in summary

    def test_uniqueness_assessment_mentions_rarest_signal(self, bundle) -> None:
        assessment = report.analyze_fingerprint(bundle).ai_report.uniqueness_assessment
        assert "Rarest characteristic: GPU renderer" in assessment

    def test_consistency_assessment_lists_serious_failures(self, make_bundle) -> None:
        result = report.analyze_fingerprint(make_bundle({"navigator": {"webdriver": True}}))
        assessment = result.ai_report.consistency_assessment
        assert "Found 1 inconsistencies." in assessment
        assert "Serious: WebDriver flag." in assessment

    def test_anomaly_assessment_counts_types(self, make_bundle) -> None:
        result = report.analyze_fingerprint(make_bundle({"webgl": {"renderer": "ANGLE (VirtualBox)"}}))
        assert "Virtualization signs: 1." in result.ai_report.anomaly_assessment

    def test_recommendations_capped_and_unique(self, make_bundle) -> None:
        bundle = make_bundle(
            {
                "navigator": {"webdriver": True, "languages": []},
                "automation": {"injectedGlobals": ["cdc_1"]},
                "webgl": {"renderer": "VMware SVGA"},
                "hardware": {"cpuCores": 1},
                "webrtc": {"localIPs": ["192.168.1.10"]},
                "fonts": {"count": 400},
            }
        )
        recommendations = report.analyze_fingerprint(bundle).ai_report.recommendations
        assert len(recommendations) <= narrative.MAX_RECOMMENDATIONS
        assert len(recommendations) == len(set(recommendations))

    def test_webrtc_leak_tip(self, make_bundle) -> None:
        tips = report.analyze_fingerprint(make_bundle({"webrtc": {"localIPs": ["10.0.0.2"]}})).ai_report.privacy_tips
        assert "Use a VPN with WebRTC leak protection." in tips
        assert len(tips) <= narrative.MAX_PRIVACY_TIPS

    def test_general_tips_come_first(self, bundle) -> None:
        tips = report.analyze_fingerprint(bundle).ai_report.privacy_tips
        assert tips[0].startswith("Keep your browser updated")
        assert tips[1].startswith("Use private browsing")


class TestFormatSignalName:
    def test_known_signal(self) -> None:
        assert report.format_signal_name("hardware_concurrency") == "CPU cores"

    def test_unknown_signal_passes_through(self) -> None:
        assert report.format_signal_name("mystery_signal") == "mystery_signal"


class TestBuildExportReport:
    def test_document(self, bundle) -> None:
        settings = config.Settings(ECHOPRINT_EXPORT_VERSION="9.9.9", ECHOPRINT_DISCLAIMER="Test only")
        result = report.analyze_fingerprint(bundle)
        document = report.build_export_report(bundle, result, settings)

        assert document.version == "9.9.9"
        assert document.disclaimer == "Test only"
        assert document.fingerprint == bundle
        assert document.analysis == result
        assert document.generated_at.endswith("+00:00")

    def test_wire_format(self, bundle) -> None:
        result = report.analyze_fingerprint(bundle)
        wire = report.build_export_report(bundle, result).model_dump(mode="json", by_alias=True)
        assert set(wire) == {"version", "generatedAt", "fingerprint", "analysis", "disclaimer"}
        assert "parsedUA" in wire["fingerprint"]
        assert "aiReport" in wire["analysis"]
