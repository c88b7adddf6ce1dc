"""
Command-line interface.

    python -m echoprint analyze BUNDLE.json [--export] [--output FILE]
    python -m echoprint report BUNDLE.json
    python -m echoprint serve

``analyze`` prints the analysis (or the export document) as JSON,
``report`` prints the narrative report as plain text and ``serve``
starts the HTTP API.
"""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

import pydantic

from echoprint import config
from echoprint.analysis import report
from echoprint.models import analysis, signals
from echoprint.utils import errors, logger, serialization
from echoprint.utils.risk import risk_level_description

log = logger.create_logger("CLI")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="echoprint", description="Browser fingerprint analysis")
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analyze a signal bundle and print JSON")
    analyze.add_argument("bundle", type=pathlib.Path, help="Path to a signal bundle JSON file")
    analyze.add_argument("--export", action="store_true", help="Print the export document instead")
    analyze.add_argument("--output", type=pathlib.Path, default=None, help="Write JSON to this file")

    narrative = commands.add_parser("report", help="Analyze a signal bundle and print the report")
    narrative.add_argument("bundle", type=pathlib.Path, help="Path to a signal bundle JSON file")

    commands.add_parser("serve", help="Start the HTTP API")
    return parser.parse_args(argv)


def _load_bundle(path: pathlib.Path) -> signals.SignalBundle:
    return signals.SignalBundle.model_validate_json(path.read_text(encoding="utf-8"))


def format_report(result: analysis.AnalysisResult) -> str:
    """Render an analysis result as plain text."""
    ai = result.ai_report
    lines = [
        ai.summary,
        "",
        f"Overall score: {result.overall_score}",
        f"Privacy risk: {risk_level_description(result.privacy_risk_level)}",
        f"Trackability: {result.trackability_level}",
        "",
        "Uniqueness",
        f"  {ai.uniqueness_assessment}",
        "Consistency",
        f"  {ai.consistency_assessment}",
        "Anomalies",
        f"  {ai.anomaly_assessment}",
    ]
    if ai.recommendations:
        lines += ["", "Recommendations"]
        lines += [f"  - {item}" for item in ai.recommendations]
    if ai.privacy_tips:
        lines += ["", "Privacy tips"]
        lines += [f"  - {item}" for item in ai.privacy_tips]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.command == "serve":
        from echoprint import main as server

        server.run()
        return 0

    logger.start_log_file(args.bundle.stem)
    try:
        return _run(args)
    finally:
        logger.end_log_file()


def _run(args: argparse.Namespace) -> int:
    try:
        bundle = _load_bundle(args.bundle)
    except (OSError, pydantic.ValidationError) as exc:
        log.error("Could not load signal bundle", {"path": str(args.bundle), "error": errors.get_error_message(exc)})
        return 1

    result = report.analyze_fingerprint(bundle)

    if args.command == "report":
        print(format_report(result))
        return 0

    document = report.build_export_report(bundle, result, config.get_settings()) if args.export else result
    payload = json.dumps(serialization.to_wire(document), indent=2, ensure_ascii=False)

    if args.output is None:
        print(payload)
    else:
        args.output.write_text(payload + "\n", encoding="utf-8")
        log.success("Wrote analysis", {"path": str(args.output)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
