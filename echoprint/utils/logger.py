"""
Console logger for the analysis engine.

Every line carries a UTC timestamp, a level symbol and the module
context, followed by optional ``key=value`` data.  Output goes to
stderr so the CLI can keep stdout for JSON and report text.

``LOG_LEVEL`` (debug, info, warn, error) sets the minimum level
shown; the default is ``info``.  With ``WRITE_TO_FILE=true`` each CLI
run also writes a plain-text copy under ``.logs/``.

Named timers and the log-file handle live in ``contextvars`` so
concurrent analyses on separate tasks or threads stay independent.
"""

from __future__ import annotations

import contextvars
import io
import os
import pathlib
import re
import sys
import time
from datetime import UTC, datetime
from typing import NamedTuple

# ============================================================================
# Levels & Colours
# ============================================================================

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GRAY = "\033[90m"
_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


class _Style(NamedTuple):
    rank: int
    colour: str
    symbol: str


_STYLES: dict[str, _Style] = {
    "debug": _Style(10, "\033[90m", "•"),
    "timing": _Style(10, "\033[35m", "⏱"),
    "info": _Style(20, "\033[36m", "ℹ"),
    "success": _Style(20, "\033[32m", "✓"),
    "warn": _Style(30, "\033[33m", "⚠"),
    "error": _Style(40, "\033[31m", "✗"),
}


def _threshold() -> int:
    level = os.environ.get("LOG_LEVEL", "info").lower()
    return _STYLES[level].rank if level in _STYLES else _STYLES["info"].rank


# ============================================================================
# Per-run state (isolated via contextvars)
# ============================================================================

_timers_var: contextvars.ContextVar[dict[str, float]] = contextvars.ContextVar("_timers_var")
_log_file_var: contextvars.ContextVar[io.TextIOWrapper | None] = contextvars.ContextVar("_log_file_var", default=None)


def _timers() -> dict[str, float]:
    try:
        return _timers_var.get()
    except LookupError:
        timers: dict[str, float] = {}
        _timers_var.set(timers)
        return timers


# ============================================================================
# File Logging
# ============================================================================


def start_log_file(label: str) -> None:
    """Open ``.logs/<label>_<timestamp>.log`` when ``WRITE_TO_FILE=true``."""
    if os.environ.get("WRITE_TO_FILE", "").lower() != "true":
        return

    end_log_file()

    logs_dir = pathlib.Path.cwd() / ".logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    stem = re.sub(r"[^A-Za-z0-9.-]", "_", label)[:50] or "analysis"
    path = logs_dir / f"{stem}_{datetime.now(UTC):%Y-%m-%d_%H-%M-%S}.log"

    try:
        stream = open(path, "a", encoding="utf-8")  # noqa: SIM115
    except OSError as exc:
        print(f"[Logger] Could not open log file {path}: {exc}", file=sys.stderr)
        return

    _log_file_var.set(stream)
    stream.write(f"# EchoPrint analysis log: {label}\n# Started {datetime.now(UTC).isoformat()}\n")


def end_log_file() -> None:
    """Close the current log file, if any."""
    stream = _log_file_var.get()
    if stream is None:
        return
    _log_file_var.set(None)
    try:
        stream.close()
    except OSError as exc:
        print(f"[Logger] Could not close log file: {exc}", file=sys.stderr)


# ============================================================================
# Formatting
# ============================================================================


def _format_duration(ms: float) -> str:
    if ms < 1000:
        return f"{ms:.0f}ms"
    return f"{ms / 1000:.2f}s"


def _format_value(value: object) -> str:
    """Render one data value; long strings and containers are summarised."""
    if isinstance(value, str):
        shown = value if len(value) <= 120 else value[:117] + "..."
        return f'"{shown}"'
    if isinstance(value, (list, tuple)) and len(value) > 8:
        return f"[{len(value)} items]"
    return str(value)


# ============================================================================
# Logger Class
# ============================================================================


class Logger:
    """Structured logger with a context prefix and named timers."""

    def __init__(self, context: str) -> None:
        self._context = context

    def _write(self, line: str) -> None:
        print(line, file=sys.stderr)
        stream = _log_file_var.get()
        if stream is not None:
            stream.write(_ANSI_RE.sub("", line) + "\n")
            stream.flush()

    def _log(self, level: str, message: str, data: dict[str, object] | None = None) -> None:
        style = _STYLES[level]
        if style.rank < _threshold():
            return

        now = datetime.now(UTC)
        stamp = f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"
        line = f"{_GRAY}[{stamp}]{_RESET} {style.colour}{style.symbol}{_RESET} {_BOLD}[{self._context}]{_RESET} {message}"
        if data:
            line += " " + " ".join(f"{_DIM}{key}={_RESET}{_format_value(value)}" for key, value in data.items())
        self._write(line)

    def info(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("info", message, data)

    def success(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("success", message, data)

    def warn(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("warn", message, data)

    def error(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("error", message, data)

    def debug(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("debug", message, data)

    def start_timer(self, label: str) -> None:
        """Start the named timer *label* for this context."""
        _timers()[f"{self._context}:{label}"] = time.monotonic()

    def end_timer(self, label: str, message: str | None = None) -> float:
        """Stop the named timer, log the elapsed time and return it in ms.

        Returns 0 (with a warning) when the timer was never started.
        """
        started = _timers().pop(f"{self._context}:{label}", None)
        if started is None:
            self.warn(f'Timer "{label}" was not started')
            return 0.0

        elapsed_ms = (time.monotonic() - started) * 1000
        self._log("timing", f"{message or label} took {_format_duration(elapsed_ms)}")
        return elapsed_ms

    def section(self, title: str) -> None:
        """Print a banner line, shown regardless of ``LOG_LEVEL``."""
        rule = "─" * 60
        self._write(f"\n\033[34m{rule}\n{_BOLD}  {title}{_RESET}\n\033[34m{rule}{_RESET}\n")


def create_logger(context: str) -> Logger:
    """Create a logger for a specific module."""
    return Logger(context)
