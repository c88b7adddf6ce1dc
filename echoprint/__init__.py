"""EchoPrint: browser fingerprint analysis engine.

Scores a collected signal bundle for uniqueness, internal consistency
and anomalies, and turns the results into a privacy report.
"""

from __future__ import annotations

__version__ = "1.0.0"
