"""Rule records and the severity penalty table for consistency checks."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from echoprint.models import analysis, signals

SEVERITY_PENALTIES: dict[analysis.RuleSeverity, int] = {
    "critical": 20,
    "high": 10,
    "medium": 5,
    "low": 2,
}


@dataclasses.dataclass(frozen=True)
class RuleOutcome:
    """What a rule predicate reports for one bundle."""

    passed: bool
    message: str


@dataclasses.dataclass(frozen=True)
class ConsistencyRule:
    """A declarative consistency check.

    ``informational`` rules always pass; they only contribute a
    message describing what was observed and never affect the score.
    """

    id: str
    name: str
    description: str
    category: str
    severity: analysis.RuleSeverity
    check: Callable[[signals.SignalBundle], RuleOutcome]
    informational: bool = False

    def evaluate(self, bundle: signals.SignalBundle) -> analysis.ConsistencyRuleResult:
        """Run the predicate and package its outcome with the rule metadata."""
        outcome = self.check(bundle)
        return analysis.ConsistencyRuleResult(
            id=self.id,
            name=self.name,
            description=self.description,
            category=self.category,
            severity=self.severity,
            passed=outcome.passed or self.informational,
            message=outcome.message,
            informational=self.informational,
        )


def passed(message: str) -> RuleOutcome:
    return RuleOutcome(passed=True, message=message)


def failed(message: str) -> RuleOutcome:
    return RuleOutcome(passed=False, message=message)
