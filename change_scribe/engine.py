from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .config.schema import PolicyConfig
from .errors import LintFailed
from .models import Commit
from .parsing import parse
from .rules import RULES, LintResult, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintOutcome:
    """Verdict for one parsed commit: clean, or the violations found."""

    commit: Commit
    results: list[LintResult] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.results

    def raise_for_violations(self) -> None:
        if self.results:
            raise LintFailed(list(self.results))


def evaluate_rules(
    commit: Commit,
    policy: PolicyConfig,
    *,
    rules: Iterable[Rule] = RULES,
    allowed_rule_ids: set[str] | None = None,
) -> list[LintResult]:
    """
    Evaluate every rule against a commit.

    Rules never short-circuit each other: all of them run, in declaration
    order, and each contributes at most one diagnostic.

    Args:
        commit: Parsed commit
        policy: Merged policy configuration
        rules: Rule table to evaluate (defaults to the built-in rules)
        allowed_rule_ids: Optional set of rule IDs to restrict evaluation to
    """
    results: list[LintResult] = []
    for rule in rules:
        if allowed_rule_ids is not None and rule.id not in allowed_rule_ids:
            continue
        result = rule.check(commit, policy)
        if result is not None:
            logger.debug("Rule %s fired at %s", rule.id, result.span)
            results.append(result)
    return results


def lint_commit(commit: Commit, policy: PolicyConfig, **kwargs) -> LintOutcome:
    return LintOutcome(commit=commit, results=evaluate_rules(commit, policy, **kwargs))


def lint_message(message: str, policy: PolicyConfig, **kwargs) -> LintOutcome:
    """Parse ``message`` and lint it.

    Raises:
        ParseError: if the message does not parse; no rules run in that case.
    """
    return lint_commit(parse(message), policy, **kwargs)
