"""End-to-end lint scenarios: parse, then evaluate every rule."""

import pytest

from change_scribe.config import policy_from_dict
from change_scribe.engine import evaluate_rules, lint_commit, lint_message
from change_scribe.errors import LintFailed, ParseError
from change_scribe.models import Span
from change_scribe.parsing import parse


def test_clean_commit_with_default_policy(default_policy) -> None:
    outcome = lint_message("fix: something", default_policy)

    assert outcome.clean
    assert outcome.results == []
    assert outcome.commit.to_dict() == {
        "type": "fix",
        "scope": [],
        "breaking_change": False,
        "subject": "something",
        "body": None,
        "footer": {},
    }
    outcome.raise_for_violations()


def test_type_invalid_and_case_invalid_fire_together() -> None:
    policy = policy_from_dict({"type": {"enum": ["fix", "feat"], "case": "kebab"}})

    outcome = lint_message("Feature: x", policy)

    assert not outcome.clean
    assert [r.rule for r in outcome.results] == ["type-invalid", "type-case-invalid"]
    assert all(r.span == Span(0, 7) for r in outcome.results)
    assert outcome.commit.body is None
    assert dict(outcome.commit.footer) == {}


def test_scope_case_invalid_alone() -> None:
    policy = policy_from_dict({"scope": {"case": "kebab"}})

    outcome = lint_message("fix(Scope): x", policy)

    assert [r.rule for r in outcome.results] == ["scope-case-invalid"]


def test_scope_case_invalid_with_scope_in_enum() -> None:
    policy = policy_from_dict({"scope": {"case": "kebab", "enum": ["Scope"]}})

    outcome = lint_message("fix(Scope): x", policy)

    assert [r.rule for r in outcome.results] == ["scope-case-invalid"]


def test_all_rules_run_without_short_circuit() -> None:
    policy = policy_from_dict(
        {
            "type": {"enum": ["fix"], "min-length": 20, "max-length": 2, "case": "snake"},
            "scope": {"enum": ["api"], "min-length": 20, "max-length": 2, "case": "pascal"},
        }
    )

    outcome = lint_message("some-feat(ui-kit): x", policy)

    assert [r.rule for r in outcome.results] == [
        "type-invalid",
        "type-too-short",
        "type-too-long",
        "type-case-invalid",
        "scope-invalid",
        "scope-too-short",
        "scope-too-long",
        "scope-case-invalid",
    ]


def test_scope_required_on_empty_parens() -> None:
    policy = policy_from_dict({"scope": {"required": True}})

    outcome = lint_message("fix(): x", policy)

    assert [r.rule for r in outcome.results] == ["scope-required"]


def test_evaluation_is_idempotent() -> None:
    policy = policy_from_dict({"type": {"enum": ["fix"]}, "scope": {"required": True}})
    commit = parse("Feat: x")

    assert evaluate_rules(commit, policy) == evaluate_rules(commit, policy)


def test_allowed_rule_ids_filter() -> None:
    policy = policy_from_dict({"type": {"enum": ["fix"]}})
    commit = parse("Feat: x")

    results = evaluate_rules(commit, policy, allowed_rule_ids={"type-case-invalid"})

    assert [r.rule for r in results] == ["type-case-invalid"]


def test_parse_failure_never_reaches_rules(default_policy) -> None:
    with pytest.raises(ParseError) as excinfo:
        lint_message("not a commit", default_policy)

    assert excinfo.value.offset == 3


def test_raise_for_violations() -> None:
    policy = policy_from_dict({"type": {"enum": ["fix"]}})
    outcome = lint_commit(parse("feat: x"), policy)

    with pytest.raises(LintFailed) as excinfo:
        outcome.raise_for_violations()

    assert [r.rule for r in excinfo.value.results] == ["type-invalid"]
