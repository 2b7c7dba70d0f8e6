"""Lint rules for parsed commit messages.

Rules are data: each entry in ``RULES`` pairs a predicate over
``(Commit, PolicyConfig)`` with the pieces needed to build its diagnostic.
Every rule is evaluated on every run (see ``engine.evaluate_rules``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Literal

from .casing import is_case
from .config.schema import PolicyConfig
from .errors import ParseError
from .models import Commit, Span


class DiagnosticKind(str, Enum):
    PARSE_ERROR = "parse-error"
    TYPE_INVALID = "type-invalid"
    TYPE_TOO_SHORT = "type-too-short"
    TYPE_TOO_LONG = "type-too-long"
    TYPE_CASE_INVALID = "type-case-invalid"
    SCOPE_REQUIRED = "scope-required"
    SCOPE_INVALID = "scope-invalid"
    SCOPE_TOO_SHORT = "scope-too-short"
    SCOPE_TOO_LONG = "scope-too-long"
    SCOPE_CASE_INVALID = "scope-case-invalid"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    DiagnosticKind.PARSE_ERROR: "Invalid commit message syntax",
    DiagnosticKind.TYPE_INVALID: "Invalid commit type",
    DiagnosticKind.TYPE_TOO_SHORT: "The commit type is too short",
    DiagnosticKind.TYPE_TOO_LONG: "The commit type is too long",
    DiagnosticKind.TYPE_CASE_INVALID: "The commit type has the wrong casing",
    DiagnosticKind.SCOPE_REQUIRED: "Scope is required",
    DiagnosticKind.SCOPE_INVALID: "Invalid scope",
    DiagnosticKind.SCOPE_TOO_SHORT: "A scope is too short",
    DiagnosticKind.SCOPE_TOO_LONG: "A scope is too long",
    DiagnosticKind.SCOPE_CASE_INVALID: "A scope has the wrong casing",
}


@dataclass(frozen=True)
class LintResult:
    """A single diagnostic anchored to a span of the commit message."""

    kind: DiagnosticKind
    span: Span
    source: str
    label: str
    help: str | None = None
    level: Literal["error", "warning", "info"] = "error"

    @property
    def rule(self) -> str:
        return self.kind.value

    @property
    def message(self) -> str:
        return self.kind.message

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "rule": self.rule,
            "message": self.message,
            "offset": self.span.offset,
            "length": self.span.length,
            "label": self.label,
            "help": self.help,
        }

    def __str__(self) -> str:
        return f"{self.level.upper()}: [{self.rule}] {self.span} - {self.message}"


def parse_error_result(error: ParseError) -> LintResult:
    """Express a parse failure as a zero-length diagnostic at the failing offset."""
    label = f"expected {error.expected}" if error.expected else "here"
    return LintResult(
        kind=DiagnosticKind.PARSE_ERROR,
        span=Span(error.offset, 0),
        source=error.source,
        label=label,
        help="Commit messages look like `type(scope)!: subject`",
    )


def _quoted(values: tuple[str, ...]) -> str:
    return ", ".join(f'"{v}"' for v in values)


# -- predicates ----------------------------------------------------------------


def commit_type_invalid(commit: Commit, policy: PolicyConfig) -> bool:
    if policy.type.allows_any:
        return False
    return commit.commit_type not in policy.type.enum


def commit_type_too_short(commit: Commit, policy: PolicyConfig) -> bool:
    return len(commit.commit_type) <= policy.type.min_length


def commit_type_too_long(commit: Commit, policy: PolicyConfig) -> bool:
    return len(commit.commit_type) >= policy.type.max_length


def commit_type_case_invalid(commit: Commit, policy: PolicyConfig) -> bool:
    return not is_case(commit.commit_type, policy.type.case)


def commit_scope_required(commit: Commit, policy: PolicyConfig) -> bool:
    return policy.scope.required and not commit.scope


def commit_scope_invalid(commit: Commit, policy: PolicyConfig) -> bool:
    if policy.scope.allows_any or not commit.scope:
        return False
    return any(scope not in policy.scope.enum for scope in commit.scope)


def commit_scope_too_short(commit: Commit, policy: PolicyConfig) -> bool:
    return any(len(scope) <= policy.scope.min_length for scope in commit.scope)


def commit_scope_too_long(commit: Commit, policy: PolicyConfig) -> bool:
    return any(len(scope) >= policy.scope.max_length for scope in commit.scope)


def commit_scope_case_invalid(commit: Commit, policy: PolicyConfig) -> bool:
    return any(not is_case(scope, policy.scope.case) for scope in commit.scope)


# -- rule table ----------------------------------------------------------------

PredicateFn = Callable[[Commit, PolicyConfig], bool]
TextFn = Callable[[Commit, PolicyConfig], str]

TYPE_LABEL = "At the commit type"
SCOPE_LABEL = "At the scope"


@dataclass(frozen=True)
class Rule:
    kind: DiagnosticKind
    predicate: PredicateFn
    span: Callable[[Commit], Span]
    label: TextFn
    help: TextFn

    @property
    def id(self) -> str:
        return self.kind.value

    def check(self, commit: Commit, policy: PolicyConfig) -> LintResult | None:
        """Return this rule's diagnostic if it fires, else None."""
        if not self.predicate(commit, policy):
            return None
        return LintResult(
            kind=self.kind,
            span=self.span(commit),
            source=commit.source,
            label=self.label(commit, policy),
            help=self.help(commit, policy),
        )


def _type_span(commit: Commit) -> Span:
    return commit.type_span()


def _scope_span(commit: Commit) -> Span:
    return commit.scope_span()


def _fixed(text: str) -> TextFn:
    return lambda commit, policy: text


RULES: tuple[Rule, ...] = (
    # Type
    Rule(
        kind=DiagnosticKind.TYPE_INVALID,
        predicate=commit_type_invalid,
        span=_type_span,
        label=_fixed(TYPE_LABEL),
        help=lambda c, p: f"Valid types are: {_quoted(p.type.enum)}",
    ),
    Rule(
        kind=DiagnosticKind.TYPE_TOO_SHORT,
        predicate=commit_type_too_short,
        span=_type_span,
        label=_fixed(TYPE_LABEL),
        help=lambda c, p: f"The commit type must be longer than {p.type.min_length} characters",
    ),
    Rule(
        kind=DiagnosticKind.TYPE_TOO_LONG,
        predicate=commit_type_too_long,
        span=_type_span,
        label=_fixed(TYPE_LABEL),
        help=lambda c, p: f"The commit type must be shorter than {p.type.max_length} characters",
    ),
    Rule(
        kind=DiagnosticKind.TYPE_CASE_INVALID,
        predicate=commit_type_case_invalid,
        span=_type_span,
        label=_fixed(TYPE_LABEL),
        help=lambda c, p: f"The commit type must be written in {p.type.case.display_name}",
    ),
    # Scope
    Rule(
        kind=DiagnosticKind.SCOPE_REQUIRED,
        predicate=commit_scope_required,
        span=_scope_span,
        label=lambda c, p: f"Insert a scope after the commit type. e.g.: `{c.commit_type}(scope)`",
        help=lambda c, p: f"Valid scopes are: {_quoted(p.scope.enum)}",
    ),
    Rule(
        kind=DiagnosticKind.SCOPE_INVALID,
        predicate=commit_scope_invalid,
        span=_scope_span,
        label=_fixed(SCOPE_LABEL),
        help=lambda c, p: f"Valid scopes are: {_quoted(p.scope.enum)}",
    ),
    Rule(
        kind=DiagnosticKind.SCOPE_TOO_SHORT,
        predicate=commit_scope_too_short,
        span=_scope_span,
        label=_fixed(SCOPE_LABEL),
        help=lambda c, p: f"Each scope must be longer than {p.scope.min_length} characters",
    ),
    Rule(
        kind=DiagnosticKind.SCOPE_TOO_LONG,
        predicate=commit_scope_too_long,
        span=_scope_span,
        label=_fixed(SCOPE_LABEL),
        help=lambda c, p: f"Each scope must be shorter than {p.scope.max_length} characters",
    ),
    Rule(
        kind=DiagnosticKind.SCOPE_CASE_INVALID,
        predicate=commit_scope_case_invalid,
        span=_scope_span,
        label=_fixed(SCOPE_LABEL),
        help=lambda c, p: f"Each scope must be written in {p.scope.case.display_name}",
    ),
)


RULE_EXPLANATIONS: dict[str, str] = {
    "parse-error": """
The message does not follow the conventional commit grammar.

The header must be `type[(scope)][!]: subject`: a type made of letters and
hyphens, an optional parenthesised comma-separated scope list, an optional
`!` breaking-change marker, then `": "` and a non-empty subject. Body and
footer sections are separated by blank lines.

No other rule runs when the message fails to parse.
""",
    "type-invalid": """
The commit type is not one of the allowed types.

Configured by `[type] enum`. The wildcard `["*"]` (the default) allows any type.
""",
    "type-too-short": """
The commit type is not longer than `[type] min-length`.

A type whose length equals `min-length` already fires this rule.
""",
    "type-too-long": """
The commit type is not shorter than `[type] max-length`.

A type whose length equals `max-length` already fires this rule.
""",
    "type-case-invalid": """
The commit type does not follow `[type] case`.

One of `camel`, `kebab` (default), `pascal`, `snake`.
""",
    "scope-required": """
The commit has no scope while `[scope] required = true`.

An empty pair of parentheses counts as no scope.
""",
    "scope-invalid": """
At least one scope entry is not one of the allowed scopes.

Configured by `[scope] enum`. The wildcard `["*"]` (the default) allows any scope.
""",
    "scope-too-short": """
At least one scope entry is not longer than `[scope] min-length`.
""",
    "scope-too-long": """
At least one scope entry is not shorter than `[scope] max-length`.
""",
    "scope-case-invalid": """
At least one scope entry does not follow `[scope] case`.

One of `camel`, `kebab` (default), `pascal`, `snake`.
""",
}


def get_rule_ids() -> list[str]:
    return [kind.value for kind in DiagnosticKind]
