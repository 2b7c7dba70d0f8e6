"""change-scribe: conventional commit message linter."""

__version__ = "0.1.0"

from .casing import Casing, is_case
from .config import PolicyConfig, ScopePolicy, TypePolicy, load_policy, policy_from_dict
from .engine import LintOutcome, evaluate_rules, lint_commit, lint_message
from .errors import ChangeScribeError, ConfigError, LintFailed, ParseError
from .models import Commit, Span
from .parsing import parse
from .rules import RULES, DiagnosticKind, LintResult

__all__ = [
    "__version__",
    "Casing",
    "is_case",
    "PolicyConfig",
    "ScopePolicy",
    "TypePolicy",
    "load_policy",
    "policy_from_dict",
    "LintOutcome",
    "evaluate_rules",
    "lint_commit",
    "lint_message",
    "ChangeScribeError",
    "ConfigError",
    "LintFailed",
    "ParseError",
    "Commit",
    "Span",
    "parse",
    "RULES",
    "DiagnosticKind",
    "LintResult",
]
