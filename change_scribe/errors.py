"""Exception types raised by change-scribe."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import LintResult


class ChangeScribeError(Exception):
    """Base class for all change-scribe failures."""


class ParseError(ChangeScribeError):
    """The message does not follow the conventional commit grammar.

    Carries the character offset where matching stopped and the full source
    so the failure can be rendered against the message.
    """

    def __init__(self, offset: int, source: str, expected: str | None = None):
        self.offset = offset
        self.source = source
        self.expected = expected
        detail = f" (expected {expected})" if expected else ""
        super().__init__(f"Invalid commit message syntax at offset {offset}{detail}")


class ConfigError(ChangeScribeError):
    """The policy configuration could not be loaded or is malformed."""


class LintFailed(ChangeScribeError):
    """One or more lint rules fired for a parsed commit."""

    def __init__(self, results: list["LintResult"]):
        self.results = results
        super().__init__(f"Linting failed with {len(results)} violation(s)")
