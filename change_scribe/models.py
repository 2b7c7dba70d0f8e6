"""Data models for parsed commit messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

BREAKING_CHANGE_KEY = "BREAKING CHANGE"


@dataclass(frozen=True)
class Span:
    """A character range into the commit message source."""

    offset: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.offset + self.length

    def __str__(self) -> str:
        return f"{self.offset}..{self.end}"


@dataclass(frozen=True)
class Commit:
    """A conventional commit message after a successful parse."""

    commit_type: str
    subject: str
    source: str  # full message text, verbatim
    scope: tuple[str, ...] = ()
    breaking_change: bool = False
    body: str | None = None
    footer: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze caller-supplied containers so the record stays read-only.
        object.__setattr__(self, "scope", tuple(self.scope))
        object.__setattr__(self, "footer", MappingProxyType(dict(self.footer)))

    def type_span(self) -> Span:
        return Span(0, len(self.commit_type))

    def scope_span(self) -> Span:
        """Span of the text between the scope parentheses.

        Starts right after the opening parenthesis and is as long as the
        comma-joined scope entries. Without a scope this is the empty point
        right after the type, where a scope would be inserted.
        """
        if not self.scope:
            return Span(len(self.commit_type), 0)
        return Span(len(self.commit_type) + 1, len(",".join(self.scope)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.commit_type,
            "scope": list(self.scope),
            "breaking_change": self.breaking_change,
            "subject": self.subject,
            "body": self.body,
            "footer": dict(self.footer),
        }
