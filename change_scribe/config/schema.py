from __future__ import annotations

from dataclasses import dataclass, field

from ..casing import Casing

WILDCARD = "*"
UNBOUNDED = 2**32 - 1


@dataclass(frozen=True)
class TypePolicy:
    enum: tuple[str, ...] = (WILDCARD,)
    min_length: int = 0
    max_length: int = UNBOUNDED
    case: Casing = Casing.KEBAB

    @property
    def allows_any(self) -> bool:
        return WILDCARD in self.enum


@dataclass(frozen=True)
class ScopePolicy:
    required: bool = False
    enum: tuple[str, ...] = (WILDCARD,)
    min_length: int = 0
    max_length: int = UNBOUNDED
    case: Casing = Casing.KEBAB

    @property
    def allows_any(self) -> bool:
        return WILDCARD in self.enum


@dataclass(frozen=True)
class PolicyConfig:
    """Fully merged policy handed to the rule engine."""

    type: TypePolicy = field(default_factory=TypePolicy)
    scope: ScopePolicy = field(default_factory=ScopePolicy)
