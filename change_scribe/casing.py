"""Identifier casing classification for commit types and scopes."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable


class Casing(str, Enum):
    """Casing conventions a type or scope can be required to follow."""

    CAMEL = "camel"
    KEBAB = "kebab"
    PASCAL = "pascal"
    SNAKE = "snake"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: str) -> "Casing":
        """Look up a casing by its config name (e.g. ``"kebab"``)."""
        normalized = value.lower().strip()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"unknown casing {value!r} (expected one of: {', '.join(m.value for m in cls)})")


_DISPLAY_NAMES = {
    Casing.CAMEL: "camelCase",
    Casing.KEBAB: "kebab-case",
    Casing.PASCAL: "PascalCase",
    Casing.SNAKE: "snake_case",
}

_KEBAB_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_SNAKE_RE = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")
_CAMEL_RE = re.compile(r"[a-z][a-z0-9]*(?:[A-Z][a-z0-9]+)*")
_PASCAL_RE = re.compile(r"(?:[A-Z][a-z0-9]+)+")


def is_kebab_case(value: str) -> bool:
    return _KEBAB_RE.fullmatch(value) is not None


def is_snake_case(value: str) -> bool:
    return _SNAKE_RE.fullmatch(value) is not None


def is_camel_case(value: str) -> bool:
    return _CAMEL_RE.fullmatch(value) is not None


def is_pascal_case(value: str) -> bool:
    return _PASCAL_RE.fullmatch(value) is not None


CLASSIFIERS: dict[Casing, Callable[[str], bool]] = {
    Casing.CAMEL: is_camel_case,
    Casing.KEBAB: is_kebab_case,
    Casing.PASCAL: is_pascal_case,
    Casing.SNAKE: is_snake_case,
}


def is_case(value: str, casing: Casing) -> bool:
    """Return True if ``value`` follows ``casing``."""
    return CLASSIFIERS[casing](value)
