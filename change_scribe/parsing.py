"""Conventional commit grammar parser.

The grammar is matched left to right in a single pass with an explicit
cursor. Each grammar step is a plain function ``(text, pos)`` that returns the
position after what it consumed (plus the captured text, where there is one)
or raises ``_NoMatch`` carrying the offset where matching stopped. Optional
steps are run through ``_Cursor.attempt``, which rewinds on failure.

    type[(scope)][!]: subject

    [body paragraph]

    [Footer-Key: value]
    [Footer-Key #value]
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .errors import ParseError
from .models import BREAKING_CHANGE_KEY, Commit

logger = logging.getLogger(__name__)

SEPARATOR = ": "
SECTION_SEPARATOR = "\n\n"
FOOTER_SEPARATORS = (": ", " #")
BREAKING_MARKER = "!"

T = TypeVar("T")


class _NoMatch(Exception):
    def __init__(self, offset: int, expected: str):
        self.offset = offset
        self.expected = expected
        super().__init__(f"expected {expected} at offset {offset}")


def _is_word_char(char: str) -> bool:
    return char.isalpha() or char == "-"


def _scan_word(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and _is_word_char(text[end]):
        end += 1
    return end


# -- grammar steps -----------------------------------------------------------


def take_type(text: str, pos: int) -> tuple[int, str]:
    end = _scan_word(text, pos)
    if end == pos:
        raise _NoMatch(pos, "a commit type")
    return end, text[pos:end]


def take_scope(text: str, pos: int) -> tuple[int, str]:
    """Match ``(...)`` and return the raw text between the parentheses.

    A backslash-escaped ``)`` does not close the scope. Parentheses do not nest.
    """
    if not text.startswith("(", pos):
        raise _NoMatch(pos, "'('")
    cursor = pos + 1
    while cursor < len(text):
        char = text[cursor]
        if char == "\\":
            cursor += 2
            continue
        if char == ")":
            return cursor + 1, text[pos + 1 : cursor]
        cursor += 1
    raise _NoMatch(len(text), "')'")


def take_literal(text: str, pos: int, literal: str) -> int:
    if not text.startswith(literal, pos):
        raise _NoMatch(pos, repr(literal))
    return pos + len(literal)


def take_paragraph(text: str, pos: int) -> tuple[int, str]:
    """Everything up to the next blank line, or the rest of the input."""
    end = text.find(SECTION_SEPARATOR, pos)
    if end == -1:
        end = len(text)
    return end, text[pos:end]


def take_footer_key(text: str, pos: int) -> tuple[int, str]:
    if text.startswith(BREAKING_CHANGE_KEY, pos):
        key_end = pos + len(BREAKING_CHANGE_KEY)
    else:
        key_end = _scan_word(text, pos)
        if key_end == pos:
            raise _NoMatch(pos, "a footer token")
    for separator in FOOTER_SEPARATORS:
        if text.startswith(separator, key_end):
            return key_end + len(separator), text[pos:key_end]
    raise _NoMatch(key_end, "': ' or ' #'")


def is_footer_key(text: str, pos: int) -> bool:
    try:
        take_footer_key(text, pos)
    except _NoMatch:
        return False
    return True


def take_footer_value(text: str, pos: int) -> tuple[int, str]:
    """Consume a footer value up to the next footer key or the end of input.

    The key lookahead runs at every character, so ``see issue #4`` ends the
    value at ``issue #``.
    """
    for cursor in range(pos, len(text)):
        if is_footer_key(text, cursor):
            return cursor, text[pos:cursor].rstrip()
    return len(text), text[pos:].rstrip()


# -- driver ------------------------------------------------------------------


class _Cursor:
    """Position in the message plus try/rewind helpers for optional steps."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.text)

    def expect(self, step: Callable[..., tuple[int, T]], *args) -> T:
        self.pos, value = step(self.text, self.pos, *args)
        return value

    def expect_literal(self, literal: str) -> None:
        self.pos = take_literal(self.text, self.pos, literal)

    def attempt(self, step: Callable[..., tuple[int, T]], *args) -> T | None:
        start = self.pos
        try:
            return self.expect(step, *args)
        except _NoMatch:
            self.pos = start
            return None

    def attempt_literal(self, literal: str) -> bool:
        try:
            self.expect_literal(literal)
        except _NoMatch:
            return False
        return True


def _split_scope(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(entry for entry in raw.split(",") if entry)


def _parse(cursor: _Cursor) -> Commit:
    text = cursor.text

    commit_type = cursor.expect(take_type)
    raw_scope = cursor.attempt(take_scope)
    marker = cursor.attempt_literal(BREAKING_MARKER)
    cursor.expect_literal(SEPARATOR)

    subject_start = cursor.pos
    subject = cursor.expect(take_paragraph)
    if not subject:
        raise _NoMatch(subject_start, "a subject")

    paragraphs: list[str] = []
    while not cursor.exhausted:
        cursor.expect_literal(SECTION_SEPARATOR)
        if is_footer_key(text, cursor.pos):
            break
        paragraph = cursor.expect(take_paragraph)
        if paragraph.strip():
            paragraphs.append(paragraph)

    footer: dict[str, str] = {}
    while not cursor.exhausted:
        key = cursor.expect(take_footer_key)
        footer[key] = cursor.expect(take_footer_value)

    return Commit(
        commit_type=commit_type,
        scope=_split_scope(raw_scope),
        breaking_change=marker or BREAKING_CHANGE_KEY in footer,
        subject=subject,
        body=SECTION_SEPARATOR.join(paragraphs) if paragraphs else None,
        footer=footer,
        source=text,
    )


def parse(message: str) -> Commit:
    """Parse a commit message.

    Args:
        message: The raw commit message text

    Returns:
        The parsed Commit

    Raises:
        ParseError: if the message does not match the grammar. The error
            carries the offset where matching stopped; no partial commit
            is produced.
    """
    try:
        commit = _parse(_Cursor(message))
    except _NoMatch as e:
        logger.debug("Parse failed at offset %d: expected %s", e.offset, e.expected)
        raise ParseError(e.offset, message, expected=e.expected) from None

    logger.debug(
        "Parsed commit type=%r scope=%r breaking=%s footer_keys=%s",
        commit.commit_type,
        commit.scope,
        commit.breaking_change,
        sorted(commit.footer),
    )
    return commit
