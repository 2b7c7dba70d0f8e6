"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from change_scribe.config import PolicyConfig
from change_scribe.models import Commit


@pytest.fixture
def default_policy() -> PolicyConfig:
    """Policy with every setting at its default."""
    return PolicyConfig()


@pytest.fixture
def sample_commit():
    """Factory for commits built directly, bypassing the parser."""

    def _make(commit_type: str = "fix", scope: tuple[str, ...] = (), **kwargs) -> Commit:
        kwargs.setdefault("subject", "subject")
        kwargs.setdefault("source", f"{commit_type}: subject")
        return Commit(commit_type=commit_type, scope=scope, **kwargs)

    return _make


@pytest.fixture
def write_config():
    """Write a TOML config file and return its path."""

    def _write(base: Path, text: str, name: str = "change-scribe.toml") -> Path:
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
