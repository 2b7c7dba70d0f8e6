from __future__ import annotations

import logging
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Any

from ..casing import Casing
from ..errors import ConfigError
from .schema import PolicyConfig

logger = logging.getLogger(__name__)

# Discovered in this order; later files override earlier ones.
CONFIG_FILENAMES = ("change-scribe.toml", ".change-scribe.toml")

_TYPE_KEYS = {"enum", "min-length", "max-length", "case"}
_SCOPE_KEYS = _TYPE_KEYS | {"required"}


def _coerce_dict(value: Any, section: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] must be a table")
    return value


def _coerce_enum(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be an array of strings")
    return tuple(value)


def _coerce_length(value: Any, key: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer")
    if value < 0:
        raise ConfigError(f"{key} must not be negative")
    return value


def _coerce_case(value: Any, key: str) -> Casing:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    try:
        return Casing.parse(value)
    except ValueError as e:
        raise ConfigError(f"{key}: {e}") from None


def _section_overrides(raw: dict[str, Any], section: str, known: set[str]) -> dict[str, Any]:
    """Translate a kebab-case TOML section into dataclass field overrides."""
    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        qualified = f"{section}.{key}"
        if key not in known:
            logger.debug("Ignoring unknown config key %s", qualified)
            continue
        if key == "enum":
            overrides["enum"] = _coerce_enum(value, qualified)
        elif key == "min-length":
            overrides["min_length"] = _coerce_length(value, qualified)
        elif key == "max-length":
            overrides["max_length"] = _coerce_length(value, qualified)
        elif key == "case":
            overrides["case"] = _coerce_case(value, qualified)
        elif key == "required":
            if not isinstance(value, bool):
                raise ConfigError(f"{qualified} must be a boolean")
            overrides["required"] = value
    return overrides


def merge_policy(base: PolicyConfig, data: dict[str, Any]) -> PolicyConfig:
    """Layer a parsed config mapping over ``base``; keys absent from ``data`` keep base values."""
    type_raw = _coerce_dict(data.get("type"), "type")
    scope_raw = _coerce_dict(data.get("scope"), "scope")

    for key in data:
        if key not in ("type", "scope"):
            logger.debug("Ignoring unknown config section [%s]", key)

    return PolicyConfig(
        type=replace(base.type, **_section_overrides(type_raw, "type", _TYPE_KEYS)),
        scope=replace(base.scope, **_section_overrides(scope_raw, "scope", _SCOPE_KEYS)),
    )


def policy_from_dict(data: dict[str, Any]) -> PolicyConfig:
    """Build a policy from a plain mapping layered over the defaults."""
    return merge_policy(PolicyConfig(), data)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read configuration {path}: {e}") from e
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to load configuration {path}: {e}") from e


def discover_config_files(cwd: Path) -> list[Path]:
    return [cwd / name for name in CONFIG_FILENAMES if (cwd / name).is_file()]


def load_policy(config_path: Path | None = None, cwd: Path | None = None) -> PolicyConfig:
    """Load the policy for one lint run.

    Defaults are layered under the discovered config files in ``cwd``, which
    are in turn layered under an explicit ``config_path``.

    Raises:
        ConfigError: if a file is missing (explicit path only), unreadable,
            not valid TOML, or holds values of the wrong type.
    """
    paths = discover_config_files(cwd or Path.cwd())
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")
        paths.append(config_path)

    policy = PolicyConfig()
    for path in paths:
        logger.debug("Loading configuration from %s", path)
        data = _read_toml(path)
        try:
            policy = merge_policy(policy, data)
        except ConfigError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from None

    if not paths:
        logger.debug("No configuration file found; using defaults")
    return policy
