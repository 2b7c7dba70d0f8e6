from __future__ import annotations

from pathlib import Path

import pytest

from change_scribe.casing import Casing
from change_scribe.config import UNBOUNDED, WILDCARD, PolicyConfig, load_policy, policy_from_dict
from change_scribe.errors import ConfigError


def test_defaults() -> None:
    policy = PolicyConfig()

    assert policy.type.enum == (WILDCARD,)
    assert policy.type.min_length == 0
    assert policy.type.max_length == UNBOUNDED
    assert policy.type.case is Casing.KEBAB
    assert policy.scope.required is False
    assert policy.scope.enum == (WILDCARD,)
    assert policy.type.allows_any
    assert policy.scope.allows_any


def test_policy_from_dict_reads_kebab_case_keys() -> None:
    policy = policy_from_dict(
        {
            "type": {"enum": ["fix", "feat"], "min-length": 2, "max-length": 10, "case": "pascal"},
            "scope": {"required": True, "enum": ["api"], "case": "snake"},
        }
    )

    assert policy.type.enum == ("fix", "feat")
    assert policy.type.min_length == 2
    assert policy.type.max_length == 10
    assert policy.type.case is Casing.PASCAL
    assert not policy.type.allows_any
    assert policy.scope.required is True
    assert policy.scope.enum == ("api",)
    assert policy.scope.case is Casing.SNAKE
    # untouched keys keep their defaults
    assert policy.scope.max_length == UNBOUNDED


def test_unknown_keys_are_ignored() -> None:
    policy = policy_from_dict({"type": {"colour": "blue"}, "subject": {"max-length": 5}})
    assert policy == PolicyConfig()


@pytest.mark.parametrize(
    "data, message",
    [
        ({"type": "fix"}, r"\[type\] must be a table"),
        ({"type": {"enum": "fix"}}, "type.enum must be an array of strings"),
        ({"type": {"enum": [1, 2]}}, "type.enum must be an array of strings"),
        ({"type": {"min-length": "3"}}, "type.min-length must be an integer"),
        ({"type": {"max-length": True}}, "type.max-length must be an integer"),
        ({"scope": {"min-length": -1}}, "scope.min-length must not be negative"),
        ({"scope": {"case": "upper"}}, "scope.case: unknown casing 'upper'"),
        ({"scope": {"required": "yes"}}, "scope.required must be a boolean"),
    ],
)
def test_invalid_values_raise_config_error(data: dict, message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        policy_from_dict(data)


def test_load_policy_without_files_uses_defaults(tmp_path: Path) -> None:
    assert load_policy(cwd=tmp_path) == PolicyConfig()


def test_load_policy_discovers_config(tmp_path: Path, write_config) -> None:
    write_config(tmp_path, '[type]\nenum = ["fix"]\n')

    policy = load_policy(cwd=tmp_path)

    assert policy.type.enum == ("fix",)


def test_hidden_config_overrides_visible_one(tmp_path: Path, write_config) -> None:
    write_config(tmp_path, '[type]\nenum = ["fix"]\nmin-length = 1\n')
    write_config(tmp_path, '[type]\nenum = ["feat"]\n', name=".change-scribe.toml")

    policy = load_policy(cwd=tmp_path)

    assert policy.type.enum == ("feat",)
    assert policy.type.min_length == 1


def test_explicit_path_layers_over_discovered_files(tmp_path: Path, write_config) -> None:
    write_config(tmp_path, '[scope]\nrequired = true\n\n[type]\ncase = "snake"\n')
    override = write_config(tmp_path / "other", '[type]\ncase = "camel"\nenum = ["fix"]\n', name="custom.toml")

    policy = load_policy(override, cwd=tmp_path)

    assert policy.type.case is Casing.CAMEL
    assert policy.type.enum == ("fix",)
    assert policy.scope.required is True


def test_explicit_path_alone_when_nothing_discovered(tmp_path: Path, write_config) -> None:
    override = write_config(tmp_path / "other", '[type]\ncase = "camel"\n', name="custom.toml")

    policy = load_policy(override, cwd=tmp_path)

    assert policy.type.case is Casing.CAMEL
    assert policy.scope == PolicyConfig().scope


def test_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_policy(tmp_path / "nope.toml", cwd=tmp_path)


def test_malformed_toml(tmp_path: Path, write_config) -> None:
    path = write_config(tmp_path, "[type\nenum = ")

    with pytest.raises(ConfigError, match="Failed to load configuration"):
        load_policy(path, cwd=tmp_path)


def test_invalid_value_in_file_names_the_file(tmp_path: Path, write_config) -> None:
    path = write_config(tmp_path, '[type]\ncase = "shouting"\n')

    with pytest.raises(ConfigError) as excinfo:
        load_policy(path, cwd=tmp_path)

    assert str(path) in str(excinfo.value)
    assert "type.case" in str(excinfo.value)
