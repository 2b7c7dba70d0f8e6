"""Policy configuration: schema and TOML loading."""

from .load import CONFIG_FILENAMES, load_policy, merge_policy, policy_from_dict
from .schema import UNBOUNDED, WILDCARD, PolicyConfig, ScopePolicy, TypePolicy

__all__ = [
    "CONFIG_FILENAMES",
    "load_policy",
    "merge_policy",
    "policy_from_dict",
    "UNBOUNDED",
    "WILDCARD",
    "PolicyConfig",
    "ScopePolicy",
    "TypePolicy",
]
