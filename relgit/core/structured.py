"""Helpers for reading untyped TOML tables.

Use these at the config boundary; they validate at runtime and narrow
types for the checker.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, keeping it verbatim.

    Returns None if missing or not a str. Empty strings are kept: an empty
    ``push_repo`` or ``commit_args`` is a meaningful setting.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value, or None if missing or not a bool."""
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table from a mapping."""
    return as_str_dict(table.get(key))
