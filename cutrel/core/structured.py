"""Typed accessors for untyped TOML data.

``tomllib`` hands back ``dict[str, Any]``; these helpers validate shapes at
the boundary so the rest of the code works with narrowed types.
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


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table, or None when absent.

    Raises:
        TypeError: If the key exists but is not a table.
    """
    value = table.get(key)
    if value is None:
        return None
    result = as_str_dict(value)
    if result is None:
        raise TypeError(f"[{key}] must be a table")
    return result


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string, stripped.

    Returns None if the key is missing or the value is blank.

    Raises:
        TypeError: If the key exists but is not a string.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    s = value.strip()
    return s or None


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a non-empty list of strings as a tuple.

    Raises:
        TypeError: If the key exists but is not a list of strings.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list of strings")
    items = cast(list[object], value)
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"'{key}' must be a list of strings")
        out.append(item)
    return tuple(out) or None
