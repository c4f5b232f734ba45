from __future__ import annotations

import pytest

from cutrel.core.structured import as_str_dict, get_str, get_str_list, get_table, is_str_dict


def test_is_str_dict() -> None:
    assert is_str_dict({"a": 1})
    assert not is_str_dict({1: "a"})
    assert not is_str_dict(["a"])


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict("a") is None


def test_get_table() -> None:
    assert get_table({"t": {"k": "v"}}, "t") == {"k": "v"}
    assert get_table({}, "t") is None
    with pytest.raises(TypeError):
        get_table({"t": 1}, "t")


def test_get_str_strips_and_blanks_to_none() -> None:
    assert get_str({"k": "  v "}, "k") == "v"
    assert get_str({"k": "   "}, "k") is None
    assert get_str({}, "k") is None


def test_get_str_list() -> None:
    assert get_str_list({"k": ["a", "b"]}, "k") == ("a", "b")
    assert get_str_list({"k": []}, "k") is None
    with pytest.raises(TypeError):
        get_str_list({"k": ["a", 1]}, "k")
