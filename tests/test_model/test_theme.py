"""Tests for the theme mapping model."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from bemtheme.errors import InvalidThemeError
from bemtheme.model.theme import check_theme, classes_for


class TestCheckTheme:
    def test_normalises_entries_to_tuples(self):
        theme = check_theme({"div.a": ["x", "y"], "div.b": "p q", "div.c": ()})
        assert dict(theme) == {"div.a": ("x", "y"), "div.b": ("p", "q"), "div.c": ()}

    def test_result_is_read_only(self):
        theme = check_theme({"div.a": ["x"]})
        with pytest.raises(TypeError):
            theme["div.b"] = ("y",)  # type: ignore[index]

    def test_source_not_modified(self):
        source = {"div.a": ["x"]}
        check_theme(source)
        assert source == {"div.a": ["x"]}

    def test_preserves_class_order(self):
        theme = check_theme(OrderedDict([("div.a", ["z", "a", "m"])]))
        assert theme["div.a"] == ("z", "a", "m")

    def test_not_a_mapping(self):
        with pytest.raises(InvalidThemeError, match="got list"):
            check_theme([("div.a", ["x"])])

    def test_bad_entry_names_key(self):
        with pytest.raises(InvalidThemeError) as exc_info:
            check_theme({"div.ok": ["x"], "div.bad": {"x": 1}})
        assert exc_info.value.key == "div.bad"

    def test_non_string_key(self):
        with pytest.raises(InvalidThemeError) as exc_info:
            check_theme({None: ["x"]})
        assert exc_info.value.key is None


class TestClassesFor:
    def test_known_tag(self):
        theme = check_theme({"div.a": ["x"]})
        assert classes_for(theme, "div.a") == ("x",)

    def test_unknown_tag(self):
        theme = check_theme({"div.a": ["x"]})
        assert classes_for(theme, "div.a.b") == ()
