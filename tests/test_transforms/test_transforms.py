"""Tests for markup tree transforms."""

import pytest

from bemtheme.errors import InvalidThemeError
from bemtheme.transforms import ThemeApplicationTransform, apply_transforms


# ---------------------------------------------------------------------------
# ThemeApplicationTransform
# ---------------------------------------------------------------------------


class TestThemeApplication:
    def test_applies_theme(self):
        t = ThemeApplicationTransform({"div.card": ["shadow"]})
        assert t.apply(["div.card", "x"]) == ["div.card", {"class": ["shadow"]}, "x"]

    def test_bad_theme_fails_at_construction(self):
        with pytest.raises(InvalidThemeError):
            ThemeApplicationTransform({"div.card": 1})

    def test_theme_snapshot_taken(self):
        source = {"div.card": ["shadow"]}
        t = ThemeApplicationTransform(source)
        source["div.card"].append("late")
        assert t.apply(["div.card"]) == ["div.card", {"class": ["shadow"]}]

    def test_custom_class_key(self):
        t = ThemeApplicationTransform({"div.card": ["shadow"]}, class_key="className")
        assert t.apply(["div.card"]) == ["div.card", {"className": ["shadow"]}]

    def test_reusable_across_trees(self):
        t = ThemeApplicationTransform({"li.item": ["py-1"]})
        first = t.apply(["li.item", "a"])
        second = t.apply(["li.item", "b"])
        assert first == ["li.item", {"class": ["py-1"]}, "a"]
        assert second == ["li.item", {"class": ["py-1"]}, "b"]


# ---------------------------------------------------------------------------
# apply_transforms pipeline
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_runs_transforms_in_order(self):
        base = ThemeApplicationTransform({"div.card": ["base"]})
        brand = ThemeApplicationTransform({"div.card": ["brand"]})
        result = apply_transforms(["div.card", {"class": ["mine"]}], [base, brand])
        # Each pass prepends its classes ahead of whatever is already there.
        assert result[1]["class"] == ["brand", "base", "mine"]

    def test_no_transforms_returns_tree(self):
        tree = ["div.card"]
        assert apply_transforms(tree, []) is tree

    def test_custom_transform(self):
        class Upper:
            def apply(self, tree):
                if isinstance(tree, str):
                    return tree.upper()
                return [tree[0]] + [self.apply(c) for c in tree[1:]]

        theme = ThemeApplicationTransform({"p.note": ["italic"]})
        result = apply_transforms(["p.note", "hello"], [Upper(), theme])
        assert result == ["p.note", {"class": ["italic"]}, "HELLO"]
