"""Lint rules for a markup tree and the theme applied to it.

Each rule is a function taking ``(tree, theme_map, class_key)`` and returning
a list of Diagnostic objects. Rules never raise on malformed input; they
report it, or skip the subtree when another rule already reports it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from typing import Any

from bemtheme.errors import InvalidThemeError, MalformedNodeError
from bemtheme.model.diagnostic import Diagnostic, Severity
from bemtheme.model.markup import Visit, normalize_classes, walk
from bemtheme.model.theme import check_theme


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _usable_theme(theme_map: Any) -> dict[str, tuple[str, ...]]:
    """Return only the entries of *theme_map* that pass the theme contract."""
    if not isinstance(theme_map, Mapping):
        return {}
    usable: dict[str, tuple[str, ...]] = {}
    for key, value in theme_map.items():
        try:
            usable.update(check_theme({key: value}))
        except InvalidThemeError:
            continue
    return usable


def _well_formed_nodes(tree: Any) -> Iterator[Visit]:
    # Malformed subtrees are reported by check_tree_well_formed.
    return walk(tree, on_malformed=lambda exc: None)


def _existing_classes(attrs: Mapping[str, Any] | None, class_key: str) -> list[str]:
    if attrs is None:
        return []
    try:
        return normalize_classes(attrs.get(class_key))
    except MalformedNodeError:
        return []


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_theme_entries(tree: Any, theme_map: Any, class_key: str) -> list[Diagnostic]:
    """The theme must be a mapping of tag specifiers to class sequences."""
    if not isinstance(theme_map, Mapping):
        return [
            Diagnostic(
                rule="check_theme_entries",
                severity=Severity.ERROR,
                message=f"Theme must be a mapping, got {type(theme_map).__name__}.",
            )
        ]
    diagnostics: list[Diagnostic] = []
    for key, value in theme_map.items():
        try:
            check_theme({key: value})
        except InvalidThemeError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_theme_entries",
                    severity=Severity.ERROR,
                    message=str(exc),
                    tag=key if isinstance(key, str) else None,
                    fix="Map each tag specifier to a list of class name strings.",
                )
            )
    return diagnostics


def check_tree_well_formed(tree: Any, theme_map: Any, class_key: str) -> list[Diagnostic]:
    """Every node needs a string tag specifier and a usable class value."""
    diagnostics: list[Diagnostic] = []

    def report_malformed(exc: MalformedNodeError) -> None:
        diagnostics.append(
            Diagnostic(
                rule="check_tree_well_formed",
                severity=Severity.ERROR,
                message="Node has no string tag specifier.",
                path=exc.path,
                fix="Start every node with a tag specifier such as 'div.block__element'.",
            )
        )

    for path, tag, attrs, _children in walk(tree, on_malformed=report_malformed):
        if attrs is None:
            continue
        try:
            normalize_classes(attrs.get(class_key))
        except MalformedNodeError:
            diagnostics.append(
                Diagnostic(
                    rule="check_tree_well_formed",
                    severity=Severity.ERROR,
                    message=f"Node '{tag}' has an unusable '{class_key}' value.",
                    tag=tag,
                    path=path,
                    fix="Use a string or a list of strings for classes.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Coverage rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_unused_theme_keys(tree: Any, theme_map: Any, class_key: str) -> list[Diagnostic]:
    """Theme entries that match no node in the tree are probably stale."""
    tags = {tag for _path, tag, _attrs, _children in _well_formed_nodes(tree)}
    return [
        Diagnostic(
            rule="check_unused_theme_keys",
            severity=Severity.WARNING,
            message=f"Theme entry '{key}' matches no node.",
            tag=key,
            fix="Remove the entry or check the tag specifier for typos.",
        )
        for key in _usable_theme(theme_map)
        if key not in tags
    ]


def check_duplicate_classes(tree: Any, theme_map: Any, class_key: str) -> list[Diagnostic]:
    """Report nodes whose themed class list would repeat a class."""
    theme = _usable_theme(theme_map)
    diagnostics: list[Diagnostic] = []
    for path, tag, attrs, _children in _well_formed_nodes(tree):
        merged = list(theme.get(tag, ())) + _existing_classes(attrs, class_key)
        repeated = sorted(name for name, count in Counter(merged).items() if count > 1)
        if repeated:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_classes",
                    severity=Severity.INFO,
                    message=f"Node '{tag}' would carry duplicate classes: {', '.join(repeated)}.",
                    tag=tag,
                    path=path,
                )
            )
    return diagnostics


def check_unthemed_bem_nodes(tree: Any, theme_map: Any, class_key: str) -> list[Diagnostic]:
    """Report nodes with class tokens in their tag but no theme entry."""
    theme = _usable_theme(theme_map)
    return [
        Diagnostic(
            rule="check_unthemed_bem_nodes",
            severity=Severity.INFO,
            message=f"Node '{tag}' has no theme entry.",
            tag=tag,
            path=path,
        )
        for path, tag, _attrs, _children in _well_formed_nodes(tree)
        if "." in tag and tag not in theme
    ]


ALL_RULES = [
    check_theme_entries,
    check_tree_well_formed,
    check_unused_theme_keys,
    check_duplicate_classes,
    check_unthemed_bem_nodes,
]
