"""Theme application: merge theme classes into a markup tree.

Lookup is by the node's full tag specifier, verbatim. ``div.card`` and
``div.card.featured`` are different keys; nothing is decomposed or matched
by prefix.

Merged class order is theme classes first, then the node's own classes.
The merge is a concatenation, so applying the same theme twice repeats the
theme classes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bemtheme.model.markup import Path, is_node, normalize_classes, split_node
from bemtheme.model.theme import ThemeMap, check_theme, classes_for

__all__ = ["apply_theme"]

logger = logging.getLogger(__name__)


def apply_theme(node: Any, theme_map: Mapping[str, Any], *, class_key: str = "class") -> Any:
    """Return a themed copy of *node*.

    Non-node values (scalars, ``None``) are returned unchanged. Nodes are
    rebuilt as fresh lists; neither *node* nor *theme_map* is modified.

    Raises:
        InvalidThemeError: *theme_map* is not a mapping of tag specifiers to
            class sequences.
        MalformedNodeError: a node is empty, has a non-string tag, or carries
            an unusable class value.
    """
    theme = check_theme(theme_map)
    return _apply(node, theme, class_key, ())


def _apply(node: Any, theme: ThemeMap, class_key: str, path: Path) -> Any:
    if not is_node(node):
        return node

    tag, attrs, children = split_node(node, path)
    contributed = classes_for(theme, tag)

    existing: list[str] = []
    if attrs is not None:
        existing = normalize_classes(attrs.get(class_key), node=node, path=path)
    merged = list(contributed) + existing

    themed: list[Any] = [tag]
    if attrs is not None:
        new_attrs = {k: _copy_value(v) for k, v in attrs.items() if k != class_key}
        if class_key in attrs or merged:
            new_attrs[class_key] = merged
        themed.append(_reorder(attrs, new_attrs))
    elif merged:
        themed.append({class_key: merged})

    if contributed:
        logger.debug("Themed %s with %d class(es)", tag, len(contributed))

    for index, child in enumerate(children):
        themed.append(_apply(child, theme, class_key, path + (index,)))
    return themed


def _copy_value(value: Any) -> Any:
    """Rebuild plain containers; every other value is passed through as is."""
    if isinstance(value, Mapping):
        return {k: _copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_copy_value(v) for v in value)
    return value


def _reorder(original: Mapping[str, Any], updated: dict[str, Any]) -> dict[str, Any]:
    """Return *updated* with keys in *original*'s order, new keys last."""
    ordered = {k: updated[k] for k in original if k in updated}
    for k, v in updated.items():
        ordered.setdefault(k, v)
    return ordered
