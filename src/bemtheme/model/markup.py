"""Markup tree model: hiccup-style nested sequences.

A node is a list (or tuple) shaped like::

    ["div.book-card", {"class": ["mine"], "id": "b1"}, child, child, ...]

The first element is the tag specifier. The second element is the attribute
map when it is a mapping; otherwise every element after the tag is a child.
Children are nodes, scalars, or ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from bemtheme.errors import MalformedNodeError

Path = tuple[int, ...]


def is_node(value: Any) -> bool:
    """Return True if *value* has the shape of a markup node."""
    return isinstance(value, (list, tuple))


def split_node(
    node: list[Any] | tuple[Any, ...], path: Path = ()
) -> tuple[str, Mapping[str, Any] | None, list[Any]]:
    """Split *node* into its tag specifier, attribute map and children.

    Raises :class:`MalformedNodeError` if the node is empty or its first
    element is not a string.
    """
    if not node:
        raise MalformedNodeError("Empty node has no tag specifier", node=node, path=path)
    tag = node[0]
    if not isinstance(tag, str):
        raise MalformedNodeError(
            f"Tag specifier must be a string, got {type(tag).__name__}",
            node=node,
            path=path,
        )
    rest = list(node[1:])
    if rest and isinstance(rest[0], Mapping):
        return tag, rest[0], rest[1:]
    return tag, None, rest


def normalize_classes(value: Any, *, node: Any = None, path: Path = ()) -> list[str]:
    """Normalise a pre-existing class value to a list of class names.

    ``None`` means no classes. A string is split on whitespace, the way a
    browser reads a ``class`` attribute. A list or tuple must hold strings.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, str):
                raise MalformedNodeError(
                    f"Class names must be strings, got {type(item).__name__}",
                    node=node,
                    path=path,
                )
        return list(value)
    raise MalformedNodeError(
        f"Class value must be a string or a sequence of strings, got {type(value).__name__}",
        node=node,
        path=path,
    )


Visit = tuple[Path, str, Mapping[str, Any] | None, list[Any]]


def walk(
    node: Any,
    path: Path = (),
    on_malformed: Callable[[MalformedNodeError], None] | None = None,
) -> Iterator[Visit]:
    """Yield ``(path, tag, attrs, children)`` for every node, depth first.

    Scalars and ``None`` are skipped. A node without a usable tag raises
    :class:`MalformedNodeError`, unless *on_malformed* is given: then the
    error is handed to it and that subtree is skipped.
    """
    if not is_node(node):
        return
    try:
        tag, attrs, children = split_node(node, path)
    except MalformedNodeError as exc:
        if on_malformed is None:
            raise
        on_malformed(exc)
        return
    yield path, tag, attrs, children
    for index, child in enumerate(children):
        yield from walk(child, path + (index,), on_malformed)
