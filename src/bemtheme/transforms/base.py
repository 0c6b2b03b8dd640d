"""Base protocol for markup tree transforms, and the pipeline that runs them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class Transform(Protocol):
    """A tree-to-tree transformation step."""

    def apply(self, tree: Any) -> Any: ...


def apply_transforms(tree: Any, transforms: Iterable[Transform]) -> Any:
    """Run each transform over *tree* in order and return the result."""
    for t in transforms:
        tree = t.apply(tree)
    return tree
