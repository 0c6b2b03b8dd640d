"""Theme application transform: binds a theme mapping to a build step."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bemtheme.engine import apply_theme
from bemtheme.model.theme import check_theme


class ThemeApplicationTransform:
    """Apply one theme mapping to every tree passed through :meth:`apply`.

    The theme is checked once, when the transform is built, so a bad theme
    fails at build time instead of on first use.
    """

    def __init__(self, theme_map: Mapping[str, Any], *, class_key: str = "class") -> None:
        self.theme = check_theme(theme_map)
        self.class_key = class_key

    def apply(self, tree: Any) -> Any:
        return apply_theme(tree, self.theme, class_key=self.class_key)
