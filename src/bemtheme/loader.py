"""Read theme mappings and markup trees from disk.

Themes may be JSON objects or TOML tables. A TOML theme may keep its entries
under a ``[theme]`` table::

    [theme]
    "div.book-card" = ["rounded", "shadow-md"]

Markup trees are JSON arrays in the node shape described in
:mod:`bemtheme.model.markup`.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from bemtheme.errors import ThemeLoadError
from bemtheme.model.theme import ThemeMap, check_theme

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ThemeLoadError(f"Cannot read {path}: {exc}", path=str(path)) from exc


def read_theme_data(path: str | Path) -> Any:
    """Decode a ``.json`` or ``.toml`` theme file without checking its entries."""
    path = Path(path)
    source = _read_text(path)
    try:
        if path.suffix == ".toml":
            data: Any = tomllib.loads(source)
            if isinstance(data.get("theme"), dict):
                data = data["theme"]
        else:
            data = json.loads(source)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ThemeLoadError(f"Cannot decode theme {path}: {exc}", path=str(path)) from exc
    return data


def load_theme(path: str | Path) -> ThemeMap:
    """Load and check a theme mapping from a ``.json`` or ``.toml`` file."""
    theme = check_theme(read_theme_data(path))
    logger.info("Loaded theme %s (%d entries)", path, len(theme))
    return theme


def load_tree(path: str | Path) -> Any:
    """Load a markup tree from a JSON file."""
    path = Path(path)
    source = _read_text(path)
    try:
        tree = json.loads(source)
    except json.JSONDecodeError as exc:
        raise ThemeLoadError(f"Cannot decode markup {path}: {exc}", path=str(path)) from exc
    logger.info("Loaded markup tree %s", path)
    return tree
