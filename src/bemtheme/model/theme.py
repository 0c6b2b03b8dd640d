"""Theme mapping model: tag specifier -> ordered class names."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from bemtheme.errors import InvalidThemeError

ThemeMap = Mapping[str, tuple[str, ...]]


def _entry_classes(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, str):
                raise InvalidThemeError(
                    f"Theme entry {key!r} contains a non-string class: {item!r}",
                    key=key,
                )
        return tuple(value)
    raise InvalidThemeError(
        f"Theme entry {key!r} must be a sequence of class names, "
        f"got {type(value).__name__}",
        key=key,
    )


def check_theme(theme_map: Any) -> ThemeMap:
    """Check *theme_map* against the theme contract.

    Returns a read-only copy with every entry normalised to a tuple of class
    names. The caller's mapping is never modified.
    """
    if not isinstance(theme_map, Mapping):
        raise InvalidThemeError(
            f"Theme must be a mapping, got {type(theme_map).__name__}"
        )
    entries: dict[str, tuple[str, ...]] = {}
    for key, value in theme_map.items():
        if not isinstance(key, str):
            raise InvalidThemeError(
                f"Theme keys must be tag specifier strings, got {key!r}"
            )
        entries[key] = _entry_classes(key, value)
    return MappingProxyType(entries)


def classes_for(theme: ThemeMap, tag: str) -> tuple[str, ...]:
    """Return the classes *theme* contributes to *tag*, or ``()``."""
    return theme.get(tag, ())
