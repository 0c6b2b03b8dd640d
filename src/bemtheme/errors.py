"""Error hierarchy for theme application."""
from __future__ import annotations

from typing import Any


class ThemeError(Exception):
    """Base error for all bemtheme errors."""


class InvalidThemeError(ThemeError):
    """The theme mapping is not a mapping, or one of its entries is unusable."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class MalformedNodeError(ThemeError):
    """A value presented as a markup node lacks a usable tag specifier."""

    def __init__(
        self, message: str, *, node: Any = None, path: tuple[int, ...] = ()
    ) -> None:
        self.node = node
        self.path = path
        location = "/".join(str(i) for i in path) or "root"
        super().__init__(f"{message} (at {location})")


class ThemeLoadError(ThemeError):
    """A theme or markup file could not be read or decoded."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
