"""bemtheme: build-time theme application for BEM-named markup trees."""
from __future__ import annotations

__version__ = "0.1.0"

from bemtheme.engine import apply_theme  # noqa: E402
from bemtheme.errors import (  # noqa: E402
    InvalidThemeError,
    MalformedNodeError,
    ThemeError,
    ThemeLoadError,
)

__all__ = [
    "__version__",
    "apply_theme",
    "ThemeError",
    "InvalidThemeError",
    "MalformedNodeError",
    "ThemeLoadError",
]
