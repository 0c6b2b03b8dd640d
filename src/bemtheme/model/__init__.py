"""bemtheme model layer -- public type re-exports."""

from bemtheme.model.diagnostic import Diagnostic, Severity
from bemtheme.model.markup import is_node, normalize_classes, split_node, walk
from bemtheme.model.theme import check_theme, classes_for

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # markup
    "is_node",
    "split_node",
    "normalize_classes",
    "walk",
    # theme
    "check_theme",
    "classes_for",
]
