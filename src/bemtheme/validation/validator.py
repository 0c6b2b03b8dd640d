"""Run the lint rules over a tree and its theme."""

from __future__ import annotations

from typing import Any, Callable

from bemtheme.errors import ThemeError
from bemtheme.model.diagnostic import Diagnostic, Severity
from bemtheme.validation.rules import ALL_RULES

RuleFunc = Callable[[Any, Any, str], list[Diagnostic]]


class ValidationError(ThemeError):
    """Raised when validation finds diagnostics at or above the failure level."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        super().__init__(
            f"Validation failed with {len(diagnostics)} finding(s): "
            + "; ".join(str(d) for d in diagnostics)
        )


def validate(
    tree: Any,
    theme_map: Any,
    *,
    class_key: str = "class",
    min_severity: Severity = Severity.INFO,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Lint *tree* against *theme_map*.

    *class_key* must match the attribute the tree keeps its classes under,
    the same value later passed to :func:`~bemtheme.engine.apply_theme`.
    Diagnostics below *min_severity* are dropped.
    """
    rules: list[RuleFunc] = [*ALL_RULES, *(extra_rules or ())]
    return [
        diag
        for rule in rules
        for diag in rule(tree, theme_map, class_key)
        if diag.severity.rank >= min_severity.rank
    ]


def validate_or_raise(
    tree: Any,
    theme_map: Any,
    *,
    class_key: str = "class",
    strict: bool = False,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Lint and raise :class:`ValidationError` on errors.

    With *strict*, warnings fail validation too. Returns the remaining
    diagnostics when nothing fails.
    """
    diagnostics = validate(tree, theme_map, class_key=class_key, extra_rules=extra_rules)
    fail_at = Severity.WARNING if strict else Severity.ERROR
    failures = [d for d in diagnostics if d.severity.rank >= fail_at.rank]
    if failures:
        raise ValidationError(failures)
    return diagnostics
