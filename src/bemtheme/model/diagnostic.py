"""Diagnostic model: structured lint messages for a themed tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """Ordering key: INFO < WARNING < ERROR."""
        return ("INFO", "WARNING", "ERROR").index(self.value)


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a markup tree and its theme.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        tag: The tag specifier involved, if applicable.
        path: Child indices from the root to the node involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    tag: str | None = None
    path: tuple[int, ...] | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.path is not None:
            location = f" [path={'/'.join(str(i) for i in self.path) or 'root'}]"
        elif self.tag:
            location = f" [tag={self.tag}]"
        return f"{self.severity.value}{location}: {self.message}"
