"""Settings shared by the command-line front end."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BemthemeConfig:
    """CLI settings, built once by the command group and read by subcommands.

    ``class_key`` is the attribute holding class names, ``indent`` the JSON
    indentation for ``apply`` output, and ``log_level`` the root logging level.
    """

    class_key: str = "class"
    indent: int = 2
    log_level: str = "WARNING"
