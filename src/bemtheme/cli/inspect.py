"""CLI command: bemtheme inspect -- list the entries of a theme."""

from __future__ import annotations

import sys

import click

from bemtheme.errors import ThemeError
from bemtheme.loader import load_theme


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
def inspect(themefile: str) -> None:
    """Load THEMEFILE and list each tag specifier with its classes."""
    try:
        theme = load_theme(themefile)
    except ThemeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Entries: {len(theme)}")
    for tag in sorted(theme):
        click.echo(f"  {tag}  {' '.join(theme[tag])}")
