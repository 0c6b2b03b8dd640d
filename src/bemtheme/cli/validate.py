"""CLI command: bemtheme validate -- lint a markup tree against a theme."""

from __future__ import annotations

import sys
from collections import Counter

import click

from bemtheme.config import BemthemeConfig
from bemtheme.errors import ThemeLoadError
from bemtheme.loader import load_tree, read_theme_data
from bemtheme.model.diagnostic import Severity
from bemtheme.validation import validate as run_validate


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
@click.argument("treefile", type=click.Path(exists=True))
@click.option("--class-key", default=None, help="Attribute that holds class names")
@click.option(
    "--min-severity",
    type=click.Choice([s.value for s in Severity], case_sensitive=False),
    default=Severity.INFO.value,
    show_default=True,
    help="Hide diagnostics below this level",
)
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors")
@click.pass_obj
def validate(
    config: BemthemeConfig,
    themefile: str,
    treefile: str,
    class_key: str | None,
    min_severity: str,
    strict: bool,
) -> None:
    """Lint TREEFILE against THEMEFILE.

    The theme file is read without checking its entries, so bad entries show
    up as diagnostics. Exits 1 if any error is found, or any warning under
    --strict.
    """
    try:
        theme = read_theme_data(themefile)
        tree = load_tree(treefile)
    except ThemeLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # Failure is decided on every finding, whatever --min-severity hides.
    diagnostics = run_validate(tree, theme, class_key=class_key or config.class_key)
    counts = Counter(d.severity for d in diagnostics)
    floor = Severity(min_severity.upper())
    shown = [d for d in diagnostics if d.severity.rank >= floor.rank]

    for diag in shown:
        click.echo(str(diag))
    if shown:
        click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )

    fail_at = Severity.WARNING if strict else Severity.ERROR
    if any(d.severity.rank >= fail_at.rank for d in diagnostics):
        sys.exit(1)
