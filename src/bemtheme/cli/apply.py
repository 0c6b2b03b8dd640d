"""CLI command: bemtheme apply -- theme a markup tree."""

from __future__ import annotations

import json
import sys
from dataclasses import replace
from pathlib import Path

import click

from bemtheme.config import BemthemeConfig
from bemtheme.engine import apply_theme
from bemtheme.errors import ThemeError
from bemtheme.loader import load_theme, load_tree


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
@click.argument("treefile", type=click.Path(exists=True))
@click.option("--output", "-o", default=None, help="Write the themed tree here instead of stdout")
@click.option("--class-key", default=None, help="Attribute that holds class names")
@click.option("--indent", default=None, type=int, help="JSON indentation")
@click.pass_obj
def apply(
    config: BemthemeConfig,
    themefile: str,
    treefile: str,
    output: str | None,
    class_key: str | None,
    indent: int | None,
) -> None:
    """Apply THEMEFILE to the markup tree in TREEFILE and print the result as JSON."""
    if class_key is not None:
        config = replace(config, class_key=class_key)
    if indent is not None:
        config = replace(config, indent=indent)

    try:
        theme = load_theme(themefile)
        tree = load_tree(treefile)
        themed = apply_theme(tree, theme, class_key=config.class_key)
    except ThemeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rendered = json.dumps(themed, indent=config.indent, ensure_ascii=False)
    if output:
        Path(output).write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(rendered)
