"""bemtheme CLI entry point: Click group with subcommands."""

import logging

import click

from bemtheme import __version__
from bemtheme.config import BemthemeConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="bemtheme")
@click.option(
    "--class-key",
    default=BemthemeConfig.class_key,
    show_default=True,
    help="Attribute that holds class names",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=BemthemeConfig.log_level,
    show_default=True,
    help="Logging level",
)
@click.option("--verbose", "-v", is_flag=True, help="Same as --log-level DEBUG")
@click.pass_context
def cli(ctx: click.Context, class_key: str, log_level: str, verbose: bool) -> None:
    """bemtheme - apply theme classes to BEM-named markup trees."""
    config = BemthemeConfig(
        class_key=class_key,
        log_level="DEBUG" if verbose else log_level.upper(),
    )
    ctx.obj = config
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )


# Import and register subcommands
from bemtheme.cli.apply import apply  # noqa: E402
from bemtheme.cli.validate import validate  # noqa: E402
from bemtheme.cli.inspect import inspect  # noqa: E402

cli.add_command(apply)
cli.add_command(validate)
cli.add_command(inspect)
