from bemtheme.cli.main import cli

__all__ = ["cli"]
