"""
Main CLI entry point for category-sorter.
"""

import click

from .. import __version__
from .catalog_cli import categories, classify
from .organize import organize


@click.group()
@click.version_option(__version__, prog_name="category-sorter")
def cli() -> None:
    """Sort a directory tree into category folders by file extension."""


cli.add_command(organize)
cli.add_command(classify)
cli.add_command(categories)


if __name__ == "__main__":
    cli()
