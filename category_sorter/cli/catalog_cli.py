"""
CLI commands for inspecting the category catalog.
"""

from pathlib import Path
from typing import Tuple

import click
from rich.console import Console
from rich.table import Table

from ..core.aliases import DEFAULT_ALIASES
from ..core.categories import DEFAULT_CATALOG

console = Console()


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
def classify(paths: Tuple[Path, ...]) -> None:
    """Show the category of each file in PATHS (files need not exist)."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("File", style="cyan")
    table.add_column("Category", style="green")

    for path in paths:
        table.add_row(str(path), DEFAULT_CATALOG.classify(path))

    console.print(table)


@click.command()
@click.option(
    "--aliases",
    "show_aliases",
    is_flag=True,
    default=False,
    help="Also list the folder names recognized for each category",
)
def categories(show_aliases: bool) -> None:
    """List every category with its extensions."""
    table = Table(title="Categories", show_lines=show_aliases)
    table.add_column("Category", style="bold cyan")
    table.add_column("Extensions", style="green")
    if show_aliases:
        table.add_column("Folder aliases", style="dim")

    for category in sorted(DEFAULT_CATALOG.categories):
        extensions = ", ".join(sorted(DEFAULT_CATALOG.extensions_for(category)))
        if show_aliases:
            aliases = ", ".join(sorted(DEFAULT_ALIASES.aliases_for(category)))
            table.add_row(category, extensions, aliases or "-")
        else:
            table.add_row(category, extensions)

    console.print(table)
    console.print(
        f"[dim]{len(DEFAULT_CATALOG)} categories; "
        "anything else is sorted into 'Others'.[/dim]"
    )
