"""
CLI command for organizing a directory.

Sorts every file below a root directory into category folders.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..core.config import settings
from ..core.types import OrganizeStatus, TransferMode
from ..organization import CategoryOrganizer, OrganizationReport
from ..shared import format_bytes, setup_logging

console = Console()


@click.command()
@click.argument("root", type=click.Path(path_type=Path))
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in TransferMode], case_sensitive=False),
    default=settings.transfer_mode.value,
    show_default=True,
    help="atomic renames files (same drive only); fallback copies then deletes",
)
@click.option(
    "--no-verify",
    is_flag=True,
    default=False,
    help="Skip checksum verification of fallback copies",
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Retry in fallback mode without asking if an atomic move fails",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
def organize(root: Path, mode: str, no_verify: bool, yes: bool, verbose: bool) -> None:
    """
    Organize the files below ROOT into category folders.

    Files are sorted by extension into folders such as "Image Files" or
    "PDF Files". Existing folders with familiar names ("pics", "Photos",
    "music") are renamed to the matching category instead of creating a
    second folder next to them. Nothing is ever overwritten: name clashes
    get a "(1)", "(2)", ... suffix.

    \b
    Examples:
        # Sort a downloads folder
        category-sorter organize ~/Downloads

        # Moving between drives: copy then delete
        category-sorter organize /mnt/usb/inbox --mode fallback

    \b
    Running the command again is safe: files already in their category
    folder are left untouched.
    """
    setup_logging(verbose, log_format=settings.log_format)

    try:
        organizer = CategoryOrganizer(verify_copies=False if no_verify else None)
        transfer_mode = TransferMode(mode.lower())

        with console.status(f"Organizing {root}..."):
            status = organizer.organize(root, transfer_mode)

        retried = False
        if status == OrganizeStatus.ATOMIC_TRANSFER_FAILED:
            console.print(f"[yellow]⚠ {status.message}[/yellow]")
            if yes or click.confirm("Retry in fallback mode?", default=True):
                atomic_report = organizer.report
                with console.status(f"Organizing {root} (fallback mode)..."):
                    status = organizer.organize(root, TransferMode.FALLBACK)
                organizer.report.carry_over(atomic_report)
                retried = True

        _display_result(organizer.report, retried)

    except Exception as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if status != OrganizeStatus.SUCCESS:
        sys.exit(1)


def _display_result(report: OrganizationReport, retried: bool = False) -> None:
    """Display the result of a run, including an atomic run before a retry."""
    if report.status == OrganizeStatus.SUCCESS:
        console.print(f"\n[green]✓ {report.status.message}[/green]\n")
    else:
        console.print(f"\n[red]✗ {report.status.message}[/red]")
        if report.failed_path is not None:
            console.print(f"  [dim]Stopped at: {report.failed_path}[/dim]")
        console.print()

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    mode = "atomic, then fallback" if retried else report.mode.value
    table.add_row("Mode", mode)
    table.add_row("Directories visited", str(report.directories_visited))
    table.add_row("Files moved", str(report.files_moved))
    table.add_row("Already in place", str(report.files_in_place))
    table.add_row("Folders renamed", str(report.folders_renamed))
    table.add_row("Data moved", format_bytes(report.bytes_moved))

    console.print(table)
