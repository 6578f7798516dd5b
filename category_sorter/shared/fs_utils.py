"""
Filesystem helpers shared by the organizer and the CLI.
"""

import hashlib
import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


def compute_checksum(file_path: Path, algorithm: str = "sha256") -> Optional[str]:
    """
    Compute the checksum of a file, reading it in chunks.

    Args:
        file_path: Path to the file
        algorithm: Hash algorithm name understood by hashlib

    Returns:
        Hexadecimal checksum string, or None if the file cannot be read
    """
    try:
        hash_obj = hashlib.new(algorithm)

        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(65536), b""):
                hash_obj.update(chunk)

        return hash_obj.hexdigest()
    except OSError as e:
        logger.error(f"Error computing checksum for {file_path}: {e}")
        return None


def files_match(source: Path, copy: Path, algorithm: str = "sha256") -> bool:
    """
    Check that a copy has the same size and content as its source.

    Args:
        source: Original file
        copy: Copied file
        algorithm: Hash algorithm for the content comparison

    Returns:
        True if both files are readable and identical
    """
    try:
        if os.path.getsize(source) != os.path.getsize(copy):
            return False
    except OSError as e:
        logger.error(f"Error comparing {source} and {copy}: {e}")
        return False

    source_checksum = compute_checksum(source, algorithm)
    if source_checksum is None:
        return False

    return source_checksum == compute_checksum(copy, algorithm)


def format_bytes(size_bytes: int) -> str:
    """
    Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "2.50 GB")
    """
    if size_bytes == 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB", "TB"]
    unit_index = 0
    size = float(size_bytes)

    while size >= 1024.0 and unit_index < len(units) - 1:
        size /= 1024.0
        unit_index += 1

    return f"{size:.2f} {units[unit_index]}"


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_format: str = "%(message)s",
) -> None:
    """
    Route log records through a rich handler.

    Args:
        verbose: Log everything at DEBUG level instead of warnings only
        console: Console to write to (a new stderr console by default)
        log_format: Format string for the handler
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                console=console or Console(stderr=True),
                show_path=verbose,
            )
        ],
        force=True,
    )
