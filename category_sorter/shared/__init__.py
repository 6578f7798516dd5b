"""
Shared utilities for category-sorter.
"""

from .fs_utils import compute_checksum, files_match, format_bytes, setup_logging

__all__ = [
    "compute_checksum",
    "files_match",
    "format_bytes",
    "setup_logging",
]
