"""
Organization module for sorting files into category folders.

This module validates the root path, normalizes alias folders, decides where
each file belongs and moves it without ever overwriting an existing file.
"""

from .normalizer import find_alias_folders, normalize_level
from .organizer import CategoryOrganizer, OrganizationReport, organize
from .placement import (
    PlacementDecision,
    decide_placement,
    translate_path_status,
    translate_transfer,
)
from .transfer import (
    atomic_transfer,
    create_directory,
    fallback_transfer,
    transfer,
    unique_destination,
)
from .validation import validate_path

__all__ = [
    "CategoryOrganizer",
    "OrganizationReport",
    "organize",
    "PlacementDecision",
    "decide_placement",
    "translate_path_status",
    "translate_transfer",
    "find_alias_folders",
    "normalize_level",
    "atomic_transfer",
    "create_directory",
    "fallback_transfer",
    "transfer",
    "unique_destination",
    "validate_path",
]
