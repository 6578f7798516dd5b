"""
Core knowledge base: categories, aliases, status types and settings.
"""

from .aliases import CATEGORY_ALIASES, DEFAULT_ALIASES, AliasCatalog
from .categories import (
    CANONICAL_NAMES,
    CATEGORY_EXTENSIONS,
    DEFAULT_CATALOG,
    OTHERS_CATEGORY,
    ClassificationCatalog,
    classify,
    get_extension,
)
from .types import (
    DirectoryCreationStatus,
    OrganizeStatus,
    PathStatus,
    TransferMode,
    TransferOutcome,
)

__all__ = [
    "AliasCatalog",
    "CATEGORY_ALIASES",
    "DEFAULT_ALIASES",
    "CANONICAL_NAMES",
    "CATEGORY_EXTENSIONS",
    "DEFAULT_CATALOG",
    "OTHERS_CATEGORY",
    "ClassificationCatalog",
    "classify",
    "get_extension",
    "DirectoryCreationStatus",
    "OrganizeStatus",
    "PathStatus",
    "TransferMode",
    "TransferOutcome",
]
