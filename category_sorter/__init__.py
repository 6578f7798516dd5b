"""
category-sorter: sort a directory tree into category folders by file extension.
"""

from .core.categories import classify
from .core.types import OrganizeStatus, TransferMode
from .organization import CategoryOrganizer, OrganizationReport, organize

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "classify",
    "organize",
    "CategoryOrganizer",
    "OrganizationReport",
    "OrganizeStatus",
    "TransferMode",
]
