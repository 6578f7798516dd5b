"""
Extension-based file classification.

This module is the knowledge base that answers one question: given a file,
which category does it belong to? It never touches the filesystem.

Supported extensions are listed once, in :data:`CATEGORY_EXTENSIONS`. The
reverse lookup table and the set of canonical folder names are derived from
it when a :class:`ClassificationCatalog` is built.
"""

import os
from pathlib import PurePath
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Union

# Returned for unknown extensions. Never a key of a catalog.
OTHERS_CATEGORY = "Others"

# Extensions are lowercase and carry no leading dot.
CATEGORY_EXTENSIONS: Dict[str, FrozenSet[str]] = {
    "Image Files": frozenset(
        {"jpg", "jpeg", "png", "gif", "bmp", "webp", "tiff", "svg", "ico", "heic"}
    ),
    "Video Files": frozenset(
        {"mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "mpeg", "mpg", "3gp", "m4v"}
    ),
    "Audio Files": frozenset(
        {"mp3", "wav", "aac", "flac", "ogg", "m4a", "wma", "opus", "aiff"}
    ),
    "Text Files": frozenset({"txt", "md", "log", "rtf", "nfo"}),
    "PDF Files": frozenset({"pdf"}),
    "Word Files": frozenset({"doc", "docx"}),
    "Excel Files": frozenset({"xls", "xlsx"}),
    "PowerPoint Files": frozenset({"ppt", "pptx"}),
    "C Files": frozenset({"c"}),
    "C++ Files": frozenset({"cpp", "cc", "cxx"}),
    "Header Files": frozenset({"h", "hpp", "hh", "hxx"}),
    "Java Files": frozenset({"java"}),
    "Python Files": frozenset({"py"}),
    "JavaScript Files": frozenset({"js"}),
    "TypeScript Files": frozenset({"ts"}),
    "Web Files": frozenset({"html", "css", "scss"}),
    "Shell Scripts": frozenset({"sh"}),
    "Go Files": frozenset({"go"}),
    "Rust Files": frozenset({"rs"}),
    "PHP Files": frozenset({"php"}),
    "Data Files": frozenset({"csv", "json", "xml", "yaml", "yml"}),
    "Database Files": frozenset({"sql", "db", "sqlite", "sqlite3", "mdb"}),
    "Archive Files": frozenset(
        {"zip", "rar", "7z", "tar", "gz", "bz2", "xz", "tgz"}
    ),
    "Executable Files": frozenset({"exe", "msi", "bin", "app", "apk"}),
    "Library Files": frozenset({"dll", "so", "dylib", "a", "lib"}),
    "Config Files": frozenset({"ini", "conf", "cfg", "env"}),
}


def get_extension(path: Union[str, "os.PathLike[str]"]) -> str:
    """
    Extract the lowercase extension of a path's final component.

    A dotfile such as ``.bashrc`` and a name ending in a bare dot have no
    extension.

    Args:
        path: File path or file name

    Returns:
        Extension without the leading dot, or an empty string
    """
    return PurePath(path).suffix.lower().lstrip(".")


class ClassificationCatalog:
    """
    Immutable category -> extensions table with its derived lookups.

    Attributes:
        categories: Read-only mapping of category name to its extensions
        extension_lookup: Read-only mapping of extension to category name
        canonical_names: Every category name, i.e. every valid folder name
    """

    def __init__(self, table: Mapping[str, Iterable[str]]):
        """
        Build the catalog and its reverse lookup.

        Args:
            table: Category name -> extensions (lowercase, no leading dot)

        Raises:
            ValueError: If the table uses the reserved "Others" category
        """
        if OTHERS_CATEGORY in table:
            raise ValueError(f"'{OTHERS_CATEGORY}' is reserved and cannot be a category")

        categories: Dict[str, FrozenSet[str]] = {}
        lookup: Dict[str, str] = {}
        for category, extensions in table.items():
            normalized = frozenset(ext.lower().lstrip(".") for ext in extensions)
            categories[category] = normalized
            for extension in normalized:
                # Later categories win; curated tables never hit this.
                lookup[extension] = category

        self.categories: Mapping[str, FrozenSet[str]] = MappingProxyType(categories)
        self.extension_lookup: Mapping[str, str] = MappingProxyType(lookup)
        self.canonical_names: FrozenSet[str] = frozenset(categories)

    def classify(self, path: Union[str, "os.PathLike[str]"]) -> str:
        """
        Determine the category of a file from its extension.

        Never fails: unknown, missing or unparsable extensions classify as
        :data:`OTHERS_CATEGORY`.

        Args:
            path: Full file path or bare file name

        Returns:
            Category name or "Others"
        """
        try:
            extension = get_extension(path)
        except TypeError:
            return OTHERS_CATEGORY

        if not extension:
            return OTHERS_CATEGORY

        return self.extension_lookup.get(extension, OTHERS_CATEGORY)

    def is_canonical(self, name: str) -> bool:
        """Check whether a folder name is exactly a category name."""
        return name in self.canonical_names

    def extensions_for(self, category: str) -> FrozenSet[str]:
        """Return the extensions of a category (empty for unknown ones)."""
        return self.categories.get(category, frozenset())

    def __contains__(self, category: object) -> bool:
        return category in self.canonical_names

    def __len__(self) -> int:
        return len(self.categories)

    def __repr__(self) -> str:
        return f"ClassificationCatalog({len(self)} categories)"


DEFAULT_CATALOG = ClassificationCatalog(CATEGORY_EXTENSIONS)
CANONICAL_NAMES: FrozenSet[str] = DEFAULT_CATALOG.canonical_names


def classify(path: Union[str, "os.PathLike[str]"]) -> str:
    """Classify a file with the built-in catalog."""
    return DEFAULT_CATALOG.classify(path)
