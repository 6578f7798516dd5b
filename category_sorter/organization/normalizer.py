"""
Alias folder normalization for one directory level.

Renames user-made folders such as "pics" or "Photos" to their canonical
category name ("Image Files") so that files are gathered into an existing
folder instead of a new one being created beside it.

Only the first alias folder found for a category is renamed. Any further
alias folders of that category are left alone; merging them would mean
resolving file name collisions between folders the user kept apart.

Failures are absorbed: if a rename is refused, the folder simply keeps its
name and the run carries on.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Tuple, Union

from ..core.aliases import DEFAULT_ALIASES, AliasCatalog
from ..core.categories import DEFAULT_CATALOG, ClassificationCatalog

logger = logging.getLogger(__name__)


def find_alias_folders(
    directory: Path,
    catalog: ClassificationCatalog = DEFAULT_CATALOG,
    aliases: AliasCatalog = DEFAULT_ALIASES,
) -> Dict[str, Path]:
    """
    Pick the alias folder to rename for each category at one level.

    Subdirectories are considered in name order; symlinks are ignored.

    Args:
        directory: Directory whose immediate children are scanned
        catalog: Classification catalog (for canonical names)
        aliases: Alias catalog

    Returns:
        Canonical category name -> first alias folder found for it
    """
    chosen: Dict[str, Path] = {}

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.debug(f"Cannot scan {directory} for alias folders: {e}")
        return chosen

    for entry in entries:
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue

        if catalog.is_canonical(entry.name):
            continue

        category = aliases.lookup(entry.name)
        if category is not None and category not in chosen:
            chosen[category] = Path(entry.path)

    return chosen


def normalize_level(
    directory: Union[str, Path],
    catalog: ClassificationCatalog = DEFAULT_CATALOG,
    aliases: AliasCatalog = DEFAULT_ALIASES,
) -> List[Tuple[Path, Path]]:
    """
    Rename alias folders directly inside ``directory`` to canonical names.

    Never creates folders, never recurses and never raises for filesystem
    errors. An existing canonical folder is never replaced.

    Args:
        directory: Directory level to normalize
        catalog: Classification catalog
        aliases: Alias catalog

    Returns:
        (old path, new path) for every rename that actually happened
    """
    directory = Path(directory)
    renamed: List[Tuple[Path, Path]] = []

    for category, old_path in find_alias_folders(directory, catalog, aliases).items():
        if old_path.name == category:
            continue

        new_path = old_path.parent / category
        if os.path.lexists(new_path):
            logger.debug(f"Keeping {old_path.name!r}: {new_path} already exists")
            continue

        try:
            os.rename(old_path, new_path)
        except OSError as e:
            logger.warning(f"Could not rename {old_path} to {category!r}: {e}")
            continue

        logger.info(f"Renamed folder {old_path} → {new_path}")
        renamed.append((old_path, new_path))

    return renamed
