"""
Placement decisions and status translation.

Everything here is pure: it looks only at path names and the catalogs, never
at the filesystem, so the policy can be tested without touching disk.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.aliases import DEFAULT_ALIASES, AliasCatalog
from ..core.categories import DEFAULT_CATALOG, ClassificationCatalog
from ..core.types import (
    DirectoryCreationStatus,
    OrganizeStatus,
    PathStatus,
    TransferMode,
    TransferOutcome,
)


class PlacementDecision(BaseModel):
    """Where a file should live, relative to the directory it was found in."""

    category: str = Field(description="Category the file classifies as")
    in_place: bool = Field(
        default=False, description="File already sits in an acceptable folder"
    )
    ejected: bool = Field(
        default=False,
        description="File sits in another category's folder and moves one level up",
    )
    destination_dir: Optional[Path] = Field(
        default=None, description="Category folder the file must be moved into"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)


def decide_placement(
    current_dir: Path,
    file_path: Path,
    catalog: ClassificationCatalog = DEFAULT_CATALOG,
    aliases: AliasCatalog = DEFAULT_ALIASES,
) -> PlacementDecision:
    """
    Decide where a file found in ``current_dir`` belongs.

    Rules, in order:

    1. The folder is named after the file's category: leave it.
    2. The folder is an alias of the file's category: leave it. This keeps
       files in a second alias folder (e.g. "photos" next to a "pics" that
       was renamed to "Image Files") instead of ejecting them.
    3. The folder is a category folder or alias of a *different* category:
       the category folder is created next to it, one level up, so category
       folders never nest.
    4. Otherwise the category folder is created inside ``current_dir``.

    Args:
        current_dir: Directory being processed
        file_path: File found in it
        catalog: Classification catalog
        aliases: Alias catalog

    Returns:
        Placement decision
    """
    current_dir = Path(current_dir)
    category = catalog.classify(file_path)
    parent_name = current_dir.name
    parent_alias_of = aliases.lookup(parent_name)

    if category == parent_name:
        return PlacementDecision(category=category, in_place=True)

    if parent_alias_of is not None and parent_alias_of == category:
        return PlacementDecision(category=category, in_place=True)

    ejected = catalog.is_canonical(parent_name) or parent_alias_of is not None
    base = current_dir.parent if ejected else current_dir

    return PlacementDecision(
        category=category,
        ejected=ejected,
        destination_dir=base / category,
    )


def translate_path_status(status: PathStatus) -> OrganizeStatus:
    """Map a root validation result onto the aggregate status."""
    return _PATH_STATUS_MAP.get(status, OrganizeStatus.UNKNOWN_ERROR)


_PATH_STATUS_MAP = {
    PathStatus.OK: OrganizeStatus.SUCCESS,
    PathStatus.NOT_FOUND: OrganizeStatus.PATH_NOT_FOUND,
    PathStatus.NOT_DIRECTORY: OrganizeStatus.NOT_A_DIRECTORY,
    PathStatus.PERMISSION_DENIED: OrganizeStatus.PERMISSION_DENIED,
    PathStatus.UNKNOWN_ERROR: OrganizeStatus.UNKNOWN_ERROR,
}


def translate_transfer(
    creation: DirectoryCreationStatus,
    outcome: Optional[TransferOutcome],
    mode: TransferMode,
) -> OrganizeStatus:
    """
    Combine folder creation and move results into one status.

    Args:
        creation: Result of creating the category folder
        outcome: Result of the move, or None if it was not attempted
        mode: Transfer mode that was used

    Returns:
        SUCCESS only if both steps succeeded, otherwise the most specific
        failure: permission problems first, then cross-device moves, then
        folder creation, then a mode-specific catch-all
    """
    if creation.succeeded and outcome == TransferOutcome.SUCCESS:
        return OrganizeStatus.SUCCESS

    if (
        creation == DirectoryCreationStatus.PERMISSION_DENIED
        or outcome == TransferOutcome.PERMISSION_DENIED
    ):
        return OrganizeStatus.PERMISSION_DENIED

    if outcome == TransferOutcome.CROSS_DEVICE_ERROR:
        return OrganizeStatus.ATOMIC_TRANSFER_FAILED

    if creation == DirectoryCreationStatus.UNKNOWN_FAILURE:
        return OrganizeStatus.DIRECTORY_CREATION_FAILED

    if mode == TransferMode.FALLBACK:
        return OrganizeStatus.FALLBACK_TRANSFER_FAILED

    return OrganizeStatus.UNKNOWN_ERROR
