"""
Directory tree organizer.

Walks a tree with an explicit stack of pending directories (no recursion, so
depth is bounded only by memory), normalizes alias folders level by level and
moves every file into its category folder.

The walk stops at the first file that cannot be placed and reports why.
Files already moved stay where they are; running again is safe because
correctly placed files are left untouched.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.aliases import DEFAULT_ALIASES, AliasCatalog
from ..core.categories import DEFAULT_CATALOG, ClassificationCatalog
from ..core.config import settings
from ..core.types import OrganizeStatus, TransferMode, TransferOutcome
from .normalizer import normalize_level
from .placement import decide_placement, translate_path_status, translate_transfer
from .transfer import create_directory, transfer
from .validation import validate_path

logger = logging.getLogger(__name__)


class OrganizationReport(BaseModel):
    """What a single organize run did."""

    root: Optional[Path] = None
    mode: TransferMode = TransferMode.ATOMIC
    status: Optional[OrganizeStatus] = None
    directories_visited: int = 0
    files_moved: int = 0
    files_in_place: int = 0
    folders_renamed: int = 0
    bytes_moved: int = 0
    failed_path: Optional[Path] = Field(
        default=None, description="File or directory that stopped the run"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def carry_over(self, earlier: "OrganizationReport") -> None:
        """
        Add the changes made by an earlier run on the same root.

        Only moves and renames are summed; visit and in-place counts describe
        the latest walk, which already sees the earlier run's results.

        Args:
            earlier: Report of the interrupted run
        """
        self.files_moved += earlier.files_moved
        self.folders_renamed += earlier.folders_renamed
        self.bytes_moved += earlier.bytes_moved


class CategoryOrganizer:
    """Organize a directory tree into category folders."""

    def __init__(
        self,
        catalog: ClassificationCatalog = DEFAULT_CATALOG,
        aliases: AliasCatalog = DEFAULT_ALIASES,
        verify_copies: Optional[bool] = None,
        checksum_algorithm: Optional[str] = None,
    ):
        """
        Initialize the organizer.

        Args:
            catalog: Classification catalog
            aliases: Alias catalog
            verify_copies: Verify fallback copies before deleting the source
                (defaults to the configured setting)
            checksum_algorithm: Algorithm for copy verification
                (defaults to the configured setting)
        """
        self.catalog = catalog
        self.aliases = aliases
        self.verify_copies = (
            settings.verify_copies if verify_copies is None else verify_copies
        )
        self.checksum_algorithm = checksum_algorithm or settings.checksum_algorithm
        self.report = OrganizationReport()

    def organize(
        self,
        root_path: Union[str, Path],
        mode: TransferMode = TransferMode.ATOMIC,
    ) -> OrganizeStatus:
        """
        Organize every file below ``root_path``.

        Args:
            root_path: Directory to organize
            mode: How files are moved

        Returns:
            SUCCESS once every file is placed, otherwise the first failure.
            Never ALREADY_IN_CORRECT_LOCATION.
        """
        root = Path(root_path)
        mode = TransferMode(mode)
        self.report = OrganizationReport(root=root, mode=mode)

        logger.info(f"Organizing {root} ({mode.value} mode)")

        status = translate_path_status(validate_path(root))
        if status != OrganizeStatus.SUCCESS:
            logger.warning(f"Cannot organize {root}: {status.value}")
            return self._finish(status, root)

        pending: List[Path] = [root]

        while pending:
            directory = pending.pop()
            self.report.directories_visited += 1

            renamed = normalize_level(directory, self.catalog, self.aliases)
            self.report.folders_renamed += len(renamed)

            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except PermissionError as e:
                logger.warning(f"Permission denied listing {directory}: {e}")
                return self._finish(OrganizeStatus.PERMISSION_DENIED, directory)
            except OSError as e:
                logger.warning(f"Cannot list {directory}: {e}")
                return self._finish(OrganizeStatus.UNKNOWN_ERROR, directory)

            for entry in entries:
                entry_path = Path(entry.path)
                try:
                    is_file = entry.is_file(follow_symlinks=False)
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError as e:
                    logger.warning(f"Cannot inspect {entry_path}: {e}")
                    return self._finish(OrganizeStatus.UNKNOWN_ERROR, entry_path)

                if is_file:
                    file_status = self.handle_file(directory, entry_path, mode)
                    if file_status == OrganizeStatus.ALREADY_IN_CORRECT_LOCATION:
                        continue
                    if file_status != OrganizeStatus.SUCCESS:
                        return self._finish(file_status, entry_path)

                elif is_dir and not entry.name.startswith("."):
                    pending.append(entry_path)

        return self._finish(OrganizeStatus.SUCCESS)

    def handle_file(
        self,
        current_dir: Union[str, Path],
        file_path: Union[str, Path],
        mode: TransferMode,
    ) -> OrganizeStatus:
        """
        Place one file found in ``current_dir``.

        Args:
            current_dir: Directory being processed
            file_path: File inside it
            mode: How the file is moved

        Returns:
            ALREADY_IN_CORRECT_LOCATION, SUCCESS, or the failure status
        """
        current_dir = Path(current_dir)
        file_path = Path(file_path)

        decision = decide_placement(current_dir, file_path, self.catalog, self.aliases)

        if decision.in_place:
            logger.debug(f"{file_path} already in {decision.category!r}")
            self.report.files_in_place += 1
            return OrganizeStatus.ALREADY_IN_CORRECT_LOCATION

        destination_dir = decision.destination_dir
        creation = create_directory(destination_dir)

        outcome: Optional[TransferOutcome] = None
        if creation.succeeded:
            size = _file_size(file_path)
            outcome = transfer(
                file_path,
                destination_dir,
                mode,
                verify=self.verify_copies,
                algorithm=self.checksum_algorithm,
            )
            if outcome == TransferOutcome.SUCCESS:
                self.report.files_moved += 1
                self.report.bytes_moved += size

        status = translate_transfer(creation, outcome, mode)
        if status != OrganizeStatus.SUCCESS:
            logger.warning(
                f"Failed to place {file_path} into {destination_dir}: {status.value}"
            )
        return status

    def _finish(
        self, status: OrganizeStatus, failed_path: Optional[Path] = None
    ) -> OrganizeStatus:
        self.report.status = status
        self.report.failed_path = failed_path
        logger.info(
            f"Finished {self.report.root}: {status.value} "
            f"({self.report.files_moved} moved, "
            f"{self.report.files_in_place} already in place)"
        )
        return status


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError:
        return 0


def organize(
    root_path: Union[str, Path],
    mode: TransferMode = TransferMode.ATOMIC,
) -> OrganizeStatus:
    """
    Organize a directory tree with the built-in catalogs.

    Args:
        root_path: Directory to organize
        mode: How files are moved

    Returns:
        Terminal status of the run
    """
    return CategoryOrganizer().organize(root_path, mode)
