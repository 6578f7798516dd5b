"""
File transfer primitives.

Moves never overwrite an existing file: the destination name is made unique
first (``name(1).ext``, ``name(2).ext``, ...). Two strategies exist:

* atomic: a single rename, only possible within one volume
* fallback: copy then delete, works across volumes

Every function reports an enum value instead of raising for filesystem
errors.
"""

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Tuple, Union

from ..core.types import DirectoryCreationStatus, TransferMode, TransferOutcome
from ..shared.fs_utils import files_match

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def split_filename(filename: str) -> Tuple[str, str]:
    """
    Split a file name into stem and extension at its last dot.

    A leading dot (dotfiles) does not start an extension. A trailing dot is
    an extension of its own, so "notes." splits into "notes" and ".".

    Args:
        filename: Bare file name

    Returns:
        Tuple of (stem, extension including the dot)
    """
    dot = filename.rfind(".")
    if dot <= 0:
        return filename, ""
    return filename[:dot], filename[dot:]


def unique_destination(destination_dir: PathLike, filename: str) -> Path:
    """
    Find a free path for a file inside a destination directory.

    Not safe against another process claiming the same name between this
    check and the actual move.

    Args:
        destination_dir: Directory the file is headed to
        filename: Original file name

    Returns:
        ``destination_dir/filename`` if free, else the first free
        ``stem(N)ext`` with N counting up from 1
    """
    destination_dir = Path(destination_dir)
    target_path = destination_dir / filename
    if not os.path.lexists(target_path):
        return target_path

    stem, extension = split_filename(filename)
    counter = 1
    while True:
        target_path = destination_dir / f"{stem}({counter}){extension}"
        if not os.path.lexists(target_path):
            return target_path
        counter += 1


def create_directory(directory: PathLike) -> DirectoryCreationStatus:
    """
    Create a single directory level if it is missing.

    Args:
        directory: Directory to create

    Returns:
        Creation status; an existing path is not an error
    """
    directory = Path(directory)
    if os.path.lexists(directory):
        return DirectoryCreationStatus.ALREADY_EXISTS

    try:
        directory.mkdir()
    except FileExistsError:
        return DirectoryCreationStatus.ALREADY_EXISTS
    except PermissionError as e:
        logger.warning(f"Permission denied creating {directory}: {e}")
        return DirectoryCreationStatus.PERMISSION_DENIED
    except OSError as e:
        logger.warning(f"Failed to create {directory}: {e}")
        return DirectoryCreationStatus.UNKNOWN_FAILURE

    logger.info(f"Created folder {directory}")
    return DirectoryCreationStatus.CREATED


def atomic_transfer(source_path: PathLike, destination_dir: PathLike) -> TransferOutcome:
    """
    Move a file with a single rename.

    Args:
        source_path: File to move
        destination_dir: Existing directory to move it into

    Returns:
        SUCCESS, PERMISSION_DENIED, CROSS_DEVICE_ERROR when source and
        destination live on different volumes, or UNKNOWN_FAILURE
    """
    source = Path(source_path)
    target = unique_destination(destination_dir, source.name)

    try:
        os.rename(source, target)
    except PermissionError as e:
        logger.warning(f"Permission denied moving {source}: {e}")
        return TransferOutcome.PERMISSION_DENIED
    except OSError as e:
        if e.errno == errno.EXDEV:
            logger.warning(f"Cannot rename {source} across devices")
            return TransferOutcome.CROSS_DEVICE_ERROR
        logger.warning(f"Failed to move {source}: {e}")
        return TransferOutcome.UNKNOWN_FAILURE

    logger.info(f"Moved {source} → {target}")
    return TransferOutcome.SUCCESS


def fallback_transfer(
    source_path: PathLike,
    destination_dir: PathLike,
    verify: bool = True,
    algorithm: str = "sha256",
) -> TransferOutcome:
    """
    Move a file by copying it and deleting the original.

    The source is only deleted once the copy is complete and, with
    ``verify``, matches the source in size and checksum. A failed or
    mismatching copy is removed again; it always sits under a name this call
    picked, so nothing pre-existing is touched.

    Args:
        source_path: File to move
        destination_dir: Existing directory to move it into
        verify: Compare the copy against the source before deleting it
        algorithm: Checksum algorithm used for verification

    Returns:
        SUCCESS, PERMISSION_DENIED or UNKNOWN_FAILURE
    """
    source = Path(source_path)
    target = unique_destination(destination_dir, source.name)

    try:
        shutil.copy2(source, target)
    except PermissionError as e:
        logger.warning(f"Permission denied copying {source}: {e}")
        _discard_copy(target)
        return TransferOutcome.PERMISSION_DENIED
    except OSError as e:
        logger.warning(f"Failed to copy {source}: {e}")
        _discard_copy(target)
        return TransferOutcome.UNKNOWN_FAILURE

    if verify and not files_match(source, target, algorithm):
        logger.error(f"Copy of {source} does not match the original, keeping source")
        _discard_copy(target)
        return TransferOutcome.UNKNOWN_FAILURE

    try:
        os.remove(source)
    except PermissionError as e:
        # Copy stays in place; the file now exists twice but nothing is lost.
        logger.warning(f"Permission denied removing {source} after copy: {e}")
        return TransferOutcome.PERMISSION_DENIED
    except OSError as e:
        logger.warning(f"Failed to remove {source} after copy: {e}")
        return TransferOutcome.UNKNOWN_FAILURE

    logger.info(f"Copied {source} → {target} and removed original")
    return TransferOutcome.SUCCESS


def transfer(
    source_path: PathLike,
    destination_dir: PathLike,
    mode: TransferMode,
    verify: bool = True,
    algorithm: str = "sha256",
) -> TransferOutcome:
    """Move a file with the strategy selected by ``mode``."""
    if mode == TransferMode.ATOMIC:
        return atomic_transfer(source_path, destination_dir)
    return fallback_transfer(source_path, destination_dir, verify, algorithm)


def _discard_copy(target: Path) -> None:
    try:
        target.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Failed to remove incomplete copy {target}: {e}")
