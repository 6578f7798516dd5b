"""
Root path validation.

Runs once before a walk starts so that no folder is renamed and no file is
moved under a root that cannot be organized.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Union

from ..core.types import PathStatus

logger = logging.getLogger(__name__)


def validate_path(root_path: Union[str, Path]) -> PathStatus:
    """
    Check that a root path exists, is a directory and can be listed.

    Existence does not imply access, so the directory is opened once purely
    to surface permission problems.

    Args:
        root_path: Directory to organize

    Returns:
        Diagnostic status of the path
    """
    path = Path(root_path)

    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"Root path does not exist: {path}")
        return PathStatus.NOT_FOUND
    except PermissionError as e:
        logger.warning(f"Permission denied inspecting {path}: {e}")
        return PathStatus.PERMISSION_DENIED
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot inspect {path}: {e}")
        return PathStatus.UNKNOWN_ERROR

    if not stat.S_ISDIR(mode):
        logger.debug(f"Root path is not a directory: {path}")
        return PathStatus.NOT_DIRECTORY

    try:
        with os.scandir(path) as entries:
            next(entries, None)
    except PermissionError as e:
        logger.warning(f"Permission denied listing {path}: {e}")
        return PathStatus.PERMISSION_DENIED
    except OSError as e:
        logger.warning(f"Cannot list {path}: {e}")
        return PathStatus.UNKNOWN_ERROR

    return PathStatus.OK
