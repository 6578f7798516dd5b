"""
Type definitions for the organizer.

Every layer of the organizer reports its outcome as one of these enums
instead of raising. The orchestrator translates the lower-level values into
a single :class:`OrganizeStatus` for the caller.
"""

from enum import Enum


class TransferMode(str, Enum):
    """How files are moved into their category folder."""

    ATOMIC = "atomic"  # rename, same volume only
    FALLBACK = "fallback"  # copy then delete, works across volumes


class PathStatus(str, Enum):
    """Result of validating the root path before a run."""

    OK = "ok"
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_ERROR = "unknown_error"


class DirectoryCreationStatus(str, Enum):
    """Result of creating a category folder."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_FAILURE = "unknown_failure"

    @property
    def succeeded(self) -> bool:
        """True when the directory is usable as a destination."""
        return self in (
            DirectoryCreationStatus.CREATED,
            DirectoryCreationStatus.ALREADY_EXISTS,
        )


class TransferOutcome(str, Enum):
    """Result of moving one file."""

    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    CROSS_DEVICE_ERROR = "cross_device_error"
    UNKNOWN_FAILURE = "unknown_failure"


class OrganizeStatus(str, Enum):
    """Terminal status of an organize run (or of a single file)."""

    SUCCESS = "success"
    PATH_NOT_FOUND = "path_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    DIRECTORY_CREATION_FAILED = "directory_creation_failed"
    # Per-file only, never returned from organize()
    ALREADY_IN_CORRECT_LOCATION = "already_in_correct_location"
    ATOMIC_TRANSFER_FAILED = "atomic_transfer_failed"
    FALLBACK_TRANSFER_FAILED = "fallback_transfer_failed"
    UNKNOWN_ERROR = "unknown_error"

    @property
    def is_failure(self) -> bool:
        """True for every status that aborts a run."""
        return self not in (
            OrganizeStatus.SUCCESS,
            OrganizeStatus.ALREADY_IN_CORRECT_LOCATION,
        )

    @property
    def message(self) -> str:
        """User-facing description of the status."""
        return _STATUS_MESSAGES[self]


_STATUS_MESSAGES = {
    OrganizeStatus.SUCCESS: "Files are organized successfully.",
    OrganizeStatus.PATH_NOT_FOUND: "Given path is not valid.",
    OrganizeStatus.NOT_A_DIRECTORY: "The selected path is not a directory.",
    OrganizeStatus.PERMISSION_DENIED: (
        "Permission denied. Try running with elevated privileges."
    ),
    OrganizeStatus.DIRECTORY_CREATION_FAILED: (
        "A category folder could not be created."
    ),
    OrganizeStatus.ALREADY_IN_CORRECT_LOCATION: (
        "File is already in its category folder."
    ),
    OrganizeStatus.ATOMIC_TRANSFER_FAILED: (
        "Files cannot be moved atomically across drives. "
        "Retry in fallback (copy then delete) mode."
    ),
    OrganizeStatus.FALLBACK_TRANSFER_FAILED: "Copying a file failed.",
    OrganizeStatus.UNKNOWN_ERROR: "An unknown error occurred.",
}
