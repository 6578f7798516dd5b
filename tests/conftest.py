"""
Pytest configuration and fixtures for category_sorter tests.
"""

import errno
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, Set

import pytest


def build_tree(root: Path, files: Iterable[str], dirs: Iterable[str] = ()) -> None:
    """
    Create files (with their name as content) and empty directories.

    Args:
        root: Base directory
        files: Relative file paths
        dirs: Relative directory paths
    """
    for rel in dirs:
        (root / rel).mkdir(parents=True, exist_ok=True)
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {rel}")


def list_files(root: Path) -> Set[str]:
    """Return every file below root as a POSIX-style relative path."""
    found = set()
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            found.add((Path(dirpath) / name).relative_to(root).as_posix())
    return found


def list_dirs(root: Path) -> Set[str]:
    """Return every directory below root as a POSIX-style relative path."""
    found = set()
    for dirpath, dirnames, _ in os.walk(root):
        for name in dirnames:
            found.add((Path(dirpath) / name).relative_to(root).as_posix())
    return found


def snapshot(root: Path) -> Dict[str, str]:
    """Map each file below root to its content."""
    return {rel: (root / rel).read_text() for rel in list_files(root)}


def rename_failing_across_devices(name: str) -> Callable[[str, str], None]:
    """os.rename replacement that refuses to move files called ``name``."""
    real_rename = os.rename

    def _rename(src, dst):
        if os.path.basename(src) == name:
            raise OSError(errno.EXDEV, "Invalid cross-device link")
        real_rename(src, dst)

    return _rename


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An empty directory to organize."""
    directory = tmp_path / "inbox"
    directory.mkdir()
    return directory


@pytest.fixture
def make_tree(root: Path) -> Callable[..., Path]:
    """Factory that populates the root directory and returns it."""

    def _make(files: Iterable[str] = (), dirs: Iterable[str] = ()) -> Path:
        build_tree(root, files, dirs)
        return root

    return _make


@pytest.fixture
def running_as_root() -> bool:
    """True when permission bits are not enforced for this process."""
    return hasattr(os, "geteuid") and os.geteuid() == 0
