"""Tests for alias folder normalization."""

from unittest.mock import patch

from conftest import build_tree, list_dirs

from category_sorter.organization.normalizer import find_alias_folders, normalize_level


class TestFindAliasFolders:
    """Test choosing which alias folders to rename."""

    def test_first_alias_by_name_wins(self, root):
        build_tree(root, [], ["pics", "photos"])

        assert find_alias_folders(root) == {"Image Files": root / "photos"}

    def test_one_folder_per_category(self, root):
        build_tree(root, [], ["music", "pics", "pdfs", "holiday"])

        assert find_alias_folders(root) == {
            "Audio Files": root / "music",
            "Image Files": root / "pics",
            "PDF Files": root / "pdfs",
        }

    def test_files_are_ignored(self, root):
        build_tree(root, ["pics"])

        assert find_alias_folders(root) == {}

    def test_unreadable_directory(self, tmp_path):
        assert find_alias_folders(tmp_path / "missing") == {}


class TestNormalizeLevel:
    """Test renaming alias folders."""

    def test_renames_alias(self, root):
        build_tree(root, ["pics/shot.png"])

        renamed = normalize_level(root)

        assert renamed == [(root / "pics", root / "Image Files")]
        assert (root / "Image Files" / "shot.png").exists()
        assert not (root / "pics").exists()

    def test_case_insensitive(self, root):
        build_tree(root, [], ["Photos"])

        normalize_level(root)

        assert list_dirs(root) == {"Image Files"}

    def test_second_alias_keeps_its_name(self, root):
        build_tree(root, [], ["pics", "photos"])

        normalize_level(root)

        assert list_dirs(root) == {"Image Files", "pics"}

    def test_existing_category_folder_is_not_replaced(self, root):
        build_tree(root, ["Image Files/a.jpg", "pics/b.jpg"])

        assert normalize_level(root) == []
        assert list_dirs(root) == {"Image Files", "pics"}

    def test_does_not_recurse(self, root):
        build_tree(root, [], ["projects/pics"])

        assert normalize_level(root) == []
        assert list_dirs(root) == {"projects", "projects/pics"}

    def test_never_creates_folders(self, root):
        build_tree(root, ["a.jpg", "b.pdf"])

        normalize_level(root)

        assert list_dirs(root) == set()

    def test_rename_failure_is_absorbed(self, root):
        build_tree(root, [], ["pics", "music"])

        with patch(
            "category_sorter.organization.normalizer.os.rename",
            side_effect=PermissionError("denied"),
        ):
            assert normalize_level(root) == []

        assert list_dirs(root) == {"pics", "music"}
