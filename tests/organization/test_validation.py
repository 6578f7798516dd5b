"""Tests for root path validation."""

from unittest.mock import patch

from category_sorter.core.types import PathStatus
from category_sorter.organization.validation import validate_path


class TestValidatePath:
    """Test validate_path."""

    def test_existing_directory(self, tmp_path):
        assert validate_path(tmp_path) == PathStatus.OK

    def test_accepts_string(self, tmp_path):
        assert validate_path(str(tmp_path)) == PathStatus.OK

    def test_missing_path(self, tmp_path):
        assert validate_path(tmp_path / "missing") == PathStatus.NOT_FOUND

    def test_path_below_a_file(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        assert validate_path(file_path / "child") == PathStatus.NOT_FOUND

    def test_regular_file(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        assert validate_path(file_path) == PathStatus.NOT_DIRECTORY

    def test_malformed_path(self):
        assert validate_path("bad\0path") == PathStatus.UNKNOWN_ERROR

    def test_unlistable_directory(self, tmp_path):
        with patch(
            "category_sorter.organization.validation.os.scandir",
            side_effect=PermissionError("denied"),
        ):
            assert validate_path(tmp_path) == PathStatus.PERMISSION_DENIED

    def test_listing_error(self, tmp_path):
        with patch(
            "category_sorter.organization.validation.os.scandir",
            side_effect=OSError("I/O error"),
        ):
            assert validate_path(tmp_path) == PathStatus.UNKNOWN_ERROR

    def test_does_not_modify_directory(self, tmp_path):
        (tmp_path / "a.jpg").write_text("x")

        validate_path(tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.jpg"]
