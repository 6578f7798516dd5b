"""Tests for status types and settings."""

from category_sorter.core.config import Settings
from category_sorter.core.types import (
    DirectoryCreationStatus,
    OrganizeStatus,
    TransferMode,
)


class TestOrganizeStatus:
    """Test the aggregate status enum."""

    def test_values_are_snake_case_names(self):
        assert OrganizeStatus.SUCCESS.value == "success"
        assert OrganizeStatus.PATH_NOT_FOUND == "path_not_found"
        assert OrganizeStatus("atomic_transfer_failed") is OrganizeStatus.ATOMIC_TRANSFER_FAILED

    def test_every_status_has_a_message(self):
        for status in OrganizeStatus:
            assert status.message

    def test_is_failure(self):
        assert not OrganizeStatus.SUCCESS.is_failure
        assert not OrganizeStatus.ALREADY_IN_CORRECT_LOCATION.is_failure
        assert OrganizeStatus.PERMISSION_DENIED.is_failure
        assert OrganizeStatus.UNKNOWN_ERROR.is_failure


class TestDirectoryCreationStatus:
    """Test directory creation status helpers."""

    def test_succeeded(self):
        assert DirectoryCreationStatus.CREATED.succeeded
        assert DirectoryCreationStatus.ALREADY_EXISTS.succeeded
        assert not DirectoryCreationStatus.PERMISSION_DENIED.succeeded
        assert not DirectoryCreationStatus.UNKNOWN_FAILURE.succeeded


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CATEGORY_SORTER_TRANSFER_MODE", raising=False)
        monkeypatch.delenv("CATEGORY_SORTER_VERIFY_COPIES", raising=False)

        settings = Settings(_env_file=None)

        assert settings.transfer_mode == TransferMode.ATOMIC
        assert settings.verify_copies is True
        assert settings.checksum_algorithm == "sha256"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CATEGORY_SORTER_TRANSFER_MODE", "fallback")
        monkeypatch.setenv("CATEGORY_SORTER_VERIFY_COPIES", "false")

        settings = Settings(_env_file=None)

        assert settings.transfer_mode == TransferMode.FALLBACK
        assert settings.verify_copies is False
