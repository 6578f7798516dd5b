"""Runtime configuration."""

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from .types import TransferMode


class Settings(BaseSettings):
    """Settings loaded from CATEGORY_SORTER_* environment variables."""

    # Default move strategy for the CLI
    transfer_mode: TransferMode = TransferMode.ATOMIC

    # Compare size and checksum of fallback copies before deleting the source
    verify_copies: bool = True
    checksum_algorithm: str = "sha256"

    # Format used by the CLI's log handler
    log_format: str = "%(message)s"

    model_config = ConfigDict(
        env_prefix="CATEGORY_SORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


# Global settings instance
settings = Settings()
