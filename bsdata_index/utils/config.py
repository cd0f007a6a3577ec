"""Configuration management for environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

from bsdata_index.utils.exceptions import ConfigurationError
from bsdata_index.utils.logger import LOG_FORMATS

DEFAULT_MAX_WORKERS = 1
DEFAULT_SCAN_CHUNK_SIZE = 16 * 1024


class Config:
    """Indexer configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load configuration from .env file and environment."""
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("BSDATA_LOG_FORMAT", "json").lower()
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"BSDATA_LOG_FORMAT must be one of {LOG_FORMATS}, got {self.log_format!r}"
            )
        self.base_url = self.get_optional("BSDATA_BASE_URL")
        self.max_workers = self._get_positive_int("BSDATA_MAX_WORKERS", DEFAULT_MAX_WORKERS)
        self.scan_chunk_size = self._get_positive_int(
            "BSDATA_SCAN_CHUNK_SIZE", DEFAULT_SCAN_CHUNK_SIZE
        )

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable.

        Args:
            key: Environment variable name
            default: Value used when the variable is not set

        Returns:
            Parsed integer value

        Raises:
            ConfigurationError: If the value is not a positive integer
        """
        value = os.getenv(key)
        if not value:
            return default
        try:
            number = int(value)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be an integer, got {value!r}") from e
        if number < 1:
            raise ConfigurationError(f"{key} must be positive, got {number}")
        return number

    def require_base_url(self) -> str:
        """Return the configured base URL.

        Raises:
            ConfigurationError: If BSDATA_BASE_URL is not set
        """
        if not self.base_url:
            raise ConfigurationError("BSDATA_BASE_URL environment variable is not set")
        return self.base_url

    @staticmethod
    def get_optional(key: str, default: str | None = None) -> str | None:
        """Get optional environment variable with default value.

        Args:
            key: Environment variable name
            default: Default value if not set

        Returns:
            Environment variable value or default
        """
        return os.getenv(key, default)
