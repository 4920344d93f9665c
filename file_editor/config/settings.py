"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from file_editor.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.encoding: str = self._get_env("FILE_EDITOR_ENCODING", "utf-8")
        self.search_max_results: int = self._get_positive_int(
            "FILE_EDITOR_SEARCH_MAX_RESULTS", 50
        )
        self.list_max_depth: int = self._get_non_negative_int(
            "FILE_EDITOR_LIST_MAX_DEPTH", 3
        )
        self.log_level: str = self._get_env("FILE_EDITOR_LOG_LEVEL", "INFO").upper()
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_positive_int("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")

    def _get_positive_int(self, key: str, default: int) -> int:
        value = self._get_int(key, default)
        if value < 1:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_non_negative_int(self, key: str, default: int) -> int:
        value = self._get_int(key, default)
        if value < 0:
            raise ConfigurationError(
                f"Environment variable {key} must be non-negative, got {value}"
            )
        return value


# Global settings instance
settings = Settings()
