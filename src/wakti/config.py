"""Configuration management for WAKTI Insights.

Loads settings from environment variables with sensible defaults.
Supports .env files via python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SUPPORTED_LANGUAGES = ("en", "ar")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables."""

    log_level: str
    language: str

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file. If None, searches for .env
                     in current directory and parent directories.

        Returns:
            Config instance with values from environment.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        language = os.getenv("WAKTI_LANGUAGE", "en").strip().lower()

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL: {log_level}. Must be one of {valid_levels}"
            )

        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Invalid WAKTI_LANGUAGE: {language}. "
                f"Must be one of {SUPPORTED_LANGUAGES}"
            )

        return cls(log_level=log_level, language=language)
