"""Environment configuration interface for gitlog.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place. Values are read on
every call so changes made after import are honoured.
"""

import os

from dotenv import load_dotenv

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def debug() -> bool:
        """Get the debug toggle.

        Returns:
            True when DEBUG holds any non-empty value
        """
        return len(os.getenv("DEBUG", "")) > 0

    @staticmethod
    def check_exclude() -> str | None:
        """Get the pathspec excluded from whitespace checks.

        Returns:
            Exclusion pattern, or None when unset or empty
        """
        return os.getenv("GIT_CHECK_EXCLUDE") or None

    @staticmethod
    def git_binary() -> str:
        """Get the git executable to invoke.

        Returns:
            Executable name or path, defaults to 'git'
        """
        return os.getenv("GIT_BINARY") or "git"

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO' when unset or unknown
        """
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        return level if level in _LOG_LEVELS else "INFO"


# Singleton instance for convenient access
env = Environment()
