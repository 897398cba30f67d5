"""Thin wrapper around the git executable."""

import logging
import subprocess
from collections.abc import Iterable

from common.logger import get_logger

from .config import GitConfig
from .errors import GitError, GitNotFoundError


class GitRunner:
    """Run git sub-commands and return their captured stdout.

    Every command is run as ``<git_binary> --no-pager <args>`` in
    ``config.repo_root``. The logger is injectable so callers can observe
    the invocation trace without touching global logging state.
    """

    def __init__(self, config: GitConfig | None = None, logger: logging.Logger | None = None):
        self.config = config or GitConfig()
        self.logger = logger or get_logger("gitlog.runner")

    def command(self, args: Iterable[str]) -> list[str]:
        """Return the full command line for a git sub-command."""
        return [self.config.git_binary, "--no-pager", *args]

    def run(self, args: Iterable[str]) -> bytes:
        """Run a git sub-command.

        Args:
            args: Arguments following ``git --no-pager``

        Returns:
            Raw standard output

        Raises:
            GitNotFoundError: If the executable cannot be started
            GitError: If git exits non-zero
        """
        cmd = self.command(args)
        if self.config.debug:
            self.logger.info('[git] cmd: "%s"', " ".join(cmd))

        cwd = str(self.config.repo_root) if self.config.repo_root is not None else None
        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except (FileNotFoundError, PermissionError) as e:
            self.logger.error('[git] cmd: "%s"', " ".join(cmd))
            raise GitNotFoundError(
                cmd, message=f"Cannot run {self.config.git_binary}: {e}"
            ) from e

        if completed.returncode != 0:
            self.logger.error('[git] cmd: "%s"', " ".join(cmd))
            raise GitError(
                cmd,
                returncode=completed.returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
            )
        return completed.stdout

    def run_text(self, args: Iterable[str]) -> str:
        """Run a git sub-command and return stdout decoded and stripped."""
        return self.run(args).decode("utf-8", errors="replace").strip()
