"""Exceptions raised when driving the git executable."""

from collections.abc import Sequence


class GitError(RuntimeError):
    """Raised when a git command exits non-zero.

    Attributes:
        args_list: Full command line that was run
        returncode: Exit status reported by git
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(
        self,
        args_list: Sequence[str],
        returncode: int | None = None,
        stdout: bytes = b"",
        stderr: bytes = b"",
        message: str | None = None,
    ):
        self.args_list = list(args_list)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        if message is None:
            message = stderr.decode("utf-8", errors="replace").strip()
        if not message:
            message = f"git command failed with exit status {returncode}: {self.command}"
        super().__init__(message)

    @property
    def command(self) -> str:
        """Command line joined for display."""
        return " ".join(self.args_list)


class GitNotFoundError(GitError):
    """Raised when the git executable cannot be started."""

    pass
