"""Explicit configuration passed to the gitlog components."""

from dataclasses import dataclass, fields
from pathlib import Path

from common.env import Environment


@dataclass(frozen=True)
class GitConfig:
    """Runtime settings for invoking git.

    Attributes:
        debug: Log every git command line before it runs
        check_exclude: Pathspec excluded from whitespace checks
        git_binary: Executable name or path of git
        repo_root: Working directory for git; None means the current directory
    """

    debug: bool = False
    check_exclude: str | None = None
    git_binary: str = "git"
    repo_root: Path | None = None

    @classmethod
    def from_env(cls, **overrides) -> "GitConfig":
        """Build a config from the environment at call time.

        Keyword overrides that are not None win over the environment, which
        wins over the field defaults.

        Args:
            **overrides: Any GitConfig field

        Returns:
            New GitConfig instance

        Raises:
            TypeError: If an override names an unknown field
        """
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown GitConfig field(s): {', '.join(sorted(unknown))}")

        values = {
            "debug": Environment.debug(),
            "check_exclude": Environment.check_exclude(),
            "git_binary": Environment.git_binary(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        if values.get("repo_root") is not None:
            values["repo_root"] = Path(values["repo_root"])
        return cls(**values)
