"""Resolve commit ranges and assemble per-commit records.

A range is either a single commit (meaning that commit and all of its
ancestors) or an explicit ``A..B`` / ``A...B`` interval. Each commit in the
range is turned into a record holding one value per entry of FIELD_NAMES.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .fields import FIELD_NAMES
from .runner import GitRunner

CommitRecord = Mapping[str, str]


class CommitAssembler:
    """Build a commit record by querying git once per field."""

    def __init__(self, runner: GitRunner, field_names: Mapping[str, str] = FIELD_NAMES):
        self.runner = runner
        self.field_names = field_names

    def query_field(self, commit: str, placeholder: str) -> str:
        """Return one formatted field of a single commit, stripped."""
        return self.runner.run_text(["log", "-1", f"--pretty=format:{placeholder}", commit, "--"])

    def assemble(self, commit: str) -> CommitRecord:
        """Assemble the full record for a commit.

        Args:
            commit: Commit hash or ref

        Returns:
            Read-only mapping of field name to value, one entry per field

        Raises:
            GitError: On the first field query that fails
        """
        record: dict[str, str] = {}
        for placeholder, name in self.field_names.items():
            record[name] = self.query_field(commit, placeholder)
        return MappingProxyType(record)


class RangeResolver:
    """Turn a range expression into commit records in git log order."""

    def __init__(self, runner: GitRunner, assembler: CommitAssembler | None = None):
        self.runner = runner
        self.assembler = assembler or CommitAssembler(runner)

    def hashes(self, commit_range: str) -> list[str]:
        """List the full hashes of every commit in a range.

        Args:
            commit_range: Single commit or two/three-dot range

        Returns:
            Hashes in git's default reverse-chronological order; empty
            when the range holds no commits

        Raises:
            GitError: If git rejects the range
        """
        output = self.runner.run_text(["log", "--pretty=format:%H", commit_range, "--"])
        return [line.strip() for line in output.split("\n") if line.strip()]

    def commits(self, commit_range: str) -> list[CommitRecord]:
        """Assemble a record for every commit in a range.

        Stops at the first commit that fails to assemble; no partial list
        is returned.

        Raises:
            GitError: If listing or any assembly fails
        """
        return [self.assembler.assemble(commit) for commit in self.hashes(commit_range)]
