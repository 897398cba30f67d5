"""Pass-through git queries that return raw output."""

from .runner import GitRunner


class RawQueries:
    """Whitespace checks, patches and ref resolution for single commits."""

    def __init__(self, runner: GitRunner):
        self.runner = runner

    def check_args(self, commit: str) -> list[str]:
        """Return the git arguments of a whitespace check for one commit."""
        args = ["log", "--check", f"{commit}^..{commit}"]
        exclude = self.runner.config.check_exclude
        if exclude:
            args += ["--", ".", f":(exclude){exclude}"]
        return args

    def check(self, commit: str) -> bytes:
        """Warn if the changes of a commit introduce whitespace errors.

        Args:
            commit: Commit hash or ref

        Returns:
            Raw git log --check output

        Raises:
            GitError: If git reports issues; its stdout holds the report
        """
        return self.runner.run(self.check_args(commit))

    def show(self, commit: str) -> bytes:
        """Return the patch of a commit verbatim.

        NOTE: This could be expensive for very large commits.
        """
        return self.runner.run(["show", commit])

    def resolve_ref(self, ref: str) -> str:
        """Resolve a symbolic ref to its commit hash.

        Raises:
            GitError: If the ref does not exist
        """
        return self.runner.run_text(["rev-parse", "--verify", ref])

    def head_commit(self) -> str:
        """Return the hash of HEAD."""
        return self.resolve_ref("HEAD")

    def fetch_head_commit(self) -> str:
        """Return the hash of FETCH_HEAD."""
        return self.resolve_ref("FETCH_HEAD")
