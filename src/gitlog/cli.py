#!/usr/bin/env python3
"""CLI interface for gitlog."""

import argparse
import json
import sys
from pathlib import Path

from common.logger import error, setup_logging

from .commits import RangeResolver
from .config import GitConfig
from .errors import GitError
from .queries import RawQueries
from .runner import GitRunner

CHECK_ISSUES_EXIT = 2
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _runner(args) -> GitRunner:
    config = GitConfig.from_env(
        debug=args.debug or None,
        repo_root=args.repo,
        check_exclude=getattr(args, "exclude", None),
    )
    return GitRunner(config)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_commits(args):
    """Print every commit record of a range as a JSON list."""
    resolver = RangeResolver(_runner(args))
    _print_json([dict(record) for record in resolver.commits(args.range)])
    return 0


def cmd_hashes(args):
    """Print the hashes of a range, one per line."""
    for commit in RangeResolver(_runner(args)).hashes(args.range):
        print(commit)
    return 0


def cmd_commit(args):
    """Print a single commit record as JSON."""
    resolver = RangeResolver(_runner(args))
    _print_json(dict(resolver.assembler.assemble(args.commit)))
    return 0


def cmd_check(args):
    """Run the whitespace check for one commit.

    Returns:
        Exit code (0 when clean, 1 when git reports issues)
    """
    try:
        output = RawQueries(_runner(args)).check(args.commit)
    except GitError as e:
        # git log --check exits 2 on whitespace findings
        if e.returncode != CHECK_ISSUES_EXIT:
            raise
        sys.stdout.buffer.write(e.stdout)
        sys.stdout.flush()
        error(f"Whitespace issues found in {args.commit}")
        return 1
    sys.stdout.buffer.write(output)
    sys.stdout.flush()
    return 0


def cmd_show(args):
    """Write the patch of one commit to stdout."""
    sys.stdout.buffer.write(RawQueries(_runner(args)).show(args.commit))
    sys.stdout.flush()
    return 0


def cmd_rev_parse(args):
    """Print the hash a ref resolves to."""
    print(RawQueries(_runner(args)).resolve_ref(args.ref))
    return 0


def cmd_head(args):
    """Print the hash of HEAD."""
    print(RawQueries(_runner(args)).head_commit())
    return 0


def cmd_fetch_head(args):
    """Print the hash of FETCH_HEAD."""
    print(RawQueries(_runner(args)).fetch_head_commit())
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="gitlog", description="Query commit metadata, diffs and whitespace checks from git"
    )
    parser.add_argument(
        "--repo",
        type=Path,
        default=None,
        help="Git repository directory (default: current directory)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every git command before it runs (default: DEBUG env var)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: LOG_LEVEL env var or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    commits_parser = subparsers.add_parser("commits", help="Print commit records of a range as JSON")
    commits_parser.add_argument("range", help="Commit (with ancestors) or A..B / A...B range")
    commits_parser.set_defaults(func=cmd_commits)

    hashes_parser = subparsers.add_parser("hashes", help="Print commit hashes of a range")
    hashes_parser.add_argument("range", help="Commit (with ancestors) or A..B / A...B range")
    hashes_parser.set_defaults(func=cmd_hashes)

    commit_parser = subparsers.add_parser("commit", help="Print one commit record as JSON")
    commit_parser.add_argument("commit", help="Commit hash or ref")
    commit_parser.set_defaults(func=cmd_commit)

    check_parser = subparsers.add_parser("check", help="Check a commit for whitespace errors")
    check_parser.add_argument("commit", help="Commit hash or ref")
    check_parser.add_argument(
        "--exclude",
        default=None,
        help="Pathspec to exclude from the check (default: GIT_CHECK_EXCLUDE env var)",
    )
    check_parser.set_defaults(func=cmd_check)

    show_parser = subparsers.add_parser("show", help="Print the patch of a commit")
    show_parser.add_argument("commit", help="Commit hash or ref")
    show_parser.set_defaults(func=cmd_show)

    rev_parse_parser = subparsers.add_parser("rev-parse", help="Resolve a ref to its hash")
    rev_parse_parser.add_argument("ref", help="Ref name, e.g. HEAD or a branch")
    rev_parse_parser.set_defaults(func=cmd_rev_parse)

    head_parser = subparsers.add_parser("head", help="Print the hash of HEAD")
    head_parser.set_defaults(func=cmd_head)

    fetch_head_parser = subparsers.add_parser("fetch-head", help="Print the hash of FETCH_HEAD")
    fetch_head_parser.set_defaults(func=cmd_fetch_head)

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        return args.func(args)
    except GitError as e:
        error(f"{e.command}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
