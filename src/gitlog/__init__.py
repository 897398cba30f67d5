"""Structured commit records read from the git command line tool."""

from .commits import CommitAssembler, CommitRecord, RangeResolver
from .config import GitConfig
from .errors import GitError, GitNotFoundError
from .fields import FIELD_NAMES
from .queries import RawQueries
from .runner import GitRunner

__all__ = [
    "FIELD_NAMES",
    "CommitAssembler",
    "CommitRecord",
    "GitConfig",
    "GitError",
    "GitNotFoundError",
    "GitRunner",
    "RangeResolver",
    "RawQueries",
]
