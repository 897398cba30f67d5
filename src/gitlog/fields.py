"""Commit fields queried for every assembled commit record."""

from types import MappingProxyType

# Keys are git log --pretty=format: placeholders, values are record field names
FIELD_NAMES = MappingProxyType(
    {
        "%h": "abbreviated_commit",
        "%p": "abbreviated_parent",
        "%t": "abbreviated_tree",
        "%aD": "author_date",
        "%aE": "author_email",
        "%aN": "author_name",
        "%b": "body",
        "%H": "commit",
        "%N": "commit_notes",
        "%cD": "committer_date",
        "%cE": "committer_email",
        "%cN": "committer_name",
        "%e": "encoding",
        "%P": "parent",
        "%D": "refs",
        "%f": "sanitized_subject_line",
        "%GS": "signer",
        "%GK": "signer_key",
        "%s": "subject",
        "%G?": "verification_flag",
    }
)
