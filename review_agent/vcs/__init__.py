"""Git operations module."""

from .operations import (
    EXCLUDE_FILES,
    FileChange,
    commit_changes,
    get_file_changes,
    get_repo,
    get_staged_diff,
    get_staged_files,
)

__all__ = [
    "EXCLUDE_FILES",
    "FileChange",
    "commit_changes",
    "get_file_changes",
    "get_repo",
    "get_staged_diff",
    "get_staged_files",
]
