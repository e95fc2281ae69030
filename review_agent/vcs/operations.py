"""Git operations using GitPython."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..exceptions import CommitError, RetrievalError

logger = logging.getLogger(__name__)

# Build output, lockfile and dependency directory
EXCLUDE_FILES = ("dist", "bun.lock", "node_modules")


@dataclass
class FileChange:
    """A changed file and its unified diff."""

    file: str
    diff: str


def get_repo(path: str | Path | None = None) -> Repo:
    """
    Get a Git repository object.

    Args:
        path: Path inside the repository. If None, uses current directory.

    Returns:
        GitPython Repo object.

    Raises:
        RetrievalError: If the path does not exist or is not inside a
            git repository.
    """
    repo_path = Path(path) if path else Path.cwd()
    try:
        return Repo(repo_path, search_parent_directories=True)
    except NoSuchPathError:
        raise RetrievalError(f"Path does not exist: {repo_path}") from None
    except InvalidGitRepositoryError:
        raise RetrievalError(f"Not a git repository: {repo_path}") from None


def is_excluded(path: str, exclude_files: Iterable[str]) -> bool:
    """Check whether a path contains any of the excluded names."""
    return any(exclude in path for exclude in exclude_files)


def _diff_text(repo: Repo, *args: str) -> str:
    """Run git diff and decode its output, replacing invalid UTF-8 bytes."""
    output = repo.git.diff(*args, stdout_as_string=False)
    return output.decode("utf-8", errors="replace")


def get_file_changes(
    root_dir: str | Path,
    exclude_files: Iterable[str] = EXCLUDE_FILES,
) -> list[FileChange]:
    """
    Get the working tree changes for every non-excluded file.

    Args:
        root_dir: Directory inside the repository to inspect.
        exclude_files: Names that drop a file when found anywhere in its path.

    Returns:
        List of FileChange objects, in the order git reports them.

    Raises:
        RetrievalError: If the repository cannot be queried.
    """
    exclude_files = tuple(exclude_files)

    try:
        repo = get_repo(root_dir)
        summary = repo.git.diff("--name-only")
        changes = []

        for file in summary.splitlines():
            if not file or is_excluded(file, exclude_files):
                continue

            diff = _diff_text(repo, "--", file)
            changes.append(FileChange(file=file, diff=diff))

    except (GitCommandError, RetrievalError) as e:
        logger.debug("Error getting file changes in %s: %s", root_dir, e)
        raise RetrievalError(f"Failed to get file changes: {e}") from e

    logger.debug("Collected %d changed file(s) in %s", len(changes), root_dir)
    return changes


def get_staged_diff(repo: Repo) -> str:
    """
    Get the staged changes (diff --cached).

    Raises:
        RetrievalError: If git fails.
    """
    try:
        return _diff_text(repo, "--cached")
    except GitCommandError as e:
        raise RetrievalError(f"Failed to get staged diff: {e}") from e


def get_staged_files(repo: Repo) -> list[str]:
    """
    Get the paths of all staged files.

    Raises:
        RetrievalError: If git fails.
    """
    try:
        output = repo.git.diff("--cached", "--name-only")
    except GitCommandError as e:
        raise RetrievalError(f"Failed to list staged files: {e}") from e

    return [file for file in output.strip().split("\n") if file]


def commit_changes(repo: Repo, message: str) -> None:
    """
    Commit the staged changes with the given message.

    The message is passed to git as a single argument, so quotes and
    newlines reach the commit verbatim without shell escaping.

    Raises:
        CommitError: If git refuses the commit.
    """
    try:
        repo.git.commit("-m", message)
    except GitCommandError as e:
        raise CommitError(str(e)) from e
