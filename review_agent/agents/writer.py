"""Commit message writer agent."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..vcs.operations import get_repo, get_staged_diff
from .client import TextGenerationClient
from .prompts import format_commit_prompt

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class CommitMessageGenerator:
    """Agent for drafting Conventional Commits messages from a diff."""

    def __init__(
        self,
        settings: Settings,
        client: TextGenerationClient | None = None,
        repo_path: str | Path = ".",
    ) -> None:
        self.settings = settings
        self.client = client or TextGenerationClient(settings)
        self.repo_path = repo_path

    def generate(self, diff: str | None = None) -> str | None:
        """
        Draft a commit message for a diff.

        Args:
            diff: Diff text. If omitted, the staged diff of the repository
                at ``repo_path`` is used.

        Returns:
            The suggested message, or None when there is nothing to describe.

        Raises:
            RetrievalError: If the staged diff cannot be read.
            GenerationError: If the model call fails.
        """
        if diff is None:
            diff = get_staged_diff(get_repo(self.repo_path))

        if not diff.strip():
            logger.info("No staged changes found.")
            return None

        prompt = format_commit_prompt(diff)
        return self.client.generate(prompt).strip()
