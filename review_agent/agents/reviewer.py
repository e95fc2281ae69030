"""Code review agent that streams its findings to the terminal."""

from __future__ import annotations

import sys
from dataclasses import asdict
from typing import TYPE_CHECKING, Any, TextIO

from pydantic import BaseModel, Field

from ..vcs.operations import get_file_changes
from .client import MAX_STEPS, TextGenerationClient, Tool
from .prompts import REVIEWER_SYSTEM_PROMPT, format_review_prompt

if TYPE_CHECKING:
    from ..config import Settings


class FileChangesInput(BaseModel):
    """Arguments of the file changes tool."""

    root_dir: str = Field(alias="rootDir", min_length=1, description="The root directory")

    model_config = {"populate_by_name": True}


class CodeReviewAgent:
    """Agent for reviewing working tree changes, file by file."""

    def __init__(
        self,
        settings: Settings,
        client: TextGenerationClient | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.client = client or TextGenerationClient(settings)
        self.out = out
        self.tool = Tool(
            name="getFileChangesInDirectoryTool",
            description="Gets the code changes made in given directory",
            input_model=FileChangesInput,
            handler=self._file_changes,
        )

    def _file_changes(self, params: FileChangesInput) -> list[dict[str, Any]]:
        changes = get_file_changes(params.root_dir, self.settings.exclude_files)
        return [asdict(change) for change in changes]

    def review_code(self, directory: str) -> str:
        """
        Review the changes in a directory, printing the review as it streams.

        Returns:
            The full review text, as printed.
        """
        return self.review_prompt(format_review_prompt(directory))

    def review_prompt(self, prompt: str) -> str:
        """
        Run the reviewer with a custom prompt, printing output as it streams.

        Returns:
            The full review text, as printed.

        Raises:
            GenerationError: If the model call fails.
        """
        out = self.out or sys.stdout
        parts = []

        for chunk in self.client.stream(
            prompt,
            system=REVIEWER_SYSTEM_PROMPT,
            tools=[self.tool],
            max_steps=MAX_STEPS,
        ):
            out.write(chunk)
            out.flush()
            parts.append(chunk)

        return "".join(parts)
