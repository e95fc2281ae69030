"""Options and outcomes shared by the workflows."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = {"y", "yes"}


class Outcome(str, Enum):
    """How a workflow run ended."""

    COMPLETED = "completed"
    NO_STAGED_CHANGES = "no_staged_changes"  # Early exit, nothing to commit
    NO_MESSAGE = "no_message"  # Early exit, generator returned nothing
    FAILED = "failed"


@dataclass
class WorkflowOptions:
    """Per-invocation options for the review-and-commit workflow."""

    directory: str = "."
    save_review: bool = False
    auto_commit: bool = False
    interactive: bool = True


@dataclass
class WorkflowResult:
    """Outcome of a workflow run. Failures are recorded here, never raised."""

    outcome: Outcome
    review: str | None = None
    commit_message: str | None = None
    committed: bool = False
    review_path: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Whether the workflow ran to an expected end."""
        return self.outcome is not Outcome.FAILED


def is_affirmative(answer: str) -> bool:
    """Check a y/n answer. Only "y" and "yes" count, in any case."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def failed(formatter: OutputFormatter, workflow: str, error: Exception, **fields) -> WorkflowResult:
    """Report a failed workflow step and build the matching result."""
    logger.debug("%s workflow failed", workflow, exc_info=error)
    formatter.console.print()
    formatter.print_error(f"Workflow failed: {error}")
    return WorkflowResult(outcome=Outcome.FAILED, error=error, **fields)
