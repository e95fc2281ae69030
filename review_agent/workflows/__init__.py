"""User-facing workflows built from the agents and git operations."""

from .base import Outcome, WorkflowOptions, WorkflowResult, is_affirmative
from .commit_assistant import commit_assistant
from .quick_review import quick_review
from .review_and_commit import review_and_commit

__all__ = [
    "Outcome",
    "WorkflowOptions",
    "WorkflowResult",
    "commit_assistant",
    "is_affirmative",
    "quick_review",
    "review_and_commit",
]
