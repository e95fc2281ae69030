"""Quick review workflow: stream a review of a directory's changes."""

from ..agents.reviewer import CodeReviewAgent
from ..output.formatter import OutputFormatter
from .base import Outcome, WorkflowResult, failed


def quick_review(
    agent: CodeReviewAgent,
    directory: str = ".",
    formatter: OutputFormatter | None = None,
) -> WorkflowResult:
    """Review the changes in ``directory`` and print a completion banner."""
    formatter = formatter or OutputFormatter()
    formatter.print_header(f"🔍 Quick review of {directory}...")

    try:
        review = agent.review_code(directory)
    except Exception as e:
        return failed(formatter, "quick-review", e)

    formatter.console.print()
    formatter.print_success("Quick review completed!")
    return WorkflowResult(outcome=Outcome.COMPLETED, review=review)
