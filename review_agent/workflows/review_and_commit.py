"""Review-and-commit workflow: review, draft a message, then commit."""

import logging
from collections.abc import Callable
from pathlib import Path

from git import Repo

from ..agents.reviewer import CodeReviewAgent
from ..agents.writer import CommitMessageGenerator
from ..exceptions import CommitError, WriteError
from ..output.formatter import OutputFormatter
from ..output.review_writer import (
    DEFAULT_REVIEWS_DIR,
    ReviewFeedback,
    ReviewMetadata,
    save_review,
)
from ..vcs.operations import commit_changes, get_repo, get_staged_diff, get_staged_files
from .base import Outcome, WorkflowOptions, WorkflowResult, failed, is_affirmative

logger = logging.getLogger(__name__)

COMMIT_QUESTION = "❓ Would you like to commit these changes? (y/n): "


def build_review_summary(directory: str, commit_message: str, reviewer: str) -> ReviewFeedback:
    """Summary record saved alongside a workflow run."""
    return ReviewFeedback(
        summary=(
            f"Review completed for changes in {directory}. "
            f"Suggested commit: {commit_message}"
        ),
        strengths=("Code review completed successfully",),
        issues=("See console output for detailed analysis",),
        suggestions=("Apply suggested improvements before committing",),
        metadata=ReviewMetadata(directory=directory, reviewer=reviewer),
    )


def review_and_commit(
    agent: CodeReviewAgent,
    generator: CommitMessageGenerator,
    options: WorkflowOptions | None = None,
    formatter: OutputFormatter | None = None,
    ask: Callable[[str], str] | None = None,
    reviews_dir: str | Path = DEFAULT_REVIEWS_DIR,
) -> WorkflowResult:
    """
    Review the changes, draft a commit message and optionally commit.

    Args:
        agent: Reviewer used for the streamed review.
        generator: Commit message generator.
        options: Directory and save/commit flags.
        formatter: Terminal output.
        ask: Reads the answer to the commit question. Defaults to the console.
        reviews_dir: Where review summaries are saved.

    Returns:
        WorkflowResult describing how far the run got.
    """
    options = options or WorkflowOptions()
    formatter = formatter or OutputFormatter()
    formatter.print_header("🔍 Starting AI-powered review and commit workflow...")

    review = None
    try:
        formatter.print_step("📝 Reviewing code changes...")
        review = agent.review_code(options.directory)

        repo = get_repo(options.directory)
        staged = get_staged_files(repo)
        if not staged:
            formatter.console.print()
            formatter.print_no_staged_changes()
            return WorkflowResult(outcome=Outcome.NO_STAGED_CHANGES, review=review)

        formatter.print_staged_files(staged)
        formatter.print_step("💡 Generating commit message...")
        message = generator.generate(get_staged_diff(repo))
    except Exception as e:
        return failed(formatter, "review-and-commit", e, review=review)

    if not message:
        formatter.print_error("Could not generate commit message")
        return WorkflowResult(outcome=Outcome.NO_MESSAGE, review=review)

    formatter.print_commit_message(message)
    result = WorkflowResult(outcome=Outcome.COMPLETED, review=review, commit_message=message)

    if options.save_review:
        reviewer = f"AI Agent ({generator.settings.model_id})"
        feedback = build_review_summary(options.directory, message, reviewer)
        try:
            result.review_path = save_review(feedback, reviews_dir)
            formatter.print_review_saved(str(result.review_path))
        except WriteError as e:
            formatter.print_error(str(e))

    if options.auto_commit:
        result.committed = _commit(repo, message, formatter)
    elif options.interactive:
        answer = _read_answer(ask or formatter.console.input)
        if is_affirmative(answer):
            result.committed = _commit(repo, message, formatter)
        else:
            formatter.print_dim("⏭️  Skipping commit. You can commit manually later.")

    return result


def _read_answer(ask: Callable[[str], str]) -> str:
    # Closed stdin reads as "no"
    try:
        return ask(COMMIT_QUESTION)
    except EOFError:
        return ""


def _commit(repo: Repo, message: str, formatter: OutputFormatter) -> bool:
    try:
        commit_changes(repo, message)
    except CommitError as e:
        logger.debug("Commit failed", exc_info=e)
        formatter.print_error(str(e))
        return False

    formatter.print_success("Changes committed successfully!")
    return True
