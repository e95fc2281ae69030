"""Commit assistant workflow: suggest a message for the staged changes."""

from pathlib import Path

from ..agents.writer import CommitMessageGenerator
from ..output.formatter import OutputFormatter
from ..vcs.operations import get_repo, get_staged_diff, get_staged_files
from .base import Outcome, WorkflowResult, failed


def commit_assistant(
    generator: CommitMessageGenerator,
    repo_path: str | Path = ".",
    formatter: OutputFormatter | None = None,
) -> WorkflowResult:
    """List the staged files and print a suggested commit message."""
    formatter = formatter or OutputFormatter()
    formatter.print_header("💡 AI Commit Assistant")

    try:
        repo = get_repo(repo_path)
        staged = get_staged_files(repo)
        if not staged:
            formatter.print_no_staged_changes()
            return WorkflowResult(outcome=Outcome.NO_STAGED_CHANGES)

        formatter.print_staged_files(staged)
        formatter.print_step("🤖 Generating commit message...")
        message = generator.generate(get_staged_diff(repo))
    except Exception as e:
        return failed(formatter, "commit-assistant", e)

    if not message:
        formatter.print_warning("Could not generate a commit message.")
        return WorkflowResult(outcome=Outcome.NO_MESSAGE)

    formatter.print_commit_message(message)
    formatter.print_dim("💡 Copy this message for your commit or run the workflow command!")
    return WorkflowResult(outcome=Outcome.COMPLETED, commit_message=message)
