"""Review Agent CLI using Typer."""

from typing import Annotated

import typer
from rich.console import Console

from .agents.client import TextGenerationClient
from .agents.reviewer import CodeReviewAgent
from .agents.writer import CommitMessageGenerator
from .config import Settings, configure_logging, load_settings
from .exceptions import ConfigurationError, ReviewAgentError
from .output.formatter import OutputFormatter
from .workflows import WorkflowOptions, commit_assistant, quick_review, review_and_commit

app = typer.Typer(
    name="review-agent",
    help="AI-powered code review agent.",
    no_args_is_help=True,
)

console = Console()
formatter = OutputFormatter(console)


def load_settings_or_exit() -> Settings:
    """Load settings once for this invocation, exiting on invalid config."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        formatter.print_error(e.message)
        for detail in e.details:
            formatter.print_dim(f"  {detail}")
        console.print()
        console.print("[dim]Set it via: export GOOGLE_GENERATIVE_AI_API_KEY='...'[/dim]")
        raise typer.Exit(1) from None

    configure_logging(settings.log_level)
    return settings


@app.command()
def review(
    directory: Annotated[str, typer.Argument(help="Directory to review")] = ".",
) -> None:
    """Quick code review of a directory."""
    settings = load_settings_or_exit()
    quick_review(CodeReviewAgent(settings), directory, formatter)


@app.command()
def commit() -> None:
    """Generate an AI-powered commit message for staged changes."""
    settings = load_settings_or_exit()
    commit_assistant(CommitMessageGenerator(settings), ".", formatter)


@app.command()
def workflow(
    directory: Annotated[str, typer.Argument(help="Directory to review")] = ".",
    auto_commit: Annotated[
        bool,
        typer.Option("--auto-commit", help="Commit automatically without prompting"),
    ] = False,
    save_review: Annotated[
        bool,
        typer.Option("--save-review", help="Save a review summary to a markdown file"),
    ] = False,
) -> None:
    """Full review and commit workflow."""
    settings = load_settings_or_exit()
    client = TextGenerationClient(settings)

    options = WorkflowOptions(
        directory=directory,
        save_review=save_review,
        auto_commit=auto_commit,
        interactive=not auto_commit,
    )
    review_and_commit(
        CodeReviewAgent(settings, client=client),
        CommitMessageGenerator(settings, client=client, repo_path=directory),
        options,
        formatter,
    )


@app.command()
def prompt(
    text: Annotated[str, typer.Argument(help="Custom review prompt")],
) -> None:
    """Review with a custom prompt."""
    settings = load_settings_or_exit()

    try:
        CodeReviewAgent(settings).review_prompt(text)
    except ReviewAgentError as e:
        console.print()
        formatter.print_error(str(e))
        raise typer.Exit(1) from None

    console.print()


@app.command()
def config() -> None:
    """Show the current configuration."""
    settings = load_settings_or_exit()
    formatter.print_config(settings)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"Review Agent v{__version__}")


if __name__ == "__main__":
    app()
