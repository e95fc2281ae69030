"""Review Agent: AI code review and commit messages from your terminal."""

__version__ = "0.1.0"
