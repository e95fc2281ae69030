"""Custom exceptions for Review Agent."""


class ReviewAgentError(Exception):
    """Base exception for Review Agent."""

    pass


class ConfigurationError(ReviewAgentError):
    """Raised when environment configuration is missing or invalid."""

    def __init__(self, fields: list[str], details: list[str] | None = None) -> None:
        self.fields = fields
        self.details = details or []
        self.message = f"Missing or invalid environment variables: {', '.join(fields)}"
        super().__init__(self.message)


class RetrievalError(ReviewAgentError):
    """Raised when a git query fails."""

    pass


class GenerationError(ReviewAgentError):
    """Raised when a call to the text generation service fails."""

    def __init__(self, reason: str | None = None) -> None:
        if reason:
            self.message = f"Text generation failed: {reason}"
        else:
            self.message = "Text generation failed"
        super().__init__(self.message)


class WriteError(ReviewAgentError):
    """Raised when a review file cannot be written."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        if reason:
            self.message = f"Failed to write review to {path}: {reason}"
        else:
            self.message = f"Failed to write review to {path}"
        super().__init__(self.message)


class CommitError(ReviewAgentError):
    """Raised when `git commit` fails."""

    def __init__(self, reason: str | None = None) -> None:
        if reason:
            self.message = f"Failed to commit changes: {reason}"
        else:
            self.message = "Failed to commit changes"
        super().__init__(self.message)
