"""Agent modules for code review and commit message writing."""

from .client import TextGenerationClient, Tool
from .reviewer import CodeReviewAgent
from .writer import CommitMessageGenerator

__all__ = ["CodeReviewAgent", "CommitMessageGenerator", "TextGenerationClient", "Tool"]
