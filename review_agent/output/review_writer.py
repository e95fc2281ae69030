"""Markdown serialization of review feedback."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from ..exceptions import WriteError

logger = logging.getLogger(__name__)

DEFAULT_REVIEWS_DIR = Path("reviews")


class ReviewMetadata(BaseModel):
    """Where and when a review was made, and by whom."""

    reviewed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    directory: str
    reviewer: str

    model_config = {"frozen": True}


class ReviewFeedback(BaseModel):
    """A saved review."""

    summary: str
    strengths: tuple[str, ...] = ()
    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    metadata: ReviewMetadata

    model_config = {"frozen": True}


def _bullets(items: tuple[str, ...]) -> str:
    if not items:
        return "_None_"
    return "\n".join(f"- {item}" for item in items)


def render_review(feedback: ReviewFeedback) -> str:
    """Render review feedback as a markdown document."""
    meta = feedback.metadata
    sections = [
        "# Code Review",
        "## Summary",
        feedback.summary,
        "## Strengths",
        _bullets(feedback.strengths),
        "## Issues",
        _bullets(feedback.issues),
        "## Suggestions",
        _bullets(feedback.suggestions),
        "## Metadata",
        "\n".join(
            [
                f"- **Reviewed at:** {meta.reviewed_at.isoformat()}",
                f"- **Directory:** {meta.directory}",
                f"- **Reviewer:** {meta.reviewer}",
            ]
        ),
    ]
    return "\n\n".join(sections) + "\n"


def review_filename(now: datetime) -> str:
    """File name for a review saved at ``now`` (UTC)."""
    now = now.astimezone(timezone.utc)
    return f"review-{now.strftime('%Y-%m-%dT%H-%M-%S')}-{now.microsecond // 1000:03d}Z.md"


def save_review(
    feedback: ReviewFeedback,
    reviews_dir: str | Path = DEFAULT_REVIEWS_DIR,
    now: datetime | None = None,
) -> Path:
    """
    Write review feedback to a timestamped markdown file.

    Args:
        feedback: The review to save.
        reviews_dir: Directory for review files, created if missing.
        now: Timestamp for the file name. Defaults to the current time.

    Returns:
        Path of the written file.

    Raises:
        WriteError: If the directory or file cannot be written.
    """
    path = Path(reviews_dir) / review_filename(now or datetime.now(timezone.utc))

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_review(feedback), encoding="utf-8")
    except OSError as e:
        raise WriteError(str(path), e.strerror or str(e)) from e

    logger.debug("Saved review to %s", path)
    return path
