"""Tests for the output/review_writer module."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from review_agent.exceptions import WriteError
from review_agent.output.review_writer import (
    ReviewFeedback,
    ReviewMetadata,
    render_review,
    review_filename,
    save_review,
)

REVIEWED_AT = datetime(2026, 10, 19, 12, 30, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture
def feedback():
    """A review with every section filled in."""
    return ReviewFeedback(
        summary="Review completed for changes in ./src.",
        strengths=["Clear naming"],
        issues=["Missing error handling in parser", "No tests for edge cases"],
        suggestions=["Add a test for empty input"],
        metadata=ReviewMetadata(
            reviewed_at=REVIEWED_AT,
            directory="./src",
            reviewer="AI Agent (gemini-2.5-pro)",
        ),
    )


class TestRenderReview:
    """Tests for markdown rendering."""

    def test_sections_in_order(self, feedback):
        """Test the fixed section headers."""
        markdown = render_review(feedback)
        headers = ["## Summary", "## Strengths", "## Issues", "## Suggestions", "## Metadata"]

        positions = [markdown.index(header) for header in headers]
        assert positions == sorted(positions)
        assert markdown.startswith("# Code Review")

    def test_lists_rendered_as_bullets(self, feedback):
        """Test list sections."""
        markdown = render_review(feedback)

        assert "- Missing error handling in parser\n- No tests for edge cases" in markdown
        assert "- **Directory:** ./src" in markdown
        assert "- **Reviewer:** AI Agent (gemini-2.5-pro)" in markdown
        assert "2026-10-19T12:30:05.123456+00:00" in markdown

    def test_empty_lists(self):
        """Test sections without entries."""
        feedback = ReviewFeedback(
            summary="Nothing to report.",
            metadata=ReviewMetadata(directory=".", reviewer="AI Agent"),
        )

        assert render_review(feedback).count("_None_") == 3


class TestReviewFeedback:
    """Tests for the feedback models."""

    def test_feedback_is_frozen(self, feedback):
        """Test that saved reviews cannot be changed."""
        with pytest.raises(ValidationError):
            feedback.summary = "changed"

    def test_list_sections_are_immutable(self, feedback):
        """Test that list sections cannot be changed in place."""
        assert feedback.issues == ("Missing error handling in parser", "No tests for edge cases")
        with pytest.raises(AttributeError):
            feedback.issues.append("late addition")

    def test_reviewed_at_defaults_to_now(self):
        """Test the metadata timestamp default."""
        before = datetime.now(timezone.utc)
        metadata = ReviewMetadata(directory=".", reviewer="AI Agent")

        assert metadata.reviewed_at >= before


class TestSaveReview:
    """Tests for save_review."""

    def test_review_filename(self):
        """Test the timestamped file name."""
        assert review_filename(REVIEWED_AT) == "review-2026-10-19T12-30-05-123Z.md"

    def test_save_creates_directory(self, feedback, tmp_path):
        """Test saving into a directory that does not exist yet."""
        reviews_dir = tmp_path / "reviews"

        path = save_review(feedback, reviews_dir, now=REVIEWED_AT)

        assert path == reviews_dir / "review-2026-10-19T12-30-05-123Z.md"
        assert path.read_text(encoding="utf-8") == render_review(feedback)

    def test_save_uses_current_time(self, feedback, tmp_path):
        """Test the default timestamp."""
        path = save_review(feedback, tmp_path)

        assert path.parent == tmp_path
        assert path.name.startswith("review-")
        assert path.suffix == ".md"

    def test_save_failure_raises_write_error(self, feedback, tmp_path):
        """Test that filesystem errors become WriteError."""
        blocker = tmp_path / "reviews"
        blocker.write_text("not a directory")

        with pytest.raises(WriteError) as exc_info:
            save_review(feedback, blocker)

        assert str(blocker) in str(exc_info.value)
