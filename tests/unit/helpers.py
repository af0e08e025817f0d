"""Test-only collaborator fakes for reporting and extraction tests."""

from __future__ import annotations

from gpt_translate.reporting import ErrorReporter


class RecordingPoster:
    """Comment poster fake that keeps posted bodies."""

    def __init__(self) -> None:
        """Initialize capture slots."""
        self.comments: list[str] = []

    def post_comment(self, body: str) -> None:
        """Capture comment body."""
        self.comments.append(body)


class RecordingFailure:
    """Failure signal fake that keeps failure messages."""

    def __init__(self) -> None:
        """Initialize capture slots."""
        self.messages: list[str] = []

    def set_failed(self, message: str) -> None:
        """Capture failure message."""
        self.messages.append(message)


def build_recording_reporter() -> tuple[
    ErrorReporter, RecordingPoster, RecordingFailure
]:
    """Build reporter wired to recording fakes.

    Returns:
        Reporter plus its poster and failure fakes.
    """
    poster = RecordingPoster()
    failure = RecordingFailure()
    return ErrorReporter(poster=poster, failure=failure), poster, failure
