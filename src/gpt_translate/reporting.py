"""User-facing error reporting for the triggering thread."""

from __future__ import annotations

import logging
from typing import Protocol

from gpt_translate.commands.types import HaltSignal

_LOGGER = logging.getLogger(__name__)

DEFAULT_ERROR_MARKER = "❌"


class CommentPoster(Protocol):
    """Protocol for posting a comment to the originating thread."""

    def post_comment(self, body: str) -> None:
        """Post comment body to the thread that triggered the run.

        Args:
            body: Markdown comment body.
        """


class FailureSignal(Protocol):
    """Protocol for marking the host run as failed."""

    def set_failed(self, message: str) -> None:
        """Mark the run failed without halting execution.

        Args:
            message: Failure message shown in the run status.
        """


class ErrorReporter:
    """Post errors back to users and mark the run failed."""

    def __init__(
        self,
        *,
        poster: CommentPoster,
        failure: FailureSignal,
        error_marker: str = DEFAULT_ERROR_MARKER,
    ) -> None:
        """Construct reporter bound to host collaborators.

        Args:
            poster: Comment poster for the originating thread.
            failure: Run failure signal.
            error_marker: Prefix prepended to posted error comments.
        """
        self._poster = poster
        self._failure = failure
        self._error_marker = error_marker

    def post_error(self, message: str, *, code: str = "error") -> HaltSignal:
        """Post error comment, fail the run and return the halt signal.

        The comment is posted first. If posting raises, the exception
        propagates and the run is not marked failed through `set_failed`.

        Args:
            message: Human-readable error message.
            code: Stable machine-readable error code.

        Returns:
            Terminal signal the entry point must halt on.
        """
        _LOGGER.error(message)
        self._poster.post_comment(f"{self._error_marker}{message}")
        self._failure.set_failed(message)
        return HaltSignal(code=code, message=message)

    def fail(self, message: str, *, code: str = "error") -> HaltSignal:
        """Fail the run without posting a comment.

        Args:
            message: Failure message.
            code: Stable machine-readable error code.

        Returns:
            Terminal signal the entry point must halt on.
        """
        _LOGGER.error(message)
        self._failure.set_failed(message)
        return HaltSignal(code=code, message=message)
