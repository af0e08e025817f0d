"""GitHub REST adapters for the comment poster and failure signal."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import httpx

from gpt_translate.config import GitHubSettings

_LOGGER = logging.getLogger(__name__)


class GitHubContextError(RuntimeError):
    """Raised when the trigger lacks the thread coordinates to post to."""


def build_github_client(
    settings: GitHubSettings | None = None,
    *,
    token: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` pointed at the GitHub REST API.

    Args:
        settings: API URL and timeout settings.
        token: Optional token sent as bearer credentials.
        transport: Optional transport override, used by tests.

    Returns:
        Configured HTTP client. The caller owns closing it.
    """
    settings = settings or GitHubSettings()
    headers: dict[str, str] = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "gpt-translate-utils",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.Client(
        base_url=settings.api_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers=headers,
        transport=transport,
    )


class GitHubCommentPoster:
    """Post comments to one issue or pull-request thread."""

    def __init__(
        self,
        client: httpx.Client,
        *,
        repository: str | None,
        issue_number: int | None,
    ) -> None:
        """Bind poster to a thread.

        Args:
            client: GitHub API client.
            repository: `owner/name` of the repository.
            issue_number: Issue or pull-request number.
        """
        self._client = client
        self._repository = repository
        self._issue_number = issue_number

    def post_comment(self, body: str) -> None:
        """Create an issue comment on the bound thread.

        Args:
            body: Markdown comment body.

        Raises:
            GitHubContextError: If repository or issue number is unknown.
            HTTPStatusError: If GitHub rejects the request.
        """
        if not self._repository or self._issue_number is None:
            raise GitHubContextError(
                "Cannot post comment: repository and issue number are required."
            )
        path = f"/repos/{self._repository}/issues/{self._issue_number}/comments"
        response = self._client.post(path, json={"body": body})
        response.raise_for_status()
        _LOGGER.info("Posted comment to %s#%s", self._repository, self._issue_number)


def _escape_workflow_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFailureSignal:
    """Mark a GitHub Actions step failed via the `::error::` workflow command."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Construct failure signal.

        Args:
            stream: Output stream read by the runner, defaults to stdout.
        """
        self._stream = stream or sys.stdout

    def set_failed(self, message: str) -> None:
        """Emit the error annotation.

        Args:
            message: Failure message.
        """
        self._stream.write(f"::error::{_escape_workflow_data(message)}\n")
        self._stream.flush()
