"""GitHub host adapters."""

from gpt_translate.github.client import (
    ActionsFailureSignal,
    GitHubCommentPoster,
    GitHubContextError,
    build_github_client,
)

__all__ = [
    "ActionsFailureSignal",
    "GitHubCommentPoster",
    "GitHubContextError",
    "build_github_client",
]
