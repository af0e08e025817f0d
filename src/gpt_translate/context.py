"""Trigger context passed explicitly to command utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class TriggerContextError(RuntimeError):
    """Raised when the triggering event payload cannot be decoded."""


class TriggerContext(BaseModel):
    """Read-only view of the event that triggered the run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    comment_body: str | None = None
    is_pull_request: bool = False
    repository: str | None = None
    issue_number: int | None = None

    @classmethod
    def from_event(cls, payload: dict[str, Any]) -> TriggerContext:
        """Build context from a GitHub webhook event payload.

        Args:
            payload: Decoded `issue_comment` style event mapping.

        Returns:
            Trigger context with only the fields the utilities read.
        """
        comment = payload.get("comment") or {}
        issue = payload.get("issue") or {}
        repository = payload.get("repository") or {}
        return cls(
            comment_body=comment.get("body"),
            is_pull_request=bool(issue.get("pull_request")),
            repository=repository.get("full_name"),
            issue_number=issue.get("number"),
        )


def load_trigger_context(path: Path) -> TriggerContext:
    """Load trigger context from the event JSON file written by the runner.

    Args:
        path: Event payload path, usually `GITHUB_EVENT_PATH`.

    Returns:
        Parsed trigger context.

    Raises:
        TriggerContextError: If the file is unreadable or not a JSON object.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TriggerContextError(f"Cannot read event payload: {exc}") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TriggerContextError(f"Invalid event payload JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise TriggerContextError("Invalid event payload: root must be an object")
    try:
        return TriggerContext.from_event(payload)
    except (AttributeError, ValidationError) as exc:
        raise TriggerContextError(f"Invalid event payload: {exc}") from exc


def is_pr(context: TriggerContext) -> bool:
    """Return whether the trigger comes from a pull-request thread."""
    return context.is_pull_request
