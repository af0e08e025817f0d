"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def event_file(tmp_path: Path):
    """Factory writing a GitHub `issue_comment` event payload to disk."""

    def _write(
        body: str | None = "/gpt-translate a.md b.md fr",
        *,
        pull_request: bool = False,
        number: int = 7,
        repository: str = "octo/docs",
    ) -> Path:
        issue: dict[str, object] = {"number": number}
        if pull_request:
            issue["pull_request"] = {"url": "https://api.github.com/pulls/7"}
        payload: dict[str, object] = {
            "issue": issue,
            "repository": {"full_name": repository},
        }
        if body is not None:
            payload["comment"] = {"body": body}
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
