"""Action config models and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GITHUB_API_URL = "https://api.github.com"


class GitHubSettings(BaseModel):
    """GitHub REST API client configuration."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = DEFAULT_GITHUB_API_URL
    timeout_seconds: float = Field(default=10.0, gt=0)


class ActionConfig(BaseModel):
    """Root action configuration model."""

    model_config = ConfigDict(extra="forbid")

    allowed_extensions: tuple[str, ...] = Field(
        default=("md", "mdx"), min_length=1
    )
    error_marker: str = "❌"
    github: GitHubSettings = GitHubSettings()


class ActionEnvironment(BaseSettings):
    """Runner-provided environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_", extra="ignore", case_sensitive=False
    )

    token: str | None = None
    event_path: Path | None = None
    repository: str | None = None
    api_url: str | None = None


class ActionConfigError(RuntimeError):
    """Raised when action config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode action config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ActionConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ActionConfigError(f"Invalid action config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ActionConfigError(f"Invalid action config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ActionConfigError("Invalid action config payload: root must be an object")
    return payload


def load_action_config(path: Path) -> ActionConfig:
    """Load action config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ActionConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return ActionConfig()
    payload = _decode_config_payload(path)
    try:
        return ActionConfig.model_validate(payload)
    except ValidationError as exc:
        raise ActionConfigError(f"Invalid action config payload: {exc}") from exc
