"""Shared command-domain types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Command(BaseModel):
    """Validated `/gpt-translate` invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_file_path: str
    output_file_path: str
    target_lang: str


class HaltSignal(BaseModel):
    """Terminal result telling the entry point to stop the run.

    Error reporting returns this instead of exiting the process, so callers
    decide where the run ends and tests can assert on it directly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str
    message: str
    exit_code: int = Field(default=1, ge=1)
