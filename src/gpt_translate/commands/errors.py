"""Command validation error contracts."""

from __future__ import annotations

from enum import StrEnum


class CommandErrorCode(StrEnum):
    """Stable command validation error codes."""

    MISSING_COMMENT = "missing_comment"
    INVALID_COMMAND = "invalid_command"
    INVALID_EXTENSION = "invalid_extension"


class CommandError(ValueError):
    """Command validation failure with stable deterministic code."""

    def __init__(
        self,
        code: CommandErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create command failure.

        Args:
            code: Stable command error code.
            message: User-facing error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data or {}
