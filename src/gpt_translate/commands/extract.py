"""Command extraction from the triggering comment."""

from __future__ import annotations

from collections.abc import Iterable

from gpt_translate.commands.errors import CommandError, CommandErrorCode
from gpt_translate.commands.parser import ALLOWED_EXTENSIONS, parse_command
from gpt_translate.commands.types import Command, HaltSignal
from gpt_translate.context import TriggerContext
from gpt_translate.reporting import ErrorReporter

MISSING_COMMENT_MESSAGE = "Error: Comment could not be retrieved correctly."


def get_command_params(
    context: TriggerContext,
    reporter: ErrorReporter,
    *,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> Command | HaltSignal:
    """Extract the translate command from the trigger comment.

    A missing comment only fails the run. Malformed commands and rejected
    extensions are also posted back to the thread.

    Args:
        context: Trigger context supplied by the host.
        reporter: Error reporter bound to the originating thread.
        allowed_extensions: Extensions accepted for both file arguments.

    Returns:
        Validated command, or the halt signal produced while reporting.
    """
    comment = context.comment_body
    if not comment:
        return reporter.fail(
            MISSING_COMMENT_MESSAGE, code=CommandErrorCode.MISSING_COMMENT
        )
    try:
        return parse_command(comment, allowed_extensions=allowed_extensions)
    except CommandError as exc:
        return reporter.post_error(exc.message, code=exc.code)
