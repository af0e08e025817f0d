"""Deterministic `/gpt-translate` command parser."""

from __future__ import annotations

import re
from collections.abc import Iterable

from gpt_translate.commands.errors import CommandError, CommandErrorCode
from gpt_translate.commands.types import Command

ALLOWED_EXTENSIONS: tuple[str, ...] = ("md", "mdx")

COMMAND_PATTERN = re.compile(r"/(?:gpt-translate|gt)\s+(\S+)\s+(\S+)\s+(\S+)")

COMMAND_USAGE = """usage:
```
/gpt-translate [input file path] [output file path] [target language]
```
"""


def file_extension(path: str) -> str:
    """Return the last dot-separated segment of a path.

    A name without any dot is returned whole, so `README` yields `README`.

    Args:
        path: File path argument as typed by the user.

    Returns:
        Extension text without the leading dot.
    """
    return path.split(".")[-1]


def parse_command(
    text: str,
    *,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> Command:
    """Parse and validate the first slash command found in comment text.

    Args:
        text: Raw comment body.
        allowed_extensions: Extensions accepted for both file arguments.

    Returns:
        Validated command.

    Raises:
        CommandError: If no command is found or a file extension is rejected.
    """
    match = COMMAND_PATTERN.search(text)
    if match is None:
        raise CommandError(
            CommandErrorCode.INVALID_COMMAND,
            f"Invalid command: `{text}`\n{COMMAND_USAGE}",
            data={"comment": text},
        )

    input_file_path, output_file_path, target_lang = match.groups()
    allowed = tuple(allowed_extensions)
    input_extension = file_extension(input_file_path)
    output_extension = file_extension(output_file_path)
    if input_extension not in allowed or output_extension not in allowed:
        raise CommandError(
            CommandErrorCode.INVALID_EXTENSION,
            (
                "Error: Both files must have one of the following extensions: "
                f"{', '.join(allowed)}.\n"
                f"Found extensions: File1 - .{input_extension}, "
                f"File2 - .{output_extension}"
            ),
            data={"extensions": [input_extension, output_extension]},
        )

    return Command(
        input_file_path=input_file_path,
        output_file_path=output_file_path,
        target_lang=target_lang,
    )
