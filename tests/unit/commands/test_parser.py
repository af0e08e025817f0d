"""Unit tests for deterministic translate command parsing."""

from __future__ import annotations

import pytest

from gpt_translate.commands.errors import CommandError, CommandErrorCode
from gpt_translate.commands.parser import COMMAND_USAGE, file_extension, parse_command
from gpt_translate.commands.types import Command


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "/gpt-translate a.md b.md fr",
        "/gt a.md b.md fr",
        "please run /gt   a.md\tb.md fr thanks",
    ],
)
def test_parse_command_accepts_both_aliases(text: str) -> None:
    """Long form and short alias should yield the same command triple."""
    command = parse_command(text)

    assert command == Command(
        input_file_path="a.md", output_file_path="b.md", target_lang="fr"
    )


@pytest.mark.unit
def test_parse_command_accepts_mdx_and_nested_paths() -> None:
    """Nested paths keep their directories and mdx is allowed."""
    command = parse_command("/gt docs/intro.mdx i18n/ja/docs/intro.mdx Japanese")

    assert command.input_file_path == "docs/intro.mdx"
    assert command.output_file_path == "i18n/ja/docs/intro.mdx"
    assert command.target_lang == "Japanese"


@pytest.mark.unit
def test_parse_command_uses_first_match() -> None:
    """Only the first command in a comment should be parsed."""
    command = parse_command("/gt a.md b.md fr\n/gt c.md d.md de")

    assert command.input_file_path == "a.md"
    assert command.target_lang == "fr"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text", ["/foo bar", "/gt a.md b.md", "gpt-translate a.md b.md fr"]
)
def test_parse_command_rejects_unmatched_syntax(text: str) -> None:
    """Comments without a full command should cite the text and usage."""
    with pytest.raises(CommandError) as exc_info:
        parse_command(text)

    assert exc_info.value.code == CommandErrorCode.INVALID_COMMAND
    assert exc_info.value.message == f"Invalid command: `{text}`\n{COMMAND_USAGE}"
    assert exc_info.value.data == {"comment": text}


@pytest.mark.unit
def test_parse_command_rejects_disallowed_output_extension() -> None:
    """Either file argument outside md/mdx should be rejected."""
    with pytest.raises(CommandError) as exc_info:
        parse_command("/gt a.md b.txt fr")

    assert exc_info.value.code == CommandErrorCode.INVALID_EXTENSION
    assert exc_info.value.message == (
        "Error: Both files must have one of the following extensions: md, mdx.\n"
        "Found extensions: File1 - .md, File2 - .txt"
    )
    assert exc_info.value.data == {"extensions": ["md", "txt"]}


@pytest.mark.unit
def test_parse_command_rejects_name_without_dot() -> None:
    """A name without a dot is compared whole and therefore rejected."""
    with pytest.raises(CommandError) as exc_info:
        parse_command("/gpt-translate README b.md fr")

    assert exc_info.value.code == CommandErrorCode.INVALID_EXTENSION
    assert "File1 - .README" in exc_info.value.message


@pytest.mark.unit
def test_parse_command_honors_custom_extensions() -> None:
    """Configured extension sets replace the default one."""
    command = parse_command("/gt a.rst b.rst fr", allowed_extensions=("rst",))

    assert command.output_file_path == "b.rst"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a.md", "md"),
        ("docs/v1.2/a.mdx", "mdx"),
        ("archive.tar.gz", "gz"),
        ("README", "README"),
        ("trailing.", ""),
    ],
)
def test_file_extension_takes_last_segment(path: str, expected: str) -> None:
    """Extension is the last dot-separated segment, not a path-aware suffix."""
    assert file_extension(path) == expected
