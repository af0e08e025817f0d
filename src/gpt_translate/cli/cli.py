"""Typer CLI entrypoint for gpt-translate action utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from gpt_translate.commands.extract import get_command_params
from gpt_translate.commands.types import HaltSignal
from gpt_translate.config import (
    ActionConfig,
    ActionConfigError,
    ActionEnvironment,
    GitHubSettings,
    load_action_config,
)
from gpt_translate.context import (
    TriggerContext,
    TriggerContextError,
    is_pr,
    load_trigger_context,
)
from gpt_translate.files import create_file, is_file_exists
from gpt_translate.github import (
    ActionsFailureSignal,
    GitHubCommentPoster,
    build_github_client,
)
from gpt_translate.reporting import ErrorReporter

app = typer.Typer(help="gpt-translate action utilities")
_CONSOLE = Console()
_LOGGING_CONFIGURED = False
_DEFAULT_CONFIG_FILE = Path(".github") / "gpt-translate.yml"

EventPathOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Event payload JSON. Defaults to GITHUB_EVENT_PATH.",
    ),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to action config YAML/JSON file.",
    ),
]


def _configure_logging() -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def _render_error(code: str, message: str) -> None:
    """Render an error panel.

    Args:
        code: Stable error code shown in the title.
        message: Error message body.
    """
    _CONSOLE.print(
        Panel(
            Text(message),
            title=Text(f"Error [{code}]"),
            border_style="red",
            expand=True,
        )
    )


def _load_config(config_file: Path | None) -> ActionConfig:
    """Load action config or exit on invalid payloads.

    Args:
        config_file: Optional config path override.

    Returns:
        Loaded config, defaults when the file is missing.

    Raises:
        Exit: Raised when config cannot be decoded.
    """
    try:
        return load_action_config(config_file or _DEFAULT_CONFIG_FILE)
    except ActionConfigError as exc:
        _render_error("config_invalid", str(exc))
        raise typer.Exit(code=1) from exc


def _load_context(event_path: Path | None, env: ActionEnvironment) -> TriggerContext:
    """Load trigger context from the event payload file.

    Args:
        event_path: Optional event payload override.
        env: Runner environment.

    Returns:
        Parsed trigger context.

    Raises:
        Exit: Raised when no payload is available or it cannot be decoded.
    """
    path = event_path or env.event_path
    if path is None:
        _render_error("context_missing", "No event payload: set GITHUB_EVENT_PATH.")
        raise typer.Exit(code=1)
    try:
        context = load_trigger_context(path)
    except TriggerContextError as exc:
        _render_error("context_invalid", str(exc))
        raise typer.Exit(code=1) from exc
    if context.repository is None and env.repository:
        context = context.model_copy(update={"repository": env.repository})
    return context


def _github_settings(config: ActionConfig, env: ActionEnvironment) -> GitHubSettings:
    """Merge runner API URL over configured GitHub settings."""
    if not env.api_url:
        return config.github
    return config.github.model_copy(update={"api_url": env.api_url})


def _build_reporter(
    *,
    client: httpx.Client,
    context: TriggerContext,
    config: ActionConfig,
) -> ErrorReporter:
    """Build error reporter wired to GitHub collaborators.

    Args:
        client: GitHub API client.
        context: Trigger context naming the thread to post to.
        config: Action config.

    Returns:
        Error reporter for this run.
    """
    poster = GitHubCommentPoster(
        client,
        repository=context.repository,
        issue_number=context.issue_number,
    )
    return ErrorReporter(
        poster=poster,
        failure=ActionsFailureSignal(),
        error_marker=config.error_marker,
    )


def _halt(signal: HaltSignal) -> typer.Exit:
    """Render halt signal and build the matching exit.

    Args:
        signal: Terminal signal produced by error reporting.

    Returns:
        Typer exit carrying the signal exit code.
    """
    _render_error(signal.code, signal.message)
    return typer.Exit(code=signal.exit_code)


@app.command("extract")
def extract_command(
    event_path: EventPathOption = None,
    config_file: ConfigFileOption = None,
) -> None:
    """Extract the translate command from the triggering comment.

    Args:
        event_path: Optional event payload override.
        config_file: Optional action config path override.

    Raises:
        Exit: Raised with failure code when the command is rejected.
    """
    _configure_logging()
    config = _load_config(config_file)
    env = ActionEnvironment()
    context = _load_context(event_path, env)
    settings = _github_settings(config, env)
    with build_github_client(settings, token=env.token) as client:
        reporter = _build_reporter(client=client, context=context, config=config)
        result = get_command_params(
            context, reporter, allowed_extensions=config.allowed_extensions
        )
    if isinstance(result, HaltSignal):
        raise _halt(result)
    typer.echo(result.model_dump_json())


@app.command("is-pr")
def is_pr_command(event_path: EventPathOption = None) -> None:
    """Print whether the trigger comes from a pull request.

    Args:
        event_path: Optional event payload override.
    """
    _configure_logging()
    context = _load_context(event_path, ActionEnvironment())
    typer.echo("true" if is_pr(context) else "false")


@app.command("write")
def write_command(
    output: Annotated[Path, typer.Argument(help="Destination file path.")],
    source: Annotated[
        Path | None,
        typer.Option(
            exists=True,
            file_okay=True,
            dir_okay=False,
            help="File to copy content from. Reads stdin when omitted.",
        ),
    ] = None,
) -> None:
    """Write content to a file, creating missing directories.

    Args:
        output: Destination file path.
        source: Optional source file; stdin is used otherwise.
    """
    _configure_logging()
    data = source.read_text(encoding="utf-8") if source else sys.stdin.read()
    create_file(data, output)
    _CONSOLE.print(Text.assemble("Wrote ", (str(output), "bold")))


@app.command("exists")
def exists_command(
    path: Annotated[Path, typer.Argument(help="Path to check.")],
) -> None:
    """Exit 0 when an entry exists at the path, 1 otherwise.

    Args:
        path: Path to check.

    Raises:
        Exit: Raised with code 1 when the entry is absent.
    """
    _configure_logging()
    if not is_file_exists(path):
        raise typer.Exit(code=1)


def main() -> None:
    """Console script entrypoint."""
    app()
