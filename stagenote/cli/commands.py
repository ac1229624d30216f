"""CLI commands for inspecting staged changes and building the prompt."""

from pathlib import Path
from typing import Optional

import typer

from stagenote import __version__
from stagenote.analysis import ChangeSummary, ReportParseError, classify_staged_changes
from stagenote.context import (
    build_prompt_bundle,
    collect_annotated_diff,
    collect_change_summary,
)
from stagenote.git import (
    GitError,
    NoStagedChangesError,
    get_repo_root,
    has_staged_files,
)
from stagenote.logging_utils import configure_logging
from stagenote.user_config import get_max_diff_chars, get_num_suggestions


def format_summary(summary: ChangeSummary) -> str:
    """Render a ChangeSummary as two titled sections."""
    lines = ["Binary file changes:"]
    lines.extend(f"  {entry}" for entry in summary.binary_file_changes or ["(none)"])
    lines.append("")
    lines.append("Structure changes:")
    lines.extend(f"  {entry}" for entry in summary.structure_changes or ["(none)"])
    return "\n".join(lines)


def _echo_summary(summary: ChangeSummary, as_json: bool) -> None:
    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
    else:
        typer.echo(format_summary(summary))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stagenote {__version__}")
        raise typer.Exit()


def main_command(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log output (-v for info, -vv for debug)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Turn staged git changes into commit message prompt input."""
    configure_logging(verbose)


def summary_command(
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the summary as JSON",
    ),
) -> None:
    """Show binary and structural changes in the staged change set."""
    try:
        summary = collect_change_summary()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ReportParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _echo_summary(summary, as_json)


def annotate_command(
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        min=1,
        help="Maximum characters for the staged diff (default from config)",
    ),
) -> None:
    """Show the staged diff with added and removed lines marked."""
    try:
        repo_root = get_repo_root()
        if max_diff_chars is None:
            max_diff_chars = get_max_diff_chars(repo_root)
        annotated = collect_annotated_diff(max_chars=max_diff_chars, repo_root=repo_root)
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(annotated)


def prompt_command(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=1,
        help="Number of alternative messages to ask for (default from config)",
    ),
    amend: bool = typer.Option(
        False,
        "--amend",
        "-a",
        help="Include the last commit message so it can be improved",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        min=1,
        help="Maximum characters for the staged diff (default from config)",
    ),
) -> None:
    """Print the full prompt for the staged changes."""
    try:
        repo_root = get_repo_root()
        if not has_staged_files():
            raise NoStagedChangesError(
                "No staged changes found. Stage your changes first with: git add <files>"
            )
        if count is None:
            count = get_num_suggestions(repo_root)
        if max_diff_chars is None:
            max_diff_chars = get_max_diff_chars(repo_root)
        prompt = build_prompt_bundle(
            max_chars=max_diff_chars,
            num_suggestions=count,
            amend=amend,
            repo_root=repo_root,
        )
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ReportParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(prompt)


def classify_command(
    status_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="File holding 'git status --porcelain=v1 -z --untracked-files=no' output",
    ),
    numstat_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="File holding 'git diff --staged --numstat -z' output",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the summary as JSON",
    ),
) -> None:
    """Classify previously captured status and numstat reports."""
    try:
        summary = classify_staged_changes(
            status_file.read_bytes(),
            numstat_file.read_bytes(),
        )
    except ReportParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _echo_summary(summary, as_json)
