"""CLI commands for ignore pattern management."""

import typer

from stagenote.git import GitError, get_repo_root
from stagenote.user_config import (
    add_ignore_pattern,
    get_ignore_patterns,
    remove_ignore_pattern,
)

ignore_app = typer.Typer(
    name="ignore",
    help="Manage ignore patterns in .stagenote/config.yaml",
    add_completion=False,
)


@ignore_app.command("list")
def ignore_list() -> None:
    """Show all ignore patterns in .stagenote/config.yaml."""
    try:
        patterns = get_ignore_patterns(get_repo_root())
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Ignore patterns in .stagenote/config.yaml:")
    typer.echo()
    if patterns:
        for pattern in patterns:
            typer.echo(f"  - {pattern}")
        typer.echo()
        typer.echo(f"Total: {len(patterns)} pattern(s)")
    else:
        typer.echo("  (no patterns configured)")
    typer.echo()
    typer.echo("Matching files are left out of the annotated diff.")


@ignore_app.command("add")
def ignore_add(
    pattern: str = typer.Argument(
        ...,
        help="File pattern to add (e.g., *.log, build/*, package-lock.json)",
    ),
) -> None:
    """Add a pattern to the ignore list."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if pattern in get_ignore_patterns(repo_root):
        typer.echo(f"Pattern already exists: {pattern}")
        return

    add_ignore_pattern(repo_root, pattern)
    typer.echo(f"Added ignore pattern: {pattern}")


@ignore_app.command("remove")
def ignore_remove(
    pattern: str = typer.Argument(
        ...,
        help="File pattern to remove from the ignore list",
    ),
) -> None:
    """Remove a pattern from the ignore list."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not remove_ignore_pattern(repo_root, pattern):
        typer.echo(f"Pattern not found: {pattern}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Removed ignore pattern: {pattern}")
