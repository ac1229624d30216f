"""CLI entry point for stagenote.

This module builds the typer application from the command modules.
"""

import typer

from stagenote.cli.commands import (
    annotate_command,
    classify_command,
    main_command,
    prompt_command,
    summary_command,
)
from stagenote.cli.ignore import ignore_app

app = typer.Typer(
    name="stagenote",
    help="stagenote: turn staged git changes into commit message prompts",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(ignore_app, name="ignore")

app.command("summary")(summary_command)
app.command("annotate")(annotate_command)
app.command("prompt")(prompt_command)
app.command("classify")(classify_command)

app.callback()(main_command)


__all__ = [
    "app",
    "ignore_app",
    "main_command",
    "summary_command",
    "annotate_command",
    "prompt_command",
    "classify_command",
]
