"""Staged change pipeline.

Contains:
- collect_change_summary: Classify the staged change set from git reports
- collect_annotated_diff: Fetch and annotate the staged diff
- build_prompt_bundle: Assemble the full prompt for the staged changes
"""

import logging
from pathlib import Path
from typing import Optional

from stagenote.analysis import ChangeSummary, annotate_diff, classify_staged_changes
from stagenote.git import (
    get_numstat_report,
    get_previous_commit_message,
    get_staged_diff,
    get_status_report,
)
from stagenote.prompts import build_prompt

logger = logging.getLogger(__name__)


def collect_change_summary() -> ChangeSummary:
    """Classify binary and structural changes in the index.

    Returns:
        The ChangeSummary of the staged change set.

    Raises:
        GitError: If git fails.
        ReportParseError: If a git report cannot be parsed.
    """
    status = get_status_report()
    numstat = get_numstat_report()
    summary = classify_staged_changes(status, numstat)
    logger.info(
        "Found %d binary and %d structural change(s)",
        len(summary.binary_file_changes),
        len(summary.structure_changes),
    )
    return summary


def collect_annotated_diff(max_chars: int = 50000, repo_root: Optional[Path] = None) -> str:
    """Get the staged diff with added and removed lines marked.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If git fails.
    """
    return annotate_diff(get_staged_diff(max_chars=max_chars, repo_root=repo_root))


def build_prompt_bundle(
    max_chars: int = 50000,
    num_suggestions: int = 1,
    amend: bool = False,
    repo_root: Optional[Path] = None,
) -> str:
    """Build the prompt describing the staged changes.

    Args:
        max_chars: Maximum characters for the staged diff.
        num_suggestions: How many alternative messages to ask for.
        amend: Include the last commit message so it can be improved.
        repo_root: The root directory of the git repository (optional).

    Returns:
        The assembled prompt.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If git fails.
        ReportParseError: If a git report cannot be parsed.
    """
    annotated_diff = collect_annotated_diff(max_chars=max_chars, repo_root=repo_root)
    summary = collect_change_summary()

    previous_message = None
    if amend:
        previous_message = get_previous_commit_message()
        if previous_message is None:
            logger.warning("No previous commit to amend; building a fresh prompt")

    return build_prompt(
        annotated_diff,
        summary,
        num_suggestions=num_suggestions,
        previous_message=previous_message,
    )
