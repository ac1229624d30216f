"""Staged diff retrieval.

Contains:
- get_staged_diff: Get the staged diff, excluding ignored files
- _should_exclude_file: Check if a file should be excluded based on patterns
- DEFAULT_DIFF_EXCLUDE_PATTERNS: Patterns used when no repo config is reachable
"""

import fnmatch
import logging
from pathlib import Path
from typing import Optional

from stagenote.git.exceptions import GitError, NoStagedChangesError
from stagenote.git.runner import _run_git_command, get_repo_root
from stagenote.git.status import _get_staged_files_list
from stagenote.user_config import get_ignore_patterns

logger = logging.getLogger(__name__)

DEFAULT_DIFF_EXCLUDE_PATTERNS = [
    "poetry.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
]

ONLY_IGNORED_FILES_NOTICE = "(Only ignored files staged - no code changes to describe)"
TRUNCATION_MARKER = "\n...[truncated]\n"


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file matches any ignore pattern.

    A pattern matches the full path exactly, as a glob, or as a glob
    against the basename alone.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    basename = Path(filename).name
    return any(
        filename == pattern
        or fnmatch.fnmatch(filename, pattern)
        or fnmatch.fnmatch(basename, pattern)
        for pattern in patterns
    )


def get_staged_diff(max_chars: int = 50000, repo_root: Optional[Path] = None) -> str:
    """Get the staged diff, leaving out ignored files.

    Lock files and other generated artifacts inflate the diff without
    saying anything about the change, so paths matching the repo's ignore
    patterns are dropped before the diff is requested.

    Args:
        max_chars: Diffs longer than this are cut and marked as truncated.
        repo_root: The root directory of the git repository (optional).

    Returns:
        The staged diff text.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    if repo_root is None:
        try:
            repo_root = get_repo_root()
        except GitError:
            repo_root = None
    ignore_patterns = (
        get_ignore_patterns(repo_root) if repo_root else DEFAULT_DIFF_EXCLUDE_PATTERNS
    )

    staged_files = _get_staged_files_list()
    if not staged_files:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    files_to_include = [
        f for f in staged_files if not _should_exclude_file(f, ignore_patterns)
    ]
    skipped = len(staged_files) - len(files_to_include)
    if skipped:
        logger.info("Leaving %d ignored file(s) out of the diff", skipped)

    if not files_to_include:
        return ONLY_IGNORED_FILES_NOTICE

    pathspecs = [f":(literal){path}" for path in files_to_include]
    diff = _run_git_command(["diff", "--staged", "--"] + pathspecs)
    if not diff:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    if len(diff) > max_chars:
        diff = diff[:max_chars] + TRUNCATION_MARKER

    return diff
