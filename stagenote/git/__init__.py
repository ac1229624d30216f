"""Git collaborator for stagenote.

This package runs git and hands its raw output to the analysis code:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, _run_git_command_bytes, get_repo_root
- status: has_staged_files, get_status_report, get_numstat_report,
          _get_staged_files_list
- diff: get_staged_diff, _should_exclude_file, DEFAULT_DIFF_EXCLUDE_PATTERNS
- log: get_previous_commit_message
"""

# Exceptions
from stagenote.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from stagenote.git.runner import (
    _run_git_command,
    _run_git_command_bytes,
    get_repo_root,
)

# Status and numstat reports
from stagenote.git.status import (
    has_staged_files,
    get_status_report,
    get_numstat_report,
    _get_staged_files_list,
)

# Diff utilities
from stagenote.git.diff import (
    get_staged_diff,
    _should_exclude_file,
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
)

# History
from stagenote.git.log import get_previous_commit_message


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "_run_git_command_bytes",
    "get_repo_root",
    # Status
    "has_staged_files",
    "get_status_report",
    "get_numstat_report",
    "_get_staged_files_list",
    # Diff
    "get_staged_diff",
    "_should_exclude_file",
    "DEFAULT_DIFF_EXCLUDE_PATTERNS",
    # Log
    "get_previous_commit_message",
]
