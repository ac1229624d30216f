"""Commit history lookups.

Contains:
- get_previous_commit_message: Message of HEAD, used when rewording an amend
"""

from typing import Optional

from stagenote.git.exceptions import GitError
from stagenote.git.runner import _run_git_command

# stderr fragments git prints when HEAD does not exist yet
_NO_COMMITS_MARKERS = (
    "does not have any commits yet",
    "bad default revision 'head'",
    "needed a single revision",
    "unknown revision",
)


def get_previous_commit_message() -> Optional[str]:
    """Get the full message of the last commit.

    Returns:
        The commit message, or None if the repository has no commits.

    Raises:
        GitError: If git fails for any other reason.
    """
    try:
        return _run_git_command(["log", "-1", "--pretty=%B"])
    except GitError as e:
        message = str(e).lower()
        if any(marker in message for marker in _NO_COMMITS_MARKERS):
            return None
        raise
