"""Exceptions raised while collecting staged changes from git.

- GitError: A git command failed or git is unavailable
- NoStagedChangesError: The index holds nothing to describe
"""

from typing import Optional


class GitError(Exception):
    """A git invocation failed.

    Attributes:
        command: The git arguments that were run, if any.
        stderr: What git printed on stderr, if anything.
    """

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class NoStagedChangesError(GitError):
    """Nothing is staged, so there is no commit to describe."""
