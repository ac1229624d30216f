"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its text output
- _run_git_command_bytes: Run a git command and return its raw stdout
- get_repo_root: Get the root directory of the current git repository
"""

import logging
import subprocess
from pathlib import Path

from stagenote.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _execute(args: list[str], text: bool) -> subprocess.CompletedProcess:
    """Run git with the given arguments, converting failures to GitError."""
    logger.debug("Running: git %s", " ".join(args))
    try:
        return subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=text,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = e.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        stderr = stderr.strip()
        raise GitError(
            f"Git command failed: git {' '.join(args)}\n{stderr}",
            command=args,
            stderr=stderr,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.", command=args)


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command fails.
    """
    return _execute(args, text=True).stdout.strip()


def _run_git_command_bytes(args: list[str]) -> bytes:
    """Run a git command and return its stdout untouched.

    ``-z`` reports are NUL-separated and may hold non-UTF-8 paths, so they
    are neither decoded nor stripped.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The raw stdout bytes of the git command.

    Raises:
        GitError: If the command fails.
    """
    return _execute(args, text=False).stdout


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
