"""Git status and numstat reports.

Contains:
- has_staged_files: Check whether anything is staged
- get_status_report: Raw NUL-separated porcelain status of staged files
- get_numstat_report: Raw NUL-separated numstat of the staged diff
- _get_staged_files_list: Get list of staged file paths
"""

from stagenote.git.runner import _run_git_command, _run_git_command_bytes


def has_staged_files() -> bool:
    """Check whether the index holds any change against HEAD.

    Returns:
        True if at least one tracked file has a status entry.
    """
    return bool(_run_git_command(["status", "--porcelain", "--untracked-files=no"]))


def get_status_report() -> bytes:
    """Get the porcelain v1 status report, NUL-separated.

    Untracked files are left out; they cannot be part of the commit.

    Returns:
        Raw stdout bytes of git status.
    """
    return _run_git_command_bytes(
        ["status", "--porcelain=v1", "-z", "--untracked-files=no"]
    )


def get_numstat_report() -> bytes:
    """Get the numstat report of the staged diff, NUL-separated.

    Returns:
        Raw stdout bytes of git diff --numstat.
    """
    return _run_git_command_bytes(["diff", "--staged", "--numstat", "-z"])


def _get_staged_files_list() -> list[str]:
    """Get list of staged file paths.

    Uses ``-z`` so git leaves non-ASCII paths unquoted. Bytes that are not
    UTF-8 are kept as surrogate escapes and survive the round trip back
    into a git argument.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command_bytes(["diff", "--staged", "--name-only", "-z"])
    return [
        path.decode("utf-8", errors="surrogateescape")
        for path in output.split(b"\x00")
        if path
    ]
