"""Diff annotation for the text-generation prompt.

Rewrites added and removed lines of a unified diff with explicit markers so a
reader that does not know diff syntax can still tell them apart. Header and
hunk lines are left alone.
"""

ADDED_LINE_MARKER = "[ADDED_LINE]: "
REMOVED_LINE_MARKER = "[REMOVED_LINE]: "

# Lines starting with these are diff metadata, even when they begin with +/-
DIFF_HEADER_PREFIXES = (
    "+++",
    "---",
    "diff --git",
    "index",
    "old mode",
    "new mode",
    "deleted file mode",
    "new file mode",
    "copy from",
    "copy to",
    "rename from",
    "rename to",
    "similarity index",
    "dissimilarity index",
    "Binary files",
    "@@",
)


def _split_lines(text: str) -> list[str]:
    """Split on newlines; a final terminator does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def annotate_line(line: str) -> str:
    """Annotate a single diff line."""
    if line.startswith(DIFF_HEADER_PREFIXES):
        return line
    if line.startswith("+"):
        return ADDED_LINE_MARKER + line[1:]
    if line.startswith("-"):
        return REMOVED_LINE_MARKER + line[1:]
    return line


def annotate_diff(raw_diff: str) -> str:
    """Mark added and removed lines of a unified diff.

    The output has the same lines in the same order, joined with ``\\n``.
    Only the first character of a line is inspected. The transform is not
    meant to be reversible.

    Args:
        raw_diff: Text of a unified diff.

    Returns:
        The annotated diff.
    """
    return "\n".join(annotate_line(line) for line in _split_lines(raw_diff))
