"""Tests for stagenote.prompts package."""

import pytest

from stagenote.analysis import ChangeSummary
from stagenote.prompts import (
    COMMIT_TYPES,
    MAX_DESCRIPTION_CHARS,
    MIN_DESCRIPTION_CHARS,
    TYPE_SELECTION_GUIDANCE,
    build_prompt,
    format_commit_types,
)

DIFF = (
    "diff --git a/file.txt b/file.txt\n"
    "--- a/file.txt\n"
    "+++ b/file.txt\n"
    "@@ -1 +1 @@\n"
    "[REMOVED_LINE]: old\n"
    "[ADDED_LINE]: new"
)

FEAT_LINE = (
    '- feat: A new feature or significant functionality addition (e.g., adding new '
    'endpoints, UI components, initial project setup). (Example: "feat: Implement '
    'user authentication via OAuth")'
)


class TestFormatCommitTypes:
    """Tests for format_commit_types function."""

    def test_one_line_per_type(self):
        """Test that every type is listed once."""
        formatted = format_commit_types()
        assert len(formatted.splitlines()) == len(COMMIT_TYPES)
        assert formatted.endswith(")\n")

    def test_ordered_by_priority_then_name(self):
        """Test the listing order."""
        names = [line.split(":")[0][2:] for line in format_commit_types().splitlines()]
        assert names[0] == "feat"
        assert names[1:3] == ["fix", "revert"]
        assert names.index("build") < names.index("ci")
        assert names[-2:] == ["readme", "style"]

    def test_includes_examples(self):
        """Test that each line carries its example."""
        assert FEAT_LINE in format_commit_types()


class TestBuildPrompt:
    """Tests for build_prompt function."""

    def test_single_suggestion(self):
        """Test the prompt for a single message."""
        summary = ChangeSummary(
            binary_file_changes=["added binary file: image.png"],
            structure_changes=["renamed: old_dir/file.txt to new_dir/file.txt"],
        )
        prompt = build_prompt(DIFF, summary)

        assert "Generate 1 Git commit message." in prompt
        assert FEAT_LINE in prompt
        assert (
            f"between {MIN_DESCRIPTION_CHARS} and {MAX_DESCRIPTION_CHARS} characters."
            in prompt
        )
        assert DIFF in prompt
        assert "Binary file changes:\n\nadded binary file: image.png\n\n---" in prompt
        assert (
            "Folder structure changes:\n\nrenamed: old_dir/file.txt to new_dir/file.txt\n\n---"
            in prompt
        )
        assert "The previous commit message was:" not in prompt
        assert TYPE_SELECTION_GUIDANCE in prompt

    def test_multiple_suggestions(self):
        """Test the prompt asking for alternatives."""
        prompt = build_prompt(DIFF, ChangeSummary(), num_suggestions=5)

        assert "Your task is to generate 5 *alternative* Git commit messages." in prompt
        assert "All 5 variations should use the SAME commit type" in prompt
        assert "For the 5 variations requested" in prompt
        assert "Generate 1 Git commit message." not in prompt

    def test_previous_message_single(self):
        """Test the amend section for one message."""
        prompt = build_prompt(DIFF, ChangeSummary(), previous_message="fix: did a thing wrong")

        assert (
            "The previous commit message was: 'fix: did a thing wrong'. Please generate "
            "a new, improved message (or it if multiple are requested)" in prompt
        )

    def test_previous_message_multiple(self):
        """Test the amend section for alternatives."""
        prompt = build_prompt(
            DIFF, ChangeSummary(), num_suggestions=3, previous_message="fix: x"
        )
        assert "(or 3 variations of it if multiple are requested)" in prompt

    def test_no_textual_diff(self):
        """Test the placeholder for an empty diff."""
        summary = ChangeSummary(binary_file_changes=["added binary file: data.zip"])
        prompt = build_prompt("", summary)

        assert "Diff:\n\n---\n\nNo textual diff.\n\n---" in prompt
        assert "Binary file changes:\n\nadded binary file: data.zip\n\n---" in prompt

    def test_empty_summary(self):
        """Test the placeholders for an empty summary."""
        prompt = build_prompt(DIFF, ChangeSummary())

        assert "Binary file changes:\n\nNo binary file changes detected.\n\n---" in prompt
        assert (
            "Folder structure changes:\n\nNo folder structure changes detected.\n\n---"
            in prompt
        )
        assert prompt.endswith("---")

    def test_multiple_entries_one_per_line(self):
        """Test that summary entries are newline separated."""
        summary = ChangeSummary(structure_changes=["deleted file: a", "deleted file: b"])
        prompt = build_prompt(DIFF, summary)
        assert "deleted file: a\ndeleted file: b" in prompt

    def test_rejects_zero_suggestions(self):
        """Test that at least one suggestion is required."""
        with pytest.raises(ValueError):
            build_prompt(DIFF, ChangeSummary(), num_suggestions=0)
