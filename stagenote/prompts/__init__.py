"""Prompt templates for commit message generation.

- commit_types: COMMIT_TYPES table, TYPE_SELECTION_GUIDANCE, format_commit_types
- builder: build_prompt
"""

from stagenote.prompts.commit_types import (
    COMMIT_TYPES,
    CommitType,
    MAX_DESCRIPTION_CHARS,
    MIN_DESCRIPTION_CHARS,
    TYPE_SELECTION_GUIDANCE,
    format_commit_types,
)
from stagenote.prompts.builder import build_prompt


__all__ = [
    "COMMIT_TYPES",
    "CommitType",
    "MAX_DESCRIPTION_CHARS",
    "MIN_DESCRIPTION_CHARS",
    "TYPE_SELECTION_GUIDANCE",
    "format_commit_types",
    "build_prompt",
]
