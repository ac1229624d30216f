"""Prompt assembly for commit message generation.

Combines the fixed guidance text with the annotated diff and the change
summary into the single string sent to the text-generation service.
"""

from typing import Optional

from stagenote.analysis.models import ChangeSummary
from stagenote.prompts.commit_types import (
    MAX_DESCRIPTION_CHARS,
    MIN_DESCRIPTION_CHARS,
    TYPE_SELECTION_GUIDANCE,
    format_commit_types,
)

NO_TEXTUAL_DIFF = "No textual diff."
NO_BINARY_CHANGES = "No binary file changes detected."
NO_STRUCTURE_CHANGES = "No folder structure changes detected."
SECTION_RULE = "---"


def _task_instruction(num_suggestions: int) -> str:
    if num_suggestions == 1:
        return (
            "Analyze the following code changes and repository structure modifications. "
            "Generate 1 Git commit message."
        )
    n = num_suggestions
    return (
        "Analyze the following code changes and repository structure modifications. "
        f"Your task is to generate {n} *alternative* Git commit messages. "
        f"Each of these {n} messages must be a complete and valid commit message that "
        "summarizes *all* the changes provided below. "
        "They should represent different ways of phrasing a *single* commit for the "
        "*entirety* of these changes, offering variations in wording or emphasis, but "
        "all pertaining to the same overall update. "
        "Do not generate messages for individual files or sub-tasks within the diff if "
        "they are part of the same logical change. "
        f"\n\nIMPORTANT FOR MULTIPLE VARIATIONS: All {n} variations should use the SAME "
        "commit type (the most appropriate one for the entire changeset). "
        "Only vary the description part to provide different phrasings of the same "
        "conceptual change."
    )


def _type_instruction(num_suggestions: int) -> str:
    if num_suggestions > 1:
        n = num_suggestions
        consistency = (
            f"For the {n} variations requested, determine the single most appropriate "
            "<type> that best describes the overall changes, then create "
            f"{n} different descriptions using that same type. The variations should "
            "differ in wording, emphasis, or perspective, but should all use the same "
            "commit type that represents the primary nature of the entire changeset."
        )
    else:
        consistency = "Choose the <type> that best describes the overall changes"
    return (
        f"{consistency}. Use the provided examples and hierarchy guidance above to "
        "ensure correct type usage.\n"
        "The <description> should be concise, start with a verb in the imperative "
        f"mood if possible, and be between {MIN_DESCRIPTION_CHARS} and "
        f"{MAX_DESCRIPTION_CHARS} characters."
    )


def _previous_message_instruction(previous_message: str, num_suggestions: int) -> str:
    variations = f"{num_suggestions} variations of it" if num_suggestions > 1 else "it"
    return (
        f"The previous commit message was: '{previous_message}'. Please generate a new, "
        f"improved message (or {variations} if multiple are requested) based on the "
        "changes, considering why the previous one might have been suboptimal. Ensure "
        "the <type> is appropriate for the changes, guided by the hierarchy and "
        "examples provided above. If generating multiple variations, they should all "
        "use the same improved type."
    )


def build_prompt(
    annotated_diff: str,
    summary: ChangeSummary,
    num_suggestions: int = 1,
    previous_message: Optional[str] = None,
) -> str:
    """Build the full prompt for commit message generation.

    Args:
        annotated_diff: The staged diff after annotation.
        summary: Binary and structural changes of the staged set.
        num_suggestions: How many alternative messages to ask for.
        previous_message: Message being replaced when amending, if any.

    Returns:
        The prompt, with sections separated by blank lines.

    Raises:
        ValueError: If num_suggestions is less than 1.
    """
    if num_suggestions < 1:
        raise ValueError(f"num_suggestions must be at least 1, got {num_suggestions}")

    parts = [
        _task_instruction(num_suggestions),
        "Each message MUST follow this format: <type>: <description>",
        TYPE_SELECTION_GUIDANCE,
        "Available <type>s, their descriptions, and EXAMPLES of their use are:\n"
        + format_commit_types().rstrip(),
        _type_instruction(num_suggestions),
        "Do not include any other explanatory text, just the commit message(s).",
    ]

    if previous_message is not None:
        parts.append(_previous_message_instruction(previous_message, num_suggestions))

    parts.extend([
        f"Diff:\n\n{SECTION_RULE}",
        annotated_diff if annotated_diff.strip() else NO_TEXTUAL_DIFF,
        SECTION_RULE,
        "Binary file changes:",
        "\n".join(summary.binary_file_changes) or NO_BINARY_CHANGES,
        SECTION_RULE,
        "Folder structure changes:",
        "\n".join(summary.structure_changes) or NO_STRUCTURE_CHANGES,
        SECTION_RULE,
    ])

    return "\n\n".join(parts)
