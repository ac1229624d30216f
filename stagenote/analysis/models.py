"""Data models for staged change analysis.

Contains:
- ChangeSummary: Pydantic model holding the classified non-textual changes
- PathStat, RenameStat, UnrecognizedStat: Parsed numstat record variants
- STATUS_CODE_MEANINGS: Human-readable meaning of each porcelain status letter
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from pydantic import BaseModel, ConfigDict


STATUS_CODE_MEANINGS = MappingProxyType({
    " ": "unmodified",
    "A": "added",
    "C": "copied",
    "D": "deleted",
    "M": "modified",
    "R": "renamed",
    "T": "type changed",
    "U": "unmerged",
    "?": "untracked",
    "!": "ignored",
})


def describe_status_code(code: str) -> str:
    """Return the meaning of a single porcelain status letter."""
    return STATUS_CODE_MEANINGS.get(code, "unknown")


class ChangeSummary(BaseModel):
    """Binary and structural changes found in the staged change set.

    Both tuples are sorted. A renamed binary file shows up in both,
    once as a rename and once as a binary change.

    Attributes:
        binary_file_changes: One entry per binary file event.
        structure_changes: One entry per delete, rename, type change or copy.
    """

    model_config = ConfigDict(frozen=True)

    binary_file_changes: tuple[str, ...] = ()
    structure_changes: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Check whether no binary or structural change was found."""
        return not self.binary_file_changes and not self.structure_changes


@dataclass(frozen=True)
class PathStat:
    """A numstat record that names its path inline."""

    path: str
    is_binary: bool


@dataclass(frozen=True)
class RenameStat:
    """A numstat record for a rename or copy, keyed by its new path."""

    old_path: bytes
    new_path: str
    is_binary: bool


@dataclass(frozen=True)
class UnrecognizedStat:
    """A numstat lead whose shape is not understood."""

    lead: str


NumstatRecord = Union[PathStat, RenameStat, UnrecognizedStat]
