"""Staged change classifier.

Fuses ``git status --porcelain=v1 -z`` with the numstat binary map into a
ChangeSummary. Textual adds and edits are left to the diff; only binary
files and structural events (deletes, renames, copies, type changes) are
summarised here.

Porcelain ``-z`` records look like ``XY <path>\\0``; renames and copies
carry one extra field with the old path: ``R  <new>\\0<old>\\0``.
"""

import logging
from typing import Optional

from stagenote.analysis.cursor import FieldCursor, decode_field, is_blank_report
from stagenote.analysis.exceptions import StatusTruncatedError
from stagenote.analysis.models import ChangeSummary, describe_status_code
from stagenote.analysis.numstat import build_binary_status_map

logger = logging.getLogger(__name__)

# Status letters whose record is followed by an old-path field
_PATH_PAIR_CODES = ("R", "C")


def classify_staged_changes(status: bytes, numstat: bytes) -> ChangeSummary:
    """Classify the binary and structural changes in the staged change set.

    Args:
        status: Raw stdout of ``git status --porcelain=v1 -z --untracked-files=no``.
        numstat: Raw stdout of ``git diff --staged --numstat -z``.

    Returns:
        A ChangeSummary with both tuples sorted.

    Raises:
        StatusTruncatedError: If a rename/copy record has no old path.
        ReportDecodeError: If a lead or path is not valid UTF-8.
    """
    if is_blank_report(status):
        return ChangeSummary()

    binary_map = build_binary_status_map(numstat)

    def is_binary(path: str) -> bool:
        return binary_map.get(path, False)

    binary_changes: list[str] = []
    structure_changes: list[str] = []

    cursor = FieldCursor(status)
    record_index = -1
    while True:
        raw_lead = cursor.next_lead()
        if raw_lead is None:
            break
        record_index += 1
        lead_offset = cursor.offset
        if len(raw_lead) < 3:
            logger.debug("Skipping short status record #%d: %r", record_index, raw_lead)
            continue
        lead = decode_field(raw_lead, "status entry lead", lead_offset)

        status_codes = lead[0:2]
        path = lead[3:]
        code = status_codes[0]

        old_path: Optional[str] = None
        if code in _PATH_PAIR_CODES:
            raw_old = cursor.next_field()
            if raw_old is None:
                raise StatusTruncatedError(status_codes, lead_offset, record_index)
            old_path = decode_field(
                raw_old, f"old path for {status_codes} status", cursor.offset
            )

        if code == "A":
            if is_binary(path):
                binary_changes.append(f"added binary file: {path}")
        elif code == "D":
            structure_changes.append(f"deleted file: {path}")
        elif code == "R":
            if old_path and path:
                structure_changes.append(f"renamed: {old_path} to {path}")
                if is_binary(path):
                    binary_changes.append(f"renamed binary file: {old_path} to {path}")
        elif code == "C":
            if not old_path:
                raise StatusTruncatedError(status_codes, lead_offset, record_index)
            if path:
                structure_changes.append(f"copied: {old_path} to {path}")
                if is_binary(path):
                    binary_changes.append(f"copied binary file to: {path}")
        elif code == "M":
            if is_binary(path):
                binary_changes.append(f"modified binary file: {path}")
        elif code == "T":
            structure_changes.append(f"type changed for: {path}")
            if is_binary(path):
                binary_changes.append(f"type changed to binary: {path}")
        else:
            logger.debug(
                "Ignoring %s status '%s' for %s",
                describe_status_code(code),
                status_codes,
                path,
            )

    return ChangeSummary(
        binary_file_changes=tuple(sorted(binary_changes)),
        structure_changes=tuple(sorted(structure_changes)),
    )
