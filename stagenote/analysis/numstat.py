"""Binary status map built from ``git diff --staged --numstat -z``.

Each record starts with a lead of tab-separated columns:

    <added>\\t<deleted>\\t<path>           plain record
    <added>\\t<deleted>\\t                 rename/copy, paths follow as two fields
    <added>\\t<deleted>\\t<score>%         rename/copy with a similarity score
    <added>\\t<deleted>                   rename/copy, paths follow as two fields

Binary files report ``-`` for both counts. Leads of any other shape are
skipped: the report format has variants and one odd record must not sink
the whole summary.
"""

import logging
import re
from typing import Iterator

from stagenote.analysis.cursor import FieldCursor, decode_field, is_blank_report
from stagenote.analysis.models import (
    NumstatRecord,
    PathStat,
    RenameStat,
    UnrecognizedStat,
)

logger = logging.getLogger(__name__)

BINARY_PLACEHOLDER = "-"

_SIMILARITY_RE = re.compile(r"[0-9]+%")


def _is_binary(added: str, deleted: str) -> bool:
    return added == BINARY_PLACEHOLDER and deleted == BINARY_PLACEHOLDER


def _read_rename(cursor: FieldCursor, lead: str, is_binary: bool) -> NumstatRecord:
    """Consume the old and new path fields that follow a rename/copy lead.

    A lead left without its two path fields at the end of the report comes
    back as UnrecognizedStat instead of raising, unlike a truncated status
    report. Nothing can follow a truncated tail, so no record is lost.
    """
    paths = cursor.pull(2)
    if paths is None:
        return UnrecognizedStat(lead)
    old_path, new_path = paths
    return RenameStat(
        old_path=old_path,
        new_path=decode_field(new_path, "numstat new path", cursor.offset),
        is_binary=is_binary,
    )


def iter_numstat_records(numstat: bytes) -> Iterator[NumstatRecord]:
    """Parse a NUL-separated numstat report into records.

    Args:
        numstat: Raw stdout of ``git diff --staged --numstat -z``.

    Yields:
        One PathStat, RenameStat or UnrecognizedStat per lead.

    Raises:
        ReportDecodeError: If a lead or a new path is not valid UTF-8.
    """
    cursor = FieldCursor(numstat)
    while True:
        raw_lead = cursor.next_lead()
        if raw_lead is None:
            return
        lead = decode_field(raw_lead, "numstat lead", cursor.offset)
        parts = lead.split("\t")

        if len(parts) == 3:
            added, deleted, third = parts
            is_binary = _is_binary(added, deleted)
            if not third or _SIMILARITY_RE.fullmatch(third):
                yield _read_rename(cursor, lead, is_binary)
            else:
                yield PathStat(path=third, is_binary=is_binary)
        elif len(parts) == 2:
            added, deleted = parts
            yield _read_rename(cursor, lead, _is_binary(added, deleted))
        else:
            yield UnrecognizedStat(lead)


def build_binary_status_map(numstat: bytes) -> dict[str, bool]:
    """Map every staged path in a numstat report to whether it is binary.

    Renames and copies are keyed by their new path. Paths missing from the
    map should be treated as text.

    Args:
        numstat: Raw stdout of ``git diff --staged --numstat -z``.

    Returns:
        Dictionary of path to is-binary flag.
    """
    binary_map: dict[str, bool] = {}
    if is_blank_report(numstat):
        return binary_map

    for record in iter_numstat_records(numstat):
        if isinstance(record, PathStat):
            binary_map[record.path] = record.is_binary
        elif isinstance(record, RenameStat):
            binary_map[record.new_path] = record.is_binary
        else:
            logger.debug("Skipping unrecognized numstat record: %r", record.lead)

    return binary_map
