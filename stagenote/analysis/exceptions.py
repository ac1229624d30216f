"""Exception classes for staged change analysis.

Contains:
- ReportParseError: Base exception for report analysis failures
- StatusTruncatedError: Raised when a rename/copy status record has no old path
- ReportDecodeError: Raised when a report field is not valid UTF-8 text
"""

from typing import Optional


class ReportParseError(Exception):
    """Base exception for errors while analysing git reports."""

    pass


class StatusTruncatedError(ReportParseError):
    """Raised when a rename or copy record is missing its old path.

    Record boundaries after the offending record cannot be recovered, so the
    whole classification is abandoned.
    """

    def __init__(self, status_code: str, offset: int, record_index: int):
        self.status_code = status_code
        self.offset = offset
        self.record_index = record_index
        super().__init__(
            f"Status report truncated: '{status_code}' record #{record_index} "
            f"at byte offset {offset} has no old path"
        )


class ReportDecodeError(ReportParseError):
    """Raised when a field that must be text is not valid UTF-8."""

    def __init__(self, field_name: str, offset: int, raw: Optional[bytes] = None):
        self.field_name = field_name
        self.offset = offset
        self.raw = raw
        preview = raw.decode("utf-8", errors="replace") if raw is not None else ""
        super().__init__(
            f"Invalid UTF-8 in {field_name} at byte offset {offset}: {preview!r}"
        )
