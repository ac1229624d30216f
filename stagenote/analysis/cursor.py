"""Cursor over the fields of a NUL-separated git report.

git's ``-z`` output terminates every field with a NUL byte, so paths can hold
any byte except NUL. Records are variable width and only their content tells
how many fields follow, so the fields are consumed one at a time.
"""

from typing import Optional

from stagenote.analysis.exceptions import ReportDecodeError


def is_blank_report(data: bytes) -> bool:
    """Check whether a report is empty or made only of NUL bytes."""
    return not data.strip(b"\x00")


class FieldCursor:
    """Walks the NUL-separated fields of one report.

    Each field comes with the byte offset where it starts so errors can point
    at the exact place in the report.
    """

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0
        self.offset = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def next_field(self) -> Optional[bytes]:
        """Return the next field, or None when the report is exhausted.

        The empty tail left after the final terminator is not a field.
        """
        if self.at_end():
            return None
        start = self._pos
        end = self._data.find(b"\x00", start)
        if end == -1:
            end = len(self._data)
        self._pos = end + 1
        self.offset = start
        return self._data[start:end]

    def next_lead(self) -> Optional[bytes]:
        """Return the next non-empty field, skipping stray separators."""
        while True:
            field = self.next_field()
            if field is None or field:
                return field

    def pull(self, count: int) -> Optional[list[bytes]]:
        """Take exactly ``count`` fields, or None if the report ends first."""
        fields = []
        for _ in range(count):
            field = self.next_field()
            if field is None:
                return None
            fields.append(field)
        return fields


def decode_field(raw: bytes, field_name: str, offset: int) -> str:
    """Decode a report field as UTF-8.

    Raises:
        ReportDecodeError: If the field is not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReportDecodeError(field_name, offset, raw) from e
