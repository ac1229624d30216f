"""Local analysis of staged changes.

This package turns raw git reports into prompt input without running git:
- exceptions: ReportParseError, StatusTruncatedError, ReportDecodeError
- models: ChangeSummary, numstat record variants, STATUS_CODE_MEANINGS
- numstat: build_binary_status_map, iter_numstat_records
- classifier: classify_staged_changes
- annotate: annotate_diff, ADDED_LINE_MARKER, REMOVED_LINE_MARKER
"""

from stagenote.analysis.exceptions import (
    ReportParseError,
    StatusTruncatedError,
    ReportDecodeError,
)
from stagenote.analysis.models import (
    ChangeSummary,
    PathStat,
    RenameStat,
    UnrecognizedStat,
    STATUS_CODE_MEANINGS,
    describe_status_code,
)
from stagenote.analysis.numstat import (
    build_binary_status_map,
    iter_numstat_records,
)
from stagenote.analysis.classifier import classify_staged_changes
from stagenote.analysis.annotate import (
    annotate_diff,
    ADDED_LINE_MARKER,
    REMOVED_LINE_MARKER,
)


__all__ = [
    # Exceptions
    "ReportParseError",
    "StatusTruncatedError",
    "ReportDecodeError",
    # Models
    "ChangeSummary",
    "PathStat",
    "RenameStat",
    "UnrecognizedStat",
    "STATUS_CODE_MEANINGS",
    "describe_status_code",
    # Numstat
    "build_binary_status_map",
    "iter_numstat_records",
    # Classifier
    "classify_staged_changes",
    # Annotator
    "annotate_diff",
    "ADDED_LINE_MARKER",
    "REMOVED_LINE_MARKER",
]
