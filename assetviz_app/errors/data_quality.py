"""
Data quality error classifications for tabular row processing.

These errors describe per-row anomalies. They are recovered locally by
skipping the offending row and are never surfaced past the aggregation stage.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedRowError(DataQualityError):
    """A row is missing its identifier or carries an unparsable value."""

    def __init__(self, message: str, row_index: Optional[int] = None,
                 field: Optional[str] = None, raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.row_index = row_index
        self.field = field
        self.raw_value = raw_value
