"""
Numeric parsers and typed row access for raw tabular cells.

Raw rows arrive as ``column -> string`` mappings. ``RowReader`` is the only
place that touches those strings: its accessors either return validated values
or report a miss, so aggregation code never handles raw text.
"""

import math
from collections.abc import Callable, Mapping
from typing import Optional

from ..errors import MalformedRowError

RawRow = Mapping[str, str]


class ParseError(Exception):
    """Raised when a cell cannot be parsed into a finite number."""
    pass


def _to_finite_float(text: str, raw: str) -> float:
    text = text.strip()
    if not text:
        raise ParseError(f"Empty numeric value: {raw!r}")

    try:
        value = float(text)
    except ValueError as e:
        raise ParseError(f"Invalid numeric value {raw!r}: {e}")

    # float() accepts "nan" and "inf"
    if not math.isfinite(value):
        raise ParseError(f"Non-finite numeric value: {raw!r}")

    return value


def parse_plain(raw: str) -> float:
    """Parse a signed decimal number such as ``"-1.5"`` or ``"+2"``."""
    return _to_finite_float(raw, raw)


def parse_percent(raw: str) -> float:
    """Parse a percent change such as ``"+2.00%"``; the ``%`` suffix is optional."""
    text = raw.strip()
    if text.endswith("%"):
        text = text[:-1]
    return _to_finite_float(text, raw)


def parse_thousands(raw: str) -> float:
    """Parse a number with comma thousands separators such as ``"1,234,567.8"``."""
    return _to_finite_float(raw.replace(",", ""), raw)


PARSERS: dict[str, Callable[[str], float]] = {
    "plain": parse_plain,
    "percent": parse_percent,
    "thousands": parse_thousands,
}


def get_parser(name: str) -> Callable[[str], float]:
    """Look up a parser by its configuration name."""
    try:
        return PARSERS[name]
    except KeyError:
        raise ValueError(f"Unknown parser: {name!r}. Must be one of {sorted(PARSERS)}")


class RowReader:
    """Typed, read-only accessors over one raw row."""

    def __init__(self, row: RawRow, index: Optional[int] = None):
        self.row = row
        self.index = index

    def get_string(self, column: str) -> Optional[str]:
        """
        Return the untrimmed cell value, or None when it is missing or blank.

        The raw value is returned as-is so callers can keep it for display.
        """
        value = self.row.get(column)
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    def require_string(self, column: str) -> str:
        """
        Return the untrimmed cell value.

        Raises:
            MalformedRowError: If the cell is missing or blank
        """
        value = self.get_string(column)
        if value is None:
            raise MalformedRowError(
                f"Missing value for column {column!r}",
                row_index=self.index,
                field=column,
                raw_value=self.row.get(column),
            )
        return value

    def get_numeric(self, column: str, parser: Callable[[str], float] = parse_plain) -> Optional[float]:
        """Return the parsed cell value, or None when missing or unparsable."""
        value = self.get_string(column)
        if value is None:
            return None
        try:
            return parser(value)
        except ParseError:
            return None
