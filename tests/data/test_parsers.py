"""Tests for numeric parsers and typed row access"""

import pytest
from assetviz_app.data.parsers import (
    PARSERS,
    ParseError,
    RowReader,
    get_parser,
    parse_percent,
    parse_plain,
    parse_thousands,
)
from assetviz_app.errors import MalformedRowError


class TestParsers:
    """Test individual cell parsers"""

    @pytest.mark.parametrize("raw,expected", [
        ("+2.00%", 2.0),
        ("-1.00%", -1.0),
        ("0.5", 0.5),
        (" 3.25% ", 3.25),
    ])
    def test_parse_percent(self, raw, expected):
        """Percent suffix and sign are accepted"""
        assert parse_percent(raw) == expected

    def test_parse_thousands(self):
        """Comma separators are stripped"""
        assert parse_thousands("1,234,567.5") == 1234567.5
        assert parse_thousands("-1,000") == -1000.0

    def test_parse_plain_rejects_separators(self):
        """Plain parser does not strip commas"""
        with pytest.raises(ParseError):
            parse_plain("1,000")

    @pytest.mark.parametrize("raw", ["", "  ", "abc", "%", "nan", "inf", "-Infinity"])
    def test_non_finite_or_garbage_rejected(self, raw):
        """Anything that is not a finite number fails"""
        for parser in PARSERS.values():
            with pytest.raises(ParseError):
                parser(raw)

    def test_get_parser_unknown(self):
        """Unknown parser names are rejected"""
        assert get_parser("percent") is parse_percent
        with pytest.raises(ValueError):
            get_parser("currency")


class TestRowReader:
    """Test RowReader accessors"""

    def test_get_string_keeps_raw_value(self):
        """Display values are returned untrimmed"""
        reader = RowReader({"symbol": " AAPL "})
        assert reader.get_string("symbol") == " AAPL "

    def test_get_string_missing_or_blank(self):
        """Missing and blank cells are reported as None"""
        reader = RowReader({"symbol": "   "})
        assert reader.get_string("symbol") is None
        assert reader.get_string("absent") is None

    def test_require_string_raises_malformed_row(self):
        """require_string raises a recoverable error carrying the row context"""
        reader = RowReader({"symbol": ""}, index=7)
        with pytest.raises(MalformedRowError) as exc_info:
            reader.require_string("symbol")

        assert exc_info.value.row_index == 7
        assert exc_info.value.field == "symbol"
        assert exc_info.value.recoverable is True

    def test_get_numeric(self):
        """Numeric access applies the parser and swallows parse failures"""
        reader = RowReader({"chg": "+2.5%", "cap": "1,000", "bad": "n/a"})
        assert reader.get_numeric("chg", parse_percent) == 2.5
        assert reader.get_numeric("cap", parse_thousands) == 1000.0
        assert reader.get_numeric("bad", parse_plain) is None
        assert reader.get_numeric("absent") is None

    def test_get_numeric_nan_is_none(self):
        """NaN cells do not leak into aggregation"""
        assert RowReader({"x": "NaN"}).get_numeric("x") is None
