"""Tests for group key normalization"""

import pytest
from assetviz_app.data.keys import is_valid_key, normalize_key


class TestNormalizeKey:
    """Test normalize_key"""

    def test_trims_and_casefolds(self):
        """Whitespace and case do not split groups"""
        assert normalize_key("  AAA ") == "aaa"
        assert normalize_key("aaa") == normalize_key("AAA")

    def test_casefold_handles_non_ascii(self):
        """casefold is stronger than lower"""
        assert normalize_key("STRASSE") == normalize_key("straße")

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_identifier_is_invalid(self, raw):
        """Blank identifiers normalize to an invalid key"""
        assert is_valid_key(normalize_key(raw)) is False

    def test_none_is_invalid(self):
        """A missing key is invalid"""
        assert is_valid_key(None) is False
        assert is_valid_key("btc") is True
