"""
Unit tests for identifier validation and quoting.
"""

import pytest

from typed_sql.sql.core.identifier import (
    quote_column,
    quote_identifier,
    quote_table,
    validate_and_escape,
    validate_prefix,
)
from typed_sql.sql.errors import InvalidIdentifier


class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_quote_ascii_column(self):
        assert quote_identifier("company_id") == "`company_id`"

    def test_quote_with_internal_backtick(self):
        """Internal quote characters should be doubled."""
        assert quote_identifier("column`name") == "`column``name`"

    def test_quote_double_quote_dialect(self):
        assert quote_identifier('column"name', quote_char='"') == '"column""name"'


class TestValidateAndEscape:
    """Tests for validate_and_escape function."""

    @pytest.mark.parametrize("name", ["users", "Users_2024", "_tmp", "123"])
    def test_accepts_table_grammar(self, name):
        assert validate_and_escape(name) == name

    @pytest.mark.parametrize(
        "name", ["users; DROP TABLE x", "a-b", "a b", "schema.table", "", "naïve"]
    )
    def test_rejects_outside_grammar(self, name):
        with pytest.raises(InvalidIdentifier) as exc_info:
            validate_and_escape(name)
        assert exc_info.value.name == name

    def test_quote_char_only_with_column_grammar(self):
        with pytest.raises(InvalidIdentifier):
            validate_and_escape("a`b")
        assert validate_and_escape("a`b", allow_quote_char=True) == "a``b"

    def test_non_string_rejected(self):
        with pytest.raises(InvalidIdentifier):
            validate_and_escape(None)

    def test_trailing_newline_rejected(self):
        with pytest.raises(InvalidIdentifier):
            validate_and_escape("users\n")


class TestQuoteTable:
    """Tests for quote_table function."""

    def test_prefix_joined_with_underscore(self):
        assert quote_table("users", prefix="shop") == "`shop_users`"

    def test_empty_prefix(self):
        assert quote_table("users") == "`users`"

    def test_double_quote_dialect(self):
        assert quote_table("users", prefix="shop", quote_char='"') == '"shop_users"'

    def test_injection_rejected(self):
        with pytest.raises(InvalidIdentifier):
            quote_table("users; DROP TABLE x", prefix="shop")


class TestQuoteColumn:
    """Tests for quote_column function."""

    def test_plain_column(self):
        assert quote_column("created_at") == "`created_at`"

    def test_pre_quoted_fragment_is_escaped(self):
        assert quote_column("`id`") == "```id```"


class TestValidatePrefix:
    """Tests for validate_prefix function."""

    def test_empty_prefix_allowed(self):
        assert validate_prefix("") == ""

    def test_invalid_prefix(self):
        with pytest.raises(InvalidIdentifier):
            validate_prefix("shop-")
