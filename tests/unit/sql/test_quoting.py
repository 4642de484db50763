"""
Unit tests for scalar quoters.
"""

from unittest.mock import MagicMock, patch

import pytest

from typed_sql.sql.quoting import (
    MySQLQuoter,
    Psycopg2Quoter,
    PyMySQLConnectionQuoter,
    StandardQuoter,
    quoter_for_driver,
)


@pytest.mark.unit
class TestStandardQuoter:
    """Tests for ANSI quoting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("abc", "'abc'"),
            ("O'Brien", "'O''Brien'"),
            ("back\\slash", "'back\\slash'"),
            ("", "''"),
        ],
    )
    def test_quote(self, value, expected):
        assert StandardQuoter().quote(value) == expected

    def test_dialect_reported(self):
        assert StandardQuoter().active_dialect() == "sqlite"
        assert StandardQuoter("PGSQL").active_dialect() == "pgsql"


@pytest.mark.unit
class TestMySQLQuoter:
    """Tests for offline MySQL quoting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("abc", "'abc'"),
            ("O'Brien", "'O\\'Brien'"),
            ("back\\slash", "'back\\\\slash'"),
            ('say "hi"', "'say \\\"hi\\\"'"),
            ("line\nbreak", "'line\\nbreak'"),
        ],
    )
    def test_quote(self, value, expected):
        assert MySQLQuoter().quote(value) == expected

    def test_dialect_reported(self):
        assert MySQLQuoter().active_dialect() == "mysql"


@pytest.mark.unit
class TestConnectionQuoters:
    """Tests for quoters backed by live DBAPI connections (mocked)."""

    def test_pymysql_delegates_to_connection(self):
        connection = MagicMock()
        connection.escape_string.return_value = "O''Brien"

        quoter = PyMySQLConnectionQuoter(connection)

        assert quoter.quote("O'Brien") == "'O''Brien'"
        connection.escape_string.assert_called_once_with("O'Brien")
        assert quoter.active_dialect() == "mysql"

    @patch("typed_sql.sql.quoting.psycopg2.extensions.QuotedString")
    def test_psycopg2_prepares_against_connection(self, mock_quoted_string):
        connection = MagicMock()
        connection.encoding = "UTF8"
        adapted = mock_quoted_string.return_value
        adapted.getquoted.return_value = "'Zoë''s'".encode("utf-8")

        quoter = Psycopg2Quoter(connection)

        assert quoter.quote("Zoë's") == "'Zoë''s'"
        mock_quoted_string.assert_called_once_with("Zoë's")
        adapted.prepare.assert_called_once_with(connection)
        assert quoter.active_dialect() == "pgsql"


@pytest.mark.unit
class TestQuoterForDriver:
    """Tests for quoter_for_driver."""

    def test_mysql(self):
        assert isinstance(quoter_for_driver("mysql"), MySQLQuoter)

    def test_unknown_driver_uses_mysql(self):
        assert isinstance(quoter_for_driver("oracle"), MySQLQuoter)

    @pytest.mark.parametrize("name", ["pgsql", "sqlite", "sqlsrv", "dblib", "cubrid"])
    def test_standard_drivers(self, name):
        quoter = quoter_for_driver(name)
        assert isinstance(quoter, StandardQuoter)
        assert quoter.active_dialect() == name
