"""
Unit tests for the placeholder scanner.
"""

import pytest

from typed_sql.sql.core.placeholders import (
    PlaceholderKind,
    PlaceholderToken,
    count_placeholders,
    scan,
)


@pytest.mark.unit
class TestScan:
    """Tests for scan and count_placeholders."""

    def test_tokens_in_order_with_spans(self):
        tokens = scan("SELECT ?c FROM ?t WHERE id = ?i")
        assert tokens == [
            PlaceholderToken(PlaceholderKind.COLUMN, 7, 9),
            PlaceholderToken(PlaceholderKind.TABLE, 15, 17),
            PlaceholderToken(PlaceholderKind.INTEGER, 29, 31),
        ]

    def test_every_kind_recognized(self):
        template = " ".join(f"?{kind.value}" for kind in PlaceholderKind)
        assert [token.kind for token in scan(template)] == list(PlaceholderKind)

    def test_case_matters(self):
        """?A and ?M are kinds; ?S and ?m are not."""
        assert [t.kind for t in scan("?A ?a ?M ?m ?S")] == [
            PlaceholderKind.ASSOC,
            PlaceholderKind.ARRAY,
            PlaceholderKind.MULTI_ROW,
        ]

    @pytest.mark.parametrize(
        "template, expected",
        [
            ("SELECT 1", 0),
            ("SELECT ?", 0),
            ("SELECT ??i", 1),
            ("?s?s?s", 3),
            ("?z ?1 ?_", 0),
        ],
    )
    def test_count(self, template, expected):
        assert count_placeholders(template) == expected
        assert len(scan(template)) == expected
