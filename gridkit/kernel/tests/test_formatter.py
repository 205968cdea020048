"""
gridkit Formatter — Tests

bool → Yes/No, None → "", everything else → str().
"""

from datetime import date
from decimal import Decimal

import pytest

from gridkit.kernel.formatter import format_cell


class TestFormatCell:
    def test_true_is_yes(self):
        assert format_cell(True) == "Yes"

    def test_false_is_no(self):
        assert format_cell(False) == "No"

    def test_none_is_empty(self):
        assert format_cell(None) == ""

    def test_int(self):
        assert format_cell(42) == "42"

    def test_zero_is_not_empty(self):
        assert format_cell(0) == "0"

    def test_float(self):
        assert format_cell(1.5) == "1.5"

    def test_decimal(self):
        assert format_cell(Decimal("10.50")) == "10.50"

    def test_string_passes_through(self):
        assert format_cell("Alice") == "Alice"

    def test_empty_string(self):
        assert format_cell("") == ""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (date(1980, 5, 1), "1980-05-01"),
            (["a", "b"], "['a', 'b']"),
        ],
    )
    def test_other_objects_use_default_str(self, value, expected):
        assert format_cell(value) == expected
