"""Tests for quantity display formatting."""

from kniferoll.core.suggestions.formatting import format_quantity_display


class TestFormatQuantityDisplay:
    """Test format_quantity_display edge cases."""

    def test_both_missing(self):
        assert format_quantity_display(None, None) == ""
        assert format_quantity_display(None, "") == ""

    def test_quantity_and_unit(self):
        assert format_quantity_display(5, "lbs") == "5 lbs"
        assert format_quantity_display(2.5, "kg") == "2.5 kg"

    def test_unit_only(self):
        assert format_quantity_display(None, "each") == "each"

    def test_quantity_only(self):
        assert format_quantity_display(10, None) == "10"
        assert format_quantity_display(3, "") == "3"

    def test_zero_quantity_is_absent(self):
        """0 is treated like a missing quantity."""
        assert format_quantity_display(0, None) == ""
        assert format_quantity_display(0, "lbs") == "lbs"
        assert format_quantity_display(0.0, "qt") == "qt"

    def test_integral_float_drops_decimal(self):
        assert format_quantity_display(2.0, "shallow 9") == "2 shallow 9"
        assert format_quantity_display(4.0, None) == "4"
