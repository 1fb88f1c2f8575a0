"""
Tests for size formatting utilities — every report line goes through them.
"""
import pytest
from dutree.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    """Test conversion from byte counts to display strings."""

    def test_zero_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0 B"

    def test_plain_bytes_below_one_kilobyte(self):
        assert ConvertUtils.bytes_to_human(1) == "1 B"
        assert ConvertUtils.bytes_to_human(1023) == "1023 B"

    def test_exact_units_have_no_fraction(self):
        """Integral values print without a decimal part."""
        assert ConvertUtils.bytes_to_human(1024) == "1 KB"
        assert ConvertUtils.bytes_to_human(1024 ** 2) == "1 MB"
        assert ConvertUtils.bytes_to_human(1024 ** 3) == "1 GB"
        assert ConvertUtils.bytes_to_human(1024 ** 4) == "1 TB"

    def test_fractional_values_are_rounded_to_two_decimals(self):
        assert ConvertUtils.bytes_to_human(1536) == "1.5 KB"
        assert ConvertUtils.bytes_to_human(2411724) == "2.3 MB"
        assert ConvertUtils.bytes_to_human(1280) == "1.25 KB"

    def test_rounding_is_half_up(self):
        """1.125 KB must round up to 1.13, not to the even 1.12."""
        assert ConvertUtils.bytes_to_human(1152) == "1.13 KB"
        assert ConvertUtils.bytes_to_human(1030) == "1.01 KB"

    def test_value_just_below_next_unit_rounds_within_unit(self):
        """Scaling stops below 1024, rounding may still show 1024."""
        assert ConvertUtils.bytes_to_human(1024 ** 2 - 1) == "1024 KB"

    def test_largest_unit_caps_scaling(self):
        assert ConvertUtils.bytes_to_human(1024 ** 9) == "1024 YB"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            ConvertUtils.bytes_to_human(-1)


class TestIndent:
    def test_indent_width(self):
        assert ConvertUtils.indent(0, 6) == ""
        assert ConvertUtils.indent(2, 6) == " " * 12

    def test_negative_depth_rejected(self):
        with pytest.raises(ValueError):
            ConvertUtils.indent(-1, 6)
