"""
Test suite for currency module

Tests Decimal coercion, rounding and display formatting of amounts.
"""

import pytest
from decimal import Decimal

from bank_accounts.currency import (
    decimal_from_string, to_decimal, round_amount, format_amount
)


class TestDecimalFromString:
    """Test string parsing"""

    def test_plain_and_symbol_strings(self):
        """Test numbers with symbols and separators"""
        assert decimal_from_string("100.50") == Decimal('100.50')
        assert decimal_from_string("₹1,234.56") == Decimal('1234.56')
        assert decimal_from_string("$ 7,000") == Decimal('7000')
        assert decimal_from_string("12,5") == Decimal('12.5')
        assert decimal_from_string("-42") == Decimal('-42')

    @pytest.mark.parametrize("value", ["", "abc", "--"])
    def test_invalid_strings(self, value):
        """Test unparsable input raises ValueError"""
        with pytest.raises(ValueError):
            decimal_from_string(value)


class TestToDecimal:
    """Test amount coercion"""

    def test_supported_types(self):
        """Test Decimal, int, float and str inputs"""
        assert to_decimal(Decimal('1.25')) == Decimal('1.25')
        assert to_decimal(5) == Decimal('5')
        assert to_decimal(0.1) == Decimal('0.1')
        assert to_decimal("3.5") == Decimal('3.5')

    def test_rejects_bool_and_other_types(self):
        """Test non-numeric types raise"""
        with pytest.raises(ValueError):
            to_decimal(True)
        with pytest.raises(ValueError):
            to_decimal(None)
        with pytest.raises(ValueError):
            to_decimal([1])

    def test_rejects_non_finite(self):
        """Test NaN and infinity are refused"""
        with pytest.raises(ValueError):
            to_decimal(float('inf'))
        with pytest.raises(ValueError):
            to_decimal(Decimal('NaN'))


class TestRoundingAndFormatting:
    """Test rounding and display"""

    def test_round_half_up(self):
        """Test half-up rounding at the given precision"""
        assert round_amount(Decimal('100.555')) == Decimal('100.56')
        assert round_amount(Decimal('100.554')) == Decimal('100.55')
        assert round_amount(Decimal('2.5'), 0) == Decimal('3')

    def test_format_amount(self):
        """Test symbol, separators and sign"""
        assert format_amount(Decimal('6210')) == "₹6,210.00"
        assert format_amount(Decimal('-300')) == "-₹300.00"
        assert format_amount(Decimal('1234.5'), "$") == "$1,234.50"
        assert format_amount(Decimal('1003'), "₹", 0) == "₹1,003"

    def test_negative_zero_formats_as_zero(self):
        """Test tiny negatives do not render as -0.00"""
        assert format_amount(Decimal('-0.001')) == "₹0.00"
