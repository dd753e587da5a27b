"""
Tests for quantity parsing and unit conversion
"""
import unittest
from decimal import Decimal

from models.catalog import Item
from services.quantity_parser import parse_quantity, format_number, base_quantity
from core.exceptions import QuantityError, QuantityErrorKind


def item(unit: str, price: str = "100") -> Item:
    return Item("x1", "Test Item", Decimal(price), unit)


class TestQuantityParser(unittest.TestCase):
    """Test cases for parse_quantity"""

    def assertQuantity(self, token, unit, multiplier, display):
        parsed = parse_quantity(token, item(unit))
        self.assertEqual(parsed.multiplier, Decimal(multiplier))
        self.assertEqual(parsed.display, display)

    def assertQuantityError(self, token, unit, kind):
        with self.assertRaises(QuantityError) as ctx:
            parse_quantity(token, item(unit))
        self.assertEqual(ctx.exception.kind, kind)
        return ctx.exception

    def test_reference_conversions(self):
        """Test the reference unit conversion cases"""
        self.assertQuantity("500g", "250g", "2.0", "500g")
        self.assertQuantity("2kg", "1kg", "2", "2kg")
        self.assertQuantity("500ml", "1L", "0.5", "500ml")
        self.assertQuantity("3", "pack", "3", "3 pack")

    def test_bare_number_counts_item_units(self):
        self.assertQuantity("2", "1L", "2", "2 1L")
        self.assertQuantity("1.5", "250g", "1.5", "1.5 250g")

    def test_kilogram_never_divides(self):
        """Test that kilogram input is used directly whatever the base unit"""
        self.assertQuantity("1kg", "250g", "1", "1kg")
        self.assertQuantity("2kgs", "piece", "2", "2kg")
        self.assertQuantity("1.5kg", "1kg", "1.5", "1.5kg")

    def test_gram_conversions(self):
        self.assertQuantity("500g", "1kg", "0.5", "500g")
        self.assertQuantity("250gm", "100g", "2.5", "250g")
        self.assertQuantity("500gms", "piece", "0.5", "500g")

    def test_liter_conversions(self):
        self.assertQuantity("2l", "1L", "2", "2L")
        self.assertQuantity("1litre", "pack", "1", "1L")
        self.assertQuantity("3ltr", "1kg", "3", "3L")

    def test_liter_on_milliliter_base_divides_by_base(self):
        # "400ml" contains "l", so liters divide by the embedded 400
        self.assertQuantity("1l", "400ml", "0.0025", "1L")

    def test_milliliter_conversions(self):
        self.assertQuantity("200ml", "400ml", "0.5", "200ml")
        self.assertQuantity("150mls", "75ml", "2", "150ml")
        self.assertQuantity("500ml", "piece", "0.5", "500ml")

    def test_input_is_case_insensitive(self):
        self.assertQuantity("500G", "250g", "2", "500g")
        self.assertQuantity(" 2KG ", "1kg", "2", "2kg")

    def test_number_display_is_normalized(self):
        self.assertQuantity("2.50kg", "1kg", "2.5", "2.5kg")
        self.assertQuantity("007", "pack", "7", "7 pack")

    def test_invalid_format(self):
        """Test that malformed tokens are rejected"""
        for token in ["-2", "abc", "", "1/2", "2 kg", "kg2", "1.2.3"]:
            with self.subTest(token=token):
                error = self.assertQuantityError(token, "pack", QuantityErrorKind.INVALID_FORMAT)
                self.assertEqual(error.message, "Invalid quantity format")

    def test_oversized_numbers_are_rejected(self):
        """Test that numbers too large to price are a format error"""
        for token in ["9" * 30, "1234567890kg", "99999999999999999999.5g"]:
            with self.subTest(token=token):
                self.assertQuantityError(token, "1kg", QuantityErrorKind.INVALID_FORMAT)

        self.assertQuantity("999999999", "pack", "999999999", "999999999 pack")
        self.assertQuantity("0000000002", "pack", "2", "2 pack")

    def test_not_positive(self):
        for token in ["0", "0.0", "0kg", "000g"]:
            with self.subTest(token=token):
                error = self.assertQuantityError(token, "1kg", QuantityErrorKind.NOT_POSITIVE)
                self.assertEqual(error.message, "Quantity must be greater than 0")

    def test_unknown_unit(self):
        error = self.assertQuantityError("5oz", "1kg", QuantityErrorKind.UNKNOWN_UNIT)
        self.assertIn('Unknown unit "oz"', error.message)

    def test_multiplier_always_positive(self):
        for token in ["1g", "0.001kg", "1ml", "0.5"]:
            with self.subTest(token=token):
                self.assertGreater(parse_quantity(token, item("1kg")).multiplier, 0)

    def test_helpers(self):
        self.assertEqual(format_number(Decimal("500")), "500")
        self.assertEqual(format_number(Decimal("0.250")), "0.25")
        self.assertEqual(base_quantity("250g"), Decimal(250))
        self.assertIsNone(base_quantity("piece"))
        self.assertIsNone(base_quantity("0g"))


if __name__ == '__main__':
    unittest.main()
