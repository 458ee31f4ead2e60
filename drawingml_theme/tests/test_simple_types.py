"""Tests for lexical parsing of DrawingML simple types."""
import unittest

from drawingml_theme.model.enums import UniversalMeasureUnit
from drawingml_theme.model.errors import AdjustParseError, LexicalError
from drawingml_theme.model.simple_types import (
    ANGLE,
    COORDINATE,
    PERCENTAGE,
    POSITIVE_FIXED_ANGLE,
    POSITIVE_FIXED_PERCENTAGE,
    TEXT_BULLET_SIZE_PERCENT,
    UniversalMeasure,
    parse_adj_angle,
    parse_adj_coordinate,
    parse_bool,
    parse_guid,
    parse_hex_color,
    parse_integer,
    parse_percentage_text,
    parse_twips_measure,
    twips_measure_to_points,
)


class BooleanTest(unittest.TestCase):
    def test_accepted_spellings(self) -> None:
        for text, expected in (("true", True), ("1", True), ("on", True), ("false", False), ("0", False), ("off", False)):
            self.assertIs(parse_bool(text), expected)

    def test_case_sensitive(self) -> None:
        with self.assertRaises(LexicalError):
            parse_bool("True")
        with self.assertRaises(LexicalError):
            parse_bool("")


class NumericTypeTest(unittest.TestCase):
    """Bounds are checked at parse time."""

    def test_positive_fixed_percentage_bounds(self) -> None:
        self.assertEqual(POSITIVE_FIXED_PERCENTAGE.parse("0"), 0.0)
        self.assertEqual(POSITIVE_FIXED_PERCENTAGE.parse("100000"), 100000.0)
        for text in ("-1", "100001"):
            with self.assertRaises(LexicalError) as ctx:
                POSITIVE_FIXED_PERCENTAGE.parse(text)
            self.assertEqual(ctx.exception.type_name, "PositiveFixedPercentage")

    def test_positive_fixed_angle_upper_bound_is_exclusive(self) -> None:
        self.assertEqual(POSITIVE_FIXED_ANGLE.parse("21599999"), 21599999)
        with self.assertRaises(LexicalError):
            POSITIVE_FIXED_ANGLE.parse("21600000")

    def test_strict_percentage_form_is_scaled(self) -> None:
        self.assertEqual(parse_percentage_text("50%"), 50000.0)
        self.assertEqual(parse_percentage_text("-12.5"), -12.5)

    def test_overflowing_decimals_are_rejected(self) -> None:
        for text in ("1e400", "-1e400", "1e306%"):
            with self.subTest(text=text):
                with self.assertRaises(LexicalError) as ctx:
                    PERCENTAGE.parse(text)
                self.assertEqual(ctx.exception.reason, "out of range")
        with self.assertRaises(LexicalError):
            parse_twips_measure("1e400")

    def test_bullet_size_percent_keeps_raw_value(self) -> None:
        self.assertEqual(TEXT_BULLET_SIZE_PERCENT.parse("25000"), 25000.0)
        with self.assertRaises(LexicalError):
            TEXT_BULLET_SIZE_PERCENT.parse("24999")

    def test_integer_rejects_decimal_and_padding(self) -> None:
        for text in ("1.5", " 3", "", "abc"):
            with self.assertRaises(LexicalError):
                parse_integer(text)

    def test_coordinate_accepts_universal_measure(self) -> None:
        self.assertEqual(COORDINATE.parse("914400"), 914400)
        self.assertEqual(COORDINATE.parse("1in"), 914400)
        self.assertEqual(COORDINATE.parse("-2.5cm"), -900000)


class HexAndGuidTest(unittest.TestCase):
    def test_hex_color(self) -> None:
        self.assertEqual(parse_hex_color("FF0000"), 0xFF0000)
        self.assertEqual(parse_hex_color("00ff00"), 0x00FF00)

    def test_hex_color_rejects_bad_input(self) -> None:
        for text in ("12345", "1234567", "GGGGGG", ""):
            with self.assertRaises(LexicalError):
                parse_hex_color(text)

    def test_guid(self) -> None:
        guid = "{5C22544A-7EE6-4342-B048-85BDC9FD1C3A}"
        self.assertEqual(parse_guid(guid), guid)
        with self.assertRaises(LexicalError):
            parse_guid("5C22544A-7EE6-4342-B048-85BDC9FD1C3A")


class MeasureTest(unittest.TestCase):
    def test_universal_measure(self) -> None:
        measure = UniversalMeasure.parse("12pt")
        self.assertEqual(measure.unit, UniversalMeasureUnit.POINT)
        self.assertEqual(measure.to_emu(), 152400)
        self.assertAlmostEqual(measure.to_points(), 12.0)

    def test_positive_measure_rejects_negative(self) -> None:
        with self.assertRaises(LexicalError):
            UniversalMeasure.parse("-1mm", positive=True)

    def test_twips_measure_union(self) -> None:
        self.assertEqual(parse_twips_measure("1440"), 1440)
        self.assertAlmostEqual(twips_measure_to_points(parse_twips_measure("1440")), 72.0)
        self.assertEqual(parse_twips_measure("10.5"), 10.5)
        self.assertIsInstance(parse_twips_measure("1in"), UniversalMeasure)
        with self.assertRaises(LexicalError):
            parse_twips_measure("-20")


class AdjustableTest(unittest.TestCase):
    """Numeric text wins; anything else is a guide name."""

    def test_numeric_and_named(self) -> None:
        self.assertEqual(parse_adj_coordinate("1234"), 1234)
        self.assertEqual(parse_adj_coordinate("-5"), -5)
        self.assertEqual(parse_adj_coordinate("adj1"), "adj1")
        self.assertEqual(parse_adj_angle("cd4"), "cd4")
        self.assertEqual(parse_adj_angle("5400000"), 5400000)

    def test_out_of_range_number_is_not_a_guide_name(self) -> None:
        with self.assertRaises(AdjustParseError):
            parse_adj_angle(str(ANGLE.maximum + 1))

    def test_empty_or_padded_text(self) -> None:
        for text in ("", " adj", "adj "):
            with self.assertRaises(AdjustParseError):
                parse_adj_coordinate(text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
