"""Every enumeration parses each of its wire spellings and nothing else."""
import unittest

from drawingml_theme.model import enums
from drawingml_theme.model.enums import (
    BlipCompression,
    ColorTransformKind,
    CompoundLine,
    PresetLineDashVal,
    SchemeColorVal,
    ShapeType,
    WireEnum,
)
from drawingml_theme.model.errors import LexicalError, NotAMemberError


def _enumerations():
    for value in vars(enums).values():
        if isinstance(value, type) and issubclass(value, WireEnum) and value is not WireEnum:
            yield value


class WireEnumTest(unittest.TestCase):
    def test_every_spelling_parses(self) -> None:
        checked = 0
        for enumeration in _enumerations():
            for member in enumeration:
                with self.subTest(enumeration=enumeration.__name__, spelling=member.value):
                    self.assertIs(enumeration.parse(member.value), member)
                    checked += 1
        self.assertGreater(checked, 500)

    def test_unknown_spelling_names_the_enumeration(self) -> None:
        for enumeration in _enumerations():
            with self.subTest(enumeration=enumeration.__name__):
                with self.assertRaises(NotAMemberError) as ctx:
                    enumeration.parse("notAValue")
                self.assertEqual(ctx.exception.enumeration, enumeration.__name__)
                self.assertIsInstance(ctx.exception, LexicalError)

    def test_spellings_are_unique(self) -> None:
        for enumeration in _enumerations():
            spellings = enumeration.spellings()
            self.assertEqual(len(spellings), len(set(spellings)), enumeration.__name__)

    def test_selected_wire_spellings(self) -> None:
        self.assertIs(CompoundLine.parse("sng"), CompoundLine.SINGLE)
        self.assertIs(CompoundLine.parse("dbl"), CompoundLine.DOUBLE)
        self.assertIs(PresetLineDashVal.parse("lgDashDotDot"), PresetLineDashVal.LARGE_DASH_DOT_DOT)
        self.assertIs(SchemeColorVal.parse("accent6"), SchemeColorVal.ACCENT6)
        self.assertIs(BlipCompression.parse("hqprint"), BlipCompression.HQ_PRINT)
        self.assertEqual(len(ColorTransformKind), 28)
        self.assertEqual(len(SchemeColorVal), 17)
        self.assertIs(ShapeType.parse("rect"), ShapeType.RECT)

    def test_lookup_is_case_sensitive(self) -> None:
        with self.assertRaises(NotAMemberError):
            CompoundLine.parse("SNG")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
