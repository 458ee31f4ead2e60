"""Lexical parsing of the DrawingML simple types.

Every parser takes the raw attribute (or text) value and either returns the
typed Python value or raises :class:`LexicalError`. Numeric types whose schema
definition is a range carry their bounds here and are checked on parse.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from drawingml_theme.model.enums import UniversalMeasureUnit
from drawingml_theme.model.errors import AdjustParseError, LexicalError
from drawingml_theme.utils.units import (
    EMU_PER_CENTIMETER,
    EMU_PER_INCH,
    EMU_PER_MILLIMETER,
    EMU_PER_POINT,
    emu_to_points,
    twips_to_points,
)

Number = Union[int, float]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_COLOR_RE = re.compile(r"[0-9A-Fa-f]{6}")
_PANOSE_RE = re.compile(r"[0-9A-Fa-f]{20}")
_GUID_RE = re.compile(r"\{[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}\}")
_UNIVERSAL_MEASURE_RE = re.compile(r"(-?[0-9]+(?:\.[0-9]+)?)(mm|cm|in|pt|pc|pi)")
_POSITIVE_UNIVERSAL_MEASURE_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)(mm|cm|in|pt|pc|pi)")

BOOLEAN_VALUES = {
    "true": True,
    "1": True,
    "on": True,
    "false": False,
    "0": False,
    "off": False,
}

_EMU_PER_UNIT = {
    UniversalMeasureUnit.MILLIMETER: EMU_PER_MILLIMETER,
    UniversalMeasureUnit.CENTIMETER: EMU_PER_CENTIMETER,
    UniversalMeasureUnit.INCH: EMU_PER_INCH,
    UniversalMeasureUnit.POINT: EMU_PER_POINT,
    UniversalMeasureUnit.PICA: EMU_PER_INCH // 6,
    UniversalMeasureUnit.PITCH: EMU_PER_INCH // 6,
}


def parse_bool(text: str) -> bool:
    """Parse an ``xsd:boolean`` / ``ST_OnOff`` value."""
    try:
        return BOOLEAN_VALUES[text]
    except KeyError:
        raise LexicalError(text, "Boolean") from None


def parse_integer(text: str, type_name: str = "Integer") -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise LexicalError(text, type_name, "not an integer")
    return int(text)


def parse_decimal(text: str, type_name: str = "Decimal") -> float:
    if not _DECIMAL_RE.fullmatch(text):
        raise LexicalError(text, type_name, "not a decimal number")
    value = float(text)
    if not math.isfinite(value):
        raise LexicalError(text, type_name, "out of range")
    return value


def parse_percentage_text(text: str, type_name: str = "Percentage") -> float:
    """Parse a percentage in thousandths of a percent.

    The strict schema writes percentages as ``"50%"``; those are scaled so both
    forms share the ``100000 == 100%`` unit.
    """
    if text.endswith("%"):
        value = parse_decimal(text[:-1], type_name) * 1000.0
        if not math.isfinite(value):
            raise LexicalError(text, type_name, "out of range")
        return value
    return parse_decimal(text, type_name)


@dataclass(frozen=True, slots=True)
class NumericType:
    """A numeric simple type: a lexical base plus optional inclusive bounds."""

    name: str
    lexical: Callable[[str, str], Number]
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_maximum: bool = False

    def parse(self, text: str) -> Number:
        value = self.lexical(text, self.name)
        self.check(value, text)
        return value

    def check(self, value: Number, text: Optional[str] = None) -> None:
        raw = text if text is not None else str(value)
        if self.minimum is not None and value < self.minimum:
            raise LexicalError(raw, self.name, f"below minimum {self.minimum}")
        if self.maximum is not None:
            too_big = value >= self.maximum if self.exclusive_maximum else value > self.maximum
            if too_big:
                bound = "exclusive maximum" if self.exclusive_maximum else "maximum"
                raise LexicalError(raw, self.name, f"above {bound} {self.maximum}")


def _coordinate_lexical(text: str, type_name: str) -> int:
    # ST_Coordinate is a union with ST_UniversalMeasure; measures are converted to EMU.
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    match = _UNIVERSAL_MEASURE_RE.fullmatch(text)
    if match is None:
        raise LexicalError(text, type_name, "expected EMU or a universal measure")
    return UniversalMeasure(float(match.group(1)), UniversalMeasureUnit(match.group(2))).to_emu()


PERCENTAGE = NumericType("Percentage", parse_percentage_text)
POSITIVE_PERCENTAGE = NumericType("PositivePercentage", parse_percentage_text, minimum=0)
POSITIVE_FIXED_PERCENTAGE = NumericType("PositiveFixedPercentage", parse_percentage_text, 0, 100000)
FIXED_PERCENTAGE = NumericType("FixedPercentage", parse_percentage_text, -100000, 100000)

ANGLE = NumericType("Angle", parse_integer, INT32_MIN, INT32_MAX)
FIXED_ANGLE = NumericType("FixedAngle", parse_integer, -5400000, 5400000)
POSITIVE_FIXED_ANGLE = NumericType("PositiveFixedAngle", parse_integer, 0, 21600000, exclusive_maximum=True)

COORDINATE = NumericType("Coordinate", _coordinate_lexical, INT64_MIN, INT64_MAX)
POSITIVE_COORDINATE = NumericType("PositiveCoordinate", _coordinate_lexical, 0, UINT64_MAX)
COORDINATE32 = NumericType("Coordinate32", _coordinate_lexical, INT32_MIN, INT32_MAX)
POSITIVE_COORDINATE32 = NumericType("PositiveCoordinate32", _coordinate_lexical, 0, UINT32_MAX)
LINE_WIDTH = NumericType("LineWidth", _coordinate_lexical, 0, 20116800)

INT32 = NumericType("Int", parse_integer, INT32_MIN, INT32_MAX)
UINT32 = NumericType("UnsignedInt", parse_integer, 0, UINT32_MAX)
DRAWING_ELEMENT_ID = NumericType("DrawingElementId", parse_integer, 0, UINT32_MAX)
STYLE_MATRIX_COLUMN_INDEX = NumericType("StyleMatrixColumnIndex", parse_integer, 0, UINT32_MAX)

TEXT_COLUMN_COUNT = NumericType("TextColumnCount", parse_integer, 1, 16)
TEXT_FONT_SCALE_PERCENT = NumericType("TextFontScalePercent", parse_percentage_text, 1000, 100000)
TEXT_SPACING_PERCENT = NumericType("TextSpacingPercent", parse_percentage_text, 0, 13200000)
TEXT_SPACING_POINT = NumericType("TextSpacingPoint", parse_integer, 0, 158400)
TEXT_MARGIN = NumericType("TextMargin", _coordinate_lexical, 0, 51206400)
TEXT_INDENT = NumericType("TextIndent", _coordinate_lexical, -51206400, 51206400)
TEXT_INDENT_LEVEL = NumericType("TextIndentLevelType", parse_integer, 0, 8)
TEXT_BULLET_SIZE_PERCENT = NumericType("TextBulletSizePercent", parse_percentage_text, 25000, 400000)
TEXT_FONT_SIZE = NumericType("TextFontSize", parse_integer, 100, 400000)
TEXT_BULLET_START_AT = NumericType("TextBulletStartAtNum", parse_integer, 1, 32767)
TEXT_NON_NEGATIVE_POINT = NumericType("TextNonNegativePoint", parse_integer, 0, 400000)
TEXT_POINT = NumericType("TextPoint", parse_integer, -400000, 400000)


def parse_hex_color(text: str) -> int:
    """Parse an ``RRGGBB`` value into a 24-bit integer.

    The schema writes the digits in upper case; lower case digits written by
    some producers are accepted as well.
    """
    if not _HEX_COLOR_RE.fullmatch(text):
        raise LexicalError(text, "HexColorRGB", "expected exactly six hexadecimal digits")
    return int(text, 16)


def parse_guid(text: str) -> str:
    if not _GUID_RE.fullmatch(text):
        raise LexicalError(text, "Guid", "expected {XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}")
    return text


def parse_panose(text: str) -> str:
    """Panose-1 classification: ten bytes written as twenty hex digits."""
    if not _PANOSE_RE.fullmatch(text):
        raise LexicalError(text, "Panose", "expected twenty hexadecimal digits")
    return text


@dataclass(frozen=True, slots=True)
class UniversalMeasure:
    """A decimal length with an explicit unit, e.g. ``2.5cm``."""

    value: float
    unit: UniversalMeasureUnit

    @classmethod
    def parse(cls, text: str, positive: bool = False) -> "UniversalMeasure":
        pattern = _POSITIVE_UNIVERSAL_MEASURE_RE if positive else _UNIVERSAL_MEASURE_RE
        match = pattern.fullmatch(text)
        if match is None:
            type_name = "PositiveUniversalMeasure" if positive else "UniversalMeasure"
            raise LexicalError(text, type_name, "expected a decimal followed by mm|cm|in|pt|pc|pi")
        return cls(float(match.group(1)), UniversalMeasureUnit(match.group(2)))

    def to_emu(self) -> int:
        return int(round(self.value * _EMU_PER_UNIT[self.unit]))

    def to_points(self) -> float:
        return emu_to_points(self.to_emu())


TwipsMeasure = Union[int, float, UniversalMeasure]


def parse_twips_measure(text: str) -> TwipsMeasure:
    """Parse a non-negative twips count or a positive universal measure."""
    if _DECIMAL_RE.fullmatch(text):
        value: Number = int(text) if _INTEGER_RE.fullmatch(text) else parse_decimal(text, "TwipsMeasure")
        if value < 0:
            raise LexicalError(text, "TwipsMeasure", "twips must not be negative")
        return value
    try:
        return UniversalMeasure.parse(text, positive=True)
    except LexicalError as exc:
        raise LexicalError(text, "TwipsMeasure", "expected twips or a positive universal measure") from exc


def twips_measure_to_points(value: TwipsMeasure) -> float:
    if isinstance(value, UniversalMeasure):
        return value.to_points()
    return twips_to_points(value)


# Adjustable values are a plain number or a reference to a geometry guide.
AdjCoordinate = Union[int, str]
AdjAngle = Union[int, str]


def _parse_adjustable(text: str, numeric: NumericType) -> Union[int, str]:
    if _INTEGER_RE.fullmatch(text):
        try:
            return numeric.parse(text)  # type: ignore[return-value]
        except LexicalError as exc:
            # Out of range; a numeric literal is never a valid guide name.
            raise AdjustParseError(text) from exc
    if not text or text.strip() != text:
        raise AdjustParseError(text)
    return text


def parse_adj_coordinate(text: str) -> AdjCoordinate:
    """Return an ``int`` for numeric input, otherwise the guide name unchanged."""
    return _parse_adjustable(text, COORDINATE)


def parse_adj_angle(text: str) -> AdjAngle:
    return _parse_adjustable(text, ANGLE)
