"""Tests for fill properties and the fill choice groups."""
import unittest

from drawingml_theme.model.colors import SchemeColor, SRgbColor
from drawingml_theme.model.effects import AlphaModulateFixedEffect
from drawingml_theme.model.enums import PathShadeType, PresetPatternVal, RectAlignment, TileFlipMode
from drawingml_theme.model.errors import LimitViolationError, MissingChildNodeError, NotGroupMemberError
from drawingml_theme.model.fills import (
    FILL_PROPERTIES,
    LINE_FILL_PROPERTIES,
    BlipFillProperties,
    GradientFillProperties,
    GradientStop,
    GroupFill,
    LinearShadeProperties,
    NoFill,
    PathShadeProperties,
    PatternFillProperties,
    RelativeRect,
    SolidFill,
    StretchInfoProperties,
    TileInfoProperties,
)
from drawingml_theme.utils.xml_utils import parse_xml

TWO_STOP_GRADIENT = (
    '<gradFill flip="none" rotWithShape="1"><gsLst>'
    '<gs pos="0"><srgbClr val="FF0000"/></gs>'
    '<gs pos="100000"><srgbClr val="0000FF"/></gs>'
    '</gsLst><lin ang="0" scaled="0"/></gradFill>'
)


class GradientFillTest(unittest.TestCase):
    def test_two_stop_linear_gradient(self) -> None:
        fill = FILL_PROPERTIES.from_xml_element(parse_xml(TWO_STOP_GRADIENT))
        self.assertEqual(
            fill,
            GradientFillProperties(
                flip=TileFlipMode.NONE,
                rotate_with_shape=True,
                gradient_stop_list=[
                    GradientStop(0.0, SRgbColor(0xFF0000)),
                    GradientStop(100000.0, SRgbColor(0x0000FF)),
                ],
                shade_properties=LinearShadeProperties(angle=0, scaled=False),
                tile_rect=None,
            ),
        )

    def test_single_stop_is_a_limit_violation(self) -> None:
        xml = '<gradFill><gsLst><gs pos="0"><srgbClr val="FF0000"/></gs></gsLst><lin ang="0"/></gradFill>'
        with self.assertRaises(LimitViolationError) as ctx:
            FILL_PROPERTIES.from_xml_element(parse_xml(xml))
        error = ctx.exception
        self.assertEqual(error.element, "gradFill")
        self.assertEqual(error.field, "gsLst")
        self.assertEqual(error.min_occurs, 2)
        self.assertIsNone(error.max_occurs)
        self.assertEqual(error.actual, 1)

    def test_path_shade_and_tile_rect(self) -> None:
        xml = (
            '<gradFill><path path="circle"><fillToRect l="50000" t="50000" r="50000" b="50000"/></path>'
            '<tileRect l="-10000"/></gradFill>'
        )
        fill = GradientFillProperties.from_xml_element(parse_xml(xml))
        self.assertIsNone(fill.gradient_stop_list)
        self.assertEqual(
            fill.shade_properties,
            PathShadeProperties(PathShadeType.CIRCLE, RelativeRect(50000.0, 50000.0, 50000.0, 50000.0)),
        )
        self.assertEqual(fill.tile_rect, RelativeRect(left=-10000.0))

    def test_stop_requires_color(self) -> None:
        xml = '<gradFill><gsLst><gs pos="0"/><gs pos="1000"><srgbClr val="FF0000"/></gs></gsLst></gradFill>'
        with self.assertRaises(MissingChildNodeError) as ctx:
            GradientFillProperties.from_xml_element(parse_xml(xml))
        self.assertEqual(ctx.exception.element, "gs")


class FillChoiceTest(unittest.TestCase):
    def test_simple_arms(self) -> None:
        self.assertEqual(FILL_PROPERTIES.from_xml_element(parse_xml("<noFill/>")), NoFill())
        self.assertEqual(FILL_PROPERTIES.from_xml_element(parse_xml("<grpFill/>")), GroupFill())
        solid = FILL_PROPERTIES.from_xml_element(parse_xml('<solidFill><schemeClr val="phClr"/></solidFill>'))
        self.assertIsInstance(solid, SolidFill)
        self.assertIsInstance(solid.color, SchemeColor)

    def test_unknown_arm_names_the_group(self) -> None:
        root = parse_xml("<EG_FillProperties><wtfFill/></EG_FillProperties>")
        with self.assertRaises(NotGroupMemberError) as ctx:
            FILL_PROPERTIES.from_xml_element(root.child_nodes[0])
        self.assertEqual(ctx.exception.element, "wtfFill")
        self.assertEqual(ctx.exception.group, "EG_FillProperties")

    def test_line_fill_excludes_blip_and_group_fill(self) -> None:
        self.assertFalse(LINE_FILL_PROPERTIES.is_choice_member("blipFill"))
        self.assertFalse(LINE_FILL_PROPERTIES.is_choice_member("grpFill"))
        with self.assertRaises(NotGroupMemberError) as ctx:
            LINE_FILL_PROPERTIES.from_xml_element(parse_xml("<grpFill/>"))
        self.assertEqual(ctx.exception.group, "EG_LineFillProperties")

    def test_pattern_fill(self) -> None:
        xml = (
            '<pattFill prst="dkUpDiag"><fgClr><srgbClr val="111111"/></fgClr>'
            '<bgClr><schemeClr val="bg1"/></bgClr></pattFill>'
        )
        fill = PatternFillProperties.from_xml_element(parse_xml(xml))
        self.assertIs(fill.preset, PresetPatternVal.DARK_UPWARD_DIAGONAL)
        self.assertEqual(fill.fg_color, SRgbColor(0x111111))
        self.assertIsInstance(fill.bg_color, SchemeColor)


class BlipFillTest(unittest.TestCase):
    def test_blip_fill_with_stretch(self) -> None:
        xml = (
            '<a:blipFill xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
            'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships" dpi="96" rotWithShape="1">'
            '<a:blip r:embed="rId2" cstate="print"><a:alphaModFix amt="50000"/><a:extLst/></a:blip>'
            '<a:srcRect t="1000"/><a:stretch><a:fillRect/></a:stretch></a:blipFill>'
        )
        fill = FILL_PROPERTIES.from_xml_element(parse_xml(xml))
        self.assertIsInstance(fill, BlipFillProperties)
        self.assertEqual(fill.dpi, 96)
        assert fill.blip is not None
        self.assertEqual(fill.blip.embed_rel_id, "rId2")
        self.assertEqual(fill.blip.effects, [AlphaModulateFixedEffect(50000.0)])
        self.assertEqual(fill.source_rect, RelativeRect(top=1000.0))
        self.assertEqual(fill.fill_mode_properties, StretchInfoProperties(RelativeRect()))

    def test_tile_mode(self) -> None:
        xml = '<blipFill><tile tx="0" ty="0" sx="100000" sy="100000" flip="xy" algn="tl"/></blipFill>'
        fill = BlipFillProperties.from_xml_element(parse_xml(xml))
        self.assertEqual(
            fill.fill_mode_properties,
            TileInfoProperties(0, 0, 100000.0, 100000.0, TileFlipMode.XY, RectAlignment.TOP_LEFT),
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
