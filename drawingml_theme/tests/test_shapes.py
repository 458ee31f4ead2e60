"""Tests for shape geometry, transforms and style references."""
import unittest

from drawingml_theme.model.colors import SchemeColor
from drawingml_theme.model.effects import EffectList
from drawingml_theme.model.enums import BlackWhiteMode, FontCollectionIndex, PathFillMode, SchemeColorVal, ShapeType
from drawingml_theme.model.errors import AdjustParseError, MissingChildNodeError, NotGroupMemberError
from drawingml_theme.model.fills import NoFill
from drawingml_theme.model.shapes import (
    GEOMETRY,
    PATH_2D_COMMAND,
    AdjPoint2D,
    ArcTo,
    ClosePath,
    CubicBezierTo,
    CustomGeometry2D,
    FontReference,
    GeomGuide,
    GeomRect,
    GroupShapeProperties,
    LineTo,
    MoveTo,
    Point2D,
    PolarAdjustHandle,
    PositiveSize2D,
    PresetGeometry2D,
    QuadBezierTo,
    ShapeProperties,
    ShapeStyle,
    StyleMatrixReference,
    Transform2D,
    XYAdjustHandle,
)
from drawingml_theme.utils.xml_utils import parse_xml

CUSTOM_GEOMETRY = (
    "<custGeom>"
    "<avLst/>"
    '<gdLst><gd name="hc" fmla="*/ w 1 2"/></gdLst>'
    "<ahLst>"
    '<ahXY gdRefX="adj" minX="0" maxX="100000"><pos x="hc" y="0"/></ahXY>'
    '<ahPolar gdRefAng="ang" minAng="0" maxAng="21599999"><pos x="0" y="0"/></ahPolar>'
    "</ahLst>"
    '<cxnLst><cxn ang="cd4"><pos x="hc" y="b"/></cxn></cxnLst>'
    '<rect l="l" t="t" r="r" b="b"/>'
    "<pathLst>"
    '<path w="100" h="100" fill="none" stroke="0">'
    '<moveTo><pt x="0" y="0"/></moveTo>'
    '<lnTo><pt x="100" y="0"/></lnTo>'
    '<arcTo wR="50" hR="50" stAng="0" swAng="5400000"/>'
    '<quadBezTo><pt x="1" y="1"/><pt x="2" y="2"/></quadBezTo>'
    '<cubicBezTo><pt x="1" y="1"/><pt x="2" y="2"/><pt x="3" y="3"/></cubicBezTo>'
    "<close/>"
    "</path>"
    "</pathLst>"
    "</custGeom>"
)


class GeometryTest(unittest.TestCase):
    def test_custom_geometry(self) -> None:
        geometry = GEOMETRY.from_xml_element(parse_xml(CUSTOM_GEOMETRY))
        self.assertIsInstance(geometry, CustomGeometry2D)
        self.assertEqual(geometry.adjust_value_list, [])
        self.assertEqual(geometry.guide_list, [GeomGuide("hc", "*/ w 1 2")])
        xy, polar = geometry.adjust_handle_list
        self.assertIsInstance(xy, XYAdjustHandle)
        self.assertEqual(xy.position, AdjPoint2D("hc", 0))
        self.assertEqual(xy.max_x, 100000)
        self.assertIsInstance(polar, PolarAdjustHandle)
        self.assertEqual(polar.guide_reference_angle, "ang")
        self.assertEqual(geometry.connection_site_list[0].angle, "cd4")
        self.assertEqual(geometry.rect, GeomRect("l", "t", "r", "b"))
        path = geometry.path_list[0]
        self.assertEqual(path.width, 100)
        self.assertIs(path.fill_mode, PathFillMode.NONE)
        self.assertFalse(path.stroke)
        self.assertEqual(
            path.commands,
            [
                MoveTo(AdjPoint2D(0, 0)),
                LineTo(AdjPoint2D(100, 0)),
                ArcTo(50, 50, 0, 5400000),
                QuadBezierTo((AdjPoint2D(1, 1), AdjPoint2D(2, 2))),
                CubicBezierTo((AdjPoint2D(1, 1), AdjPoint2D(2, 2), AdjPoint2D(3, 3))),
                ClosePath(),
            ],
        )

    def test_preset_geometry(self) -> None:
        xml = '<prstGeom prst="roundRect"><avLst><gd name="adj" fmla="val 16667"/></avLst></prstGeom>'
        geometry = GEOMETRY.from_xml_element(parse_xml(xml))
        self.assertEqual(geometry, PresetGeometry2D(ShapeType.ROUND_RECT, [GeomGuide("adj", "val 16667")]))

    def test_cubic_bezier_needs_three_points(self) -> None:
        with self.assertRaises(MissingChildNodeError) as ctx:
            PATH_2D_COMMAND.from_xml_element(parse_xml('<cubicBezTo><pt x="1" y="1"/></cubicBezTo>'))
        self.assertEqual(ctx.exception.element, "cubicBezTo")
        self.assertEqual(ctx.exception.child, "pt")

    def test_adjustable_coordinate_rejects_padding(self) -> None:
        with self.assertRaises(AdjustParseError) as ctx:
            AdjPoint2D.from_xml_element(parse_xml('<pt x=" hc" y="0"/>'))
        self.assertEqual(ctx.exception.value, " hc")

    def test_adjustable_coordinate_rejects_out_of_range_number(self) -> None:
        with self.assertRaises(AdjustParseError):
            AdjPoint2D.from_xml_element(parse_xml('<pt x="99999999999999999999" y="0"/>'))

    def test_unknown_geometry(self) -> None:
        with self.assertRaises(NotGroupMemberError) as ctx:
            GEOMETRY.from_xml_element(parse_xml("<freeGeom/>"))
        self.assertEqual(ctx.exception.group, "EG_Geometry")


class ShapePropertiesTest(unittest.TestCase):
    def test_shape_properties(self) -> None:
        xml = (
            '<spPr bwMode="auto">'
            '<xfrm rot="60000" flipH="1"><off x="10" y="20"/><ext cx="300" cy="400"/></xfrm>'
            '<prstGeom prst="ellipse"/>'
            "<noFill/>"
            '<ln w="12700"/>'
            "<effectLst/>"
            "</spPr>"
        )
        props = ShapeProperties.from_xml_element(parse_xml(xml))
        self.assertIs(props.black_and_white_mode, BlackWhiteMode.AUTO)
        self.assertEqual(props.transform, Transform2D(60000, True, None, Point2D(10, 20), PositiveSize2D(300, 400)))
        self.assertEqual(props.geometry, PresetGeometry2D(ShapeType.ELLIPSE))
        self.assertEqual(props.fill_properties, NoFill())
        self.assertEqual(props.line_properties.width, 12700)
        self.assertEqual(props.effect_properties, EffectList())

    def test_first_geometry_fill_and_effect_win(self) -> None:
        xml = (
            "<spPr>"
            '<prstGeom prst="rect"/><custGeom><pathLst/></custGeom>'
            '<noFill/><solidFill><schemeClr val="accent1"/></solidFill>'
            "<effectLst/><effectDag/>"
            "</spPr>"
        )
        props = ShapeProperties.from_xml_element(parse_xml(xml))
        self.assertEqual(props.geometry, PresetGeometry2D(ShapeType.RECT))
        self.assertEqual(props.fill_properties, NoFill())
        self.assertEqual(props.effect_properties, EffectList())

        group = GroupShapeProperties.from_xml_element(parse_xml("<grpSpPr><noFill/><grpFill/></grpSpPr>"))
        self.assertEqual(group.fill_properties, NoFill())
        self.assertIsNone(group.transform)

    def test_transform_accepts_universal_measures(self) -> None:
        transform = Transform2D.from_xml_element(parse_xml('<xfrm><off x="1in" y="1pt"/></xfrm>'))
        self.assertEqual(transform.offset, Point2D(914400, 12700))

    def test_group_transform(self) -> None:
        xml = (
            "<grpSpPr><xfrm>"
            '<off x="0" y="0"/><ext cx="10" cy="10"/><chOff x="5" y="5"/><chExt cx="20" cy="20"/>'
            "</xfrm></grpSpPr>"
        )
        props = GroupShapeProperties.from_xml_element(parse_xml(xml))
        self.assertEqual(props.transform.child_offset, Point2D(5, 5))
        self.assertEqual(props.transform.child_extents, PositiveSize2D(20, 20))


class ShapeStyleTest(unittest.TestCase):
    def test_style(self) -> None:
        xml = (
            '<style><lnRef idx="2"><schemeClr val="accent1"/></lnRef>'
            '<fillRef idx="1001"/>'
            '<effectRef idx="0"/>'
            '<fontRef idx="minor"><schemeClr val="lt1"/></fontRef></style>'
        )
        style = ShapeStyle.from_xml_element(parse_xml(xml))
        self.assertEqual(style.line_reference, StyleMatrixReference(2, SchemeColor(SchemeColorVal.ACCENT1)))
        self.assertEqual(style.fill_reference, StyleMatrixReference(1001))
        self.assertEqual(style.effect_reference.index, 0)
        self.assertEqual(style.font_reference, FontReference(FontCollectionIndex.MINOR, SchemeColor(SchemeColorVal.LIGHT1)))

    def test_missing_reference(self) -> None:
        xml = '<style><lnRef idx="1"/><fillRef idx="1"/><fontRef idx="major"/></style>'
        with self.assertRaises(MissingChildNodeError) as ctx:
            ShapeStyle.from_xml_element(parse_xml(xml))
        self.assertEqual(ctx.exception.child, "effectRef")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
