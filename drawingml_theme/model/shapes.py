"""Shape geometry, transforms, shape properties and style references."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from drawingml_theme.model.colors import Color, optional_color
from drawingml_theme.model.effects import EFFECT_PROPERTIES, EffectProperties
from drawingml_theme.model.enums import BlackWhiteMode, FontCollectionIndex, PathFillMode, ShapeType
from drawingml_theme.model.fills import FILL_PROPERTIES, FillProperties
from drawingml_theme.model.lines import LineProperties
from drawingml_theme.model.simple_types import (
    ANGLE,
    COORDINATE,
    POSITIVE_COORDINATE,
    STYLE_MATRIX_COLUMN_INDEX,
    AdjAngle,
    AdjCoordinate,
    parse_adj_angle,
    parse_adj_coordinate,
)
from drawingml_theme.model.xsd import (
    ChoiceGroup,
    child_at,
    first_child,
    optional_bool,
    optional_value,
    require,
    required_attribute,
    required_value,
)
from drawingml_theme.utils.xml_utils import XmlNode


@dataclass(frozen=True, slots=True)
class Point2D:
    x: int
    y: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Point2D":
        return cls(x=required_value(node, "x", COORDINATE.parse), y=required_value(node, "y", COORDINATE.parse))


@dataclass(frozen=True, slots=True)
class PositiveSize2D:
    width: int
    height: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PositiveSize2D":
        return cls(
            width=required_value(node, "cx", POSITIVE_COORDINATE.parse),
            height=required_value(node, "cy", POSITIVE_COORDINATE.parse),
        )


@dataclass(frozen=True, slots=True)
class Transform2D:
    # Schema defaults: rot 0, flipH false, flipV false.
    rotate_angle: Optional[int] = None
    flip_horizontal: Optional[bool] = None
    flip_vertical: Optional[bool] = None
    offset: Optional[Point2D] = None
    extents: Optional[PositiveSize2D] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Transform2D":
        offset = None
        extents = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "off":
                offset = Point2D.from_xml_element(child)
            elif tag == "ext":
                extents = PositiveSize2D.from_xml_element(child)
        return cls(
            rotate_angle=optional_value(node, "rot", ANGLE.parse),
            flip_horizontal=optional_bool(node, "flipH"),
            flip_vertical=optional_bool(node, "flipV"),
            offset=offset,
            extents=extents,
        )


@dataclass(frozen=True, slots=True)
class GroupTransform2D:
    """Group transform: the group's own box plus the child coordinate space it maps."""

    rotate_angle: Optional[int] = None
    flip_horizontal: Optional[bool] = None
    flip_vertical: Optional[bool] = None
    offset: Optional[Point2D] = None
    extents: Optional[PositiveSize2D] = None
    child_offset: Optional[Point2D] = None
    child_extents: Optional[PositiveSize2D] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GroupTransform2D":
        points = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in ("off", "chOff"):
                points[tag] = Point2D.from_xml_element(child)
            elif tag in ("ext", "chExt"):
                points[tag] = PositiveSize2D.from_xml_element(child)
        return cls(
            rotate_angle=optional_value(node, "rot", ANGLE.parse),
            flip_horizontal=optional_bool(node, "flipH"),
            flip_vertical=optional_bool(node, "flipV"),
            offset=points.get("off"),
            extents=points.get("ext"),
            child_offset=points.get("chOff"),
            child_extents=points.get("chExt"),
        )


@dataclass(frozen=True, slots=True)
class GeomGuide:
    """A named shape guide; ``formula`` is kept unevaluated."""

    name: str
    formula: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GeomGuide":
        return cls(name=required_attribute(node, "name"), formula=required_attribute(node, "fmla"))


def guide_list(node: XmlNode) -> List[GeomGuide]:
    """Parse the ``gd`` entries of an ``avLst`` or ``gdLst``."""
    return [GeomGuide.from_xml_element(child) for child in node.children("gd")]


@dataclass(frozen=True, slots=True)
class AdjPoint2D:
    x: AdjCoordinate
    y: AdjCoordinate

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AdjPoint2D":
        return cls(
            x=required_value(node, "x", parse_adj_coordinate),
            y=required_value(node, "y", parse_adj_coordinate),
        )


@dataclass(frozen=True, slots=True)
class GeomRect:
    left: AdjCoordinate
    top: AdjCoordinate
    right: AdjCoordinate
    bottom: AdjCoordinate

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GeomRect":
        return cls(
            left=required_value(node, "l", parse_adj_coordinate),
            top=required_value(node, "t", parse_adj_coordinate),
            right=required_value(node, "r", parse_adj_coordinate),
            bottom=required_value(node, "b", parse_adj_coordinate),
        )


@dataclass(frozen=True, slots=True)
class XYAdjustHandle:
    position: AdjPoint2D
    guide_reference_x: Optional[str] = None
    guide_reference_y: Optional[str] = None
    min_x: Optional[AdjCoordinate] = None
    max_x: Optional[AdjCoordinate] = None
    min_y: Optional[AdjCoordinate] = None
    max_y: Optional[AdjCoordinate] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "XYAdjustHandle":
        return cls(
            position=AdjPoint2D.from_xml_element(first_child(node, "pos")),
            guide_reference_x=node.attribute("gdRefX"),
            guide_reference_y=node.attribute("gdRefY"),
            min_x=optional_value(node, "minX", parse_adj_coordinate),
            max_x=optional_value(node, "maxX", parse_adj_coordinate),
            min_y=optional_value(node, "minY", parse_adj_coordinate),
            max_y=optional_value(node, "maxY", parse_adj_coordinate),
        )


@dataclass(frozen=True, slots=True)
class PolarAdjustHandle:
    position: AdjPoint2D
    guide_reference_radial: Optional[str] = None
    guide_reference_angle: Optional[str] = None
    min_radial: Optional[AdjCoordinate] = None
    max_radial: Optional[AdjCoordinate] = None
    min_angle: Optional[AdjAngle] = None
    max_angle: Optional[AdjAngle] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PolarAdjustHandle":
        return cls(
            position=AdjPoint2D.from_xml_element(first_child(node, "pos")),
            guide_reference_radial=node.attribute("gdRefR"),
            guide_reference_angle=node.attribute("gdRefAng"),
            min_radial=optional_value(node, "minR", parse_adj_coordinate),
            max_radial=optional_value(node, "maxR", parse_adj_coordinate),
            min_angle=optional_value(node, "minAng", parse_adj_angle),
            max_angle=optional_value(node, "maxAng", parse_adj_angle),
        )


AdjustHandle = Union[XYAdjustHandle, PolarAdjustHandle]

ADJUST_HANDLE: ChoiceGroup[AdjustHandle] = ChoiceGroup(
    "AdjustHandle",
    {
        "ahXY": XYAdjustHandle.from_xml_element,
        "ahPolar": PolarAdjustHandle.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class ConnectionSite:
    angle: AdjAngle
    position: AdjPoint2D

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ConnectionSite":
        return cls(
            angle=required_value(node, "ang", parse_adj_angle),
            position=AdjPoint2D.from_xml_element(first_child(node, "pos")),
        )


@dataclass(frozen=True, slots=True)
class ClosePath:
    pass


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: AdjPoint2D

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "MoveTo":
        return cls(AdjPoint2D.from_xml_element(first_child(node, "pt")))


@dataclass(frozen=True, slots=True)
class LineTo:
    point: AdjPoint2D

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "LineTo":
        return cls(AdjPoint2D.from_xml_element(first_child(node, "pt")))


@dataclass(frozen=True, slots=True)
class ArcTo:
    width_radius: AdjCoordinate
    height_radius: AdjCoordinate
    start_angle: AdjAngle
    swing_angle: AdjAngle

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ArcTo":
        return cls(
            width_radius=required_value(node, "wR", parse_adj_coordinate),
            height_radius=required_value(node, "hR", parse_adj_coordinate),
            start_angle=required_value(node, "stAng", parse_adj_angle),
            swing_angle=required_value(node, "swAng", parse_adj_angle),
        )


@dataclass(frozen=True, slots=True)
class QuadBezierTo:
    points: Tuple[AdjPoint2D, AdjPoint2D]

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "QuadBezierTo":
        return cls(tuple(AdjPoint2D.from_xml_element(child_at(node, i, "pt")) for i in range(2)))


@dataclass(frozen=True, slots=True)
class CubicBezierTo:
    points: Tuple[AdjPoint2D, AdjPoint2D, AdjPoint2D]

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CubicBezierTo":
        return cls(tuple(AdjPoint2D.from_xml_element(child_at(node, i, "pt")) for i in range(3)))


Path2DCommand = Union[ClosePath, MoveTo, LineTo, ArcTo, QuadBezierTo, CubicBezierTo]

PATH_2D_COMMAND: ChoiceGroup[Path2DCommand] = ChoiceGroup(
    "EG_Path2DCommand",
    {
        "close": lambda node: ClosePath(),
        "moveTo": MoveTo.from_xml_element,
        "lnTo": LineTo.from_xml_element,
        "arcTo": ArcTo.from_xml_element,
        "quadBezTo": QuadBezierTo.from_xml_element,
        "cubicBezTo": CubicBezierTo.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class Path2D:
    # Schema defaults: w 0, h 0, fill norm, stroke true, extrusionOk true.
    width: Optional[int] = None
    height: Optional[int] = None
    fill_mode: Optional[PathFillMode] = None
    stroke: Optional[bool] = None
    extrusion_ok: Optional[bool] = None
    commands: List[Path2DCommand] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Path2D":
        return cls(
            width=optional_value(node, "w", POSITIVE_COORDINATE.parse),
            height=optional_value(node, "h", POSITIVE_COORDINATE.parse),
            fill_mode=optional_value(node, "fill", PathFillMode.parse),
            stroke=optional_bool(node, "stroke"),
            extrusion_ok=optional_bool(node, "extrusionOk"),
            commands=PATH_2D_COMMAND.parse_all(node),
        )


@dataclass(frozen=True, slots=True)
class CustomGeometry2D:
    adjust_value_list: List[GeomGuide] = field(default_factory=list)
    guide_list: List[GeomGuide] = field(default_factory=list)
    adjust_handle_list: List[AdjustHandle] = field(default_factory=list)
    connection_site_list: List[ConnectionSite] = field(default_factory=list)
    rect: Optional[GeomRect] = None
    path_list: List[Path2D] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CustomGeometry2D":
        values = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "avLst":
                values["adjust_value_list"] = guide_list(child)
            elif tag == "gdLst":
                values["guide_list"] = guide_list(child)
            elif tag == "ahLst":
                values["adjust_handle_list"] = ADJUST_HANDLE.parse_all(child)
            elif tag == "cxnLst":
                values["connection_site_list"] = [
                    ConnectionSite.from_xml_element(cxn) for cxn in child.children("cxn")
                ]
            elif tag == "rect":
                values["rect"] = GeomRect.from_xml_element(child)
            elif tag == "pathLst":
                values["path_list"] = [Path2D.from_xml_element(path) for path in child.children("path")]
        return cls(**values)


@dataclass(frozen=True, slots=True)
class PresetGeometry2D:
    preset: ShapeType
    adjust_value_list: List[GeomGuide] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PresetGeometry2D":
        adjust_value_list: List[GeomGuide] = []
        for child in node.children("avLst"):
            adjust_value_list = guide_list(child)
        return cls(preset=required_value(node, "prst", ShapeType.parse), adjust_value_list=adjust_value_list)


Geometry = Union[CustomGeometry2D, PresetGeometry2D]

GEOMETRY: ChoiceGroup[Geometry] = ChoiceGroup(
    "EG_Geometry",
    {
        "custGeom": CustomGeometry2D.from_xml_element,
        "prstGeom": PresetGeometry2D.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class ShapeProperties:
    black_and_white_mode: Optional[BlackWhiteMode] = None
    transform: Optional[Transform2D] = None
    geometry: Optional[Geometry] = None
    fill_properties: Optional[FillProperties] = None
    line_properties: Optional[LineProperties] = None
    effect_properties: Optional[EffectProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ShapeProperties":
        values = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "xfrm":
                values["transform"] = Transform2D.from_xml_element(child)
            elif tag == "ln":
                values["line_properties"] = LineProperties.from_xml_element(child)
        return cls(
            black_and_white_mode=optional_value(node, "bwMode", BlackWhiteMode.parse),
            geometry=GEOMETRY.parse_first(node),
            fill_properties=FILL_PROPERTIES.parse_first(node),
            effect_properties=EFFECT_PROPERTIES.parse_first(node),
            **values,
        )


@dataclass(frozen=True, slots=True)
class GroupShapeProperties:
    black_and_white_mode: Optional[BlackWhiteMode] = None
    transform: Optional[GroupTransform2D] = None
    fill_properties: Optional[FillProperties] = None
    effect_properties: Optional[EffectProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GroupShapeProperties":
        xfrm = next(node.children("xfrm"), None)
        return cls(
            black_and_white_mode=optional_value(node, "bwMode", BlackWhiteMode.parse),
            transform=None if xfrm is None else GroupTransform2D.from_xml_element(xfrm),
            fill_properties=FILL_PROPERTIES.parse_first(node),
            effect_properties=EFFECT_PROPERTIES.parse_first(node),
        )


@dataclass(frozen=True, slots=True)
class StyleMatrixReference:
    """Points into a style matrix list; index 0 means no style, 1..n select an entry."""

    index: int
    color: Optional[Color] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "StyleMatrixReference":
        return cls(
            index=required_value(node, "idx", STYLE_MATRIX_COLUMN_INDEX.parse),
            color=optional_color(node),
        )


@dataclass(frozen=True, slots=True)
class FontReference:
    index: FontCollectionIndex
    color: Optional[Color] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "FontReference":
        return cls(
            index=required_value(node, "idx", FontCollectionIndex.parse),
            color=optional_color(node),
        )


@dataclass(frozen=True, slots=True)
class ShapeStyle:
    line_reference: StyleMatrixReference
    fill_reference: StyleMatrixReference
    effect_reference: StyleMatrixReference
    font_reference: FontReference

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ShapeStyle":
        refs = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in ("lnRef", "fillRef", "effectRef"):
                refs[tag] = StyleMatrixReference.from_xml_element(child)
            elif tag == "fontRef":
                refs[tag] = FontReference.from_xml_element(child)
        return cls(
            line_reference=require(node, refs.get("lnRef"), "lnRef"),
            fill_reference=require(node, refs.get("fillRef"), "fillRef"),
            effect_reference=require(node, refs.get("effectRef"), "effectRef"),
            font_reference=require(node, refs.get("fontRef"), "fontRef"),
        )
