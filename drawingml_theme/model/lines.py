"""Line (outline) properties: width, dashes, joins and end decorations."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from drawingml_theme.model.enums import (
    CompoundLine,
    LineCap,
    LineEndLength,
    LineEndType,
    LineEndWidth,
    PenAlignment,
    PresetLineDashVal,
)
from drawingml_theme.model.errors import DrawingMLError
from drawingml_theme.model.fills import LINE_FILL_PROPERTIES, LineFillProperties
from drawingml_theme.model.simple_types import LINE_WIDTH, POSITIVE_PERCENTAGE
from drawingml_theme.model.xsd import ChoiceGroup, optional_value, required_value
from drawingml_theme.utils.logger import get_logger
from drawingml_theme.utils.xml_utils import XmlNode

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DashStop:
    """One dash/space pair, both lengths relative to the line width."""

    dash_length: float
    space_length: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "DashStop":
        return cls(
            dash_length=required_value(node, "d", POSITIVE_PERCENTAGE.parse),
            space_length=required_value(node, "sp", POSITIVE_PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class PresetDash:
    value: PresetLineDashVal

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PresetDash":
        return cls(required_value(node, "val", PresetLineDashVal.parse))


@dataclass(frozen=True, slots=True)
class CustomDash:
    stops: List[DashStop] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CustomDash":
        stops: List[DashStop] = []
        for child in node.children("ds"):
            try:
                stops.append(DashStop.from_xml_element(child))
            except DrawingMLError as exc:
                LOGGER.error("Skipping malformed dash stop in '%s': %s", node.name, exc)
        return cls(stops)


LineDashProperties = Union[PresetDash, CustomDash]

LINE_DASH_PROPERTIES: ChoiceGroup[LineDashProperties] = ChoiceGroup(
    "EG_LineDashProperties",
    {
        "prstDash": PresetDash.from_xml_element,
        "custDash": CustomDash.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class RoundJoin:
    pass


@dataclass(frozen=True, slots=True)
class BevelJoin:
    pass


@dataclass(frozen=True, slots=True)
class MiterJoin:
    # Schema default: 800000.
    limit: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "MiterJoin":
        return cls(optional_value(node, "lim", POSITIVE_PERCENTAGE.parse))


LineJoinProperties = Union[RoundJoin, BevelJoin, MiterJoin]

LINE_JOIN_PROPERTIES: ChoiceGroup[LineJoinProperties] = ChoiceGroup(
    "EG_LineJoinProperties",
    {
        "round": lambda node: RoundJoin(),
        "bevel": lambda node: BevelJoin(),
        "miter": MiterJoin.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class LineEndProperties:
    """Arrow head or tail decoration."""

    end_type: Optional[LineEndType] = None
    width: Optional[LineEndWidth] = None
    length: Optional[LineEndLength] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "LineEndProperties":
        return cls(
            end_type=optional_value(node, "type", LineEndType.parse),
            width=optional_value(node, "w", LineEndWidth.parse),
            length=optional_value(node, "len", LineEndLength.parse),
        )


@dataclass(frozen=True, slots=True)
class LineProperties:
    width: Optional[int] = None
    cap: Optional[LineCap] = None
    compound: Optional[CompoundLine] = None
    pen_alignment: Optional[PenAlignment] = None
    fill_properties: Optional[LineFillProperties] = None
    dash_properties: Optional[LineDashProperties] = None
    join_properties: Optional[LineJoinProperties] = None
    head_end: Optional[LineEndProperties] = None
    tail_end: Optional[LineEndProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "LineProperties":
        head_end = None
        tail_end = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "headEnd":
                head_end = LineEndProperties.from_xml_element(child)
            elif tag == "tailEnd":
                tail_end = LineEndProperties.from_xml_element(child)
        return cls(
            width=optional_value(node, "w", LINE_WIDTH.parse),
            cap=optional_value(node, "cap", LineCap.parse),
            compound=optional_value(node, "cmpd", CompoundLine.parse),
            pen_alignment=optional_value(node, "algn", PenAlignment.parse),
            fill_properties=LINE_FILL_PROPERTIES.parse_first(node),
            dash_properties=LINE_DASH_PROPERTIES.parse_first(node),
            join_properties=LINE_JOIN_PROPERTIES.parse_first(node),
            head_end=head_end,
            tail_end=tail_end,
        )
