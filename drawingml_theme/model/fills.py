"""Fill properties: solid, gradient, picture (blip) and pattern fills."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from drawingml_theme.model.colors import Color, wrapped_color
from drawingml_theme.model.effects import Blip
from drawingml_theme.model.enums import PathShadeType, PresetPatternVal, RectAlignment, TileFlipMode
from drawingml_theme.model.simple_types import (
    COORDINATE,
    PERCENTAGE,
    POSITIVE_FIXED_ANGLE,
    POSITIVE_FIXED_PERCENTAGE,
    UINT32,
)
from drawingml_theme.model.xsd import (
    ChoiceGroup,
    check_min_occurs,
    optional_bool,
    optional_value,
    required_value,
)
from drawingml_theme.utils.xml_utils import XmlNode

GRADIENT_MIN_STOPS = 2


@dataclass(frozen=True, slots=True)
class RelativeRect:
    """Edge insets as percentages of the bounding box; negative values extend it."""

    left: Optional[float] = None
    top: Optional[float] = None
    right: Optional[float] = None
    bottom: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "RelativeRect":
        return cls(
            left=optional_value(node, "l", PERCENTAGE.parse),
            top=optional_value(node, "t", PERCENTAGE.parse),
            right=optional_value(node, "r", PERCENTAGE.parse),
            bottom=optional_value(node, "b", PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class NoFill:
    pass


@dataclass(frozen=True, slots=True)
class GroupFill:
    """Inherit the fill of the containing group."""


@dataclass(frozen=True, slots=True)
class SolidFill:
    color: Color

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SolidFill":
        return cls(wrapped_color(node))


@dataclass(frozen=True, slots=True)
class GradientStop:
    position: float
    color: Color

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GradientStop":
        return cls(
            position=required_value(node, "pos", POSITIVE_FIXED_PERCENTAGE.parse),
            color=wrapped_color(node),
        )


@dataclass(frozen=True, slots=True)
class LinearShadeProperties:
    angle: Optional[int] = None
    scaled: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "LinearShadeProperties":
        return cls(
            angle=optional_value(node, "ang", POSITIVE_FIXED_ANGLE.parse),
            scaled=optional_bool(node, "scaled"),
        )


@dataclass(frozen=True, slots=True)
class PathShadeProperties:
    path: Optional[PathShadeType] = None
    fill_to_rect: Optional[RelativeRect] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PathShadeProperties":
        fill_to_rect = None
        for child in node.children("fillToRect"):
            fill_to_rect = RelativeRect.from_xml_element(child)
            break
        return cls(path=optional_value(node, "path", PathShadeType.parse), fill_to_rect=fill_to_rect)


ShadeProperties = Union[LinearShadeProperties, PathShadeProperties]

SHADE_PROPERTIES: ChoiceGroup[ShadeProperties] = ChoiceGroup(
    "EG_ShadeProperties",
    {
        "lin": LinearShadeProperties.from_xml_element,
        "path": PathShadeProperties.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class GradientFillProperties:
    flip: Optional[TileFlipMode] = None
    rotate_with_shape: Optional[bool] = None
    gradient_stop_list: Optional[List[GradientStop]] = None
    shade_properties: Optional[ShadeProperties] = None
    tile_rect: Optional[RelativeRect] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GradientFillProperties":
        gradient_stop_list = None
        tile_rect = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "gsLst":
                stops = [GradientStop.from_xml_element(gs) for gs in child.children("gs")]
                check_min_occurs(node, "gsLst", stops, GRADIENT_MIN_STOPS)
                gradient_stop_list = stops
            elif tag == "tileRect":
                tile_rect = RelativeRect.from_xml_element(child)
        return cls(
            flip=optional_value(node, "flip", TileFlipMode.parse),
            rotate_with_shape=optional_bool(node, "rotWithShape"),
            gradient_stop_list=gradient_stop_list,
            shade_properties=SHADE_PROPERTIES.parse_first(node),
            tile_rect=tile_rect,
        )


@dataclass(frozen=True, slots=True)
class TileInfoProperties:
    translate_x: Optional[int] = None
    translate_y: Optional[int] = None
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    flip_mode: Optional[TileFlipMode] = None
    alignment: Optional[RectAlignment] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TileInfoProperties":
        return cls(
            translate_x=optional_value(node, "tx", COORDINATE.parse),
            translate_y=optional_value(node, "ty", COORDINATE.parse),
            scale_x=optional_value(node, "sx", PERCENTAGE.parse),
            scale_y=optional_value(node, "sy", PERCENTAGE.parse),
            flip_mode=optional_value(node, "flip", TileFlipMode.parse),
            alignment=optional_value(node, "algn", RectAlignment.parse),
        )


@dataclass(frozen=True, slots=True)
class StretchInfoProperties:
    fill_rect: Optional[RelativeRect] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "StretchInfoProperties":
        rect = node.first_child()
        return cls(None if rect is None else RelativeRect.from_xml_element(rect))


FillModeProperties = Union[TileInfoProperties, StretchInfoProperties]

FILL_MODE_PROPERTIES: ChoiceGroup[FillModeProperties] = ChoiceGroup(
    "EG_FillModeProperties",
    {
        "tile": TileInfoProperties.from_xml_element,
        "stretch": StretchInfoProperties.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class BlipFillProperties:
    dpi: Optional[int] = None
    rotate_with_shape: Optional[bool] = None
    blip: Optional[Blip] = None
    source_rect: Optional[RelativeRect] = None
    fill_mode_properties: Optional[FillModeProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "BlipFillProperties":
        blip = None
        source_rect = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "blip":
                blip = Blip.from_xml_element(child)
            elif tag == "srcRect":
                source_rect = RelativeRect.from_xml_element(child)
        return cls(
            dpi=optional_value(node, "dpi", UINT32.parse),
            rotate_with_shape=optional_bool(node, "rotWithShape"),
            blip=blip,
            source_rect=source_rect,
            fill_mode_properties=FILL_MODE_PROPERTIES.parse_first(node),
        )


@dataclass(frozen=True, slots=True)
class PatternFillProperties:
    preset: Optional[PresetPatternVal] = None
    fg_color: Optional[Color] = None
    bg_color: Optional[Color] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PatternFillProperties":
        fg_color = None
        bg_color = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "fgClr":
                fg_color = wrapped_color(child)
            elif tag == "bgClr":
                bg_color = wrapped_color(child)
        return cls(
            preset=optional_value(node, "prst", PresetPatternVal.parse),
            fg_color=fg_color,
            bg_color=bg_color,
        )


FillProperties = Union[
    NoFill,
    SolidFill,
    GradientFillProperties,
    BlipFillProperties,
    PatternFillProperties,
    GroupFill,
]

FILL_PROPERTIES: ChoiceGroup[FillProperties] = ChoiceGroup(
    "EG_FillProperties",
    {
        "noFill": lambda node: NoFill(),
        "solidFill": SolidFill.from_xml_element,
        "gradFill": GradientFillProperties.from_xml_element,
        "blipFill": BlipFillProperties.from_xml_element,
        "pattFill": PatternFillProperties.from_xml_element,
        "grpFill": lambda node: GroupFill(),
    },
)

# Lines cannot be filled with a picture or inherit a group fill.
LineFillProperties = Union[NoFill, SolidFill, GradientFillProperties, PatternFillProperties]

LINE_FILL_PROPERTIES: ChoiceGroup[LineFillProperties] = ChoiceGroup(
    "EG_LineFillProperties",
    {
        "noFill": lambda node: NoFill(),
        "solidFill": SolidFill.from_xml_element,
        "gradFill": GradientFillProperties.from_xml_element,
        "pattFill": PatternFillProperties.from_xml_element,
    },
)
