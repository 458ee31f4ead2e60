"""Color model: the six color variants, color transforms and color schemes."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Dict, List, Optional, Union

from drawingml_theme.model.enums import (
    ColorSchemeIndex,
    ColorTransformKind,
    PresetColorVal,
    SchemeColorVal,
    SystemColorVal,
)
from drawingml_theme.model.errors import MissingChildNodeError
from drawingml_theme.model.simple_types import (
    ANGLE,
    FIXED_PERCENTAGE,
    PERCENTAGE,
    POSITIVE_FIXED_ANGLE,
    POSITIVE_FIXED_PERCENTAGE,
    POSITIVE_PERCENTAGE,
    Number,
    NumericType,
    parse_hex_color,
)
from drawingml_theme.model.xsd import (
    ChoiceGroup,
    first_child,
    optional_value,
    require,
    required_attribute,
    required_value,
)
from drawingml_theme.utils.xml_utils import XmlNode

# Value type of the ``val`` attribute per transform; ``None`` marks an empty tag.
_TRANSFORM_VALUE_TYPES: Dict[ColorTransformKind, Optional[NumericType]] = {
    ColorTransformKind.TINT: POSITIVE_FIXED_PERCENTAGE,
    ColorTransformKind.SHADE: POSITIVE_FIXED_PERCENTAGE,
    ColorTransformKind.COMPLEMENT: None,
    ColorTransformKind.INVERSE: None,
    ColorTransformKind.GRAYSCALE: None,
    ColorTransformKind.ALPHA: POSITIVE_FIXED_PERCENTAGE,
    ColorTransformKind.ALPHA_OFFSET: FIXED_PERCENTAGE,
    ColorTransformKind.ALPHA_MODULATE: POSITIVE_PERCENTAGE,
    ColorTransformKind.HUE: POSITIVE_FIXED_ANGLE,
    ColorTransformKind.HUE_OFFSET: ANGLE,
    ColorTransformKind.HUE_MODULATE: POSITIVE_PERCENTAGE,
    ColorTransformKind.SATURATION: PERCENTAGE,
    ColorTransformKind.SATURATION_OFFSET: PERCENTAGE,
    ColorTransformKind.SATURATION_MODULATE: PERCENTAGE,
    ColorTransformKind.LUMINANCE: PERCENTAGE,
    ColorTransformKind.LUMINANCE_OFFSET: PERCENTAGE,
    ColorTransformKind.LUMINANCE_MODULATE: PERCENTAGE,
    ColorTransformKind.RED: PERCENTAGE,
    ColorTransformKind.RED_OFFSET: PERCENTAGE,
    ColorTransformKind.RED_MODULATE: PERCENTAGE,
    ColorTransformKind.GREEN: PERCENTAGE,
    ColorTransformKind.GREEN_OFFSET: PERCENTAGE,
    ColorTransformKind.GREEN_MODULATE: PERCENTAGE,
    ColorTransformKind.BLUE: PERCENTAGE,
    ColorTransformKind.BLUE_OFFSET: PERCENTAGE,
    ColorTransformKind.BLUE_MODULATE: PERCENTAGE,
    ColorTransformKind.GAMMA: None,
    ColorTransformKind.INVERSE_GAMMA: None,
}


@dataclass(frozen=True, slots=True)
class ColorTransform:
    """One step of a color's transform chain, e.g. ``<a:lumMod val="50000"/>``."""

    kind: ColorTransformKind
    value: Optional[Number] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorTransform":
        return COLOR_TRANSFORM.from_xml_element(node)

    @classmethod
    def _parse_kind(cls, kind: ColorTransformKind, node: XmlNode) -> "ColorTransform":
        value_type = _TRANSFORM_VALUE_TYPES[kind]
        if value_type is None:
            return cls(kind)
        return cls(kind, required_value(node, "val", value_type.parse))


COLOR_TRANSFORM: ChoiceGroup[ColorTransform] = ChoiceGroup(
    "EG_ColorTransform",
    {kind.value: partial(ColorTransform._parse_kind, kind) for kind in ColorTransformKind},
)


def _transforms(node: XmlNode) -> List[ColorTransform]:
    return COLOR_TRANSFORM.parse_all(node)


@dataclass(frozen=True, slots=True)
class ScRgbColor:
    """Color given as scRGB percentages, ``<a:scrgbClr r= g= b=/>``."""

    red: float
    green: float
    blue: float
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ScRgbColor":
        return cls(
            red=required_value(node, "r", PERCENTAGE.parse),
            green=required_value(node, "g", PERCENTAGE.parse),
            blue=required_value(node, "b", PERCENTAGE.parse),
            color_transforms=_transforms(node),
        )


@dataclass(frozen=True, slots=True)
class SRgbColor:
    """Color given as a 24-bit ``RRGGBB`` value."""

    value: int
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SRgbColor":
        return cls(
            value=required_value(node, "val", parse_hex_color),
            color_transforms=_transforms(node),
        )

    @property
    def hex(self) -> str:
        return f"{self.value:06X}"


@dataclass(frozen=True, slots=True)
class HslColor:
    hue: int
    saturation: float
    luminance: float
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "HslColor":
        return cls(
            hue=required_value(node, "hue", POSITIVE_FIXED_ANGLE.parse),
            saturation=required_value(node, "sat", PERCENTAGE.parse),
            luminance=required_value(node, "lum", PERCENTAGE.parse),
            color_transforms=_transforms(node),
        )


@dataclass(frozen=True, slots=True)
class SystemColor:
    """Operating system color with the last rendered value as a fallback."""

    value: SystemColorVal
    last_color: Optional[int] = None
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SystemColor":
        return cls(
            value=required_value(node, "val", SystemColorVal.parse),
            last_color=optional_value(node, "lastClr", parse_hex_color),
            color_transforms=_transforms(node),
        )


@dataclass(frozen=True, slots=True)
class PresetColor:
    value: PresetColorVal
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PresetColor":
        return cls(
            value=required_value(node, "val", PresetColorVal.parse),
            color_transforms=_transforms(node),
        )


@dataclass(frozen=True, slots=True)
class SchemeColor:
    """Reference to a theme color role such as ``accent1`` or ``phClr``."""

    value: SchemeColorVal
    color_transforms: List[ColorTransform] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SchemeColor":
        return cls(
            value=required_value(node, "val", SchemeColorVal.parse),
            color_transforms=_transforms(node),
        )


Color = Union[ScRgbColor, SRgbColor, HslColor, SystemColor, PresetColor, SchemeColor]

COLOR: ChoiceGroup[Color] = ChoiceGroup(
    "EG_ColorChoice",
    {
        "scrgbClr": ScRgbColor.from_xml_element,
        "srgbClr": SRgbColor.from_xml_element,
        "hslClr": HslColor.from_xml_element,
        "sysClr": SystemColor.from_xml_element,
        "schemeClr": SchemeColor.from_xml_element,
        "prstClr": PresetColor.from_xml_element,
    },
)


def wrapped_color(node: XmlNode) -> Color:
    """Read the color held by a single-child wrapper such as ``<a:dk1>``."""
    return COLOR.from_xml_element(first_child(node, COLOR.name))


def optional_color(node: XmlNode) -> Optional[Color]:
    """Return the first color among the children of ``node``, if any."""
    return COLOR.parse_first(node)


@dataclass(frozen=True, slots=True)
class CustomColor:
    color: Color
    name: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CustomColor":
        return cls(color=wrapped_color(node), name=node.attribute("name"))


_SCHEME_SLOTS = (
    ("dk1", "dark1"),
    ("lt1", "light1"),
    ("dk2", "dark2"),
    ("lt2", "light2"),
    ("accent1", "accent1"),
    ("accent2", "accent2"),
    ("accent3", "accent3"),
    ("accent4", "accent4"),
    ("accent5", "accent5"),
    ("accent6", "accent6"),
    ("hlink", "hyperlink"),
    ("folHlink", "followed_hyperlink"),
)


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """The twelve-role theme palette."""

    name: str
    dark1: Color
    light1: Color
    dark2: Color
    light2: Color
    accent1: Color
    accent2: Color
    accent3: Color
    accent4: Color
    accent5: Color
    accent6: Color
    hyperlink: Color
    followed_hyperlink: Color

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorScheme":
        name = required_attribute(node, "name")
        found: Dict[str, Color] = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in _SCHEME_TAGS:
                found[tag] = wrapped_color(child)
        values = {}
        for tag, attr in _SCHEME_SLOTS:
            if tag not in found:
                raise MissingChildNodeError(node.name, tag)
            values[attr] = found[tag]
        return cls(name=name, **values)

    def colors(self) -> Dict[str, Color]:
        """Return the role colors keyed by wire name in schema order."""
        return {tag: getattr(self, attr) for tag, attr in _SCHEME_SLOTS}

    def get(self, index: ColorSchemeIndex) -> Color:
        return getattr(self, dict(_SCHEME_SLOTS)[index.value])


_SCHEME_TAGS = frozenset(tag for tag, _ in _SCHEME_SLOTS)

_MAPPING_SLOTS = (
    ("bg1", "background1"),
    ("tx1", "text1"),
    ("bg2", "background2"),
    ("tx2", "text2"),
    ("accent1", "accent1"),
    ("accent2", "accent2"),
    ("accent3", "accent3"),
    ("accent4", "accent4"),
    ("accent5", "accent5"),
    ("accent6", "accent6"),
    ("hlink", "hyperlink"),
    ("folHlink", "followed_hyperlink"),
)


@dataclass(frozen=True, slots=True)
class ColorMapping:
    """Binding of the document color roles to color scheme slots."""

    background1: ColorSchemeIndex
    text1: ColorSchemeIndex
    background2: ColorSchemeIndex
    text2: ColorSchemeIndex
    accent1: ColorSchemeIndex
    accent2: ColorSchemeIndex
    accent3: ColorSchemeIndex
    accent4: ColorSchemeIndex
    accent5: ColorSchemeIndex
    accent6: ColorSchemeIndex
    hyperlink: ColorSchemeIndex
    followed_hyperlink: ColorSchemeIndex

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorMapping":
        values = {
            attr: required_value(node, wire, ColorSchemeIndex.parse) for wire, attr in _MAPPING_SLOTS
        }
        return cls(**values)

    def resolve(self, role: SchemeColorVal) -> Optional[ColorSchemeIndex]:
        """Map a scheme color role to its slot; direct slot roles map to themselves."""
        attr = dict(_MAPPING_SLOTS).get(role.value)
        if attr is not None:
            return getattr(self, attr)
        try:
            return ColorSchemeIndex(role.value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class MasterColorMapping:
    """``masterClrMapping``: keep the mapping inherited from the master."""


@dataclass(frozen=True, slots=True)
class OverrideColorMapping:
    mapping: ColorMapping

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "OverrideColorMapping":
        # Attributes normally sit on overrideClrMapping itself; some producers nest a clrMapping.
        source = node
        if node.attribute("bg1") is None:
            for child in node.child_nodes:
                if child.local_name() in ("clrMapping", "clrMap"):
                    source = child
                    break
        return cls(ColorMapping.from_xml_element(source))


ColorMappingOverride = Union[MasterColorMapping, OverrideColorMapping]

COLOR_MAPPING_OVERRIDE: ChoiceGroup[ColorMappingOverride] = ChoiceGroup(
    "CT_ColorMappingOverride",
    {
        "masterClrMapping": lambda node: MasterColorMapping(),
        "overrideClrMapping": OverrideColorMapping.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class ColorSchemeAndMapping:
    """Entry of ``extraClrSchemeLst``: an alternate scheme and its mapping."""

    color_scheme: ColorScheme
    color_mapping: Optional[ColorMapping] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorSchemeAndMapping":
        color_scheme = None
        color_mapping = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "clrScheme":
                color_scheme = ColorScheme.from_xml_element(child)
            elif tag == "clrMap":
                color_mapping = ColorMapping.from_xml_element(child)
        return cls(color_scheme=require(node, color_scheme, "clrScheme"), color_mapping=color_mapping)
