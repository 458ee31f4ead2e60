"""The theme part: ``OfficeStyleSheet`` and the schemes it aggregates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from drawingml_theme.model.colors import ColorScheme, ColorSchemeAndMapping, CustomColor
from drawingml_theme.model.effects import EFFECT_PROPERTIES, EffectProperties
from drawingml_theme.model.fills import FILL_PROPERTIES, FillProperties
from drawingml_theme.model.lines import LineProperties
from drawingml_theme.model.shapes import ShapeProperties, ShapeStyle
from drawingml_theme.model.text import SupplementalFont, TextBodyProperties, TextFont, TextListStyle
from drawingml_theme.model.xsd import check_min_occurs, require, required_attribute
from drawingml_theme.utils.logger import get_logger
from drawingml_theme.utils.xml_utils import XmlNode

LOGGER = get_logger(__name__)

STYLE_LIST_MIN_ENTRIES = 3
# Style matrix references at or above this index select a background fill.
BACKGROUND_FILL_BASE_INDEX = 1001


@dataclass(frozen=True, slots=True)
class FontCollection:
    latin: TextFont
    east_asian: TextFont
    complex_script: TextFont
    supplemental_font_list: List[SupplementalFont] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "FontCollection":
        fonts = {}
        supplemental: List[SupplementalFont] = []
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in ("latin", "ea", "cs"):
                fonts[tag] = TextFont.from_xml_element(child)
            elif tag == "font":
                supplemental.append(SupplementalFont.from_xml_element(child))
        return cls(
            latin=require(node, fonts.get("latin"), "latin"),
            east_asian=require(node, fonts.get("ea"), "ea"),
            complex_script=require(node, fonts.get("cs"), "cs"),
            supplemental_font_list=supplemental,
        )

    def typeface_for_script(self, script: str) -> Optional[str]:
        for font in self.supplemental_font_list:
            if font.script == script:
                return font.typeface
        return None


@dataclass(frozen=True, slots=True)
class FontScheme:
    name: str
    major_font: FontCollection
    minor_font: FontCollection

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "FontScheme":
        major_font = None
        minor_font = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "majorFont":
                major_font = FontCollection.from_xml_element(child)
            elif tag == "minorFont":
                minor_font = FontCollection.from_xml_element(child)
        return cls(
            name=required_attribute(node, "name"),
            major_font=require(node, major_font, "majorFont"),
            minor_font=require(node, minor_font, "minorFont"),
        )


@dataclass(frozen=True, slots=True)
class EffectStyleItem:
    effect_properties: EffectProperties

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "EffectStyleItem":
        LOGGER.debug("Parsing EffectStyleItem '%s'", node.name)
        return cls(require(node, EFFECT_PROPERTIES.parse_first(node), "EG_EffectProperties"))


@dataclass(frozen=True, slots=True)
class StyleMatrix:
    """The theme's format scheme: fill, line, effect and background fill styles.

    Shapes point into these lists through ``StyleMatrixReference`` indices, which
    are 1-based. Index 0 means "no style" and indices from 1001 select from the
    background fill list instead of the fill list.
    """

    fill_style_list: List[FillProperties]
    line_style_list: List[LineProperties]
    effect_style_list: List[EffectStyleItem]
    bg_fill_style_list: List[FillProperties]
    name: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "StyleMatrix":
        LOGGER.debug("Parsing StyleMatrix '%s'", node.name)
        fills: List[FillProperties] = []
        lines: List[LineProperties] = []
        effects: List[EffectStyleItem] = []
        bg_fills: List[FillProperties] = []
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "fillStyleLst":
                fills = [FILL_PROPERTIES.from_xml_element(entry) for entry in child.child_nodes]
            elif tag == "lnStyleLst":
                lines = [LineProperties.from_xml_element(entry) for entry in child.child_nodes]
            elif tag == "effectStyleLst":
                effects = [EffectStyleItem.from_xml_element(entry) for entry in child.child_nodes]
            elif tag == "bgFillStyleLst":
                bg_fills = [FILL_PROPERTIES.from_xml_element(entry) for entry in child.child_nodes]

        check_min_occurs(node, "fillStyleLst", fills, STYLE_LIST_MIN_ENTRIES)
        check_min_occurs(node, "lnStyleLst", lines, STYLE_LIST_MIN_ENTRIES)
        check_min_occurs(node, "effectStyleLst", effects, STYLE_LIST_MIN_ENTRIES)
        check_min_occurs(node, "bgFillStyleLst", bg_fills, STYLE_LIST_MIN_ENTRIES)
        return cls(
            fill_style_list=fills,
            line_style_list=lines,
            effect_style_list=effects,
            bg_fill_style_list=bg_fills,
            name=node.attribute("name"),
        )

    def fill_style(self, index: int) -> Optional[FillProperties]:
        """Resolve a ``fillRef`` index; out of range or zero yields ``None``."""
        if index >= BACKGROUND_FILL_BASE_INDEX:
            return _one_based(self.bg_fill_style_list, index - BACKGROUND_FILL_BASE_INDEX + 1)
        return _one_based(self.fill_style_list, index)

    def line_style(self, index: int) -> Optional[LineProperties]:
        return _one_based(self.line_style_list, index)

    def effect_style(self, index: int) -> Optional[EffectStyleItem]:
        return _one_based(self.effect_style_list, index)


def _one_based(items, index: int):
    if 1 <= index <= len(items):
        return items[index - 1]
    return None


@dataclass(frozen=True, slots=True)
class BaseStyles:
    color_scheme: ColorScheme
    font_scheme: FontScheme
    format_scheme: StyleMatrix

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "BaseStyles":
        LOGGER.debug("Parsing BaseStyles '%s'", node.name)
        color_scheme = None
        font_scheme = None
        format_scheme = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "clrScheme":
                color_scheme = ColorScheme.from_xml_element(child)
            elif tag == "fontScheme":
                font_scheme = FontScheme.from_xml_element(child)
            elif tag == "fmtScheme":
                format_scheme = StyleMatrix.from_xml_element(child)
        return cls(
            color_scheme=require(node, color_scheme, "clrScheme"),
            font_scheme=require(node, font_scheme, "fontScheme"),
            format_scheme=require(node, format_scheme, "fmtScheme"),
        )


@dataclass(frozen=True, slots=True)
class DefaultShapeDefinition:
    shape_properties: ShapeProperties
    text_body_properties: TextBodyProperties
    text_list_style: TextListStyle
    shape_style: Optional[ShapeStyle] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "DefaultShapeDefinition":
        values = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "spPr":
                values["spPr"] = ShapeProperties.from_xml_element(child)
            elif tag == "bodyPr":
                values["bodyPr"] = TextBodyProperties.from_xml_element(child)
            elif tag == "lstStyle":
                values["lstStyle"] = TextListStyle.from_xml_element(child)
            elif tag == "style":
                values["style"] = ShapeStyle.from_xml_element(child)
        return cls(
            shape_properties=require(node, values.get("spPr"), "spPr"),
            text_body_properties=require(node, values.get("bodyPr"), "bodyPr"),
            text_list_style=require(node, values.get("lstStyle"), "lstStyle"),
            shape_style=values.get("style"),
        )


@dataclass(frozen=True, slots=True)
class ObjectStyleDefaults:
    shape_definition: Optional[DefaultShapeDefinition] = None
    line_definition: Optional[DefaultShapeDefinition] = None
    text_definition: Optional[DefaultShapeDefinition] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ObjectStyleDefaults":
        slots = {"spDef": "shape_definition", "lnDef": "line_definition", "txDef": "text_definition"}
        values = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in slots:
                values[slots[tag]] = DefaultShapeDefinition.from_xml_element(child)
        return cls(**values)


@dataclass(frozen=True, slots=True)
class OfficeStyleSheet:
    """Root of a theme part such as ``ppt/theme/theme1.xml``."""

    theme_elements: BaseStyles
    name: Optional[str] = None
    object_defaults: Optional[ObjectStyleDefaults] = None
    extra_color_scheme_list: List[ColorSchemeAndMapping] = field(default_factory=list)
    custom_color_list: List[CustomColor] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "OfficeStyleSheet":
        LOGGER.debug("Parsing OfficeStyleSheet '%s'", node.name)
        theme_elements = None
        object_defaults = None
        extra_schemes: List[ColorSchemeAndMapping] = []
        custom_colors: List[CustomColor] = []
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "themeElements":
                theme_elements = BaseStyles.from_xml_element(child)
            elif tag == "objectDefaults":
                object_defaults = ObjectStyleDefaults.from_xml_element(child)
            elif tag == "extraClrSchemeLst":
                extra_schemes = [
                    ColorSchemeAndMapping.from_xml_element(entry) for entry in child.children("extraClrScheme")
                ]
            elif tag == "custClrLst":
                custom_colors = [CustomColor.from_xml_element(entry) for entry in child.children("custClr")]
        return cls(
            theme_elements=require(node, theme_elements, "themeElements"),
            name=node.attribute("name"),
            object_defaults=object_defaults,
            extra_color_scheme_list=extra_schemes,
            custom_color_list=custom_colors,
        )

    @property
    def color_scheme(self) -> ColorScheme:
        return self.theme_elements.color_scheme

    @property
    def font_scheme(self) -> FontScheme:
        return self.theme_elements.font_scheme

    @property
    def format_scheme(self) -> StyleMatrix:
        return self.theme_elements.format_scheme
