"""Text bodies, paragraphs, runs and their character and paragraph properties."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from drawingml_theme.model.colors import Color, wrapped_color
from drawingml_theme.model.effects import EFFECT_PROPERTIES, Blip, EffectProperties
from drawingml_theme.model.enums import (
    TextAlignType,
    TextAnchoringType,
    TextAutonumberScheme,
    TextCapsType,
    TextFontAlignType,
    TextHorizontalOverflowType,
    TextShapeType,
    TextStrikeType,
    TextTabAlignType,
    TextUnderlineType,
    TextVertOverflowType,
    TextVerticalType,
    TextWrappingType,
)
from drawingml_theme.model.fills import FILL_PROPERTIES, FillProperties
from drawingml_theme.model.lines import LineProperties
from drawingml_theme.model.shapes import GeomGuide, guide_list
from drawingml_theme.model.shared import Hyperlink
from drawingml_theme.model.simple_types import (
    ANGLE,
    COORDINATE32,
    PERCENTAGE,
    POSITIVE_COORDINATE32,
    TEXT_BULLET_SIZE_PERCENT,
    TEXT_BULLET_START_AT,
    TEXT_COLUMN_COUNT,
    TEXT_FONT_SCALE_PERCENT,
    TEXT_FONT_SIZE,
    TEXT_INDENT,
    TEXT_INDENT_LEVEL,
    TEXT_MARGIN,
    TEXT_NON_NEGATIVE_POINT,
    TEXT_POINT,
    TEXT_SPACING_PERCENT,
    TEXT_SPACING_POINT,
    UINT32,
    parse_guid,
    parse_integer,
    parse_panose,
)
from drawingml_theme.model.xsd import (
    ChoiceGroup,
    first_child,
    optional_bool,
    optional_value,
    require,
    required_attribute,
    required_value,
    text_bool,
)
from drawingml_theme.utils.xml_utils import XmlNode

TEXT_LIST_LEVELS = 9


@dataclass(frozen=True, slots=True)
class TextFont:
    typeface: str
    panose: Optional[str] = None
    # Schema defaults: pitchFamily 0, charset 1.
    pitch_family: Optional[int] = None
    charset: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextFont":
        return cls(
            typeface=required_attribute(node, "typeface"),
            panose=optional_value(node, "panose", parse_panose),
            pitch_family=optional_value(node, "pitchFamily", parse_integer),
            charset=optional_value(node, "charset", parse_integer),
        )


@dataclass(frozen=True, slots=True)
class SupplementalFont:
    """Font to use for one script, such as ``Jpan`` or ``Arab``."""

    script: str
    typeface: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SupplementalFont":
        return cls(script=required_attribute(node, "script"), typeface=required_attribute(node, "typeface"))


@dataclass(frozen=True, slots=True)
class TextSpacingPercent:
    value: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextSpacingPercent":
        return cls(required_value(node, "val", TEXT_SPACING_PERCENT.parse))


@dataclass(frozen=True, slots=True)
class TextSpacingPoint:
    # Hundredths of a point.
    value: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextSpacingPoint":
        return cls(required_value(node, "val", TEXT_SPACING_POINT.parse))


TextSpacing = Union[TextSpacingPercent, TextSpacingPoint]

TEXT_SPACING: ChoiceGroup[TextSpacing] = ChoiceGroup(
    "EG_TextSpacing",
    {
        "spcPct": TextSpacingPercent.from_xml_element,
        "spcPts": TextSpacingPoint.from_xml_element,
    },
)


def _spacing(node: XmlNode) -> TextSpacing:
    return TEXT_SPACING.from_xml_element(first_child(node, "EG_TextSpacing"))


@dataclass(frozen=True, slots=True)
class TextBulletColorFollowText:
    pass


@dataclass(frozen=True, slots=True)
class TextBulletColor:
    color: Color

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextBulletColor":
        return cls(wrapped_color(node))


TextBulletColorChoice = Union[TextBulletColorFollowText, TextBulletColor]

TEXT_BULLET_COLOR: ChoiceGroup[TextBulletColorChoice] = ChoiceGroup(
    "EG_TextBulletColor",
    {
        "buClrTx": lambda node: TextBulletColorFollowText(),
        "buClr": TextBulletColor.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class TextBulletSizeFollowText:
    pass


@dataclass(frozen=True, slots=True)
class TextBulletSizePercent:
    """Bullet size relative to the text, in thousandths of a percent (25000 to 400000)."""

    value: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextBulletSizePercent":
        return cls(required_value(node, "val", TEXT_BULLET_SIZE_PERCENT.parse))


@dataclass(frozen=True, slots=True)
class TextBulletSizePoints:
    value: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextBulletSizePoints":
        return cls(required_value(node, "val", TEXT_FONT_SIZE.parse))


TextBulletSize = Union[TextBulletSizeFollowText, TextBulletSizePercent, TextBulletSizePoints]

TEXT_BULLET_SIZE: ChoiceGroup[TextBulletSize] = ChoiceGroup(
    "EG_TextBulletSize",
    {
        "buSzTx": lambda node: TextBulletSizeFollowText(),
        "buSzPct": TextBulletSizePercent.from_xml_element,
        "buSzPts": TextBulletSizePoints.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class TextBulletTypefaceFollowText:
    pass


TextBulletTypeface = Union[TextBulletTypefaceFollowText, TextFont]

TEXT_BULLET_TYPEFACE: ChoiceGroup[TextBulletTypeface] = ChoiceGroup(
    "EG_TextBulletTypeface",
    {
        "buFontTx": lambda node: TextBulletTypefaceFollowText(),
        "buFont": TextFont.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class NoBullet:
    pass


@dataclass(frozen=True, slots=True)
class AutoNumberBullet:
    scheme: TextAutonumberScheme
    # Schema default: 1.
    start_at: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AutoNumberBullet":
        return cls(
            scheme=required_value(node, "type", TextAutonumberScheme.parse),
            start_at=optional_value(node, "startAt", TEXT_BULLET_START_AT.parse),
        )


@dataclass(frozen=True, slots=True)
class CharacterBullet:
    character: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CharacterBullet":
        return cls(required_attribute(node, "char"))


@dataclass(frozen=True, slots=True)
class PictureBullet:
    blip: Blip

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PictureBullet":
        return cls(Blip.from_xml_element(first_child(node, "blip")))


TextBullet = Union[NoBullet, AutoNumberBullet, CharacterBullet, PictureBullet]

TEXT_BULLET: ChoiceGroup[TextBullet] = ChoiceGroup(
    "EG_TextBullet",
    {
        "buNone": lambda node: NoBullet(),
        "buAutoNum": AutoNumberBullet.from_xml_element,
        "buChar": CharacterBullet.from_xml_element,
        "buBlip": PictureBullet.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class TextTabStop:
    position: Optional[int] = None
    alignment: Optional[TextTabAlignType] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextTabStop":
        return cls(
            position=optional_value(node, "pos", COORDINATE32.parse),
            alignment=optional_value(node, "algn", TextTabAlignType.parse),
        )


@dataclass(frozen=True, slots=True)
class UnderlineFollowsText:
    pass


@dataclass(frozen=True, slots=True)
class UnderlineLine:
    line_properties: Optional[LineProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "UnderlineLine":
        child = node.first_child()
        return cls(None if child is None else LineProperties.from_xml_element(child))


TextUnderlineLine = Union[UnderlineFollowsText, UnderlineLine]

TEXT_UNDERLINE_LINE: ChoiceGroup[TextUnderlineLine] = ChoiceGroup(
    "EG_TextUnderlineLine",
    {
        "uLnTx": lambda node: UnderlineFollowsText(),
        "uLn": UnderlineLine.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class UnderlineFillFollowsText:
    pass


@dataclass(frozen=True, slots=True)
class UnderlineFill:
    fill_properties: FillProperties

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "UnderlineFill":
        return cls(FILL_PROPERTIES.from_xml_element(first_child(node, "EG_FillProperties")))


TextUnderlineFill = Union[UnderlineFillFollowsText, UnderlineFill]

TEXT_UNDERLINE_FILL: ChoiceGroup[TextUnderlineFill] = ChoiceGroup(
    "EG_TextUnderlineFill",
    {
        "uFillTx": lambda node: UnderlineFillFollowsText(),
        "uFill": UnderlineFill.from_xml_element,
    },
)


def _child_bool(node: XmlNode) -> Optional[bool]:
    if node.text is not None:
        return text_bool(node)
    return optional_bool(node, "val")


@dataclass(frozen=True, slots=True)
class TextCharacterProperties:
    """Run level formatting. Every field is optional; absent means inherited."""

    kumimoji: Optional[bool] = None
    language: Optional[str] = None
    alternative_language: Optional[str] = None
    # Hundredths of a point.
    font_size: Optional[int] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[TextUnderlineType] = None
    strikethrough: Optional[TextStrikeType] = None
    kerning: Optional[int] = None
    caps_type: Optional[TextCapsType] = None
    spacing: Optional[int] = None
    normalize_heights: Optional[bool] = None
    baseline: Optional[float] = None
    no_proofing: Optional[bool] = None
    dirty: Optional[bool] = None
    spelling_error: Optional[bool] = None
    smarttag_clean: Optional[bool] = None
    smarttag_id: Optional[int] = None
    bookmark_link_target: Optional[str] = None
    line_properties: Optional[LineProperties] = None
    fill_properties: Optional[FillProperties] = None
    effect_properties: Optional[EffectProperties] = None
    highlight_color: Optional[Color] = None
    text_underline_line: Optional[TextUnderlineLine] = None
    text_underline_fill: Optional[TextUnderlineFill] = None
    latin_font: Optional[TextFont] = None
    east_asian_font: Optional[TextFont] = None
    complex_script_font: Optional[TextFont] = None
    symbol_font: Optional[TextFont] = None
    hyperlink_click: Optional[Hyperlink] = None
    hyperlink_mouse_over: Optional[Hyperlink] = None
    rtl: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextCharacterProperties":
        values: Dict[str, object] = {
            "fill_properties": FILL_PROPERTIES.parse_first(node),
            "effect_properties": EFFECT_PROPERTIES.parse_first(node),
            "text_underline_line": TEXT_UNDERLINE_LINE.parse_first(node),
            "text_underline_fill": TEXT_UNDERLINE_FILL.parse_first(node),
        }
        fonts = {"latin": "latin_font", "ea": "east_asian_font", "cs": "complex_script_font", "sym": "symbol_font"}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "ln":
                values["line_properties"] = LineProperties.from_xml_element(child)
            elif tag == "highlight":
                values["highlight_color"] = wrapped_color(child)
            elif tag in fonts:
                values[fonts[tag]] = TextFont.from_xml_element(child)
            elif tag == "hlinkClick":
                values["hyperlink_click"] = Hyperlink.from_xml_element(child)
            elif tag == "hlinkMouseOver":
                values["hyperlink_mouse_over"] = Hyperlink.from_xml_element(child)
            elif tag == "rtl":
                values["rtl"] = _child_bool(child)

        return cls(
            kumimoji=optional_bool(node, "kumimoji"),
            language=node.attribute("lang"),
            alternative_language=node.attribute("altLang"),
            font_size=optional_value(node, "sz", TEXT_FONT_SIZE.parse),
            bold=optional_bool(node, "b"),
            italic=optional_bool(node, "i"),
            underline=optional_value(node, "u", TextUnderlineType.parse),
            strikethrough=optional_value(node, "strike", TextStrikeType.parse),
            kerning=optional_value(node, "kern", TEXT_NON_NEGATIVE_POINT.parse),
            caps_type=optional_value(node, "cap", TextCapsType.parse),
            spacing=optional_value(node, "spc", TEXT_POINT.parse),
            normalize_heights=optional_bool(node, "normalizeH"),
            baseline=optional_value(node, "baseline", PERCENTAGE.parse),
            no_proofing=optional_bool(node, "noProof"),
            dirty=optional_bool(node, "dirty"),
            spelling_error=optional_bool(node, "err"),
            smarttag_clean=optional_bool(node, "smtClean"),
            smarttag_id=optional_value(node, "smtId", UINT32.parse),
            bookmark_link_target=node.attribute("bmk"),
            **values,
        )


@dataclass(frozen=True, slots=True)
class TextParagraphProperties:
    margin_left: Optional[int] = None
    margin_right: Optional[int] = None
    level: Optional[int] = None
    indent: Optional[int] = None
    align: Optional[TextAlignType] = None
    default_tab_size: Optional[int] = None
    rtl: Optional[bool] = None
    east_asian_line_break: Optional[bool] = None
    font_align: Optional[TextFontAlignType] = None
    latin_line_break: Optional[bool] = None
    hanging_punctuations: Optional[bool] = None
    line_spacing: Optional[TextSpacing] = None
    space_before: Optional[TextSpacing] = None
    space_after: Optional[TextSpacing] = None
    bullet_color: Optional[TextBulletColorChoice] = None
    bullet_size: Optional[TextBulletSize] = None
    bullet_typeface: Optional[TextBulletTypeface] = None
    bullet: Optional[TextBullet] = None
    tab_stop_list: List[TextTabStop] = field(default_factory=list)
    default_run_properties: Optional[TextCharacterProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextParagraphProperties":
        values: Dict[str, object] = {
            "bullet_color": TEXT_BULLET_COLOR.parse_first(node),
            "bullet_size": TEXT_BULLET_SIZE.parse_first(node),
            "bullet_typeface": TEXT_BULLET_TYPEFACE.parse_first(node),
            "bullet": TEXT_BULLET.parse_first(node),
        }
        spacings = {"lnSpc": "line_spacing", "spcBef": "space_before", "spcAft": "space_after"}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag in spacings:
                values[spacings[tag]] = _spacing(child)
            elif tag == "tabLst":
                values["tab_stop_list"] = [TextTabStop.from_xml_element(tab) for tab in child.children("tab")]
            elif tag == "defRPr":
                values["default_run_properties"] = TextCharacterProperties.from_xml_element(child)

        return cls(
            margin_left=optional_value(node, "marL", TEXT_MARGIN.parse),
            margin_right=optional_value(node, "marR", TEXT_MARGIN.parse),
            level=optional_value(node, "lvl", TEXT_INDENT_LEVEL.parse),
            indent=optional_value(node, "indent", TEXT_INDENT.parse),
            align=optional_value(node, "algn", TextAlignType.parse),
            default_tab_size=optional_value(node, "defTabSz", COORDINATE32.parse),
            rtl=optional_bool(node, "rtl"),
            east_asian_line_break=optional_bool(node, "eaLnBrk"),
            font_align=optional_value(node, "fontAlgn", TextFontAlignType.parse),
            latin_line_break=optional_bool(node, "latinLnBrk"),
            hanging_punctuations=optional_bool(node, "hangingPunct"),
            **values,
        )


@dataclass(frozen=True, slots=True)
class RegularTextRun:
    text: str
    char_properties: Optional[TextCharacterProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "RegularTextRun":
        char_properties = None
        text = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "rPr":
                char_properties = TextCharacterProperties.from_xml_element(child)
            elif tag == "t":
                text = child.text or ""
        return cls(text=require(node, text, "t"), char_properties=char_properties)


@dataclass(frozen=True, slots=True)
class TextLineBreak:
    char_properties: Optional[TextCharacterProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextLineBreak":
        char_properties = None
        for child in node.children("rPr"):
            char_properties = TextCharacterProperties.from_xml_element(child)
        return cls(char_properties)


@dataclass(frozen=True, slots=True)
class TextField:
    """A field such as a slide number or date; ``text`` is the cached result."""

    id: str
    field_type: Optional[str] = None
    char_properties: Optional[TextCharacterProperties] = None
    paragraph_properties: Optional[TextParagraphProperties] = None
    text: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextField":
        values: Dict[str, object] = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "rPr":
                values["char_properties"] = TextCharacterProperties.from_xml_element(child)
            elif tag == "pPr":
                values["paragraph_properties"] = TextParagraphProperties.from_xml_element(child)
            elif tag == "t":
                values["text"] = child.text or ""
        return cls(id=required_value(node, "id", parse_guid), field_type=node.attribute("type"), **values)


TextRun = Union[RegularTextRun, TextLineBreak, TextField]

TEXT_RUN: ChoiceGroup[TextRun] = ChoiceGroup(
    "EG_TextRun",
    {
        "r": RegularTextRun.from_xml_element,
        "br": TextLineBreak.from_xml_element,
        "fld": TextField.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class TextParagraph:
    properties: Optional[TextParagraphProperties] = None
    text_runs: List[TextRun] = field(default_factory=list)
    end_paragraph_char_properties: Optional[TextCharacterProperties] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextParagraph":
        properties = None
        end_properties = None
        runs: List[TextRun] = []
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "pPr":
                properties = TextParagraphProperties.from_xml_element(child)
            elif TEXT_RUN.is_choice_member(tag):
                runs.append(TEXT_RUN.from_xml_element(child))
            elif tag == "endParaRPr":
                end_properties = TextCharacterProperties.from_xml_element(child)
        return cls(properties=properties, text_runs=runs, end_paragraph_char_properties=end_properties)

    def plain_text(self) -> str:
        parts = []
        for run in self.text_runs:
            if isinstance(run, TextLineBreak):
                parts.append("\n")
            elif run.text is not None:
                parts.append(run.text)
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class TextListStyle:
    """Default paragraph properties plus one entry per outline level (1 to 9)."""

    default_paragraph_style: Optional[TextParagraphProperties] = None
    levels: Dict[int, TextParagraphProperties] = field(default_factory=dict)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextListStyle":
        default_style = None
        levels: Dict[int, TextParagraphProperties] = {}
        level_tags = {f"lvl{index}pPr": index for index in range(1, TEXT_LIST_LEVELS + 1)}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "defPPr":
                default_style = TextParagraphProperties.from_xml_element(child)
            elif tag in level_tags:
                levels[level_tags[tag]] = TextParagraphProperties.from_xml_element(child)
        return cls(default_paragraph_style=default_style, levels=levels)

    def level(self, index: int) -> Optional[TextParagraphProperties]:
        return self.levels.get(index)


@dataclass(frozen=True, slots=True)
class NoAutofit:
    pass


@dataclass(frozen=True, slots=True)
class NormalAutofit:
    # Schema defaults: fontScale 100000, lnSpcReduction 0.
    font_scale: Optional[float] = None
    line_spacing_reduction: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NormalAutofit":
        return cls(
            font_scale=optional_value(node, "fontScale", TEXT_FONT_SCALE_PERCENT.parse),
            line_spacing_reduction=optional_value(node, "lnSpcReduction", TEXT_SPACING_PERCENT.parse),
        )


@dataclass(frozen=True, slots=True)
class ShapeAutofit:
    pass


TextAutofit = Union[NoAutofit, NormalAutofit, ShapeAutofit]

TEXT_AUTOFIT: ChoiceGroup[TextAutofit] = ChoiceGroup(
    "EG_TextAutofit",
    {
        "noAutofit": lambda node: NoAutofit(),
        "normAutofit": NormalAutofit.from_xml_element,
        "spAutoFit": lambda node: ShapeAutofit(),
    },
)


@dataclass(frozen=True, slots=True)
class PresetTextShape:
    preset: TextShapeType
    adjust_value_list: List[GeomGuide] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PresetTextShape":
        adjust_value_list: List[GeomGuide] = []
        for child in node.children("avLst"):
            adjust_value_list = guide_list(child)
        return cls(preset=required_value(node, "prst", TextShapeType.parse), adjust_value_list=adjust_value_list)


@dataclass(frozen=True, slots=True)
class TextBodyProperties:
    rotate_angle: Optional[int] = None
    paragraph_spacing: Optional[bool] = None
    vertical_overflow: Optional[TextVertOverflowType] = None
    horizontal_overflow: Optional[TextHorizontalOverflowType] = None
    vertical_type: Optional[TextVerticalType] = None
    wrap_type: Optional[TextWrappingType] = None
    left_inset: Optional[int] = None
    top_inset: Optional[int] = None
    right_inset: Optional[int] = None
    bottom_inset: Optional[int] = None
    column_count: Optional[int] = None
    space_between_columns: Optional[int] = None
    rtl_columns: Optional[bool] = None
    is_from_word_art: Optional[bool] = None
    anchor: Optional[TextAnchoringType] = None
    anchor_center: Optional[bool] = None
    force_antialias: Optional[bool] = None
    upright: Optional[bool] = None
    compatible_line_spacing: Optional[bool] = None
    preset_text_warp: Optional[PresetTextShape] = None
    auto_fit_type: Optional[TextAutofit] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextBodyProperties":
        warp = next(node.children("prstTxWarp"), None)

        return cls(
            rotate_angle=optional_value(node, "rot", ANGLE.parse),
            paragraph_spacing=optional_bool(node, "spcFirstLastPara"),
            vertical_overflow=optional_value(node, "vertOverflow", TextVertOverflowType.parse),
            horizontal_overflow=optional_value(node, "horzOverflow", TextHorizontalOverflowType.parse),
            vertical_type=optional_value(node, "vert", TextVerticalType.parse),
            wrap_type=optional_value(node, "wrap", TextWrappingType.parse),
            left_inset=optional_value(node, "lIns", COORDINATE32.parse),
            top_inset=optional_value(node, "tIns", COORDINATE32.parse),
            right_inset=optional_value(node, "rIns", COORDINATE32.parse),
            bottom_inset=optional_value(node, "bIns", COORDINATE32.parse),
            column_count=optional_value(node, "numCol", TEXT_COLUMN_COUNT.parse),
            space_between_columns=optional_value(node, "spcCol", POSITIVE_COORDINATE32.parse),
            rtl_columns=optional_bool(node, "rtlCol"),
            is_from_word_art=optional_bool(node, "fromWordArt"),
            anchor=optional_value(node, "anchor", TextAnchoringType.parse),
            anchor_center=optional_bool(node, "anchorCtr"),
            force_antialias=optional_bool(node, "forceAA"),
            upright=optional_bool(node, "upright"),
            compatible_line_spacing=optional_bool(node, "compatLnSpc"),
            preset_text_warp=None if warp is None else PresetTextShape.from_xml_element(warp),
            auto_fit_type=TEXT_AUTOFIT.parse_first(node),
        )


@dataclass(frozen=True, slots=True)
class TextBody:
    body_properties: TextBodyProperties
    list_style: Optional[TextListStyle] = None
    paragraphs: List[TextParagraph] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TextBody":
        body_properties = None
        list_style = None
        paragraphs: List[TextParagraph] = []
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "bodyPr":
                body_properties = TextBodyProperties.from_xml_element(child)
            elif tag == "lstStyle":
                list_style = TextListStyle.from_xml_element(child)
            elif tag == "p":
                paragraphs.append(TextParagraph.from_xml_element(child))
        return cls(
            body_properties=require(node, body_properties, "bodyPr"),
            list_style=list_style,
            paragraphs=paragraphs,
        )
