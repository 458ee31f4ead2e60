"""Effect primitives, effect containers and the image (blip) effect set."""
from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple, TypeVar, Union

from drawingml_theme.model.colors import COLOR, Color, optional_color, wrapped_color
from drawingml_theme.model.enums import (
    BlendMode,
    BlipCompression,
    EffectContainerType,
    PresetShadowVal,
    RectAlignment,
)
from drawingml_theme.model.errors import MaxDepthExceededError
from drawingml_theme.model.simple_types import (
    COORDINATE,
    FIXED_ANGLE,
    FIXED_PERCENTAGE,
    PERCENTAGE,
    POSITIVE_COORDINATE,
    POSITIVE_FIXED_ANGLE,
    POSITIVE_FIXED_PERCENTAGE,
    POSITIVE_PERCENTAGE,
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

if TYPE_CHECKING:
    from drawingml_theme.model.fills import FillProperties

MAX_CONTAINER_DEPTH = 32

# Containers and fill-carrying effects share one counter: a fill may hold a blip
# whose effects hold another fill.
_container_depth: ContextVar[int] = ContextVar("effect_container_depth", default=0)

T = TypeVar("T")


def _nested(node: XmlNode, build: Callable[[], T]) -> T:
    depth = _container_depth.get() + 1
    if depth > MAX_CONTAINER_DEPTH:
        raise MaxDepthExceededError(node.name, MAX_CONTAINER_DEPTH)
    token = _container_depth.set(depth)
    try:
        return build()
    finally:
        _container_depth.reset(token)


@dataclass(frozen=True, slots=True)
class AlphaBiLevelEffect:
    threshold: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaBiLevelEffect":
        return cls(required_value(node, "thresh", POSITIVE_FIXED_PERCENTAGE.parse))


@dataclass(frozen=True, slots=True)
class AlphaCeilingEffect:
    pass


@dataclass(frozen=True, slots=True)
class AlphaFloorEffect:
    pass


@dataclass(frozen=True, slots=True)
class AlphaInverseEffect:
    color: Optional[Color] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaInverseEffect":
        return cls(optional_color(node))


@dataclass(frozen=True, slots=True)
class AlphaModulateEffect:
    """Multiplies alpha by the alpha of the effect held in ``container``."""

    container: "EffectContainer"

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaModulateEffect":
        return cls(EffectContainer.from_xml_element(first_child(node, "cont")))


@dataclass(frozen=True, slots=True)
class AlphaModulateFixedEffect:
    # Schema default: 100000.
    amount: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaModulateFixedEffect":
        return cls(optional_value(node, "amt", POSITIVE_PERCENTAGE.parse))


@dataclass(frozen=True, slots=True)
class AlphaOutsetEffect:
    radius: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaOutsetEffect":
        return cls(optional_value(node, "rad", COORDINATE.parse))


@dataclass(frozen=True, slots=True)
class AlphaReplaceEffect:
    alpha: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AlphaReplaceEffect":
        return cls(required_value(node, "a", POSITIVE_FIXED_PERCENTAGE.parse))


@dataclass(frozen=True, slots=True)
class BiLevelEffect:
    threshold: float

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "BiLevelEffect":
        return cls(required_value(node, "thresh", POSITIVE_FIXED_PERCENTAGE.parse))


@dataclass(frozen=True, slots=True)
class BlendEffect:
    blend: BlendMode
    container: "EffectContainer"

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "BlendEffect":
        return cls(
            blend=required_value(node, "blend", BlendMode.parse),
            container=EffectContainer.from_xml_element(first_child(node, "cont")),
        )


@dataclass(frozen=True, slots=True)
class BlurEffect:
    radius: Optional[int] = None
    grow: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "BlurEffect":
        return cls(
            radius=optional_value(node, "rad", POSITIVE_COORDINATE.parse),
            grow=optional_bool(node, "grow"),
        )


@dataclass(frozen=True, slots=True)
class ColorChangeEffect:
    """Replaces ``color_from`` with ``color_to`` across the image."""

    color_from: Color
    color_to: Color
    use_alpha: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorChangeEffect":
        color_from = None
        color_to = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "clrFrom":
                color_from = wrapped_color(child)
            elif tag == "clrTo":
                color_to = wrapped_color(child)
        return cls(
            color_from=require(node, color_from, "clrFrom"),
            color_to=require(node, color_to, "clrTo"),
            use_alpha=optional_bool(node, "useA"),
        )


@dataclass(frozen=True, slots=True)
class ColorReplaceEffect:
    color: Color

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ColorReplaceEffect":
        return cls(wrapped_color(node))


@dataclass(frozen=True, slots=True)
class DuotoneEffect:
    colors: Tuple[Color, Color]

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "DuotoneEffect":
        first = COLOR.from_xml_element(child_at(node, 0, COLOR.name))
        second = COLOR.from_xml_element(child_at(node, 1, COLOR.name))
        return cls((first, second))


@dataclass(frozen=True, slots=True)
class FillEffect:
    fill_properties: "FillProperties"

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "FillEffect":
        from drawingml_theme.model.fills import FILL_PROPERTIES

        return _nested(node, lambda: cls(FILL_PROPERTIES.from_xml_element(first_child(node, FILL_PROPERTIES.name))))


@dataclass(frozen=True, slots=True)
class FillOverlayEffect:
    blend: BlendMode
    fill: "FillProperties"

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "FillOverlayEffect":
        from drawingml_theme.model.fills import FILL_PROPERTIES

        blend = required_value(node, "blend", BlendMode.parse)
        return _nested(
            node,
            lambda: cls(blend, FILL_PROPERTIES.from_xml_element(first_child(node, FILL_PROPERTIES.name))),
        )


@dataclass(frozen=True, slots=True)
class GlowEffect:
    color: Color
    radius: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GlowEffect":
        return cls(
            color=wrapped_color(node),
            radius=optional_value(node, "rad", POSITIVE_COORDINATE.parse),
        )


@dataclass(frozen=True, slots=True)
class GrayscaleEffect:
    pass


@dataclass(frozen=True, slots=True)
class HslEffect:
    hue: Optional[int] = None
    saturation: Optional[float] = None
    luminance: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "HslEffect":
        return cls(
            hue=optional_value(node, "hue", POSITIVE_FIXED_ANGLE.parse),
            saturation=optional_value(node, "sat", FIXED_PERCENTAGE.parse),
            luminance=optional_value(node, "lum", FIXED_PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class InnerShadowEffect:
    color: Color
    blur_radius: Optional[int] = None
    distance: Optional[int] = None
    direction: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "InnerShadowEffect":
        return cls(
            color=wrapped_color(node),
            blur_radius=optional_value(node, "blurRad", POSITIVE_COORDINATE.parse),
            distance=optional_value(node, "dist", POSITIVE_COORDINATE.parse),
            direction=optional_value(node, "dir", POSITIVE_FIXED_ANGLE.parse),
        )


@dataclass(frozen=True, slots=True)
class LuminanceEffect:
    brightness: Optional[float] = None
    contrast: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "LuminanceEffect":
        return cls(
            brightness=optional_value(node, "bright", FIXED_PERCENTAGE.parse),
            contrast=optional_value(node, "contrast", FIXED_PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class OuterShadowEffect:
    color: Color
    blur_radius: Optional[int] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None
    alignment: Optional[RectAlignment] = None
    rotate_with_shape: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "OuterShadowEffect":
        return cls(
            color=wrapped_color(node),
            blur_radius=optional_value(node, "blurRad", POSITIVE_COORDINATE.parse),
            distance=optional_value(node, "dist", POSITIVE_COORDINATE.parse),
            direction=optional_value(node, "dir", POSITIVE_FIXED_ANGLE.parse),
            scale_x=optional_value(node, "sx", PERCENTAGE.parse),
            scale_y=optional_value(node, "sy", PERCENTAGE.parse),
            skew_x=optional_value(node, "kx", FIXED_ANGLE.parse),
            skew_y=optional_value(node, "ky", FIXED_ANGLE.parse),
            alignment=optional_value(node, "algn", RectAlignment.parse),
            rotate_with_shape=optional_bool(node, "rotWithShape"),
        )


@dataclass(frozen=True, slots=True)
class PresetShadowEffect:
    preset: PresetShadowVal
    color: Color
    distance: Optional[int] = None
    direction: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PresetShadowEffect":
        return cls(
            preset=required_value(node, "prst", PresetShadowVal.parse),
            color=wrapped_color(node),
            distance=optional_value(node, "dist", POSITIVE_COORDINATE.parse),
            direction=optional_value(node, "dir", POSITIVE_FIXED_ANGLE.parse),
        )


@dataclass(frozen=True, slots=True)
class ReflectionEffect:
    blur_radius: Optional[int] = None
    start_opacity: Optional[float] = None
    start_position: Optional[float] = None
    end_opacity: Optional[float] = None
    end_position: Optional[float] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    fade_direction: Optional[int] = None
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None
    alignment: Optional[RectAlignment] = None
    rotate_with_shape: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ReflectionEffect":
        return cls(
            blur_radius=optional_value(node, "blurRad", POSITIVE_COORDINATE.parse),
            start_opacity=optional_value(node, "stA", POSITIVE_FIXED_PERCENTAGE.parse),
            start_position=optional_value(node, "stPos", POSITIVE_FIXED_PERCENTAGE.parse),
            end_opacity=optional_value(node, "endA", POSITIVE_FIXED_PERCENTAGE.parse),
            end_position=optional_value(node, "endPos", POSITIVE_FIXED_PERCENTAGE.parse),
            distance=optional_value(node, "dist", POSITIVE_COORDINATE.parse),
            direction=optional_value(node, "dir", POSITIVE_FIXED_ANGLE.parse),
            fade_direction=optional_value(node, "fadeDir", POSITIVE_FIXED_ANGLE.parse),
            scale_x=optional_value(node, "sx", PERCENTAGE.parse),
            scale_y=optional_value(node, "sy", PERCENTAGE.parse),
            skew_x=optional_value(node, "kx", FIXED_ANGLE.parse),
            skew_y=optional_value(node, "ky", FIXED_ANGLE.parse),
            alignment=optional_value(node, "algn", RectAlignment.parse),
            rotate_with_shape=optional_bool(node, "rotWithShape"),
        )


@dataclass(frozen=True, slots=True)
class RelativeOffsetEffect:
    translate_x: Optional[float] = None
    translate_y: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "RelativeOffsetEffect":
        return cls(
            translate_x=optional_value(node, "tx", PERCENTAGE.parse),
            translate_y=optional_value(node, "ty", PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class SoftEdgesEffect:
    radius: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "SoftEdgesEffect":
        return cls(required_value(node, "rad", POSITIVE_COORDINATE.parse))


@dataclass(frozen=True, slots=True)
class TintEffect:
    hue: Optional[int] = None
    amount: Optional[float] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TintEffect":
        return cls(
            hue=optional_value(node, "hue", POSITIVE_FIXED_ANGLE.parse),
            amount=optional_value(node, "amt", FIXED_PERCENTAGE.parse),
        )


@dataclass(frozen=True, slots=True)
class TransformEffect:
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    translate_x: Optional[int] = None
    translate_y: Optional[int] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "TransformEffect":
        return cls(
            scale_x=optional_value(node, "sx", PERCENTAGE.parse),
            scale_y=optional_value(node, "sy", PERCENTAGE.parse),
            translate_x=optional_value(node, "tx", COORDINATE.parse),
            translate_y=optional_value(node, "ty", COORDINATE.parse),
            skew_x=optional_value(node, "kx", FIXED_ANGLE.parse),
            skew_y=optional_value(node, "ky", FIXED_ANGLE.parse),
        )


@dataclass(frozen=True, slots=True)
class EffectReference:
    """``<a:effect ref=.../>``: names a container defined elsewhere; not resolved here."""

    ref: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "EffectReference":
        return cls(required_attribute(node, "ref"))


@dataclass(frozen=True, slots=True)
class EffectContainer:
    """An ordered effect graph node.

    ``container_type`` selects how children combine: ``sib`` applies each
    effect to the same input, ``tree`` feeds each effect the previous result.
    The schema default is ``sib``.
    """

    container_type: Optional[EffectContainerType] = None
    name: Optional[str] = None
    effects: List["Effect"] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "EffectContainer":
        return _nested(
            node,
            lambda: cls(
                container_type=optional_value(node, "type", EffectContainerType.parse),
                name=node.attribute("name"),
                effects=EFFECT.parse_all(node),
            ),
        )


Effect = Union[
    EffectContainer,
    EffectReference,
    AlphaBiLevelEffect,
    AlphaCeilingEffect,
    AlphaFloorEffect,
    AlphaInverseEffect,
    AlphaModulateEffect,
    AlphaModulateFixedEffect,
    AlphaOutsetEffect,
    AlphaReplaceEffect,
    BiLevelEffect,
    BlendEffect,
    BlurEffect,
    ColorChangeEffect,
    ColorReplaceEffect,
    DuotoneEffect,
    FillEffect,
    FillOverlayEffect,
    GlowEffect,
    GrayscaleEffect,
    HslEffect,
    InnerShadowEffect,
    LuminanceEffect,
    OuterShadowEffect,
    PresetShadowEffect,
    ReflectionEffect,
    RelativeOffsetEffect,
    SoftEdgesEffect,
    TintEffect,
    TransformEffect,
]

EFFECT: ChoiceGroup[Effect] = ChoiceGroup(
    "EG_Effect",
    {
        "cont": EffectContainer.from_xml_element,
        "effect": EffectReference.from_xml_element,
        "alphaBiLevel": AlphaBiLevelEffect.from_xml_element,
        "alphaCeiling": lambda node: AlphaCeilingEffect(),
        "alphaFloor": lambda node: AlphaFloorEffect(),
        "alphaInv": AlphaInverseEffect.from_xml_element,
        "alphaMod": AlphaModulateEffect.from_xml_element,
        "alphaModFix": AlphaModulateFixedEffect.from_xml_element,
        "alphaOutset": AlphaOutsetEffect.from_xml_element,
        "alphaRepl": AlphaReplaceEffect.from_xml_element,
        "biLevel": BiLevelEffect.from_xml_element,
        "blend": BlendEffect.from_xml_element,
        "blur": BlurEffect.from_xml_element,
        "clrChange": ColorChangeEffect.from_xml_element,
        "clrRepl": ColorReplaceEffect.from_xml_element,
        "duotone": DuotoneEffect.from_xml_element,
        "fill": FillEffect.from_xml_element,
        "fillOverlay": FillOverlayEffect.from_xml_element,
        "glow": GlowEffect.from_xml_element,
        "grayscl": lambda node: GrayscaleEffect(),
        "hsl": HslEffect.from_xml_element,
        "innerShdw": InnerShadowEffect.from_xml_element,
        "lum": LuminanceEffect.from_xml_element,
        "outerShdw": OuterShadowEffect.from_xml_element,
        "prstShdw": PresetShadowEffect.from_xml_element,
        "reflection": ReflectionEffect.from_xml_element,
        "relOff": RelativeOffsetEffect.from_xml_element,
        "softEdge": SoftEdgesEffect.from_xml_element,
        "tint": TintEffect.from_xml_element,
        "xfrm": TransformEffect.from_xml_element,
    },
)

BlipEffect = Union[
    AlphaBiLevelEffect,
    AlphaCeilingEffect,
    AlphaFloorEffect,
    AlphaInverseEffect,
    AlphaModulateEffect,
    AlphaModulateFixedEffect,
    AlphaReplaceEffect,
    BiLevelEffect,
    BlurEffect,
    ColorChangeEffect,
    ColorReplaceEffect,
    DuotoneEffect,
    FillOverlayEffect,
    GrayscaleEffect,
    HslEffect,
    LuminanceEffect,
    TintEffect,
]

_BLIP_EFFECT_TAGS = (
    "alphaBiLevel",
    "alphaCeiling",
    "alphaFloor",
    "alphaInv",
    "alphaMod",
    "alphaModFix",
    "alphaRepl",
    "biLevel",
    "blur",
    "clrChange",
    "clrRepl",
    "duotone",
    "fillOverlay",
    "grayscl",
    "hsl",
    "lum",
    "tint",
)

BLIP_EFFECT: ChoiceGroup[BlipEffect] = ChoiceGroup(
    "EG_BlipEffect",
    {tag: EFFECT.from_xml_element for tag in _BLIP_EFFECT_TAGS},
)


@dataclass(frozen=True, slots=True)
class EffectList:
    """Flat effect list: at most one effect of each kind, applied in a fixed order."""

    blur: Optional[BlurEffect] = None
    fill_overlay: Optional[FillOverlayEffect] = None
    glow: Optional[GlowEffect] = None
    inner_shadow: Optional[InnerShadowEffect] = None
    outer_shadow: Optional[OuterShadowEffect] = None
    preset_shadow: Optional[PresetShadowEffect] = None
    reflection: Optional[ReflectionEffect] = None
    soft_edges: Optional[SoftEdgesEffect] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "EffectList":
        slots = {}
        for child in node.child_nodes:
            slot = _EFFECT_LIST_SLOTS.get(child.local_name())
            if slot is not None:
                name, parse = slot
                slots[name] = parse(child)
        return cls(**slots)


_EFFECT_LIST_SLOTS = {
    "blur": ("blur", BlurEffect.from_xml_element),
    "fillOverlay": ("fill_overlay", FillOverlayEffect.from_xml_element),
    "glow": ("glow", GlowEffect.from_xml_element),
    "innerShdw": ("inner_shadow", InnerShadowEffect.from_xml_element),
    "outerShdw": ("outer_shadow", OuterShadowEffect.from_xml_element),
    "prstShdw": ("preset_shadow", PresetShadowEffect.from_xml_element),
    "reflection": ("reflection", ReflectionEffect.from_xml_element),
    "softEdge": ("soft_edges", SoftEdgesEffect.from_xml_element),
}

EffectProperties = Union[EffectList, EffectContainer]

EFFECT_PROPERTIES: ChoiceGroup[EffectProperties] = ChoiceGroup(
    "EG_EffectProperties",
    {
        "effectLst": EffectList.from_xml_element,
        "effectDag": EffectContainer.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class Blip:
    """Image reference. The picture bytes live in the part named by a relationship id."""

    embed_rel_id: Optional[str] = None
    linked_rel_id: Optional[str] = None
    compression: Optional[BlipCompression] = None
    effects: List[BlipEffect] = field(default_factory=list)

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Blip":
        return cls(
            embed_rel_id=node.attribute("r:embed"),
            linked_rel_id=node.attribute("r:link"),
            compression=optional_value(node, "cstate", BlipCompression.parse),
            effects=BLIP_EFFECT.parse_all(node),
        )
