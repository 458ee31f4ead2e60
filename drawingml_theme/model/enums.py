"""Closed DrawingML enumerations keyed by their on-the-wire spellings.

Each class body is the single table mapping a wire string to its member;
``WireEnum.parse`` is the only lookup path used by the deserializers.
"""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from drawingml_theme.model.errors import NotAMemberError

E = TypeVar("E", bound="WireEnum")


class WireEnum(Enum):
    """Enumeration whose member values are the exact OOXML spellings."""

    @classmethod
    def parse(cls: Type[E], text: str) -> E:
        try:
            return cls(text)
        except ValueError:
            raise NotAMemberError(text, cls.__name__) from None

    @classmethod
    def spellings(cls) -> tuple:
        """Return every wire spelling in declaration order."""
        return tuple(member.value for member in cls)


class UniversalMeasureUnit(WireEnum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "in"
    POINT = "pt"
    PICA = "pc"
    PITCH = "pi"


class ColorTransformKind(WireEnum):
    """Element names of the color transform choice group, in schema order."""

    TINT = "tint"
    SHADE = "shade"
    COMPLEMENT = "comp"
    INVERSE = "inv"
    GRAYSCALE = "gray"
    ALPHA = "alpha"
    ALPHA_OFFSET = "alphaOff"
    ALPHA_MODULATE = "alphaMod"
    HUE = "hue"
    HUE_OFFSET = "hueOff"
    HUE_MODULATE = "hueMod"
    SATURATION = "sat"
    SATURATION_OFFSET = "satOff"
    SATURATION_MODULATE = "satMod"
    LUMINANCE = "lum"
    LUMINANCE_OFFSET = "lumOff"
    LUMINANCE_MODULATE = "lumMod"
    RED = "red"
    RED_OFFSET = "redOff"
    RED_MODULATE = "redMod"
    GREEN = "green"
    GREEN_OFFSET = "greenOff"
    GREEN_MODULATE = "greenMod"
    BLUE = "blue"
    BLUE_OFFSET = "blueOff"
    BLUE_MODULATE = "blueMod"
    GAMMA = "gamma"
    INVERSE_GAMMA = "invGamma"


class TileFlipMode(WireEnum):
    """How a tile is mirrored when it repeats across a fill region."""

    NONE = "none"
    X = "x"
    Y = "y"
    XY = "xy"


class RectAlignment(WireEnum):
    """Anchor point used to position one rectangle relative to another."""

    LEFT = "l"
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    CENTER = "ctr"


class PathFillMode(WireEnum):
    NONE = "none"
    NORM = "norm"
    LIGHTEN = "lighten"
    LIGHTEN_LESS = "lightenLess"
    DARKEN = "darken"
    DARKEN_LESS = "darkenLess"


class ShapeType(WireEnum):
    """Preset shape geometries selectable through ``prstGeom``."""

    LINE = "line"
    LINE_INVERSE = "lineInv"
    TRIANGLE = "triangle"
    RIGHT_TRIANGLE = "rtTriangle"
    RECT = "rect"
    DIAMOND = "diamond"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    NON_ISOSCELES_TRAPEZOID = "nonIsoscelesTrapezoid"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    HEPTAGON = "heptagon"
    OCTAGON = "octagon"
    DECAGON = "decagon"
    DODECAGON = "dodecagon"
    STAR4 = "star4"
    STAR5 = "star5"
    STAR6 = "star6"
    STAR7 = "star7"
    STAR8 = "star8"
    STAR10 = "star10"
    STAR12 = "star12"
    STAR16 = "star16"
    STAR24 = "star24"
    STAR32 = "star32"
    ROUND_RECT = "roundRect"
    ROUND1_RECT = "round1Rect"
    ROUND2_SAME_RECT = "round2SameRect"
    ROUND2_DIAG_RECT = "round2DiagRect"
    SNIP_ROUND_RECT = "snipRoundRect"
    SNIP1_RECT = "snip1Rect"
    SNIP2_SAME_RECT = "snip2SameRect"
    SNIP2_DIAG_RECT = "snip2DiagRect"
    PLAQUE = "plaque"
    ELLIPSE = "ellipse"
    TEARDROP = "teardrop"
    HOME_PLATE = "homePlate"
    CHEVRON = "chevron"
    PIE_WEDGE = "pieWedge"
    PIE = "pie"
    BLOCK_ARC = "blockArc"
    DONUT = "donut"
    NO_SMOKING = "noSmoking"
    RIGHT_ARROW = "rightArrow"
    LEFT_ARROW = "leftArrow"
    UP_ARROW = "upArrow"
    DOWN_ARROW = "downArrow"
    STRIPED_RIGHT_ARROW = "stripedRightArrow"
    NOTCHED_RIGHT_ARROW = "notchedRightArrow"
    BENT_UP_ARROW = "bentUpArrow"
    LEFT_RIGHT_ARROW = "leftRightArrow"
    UP_DOWN_ARROW = "upDownArrow"
    LEFT_UP_ARROW = "leftUpArrow"
    LEFT_RIGHT_UP_ARROW = "leftRightUpArrow"
    QUAD_ARROW = "quadArrow"
    LEFT_ARROW_CALLOUT = "leftArrowCallout"
    RIGHT_ARROW_CALLOUT = "rightArrowCallout"
    UP_ARROW_CALLOUT = "upArrowCallout"
    DOWN_ARROW_CALLOUT = "downArrowCallout"
    LEFT_RIGHT_ARROW_CALLOUT = "leftRightArrowCallout"
    UP_DOWN_ARROW_CALLOUT = "upDownArrowCallout"
    QUAD_ARROW_CALLOUT = "quadArrowCallout"
    BENT_ARROW = "bentArrow"
    UTURN_ARROW = "uturnArrow"
    CIRCULAR_ARROW = "circularArrow"
    LEFT_CIRCULAR_ARROW = "leftCircularArrow"
    LEFT_RIGHT_CIRCULAR_ARROW = "leftRightCircularArrow"
    CURVED_RIGHT_ARROW = "curvedRightArrow"
    CURVED_LEFT_ARROW = "curvedLeftArrow"
    CURVED_UP_ARROW = "curvedUpArrow"
    CURVED_DOWN_ARROW = "curvedDownArrow"
    SWOOSH_ARROW = "swooshArrow"
    CUBE = "cube"
    CAN = "can"
    LIGHTNING_BOLT = "lightningBolt"
    HEART = "heart"
    SUN = "sun"
    MOON = "moon"
    SMILEY_FACE = "smileyFace"
    IRREGULAR_SEAL1 = "irregularSeal1"
    IRREGULAR_SEAL2 = "irregularSeal2"
    FOLDED_CORNER = "foldedCorner"
    BEVEL = "bevel"
    FRAME = "frame"
    HALF_FRAME = "halfFrame"
    CORNER = "corner"
    DIAG_STRIPE = "diagStripe"
    CHORD = "chord"
    ARC = "arc"
    LEFT_BRACKET = "leftBracket"
    RIGHT_BRACKET = "rightBracket"
    LEFT_BRACE = "leftBrace"
    RIGHT_BRACE = "rightBrace"
    BRACKET_PAIR = "bracketPair"
    BRACE_PAIR = "bracePair"
    STRAIGHT_CONNECTOR1 = "straightConnector1"
    BENT_CONNECTOR2 = "bentConnector2"
    BENT_CONNECTOR3 = "bentConnector3"
    BENT_CONNECTOR4 = "bentConnector4"
    BENT_CONNECTOR5 = "bentConnector5"
    CURVED_CONNECTOR2 = "curvedConnector2"
    CURVED_CONNECTOR3 = "curvedConnector3"
    CURVED_CONNECTOR4 = "curvedConnector4"
    CURVED_CONNECTOR5 = "curvedConnector5"
    CALLOUT1 = "callout1"
    CALLOUT2 = "callout2"
    CALLOUT3 = "callout3"
    ACCENT_CALLOUT1 = "accentCallout1"
    ACCENT_CALLOUT2 = "accentCallout2"
    ACCENT_CALLOUT3 = "accentCallout3"
    BORDER_CALLOUT1 = "borderCallout1"
    BORDER_CALLOUT2 = "borderCallout2"
    BORDER_CALLOUT3 = "borderCallout3"
    ACCENT_BORDER_CALLOUT1 = "accentBorderCallout1"
    ACCENT_BORDER_CALLOUT2 = "accentBorderCallout2"
    ACCENT_BORDER_CALLOUT3 = "accentBorderCallout3"
    WEDGE_RECT_CALLOUT = "wedgeRectCallout"
    WEDGE_ROUND_RECT_CALLOUT = "wedgeRoundRectCallout"
    WEDGE_ELLIPSE_CALLOUT = "wedgeEllipseCallout"
    CLOUD_CALLOUT = "cloudCallout"
    CLOUD = "cloud"
    RIBBON = "ribbon"
    RIBBON2 = "ribbon2"
    ELLIPSE_RIBBON = "ellipseRibbon"
    ELLIPSE_RIBBON2 = "ellipseRibbon2"
    LEFT_RIGHT_RIBBON = "leftRightRibbon"
    VERTICAL_SCROLL = "verticalScroll"
    HORIZONTAL_SCROLL = "horizontalScroll"
    WAVE = "wave"
    DOUBLE_WAVE = "doubleWave"
    PLUS = "plus"
    FLOW_CHART_PROCESS = "flowChartProcess"
    FLOW_CHART_DECISION = "flowChartDecision"
    FLOW_CHART_INPUT_OUTPUT = "flowChartInputOutput"
    FLOW_CHART_PREDEFINED_PROCESS = "flowChartPredefinedProcess"
    FLOW_CHART_INTERNAL_STORAGE = "flowChartInternalStorage"
    FLOW_CHART_DOCUMENT = "flowChartDocument"
    FLOW_CHART_MULTIDOCUMENT = "flowChartMultidocument"
    FLOW_CHART_TERMINATOR = "flowChartTerminator"
    FLOW_CHART_PREPARATION = "flowChartPreparation"
    FLOW_CHART_MANUAL_INPUT = "flowChartManualInput"
    FLOW_CHART_MANUAL_OPERATION = "flowChartOperation"
    FLOW_CHART_CONNECTOR = "flowChartConnector"
    FLOW_CHART_PUNCHED_CARD = "flowChartPunchedCard"
    FLOW_CHART_PUNCHED_TAPE = "flowChartPunchedTape"
    FLOW_CHART_SUMMING_JUNCTION = "flowChartSummingJunction"
    FLOW_CHART_OR = "flowChartOr"
    FLOW_CHART_COLLATE = "flowChartCollate"
    FLOW_CHART_SORT = "flowChartSort"
    FLOW_CHART_EXTRACT = "flowChartExtract"
    FLOW_CHART_MERGE = "flowChartMerge"
    FLOW_CHART_OFFLINE_STORAGE = "flowChartOfflineStorage"
    FLOW_CHART_ONLINE_STORAGE = "flowChartOnlineStorage"
    FLOW_CHART_MAGNETIC_TAPE = "flowChartMagneticTape"
    FLOW_CHART_MAGNETIC_DISK = "flowChartMagneticDisk"
    FLOW_CHART_MAGNETIC_DRUM = "flowChartMagneticDrum"
    FLOW_CHART_DISPLAY = "flowChartDisplay"
    FLOW_CHART_DELAY = "flowChartDelay"
    FLOW_CHART_ALTERNATE_PROCESS = "flowChartAlternateProcess"
    FLOW_CHART_OFFPAGE_CONNECTOR = "flowChartOffpageConnector"
    ACTION_BUTTON_BLANK = "actionButtonBlank"
    ACTION_BUTTON_HOME = "actionButtonHome"
    ACTION_BUTTON_HELP = "actionButtonHelp"
    ACTION_BUTTON_INFORMATION = "actionButtonInformation"
    ACTION_BUTTON_FORWARD_NEXT = "actionButtonForwardNext"
    ACTION_BUTTON_BACK_PREVIOUS = "actionButtonBackPrevious"
    ACTION_BUTTON_END = "actionButtonEnd"
    ACTION_BUTTON_BEGINNING = "actionButtonBeginning"
    ACTION_BUTTON_RETURN = "actionButtonReturn"
    ACTION_BUTTON_DOCUMENT = "actionButtonDocument"
    ACTION_BUTTON_SOUND = "actionButtonSound"
    ACTION_BUTTON_MOVIE = "actionButtonMovie"
    GEAR6 = "gear6"
    GEAR9 = "gear9"
    FUNNEL = "funnel"
    MATH_PLUS = "mathPlus"
    MATH_MINUS = "mathMinus"
    MATH_MULTIPLY = "mathMultiply"
    MATH_DIVIDE = "mathDivide"
    MATH_EQUAL = "mathEqual"
    MATH_NOT_EQUAL = "mathNotEqual"
    CORNER_TABS = "cornerTabs"
    SQUARE_TABS = "squareTabs"
    PLAQUE_TABS = "plaqueTabs"
    CHART_X = "chartX"
    CHART_STAR = "chartStar"
    CHART_PLUS = "chartPlus"


class LineCap(WireEnum):
    ROUND = "rnd"
    SQUARE = "sq"
    FLAT = "flat"


class CompoundLine(WireEnum):
    SINGLE = "sng"
    DOUBLE = "dbl"
    THICK_THIN = "thickThin"
    THIN_THICK = "thinThick"
    TRIPLE = "tri"


class PenAlignment(WireEnum):
    CENTER = "ctr"
    INSET = "in"


class PresetLineDashVal(WireEnum):
    """Preset dash patterns for ``prstDash``."""

    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    LARGE_DASH = "lgDash"
    DASH_DOT = "dashDot"
    LARGE_DASH_DOT = "lgDashDot"
    LARGE_DASH_DOT_DOT = "lgDashDotDot"
    SYSTEM_DASH = "sysDash"
    SYSTEM_DOT = "sysDot"
    SYSTEM_DASH_DOT = "sysDashDot"
    SYSTEM_DASH_DOT_DOT = "sysDashDotDot"


class LineEndType(WireEnum):
    NONE = "none"
    TRIANGLE = "triangle"
    STEALTH = "stealth"
    DIAMOND = "diamond"
    OVAL = "oval"
    ARROW = "arrow"


class LineEndWidth(WireEnum):
    SMALL = "sm"
    MEDIUM = "med"
    LARGE = "lg"


class LineEndLength(WireEnum):
    SMALL = "sm"
    MEDIUM = "med"
    LARGE = "lg"


class PresetShadowVal(WireEnum):
    """The twenty preset shadow configurations (``shdw1`` .. ``shdw20``)."""

    TOP_LEFT_DROP_SHADOW = "shdw1"
    TOP_RIGHT_DROP_SHADOW = "shdw2"
    BACK_LEFT_PERSPECTIVE_SHADOW = "shdw3"
    BACK_RIGHT_PERSPECTIVE_SHADOW = "shdw4"
    BOTTOM_LEFT_DROP_SHADOW = "shdw5"
    BOTTOM_RIGHT_DROP_SHADOW = "shdw6"
    FRONT_LEFT_PERSPECTIVE_SHADOW = "shdw7"
    FRONT_RIGHT_PERSPECTIVE_SHADOW = "shdw8"
    TOP_LEFT_SMALL_DROP_SHADOW = "shdw9"
    TOP_LEFT_LARGE_DROP_SHADOW = "shdw10"
    BACK_LEFT_LONG_PERSPECTIVE_SHADOW = "shdw11"
    BACK_RIGHT_LONG_PERSPECTIVE_SHADOW = "shdw12"
    TOP_LEFT_DOUBLE_DROP_SHADOW = "shdw13"
    BOTTOM_RIGHT_SMALL_DROP_SHADOW = "shdw14"
    FRONT_LEFT_LONG_PERSPECTIVE_SHADOW = "shdw15"
    FRONT_RIGHT_LONG_PERSPECTIVE_SHADOW = "shdw16"
    THREE_D_OUTER_BOX_SHADOW = "shdw17"
    THREE_D_INNER_BOX_SHADOW = "shdw18"
    BACK_CENTER_PERSPECTIVE_SHADOW = "shdw19"
    FRONT_BOTTOM_SHADOW = "shdw20"


class EffectContainerType(WireEnum):
    """Composition mode of an effect container.

    ``sib`` applies every effect to the same input, ``tree`` feeds each effect
    the result of the previous one.
    """

    SIB = "sib"
    TREE = "tree"


class FontCollectionIndex(WireEnum):
    """Theme font collection referenced by a ``fontRef``."""

    MAJOR = "major"
    MINOR = "minor"
    NONE = "none"


class DgmBuildStep(WireEnum):
    SHAPE = "sp"
    BACKGROUND = "bg"


class ChartBuildStep(WireEnum):
    CATEGORY = "category"
    PT_IN_CATEGORY = "ptInCategory"
    SERIES = "series"
    PT_IN_SERIES = "ptInSeries"
    ALL_PTS = "allPts"
    GRID_LEGEND = "gridLegend"


class OnOffStyleType(WireEnum):
    ON = "on"
    OFF = "off"
    DEFAULT = "def"


class SystemColorVal(WireEnum):
    """Operating system colors usable through ``sysClr``."""

    SCROLL_BAR = "scrollBar"
    BACKGROUND = "background"
    ACTIVE_CAPTION = "activeCaption"
    INACTIVE_CAPTION = "inactiveCaption"
    MENU = "menu"
    WINDOW = "window"
    WINDOW_FRAME = "windowFrame"
    MENU_TEXT = "menuText"
    WINDOW_TEXT = "windowText"
    CAPTION_TEXT = "captionText"
    ACTIVE_BORDER = "activeBorder"
    INACTIVE_BORDER = "inactiveBorder"
    APP_WORKSPACE = "appWorkspace"
    HIGHLIGHT = "highlight"
    HIGHLIGHT_TEXT = "highlightText"
    BUTTON_FACE = "btnFace"
    BUTTON_SHADOW = "btnShadow"
    GRAY_TEXT = "grayText"
    BUTTON_TEXT = "btnText"
    INACTIVE_CAPTION_TEXT = "inactiveCaptionText"
    BUTTON_HIGHLIGHT = "btnHighlight"
    THREE_D_DARK_SHADOW = "3dDkShadow"
    THREE_D_LIGHT = "3dLight"
    INFO_TEXT = "infoText"
    INFO_BACK = "infoBk"
    HOT_LIGHT = "hotLight"
    GRADIENT_ACTIVE_CAPTION = "gradientActiveCaption"
    GRADIENT_INACTIVE_CAPTION = "gradientInactiveCaption"
    MENU_HIGHLIGHT = "menuHighlight"
    MENU_BAR = "menubar"


class PresetColorVal(WireEnum):
    """Named colors usable through ``prstClr``."""

    ALICE_BLUE = "aliceBlue"
    ANTIQUE_WHITE = "antiqueWhite"
    AQUA = "aqua"
    AQUAMARINE = "aquamarine"
    AZURE = "azure"
    BEIGE = "beige"
    BISQUE = "bisque"
    BLACK = "black"
    BLANCHED_ALMOND = "blanchedAlmond"
    BLUE = "blue"
    BLUE_VIOLET = "blueViolet"
    BROWN = "brown"
    BURLY_WOOD = "burlyWood"
    CADET_BLUE = "cadetBlue"
    CHARTREUSE = "chartreuse"
    CHOCOLATE = "chocolate"
    CORAL = "coral"
    CORNFLOWER_BLUE = "cornflowerBlue"
    CORNSILK = "cornsilk"
    CRIMSON = "crimson"
    CYAN = "cyan"
    DARK_BLUE = "darkBlue"
    DARK_CYAN = "darkCyan"
    DARK_GOLDENROD = "darkGoldenrod"
    DARK_GRAY = "darkGray"
    DARK_GREY = "darkGrey"
    DARK_GREEN = "darkGreen"
    DARK_KHAKI = "darkKhaki"
    DARK_MAGENTA = "darkMagenta"
    DARK_OLIVE_GREEN = "darkOliveGreen"
    DARK_ORANGE = "darkOrange"
    DARK_ORCHID = "darkOrchid"
    DARK_RED = "darkRed"
    DARK_SALMON = "darkSalmon"
    DARK_SEA_GREEN = "darkSeaGreen"
    DARK_SLATE_BLUE = "darkSlateBlue"
    DARK_SLATE_GRAY = "darkSlateGray"
    DARK_SLATE_GREY = "darkSlateGrey"
    DARK_TURQUOISE = "darkTurquoise"
    DARK_VIOLET = "darkViolet"
    DK_BLUE = "dkBlue"
    DK_CYAN = "dkCyan"
    DK_GOLDENROD = "dkGoldenrod"
    DK_GRAY = "dkGray"
    DK_GREY = "dkGrey"
    DK_GREEN = "dkGreen"
    DK_KHAKI = "dkKhaki"
    DK_MAGENTA = "dkMagenta"
    DK_OLIVE_GREEN = "dkOliveGreen"
    DK_ORANGE = "dkOrange"
    DK_ORCHID = "dkOrchid"
    DK_RED = "dkRed"
    DK_SALMON = "dkSalmon"
    DK_SEA_GREEN = "dkSeaGreen"
    DK_SLATE_BLUE = "dkSlateBlue"
    DK_SLATE_GRAY = "dkSlateGray"
    DK_SLATE_GREY = "dkSlateGrey"
    DK_TURQUOISE = "dkTurquoise"
    DK_VIOLET = "dkViolet"
    DEEP_PINK = "deepPink"
    DEEP_SKY_BLUE = "deepSkyBlue"
    DIM_GRAY = "dimGray"
    DIM_GREY = "dimGrey"
    DODGER_BLUE = "dodgerBlue"
    FIREBRICK = "firebrick"
    FLORAL_WHITE = "floralWhite"
    FOREST_GREEN = "forestGreen"
    FUCHSIA = "fuchsia"
    GAINSBORO = "gainsboro"
    GHOST_WHITE = "ghostWhite"
    GOLD = "gold"
    GOLDENROD = "goldenrod"
    GRAY = "gray"
    GREY = "grey"
    GREEN = "green"
    GREEN_YELLOW = "greenYellow"
    HONEYDEW = "honeydew"
    HOT_PINK = "hotPink"
    INDIAN_RED = "indianRed"
    INDIGO = "indigo"
    IVORY = "ivory"
    KHAKI = "khaki"
    LAVENDER = "lavender"
    LAVENDER_BLUSH = "lavenderBlush"
    LAWN_GREEN = "lawnGreen"
    LEMON_CHIFFON = "lemonChiffon"
    LIGHT_BLUE = "lightBlue"
    LIGHT_CORAL = "lightCoral"
    LIGHT_CYAN = "lightCyan"
    LIGHT_GOLDENROD_YELLOW = "lightGoldenrodYellow"
    LIGHT_GRAY = "lightGray"
    LIGHT_GREY = "lightGrey"
    LIGHT_GREEN = "lightGreen"
    LIGHT_PINK = "lightPink"
    LIGHT_SALMON = "lightSalmon"
    LIGHT_SEA_GREEN = "lightSeaGreen"
    LIGHT_SKY_BLUE = "lightSkyBlue"
    LIGHT_SLATE_GRAY = "lightSlateGray"
    LIGHT_SLATE_GREY = "lightSlateGrey"
    LIGHT_STEEL_BLUE = "lightSteelBlue"
    LIGHT_YELLOW = "lightYellow"
    LT_BLUE = "ltBlue"
    LT_CORAL = "ltCoral"
    LT_CYAN = "ltCyan"
    LT_GOLDENROD_YELLOW = "ltGoldenrodYellow"
    LT_GRAY = "ltGray"
    LT_GREY = "ltGrey"
    LT_GREEN = "ltGreen"
    LT_PINK = "ltPink"
    LT_SALMON = "ltSalmon"
    LT_SEA_GREEN = "ltSeaGreen"
    LT_SKY_BLUE = "ltSkyBlue"
    LT_SLATE_GRAY = "ltSlateGray"
    LT_SLATE_GREY = "ltSlateGrey"
    LT_STEEL_BLUE = "ltSteelBlue"
    LT_YELLOW = "ltYellow"
    LIME = "lime"
    LIME_GREEN = "limeGreen"
    LINEN = "linen"
    MAGENTA = "magenta"
    MAROON = "maroon"
    MED_AQUAMARINE = "medAquamarine"
    MED_BLUE = "medBlue"
    MED_ORCHID = "medOrchid"
    MED_PURPLE = "medPurple"
    MED_SEA_GREEN = "medSeaGreen"
    MED_SLATE_BLUE = "medSlateBlue"
    MED_SPRING_GREEN = "medSpringGreen"
    MED_TURQUOISE = "medTurquoise"
    MED_VIOLET_RED = "medVioletRed"
    MEDIUM_AQUAMARINE = "mediumAquamarine"
    MEDIUM_BLUE = "mediumBlue"
    MEDIUM_ORCHID = "mediumOrchid"
    MEDIUM_PURPLE = "mediumPurple"
    MEDIUM_SEA_GREEN = "mediumSeaGreen"
    MEDIUM_SLATE_BLUE = "mediumSlateBlue"
    MEDIUM_SPRING_GREEN = "mediumSpringGreen"
    MEDIUM_TURQUOISE = "mediumTurquoise"
    MEDIUM_VIOLET_RED = "mediumVioletRed"
    MIDNIGHT_BLUE = "midnightBlue"
    MINT_CREAM = "mintCream"
    MISTY_ROSE = "mistyRose"
    MOCCASIN = "moccasin"
    NAVAJO_WHITE = "navajoWhite"
    NAVY = "navy"
    OLD_LACE = "oldLace"
    OLIVE = "olive"
    OLIVE_DRAB = "oliveDrab"
    ORANGE = "orange"
    ORANGE_RED = "orangeRed"
    ORCHID = "orchid"
    PALE_GOLDENROD = "paleGoldenrod"
    PALE_GREEN = "paleGreen"
    PALE_TURQUOISE = "paleTurquoise"
    PALE_VIOLET_RED = "paleVioletRed"
    PAPAYA_WHIP = "papayaWhip"
    PEACH_PUFF = "peachPuff"
    PERU = "peru"
    PINK = "pink"
    PLUM = "plum"
    POWDER_BLUE = "powderBlue"
    PURPLE = "purple"
    RED = "red"
    ROSY_BROWN = "rosyBrown"
    ROYAL_BLUE = "royalBlue"
    SADDLE_BROWN = "saddleBrown"
    SALMON = "salmon"
    SANDY_BROWN = "sandyBrown"
    SEA_GREEN = "seaGreen"
    SEA_SHELL = "seaShell"
    SIENNA = "sienna"
    SILVER = "silver"
    SKY_BLUE = "skyBlue"
    SLATE_BLUE = "slateBlue"
    SLATE_GRAY = "slateGray"
    SLATE_GREY = "slateGrey"
    SNOW = "snow"
    SPRING_GREEN = "springGreen"
    STEEL_BLUE = "steelBlue"
    TAN = "tan"
    TEAL = "teal"
    THISTLE = "thistle"
    TOMATO = "tomato"
    TURQUOISE = "turquoise"
    VIOLET = "violet"
    WHEAT = "wheat"
    WHITE = "white"
    WHITE_SMOKE = "whiteSmoke"
    YELLOW = "yellow"
    YELLOW_GREEN = "yellowGreen"


class SchemeColorVal(WireEnum):
    """Theme color roles usable through ``schemeClr``."""

    BACKGROUND1 = "bg1"
    TEXT1 = "tx1"
    BACKGROUND2 = "bg2"
    TEXT2 = "tx2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"
    HYPERLINK = "hlink"
    FOLLOWED_HYPERLINK = "folHlink"
    PLACEHOLDER_COLOR = "phClr"
    DARK1 = "dk1"
    LIGHT1 = "lt1"
    DARK2 = "dk2"
    LIGHT2 = "lt2"


class ColorSchemeIndex(WireEnum):
    """Scheme slots a ``clrMap`` role may be bound to."""

    DARK1 = "dk1"
    LIGHT1 = "lt1"
    DARK2 = "dk2"
    LIGHT2 = "lt2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"
    HYPERLINK = "hlink"
    FOLLOWED_HYPERLINK = "folHlink"


class TextAlignType(WireEnum):
    LEFT = "l"
    CENTER = "ctr"
    RIGHT = "r"
    JUSTIFIED = "just"
    JUSTIFIED_LOW = "justLow"
    DISTRIBUTED = "dist"
    THAI_DISTRIBUTED = "thaiDist"


class TextFontAlignType(WireEnum):
    AUTO = "auto"
    TOP = "t"
    CENTER = "ctr"
    BASELINE = "base"
    BOTTOM = "b"


class TextAutonumberScheme(WireEnum):
    """Auto-numbering schemes for ``buAutoNum``."""

    ALPHA_LC_PAREN_BOTH = "alphaLcParenBoth"
    ALPHA_UC_PAREN_BOTH = "alphaUcParenBoth"
    ALPHA_LC_PAREN_R = "alphaLcParenR"
    ALPHA_UC_PAREN_R = "alphaUcParenR"
    ALPHA_LC_PERIOD = "alphaLcPeriod"
    ALPHA_UC_PERIOD = "alphaUcPeriod"
    ARABIC_PAREN_BOTH = "arabicParenBoth"
    ARABIC_PAREN_R = "arabicParenR"
    ARABIC_PERIOD = "arabicPeriod"
    ARABIC_PLAIN = "arabicPlain"
    ROMAN_LC_PAREN_BOTH = "romanLcParenBoth"
    ROMAN_UC_PAREN_BOTH = "romanUcParenBoth"
    ROMAN_LC_PAREN_R = "romanLcParenR"
    ROMAN_UC_PAREN_R = "romanUcParenR"
    ROMAN_LC_PERIOD = "romanLcPeriod"
    ROMAN_UC_PERIOD = "romanUcPeriod"
    CIRCLE_NUM_DB_PLAIN = "circleNumDbPlain"
    CIRCLE_NUM_WD_BLACK_PLAIN = "circleNumWdBlackPlain"
    CIRCLE_NUM_WD_WHITE_PLAIN = "circleNumWdWhitePlain"
    ARABIC_DB_PERIOD = "arabicDbPeriod"
    ARABIC_DB_PLAIN = "arabicDbPlain"
    EA1_CHS_PERIOD = "ea1ChsPeriod"
    EA1_CHS_PLAIN = "ea1ChsPlain"
    EA1_CHT_PERIOD = "ea1ChtPeriod"
    EA1_CHT_PLAIN = "ea1ChtPlain"
    EA1_JPN_CHS_DB_PERIOD = "ea1JpnChsDbPeriod"
    EA1_JPN_KOR_PLAIN = "ea1JpnKorPlain"
    EA1_JPN_KOR_PERIOD = "ea1JpnKorPeriod"
    ARABIC1_MINUS = "arabic1Minus"
    ARABIC2_MINUS = "arabic2Minus"
    HEBREW2_MINUS = "hebrew2Minus"
    THAI_ALPHA_PERIOD = "thaiAlphaPeriod"
    THAI_ALPHA_PAREN_R = "thaiAlphaParenR"
    THAI_ALPHA_PAREN_BOTH = "thaiAlphaParenBoth"
    THAI_NUM_PERIOD = "thaiNumPeriod"
    THAI_NUM_PAREN_R = "thaiNumParenR"
    THAI_NUM_PAREN_BOTH = "thaiNumParenBoth"
    HINDI_ALPHA_PERIOD = "hindiAlphaPeriod"
    HINDI_NUM_PERIOD = "hindiNumPeriod"
    HINDI_NUM_PAREN_R = "hindiNumParenR"
    HINDI_ALPHA1_PERIOD = "hindiAlpha1Period"


class PathShadeType(WireEnum):
    SHAPE = "shape"
    CIRCLE = "circle"
    RECT = "rect"


class PresetPatternVal(WireEnum):
    """Preset hatch patterns for ``pattFill``."""

    PERCENT5 = "pct5"
    PERCENT10 = "pct10"
    PERCENT20 = "pct20"
    PERCENT25 = "pct25"
    PERCENT30 = "pct30"
    PERCENT40 = "pct40"
    PERCENT50 = "pct50"
    PERCENT60 = "pct60"
    PERCENT70 = "pct70"
    PERCENT75 = "pct75"
    PERCENT80 = "pct80"
    PERCENT90 = "pct90"
    HORIZONTAL = "horz"
    VERTICAL = "vert"
    LIGHT_HORIZONTAL = "ltHorz"
    LIGHT_VERTICAL = "ltVert"
    DARK_HORIZONTAL = "dkHorz"
    DARK_VERTICAL = "dkVert"
    NARROW_HORIZONTAL = "narHorz"
    NARROW_VERTICAL = "narVert"
    DASHED_HORIZONTAL = "dashHorz"
    DASHED_VERTICAL = "dashVert"
    CROSS = "cross"
    DOWNWARD_DIAGONAL = "dnDiag"
    UPWARD_DIAGONAL = "upDiag"
    LIGHT_DOWNWARD_DIAGONAL = "ltDnDiag"
    LIGHT_UPWARD_DIAGONAL = "ltUpDiag"
    DARK_DOWNWARD_DIAGONAL = "dkDnDiag"
    DARK_UPWARD_DIAGONAL = "dkUpDiag"
    WIDE_DOWNWARD_DIAGONAL = "wdDnDiag"
    WIDE_UPWARD_DIAGONAL = "wdUpDiag"
    DASHED_DOWNWARD_DIAGONAL = "dashDnDiag"
    DASHED_UPWARD_DIAGONAL = "dashUpDiag"
    DIAGONAL_CROSS = "diagCross"
    SMALL_CHECKER_BOARD = "smCheck"
    LARGE_CHECKER_BOARD = "lgCheck"
    SMALL_GRID = "smGrid"
    LARGE_GRID = "lgGrid"
    DOTTED_GRID = "dotGrid"
    SMALL_CONFETTI = "smConfetti"
    LARGE_CONFETTI = "lgConfetti"
    HORIZONTAL_BRICK = "horzBrick"
    DIAGONAL_BRICK = "diagBrick"
    SOLID_DIAMOND = "solidDmnd"
    OPEN_DIAMOND = "openDmnd"
    DOTTED_DIAMOND = "dotDmnd"
    PLAID = "plaid"
    SPHERE = "sphere"
    WEAVE = "weave"
    DIVOT = "divot"
    SHINGLE = "shingle"
    WAVE = "wave"
    TRELLIS = "trellis"
    ZIG_ZAG = "zigzag"


class BlendMode(WireEnum):
    OVERLAY = "over"
    MULTIPLY = "mult"
    SCREEN = "screen"
    LIGHTEN = "lighten"
    DARKEN = "darken"


class TextTabAlignType(WireEnum):
    LEFT = "l"
    CENTER = "ctr"
    RIGHT = "r"
    DECIMAL = "dec"


class TextUnderlineType(WireEnum):
    NONE = "none"
    WORDS = "words"
    SINGLE = "sng"
    DOUBLE = "dbl"
    HEAVY = "heavy"
    DOTTED = "dotted"
    DOTTED_HEAVY = "dottedHeavy"
    DASH = "dash"
    DASH_HEAVY = "dashHeavy"
    DASH_LONG = "dashLong"
    DASH_LONG_HEAVY = "dashLongHeavy"
    DOT_DASH = "dotDash"
    DOT_DASH_HEAVY = "dotDashHeavy"
    DOT_DOT_DASH = "dotDotDash"
    DOT_DOT_DASH_HEAVY = "dotDotDashHeavy"
    WAVY = "wavy"
    WAVY_HEAVY = "wavyHeavy"
    WAVY_DOUBLE = "wavyDbl"


class TextStrikeType(WireEnum):
    NO_STRIKE = "noStrike"
    SINGLE_STRIKE = "sngStrike"
    DOUBLE_STRIKE = "dblStrike"


class TextCapsType(WireEnum):
    NONE = "none"
    SMALL = "small"
    ALL = "all"


class TextShapeType(WireEnum):
    """Preset WordArt warps for ``prstTxWarp``."""

    NO_SHAPE = "textNoShape"
    PLAIN = "textPlain"
    STOP = "textStop"
    TRIANGLE = "textTriangle"
    TRIANGLE_INVERTED = "textTriangleInverted"
    CHEVRON = "textChevron"
    CHEVRON_INVERTED = "textChevronInverted"
    RING_INSIDE = "textRingInside"
    RING_OUTSIDE = "textRingOutside"
    ARCH_UP = "textArchUp"
    ARCH_DOWN = "textArchDown"
    CIRCLE = "textCircle"
    BUTTON = "textButton"
    ARCH_UP_POUR = "textArchUpPour"
    ARCH_DOWN_POUR = "textArchDownPour"
    CIRCLE_POUR = "textCirclePour"
    BUTTON_POUR = "textButtonPour"
    CURVE_UP = "textCurveUp"
    CURVE_DOWN = "textCurveDown"
    CAN_UP = "textCanUp"
    CAN_DOWN = "textCanDown"
    WAVE1 = "textWave1"
    WAVE2 = "textWave2"
    WAVE4 = "textWave4"
    DOUBLE_WAVE1 = "textDoubleWave1"
    INFLATE = "textInflate"
    DEFLATE = "textDeflate"
    INFLATE_BOTTOM = "textInflateBottom"
    DEFLATE_BOTTOM = "textDeflateBottom"
    INFLATE_TOP = "textInflateTop"
    DEFLATE_TOP = "textDeflateTop"
    DEFLATE_INFLATE = "textDeflateInflate"
    DEFLATE_INFLATE_DEFLATE = "textDeflateInflateDeflate"
    FADE_LEFT = "textFadeLeft"
    FADE_UP = "textFadeUp"
    FADE_RIGHT = "textFadeRight"
    FADE_DOWN = "textFadeDown"
    SLANT_UP = "textSlantUp"
    SLANT_DOWN = "textSlantDown"
    CASCADE_UP = "textCascadeUp"
    CASCADE_DOWN = "textCascadeDown"


class TextVertOverflowType(WireEnum):
    OVERFLOW = "overflow"
    ELLIPSIS = "ellipsis"
    CLIP = "clip"


class TextHorizontalOverflowType(WireEnum):
    OVERFLOW = "overflow"
    CLIP = "clip"


class TextVerticalType(WireEnum):
    HORIZONTAL = "horz"
    VERTICAL = "vert"
    VERTICAL270 = "vert270"
    WORD_ART_VERTICAL = "wordArtVert"
    EAST_ASIAN_VERTICAL = "eaVert"
    MONGOLIAN_VERTICAL = "mongolianVert"
    WORD_ART_VERTICAL_RTL = "wordArtVertRtl"


class TextWrappingType(WireEnum):
    NONE = "none"
    SQUARE = "square"


class TextAnchoringType(WireEnum):
    TOP = "t"
    CENTER = "ctr"
    BOTTOM = "b"
    JUSTIFIED = "just"
    DISTRIBUTED = "dist"


class BlackWhiteMode(WireEnum):
    """Rendering mode used when a shape is printed in black and white."""

    COLOR = "clr"
    AUTO = "auto"
    GRAY = "gray"
    LIGHT_GRAY = "ltGray"
    INVERSE_GRAY = "invGray"
    GRAY_WHITE = "grayWhite"
    BLACK_GRAY = "blackGray"
    BLACK_WHITE = "blackWhite"
    BLACK = "black"
    WHITE = "white"
    HIDDEN = "hidden"


class AnimationBuildType(WireEnum):
    ALL_AT_ONCE = "allAtOnce"


class AnimationDgmOnlyBuildType(WireEnum):
    ONE = "one"
    LVL_ONE = "lvlOne"
    LVL_AT_ONCE = "lvlAtOnce"


class AnimationDgmBuildType(WireEnum):
    ALL_AT_ONCE = "allAtOnce"
    ONE = "one"
    LVL_ONE = "lvlOne"
    LVL_AT_ONCE = "lvlAtOnce"


class AnimationChartOnlyBuildType(WireEnum):
    SERIES = "series"
    CATEGORY = "category"
    SERIES_ELEMENT = "seriesElement"
    CATEGORY_ELEMENT = "categoryElement"


class AnimationChartBuildType(WireEnum):
    ALL_AT_ONCE = "allAtOnce"
    SERIES = "series"
    CATEGORY = "category"
    SERIES_ELEMENT = "seriesElement"
    CATEGORY_ELEMENT = "categoryElement"


class BlipCompression(WireEnum):
    """Compression state recorded on a ``blip``."""

    EMAIL = "email"
    SCREEN = "screen"
    PRINT = "print"
    HQ_PRINT = "hqprint"
    NONE = "none"
