"""Small leaf records shared across DrawingML: hyperlinks, media, graphic frames and animation builds."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from drawingml_theme.model.enums import (
    AnimationChartBuildType,
    AnimationDgmBuildType,
    ChartBuildStep,
    DgmBuildStep,
)
from drawingml_theme.model.simple_types import INT32, UINT32, NumericType, parse_guid, parse_integer
from drawingml_theme.model.xsd import (
    ChoiceGroup,
    first_child,
    optional_bool,
    optional_value,
    require,
    required_attribute,
    required_value,
)
from drawingml_theme.utils.xml_utils import XmlNode

UNSIGNED_BYTE = NumericType("UnsignedByte", parse_integer, 0, 255)


@dataclass(frozen=True, slots=True)
class EmbeddedWAVAudioFile:
    embed_rel_id: str
    name: Optional[str] = None
    built_in: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "EmbeddedWAVAudioFile":
        return cls(
            embed_rel_id=required_attribute(node, "r:embed"),
            name=node.attribute("name"),
            built_in=optional_bool(node, "builtIn"),
        )


@dataclass(frozen=True, slots=True)
class Hyperlink:
    """Click or hover action attached to text or a drawing element."""

    relationship_id: Optional[str] = None
    invalid_url: Optional[str] = None
    action: Optional[str] = None
    target_frame: Optional[str] = None
    tooltip: Optional[str] = None
    # Schema defaults: history true, highlightClick false, endSnd false.
    history: Optional[bool] = None
    highlight_click: Optional[bool] = None
    end_sound: Optional[bool] = None
    sound: Optional[EmbeddedWAVAudioFile] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Hyperlink":
        sound = None
        for child in node.children("snd"):
            sound = EmbeddedWAVAudioFile.from_xml_element(child)
            break
        return cls(
            relationship_id=node.attribute("r:id"),
            invalid_url=node.attribute("invalidUrl"),
            action=node.attribute("action"),
            target_frame=node.attribute("tgtFrame"),
            tooltip=node.attribute("tooltip"),
            history=optional_bool(node, "history"),
            highlight_click=optional_bool(node, "highlightClick"),
            end_sound=optional_bool(node, "endSnd"),
            sound=sound,
        )


@dataclass(frozen=True, slots=True)
class AudioCDTime:
    track: int
    time: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AudioCDTime":
        return cls(
            track=required_value(node, "track", UNSIGNED_BYTE.parse),
            time=optional_value(node, "time", UINT32.parse),
        )


@dataclass(frozen=True, slots=True)
class AudioCD:
    start_time: AudioCDTime
    end_time: AudioCDTime

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AudioCD":
        start_time = None
        end_time = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "st":
                start_time = AudioCDTime.from_xml_element(child)
            elif tag == "end":
                end_time = AudioCDTime.from_xml_element(child)
        return cls(
            start_time=require(node, start_time, "st"),
            end_time=require(node, end_time, "end"),
        )


@dataclass(frozen=True, slots=True)
class AudioFile:
    link: str
    content_type: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AudioFile":
        return cls(link=required_attribute(node, "r:link"), content_type=node.attribute("contentType"))


@dataclass(frozen=True, slots=True)
class VideoFile:
    link: str
    content_type: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "VideoFile":
        return cls(link=required_attribute(node, "r:link"), content_type=node.attribute("contentType"))


@dataclass(frozen=True, slots=True)
class QuickTimeFile:
    link: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "QuickTimeFile":
        return cls(required_attribute(node, "r:link"))


Media = Union[AudioCD, EmbeddedWAVAudioFile, AudioFile, VideoFile, QuickTimeFile]

MEDIA: ChoiceGroup[Media] = ChoiceGroup(
    "EG_Media",
    {
        "audioCd": AudioCD.from_xml_element,
        "wavAudioFile": EmbeddedWAVAudioFile.from_xml_element,
        "audioFile": AudioFile.from_xml_element,
        "videoFile": VideoFile.from_xml_element,
        "quickTimeFile": QuickTimeFile.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class GraphicalObjectData:
    """Only the ``uri`` identifying the payload kind is kept; the payload is opaque."""

    uri: str

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GraphicalObjectData":
        return cls(required_attribute(node, "uri"))


@dataclass(frozen=True, slots=True)
class GraphicalObject:
    graphic_data: GraphicalObjectData

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GraphicalObject":
        return cls(GraphicalObjectData.from_xml_element(first_child(node, "graphicData")))


@dataclass(frozen=True, slots=True)
class AnimationDgmElement:
    # Schema defaults: id {00000000-0000-0000-0000-000000000000}, bldStep sp.
    id: Optional[str] = None
    build_step: Optional[DgmBuildStep] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AnimationDgmElement":
        return cls(
            id=optional_value(node, "id", parse_guid),
            build_step=optional_value(node, "bldStep", DgmBuildStep.parse),
        )


@dataclass(frozen=True, slots=True)
class AnimationChartElement:
    build_step: ChartBuildStep
    # Schema default for both indices: -1.
    series_index: Optional[int] = None
    category_index: Optional[int] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AnimationChartElement":
        return cls(
            build_step=required_value(node, "bldStep", ChartBuildStep.parse),
            series_index=optional_value(node, "seriesIdx", INT32.parse),
            category_index=optional_value(node, "categoryIdx", INT32.parse),
        )


AnimationElementChoice = Union[AnimationDgmElement, AnimationChartElement]

ANIMATION_ELEMENT: ChoiceGroup[AnimationElementChoice] = ChoiceGroup(
    "CT_AnimationElementChoice",
    {
        "dgm": AnimationDgmElement.from_xml_element,
        "chart": AnimationChartElement.from_xml_element,
    },
)


@dataclass(frozen=True, slots=True)
class AnimationDgmBuildProperties:
    # Schema defaults: bld allAtOnce, rev false.
    build_type: Optional[AnimationDgmBuildType] = None
    reverse: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AnimationDgmBuildProperties":
        return cls(
            build_type=optional_value(node, "bld", AnimationDgmBuildType.parse),
            reverse=optional_bool(node, "rev"),
        )


@dataclass(frozen=True, slots=True)
class AnimationChartBuildProperties:
    # Schema defaults: bld allAtOnce, animBg true.
    build_type: Optional[AnimationChartBuildType] = None
    animate_background: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AnimationChartBuildProperties":
        return cls(
            build_type=optional_value(node, "bld", AnimationChartBuildType.parse),
            animate_background=optional_bool(node, "animBg"),
        )


AnimationGraphicalObjectBuildProperties = Union[AnimationDgmBuildProperties, AnimationChartBuildProperties]

ANIMATION_BUILD: ChoiceGroup[AnimationGraphicalObjectBuildProperties] = ChoiceGroup(
    "CT_AnimationGraphicalObjectBuildProperties",
    {
        "bldDgm": AnimationDgmBuildProperties.from_xml_element,
        "bldChart": AnimationChartBuildProperties.from_xml_element,
    },
)
