"""Tests for hyperlinks, media, animation builds and non-visual properties."""
import unittest

from drawingml_theme.model.enums import AnimationChartBuildType, AnimationDgmBuildType, ChartBuildStep, DgmBuildStep
from drawingml_theme.model.errors import LexicalError, MissingAttributeError, MissingChildNodeError, NotGroupMemberError
from drawingml_theme.model.nonvisual import (
    Connection,
    GraphicalObjectFrameLocking,
    GroupLocking,
    NonVisualConnectorProperties,
    NonVisualDrawingProps,
    NonVisualDrawingShapeProps,
    NonVisualGraphicFrameProperties,
    NonVisualGroupDrawingShapeProps,
    NonVisualPictureProperties,
    ShapeLocking,
)
from drawingml_theme.model.shared import (
    ANIMATION_BUILD,
    ANIMATION_ELEMENT,
    MEDIA,
    AnimationChartBuildProperties,
    AnimationChartElement,
    AnimationDgmBuildProperties,
    AnimationDgmElement,
    AudioCD,
    AudioCDTime,
    EmbeddedWAVAudioFile,
    GraphicalObject,
    Hyperlink,
    VideoFile,
)
from drawingml_theme.utils.xml_utils import parse_xml

NS = (
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships"'
)


class HyperlinkTest(unittest.TestCase):
    def test_hyperlink_with_sound(self) -> None:
        xml = (
            f'<a:hlinkClick {NS} r:id="rId5" tooltip="Go" history="0">'
            '<a:snd r:embed="rId6" name="chime.wav"/></a:hlinkClick>'
        )
        link = Hyperlink.from_xml_element(parse_xml(xml))
        self.assertEqual(link.relationship_id, "rId5")
        self.assertEqual(link.tooltip, "Go")
        self.assertFalse(link.history)
        self.assertIsNone(link.highlight_click)
        self.assertEqual(link.sound, EmbeddedWAVAudioFile("rId6", "chime.wav"))

    def test_relationship_prefix_is_tolerated(self) -> None:
        xml = '<hlinkClick xmlns:rel="http://schemas.openxmlformats.org/officeDocument/2006/relationships" rel:id="rId9"/>'
        self.assertEqual(Hyperlink.from_xml_element(parse_xml(xml)).relationship_id, "rId9")


class MediaTest(unittest.TestCase):
    def test_audio_cd(self) -> None:
        xml = '<audioCd><st track="1"/><end track="3" time="120"/></audioCd>'
        media = MEDIA.from_xml_element(parse_xml(xml))
        self.assertEqual(media, AudioCD(AudioCDTime(1), AudioCDTime(3, 120)))

    def test_audio_cd_requires_end(self) -> None:
        with self.assertRaises(MissingChildNodeError) as ctx:
            MEDIA.from_xml_element(parse_xml('<audioCd><st track="1"/></audioCd>'))
        self.assertEqual(ctx.exception.child, "end")

    def test_track_is_a_byte(self) -> None:
        with self.assertRaises(LexicalError):
            AudioCDTime.from_xml_element(parse_xml('<st track="256"/>'))

    def test_video_file(self) -> None:
        media = MEDIA.from_xml_element(parse_xml(f'<a:videoFile {NS} r:link="rId2" contentType="video/mp4"/>'))
        self.assertEqual(media, VideoFile("rId2", "video/mp4"))

    def test_linked_media_requires_link(self) -> None:
        with self.assertRaises(MissingAttributeError) as ctx:
            MEDIA.from_xml_element(parse_xml("<quickTimeFile/>"))
        self.assertEqual(ctx.exception.attribute, "r:link")

    def test_unknown_media(self) -> None:
        with self.assertRaises(NotGroupMemberError):
            MEDIA.from_xml_element(parse_xml("<midiFile/>"))


class GraphicalObjectTest(unittest.TestCase):
    def test_graphic_data_uri(self) -> None:
        xml = '<graphic><graphicData uri="http://schemas.openxmlformats.org/drawingml/2006/chart"><chart/></graphicData></graphic>'
        graphic = GraphicalObject.from_xml_element(parse_xml(xml))
        self.assertEqual(graphic.graphic_data.uri, "http://schemas.openxmlformats.org/drawingml/2006/chart")

    def test_graphic_requires_data(self) -> None:
        with self.assertRaises(MissingChildNodeError):
            GraphicalObject.from_xml_element(parse_xml("<graphic/>"))


class AnimationTest(unittest.TestCase):
    def test_elements(self) -> None:
        dgm = ANIMATION_ELEMENT.from_xml_element(
            parse_xml('<dgm id="{1A2B3C4D-0000-0000-0000-000000000000}" bldStep="bg"/>')
        )
        self.assertEqual(dgm, AnimationDgmElement("{1A2B3C4D-0000-0000-0000-000000000000}", DgmBuildStep.BACKGROUND))
        chart = ANIMATION_ELEMENT.from_xml_element(parse_xml('<chart bldStep="series" seriesIdx="-1"/>'))
        self.assertEqual(chart, AnimationChartElement(ChartBuildStep.SERIES, -1))

    def test_lowercase_guid_is_rejected(self) -> None:
        with self.assertRaises(LexicalError):
            AnimationDgmElement.from_xml_element(parse_xml('<dgm id="{1a2b3c4d-0000-0000-0000-000000000000}"/>'))

    def test_builds(self) -> None:
        dgm = ANIMATION_BUILD.from_xml_element(parse_xml('<bldDgm bld="lvlOne" rev="1"/>'))
        self.assertEqual(dgm, AnimationDgmBuildProperties(AnimationDgmBuildType.LVL_ONE, True))
        chart = ANIMATION_BUILD.from_xml_element(parse_xml('<bldChart bld="seriesElement" animBg="0"/>'))
        self.assertEqual(chart, AnimationChartBuildProperties(AnimationChartBuildType.SERIES_ELEMENT, False))


class NonVisualPropertiesTest(unittest.TestCase):
    def test_drawing_props(self) -> None:
        xml = (
            f'<a:cNvPr {NS} id="4" name="Title 3" descr="alt" hidden="1">'
            '<a:hlinkClick r:id="rId1"/><a:hlinkHover r:id="rId2"/></a:cNvPr>'
        )
        props = NonVisualDrawingProps.from_xml_element(parse_xml(xml))
        self.assertEqual((props.id, props.name, props.description), (4, "Title 3", "alt"))
        self.assertTrue(props.hidden)
        self.assertEqual(props.hyperlink_click.relationship_id, "rId1")
        self.assertEqual(props.hyperlink_hover.relationship_id, "rId2")

    def test_drawing_props_require_id_and_name(self) -> None:
        with self.assertRaises(MissingAttributeError) as ctx:
            NonVisualDrawingProps.from_xml_element(parse_xml('<cNvPr id="1"/>'))
        self.assertEqual(ctx.exception.attribute, "name")

    def test_shape_locks(self) -> None:
        xml = '<cNvSpPr txBox="1"><spLocks noGrp="1" noTextEdit="0"/></cNvSpPr>'
        props = NonVisualDrawingShapeProps.from_xml_element(parse_xml(xml))
        self.assertTrue(props.is_text_box)
        self.assertEqual(props.shape_locks, ShapeLocking(no_grouping=True, no_text_edit=False))

    def test_group_and_frame_locks(self) -> None:
        group = NonVisualGroupDrawingShapeProps.from_xml_element(
            parse_xml('<cNvGrpSpPr><grpSpLocks noUngrp="1"/></cNvGrpSpPr>')
        )
        self.assertEqual(group.locks, GroupLocking(no_ungrouping=True))
        frame = NonVisualGraphicFrameProperties.from_xml_element(
            parse_xml('<cNvGraphicFramePr><graphicFrameLocks noDrilldown="1"/></cNvGraphicFramePr>')
        )
        self.assertEqual(frame.graphic_frame_locks, GraphicalObjectFrameLocking(no_drilldown=True))

    def test_connector(self) -> None:
        xml = '<cNvCxnSpPr><cxnSpLocks noRot="1"/><stCxn id="2" idx="0"/><endCxn id="3" idx="2"/></cNvCxnSpPr>'
        props = NonVisualConnectorProperties.from_xml_element(parse_xml(xml))
        self.assertTrue(props.connector_locks.no_rotate)
        self.assertEqual(props.start_connection, Connection(2, 0))
        self.assertEqual(props.end_connection, Connection(3, 2))

    def test_picture(self) -> None:
        xml = '<cNvPicPr preferRelativeResize="0"><picLocks noChangeAspect="1" noCrop="1"/></cNvPicPr>'
        props = NonVisualPictureProperties.from_xml_element(parse_xml(xml))
        self.assertFalse(props.prefer_relative_resize)
        self.assertTrue(props.picture_locks.no_change_aspect_ratio)
        self.assertTrue(props.picture_locks.no_crop)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
