"""Non-visual drawing properties, locking flags and connections."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from drawingml_theme.model.shared import Hyperlink
from drawingml_theme.model.simple_types import DRAWING_ELEMENT_ID, UINT32
from drawingml_theme.model.xsd import optional_bool, required_attribute, required_value
from drawingml_theme.utils.xml_utils import XmlNode

# Attribute name to field name; every flag defaults to false in the schema.
_BASE_LOCKS: Tuple[Tuple[str, str], ...] = (
    ("noGrp", "no_grouping"),
    ("noSelect", "no_select"),
    ("noRot", "no_rotate"),
    ("noChangeAspect", "no_change_aspect_ratio"),
    ("noMove", "no_move"),
    ("noResize", "no_resize"),
    ("noEditPoints", "no_edit_points"),
    ("noAdjustHandles", "no_adjust_handles"),
    ("noChangeArrowheads", "no_change_arrowheads"),
    ("noChangeShapeType", "no_change_shape_type"),
)


def _read_flags(node: XmlNode, table: Tuple[Tuple[str, str], ...]) -> Dict[str, Optional[bool]]:
    return {field_name: optional_bool(node, attr) for attr, field_name in table}


@dataclass(frozen=True, slots=True)
class Locking:
    no_grouping: Optional[bool] = None
    no_select: Optional[bool] = None
    no_rotate: Optional[bool] = None
    no_change_aspect_ratio: Optional[bool] = None
    no_move: Optional[bool] = None
    no_resize: Optional[bool] = None
    no_edit_points: Optional[bool] = None
    no_adjust_handles: Optional[bool] = None
    no_change_arrowheads: Optional[bool] = None
    no_change_shape_type: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Locking":
        return cls(**_read_flags(node, _BASE_LOCKS))


@dataclass(frozen=True, slots=True)
class ShapeLocking(Locking):
    no_text_edit: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "ShapeLocking":
        return cls(no_text_edit=optional_bool(node, "noTextEdit"), **_read_flags(node, _BASE_LOCKS))


@dataclass(frozen=True, slots=True)
class PictureLocking(Locking):
    no_crop: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "PictureLocking":
        return cls(no_crop=optional_bool(node, "noCrop"), **_read_flags(node, _BASE_LOCKS))


@dataclass(frozen=True, slots=True)
class ConnectorLocking(Locking):
    pass


_GROUP_LOCKS: Tuple[Tuple[str, str], ...] = (
    ("noGrp", "no_grouping"),
    ("noUngrp", "no_ungrouping"),
    ("noSelect", "no_select"),
    ("noRot", "no_rotate"),
    ("noChangeAspect", "no_change_aspect_ratio"),
    ("noMove", "no_move"),
    ("noResize", "no_resize"),
)


@dataclass(frozen=True, slots=True)
class GroupLocking:
    no_grouping: Optional[bool] = None
    no_ungrouping: Optional[bool] = None
    no_select: Optional[bool] = None
    no_rotate: Optional[bool] = None
    no_change_aspect_ratio: Optional[bool] = None
    no_move: Optional[bool] = None
    no_resize: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GroupLocking":
        return cls(**_read_flags(node, _GROUP_LOCKS))


_FRAME_LOCKS: Tuple[Tuple[str, str], ...] = (
    ("noGrp", "no_grouping"),
    ("noDrilldown", "no_drilldown"),
    ("noSelect", "no_select"),
    ("noChangeAspect", "no_change_aspect"),
    ("noMove", "no_move"),
    ("noResize", "no_resize"),
)


@dataclass(frozen=True, slots=True)
class GraphicalObjectFrameLocking:
    no_grouping: Optional[bool] = None
    no_drilldown: Optional[bool] = None
    no_select: Optional[bool] = None
    no_change_aspect: Optional[bool] = None
    no_move: Optional[bool] = None
    no_resize: Optional[bool] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "GraphicalObjectFrameLocking":
        return cls(**_read_flags(node, _FRAME_LOCKS))


@dataclass(frozen=True, slots=True)
class NonVisualDrawingProps:
    """Identity of a drawing element: its document-unique id, name and alt text."""

    id: int
    name: str
    description: Optional[str] = None
    hidden: Optional[bool] = None
    title: Optional[str] = None
    hyperlink_click: Optional[Hyperlink] = None
    hyperlink_hover: Optional[Hyperlink] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualDrawingProps":
        hyperlink_click = None
        hyperlink_hover = None
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "hlinkClick":
                hyperlink_click = Hyperlink.from_xml_element(child)
            elif tag == "hlinkHover":
                hyperlink_hover = Hyperlink.from_xml_element(child)
        return cls(
            id=required_value(node, "id", DRAWING_ELEMENT_ID.parse),
            name=required_attribute(node, "name"),
            description=node.attribute("descr"),
            hidden=optional_bool(node, "hidden"),
            title=node.attribute("title"),
            hyperlink_click=hyperlink_click,
            hyperlink_hover=hyperlink_hover,
        )


@dataclass(frozen=True, slots=True)
class NonVisualDrawingShapeProps:
    is_text_box: Optional[bool] = None
    shape_locks: Optional[ShapeLocking] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualDrawingShapeProps":
        shape_locks = None
        for child in node.children("spLocks"):
            shape_locks = ShapeLocking.from_xml_element(child)
        return cls(is_text_box=optional_bool(node, "txBox"), shape_locks=shape_locks)


@dataclass(frozen=True, slots=True)
class NonVisualGroupDrawingShapeProps:
    locks: Optional[GroupLocking] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualGroupDrawingShapeProps":
        locks = None
        for child in node.children("grpSpLocks"):
            locks = GroupLocking.from_xml_element(child)
        return cls(locks)


@dataclass(frozen=True, slots=True)
class NonVisualGraphicFrameProperties:
    graphic_frame_locks: Optional[GraphicalObjectFrameLocking] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualGraphicFrameProperties":
        locks = None
        for child in node.children("graphicFrameLocks"):
            locks = GraphicalObjectFrameLocking.from_xml_element(child)
        return cls(locks)


@dataclass(frozen=True, slots=True)
class Connection:
    """End of a connector glued to connection site ``index`` of shape ``id``."""

    id: int
    index: int

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "Connection":
        return cls(
            id=required_value(node, "id", DRAWING_ELEMENT_ID.parse),
            index=required_value(node, "idx", UINT32.parse),
        )


@dataclass(frozen=True, slots=True)
class NonVisualConnectorProperties:
    connector_locks: Optional[ConnectorLocking] = None
    start_connection: Optional[Connection] = None
    end_connection: Optional[Connection] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualConnectorProperties":
        values = {}
        for child in node.child_nodes:
            tag = child.local_name()
            if tag == "cxnSpLocks":
                values["connector_locks"] = ConnectorLocking.from_xml_element(child)
            elif tag == "stCxn":
                values["start_connection"] = Connection.from_xml_element(child)
            elif tag == "endCxn":
                values["end_connection"] = Connection.from_xml_element(child)
        return cls(**values)


@dataclass(frozen=True, slots=True)
class NonVisualPictureProperties:
    # Schema default: preferRelativeResize true.
    prefer_relative_resize: Optional[bool] = None
    picture_locks: Optional[PictureLocking] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "NonVisualPictureProperties":
        picture_locks = None
        for child in node.children("picLocks"):
            picture_locks = PictureLocking.from_xml_element(child)
        return cls(
            prefer_relative_resize=optional_bool(node, "preferRelativeResize"),
            picture_locks=picture_locks,
        )
