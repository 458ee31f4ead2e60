"""Document property parts: ``docProps/app.xml`` and ``docProps/core.xml``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from drawingml_theme.model.simple_types import parse_integer
from drawingml_theme.utils.xml_utils import XmlNode, find_text


@dataclass(frozen=True, slots=True)
class AppInfo:
    app_name: Optional[str] = None
    app_version: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "AppInfo":
        return cls(
            app_name=find_text(node, "Application"),
            app_version=find_text(node, "AppVersion"),
        )


@dataclass(frozen=True, slots=True)
class CoreProperties:
    """Dublin Core metadata. Timestamps are kept as the ISO-8601 text found in the part."""

    title: Optional[str] = None
    creator: Optional[str] = None
    last_modified_by: Optional[str] = None
    revision: Optional[int] = None
    created: Optional[str] = None
    modified: Optional[str] = None

    @classmethod
    def from_xml_element(cls, node: XmlNode) -> "CoreProperties":
        revision = find_text(node, "revision")
        return cls(
            title=find_text(node, "title"),
            creator=find_text(node, "creator"),
            last_modified_by=find_text(node, "lastModifiedBy"),
            revision=parse_integer(revision, "revision") if revision else None,
            created=find_text(node, "created"),
            modified=find_text(node, "modified"),
        )
