"""OOXML package loader responsible for unpacking theme and document property parts."""
from __future__ import annotations

import io
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from drawingml_theme.utils.logger import get_logger
from drawingml_theme.utils.xml_utils import XmlNode, parse_xml

LOGGER = get_logger(__name__)

CONTENT_TYPES_PATH = "[Content_Types].xml"
CORE_PROPS_PATH = "docProps/core.xml"
APP_PROPS_PATH = "docProps/app.xml"
# PresentationML, WordprocessingML and SpreadsheetML keep their themes here.
THEME_DIRECTORIES = ("ppt/theme/", "word/theme/", "xl/theme/")

_THEME_NUMBER_RE = re.compile(r"(\d+)\.xml$")


@dataclass(slots=True)
class OoxmlPackage:
    """Container for the raw parts of a .pptx, .docx or .xlsx archive."""

    raw_parts: Mapping[str, bytes]
    source: Optional[str] = None
    xml_cache: Dict[str, XmlNode] = field(default_factory=dict)

    @classmethod
    def load(cls, package_path: Union[str, Path]) -> "OoxmlPackage":
        """Open an OOXML archive and read every part into memory."""
        package_path = Path(package_path)
        with zipfile.ZipFile(package_path) as archive:
            parts = {name: archive.read(name) for name in archive.namelist()}

        LOGGER.debug("Loaded %d parts from %s", len(parts), package_path.name)
        return cls(raw_parts=parts, source=package_path.name)

    @classmethod
    def from_bytes(cls, data: bytes, source: Optional[str] = None) -> "OoxmlPackage":
        """Build a package from an archive already held in memory."""
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            parts = {name: archive.read(name) for name in archive.namelist()}
        return cls(raw_parts=parts, source=source)

    # ------------------------------------------------------------------
    # Public helpers
    def theme_part_names(self) -> List[str]:
        """Return theme part names ordered by directory, then by theme number."""
        names = [
            name
            for name in self.raw_parts
            if name.startswith(THEME_DIRECTORIES) and name.endswith(".xml") and "/_rels/" not in name
        ]
        return sorted(names, key=_theme_sort_key)

    def get_xml_part(self, name: str) -> Optional[XmlNode]:
        """Parse a part on first access; missing parts yield ``None``."""
        if name in self.xml_cache:
            return self.xml_cache[name]
        data = self.raw_parts.get(name)
        if data is None:
            return None
        node = parse_xml(data)
        self.xml_cache[name] = node
        return node

    def require_xml_part(self, name: str) -> XmlNode:
        node = self.get_xml_part(name)
        if node is None:
            raise KeyError(f"Required package part missing: {name}")
        return node

    def core_properties_xml(self) -> Optional[XmlNode]:
        return self.get_xml_part(CORE_PROPS_PATH)

    def app_properties_xml(self) -> Optional[XmlNode]:
        return self.get_xml_part(APP_PROPS_PATH)


def _theme_sort_key(name: str):
    directory = next((index for index, prefix in enumerate(THEME_DIRECTORIES) if name.startswith(prefix)), 0)
    match = _THEME_NUMBER_RE.search(name)
    number = int(match.group(1)) if match else 0
    return directory, number, name
