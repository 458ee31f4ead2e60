"""Turn the theme parts of a package into ``OfficeStyleSheet`` records."""
from __future__ import annotations

from typing import Dict
from xml.etree import ElementTree as ET

from drawingml_theme.model.document_model import ThemeCatalog
from drawingml_theme.model.errors import DrawingMLError
from drawingml_theme.model.theme import OfficeStyleSheet
from drawingml_theme.parser.package_loader import OoxmlPackage
from drawingml_theme.utils.logger import get_logger
from drawingml_theme.utils.xml_utils import XmlNode

LOGGER = get_logger(__name__)


def parse_theme(root: XmlNode) -> OfficeStyleSheet:
    """Deserialize one ``a:theme`` element."""
    return OfficeStyleSheet.from_xml_element(root)


class ThemeParser:
    """Parse every theme part; a broken part is logged and skipped."""

    def __init__(self, package: OoxmlPackage) -> None:
        self._package = package

    def parse(self) -> ThemeCatalog:
        themes: Dict[str, OfficeStyleSheet] = {}
        failures: Dict[str, str] = {}
        for part_name in self._package.theme_part_names():
            try:
                root = self._package.require_xml_part(part_name)
                themes[part_name] = parse_theme(root)
            except (DrawingMLError, ET.ParseError) as exc:
                LOGGER.error("Failed to parse theme part %s: %s", part_name, exc)
                failures[part_name] = str(exc)
                continue
            LOGGER.debug("Parsed theme %r from %s", themes[part_name].name, part_name)
        LOGGER.info("Parsed %d theme part(s), %d failed", len(themes), len(failures))
        return ThemeCatalog(themes, failures)
