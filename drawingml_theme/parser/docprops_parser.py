"""Read the application and core property parts of a package."""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, TypeVar
from xml.etree import ElementTree as ET

from drawingml_theme.model.docprops import AppInfo, CoreProperties
from drawingml_theme.model.errors import DrawingMLError
from drawingml_theme.parser.package_loader import APP_PROPS_PATH, CORE_PROPS_PATH, OoxmlPackage
from drawingml_theme.utils.logger import get_logger
from drawingml_theme.utils.xml_utils import XmlNode

LOGGER = get_logger(__name__)

T = TypeVar("T")


class DocPropsParser:
    """Parse ``docProps/app.xml`` and ``docProps/core.xml`` when present.

    A part that cannot be read yields ``None``; its error message is kept in
    ``failures`` so the themes of the package are still returned.
    """

    def __init__(self, package: OoxmlPackage) -> None:
        self._package = package
        self.failures: Dict[str, str] = {}

    def parse(self) -> Tuple[Optional[AppInfo], Optional[CoreProperties]]:
        return self.parse_app_info(), self.parse_core_properties()

    def parse_app_info(self) -> Optional[AppInfo]:
        return self._parse_part(APP_PROPS_PATH, self._package.app_properties_xml, AppInfo.from_xml_element)

    def parse_core_properties(self) -> Optional[CoreProperties]:
        return self._parse_part(CORE_PROPS_PATH, self._package.core_properties_xml, CoreProperties.from_xml_element)

    def _parse_part(
        self,
        part_name: str,
        load: Callable[[], Optional[XmlNode]],
        build: Callable[[XmlNode], T],
    ) -> Optional[T]:
        try:
            root = load()
            if root is None:
                LOGGER.debug("Package has no %s part", part_name)
                return None
            return build(root)
        except (DrawingMLError, ET.ParseError) as exc:
            LOGGER.error("Failed to parse property part %s: %s", part_name, exc)
            self.failures[part_name] = str(exc)
            return None
