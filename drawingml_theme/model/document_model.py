"""Aggregate model combining the themes and document properties of a package."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from drawingml_theme.model.docprops import AppInfo, CoreProperties
from drawingml_theme.model.theme import OfficeStyleSheet


class ThemeCatalog:
    """Theme parts keyed by archive path, plus the parts that failed to parse."""

    def __init__(self, themes: Mapping[str, OfficeStyleSheet], failures: Optional[Mapping[str, str]] = None):
        self._themes = dict(themes)
        self._failures = dict(failures or {})

    def get(self, part_name: Optional[str]) -> Optional[OfficeStyleSheet]:
        if part_name is None:
            return None
        return self._themes.get(part_name)

    def all(self) -> Mapping[str, OfficeStyleSheet]:
        """Return a copy of the parsed themes in package order."""
        return dict(self._themes)

    def failures(self) -> Mapping[str, str]:
        """Return the error message recorded for every part that failed to parse."""
        return dict(self._failures)

    def primary(self) -> Optional[OfficeStyleSheet]:
        """Return the first successfully parsed theme, usually ``theme1.xml``."""
        return next(iter(self._themes.values()), None)

    def __len__(self) -> int:
        return len(self._themes)


@dataclass(slots=True)
class ThemeDocument:
    """Everything read from one OOXML package."""

    themes: ThemeCatalog
    app_info: Optional[AppInfo] = None
    core_properties: Optional[CoreProperties] = None
    source: Optional[str] = None
    property_failures: Dict[str, str] = field(default_factory=dict)

    def has_failures(self) -> bool:
        return bool(self.themes.failures() or self.property_failures)
