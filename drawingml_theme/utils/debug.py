"""Helpers to persist parsed theme documents as JSON for inspection."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from drawingml_theme.model.document_model import ThemeCatalog, ThemeDocument


class DebugDumper:
    """Writes the parsed model onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, document: ThemeDocument) -> Path:
        """Persist the theme document as JSON and return the written path."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "theme_document.json"
        target.write_text(self.to_json(document))
        return target

    def to_json(self, document: ThemeDocument) -> str:
        return json.dumps(self.serialize(document), indent=2)

    def serialize(self, value: Any) -> Any:
        if isinstance(value, ThemeCatalog):
            return {
                "themes": self.serialize(value.all()),
                "failures": dict(value.failures()),
            }
        if is_dataclass(value) and not isinstance(value, type):
            # Tag each record so union members stay distinguishable.
            payload = {"type": type(value).__name__}
            for item in fields(value):
                payload[item.name] = self.serialize(getattr(value, item.name))
            return payload
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {str(k): self.serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.serialize(v) for v in value]
        return value
