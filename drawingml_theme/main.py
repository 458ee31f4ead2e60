"""Entry-point for reading the themes of an OOXML package."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from drawingml_theme.model.document_model import ThemeDocument
from drawingml_theme.parser.docprops_parser import DocPropsParser
from drawingml_theme.parser.package_loader import OoxmlPackage
from drawingml_theme.parser.theme_parser import ThemeParser
from drawingml_theme.utils.debug import DebugDumper
from drawingml_theme.utils.logger import get_logger

LOGGER = get_logger(__name__)


def build_theme_document(package_path: Union[str, Path, OoxmlPackage]) -> ThemeDocument:
    """Load a package, parse its theme parts and document properties."""
    package = package_path if isinstance(package_path, OoxmlPackage) else OoxmlPackage.load(package_path)
    themes = ThemeParser(package).parse()
    properties = DocPropsParser(package)
    app_info, core_properties = properties.parse()
    return ThemeDocument(
        themes=themes,
        app_info=app_info,
        core_properties=core_properties,
        source=package.source,
        property_failures=dict(properties.failures),
    )


def summarize(document: ThemeDocument) -> List[str]:
    """Return one human readable line per theme part and per failed part."""
    lines = []
    for part_name, theme in document.themes.all().items():
        fonts = theme.font_scheme
        lines.append(
            f"{part_name}: {theme.name or '(unnamed)'} "
            f"colors={theme.color_scheme.name} "
            f"fonts={fonts.major_font.latin.typeface}/{fonts.minor_font.latin.typeface}"
        )
    for part_name, message in document.themes.failures().items():
        lines.append(f"{part_name}: FAILED {message}")
    for part_name, message in document.property_failures.items():
        lines.append(f"{part_name}: FAILED {message}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Read DrawingML themes from a .pptx, .docx or .xlsx file")
    parser.add_argument("package_file", help="Path to the OOXML package")
    parser.add_argument("--output", help="Directory to write theme_document.json into")
    parser.add_argument("--json", action="store_true", help="Print the parsed model as JSON on stdout")
    args = parser.parse_args(argv)

    package_path = Path(args.package_file).resolve()
    if not package_path.exists():
        LOGGER.error("Package not found: %s", package_path)
        return 2

    LOGGER.info("Reading themes from %s", package_path.name)
    document = build_theme_document(package_path)

    dumper = DebugDumper(Path(args.output or package_path.with_suffix("")))
    if args.json:
        sys.stdout.write(dumper.to_json(document) + "\n")
    else:
        for line in summarize(document):
            sys.stdout.write(line + "\n")
    if args.output:
        written = dumper.dump(document)
        LOGGER.info("Wrote %s", written)
    return 1 if document.has_failures() else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
