"""Helpers to work with XML namespaces and the read-only element tree view."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union
from xml.etree import ElementTree as ET

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across parsers."""

    DRAWING: Dict[str, str] = None  # type: ignore[assignment]
    RELATIONSHIPS: Dict[str, str] = None  # type: ignore[assignment]
    PACKAGE: Dict[str, str] = None  # type: ignore[assignment]
    CORE_PROPERTIES: Dict[str, str] = None  # type: ignore[assignment]
    APP_PROPERTIES: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")

    @staticmethod
    def default_prefixes() -> Dict[str, str]:
        """Return a URI to prefix map covering every known namespace."""
        prefixes: Dict[str, str] = {XML_NAMESPACE: "xml"}
        for table in (
            Namespaces.DRAWING,
            Namespaces.RELATIONSHIPS,
            Namespaces.PACKAGE,
            Namespaces.CORE_PROPERTIES,
            Namespaces.APP_PROPERTIES,
        ):
            for prefix, uri in table.items():
                prefixes.setdefault(uri, prefix)
        return prefixes


Namespaces.DRAWING = {  # type: ignore[attr-defined]
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
}
Namespaces.RELATIONSHIPS = {  # type: ignore[attr-defined]
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}
Namespaces.PACKAGE = {  # type: ignore[attr-defined]
    "rel": "http://schemas.openxmlformats.org/package/2006/relationships",
}
Namespaces.CORE_PROPERTIES = {  # type: ignore[attr-defined]
    "cp": "http://schemas.openxmlformats.org/package/2006/metadata/core-properties",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
}
Namespaces.APP_PROPERTIES = {  # type: ignore[attr-defined]
    "ep": "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties",
}


@dataclass(slots=True)
class XmlNode:
    """Read-only view of one XML element.

    ``name`` keeps the prefix used in the source document (``a:gradFill``) so
    error messages point at what the author actually wrote. Attribute names are
    stored the same way (``r:embed``). ``text`` is the element's leading text;
    whitespace between child elements is dropped.
    """

    name: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    child_nodes: List["XmlNode"] = field(default_factory=list)
    text: Optional[str] = None

    def local_name(self) -> str:
        """Return the element name without its namespace prefix."""
        return _split_prefix(self.name)[1]

    def attribute(self, name: str) -> Optional[str]:
        """Look up an attribute value.

        An exact match on the raw name wins. Otherwise the local parts are
        compared, so ``r:embed`` still resolves when a producer bound the
        relationships namespace to another prefix. A prefixed request never
        matches an unprefixed attribute and vice versa.
        """
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        want_prefix, want_local = _split_prefix(name)
        for attr_name, value in self.attributes:
            prefix, local = _split_prefix(attr_name)
            if local == want_local and bool(prefix) == bool(want_prefix):
                return value
        return None

    def children(self, local_name: str) -> Iterator["XmlNode"]:
        """Iterate over the direct children with the given local name."""
        for child in self.child_nodes:
            if child.local_name() == local_name:
                yield child

    def first_child(self) -> Optional["XmlNode"]:
        return self.child_nodes[0] if self.child_nodes else None

    @classmethod
    def from_element(cls, element: ET.Element, prefixes: Optional[Mapping[str, str]] = None) -> "XmlNode":
        """Build a node tree from an already parsed ElementTree element.

        ElementTree discards the prefixes of the source document, so names are
        re-prefixed from ``prefixes`` (namespace URI to prefix). Unknown
        namespaces fall back to the bare local name.
        """
        table = dict(prefixes) if prefixes is not None else Namespaces.default_prefixes()
        return _convert(element, lambda uri: table.get(uri))


def parse_xml(data: Union[bytes, str]) -> XmlNode:
    """Parse raw XML into an ``XmlNode`` tree keeping the source prefixes."""
    parser = ET.XMLPullParser(events=("start-ns", "start", "end"))
    scopes: List[Dict[str, str]] = [{XML_NAMESPACE: "xml"}]
    pending: Dict[str, str] = {}
    stack: List[XmlNode] = []
    root: Optional[XmlNode] = None

    def handle(events: Iterator[Tuple[str, object]]) -> None:
        nonlocal pending, root
        for event, payload in events:
            if event == "start-ns":
                prefix, uri = payload  # type: ignore[misc]
                pending[uri] = prefix
            elif event == "start":
                scope = dict(scopes[-1])
                scope.update(pending)
                pending = {}
                scopes.append(scope)
                element = payload  # type: ignore[assignment]
                node = XmlNode(
                    name=_prefixed(element.tag, scope.get),  # type: ignore[attr-defined]
                    attributes=[
                        (_prefixed(key, scope.get), value)
                        for key, value in element.attrib.items()  # type: ignore[attr-defined]
                    ],
                )
                if stack:
                    stack[-1].child_nodes.append(node)
                else:
                    root = node
                stack.append(node)
            elif event == "end":
                node = stack.pop()
                node.text = _element_text(payload, bool(node.child_nodes))  # type: ignore[arg-type]
                scopes.pop()

    parser.feed(data)
    handle(parser.read_events())
    parser.close()
    handle(parser.read_events())
    if root is None:
        raise ValueError("XML document has no root element")
    return root


def find_text(node: XmlNode, local_name: str) -> Optional[str]:
    """Return trimmed text from the first child with the given local name."""
    for child in node.children(local_name):
        if child.text is None:
            return None
        return child.text.strip()
    return None


def _convert(element: ET.Element, lookup) -> XmlNode:
    node = XmlNode(
        name=_prefixed(element.tag, lookup),
        attributes=[(_prefixed(key, lookup), value) for key, value in element.attrib.items()],
    )
    node.child_nodes = [_convert(child, lookup) for child in element]
    node.text = _element_text(element, bool(node.child_nodes))
    return node


def _element_text(element: ET.Element, has_children: bool) -> Optional[str]:
    text = element.text
    if text is None:
        return None
    if has_children and not text.strip():
        return None
    return text


def _prefixed(qualified: str, lookup) -> str:
    if not qualified.startswith("{"):
        return qualified
    uri, local = qualified[1:].split("}", 1)
    prefix = lookup(uri)
    return f"{prefix}:{local}" if prefix else local


def _split_prefix(name: str) -> Tuple[str, str]:
    if ":" in name:
        prefix, local = name.split(":", 1)
        return prefix, local
    return "", name
