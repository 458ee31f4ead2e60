"""Attribute, child and choice-group helpers shared by the model deserializers."""
from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar

from drawingml_theme.model.errors import (
    LimitViolationError,
    MissingAttributeError,
    MissingChildNodeError,
    NotGroupMemberError,
)
from drawingml_theme.model.simple_types import parse_bool
from drawingml_theme.utils.xml_utils import XmlNode

T = TypeVar("T")


def required_attribute(node: XmlNode, name: str) -> str:
    value = node.attribute(name)
    if value is None:
        raise MissingAttributeError(node.name, name)
    return value


def optional_value(node: XmlNode, name: str, parse: Callable[[str], T]) -> Optional[T]:
    """Parse an optional attribute; absent attributes stay ``None``."""
    value = node.attribute(name)
    if value is None:
        return None
    return parse(value)


def required_value(node: XmlNode, name: str, parse: Callable[[str], T]) -> T:
    return parse(required_attribute(node, name))


def optional_bool(node: XmlNode, name: str) -> Optional[bool]:
    return optional_value(node, name, parse_bool)


def first_child(node: XmlNode, expected: str) -> XmlNode:
    """Return the first child element or fail naming what was expected there."""
    if not node.child_nodes:
        raise MissingChildNodeError(node.name, expected)
    return node.child_nodes[0]


def child_at(node: XmlNode, index: int, expected: str) -> XmlNode:
    if len(node.child_nodes) <= index:
        raise MissingChildNodeError(node.name, expected)
    return node.child_nodes[index]


def require(node: XmlNode, value: Optional[T], child: str) -> T:
    """Turn a child slot that was never filled into ``MissingChildNodeError``."""
    if value is None:
        raise MissingChildNodeError(node.name, child)
    return value


def check_min_occurs(node: XmlNode, field: str, items: Sequence[object], minimum: int) -> None:
    if len(items) < minimum:
        raise LimitViolationError(node.name, field, minimum, None, len(items))


def text_bool(node: XmlNode) -> bool:
    """Parse a boolean carried as element text, as in ``<a:rtl>1</a:rtl>``."""
    return parse_bool((node.text or "").strip())


class ChoiceGroup(Generic[T]):
    """Dispatch table for an XSD choice group keyed by element local name.

    The arm set is closed: ``from_xml_element`` rejects anything not in the
    table, while callers walking mixed children use ``is_choice_member`` to
    route only the elements that belong here.
    """

    def __init__(self, name: str, arms: Mapping[str, Callable[[XmlNode], T]]) -> None:
        self.name = name
        self._arms: Dict[str, Callable[[XmlNode], T]] = dict(arms)

    def __repr__(self) -> str:
        return f"ChoiceGroup({self.name!r})"

    def is_choice_member(self, local_name: str) -> bool:
        return local_name in self._arms

    def from_xml_element(self, node: XmlNode) -> T:
        parse = self._arms.get(node.local_name())
        if parse is None:
            raise NotGroupMemberError(node.name, self.name)
        return parse(node)

    def iter_members(self, node: XmlNode) -> Iterator[XmlNode]:
        """Iterate over the children of ``node`` that belong to this group."""
        for child in node.child_nodes:
            if child.local_name() in self._arms:
                yield child

    def parse_all(self, node: XmlNode) -> List[T]:
        """Deserialize every member child of ``node`` in document order."""
        return [self.from_xml_element(child) for child in self.iter_members(node)]

    def first_member(self, node: XmlNode) -> Optional[XmlNode]:
        return next(self.iter_members(node), None)

    def parse_first(self, node: XmlNode) -> Optional[T]:
        child = self.first_member(node)
        return None if child is None else self.from_xml_element(child)
