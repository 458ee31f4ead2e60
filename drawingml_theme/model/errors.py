"""Structured errors raised while building the theme model from XML."""
from __future__ import annotations

from typing import Optional


class DrawingMLError(ValueError):
    """Base class for every deserialization failure."""


class MissingAttributeError(DrawingMLError):
    """A required attribute was absent from an element."""

    def __init__(self, element: str, attribute: str) -> None:
        super().__init__(f"Element '{element}' is missing required attribute '{attribute}'")
        self.element = element
        self.attribute = attribute


class MissingChildNodeError(DrawingMLError):
    """A required child element (or choice group) was absent."""

    def __init__(self, element: str, child: str) -> None:
        super().__init__(f"Element '{element}' is missing required child '{child}'")
        self.element = element
        self.child = child


class NotGroupMemberError(DrawingMLError):
    """A choice dispatcher received an element that is not one of its arms."""

    def __init__(self, element: str, group: str) -> None:
        super().__init__(f"Element '{element}' is not a member of group '{group}'")
        self.element = element
        self.group = group


class LimitViolationError(DrawingMLError):
    """A cardinality constraint on a list-valued field failed.

    ``max_occurs`` is ``None`` when the schema leaves the upper bound open.
    """

    def __init__(
        self,
        element: str,
        field: str,
        min_occurs: int,
        max_occurs: Optional[int],
        actual: int,
    ) -> None:
        upper = "unbounded" if max_occurs is None else str(max_occurs)
        super().__init__(
            f"Element '{element}' violates occurrence limit on '{field}': "
            f"expected {min_occurs}..{upper}, got {actual}"
        )
        self.element = element
        self.field = field
        self.min_occurs = min_occurs
        self.max_occurs = max_occurs
        self.actual = actual


class AdjustParseError(DrawingMLError):
    """Text that is neither a number nor a usable geometry guide name."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Cannot interpret {value!r} as a coordinate, angle or guide name")
        self.value = value


class LexicalError(DrawingMLError):
    """A scalar attribute or text value failed to parse.

    ``type_name`` names the simple type that rejected ``value``.
    """

    def __init__(self, value: str, type_name: str, reason: Optional[str] = None) -> None:
        message = f"Invalid {type_name} value {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.value = value
        self.type_name = type_name
        self.reason = reason


class NotAMemberError(LexicalError):
    """An enumeration lookup found no matching wire spelling."""

    def __init__(self, value: str, enumeration: str) -> None:
        super().__init__(value, enumeration, f"not a member of {enumeration}")
        self.enumeration = enumeration


class MaxDepthExceededError(DrawingMLError):
    """Effect containers or fill effects were nested deeper than the parser accepts."""

    def __init__(self, element: str, limit: int) -> None:
        super().__init__(f"Element '{element}' exceeds the maximum effect nesting depth of {limit}")
        self.element = element
        self.limit = limit
