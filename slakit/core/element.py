"""Generic element node for the SLA document tree.

An SLA file is a wide but shallow XML tree: a handful of element kinds, each
carrying dozens of attributes whose values are opaque to this library
(numbers and enumerations stored as text). The model therefore mirrors the
markup as mapping nodes instead of modelling every attribute as a Python
field:

    - ``attributes``: ordered ``name -> value`` map, values kept verbatim
    - ``children``: ordered child elements, typed when the tag is known
    - ``text``: character data, when the element carries any
    - ``tail``: character data following the element inside its parent
      (mixed content only; indentation is never kept)

Each element kind is a small subclass that declares its ``TAG``, the
``ATTRIBUTES`` the external schema defines for it, and the element classes it
knows as children (``CHILD_TYPES``). Tags that no class declares are kept as
:class:`RawElement` nodes so nothing is lost on a round trip.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple, Type, TypeVar, Union

E = TypeVar("E", bound="Element")

AttributeValue = Union[str, int, float]


def format_value(value: AttributeValue) -> str:
    """
    Render a Python value the way SLA files store it.

    Integers and integral floats become plain decimal strings ("100", not
    "100.0"); other floats use their shortest round-tripping repr.

    Args:
        value: String, int or float

    Returns:
        Attribute text

    Example:
        >>> format_value(100), format_value(100.0), format_value(12.5)
        ('100', '100', '12.5')
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


@dataclass
class Element:
    """
    Base class for all nodes of the document tree.

    Equality is deep value equality: two elements are equal when they have
    the same kind, attributes, children, text and tail.
    """

    TAG: ClassVar[str] = ""
    ATTRIBUTES: ClassVar[Tuple[str, ...]] = ()
    CHILD_TYPES: ClassVar[Tuple[Type["Element"], ...]] = ()

    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    text: Optional[str] = None
    tail: Optional[str] = None

    @property
    def tag(self) -> str:
        return self.TAG

    @classmethod
    def blank(cls: Type[E]) -> E:
        """Create an element with every declared attribute set to ""."""
        return cls(attributes={name: "" for name in cls.ATTRIBUTES})

    @classmethod
    def child_class(cls, tag: str) -> Optional[Type["Element"]]:
        """Return the element class registered for a child tag, if any."""
        for child_type in cls.CHILD_TYPES:
            if child_type.TAG == tag:
                return child_type
        return None

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------
    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    def set(self, name: str, value: AttributeValue) -> None:
        self.attributes[name] = format_value(value)

    def remove(self, name: str) -> None:
        self.attributes.pop(name, None)

    @property
    def declared_attributes(self) -> Dict[str, str]:
        """Attributes defined by the schema for this element kind."""
        return {k: v for k, v in self.attributes.items() if k in self.ATTRIBUTES}

    @property
    def extra_attributes(self) -> Dict[str, str]:
        """Attributes present in the source but not declared by the schema."""
        return {k: v for k, v in self.attributes.items() if k not in self.ATTRIBUTES}

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------
    def find(self, element_type: Type[E]) -> Optional[E]:
        """Return the first direct child of the given class, or None."""
        for child in self.children:
            if isinstance(child, element_type):
                return child
        return None

    def find_all(self, element_type: Type[E]) -> List[E]:
        """Return all direct children of the given class, in order."""
        return [child for child in self.children if isinstance(child, element_type)]

    def position_of(self, child: "Element") -> int:
        """
        Return the position of ``child`` among this element's children.

        Matches by identity: equal-valued siblings (e.g. a duplicate and its
        original) are distinct positions.

        Raises:
            ValueError: If ``child`` is not a direct child
        """
        for position, candidate in enumerate(self.children):
            if candidate is child:
                return position
        raise ValueError(f"<{child.tag}> is not a child of <{self.tag}>")

    def insert_after(self, anchor: "Element", new: "Element") -> None:
        """Insert ``new`` immediately after the ``anchor`` child."""
        self.children.insert(self.position_of(anchor) + 1, new)

    def append(self, child: "Element") -> None:
        self.children.append(child)

    def iter(self) -> Iterator["Element"]:
        """Yield this element and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter()

    def copy(self: E) -> E:
        """Return a deep value copy."""
        return copy.deepcopy(self)


@dataclass
class RawElement(Element):
    """
    An element whose tag the schema does not declare.

    Kept so that unrecognised markup (newer Scribus features, plug-in data)
    survives a load/save cycle unchanged.
    """

    name: str = ""

    @property
    def tag(self) -> str:
        return self.name
