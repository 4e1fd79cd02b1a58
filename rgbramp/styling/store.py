"""
Element stores: where styled elements live.

The applicator only needs three operations from a store, described by
:class:`ElementStore`. Two implementations ship with the package:

- :class:`InMemoryElementStore` holds plain :class:`Element` records
- :class:`MarkupElementStore` wraps an ``xml.etree.ElementTree`` document
  (XHTML, SVG) and edits each element's inline ``style`` attribute
"""
from __future__ import annotations
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class ElementStore(Protocol):
    def query_elements(self, marker: str) -> Sequence[Any]:
        """Elements carrying the ``marker`` attribute, in document order."""
        ...

    def read_attribute(self, handle: Any, marker: str) -> Optional[str]:
        ...

    def write_style(self, handle: Any, prop: str, value: str) -> None:
        ...


class Element:
    """A minimal element: a tag name, string attributes and a style map."""

    __slots__ = ('name', 'attributes', 'style')

    def __init__(self, attributes: Optional[Mapping[str, str]] = None, name: str = "div") -> None:
        self.name = name
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.style: Dict[str, str] = {}

    def __repr__(self) -> str:
        return f"Element({self.name!r}, {self.attributes!r})"


class InMemoryElementStore:
    """Ordered in-memory collection of :class:`Element` records."""

    def __init__(self, elements: Optional[Sequence[Element]] = None) -> None:
        self.elements: List[Element] = list(elements or [])
        # (element, property, value) for every write, in call order; kept until clear()
        self.writes: List[Tuple[Element, str, str]] = []

    def clear(self) -> None:
        """Forget recorded writes; element styles are left as they are."""
        self.writes.clear()

    def add(self, attributes: Mapping[str, str], name: str = "div") -> Element:
        element = Element(attributes, name)
        self.elements.append(element)
        return element

    def query_elements(self, marker: str) -> List[Element]:
        return [element for element in self.elements if marker in element.attributes]

    def read_attribute(self, handle: Element, marker: str) -> Optional[str]:
        return handle.attributes.get(marker)

    def write_style(self, handle: Element, prop: str, value: str) -> None:
        handle.style[prop] = value
        self.writes.append((handle, prop, value))


def parse_style(text: str) -> Dict[str, str]:
    """Split an inline ``style`` attribute into an ordered property map."""
    declarations: Dict[str, str] = {}
    for chunk in text.split(";"):
        prop, sep, value = chunk.partition(":")
        prop = prop.strip().lower()
        if not sep or not prop:
            continue
        declarations[prop] = value.strip()
    return declarations


def format_style(declarations: Mapping[str, str]) -> str:
    return "; ".join(f"{prop}: {value}" for prop, value in declarations.items())


class MarkupElementStore:
    """
    Element store over an ElementTree document.

    Style writes merge into the element's inline ``style`` attribute,
    overwriting an existing declaration of the same property in place.
    """

    def __init__(self, root: ET.Element) -> None:
        self.root = root

    @classmethod
    def from_string(cls, text: str) -> MarkupElementStore:
        return cls(ET.fromstring(text))

    def query_elements(self, marker: str) -> List[ET.Element]:
        return [element for element in self.root.iter() if marker in element.attrib]

    def read_attribute(self, handle: ET.Element, marker: str) -> Optional[str]:
        return handle.get(marker)

    def write_style(self, handle: ET.Element, prop: str, value: str) -> None:
        declarations = parse_style(handle.get("style", ""))
        declarations[prop.lower()] = value
        handle.set("style", format_style(declarations))

    def to_string(self) -> str:
        return ET.tostring(self.root, encoding="unicode")
