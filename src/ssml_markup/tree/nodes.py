"""Node tree data model for parsed SSML markup.

A tree is rooted at exactly one node and owns its children outright: there are
no parent back-references. Text and attribute values always hold literal,
already-unescaped characters.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass(frozen=True)
class Attribute:
    """A single ``name="value"`` pair on an element."""

    name: str
    value: str = ""

    def __post_init__(self) -> None:
        """Validate attribute name."""
        if not self.name:
            raise ValueError("Attribute name cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class Text:
    """Character data between tags."""

    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "text", "value": self.value}


@dataclass
class Element:
    """A tagged element with ordered attributes and ordered children.

    Construction is permissive: an empty ``name`` is accepted and serializes to
    degenerate but well-defined markup.
    """

    name: str
    attributes: List[Attribute] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the value of the first attribute called ``name``."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return default

    def has_attribute(self, name: str) -> bool:
        """Check if element has a specific attribute."""
        return any(attribute.name == name for attribute in self.attributes)

    def set_attribute(self, name: str, value: str) -> None:
        """Replace the value of an existing attribute or append a new one."""
        for index, attribute in enumerate(self.attributes):
            if attribute.name == name:
                self.attributes[index] = Attribute(name, value)
                return
        self.attributes.append(Attribute(name, value))

    @property
    def child_elements(self) -> List["Element"]:
        """Direct children that are elements."""
        return [child for child in self.children if isinstance(child, Element)]

    def iter(self) -> Iterator["Node"]:
        """Iterate over this element and all descendants in document order."""
        stack: List["Node"] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Element):
                stack.extend(reversed(node.children))

    def find(self, name: str) -> Optional["Element"]:
        """Find first descendant element with matching name."""
        for node in self.iter():
            if node is not self and isinstance(node, Element) and node.name == name:
                return node
        return None

    def find_all(self, name: str) -> List["Element"]:
        """Find all descendant elements with matching name, in document order."""
        return [
            node for node in self.iter()
            if node is not self and isinstance(node, Element) and node.name == name
        ]

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes."""
        return "".join(node.value for node in self.iter() if isinstance(node, Text))

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        return {
            "type": "element",
            "name": self.name,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "children": [child.to_dict() for child in self.children],
        }


Node = Union[Element, Text]


def node_from_dict(data: Dict[str, Any]) -> Node:
    """Rebuild a node from the structure produced by ``to_dict``.

    Raises:
        ValueError: if ``data`` does not describe a node
    """
    node_type = data.get("type")
    if node_type == "text":
        return Text(data["value"])
    if node_type == "element":
        return Element(
            name=data["name"],
            attributes=[
                Attribute(item["name"], item.get("value", ""))
                for item in data.get("attributes", [])
            ],
            children=[node_from_dict(child) for child in data.get("children", [])],
        )
    raise ValueError(f"Unknown node type: {node_type!r}")
