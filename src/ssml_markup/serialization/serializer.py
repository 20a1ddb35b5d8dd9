"""Serialization of node trees back into escaped SSML markup.

Serialization is total for any tree of ``Element`` and ``Text`` nodes,
however deeply nested. An element without children is always written with an
explicit closing tag, so self-closed input such as ``<break/>`` comes back as
``<break></break>``.
"""

from typing import List, Union

from ssml_markup.character import escape_entities
from ssml_markup.tree import Element, Node, Text


class _ClosingTag(str):
    """Closing tag waiting on the stack until its children are written."""


def serialize(node: Node) -> str:
    """Convert a node tree to markup text.

    Args:
        node: Root of the tree to serialize

    Returns:
        Escaped markup string

    Examples:
        >>> from ssml_markup.tree import Attribute, Element, Text
        >>> serialize(Element("p", [Attribute("x", '1"2')]))
        '<p x="1&quot;2"></p>'
        >>> serialize(Text("a < b"))
        'a &lt; b'
    """
    parts: List[str] = []
    stack: List[Union[Node, _ClosingTag]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, _ClosingTag):
            parts.append(item)
        elif isinstance(item, Text):
            parts.append(escape_entities(item.value))
        elif isinstance(item, Element):
            parts.append(_start_tag(item))
            stack.append(_ClosingTag(f"</{item.name}>"))
            stack.extend(reversed(item.children))
        else:
            raise TypeError(f"Cannot serialize {type(item).__name__}")
    return "".join(parts)


def _start_tag(element: Element) -> str:
    attributes = "".join(
        f' {attribute.name}="{escape_entities(attribute.value)}"'
        for attribute in element.attributes
    )
    return f"<{element.name}{attributes}>"
