"""Node tree data model for SSML markup.

Key Components:
    Element: Tagged node with ordered attributes and children
    Text: Unescaped character data
    Attribute: Name/value pair on an element
"""

from .nodes import (
    Attribute,
    Element,
    Node,
    Text,
    node_from_dict,
)

__all__ = [
    "Attribute",
    "Element",
    "Node",
    "Text",
    "node_from_dict",
]
