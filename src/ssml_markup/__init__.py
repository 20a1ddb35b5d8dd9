"""SSML Markup.

A fail-fast parser and serializer for the subset of XML used to annotate text
for speech synthesis: elements, ordered attributes, character data and entity
escaping. Parsing then serializing round-trips any tree the parser produces.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), serialize(), round_trip()
- Level 2: Configured processor - SSMLProcessor class
"""

__version__ = "0.1.0"
__author__ = "SSML Markup Team"

from .api import SSMLProcessor, parse, round_trip
from .character import escape_entities, unescape_entities
from .serialization import serialize
from .shared import MalformedMarkupError, MalformedReason, ParserConfig
from .tree import Attribute, Element, Node, Text

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "parse",
    "serialize",
    "round_trip",
    "escape_entities",
    "unescape_entities",

    # Level 2: Configured processor
    "SSMLProcessor",
    "ParserConfig",

    # Tree and errors
    "Attribute",
    "Element",
    "Node",
    "Text",
    "MalformedMarkupError",
    "MalformedReason",
]
