"""Character-level processing for SSML markup: the entity codec."""

from .entities import (
    BASIC_ENTITIES,
    QUOTE_ENTITIES,
    escape_entities,
    unescape_entities,
)

__all__ = [
    "BASIC_ENTITIES",
    "QUOTE_ENTITIES",
    "escape_entities",
    "unescape_entities",
]
