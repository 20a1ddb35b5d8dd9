"""Entity escaping and unescaping for SSML character data.

Escaping covers the five XML reserved characters. Unescaping recognizes only
``&lt;``, ``&gt;`` and ``&amp;``; any other ``&`` sequence passes through
verbatim unless quote decoding is requested explicitly.
"""

import re
from typing import Dict

# Order matters: "&" must be replaced before any substitution that introduces one
ESCAPE_SEQUENCE = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

BASIC_ENTITIES: Dict[str, str] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
}

QUOTE_ENTITIES: Dict[str, str] = {
    "&quot;": '"',
    "&apos;": "'",
}

_BASIC_PATTERN = re.compile("|".join(re.escape(ref) for ref in BASIC_ENTITIES))
_EXTENDED_PATTERN = re.compile(
    "|".join(re.escape(ref) for ref in {**BASIC_ENTITIES, **QUOTE_ENTITIES})
)
_EXTENDED_ENTITIES = {**BASIC_ENTITIES, **QUOTE_ENTITIES}


def escape_entities(text: str) -> str:
    """Replace reserved characters with their entity references.

    Args:
        text: Literal character data

    Returns:
        Text safe for use as element content or a double-quoted attribute value

    Examples:
        >>> escape_entities('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
    """
    for char, reference in ESCAPE_SEQUENCE:
        text = text.replace(char, reference)
    return text


def unescape_entities(text: str, decode_quotes: bool = False) -> str:
    """Resolve entity references back to literal characters.

    The scan is a single left-to-right pass, so ``&amp;lt;`` decodes to the
    literal ``&lt;`` rather than ``<``.

    Args:
        text: Escaped character data
        decode_quotes: Also decode ``&quot;`` and ``&apos;``

    Returns:
        Text with recognized references replaced
    """
    if "&" not in text:
        return text
    if decode_quotes:
        return _EXTENDED_PATTERN.sub(lambda m: _EXTENDED_ENTITIES[m.group(0)], text)
    return _BASIC_PATTERN.sub(lambda m: BASIC_ENTITIES[m.group(0)], text)
