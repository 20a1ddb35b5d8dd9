"""Recursive-descent parser for SSML markup.

The grammar is LL(1) at the character level: the character under the cursor
always decides the next step, so parsing is a single forward pass with no
backtracking. Any grammar violation raises ``MalformedMarkupError`` at the
offset where it was detected.

Grammar::

    node      := element | text
    element   := "<" name attribute* ( "/>" | ">" node* "</" any ">" )
    attribute := name ( "=" quote value quote )?
    text      := any character up to the next "<" or end of input
"""

from typing import List, Optional, Tuple

from ssml_markup.character import unescape_entities
from ssml_markup.shared import MalformedMarkupError, MalformedReason, ParserConfig
from ssml_markup.tree import Attribute, Element, Node, Text

from .cursor import WHITESPACE, Cursor

TAG_NAME_STOP = WHITESPACE | {">", "/"}
ATTR_NAME_STOP = WHITESPACE | {"=", ">", "/"}
TEXT_STOP = frozenset("<")
CLOSING_TAG_STOP = frozenset(">")
QUOTES = ("'", '"')


class MarkupParser:
    """Fail-fast SSML parser.

    A parser holds only its configuration. Each ``parse`` call builds its own
    cursor, so one instance can be shared freely between threads.
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, markup: str) -> Node:
        """Parse a complete markup string into a node tree.

        Args:
            markup: Markup text

        Returns:
            Root node of the tree, either an Element or a Text

        Raises:
            MalformedMarkupError: if the input is not well-formed
            TypeError: if ``markup`` is not a string
        """
        if not isinstance(markup, str):
            raise TypeError(f"markup must be str, not {type(markup).__name__}")

        cursor = Cursor(markup)
        if cursor.at_end:
            raise MalformedMarkupError(
                0, MalformedReason.UNEXPECTED_END_OF_INPUT, "input is empty"
            )
        if cursor.startswith("</"):
            raise MalformedMarkupError(
                0, MalformedReason.UNEXPECTED_CLOSING_TAG,
                "document cannot start with a closing tag"
            )

        root = self._parse_node(cursor, 0)

        if self.config.reject_trailing_content:
            cursor.skip_whitespace()
            if not cursor.at_end:
                raise MalformedMarkupError(
                    cursor.position, MalformedReason.TRAILING_CONTENT,
                    "unexpected content after the root node"
                )
        return root

    def _parse_node(self, cursor: Cursor, depth: int) -> Node:
        if cursor.peek() == "<" and cursor.peek(1) != "/":
            return self._parse_element(cursor, depth + 1)
        return self._parse_text(cursor)

    def _parse_element(self, cursor: Cursor, depth: int) -> Element:
        start = cursor.position
        if depth > self.config.max_depth:
            raise MalformedMarkupError(
                start, MalformedReason.NESTING_TOO_DEEP,
                f"nesting exceeds the maximum depth of {self.config.max_depth}"
            )

        cursor.advance()  # "<"
        name = self._parse_tag_name(cursor, start)
        attributes, self_closing = self._parse_attributes(cursor, start)
        element = Element(name, attributes)
        if self_closing:
            return element

        while not cursor.startswith("</"):
            if cursor.at_end:
                raise MalformedMarkupError(
                    cursor.position, MalformedReason.UNTERMINATED_TEXT,
                    f"<{name}> opened at offset {start} is never closed"
                )
            element.children.append(self._parse_node(cursor, depth))

        self._parse_closing_tag(cursor, name)
        return element

    def _parse_tag_name(self, cursor: Cursor, tag_start: int) -> str:
        name = cursor.read_until(TAG_NAME_STOP)
        if cursor.at_end:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.UNTERMINATED_TAG,
                f"tag opened at offset {tag_start} has no closing '>'"
            )
        if not name:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.EMPTY_TAG_NAME,
                f"tag opened at offset {tag_start} has no name"
            )
        return name

    def _parse_attributes(
        self, cursor: Cursor, tag_start: int
    ) -> Tuple[List[Attribute], bool]:
        """Parse attributes up to and including the end of the start tag.

        Returns:
            The attributes in document order and whether the tag was self-closed
        """
        attributes: List[Attribute] = []
        while True:
            cursor.skip_whitespace()
            char = cursor.peek()
            if char is None:
                raise MalformedMarkupError(
                    cursor.position, MalformedReason.UNTERMINATED_TAG,
                    f"tag opened at offset {tag_start} has no closing '>'"
                )
            if char == ">":
                cursor.advance()
                return attributes, False
            if char == "/":
                if cursor.peek(1) == ">":
                    cursor.advance(2)
                    return attributes, True
                raise MalformedMarkupError(
                    cursor.position, MalformedReason.UNTERMINATED_TAG,
                    "expected '>' after '/'"
                )
            attributes.append(self._parse_attribute(cursor))

    def _parse_attribute(self, cursor: Cursor) -> Attribute:
        name = cursor.read_until(ATTR_NAME_STOP)
        if not name:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.EMPTY_ATTRIBUTE_NAME,
                "'=' must follow an attribute name"
            )

        cursor.skip_whitespace()
        if cursor.peek() != "=":
            return Attribute(name)

        cursor.advance()  # "="
        cursor.skip_whitespace()
        quote = cursor.peek()
        if quote is None:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.UNTERMINATED_TAG,
                f"attribute {name!r} has no value"
            )
        if quote not in QUOTES:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.UNQUOTED_ATTRIBUTE_VALUE,
                f"value of attribute {name!r} must be quoted"
            )

        value_start = cursor.position
        cursor.advance()
        raw_value = cursor.read_until(frozenset(quote))
        if cursor.at_end:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.UNTERMINATED_ATTRIBUTE_VALUE,
                f"value of attribute {name!r} opened at offset {value_start} "
                f"has no closing {quote}"
            )
        cursor.advance()  # closing quote

        return Attribute(
            name, unescape_entities(raw_value, self.config.decode_quote_entities)
        )

    def _parse_closing_tag(self, cursor: Cursor, open_name: str) -> None:
        start = cursor.position
        cursor.advance(2)  # "</"
        closing_name = cursor.read_until(CLOSING_TAG_STOP)
        if cursor.at_end:
            raise MalformedMarkupError(
                cursor.position, MalformedReason.UNTERMINATED_TAG,
                f"closing tag at offset {start} has no closing '>'"
            )
        cursor.advance()  # ">"

        if self.config.strict_closing_tags and closing_name.rstrip() != open_name:
            raise MalformedMarkupError(
                start, MalformedReason.MISMATCHED_CLOSING_TAG,
                f"expected </{open_name}>, found </{closing_name}>"
            )

    def _parse_text(self, cursor: Cursor) -> Text:
        raw = cursor.read_until(TEXT_STOP)
        return Text(unescape_entities(raw, self.config.decode_quote_entities))
