"""Public parsing API with progressive disclosure.

Level 1 is a set of plain functions (``parse``, ``serialize``,
``round_trip``) that neither log nor keep state. Level 2 is
``SSMLProcessor``, a configured, reusable object that adds correlation-aware
logging and usage statistics around the same core.
"""

import time
from typing import Any, Dict, Optional

from ssml_markup.parsing import MarkupParser
from ssml_markup.serialization import serialize
from ssml_markup.shared import MalformedMarkupError, ParserConfig, get_logger
from ssml_markup.tree import Node

MS_PER_SECOND = 1000


def parse(markup: str, config: Optional[ParserConfig] = None) -> Node:
    """Parse markup into a node tree.

    Args:
        markup: Complete markup string
        config: Optional parser configuration (lenient defaults otherwise)

    Returns:
        Root node of the parsed tree

    Raises:
        MalformedMarkupError: if the input is not well-formed

    Examples:
        >>> parse('<speak>hello</speak>').children[0].value
        'hello'
        >>> parse('hello').value
        'hello'
    """
    return MarkupParser(config).parse(markup)


def round_trip(markup: str, config: Optional[ParserConfig] = None) -> str:
    """Parse markup and serialize it again, normalizing quoting and escaping.

    Examples:
        >>> round_trip("<break time='1s'/>")
        '<break time="1s"></break>'
    """
    return serialize(parse(markup, config))


class SSMLProcessor:
    """Configured, reusable parser and serializer.

    Examples:
        >>> processor = SSMLProcessor(ParserConfig.strict())
        >>> processor.is_well_formed('<speak>hi</speak>')
        True
        >>> processor.normalize("<s a='1'>x</s>")
        '<s a="1">x</s>'
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "ssml_processor")
        self._parser = MarkupParser(self.config)

        self._parse_count = 0
        self._successful_parses = 0
        self._total_processing_time = 0.0

    def parse(self, markup: str) -> Node:
        """Parse markup, logging the outcome before returning or re-raising."""
        start_time = time.time()
        self._parse_count += 1
        try:
            node = self._parser.parse(markup)
        except MalformedMarkupError as e:
            self.logger.malformed(e, markup, extra={"parse_count": self._parse_count})
            raise
        finally:
            self._total_processing_time += (time.time() - start_time) * MS_PER_SECOND

        self._successful_parses += 1
        self.logger.debug(
            "Markup parsed",
            extra={"input_length": len(markup), "parse_count": self._parse_count}
        )
        return node

    def serialize(self, node: Node) -> str:
        return serialize(node)

    def normalize(self, markup: str) -> str:
        """Parse and re-serialize markup."""
        return serialize(self.parse(markup))

    def is_well_formed(self, markup: str) -> bool:
        """Check whether markup parses under this processor's configuration."""
        try:
            self.parse(markup)
        except MalformedMarkupError:
            return False
        return True

    @property
    def statistics(self) -> Dict[str, Any]:
        """Usage statistics accumulated across calls to ``parse``."""
        return {
            "parse_count": self._parse_count,
            "successful_parses": self._successful_parses,
            "failed_parses": self._parse_count - self._successful_parses,
            "total_processing_time_ms": self._total_processing_time,
        }

    def reset_statistics(self) -> None:
        self._parse_count = 0
        self._successful_parses = 0
        self._total_processing_time = 0.0
