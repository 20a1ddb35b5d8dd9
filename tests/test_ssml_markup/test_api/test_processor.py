"""Tests for the public parsing API."""

import logging

import pytest

from ssml_markup import (
    Attribute,
    Element,
    MalformedMarkupError,
    MalformedReason,
    ParserConfig,
    SSMLProcessor,
    Text,
    escape_entities,
    parse,
    round_trip,
    serialize,
    unescape_entities,
)


class TestLevelOneFunctions:
    """Test the module-level functions."""

    def test_parse_scenarios(self):
        assert parse("hello") == Text("hello")
        assert parse("<speak>hello</speak>") == Element("speak", [], [Text("hello")])
        assert parse('<say-as interpret-as="date">10/1</say-as>') == Element(
            "say-as", [Attribute("interpret-as", "date")], [Text("10/1")]
        )

    def test_parse_with_config(self):
        with pytest.raises(MalformedMarkupError):
            parse("<a>x</b>", ParserConfig.strict())

    def test_parse_fails_fast(self):
        with pytest.raises(MalformedMarkupError) as excinfo:
            parse("")
        assert excinfo.value.reason is MalformedReason.UNEXPECTED_END_OF_INPUT

    def test_serialize(self):
        element = Element("p", [Attribute("x", '1"2')])
        assert serialize(element) == '<p x="1&quot;2"></p>'

    def test_round_trip(self):
        assert round_trip("<break time='1s'/>") == '<break time="1s"></break>'

    def test_codec_exports(self):
        assert unescape_entities(escape_entities("<&>")) == "<&>"


class TestSSMLProcessor:
    """Test the configured processor."""

    def test_default_config(self):
        processor = SSMLProcessor()
        assert processor.config == ParserConfig()
        assert processor.correlation_id is None

    def test_parse_and_serialize(self):
        processor = SSMLProcessor()
        node = processor.parse("<a>&lt;b&gt;</a>")

        assert node == Element("a", [], [Text("<b>")])
        assert processor.serialize(node) == "<a>&lt;b&gt;</a>"

    def test_normalize(self):
        processor = SSMLProcessor()
        assert processor.normalize("<s a='1'>x</s>") == '<s a="1">x</s>'

    def test_is_well_formed(self):
        processor = SSMLProcessor(ParserConfig.strict())

        assert processor.is_well_formed("<speak>hi</speak>")
        assert not processor.is_well_formed("<speak>hi</say>")
        assert not processor.is_well_formed("<speak>")

    def test_statistics(self):
        processor = SSMLProcessor()
        processor.parse("<a>x</a>")
        with pytest.raises(MalformedMarkupError):
            processor.parse("<a>")

        stats = processor.statistics
        assert stats["parse_count"] == 2
        assert stats["successful_parses"] == 1
        assert stats["failed_parses"] == 1
        assert stats["total_processing_time_ms"] >= 0

        processor.reset_statistics()
        assert processor.statistics["parse_count"] == 0

    def test_malformed_input_logged_and_reraised(self, caplog):
        processor = SSMLProcessor(correlation_id="req-42")

        with caplog.at_level(logging.WARNING, logger="ssml_markup.api.parser"):
            with pytest.raises(MalformedMarkupError):
                processor.parse("<a b='v>")

        record = caplog.records[-1]
        assert record.getMessage() == "Malformed markup rejected"
        assert record.reason == "UNTERMINATED_ATTRIBUTE_VALUE"
        assert record.offset == 8
        assert record.correlation_id == "req-42"
        assert record.component == "ssml_processor"
