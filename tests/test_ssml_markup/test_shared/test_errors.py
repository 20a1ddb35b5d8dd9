"""Tests for the exception types."""

import pickle

from ssml_markup.shared.errors import (
    ConfigValidationError,
    MalformedMarkupError,
    MalformedReason,
    SSMLMarkupError,
)


class TestMalformedMarkupError:
    """Test MalformedMarkupError attributes and message."""

    def test_attributes_and_message(self):
        error = MalformedMarkupError(4, MalformedReason.UNTERMINATED_TAG, "no '>'")

        assert error.offset == 4
        assert error.reason is MalformedReason.UNTERMINATED_TAG
        assert error.detail == "no '>'"
        assert str(error) == "unterminated tag at offset 4: no '>'"

    def test_message_without_detail(self):
        error = MalformedMarkupError(0, MalformedReason.UNEXPECTED_END_OF_INPUT)
        assert str(error) == "unexpected end of input at offset 0"

    def test_is_package_error(self):
        error = MalformedMarkupError(0, MalformedReason.EMPTY_TAG_NAME)
        assert isinstance(error, SSMLMarkupError)

    def test_pickle_round_trip(self):
        """Test the error survives pickling, e.g. across process pools."""
        error = MalformedMarkupError(7, MalformedReason.UNTERMINATED_TEXT, "detail")

        restored = pickle.loads(pickle.dumps(error))

        assert restored.offset == 7
        assert restored.reason is MalformedReason.UNTERMINATED_TEXT
        assert str(restored) == str(error)


class TestConfigValidationError:
    def test_defaults(self):
        error = ConfigValidationError("bad")
        assert error.field_name is None
        assert error.suggestions == []
        assert isinstance(error, SSMLMarkupError)
