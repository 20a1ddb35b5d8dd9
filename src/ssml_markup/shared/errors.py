"""Exception types raised by SSML markup processing.

Parsing is fail-fast: every grammar violation surfaces synchronously as a
``MalformedMarkupError`` carrying the cursor offset and a reason code. No
partial tree is ever returned.
"""

from enum import Enum
from typing import List, Optional


class MalformedReason(Enum):
    """Reason codes for malformed markup."""

    UNTERMINATED_TAG = "unterminated tag"
    UNTERMINATED_ATTRIBUTE_VALUE = "unterminated attribute value"
    UNTERMINATED_TEXT = "unterminated text"
    EMPTY_TAG_NAME = "empty tag name"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"

    EMPTY_ATTRIBUTE_NAME = "empty attribute name"
    UNQUOTED_ATTRIBUTE_VALUE = "unquoted attribute value"
    UNEXPECTED_CLOSING_TAG = "unexpected closing tag"
    MISMATCHED_CLOSING_TAG = "mismatched closing tag"
    NESTING_TOO_DEEP = "nesting too deep"
    TRAILING_CONTENT = "trailing content"


class SSMLMarkupError(Exception):
    """Base exception for the ssml_markup package."""


class MalformedMarkupError(SSMLMarkupError):
    """Raised when input is not well-formed markup."""

    def __init__(
        self,
        offset: int,
        reason: MalformedReason,
        detail: Optional[str] = None
    ) -> None:
        self.offset = offset
        self.reason = reason
        self.detail = detail
        message = f"{reason.value} at offset {offset}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.offset, self.reason, self.detail))


class ConfigError(SSMLMarkupError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
