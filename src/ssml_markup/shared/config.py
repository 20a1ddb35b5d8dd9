"""Configuration classes for SSML markup processing.

Configuration objects are frozen dataclasses validated on construction, so a
single instance can be shared between parser instances and threads.
"""

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigValidationError

# Each nesting level costs two interpreter frames in the recursive parser
DEFAULT_MAX_DEPTH = 200
MAX_SUPPORTED_DEPTH = 400


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the markup parser.

    The defaults reproduce the lenient reference grammar: closing tag names are
    not checked against the opening tag, trailing content after the root node
    is ignored, and only ``&lt;``, ``&gt;`` and ``&amp;`` are decoded.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_closing_tags: bool = False
    reject_trailing_content: bool = False
    decode_quote_entities: bool = False

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise ConfigValidationError(
                "max_depth must be an integer", field_name="max_depth"
            )
        if not (1 <= self.max_depth <= MAX_SUPPORTED_DEPTH):
            raise ConfigValidationError(
                f"max_depth must be between 1 and {MAX_SUPPORTED_DEPTH}",
                field_name="max_depth",
                suggestions=[f"Use a value no greater than {MAX_SUPPORTED_DEPTH}"],
            )

    @classmethod
    def lenient(cls) -> "ParserConfig":
        """Create the default, reference-compatible configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "ParserConfig":
        """Create configuration that also rejects mismatched and trailing markup."""
        return cls(strict_closing_tags=True, reject_trailing_content=True)

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> ParserConfig().override(max_depth=32).max_depth
            32
        """
        unknown = set(kwargs) - set(self.__dataclass_fields__)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(sorted(unknown))}"
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {key: value for key, value in data.items()
                 if key in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_json_file(cls, path: Path) -> "ParserConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigValidationError: if the file is not valid JSON or holds
                invalid values
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigValidationError(f"Could not load config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration file must contain a JSON object")
        return cls.from_dict(data)


@dataclass(frozen=True)
class CacheConfig:
    """Configuration for the bounded TTL cache."""

    ttl_ms: float
    item_limit: int

    def __post_init__(self) -> None:
        """Validate cache configuration."""
        if self.ttl_ms <= 0:
            raise ConfigValidationError("ttl_ms must be > 0", field_name="ttl_ms")
        if self.item_limit <= 0:
            raise ConfigValidationError(
                "item_limit must be > 0", field_name="item_limit"
            )
