"""Public API for SSML markup parsing and serialization."""

from .parser import SSMLProcessor, parse, round_trip

__all__ = [
    "SSMLProcessor",
    "parse",
    "round_trip",
]
