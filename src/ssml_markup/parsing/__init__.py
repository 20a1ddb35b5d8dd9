"""Scanning and recursive-descent parsing of SSML markup."""

from .cursor import Cursor
from .parser import MarkupParser

__all__ = [
    "Cursor",
    "MarkupParser",
]
