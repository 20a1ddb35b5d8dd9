"""Command-line interface for SSML markup parsing and validation."""

from .main import main

__all__ = ["main"]
