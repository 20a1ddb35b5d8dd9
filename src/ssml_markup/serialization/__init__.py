"""Serialization of SSML node trees."""

from .serializer import serialize

__all__ = ["serialize"]
