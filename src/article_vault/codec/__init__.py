"""Front matter codec for article files."""

from .frontmatter import decode, encode

__all__ = ["decode", "encode"]
