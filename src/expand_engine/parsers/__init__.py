"""Structural capabilities consumed by the generators."""

from .base import ParserAttachment, ParserSet, StructuralParser
from .declarations import DeclarationFinder, IndentedDeclarations
from .treesitter import TreeSitterParser

__all__ = [
    "StructuralParser",
    "ParserAttachment",
    "ParserSet",
    "DeclarationFinder",
    "IndentedDeclarations",
    "TreeSitterParser",
]
