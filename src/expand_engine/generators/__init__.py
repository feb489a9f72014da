"""Candidate generators: each maps a buffer and its cursor to spans."""

from .comments import comment
from .defaults import (
    AVAILABLE_GENERATORS,
    DEFAULT_GENERATOR_ORDER,
    default_generators,
    get_generator,
    select_generators,
)
from .lists import (
    ListClimb,
    climb_lists,
    inside_list,
    list_at_point,
    list_family,
    list_walker,
    outside_list,
)
from .models import GeneratorRef
from .paragraphs import paragraph
from .strings import string
from .treesit import syntax_tree
from .words import subword, word

__all__ = [
    "GeneratorRef",
    "AVAILABLE_GENERATORS",
    "DEFAULT_GENERATOR_ORDER",
    "default_generators",
    "get_generator",
    "select_generators",
    "ListClimb",
    "climb_lists",
    "list_family",
    "subword",
    "word",
    "list_walker",
    "inside_list",
    "list_at_point",
    "outside_list",
    "string",
    "syntax_tree",
    "comment",
    "paragraph",
]
