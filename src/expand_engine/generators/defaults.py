"""Built-in generators and the default evaluation order."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from . import comments, lists, paragraphs, strings, treesit, words
from .models import GeneratorRef

AVAILABLE_GENERATORS: tuple[GeneratorRef, ...] = (
    GeneratorRef(
        id="subword",
        handler=words.subword,
        description="camelCase segments of the word at point",
    ),
    GeneratorRef(
        id="word",
        handler=words.word,
        description="Word, symbol and within-whitespace runs",
    ),
    GeneratorRef(
        id="list",
        handler=lists.list_walker,
        description="List family, recomputed inside strings and comments",
    ),
    GeneratorRef(
        id="inside-list",
        handler=lists.inside_list,
        description="Interior of the innermost enclosing list",
    ),
    GeneratorRef(
        id="list-at-point",
        handler=lists.list_at_point,
        description="List starting or ending at point",
    ),
    GeneratorRef(
        id="outside-list",
        handler=lists.outside_list,
        description="Every enclosing list, innermost first",
    ),
    GeneratorRef(
        id="string",
        handler=strings.string,
        description="Quoted string with and without delimiters",
    ),
    GeneratorRef(
        id="syntax-tree",
        handler=treesit.syntax_tree,
        description="Ancestors of the structural node at point",
    ),
    GeneratorRef(
        id="comment",
        handler=comments.comment,
        description="Block of adjacent comments",
    ),
    GeneratorRef(
        id="paragraph",
        handler=paragraphs.paragraph,
        description="Top-level declaration and prose paragraph",
    ),
)

DEFAULT_GENERATOR_ORDER: tuple[str, ...] = (
    "subword",
    "word",
    "list",
    "string",
    "syntax-tree",
    "comment",
    "paragraph",
)

_BY_ID: Dict[str, GeneratorRef] = {ref.id: ref for ref in AVAILABLE_GENERATORS}


def get_generator(generator_id: str) -> GeneratorRef:
    try:
        return _BY_ID[generator_id]
    except KeyError as exc:
        raise KeyError(f"Generator '{generator_id}' is not registered") from exc


def select_generators(ids: Iterable[str]) -> List[GeneratorRef]:
    """Return generators for ``ids`` in the order given."""

    return [get_generator(generator_id.strip()) for generator_id in ids if generator_id.strip()]


def default_generators(
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> List[GeneratorRef]:
    """Fresh, mutable list of the default generators in evaluation order."""

    filters = _build_filters(include, exclude)
    return [
        get_generator(generator_id)
        for generator_id in DEFAULT_GENERATOR_ORDER
        if _selected(generator_id, filters)
    ]


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "AVAILABLE_GENERATORS",
    "DEFAULT_GENERATOR_ORDER",
    "default_generators",
    "get_generator",
    "select_generators",
]
