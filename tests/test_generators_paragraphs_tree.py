from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from expand_engine.buffer import Buffer
from expand_engine.generators import paragraph, syntax_tree
from expand_engine.generators.paragraphs import paragraph_bounds
from expand_engine.parsers import IndentedDeclarations, ParserSet, TreeSitterParser
from expand_engine.spans import Span
from expand_engine.syntax import SyntaxView

PROSE = "one\ntwo\n\nthree\n"
MODULE = "import os\n\n@wrap\ndef f(x):\n    return x\n\n\nclass C:\n    pass\n"


@dataclass
class FakeNode:
    begin: int
    end: int
    parent: Optional["FakeNode"] = None


class FakeParser:
    def __init__(self, leaf: FakeNode, language: str = "fake") -> None:
        self.leaf = leaf
        self.language = language

    def node_at(self, position: int) -> Optional[FakeNode]:
        return self.leaf

    def parent(self, node: FakeNode) -> Optional[FakeNode]:
        return node.parent

    def node_range(self, node: FakeNode) -> Tuple[int, int]:
        return node.begin, node.end

    def is_root(self, node: FakeNode) -> bool:
        return node.parent is None


def make_chain() -> FakeNode:
    root = FakeNode(0, 20)
    middle = FakeNode(2, 10, root)
    return FakeNode(4, 6, middle)


def test_paragraph_bounds() -> None:
    view = SyntaxView(PROSE)

    assert paragraph_bounds(view, 1) == Span(0, 7)
    assert paragraph_bounds(view, 11) == Span(9, 14)
    assert paragraph_bounds(view, 8) is None


def test_prose_paragraph_generator() -> None:
    buffer = Buffer.from_text(PROSE, cursor=11, prose=True)

    results = paragraph(buffer)

    assert [c.span for c in results] == [Span(9, 14)]
    assert results[0].producer == "paragraph"


def test_indented_declarations_include_decorators() -> None:
    finder = IndentedDeclarations()

    assert finder.bounds_at(MODULE, 30) == Span(11, 39)
    assert finder.bounds_at(MODULE, 5) == Span(0, 9)
    assert finder.bounds_at(MODULE, 40) is None


def test_declaration_skipped_when_cursor_at_its_end() -> None:
    text = "def f():\n    pass\n"
    inside = Buffer.from_text(text, cursor=4, declarations=IndentedDeclarations())
    at_end = Buffer.from_text(text, cursor=17, declarations=IndentedDeclarations())

    assert [c.span for c in paragraph(inside)] == [Span(0, 17)]
    assert paragraph(inside)[0].producer == "paragraph-defun"
    assert paragraph(at_end) == []


def test_syntax_tree_walks_ancestors_without_root() -> None:
    parsers = ParserSet()
    parsers.attach(FakeParser(make_chain()))
    buffer = Buffer.from_text("x" * 20, cursor=5, parsers=parsers)

    results = syntax_tree(buffer)

    assert [c.span for c in results] == [Span(4, 6), Span(2, 10)]
    assert {c.producer for c in results} == {"fake"}


def test_local_parsers_only_apply_inside_scope() -> None:
    shared = FakeParser(make_chain(), language="outer")
    embedded = FakeParser(FakeNode(16, 18, FakeNode(15, 20)), language="inner")
    parsers = ParserSet()
    parsers.attach(shared)
    parsers.attach(embedded, scope=Span(15, 20))

    assert parsers.at(5) == [shared]
    assert parsers.at(17) == [shared, embedded]
    assert parsers.detach(embedded)
    assert len(parsers) == 1


@dataclass
class FakeTSNode:
    start_byte: int
    end_byte: int
    parent: Optional["FakeTSNode"] = None


class FakeTSRoot(FakeTSNode):
    def __init__(self, child_range: Tuple[int, int]) -> None:
        super().__init__(0, 8)
        self.child = FakeTSNode(*child_range, parent=self)
        self.queries: list[Tuple[int, int]] = []

    def descendant_for_byte_range(self, start: int, end: int) -> FakeTSNode:
        self.queries.append((start, end))
        return self.child


@dataclass
class FakeTree:
    root_node: FakeTSRoot


def test_tree_sitter_adapter_maps_bytes_to_characters() -> None:
    text = "é = (1)"
    root = FakeTSRoot((5, 8))
    parser = TreeSitterParser(FakeTree(root), text, language="python")

    node = parser.node_at(5)

    assert root.queries == [(6, 6)]
    assert parser.node_range(node) == (4, 7)
    assert not parser.is_root(node)
    assert parser.is_root(parser.parent(node))
    assert parser.char_offset(2) == 1


def test_declaration_respects_narrowing() -> None:
    text = "def f():\n    x = 1\n    y = 2\n"
    buffer = Buffer.from_text(text, cursor=14, declarations=IndentedDeclarations())

    with buffer.narrowed(13, 18):
        results = paragraph(buffer)

    assert [c.span for c in results] == [Span(13, 18)]
    assert [c.span for c in paragraph(buffer)] == [Span(0, 28)]
