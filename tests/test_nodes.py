"""Test AST node accessors and kind tags."""

import pytest

from tempile.nodes import (
    Attribute,
    Comment,
    Content,
    Document,
    DocumentType,
    Element,
    Else,
    ElseIf,
    Expr,
    For,
    If,
    Import,
    Include,
    NodeKind,
    Pos,
    RawCode,
    RawExpr,
    Slot,
    Text,
    find_clause,
)


class TestKinds:
    """Every variant carries a distinct class-level tag."""

    def test_kinds_are_unique(self):
        classes = [
            Document, Import, DocumentType, Comment, Text, Element, If, ElseIf,
            Else, For, RawCode, RawExpr, Expr, Include, Slot, Content,
        ]
        kinds = [cls.kind for cls in classes]
        assert len(set(kinds)) == len(classes) == len(NodeKind)

    def test_instance_kind(self):
        assert Text("x").kind is NodeKind.TEXT


class TestClauses:
    """Clause lookup on control nodes."""

    def test_find_clause_first_match(self):
        clauses = [Attribute("a", "1"), Attribute("b", "2"), Attribute("b", "3")]
        assert find_clause(clauses, "b") == "2"
        assert find_clause(clauses, "c") is None

    @pytest.mark.parametrize(
        ("node", "attr", "expected"),
        [
            (If(conds=[Attribute("go-cond", "x > 1")]), "cond", "x > 1"),
            (ElseIf(conds=[Attribute("go-cond", "y")]), "cond", "y"),
            (For(loops=[Attribute("go-loop", "_, v := range xs")]), "loop", "_, v := range xs"),
            (If(), "cond", None),
            (For(loops=[Attribute("go-cond", "x")]), "loop", None),
        ],
    )
    def test_accessors(self, node, attr, expected):
        assert getattr(node, attr) == expected


class TestPos:
    def test_default_position(self):
        assert Text("x").pos == Pos()

    def test_str(self):
        assert str(Pos("a.html", 3, 7)) == "a.html:3:7"
        assert str(Pos()) == "<template>:0:0"

    def test_pos_is_keyword_only(self):
        node = Element("div", pos=Pos("a.html", 1, 2))
        assert node.tag == "div"
        assert node.pos.column == 2
