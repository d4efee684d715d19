"""Tempile AST nodes.

The tree is a closed tagged union: every node class declares its
``NodeKind`` and the compiler dispatches on that tag.

Node Categories:
- **Structure**: Document, Import, Include, Slot, Content
- **Markup**: DocumentType, Comment, Text, Element (+ Attribute)
- **Control flow**: If, ElseIf, Else, For
- **Output**: Expr, RawExpr, RawCode
"""

from __future__ import annotations

from tempile.nodes.base import Attribute, Node, NodeKind, Pos, find_clause
from tempile.nodes.control_flow import Else, ElseIf, For, If
from tempile.nodes.markup import Comment, DocumentType, Element, Text
from tempile.nodes.output import Expr, RawCode, RawExpr
from tempile.nodes.structure import Content, Document, Import, Include, Slot

__all__ = [
    "Attribute",
    "Comment",
    "Content",
    "Document",
    "DocumentType",
    "Element",
    "Else",
    "ElseIf",
    "Expr",
    "For",
    "If",
    "Import",
    "Include",
    "Node",
    "NodeKind",
    "Pos",
    "RawCode",
    "RawExpr",
    "Slot",
    "Text",
    "find_clause",
]
