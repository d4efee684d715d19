"""Base node types for the tempile AST."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeKind(Enum):
    """Closed set of node variants.

    The compiler dispatches on this tag instead of the node's Python type,
    so parsers may supply any object that exposes ``kind`` and the matching
    attributes.
    """

    DOCUMENT = "document"
    IMPORT = "import"
    DOCUMENT_TYPE = "doctype"
    COMMENT = "comment"
    TEXT = "text"
    ELEMENT = "element"
    IF = "if"
    ELSE_IF = "elseif"
    ELSE = "else"
    FOR = "for"
    RAW_CODE = "rawcode"
    RAW_EXPR = "rawexpr"
    EXPR = "expr"
    INCLUDE = "include"
    SLOT = "slot"
    CONTENT = "content"


@dataclass(frozen=True, slots=True)
class Pos:
    """Source position of a node, used for diagnostics only."""

    filename: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename or '<template>'}:{self.line}:{self.column}"


@dataclass(slots=True)
class Node:
    """Base class for all AST nodes.

    Nodes are mutable: include resolution and slot matching rewrite the
    tree in place before it reaches the compiler.
    """

    kind: ClassVar[NodeKind]

    pos: Pos = field(default_factory=Pos, kw_only=True)


@dataclass(slots=True)
class Attribute:
    """Name/value pair on an element, import or control node.

    ``value`` holds the plain value (import paths, ``go-cond`` and
    ``go-loop`` clauses). ``value_nodes`` holds the interleaved Text and
    Expr nodes of an element attribute, in source order.
    """

    name: str
    value: str = ""
    value_nodes: list[Node] = field(default_factory=list)


def find_clause(clauses: list[Attribute], name: str) -> str | None:
    """Return the value of the first clause called ``name``, if any."""
    for clause in clauses:
        if clause.name == name:
            return clause.value
    return None
