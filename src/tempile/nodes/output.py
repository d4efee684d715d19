"""Expression and raw code nodes for the tempile AST."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tempile.nodes.base import Node, NodeKind


@dataclass(slots=True)
class Expr(Node):
    """Escaped output expression: {{ data.Name }}"""

    kind: ClassVar[NodeKind] = NodeKind.EXPR

    expr: str


@dataclass(slots=True)
class RawExpr(Node):
    """Unescaped output expression, written as is."""

    kind: ClassVar[NodeKind] = NodeKind.RAW_EXPR

    expr: str


@dataclass(slots=True)
class RawCode(Node):
    """Block of host code tagged with its language."""

    kind: ClassVar[NodeKind] = NodeKind.RAW_CODE

    lang: str
    code: str
