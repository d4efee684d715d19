"""Control flow nodes for the tempile AST."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tempile.nodes.base import Attribute, Node, NodeKind, find_clause
from tempile.utils.constants import COND_CLAUSE, LOOP_CLAUSE


@dataclass(slots=True)
class ElseIf(Node):
    """Additional branch of an If: <elseif go-cond="...">"""

    kind: ClassVar[NodeKind] = NodeKind.ELSE_IF

    conds: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    @property
    def cond(self) -> str | None:
        return find_clause(self.conds, COND_CLAUSE)


@dataclass(slots=True)
class Else(Node):
    """Fallback branch of an If: <else>"""

    kind: ClassVar[NodeKind] = NodeKind.ELSE

    children: list[Node] = field(default_factory=list)


@dataclass(slots=True)
class If(Node):
    """Conditional: <if go-cond="...">...<elseif>...<else>...</if>"""

    kind: ClassVar[NodeKind] = NodeKind.IF

    conds: list[Attribute] = field(default_factory=list)
    then: list[Node] = field(default_factory=list)
    else_ifs: list[ElseIf] = field(default_factory=list)
    else_: Else | None = None

    @property
    def cond(self) -> str | None:
        return find_clause(self.conds, COND_CLAUSE)


@dataclass(slots=True)
class For(Node):
    """Loop: <for go-loop="i, v := range data.Items">...</for>"""

    kind: ClassVar[NodeKind] = NodeKind.FOR

    loops: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    @property
    def loop(self) -> str | None:
        return find_clause(self.loops, LOOP_CLAUSE)
