"""Document structure nodes for the tempile AST.

Include, Slot and Content belong to the resolver. By the time a tree is
compiled they should have been replaced by the nodes they stand for; any
left over are ignored by the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tempile.nodes.base import Attribute, Node, NodeKind


@dataclass(slots=True)
class Document(Node):
    """Root of a parsed template."""

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)
    filename: str = ""


@dataclass(slots=True)
class Import(Node):
    """Package import declaration: <import go="strings">"""

    kind: ClassVar[NodeKind] = NodeKind.IMPORT

    attrs: list[Attribute] = field(default_factory=list)


@dataclass(slots=True)
class Include(Node):
    """Reference to another template file: <include src="header.html">"""

    kind: ClassVar[NodeKind] = NodeKind.INCLUDE

    src: str
    children: list[Node] = field(default_factory=list)


@dataclass(slots=True)
class Slot(Node):
    """Placeholder inside an included template."""

    kind: ClassVar[NodeKind] = NodeKind.SLOT

    name: str
    children: list[Node] = field(default_factory=list)


@dataclass(slots=True)
class Content(Node):
    """Content supplied by the including template for a named slot."""

    kind: ClassVar[NodeKind] = NodeKind.CONTENT

    name: str
    children: list[Node] = field(default_factory=list)
