"""Markup nodes: literal text and elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from tempile.nodes.base import Attribute, Node, NodeKind


@dataclass(slots=True)
class DocumentType(Node):
    """Doctype declaration: <!DOCTYPE html>"""

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT_TYPE

    data: str


@dataclass(slots=True)
class Comment(Node):
    """Markup comment, emitted verbatim: <!-- ... -->"""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    data: str


@dataclass(slots=True)
class Text(Node):
    """Raw text between markup constructs."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    data: str


@dataclass(slots=True)
class Element(Node):
    """Markup element: <tag attr="...">children</tag>"""

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    tag: str
    attrs: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
