"""Element lowering for the tempile compiler.

Provides mixin for lowering markup elements and their attributes.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from tempile.compiler.chunks import Chunk, text_chunk
from tempile.nodes import NodeKind
from tempile.utils.constants import VOID_ELEMENTS

if TYPE_CHECKING:
    from tempile.compiler.context import CompileContext
    from tempile.nodes import Attribute, Element, Expr, Node, Text


class ElementLoweringMixin:
    """Mixin for lowering elements.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From BasicLoweringMixin
        def _lower_text(self, node: Text, ctx: CompileContext) -> list[Chunk]: ...
        def _lower_expr(self, node: Expr, ctx: CompileContext) -> list[Chunk]: ...

        # From Compiler core
        def lower_children(
            self, nodes: Sequence[Node], ctx: CompileContext
        ) -> list[Chunk]: ...

    def _lower_element(self, node: Element, ctx: CompileContext) -> list[Chunk]:
        """Lower an element, its attributes and children.

        Generates (before merging):
            <tag                 (or <tag> when there are no attributes)
             name="  value...  "
            >
            children...
            </tag>               (omitted for void elements)

        Void elements that carry children still have those children lowered
        right after the opening tag; the parser does not reject them.
        """
        tag = node.tag
        chunks: list[Chunk] = []

        if node.attrs:
            chunks.append(text_chunk(f"<{tag}"))
            for attr in node.attrs:
                chunks.extend(self._lower_attribute(attr, ctx))
            chunks.append(text_chunk(">"))
        else:
            chunks.append(text_chunk(f"<{tag}>"))

        chunks.extend(self.lower_children(node.children, ctx))

        if tag not in VOID_ELEMENTS:
            chunks.append(text_chunk(f"</{tag}>"))

        return chunks

    def _lower_attribute(self, attr: Attribute, ctx: CompileContext) -> list[Chunk]:
        """Lower ` name="..."`, keeping text and expression parts in order."""
        chunks = [text_chunk(f' {attr.name}="')]
        for part in attr.value_nodes:
            if part.kind is NodeKind.TEXT:
                chunks.extend(self._lower_text(part, ctx))  # type: ignore[arg-type]
            elif part.kind is NodeKind.EXPR:
                chunks.extend(self._lower_expr(part, ctx))  # type: ignore[arg-type]
        chunks.append(text_chunk('"'))
        return chunks
