"""Tempile Compiler Core: main Compiler class.

The Compiler lowers a tempile AST into chunks, merges adjacent literal
output, and assembles the Go source of a render function. Uses a
mixin-based design for maintainability.

Design Principles:
1. **Tagged dispatch**: Dict-based ``NodeKind`` → handler lookup
2. **Explicit state**: All per-compilation state lives in a CompileContext
   passed to every handler; the Compiler itself is immutable
3. **Fewest writes**: Adjacent literal chunks become one write call
4. **Verbatim host code**: Conditions, loop headers and expressions are
   copied into the output without validation

Generated code:

    ```go
    package views

    import (
        "fmt"
        "html"
        "io"
    )

    func Render(w io.Writer, data map[string]any) error {
        var err error
        if _, err = io.WriteString(w, `<p>Hello, `); err != nil {
            return err
        }
        if _, err = io.WriteString(w, html.EscapeString(fmt.Sprint(data["name"]))); err != nil {
            return err
        }
        if _, err = io.WriteString(w, `</p>`); err != nil {
            return err
        }
        return err
    }
    ```

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from tempile.compiler.assembler import assemble
from tempile.compiler.chunks import Chunk, merge_chunks
from tempile.compiler.context import CompileContext
from tempile.compiler.statements import StatementLoweringMixin
from tempile.nodes import NodeKind

if TYPE_CHECKING:
    from tempile.nodes import Node

logger = logging.getLogger(__name__)


class Compiler(StatementLoweringMixin):
    """Lower tempile AST nodes to Go source.

    The Compiler holds nothing but its dispatch table, so one instance can
    serve any number of concurrent compilations as long as each passes its
    own CompileContext.

    Node Dispatch:
        Uses O(1) dict lookup for node kind → handler:
            ```python
            dispatch = {
                NodeKind.TEXT: self._lower_text,
                NodeKind.ELEMENT: self._lower_element,
                NodeKind.IF: self._lower_if,
                ...
            }
            handler = dispatch.get(node.kind)
            ```

        Kinds without a handler (Include, Slot and Content left behind by
        the resolver, or kinds added by a newer parser) lower to nothing.

    Example:
            >>> from tempile.compiler import Compiler, CompileContext
            >>> from tempile.nodes import Element, Text
            >>>
            >>> compiler = Compiler()
            >>> ctx = CompileContext()
            >>> chunks = compiler.lower(Element("p", children=[Text("hi")]), ctx)
            >>> [c.data for c in compiler.merge(chunks)]
            ['<p>hi</p>']

    """

    __slots__ = ("_node_dispatch",)

    def __init__(self) -> None:
        self._node_dispatch: dict[NodeKind, Callable[[Any, CompileContext], list[Chunk]]] = {
            NodeKind.IMPORT: self._lower_import,
            NodeKind.DOCUMENT_TYPE: self._lower_document_type,
            NodeKind.COMMENT: self._lower_comment,
            NodeKind.TEXT: self._lower_text,
            NodeKind.ELEMENT: self._lower_element,
            NodeKind.IF: self._lower_if,
            NodeKind.FOR: self._lower_for,
            NodeKind.RAW_CODE: self._lower_raw_code,
            NodeKind.RAW_EXPR: self._lower_raw_expr,
            NodeKind.EXPR: self._lower_expr,
        }

    def lower(self, node: Node, ctx: CompileContext) -> list[Chunk]:
        """Lower one node (and its subtree) to chunks.

        Args:
            node: Any tempile AST node
            ctx: Tracker for the current compilation, updated in place

        Returns:
            Chunks in pre-order, unmerged

        Raises:
            LoweringError: A control node lacks its go-cond/go-loop clause
        """
        handler = self._node_dispatch.get(node.kind)
        if handler is None:
            logger.debug("Skipping %s node at %s", node.kind.value, node.pos)
            return []
        return handler(node, ctx)

    def lower_children(self, nodes: Sequence[Node], ctx: CompileContext) -> list[Chunk]:
        """Lower a sequence of sibling nodes, stopping at the first error."""
        chunks: list[Chunk] = []
        for child in nodes:
            chunks.extend(self.lower(child, ctx))
        return chunks

    def merge(self, chunks: Sequence[Chunk | None]) -> list[Chunk]:
        return merge_chunks(chunks)

    def compile(
        self,
        nodes: Sequence[Node],
        *,
        package_name: str,
        template_name: str,
        ctx: CompileContext | None = None,
    ) -> str:
        """Compile top-level nodes to unformatted Go source.

        Args:
            nodes: Top-level children of the resolved Document
            package_name: Go package clause of the generated file
            template_name: Name of the generated render function
            ctx: Tracker to use; a fresh one is created when omitted

        Returns:
            Go source text, not yet passed through a formatter
        """
        if ctx is None:
            ctx = CompileContext()

        chunks = self.lower_children(nodes, ctx)
        merged = self.merge(chunks)
        logger.debug(
            "Lowered %s: %d chunks, %d after merge", template_name, len(chunks), len(merged)
        )

        return assemble(
            merged,
            ctx,
            package_name=package_name,
            template_name=template_name,
        )
