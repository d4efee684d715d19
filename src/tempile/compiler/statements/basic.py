"""Basic node lowering for the tempile compiler.

Provides mixin for lowering leaf nodes: literal text, expressions, raw
code, and import declarations.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempile.compiler.chunks import Chunk, code_chunk, expr_chunk, text_chunk
from tempile.utils.constants import HOST_LANG

if TYPE_CHECKING:
    from tempile.compiler.context import CompileContext
    from tempile.nodes import Comment, DocumentType, Expr, Import, RawCode, RawExpr, Text

logger = logging.getLogger(__name__)


class BasicLoweringMixin:
    """Mixin for lowering leaf nodes.

    Every method returns a list so the dispatcher can treat all node kinds
    alike; leaf nodes yield at most one chunk.
    """

    def _lower_import(self, node: Import, ctx: CompileContext) -> list[Chunk]:
        """Record declared packages. Produces no output."""
        ctx.add_imports(*(attr.value for attr in node.attrs if attr.name == HOST_LANG))
        return []

    def _lower_document_type(self, node: DocumentType, ctx: CompileContext) -> list[Chunk]:
        return [text_chunk(node.data)]

    def _lower_comment(self, node: Comment, ctx: CompileContext) -> list[Chunk]:
        return [text_chunk(node.data)]

    def _lower_text(self, node: Text, ctx: CompileContext) -> list[Chunk]:
        return [text_chunk(node.data)]

    def _lower_expr(self, node: Expr, ctx: CompileContext) -> list[Chunk]:
        """Lower {{ expr }} to an escaped, stringified write.

        Generates:
            html.EscapeString(fmt.Sprint(<expr>))

        The expression text is not validated; a bad expression surfaces
        when the generated program is formatted or compiled.
        """
        ctx.uses_escape = True
        ctx.uses_fmt = True
        return [expr_chunk(f"html.EscapeString(fmt.Sprint({node.expr}))")]

    def _lower_raw_expr(self, node: RawExpr, ctx: CompileContext) -> list[Chunk]:
        """Lower an unescaped expression; the author vouches for its output."""
        return [expr_chunk(node.expr)]

    def _lower_raw_code(self, node: RawCode, ctx: CompileContext) -> list[Chunk]:
        """Splice host code into the function body.

        Blocks written for another language are dropped.
        """
        if node.lang != HOST_LANG:
            logger.debug("Dropping %s raw code block at %s", node.lang or "untagged", node.pos)
            return []
        return [code_chunk(f"{node.code}\n")]
