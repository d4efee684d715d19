"""Control flow lowering for the tempile compiler.

Provides mixin for lowering if/elseif/else chains and for loops into Go
statements wrapped around their lowered children.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from tempile.compiler.chunks import Chunk, code_chunk
from tempile.environment.exceptions import LoweringError
from tempile.utils.constants import COND_CLAUSE, LOOP_CLAUSE

if TYPE_CHECKING:
    from tempile.compiler.context import CompileContext
    from tempile.nodes import Else, ElseIf, For, If, Node


class ControlFlowMixin:
    """Mixin for lowering control flow nodes.

    Condition and loop-header text is copied into the generated statement
    as is. The only check performed is that the clause exists, since
    without it no statement can be generated at all.
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From Compiler core
        def lower_children(
            self, nodes: Sequence[Node], ctx: CompileContext
        ) -> list[Chunk]: ...

    def _lower_if(self, node: If, ctx: CompileContext) -> list[Chunk]:
        """Lower an if/elseif/else chain.

        Generates:
            if <cond> {
            ...
            }else if <cond> {
            ...
            }else {
            ...
            }

        Closing braces carry no newline so that ``else`` stays on the same
        line; a single newline chunk ends the whole chain.
        """
        cond = node.cond
        if not cond:
            raise LoweringError("if", COND_CLAUSE, node.pos)

        chunks = [code_chunk(f"if {cond} {{\n")]
        chunks.extend(self.lower_children(node.then, ctx))
        chunks.append(code_chunk("}"))

        for else_if in node.else_ifs:
            chunks.extend(self._lower_else_if(else_if, ctx))

        if node.else_ is not None:
            chunks.extend(self._lower_else(node.else_, ctx))

        chunks.append(code_chunk("\n"))
        return chunks

    def _lower_else_if(self, node: ElseIf, ctx: CompileContext) -> list[Chunk]:
        cond = node.cond
        if not cond:
            raise LoweringError("elseif", COND_CLAUSE, node.pos)

        chunks = [code_chunk(f"else if {cond} {{\n")]
        chunks.extend(self.lower_children(node.children, ctx))
        chunks.append(code_chunk("}"))
        return chunks

    def _lower_else(self, node: Else, ctx: CompileContext) -> list[Chunk]:
        chunks = [code_chunk("else {\n")]
        chunks.extend(self.lower_children(node.children, ctx))
        chunks.append(code_chunk("}"))
        return chunks

    def _lower_for(self, node: For, ctx: CompileContext) -> list[Chunk]:
        """Lower a loop.

        Generates:
            for <header> {
            ...
            }
        """
        loop = node.loop
        if not loop:
            raise LoweringError("for", LOOP_CLAUSE, node.pos)

        chunks = [code_chunk(f"for {loop} {{\n")]
        chunks.extend(self.lower_children(node.children, ctx))
        chunks.append(code_chunk("}\n"))
        return chunks
