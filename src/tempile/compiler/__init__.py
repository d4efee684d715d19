"""Tempile compiler: AST → chunks → Go source.

Pipeline:
1. **Lowering**: ``Compiler.lower`` turns each node into chunks
2. **Merging**: ``merge_chunks`` coalesces adjacent literal output
3. **Assembly**: ``assemble`` wraps the body in the fixed program layout
"""

from __future__ import annotations

from tempile.compiler.assembler import PROGRAM_LAYOUT, assemble, guarded_write
from tempile.compiler.chunks import Chunk, code_chunk, expr_chunk, merge_chunks, text_chunk
from tempile.compiler.context import CompileContext
from tempile.compiler.core import Compiler

__all__ = [
    "PROGRAM_LAYOUT",
    "Chunk",
    "CompileContext",
    "Compiler",
    "assemble",
    "code_chunk",
    "expr_chunk",
    "guarded_write",
    "merge_chunks",
    "text_chunk",
]
