"""Intermediate chunk representation and the chunk merger.

Lowering turns every node into a flat list of chunks. A chunk is either
output the generated function writes at render time (``writable``) or Go
statements spliced into the function body. Writable chunks flagged
``no_merge`` hold a Go expression rather than literal text and always get a
write call of their own.

Before:
    [<p>] [Hello, ] [html.EscapeString(...)*] [</p>] [if x {]

After merge_chunks:
    [<p>Hello, ] [html.EscapeString(...)*] [</p>] [if x {]
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Chunk:
    """One lowered fragment.

    Attributes:
        writable: True for render-time output, False for control code
        data: Literal text, Go expression, or Go statements
        no_merge: True if ``data`` is a Go expression to write on its own
    """

    writable: bool
    data: str
    no_merge: bool = False

    @property
    def mergeable(self) -> bool:
        """Literal output that may be concatenated with its neighbours."""
        return self.writable and not self.no_merge


def text_chunk(data: str) -> Chunk:
    """Literal output chunk."""
    return Chunk(writable=True, data=data)


def expr_chunk(expr: str) -> Chunk:
    """Output chunk whose data is a Go string expression."""
    return Chunk(writable=True, data=expr, no_merge=True)


def code_chunk(code: str) -> Chunk:
    """Control chunk spliced into the function body verbatim."""
    return Chunk(writable=False, data=code)


def merge_chunks(chunks: Iterable[Chunk | None]) -> list[Chunk]:
    """Coalesce runs of literal output into single chunks.

    Order is preserved and the concatenated output is unchanged; only the
    grouping of adjacent literal chunks differs. ``None`` entries and
    chunks with empty data are skipped, so no empty write or statement
    reaches the assembler.
    """
    merged: list[Chunk] = []
    buffer: list[str] = []

    def flush() -> None:
        text = "".join(buffer)
        buffer.clear()
        if text:
            merged.append(text_chunk(text))

    for chunk in chunks:
        if chunk is None or not chunk.data:
            continue
        if chunk.mergeable:
            buffer.append(chunk.data)
            continue
        flush()
        merged.append(chunk)

    flush()
    return merged
