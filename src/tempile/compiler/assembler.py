"""Program assembly: merged chunks → Go source.

Every write in the generated function is guarded: the first failed write
returns its error immediately, leaving whatever was already written in the
sink.
"""

from __future__ import annotations

from collections.abc import Iterable

from tempile.compiler.chunks import Chunk
from tempile.compiler.context import CompileContext
from tempile.utils.constants import WRITER_PACKAGE
from tempile.utils.golang import string_literal

PROGRAM_LAYOUT = """\
package {package_name}

import (
\t"{writer_package}"
{imports})

func {template_name}(w io.Writer, data map[string]any) error {{
\tvar err error

{body}
\treturn err
}}
"""

GUARDED_WRITE = "if _, err = io.WriteString(w, {value}); err != nil {{ return err }}\n"


def guarded_write(value: str) -> str:
    """Write ``value`` (a Go string expression), returning on failure."""
    return GUARDED_WRITE.format(value=value)


def render_chunk(chunk: Chunk) -> str:
    """Go source for one merged chunk."""
    if not chunk.writable:
        return chunk.data
    if chunk.no_merge:
        return guarded_write(chunk.data)
    return guarded_write(string_literal(chunk.data))


def render_imports(paths: Iterable[str]) -> str:
    return "".join(f'\t"{path}"\n' for path in paths)


def assemble(
    chunks: Iterable[Chunk],
    ctx: CompileContext,
    *,
    package_name: str,
    template_name: str,
) -> str:
    """Wrap merged chunks and tracked imports into a complete Go file.

    Args:
        chunks: Output of merge_chunks
        ctx: Tracker after lowering finished
        package_name: Package clause of the generated file
        template_name: Name of the generated function

    Returns:
        Unformatted Go source
    """
    body = "".join(render_chunk(chunk) for chunk in chunks)
    return PROGRAM_LAYOUT.format(
        package_name=package_name,
        writer_package=WRITER_PACKAGE,
        imports=render_imports(ctx.import_paths()),
        template_name=template_name,
        body=body,
    )
