"""Per-compilation import and feature tracking."""

from __future__ import annotations

from dataclasses import dataclass, field

from tempile.utils.constants import ESCAPE_PACKAGE, FORMAT_PACKAGE, WRITER_PACKAGE


@dataclass(slots=True)
class CompileContext:
    """Mutable record of what the generated program needs to import.

    One instance lives for exactly one compilation and is passed explicitly
    through every lowering call, so concurrent compilations never share
    state.

    Attributes:
        uses_escape: An escaped expression was emitted (needs ``html``)
        uses_fmt: An expression was stringified (needs ``fmt``)
        imports: Packages declared by Import nodes, first appearance first
    """

    uses_escape: bool = False
    uses_fmt: bool = False
    imports: list[str] = field(default_factory=list)

    def add_imports(self, *names: str) -> None:
        """Record declared packages, ignoring ones already seen."""
        for name in names:
            if name not in self.imports:
                self.imports.append(name)

    def import_paths(self) -> list[str]:
        """Packages the generated program imports besides ``io``.

        Feature packages come first, then declared packages. Each path
        appears once, so declaring ``fmt`` in a template that also prints
        expressions does not produce a duplicate import.
        """
        paths: list[str] = []
        if self.uses_escape:
            paths.append(ESCAPE_PACKAGE)
        if self.uses_fmt:
            paths.append(FORMAT_PACKAGE)
        for name in self.imports:
            if name not in paths and name != WRITER_PACKAGE:
                paths.append(name)
        return paths
