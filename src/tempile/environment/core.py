"""Compilation environment: wires the parser, resolver and formatter
around the Compiler.

Pipeline:
    source ─▶ parser ─▶ Document ─▶ resolver (in place) ─▶ Compiler
           ─▶ merged chunks ─▶ Go source ─▶ formatter ─▶ result

Lexing, parsing, include resolution and slot matching are supplied by the
caller; tempile only lowers the resolved tree.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from tempile.compiler import CompileContext, Compiler
from tempile.environment.config import CompileOptions
from tempile.environment.exceptions import ConfigurationError
from tempile.environment.formatter import GoFormatter

if TYPE_CHECKING:
    from tempile.nodes import Document

logger = logging.getLogger(__name__)

Parser = Callable[[str, str], "Document"]
"""``(source, filename) -> Document``. Raises on invalid template syntax."""

Formatter = Callable[[str], str]
"""``(code) -> formatted code``. Raises FormatError on invalid code."""


class Resolver(Protocol):
    """In-place passes run on the parsed tree before lowering."""

    def resolve_includes(self, document: Document, src_path: str) -> None:
        """Replace Include nodes with the templates they reference."""
        ...

    def match_slots_and_contents(self, document: Document) -> None:
        """Fill Slot placeholders with the matching Content nodes."""
        ...


class Environment:
    """Holds the collaborators used to compile templates.

    An Environment keeps no per-template state and may be shared between
    threads; every ``compile`` call creates its own CompileContext.

    Attributes:
        parser: Turns template source into a Document
        resolver: Optional include/slot resolver
        formatter: Canonicalizes the generated Go source

    Example:
        >>> env = Environment(parser=my_parser, resolver=my_resolver)
        >>> code = env.compile(source, CompileOptions(
        ...     package_name="views",
        ...     template_name="Index",
        ...     filename="index.html",
        ...     src_path="templates/",
        ... ))
    """

    __slots__ = ("_compiler", "formatter", "parser", "resolver")

    def __init__(
        self,
        parser: Parser,
        resolver: Resolver | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.parser = parser
        self.resolver = resolver
        self.formatter: Formatter = formatter if formatter is not None else GoFormatter()
        self._compiler = Compiler()

    def compile(self, source: str, options: CompileOptions | None) -> str:
        """Compile template source to formatted Go source.

        Args:
            source: Template source text
            options: Required compile options

        Returns:
            Formatted Go source defining the render function

        Raises:
            ConfigurationError: An option is missing; raised before parsing
            LoweringError: A control node lacks its clause
            FormatError: The generated code is not valid Go
        """
        if options is None:
            raise ConfigurationError("missing compile options")
        options.validate()

        document = self.parser(source, options.filename)

        if self.resolver is not None:
            self.resolver.resolve_includes(document, options.src_path)
            self.resolver.match_slots_and_contents(document)
        else:
            logger.debug("No resolver configured; compiling %s unresolved", options.filename)

        code = self._compiler.compile(
            document.children,
            package_name=options.package_name,
            template_name=options.template_name,
            ctx=CompileContext(),
        )
        return self.formatter(code)


def compile_template(
    source: str,
    options: CompileOptions | None,
    *,
    parser: Parser,
    resolver: Resolver | None = None,
    formatter: Formatter | None = None,
) -> str:
    """Compile one template without keeping an Environment around."""
    env = Environment(parser=parser, resolver=resolver, formatter=formatter)
    return env.compile(source, options)
