"""Tempile: compile markup templates into streaming Go render functions.

Tempile is the back end of a template compiler. It takes an already parsed
and resolved template tree and generates the Go source of a function that
writes the rendered template to an ``io.Writer``.

Quickstart:
    >>> from tempile import CompileOptions, Environment
    >>> env = Environment(parser=parse)
    >>> code = env.compile('<p>{{ data["name"] }}</p>', CompileOptions(
    ...     package_name="views",
    ...     template_name="Greeting",
    ...     filename="greeting.html",
    ...     src_path="templates/",
    ... ))

Architecture:
Template Source → Parser → Resolver → Tempile AST → Compiler → Go source → gofmt

Pipeline stages:
1. **Parser** (caller supplied): Builds the tempile AST
2. **Resolver** (caller supplied): Inlines includes and fills slots in place
3. **Lowering**: Turns each node into literal-output or control-code chunks
4. **Merging**: Joins adjacent literal output so each run is a single write
5. **Assembly**: Wraps the chunks in a package, imports and render function
6. **Formatting**: Runs gofmt, which also rejects invalid generated code

Generated function:
    func Greeting(w io.Writer, data map[string]any) error

Every write in the generated function returns on the first error, so a
failing writer leaves partial output behind rather than none.

Thread-Safety:
An Environment and its Compiler hold no per-compilation state. All
import and feature tracking lives in a CompileContext created per call,
so templates may be compiled concurrently without locks.
"""

from tempile.environment import (
    CompileOptions,
    ConfigurationError,
    Environment,
    ErrorCode,
    FormatError,
    Formatter,
    GoFormatter,
    LoweringError,
    Parser,
    Resolver,
    TemplateError,
    compile_template,
)
from tempile.compiler import Chunk, CompileContext, Compiler, merge_chunks

__version__ = "0.1.0"

__all__ = [
    "Chunk",
    "CompileContext",
    "CompileOptions",
    "Compiler",
    "ConfigurationError",
    "Environment",
    "ErrorCode",
    "FormatError",
    "Formatter",
    "GoFormatter",
    "LoweringError",
    "Parser",
    "Resolver",
    "TemplateError",
    "__version__",
    "compile_template",
    "merge_chunks",
]
