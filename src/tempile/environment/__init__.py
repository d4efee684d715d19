"""Compilation environment for tempile.

Exposes the Environment, its configuration, the default formatter and the
exception hierarchy.
"""

from __future__ import annotations

from tempile.environment.exceptions import (
    ConfigurationError,
    ErrorCode,
    FormatError,
    LoweringError,
    TemplateError,
)
from tempile.environment.config import CompileOptions
from tempile.environment.formatter import GoFormatter
from tempile.environment.core import (
    Environment,
    Formatter,
    Parser,
    Resolver,
    compile_template,
)

__all__ = [
    "CompileOptions",
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
    "compile_template",
]
