"""Exceptions for the tempile compiler.

Exception Hierarchy:
TemplateError (base)
├── ConfigurationError        # Missing or empty compile option
├── LoweringError             # Control node without its required clause
└── FormatError               # Generated Go code rejected by the formatter

Errors raised by the parser collaborator are not wrapped: they reach the
caller exactly as the parser raised them.

Example:
    ```
    T-LOW-001: missing go-cond in "if" element. file: index.html line: 4 col: 3
    ```

"""

from __future__ import annotations

from enum import Enum

from tempile.nodes import Pos

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for tempile compile errors.

    Format: T-{CATEGORY}-{NUMBER}
    Categories: CFG (configuration), LOW (lowering), FMT (formatting)
    """

    # Configuration errors (T-CFG-xxx)
    MISSING_OPTION = "T-CFG-001"

    # Lowering errors (T-LOW-xxx)
    MISSING_CLAUSE = "T-LOW-001"

    # Formatting errors (T-FMT-xxx)
    INVALID_GENERATED_CODE = "T-FMT-001"
    FORMATTER_UNAVAILABLE = "T-FMT-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'configuration', 'lowering')."""
        prefix = self.value.split("-")[1]
        return {
            "CFG": "configuration",
            "LOW": "lowering",
            "FMT": "formatting",
        }.get(prefix, "unknown")


class TemplateError(Exception):
    """Base exception for all tempile compile errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short summary prefixed with its code and category."""
        parts: list[str] = []

        header = str(self)
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        parts.append(header)

        if self.code:
            parts.append(f"  Category: {self.code.category}")

        return "\n".join(parts)


class ConfigurationError(TemplateError):
    """A required compile option is missing or empty.

    Raised before the parser runs.

    Example:
        >>> CompileOptions(package_name="", ...).validate()
        ConfigurationError: missing package name in compile options
    """

    code: ErrorCode | None = ErrorCode.MISSING_OPTION

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class LoweringError(TemplateError):
    """A control node lacks the clause needed to generate its statement.

    Carries the node's source position so the message points at the
    offending element.
    """

    code: ErrorCode | None = ErrorCode.MISSING_CLAUSE

    def __init__(self, element: str, clause: str, pos: Pos):
        self.element = element
        self.clause = clause
        self.pos = pos
        super().__init__(self._format_message())

    @property
    def filename(self) -> str:
        return self.pos.filename

    @property
    def lineno(self) -> int:
        return self.pos.line

    @property
    def col_offset(self) -> int:
        return self.pos.column

    def _format_message(self) -> str:
        return (
            f'missing {self.clause} in "{self.element}" element. '
            f"file: {self.pos.filename} line: {self.pos.line} col: {self.pos.column}"
        )


class FormatError(TemplateError):
    """The formatter rejected the generated program.

    Since every template input lowers to syntactically valid Go unless it
    embeds invalid expressions, this usually points at the template's
    condition, loop or expression text.

    Attributes:
        output: Formatter diagnostics (stderr), if any
    """

    code: ErrorCode | None = ErrorCode.INVALID_GENERATED_CODE

    def __init__(
        self,
        message: str,
        *,
        output: str = "",
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.output = output
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.output:
            return self.message
        return f"{self.message}\n{self.output.rstrip()}"
