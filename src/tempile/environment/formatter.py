"""Go source formatting via gofmt.

The formatter is the last stage of compilation. It canonicalizes the
generated source and, because gofmt parses its input, rejects code that is
not syntactically valid Go.
"""

from __future__ import annotations

import logging
import subprocess

from tempile.environment.exceptions import ErrorCode, FormatError

logger = logging.getLogger(__name__)


class GoFormatter:
    """Pipe Go source through ``gofmt``.

    Thread-safe: each call runs its own subprocess.

    Example:
        >>> fmt = GoFormatter()
        >>> fmt("package main\\nfunc  main( ) {}\\n")
        'package main\\n\\nfunc main() {}\\n'
    """

    __slots__ = ("executable", "timeout")

    def __init__(self, executable: str = "gofmt", timeout: float = 30.0) -> None:
        self.executable = executable
        self.timeout = timeout

    def __call__(self, code: str) -> str:
        """Return formatted ``code``.

        Raises:
            FormatError: gofmt is unavailable, timed out, or rejected the code
        """
        logger.debug("Formatting %d bytes of Go source with %s", len(code), self.executable)
        try:
            result = subprocess.run(
                [self.executable],
                input=code,
                capture_output=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatError(
                f"formatter executable not found: {self.executable}",
                code=ErrorCode.FORMATTER_UNAVAILABLE,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise FormatError(
                f"formatter timed out after {self.timeout}s: {self.executable}",
                code=ErrorCode.FORMATTER_UNAVAILABLE,
            ) from e

        if result.returncode != 0:
            raise FormatError("generated code is not valid Go", output=result.stderr)
        return result.stdout

    def __repr__(self) -> str:
        return f"GoFormatter(executable={self.executable!r}, timeout={self.timeout!r})"
