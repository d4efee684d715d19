"""Go source literal helpers."""

from __future__ import annotations

# Characters a Go raw string cannot carry verbatim: the delimiter itself,
# carriage returns (discarded from raw strings by the Go compiler), and NUL
# or a byte order mark (rejected in Go source).
_RAW_UNSAFE = frozenset("`\r\x00\ufeff")

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def can_raw_quote(s: str) -> bool:
    """Return True if ``s`` survives a Go backtick string unchanged."""
    return not any(ch in _RAW_UNSAFE for ch in s)


def raw_quote(s: str) -> str:
    """Wrap ``s`` in a Go raw string literal. Caller checks can_raw_quote."""
    return f"`{s}`"


def quote(s: str) -> str:
    """Quote ``s`` as a double-quoted Go string literal.

    Mirrors Go's ``strconv.Quote``: printable characters are kept, the usual
    control characters use short escapes, and everything else becomes
    ``\\xNN``, ``\\uNNNN`` or ``\\UNNNNNNNN``.

    """
    parts: list[str] = ['"']
    for ch in s:
        escaped = _SHORT_ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
            continue
        if ch.isprintable():
            parts.append(ch)
            continue
        code = ord(ch)
        if code < 0x20 or code == 0x7F:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def string_literal(s: str) -> str:
    """Return the Go literal for ``s``, preferring a raw string."""
    if can_raw_quote(s):
        return raw_quote(s)
    return quote(s)
