"""Shared constants for tempile."""

from __future__ import annotations

# Elements that never take a closing tag
# Source: WHATWG HTML Living Standard, "void elements"
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Language tag of the generated code. RawCode blocks with any other tag
# are dropped, and Import attributes with this name declare packages.
HOST_LANG = "go"

# Clause names carrying host-language control expressions
COND_CLAUSE = "go-cond"
LOOP_CLAUSE = "go-loop"

# Packages pulled in by escaped expression output
ESCAPE_PACKAGE = "html"
FORMAT_PACKAGE = "fmt"
WRITER_PACKAGE = "io"
