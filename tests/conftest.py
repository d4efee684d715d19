"""Pytest configuration and fixtures for tempile tests."""

import pytest

from tempile import CompileContext, CompileOptions, Compiler
from tempile.compiler import Chunk
from tempile.nodes import Attribute, Document, Pos


@pytest.fixture
def compiler():
    """Create a Compiler."""
    return Compiler()


@pytest.fixture
def ctx():
    """Create a fresh CompileContext."""
    return CompileContext()


@pytest.fixture
def options():
    """Create valid CompileOptions."""
    return CompileOptions(
        package_name="views",
        template_name="Render",
        filename="index.html",
        src_path="templates/",
    )


class StubParser:
    """Parser stand-in that returns a prebuilt Document and records calls."""

    def __init__(self, document: Document | None = None):
        self.document = document or Document()
        self.calls: list[tuple[str, str]] = []

    def __call__(self, source: str, filename: str) -> Document:
        self.calls.append((source, filename))
        return self.document


class RecordingResolver:
    """Resolver stand-in that records which passes ran, in order."""

    def __init__(self):
        self.calls: list[tuple[str, ...]] = []

    def resolve_includes(self, document: Document, src_path: str) -> None:
        self.calls.append(("resolve_includes", src_path))

    def match_slots_and_contents(self, document: Document) -> None:
        self.calls.append(("match_slots_and_contents",))


def identity_formatter(code: str) -> str:
    """Formatter stand-in that returns the code unchanged."""
    return code


def pos(line: int = 1, column: int = 1) -> Pos:
    return Pos(filename="test.html", line=line, column=column)


def clause(name: str, value: str) -> Attribute:
    return Attribute(name=name, value=value)


def joined(chunks: list[Chunk]) -> str:
    """Concatenate the data of all chunks, writable or not."""
    return "".join(c.data for c in chunks)


def written(chunks: list[Chunk]) -> str:
    """Concatenate the data of writable chunks only."""
    return "".join(c.data for c in chunks if c.writable)
