"""Test program assembly from merged chunks."""

from __future__ import annotations

from hypothesis import given, settings

from tempile.compiler import (
    CompileContext,
    assemble,
    code_chunk,
    expr_chunk,
    guarded_write,
    text_chunk,
)
from tempile.compiler.assembler import render_chunk
from tempile.nodes import Attribute, Element, Expr, Import, RawExpr, Text
from tempile.utils.golang import string_literal

from .strategies import literal_text


def _assemble(chunks, ctx=None):
    return assemble(
        chunks,
        ctx or CompileContext(),
        package_name="views",
        template_name="Index",
    )


class TestRenderChunk:
    """Per-chunk code generation."""

    def test_literal_uses_raw_string(self):
        assert render_chunk(text_chunk("<p>")) == (
            "if _, err = io.WriteString(w, `<p>`); err != nil { return err }\n"
        )

    def test_literal_with_backtick_is_quoted(self):
        assert render_chunk(text_chunk("a`b")) == guarded_write('"a`b"')

    def test_literal_with_carriage_return_is_quoted(self):
        assert render_chunk(text_chunk("a\r\nb")) == guarded_write('"a\\r\\nb"')

    def test_expression_is_not_a_string_literal(self):
        chunk = expr_chunk("html.EscapeString(fmt.Sprint(data.X))")
        assert render_chunk(chunk) == (
            "if _, err = io.WriteString(w, html.EscapeString(fmt.Sprint(data.X)));"
            " err != nil { return err }\n"
        )

    def test_control_code_verbatim(self):
        assert render_chunk(code_chunk("for i := 0; i < 3; i++ {\n")) == (
            "for i := 0; i < 3; i++ {\n"
        )


class TestAssemble:
    """Whole-program layout."""

    def test_layout(self):
        code = _assemble([text_chunk("hello")])
        assert code.startswith("package views\n")
        assert 'import (\n\t"io"\n)' in code
        assert "func Index(w io.Writer, data map[string]any) error {" in code
        assert "\tvar err error\n" in code
        assert code.rstrip().endswith("return err\n}")

    def test_body_between_declaration_and_return(self):
        code = _assemble([text_chunk("hello"), code_chunk("// marker\n")])
        declaration = code.index("var err error")
        write = code.index("`hello`")
        marker = code.index("// marker")
        ret = code.index("return err\n}")
        assert declaration < write < marker < ret

    def test_every_write_is_guarded(self):
        chunks = [text_chunk("a"), expr_chunk("x"), code_chunk("if y {\n"), text_chunk("b"), code_chunk("}\n")]
        code = _assemble(chunks)
        assert code.count("io.WriteString(w, ") == 3
        assert code.count("err != nil { return err }") == 3

    def test_feature_imports(self):
        ctx = CompileContext(uses_escape=True, uses_fmt=True)
        code = _assemble([], ctx)
        assert 'import (\n\t"io"\n\t"html"\n\t"fmt"\n)' in code

    def test_declared_imports_after_features(self, compiler):
        ctx = CompileContext()
        compiler.lower(Import(attrs=[Attribute("go", "strings"), Attribute("go", "fmt")]), ctx)
        compiler.lower(Expr("data.X"), ctx)
        code = _assemble([], ctx)
        assert 'import (\n\t"io"\n\t"html"\n\t"fmt"\n\t"strings"\n)' in code
        assert code.count('"fmt"') == 1

    def test_declared_io_not_repeated(self, compiler):
        """The layout always imports io; a declared io is not added again."""
        ctx = CompileContext()
        compiler.lower(Import(attrs=[Attribute("go", "io")]), ctx)
        code = _assemble([], ctx)
        assert code.count('"io"') == 1

    def test_empty_raw_expression_not_written(self, compiler):
        """An empty RawExpr produces no write call."""
        code = compiler.compile([Text("a"), RawExpr("")], package_name="views", template_name="Index")
        assert code.count("io.WriteString(w, ") == 1
        assert "io.WriteString(w, )" not in code

    def test_no_feature_imports_without_expressions(self):
        code = _assemble([text_chunk("static")])
        assert '"html"' not in code
        assert '"fmt"' not in code

    def test_compiler_compile_merges(self, compiler):
        """Compiler.compile lowers, merges and assembles in one call."""
        nodes = [Element("p", children=[Text("a"), Text("b")])]
        code = compiler.compile(nodes, package_name="views", template_name="Index")
        assert guarded_write("`<p>ab</p>`") in code
        assert code.count("io.WriteString(w, ") == 1


class TestLiteralProperties:
    """Literal text reaches the generated program unchanged."""

    @given(s=literal_text.filter(bool))
    @settings(max_examples=200)
    def test_text_written_once_verbatim(self, s):
        from tempile import Compiler

        code = Compiler().compile([Text(s)], package_name="views", template_name="Index")
        assert guarded_write(string_literal(s)) in code
        assert code.count("io.WriteString(w, ") == 1
