import logging

import pytest

from moonparse import LuaVersion, ParserOptions, parse, parse_result
from moonparse.ast import Assignment
from moonparse.diagnostics import LEXER_UNEXPECTED_CHARACTER, format_diagnostic, has_errors
from moonparse.text import LineIndex, TextRange


def test_parse_result_exposes_chunk_diagnostics_and_error_state():
    result = parse_result("a = 1\n")

    assert result.chunk is result.parsed.chunk
    assert result.tokens == result.parsed.tokens
    assert result.diagnostics == []
    assert result.has_errors is False
    assert isinstance(result.chunk.statements[0], Assignment)


def test_parse_result_caches_line_index_and_export():
    result = parse_result("a = 1\nb = 2\n")

    assert result.line_index() is result.line_index()
    first_export = result.export()
    assert result.export() is first_export
    assert first_export["type"] == "Chunk"


def test_parse_result_matches_parse_contract():
    source = "x = (1\n"

    result = parse_result(source)
    parsed = parse(source)

    assert [d.code for d in result.diagnostics] == [d.code for d in parsed.diagnostics]
    assert result.has_errors is True
    assert result.chunk is None


def test_export_of_failed_parse_raises():
    result = parse_result("x = ")

    with pytest.raises(ValueError):
        result.export()


def test_render_diagnostics_uses_line_and_column():
    result = parse_result("local a = 1\nfor i = 1, 2 {\n")

    assert result.render_diagnostics() == [
        "2:14: error PARSER_EXPECTED_TOKEN expected 'do' after numeric-for bounds, found '{'",
    ]


def test_render_diagnostics_includes_hint():
    result = parse_result("x = " + "not " * 20 + "y", options=ParserOptions(max_depth=5))

    (rendered,) = result.render_diagnostics()
    assert rendered.startswith("1:")
    assert "PARSER_NESTING_TOO_DEEP" in rendered
    assert "\n  hint: Raise ParserOptions.max_depth" in rendered


def test_lexer_diagnostics_are_kept_alongside_a_tree():
    result = parse_result("x = 1 @\n")

    assert result.chunk is not None
    assert [d.code for d in result.diagnostics] == [LEXER_UNEXPECTED_CHARACTER.code]
    assert result.has_errors is True


def test_parse_result_records_options():
    result = parse_result("x = 1", version=LuaVersion.LUA_51)

    assert result.options == ParserOptions.for_version(LuaVersion.LUA_51)
    assert parse_result("x = 1").options == ParserOptions()


def test_parse_result_rejects_options_and_version():
    with pytest.raises(ValueError, match="either options or version"):
        parse_result("x = 1", options=ParserOptions(), version=LuaVersion.LUA_54)


def test_entrypoints_log_at_debug(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="moonparse.parser.lua"):
        parse("x = 1")
        parse("x = ")

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("parsing ") for message in messages)
    assert any(message.startswith("parse failed: ") for message in messages)


def test_line_index_and_format_diagnostic():
    index = LineIndex.of("ab\r\ncd\ne")

    assert index.line_col(0) == (1, 1)
    assert index.line_col(4) == (2, 1)
    assert index.line_col(7) == (3, 1)

    diagnostic = LEXER_UNEXPECTED_CHARACTER.at(TextRange.at(5, 1))
    assert diagnostic.location(index) == (2, 2)
    assert diagnostic.is_error is True
    assert diagnostic.category == "lexer"
    assert format_diagnostic(diagnostic, index) == "2:2: error LEXER_UNEXPECTED_CHARACTER Unexpected character."
    assert has_errors([diagnostic]) is True
    assert has_errors([]) is False
