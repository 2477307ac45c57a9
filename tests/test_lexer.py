import pytest

from moonparse.lexer import Lexer, Token, TokenKind, dump_tokens, lex
from tests._debug import debug_dump_diagnostics, debug_dump_tokens
from tests._shared_cases import VALID_CASES, LuaCase, case_id


def _kinds_and_texts(tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    return [(tok.kind, tok.text) for tok in tokens]


def test_keywords_names_and_operators():
    tokens, diagnostics = lex("local x = a.b:c(1) ~= nil")

    assert diagnostics == []
    assert _kinds_and_texts(tokens) == [
        (TokenKind.KEYWORD, "local"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.OPERATOR, "="),
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.OPERATOR, "."),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.OPERATOR, ":"),
        (TokenKind.IDENTIFIER, "c"),
        (TokenKind.LPAREN, "("),
        (TokenKind.NUMBER, "1"),
        (TokenKind.RPAREN, ")"),
        (TokenKind.OPERATOR, "~="),
        (TokenKind.KEYWORD, "nil"),
    ]


def test_multi_character_operators_use_longest_match():
    tokens, _ = lex("... .. . == = <= < >= > // / :: :")

    assert [tok.text for tok in tokens] == ["...", "..", ".", "==", "=", "<=", "<", ">=", ">", "//", "/", "::", ":"]
    assert all(tok.kind == TokenKind.OPERATOR for tok in tokens)


def test_bitwise_operators_are_tokens():
    tokens, diagnostics = lex("a ~= b ~ c & d | e << f >> g <= h")

    assert diagnostics == []
    assert [tok.text for tok in tokens if tok.kind == TokenKind.OPERATOR] == ["~=", "~", "&", "|", "<<", ">>", "<="]


def test_brackets_have_their_own_kinds():
    tokens, _ = lex("( ) { } [ ]")

    assert [tok.kind for tok in tokens] == [
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
    ]


def test_ranges_point_into_source():
    source = "x  =\n  10"
    tokens, _ = lex(source)

    assert [tok.range.as_tuple() for tok in tokens] == [(0, 1), (3, 4), (7, 9)]
    assert [source[tok.range.start : tok.range.end] for tok in tokens] == ["x", "=", "10"]


def test_comments_are_dropped():
    tokens, diagnostics = lex("a -- trailing\n--[==[ long\n comment ]==] b --[[x]] c")

    assert diagnostics == []
    assert [tok.text for tok in tokens] == ["a", "b", "c"]


@pytest.mark.parametrize(
    "text",
    ["3", "3.0", "3.1416", "314.16e-2", "0.31416E1", "34e1", "0x0.1E", "0xA23p-4", "0X1P+4", "0xff", ".5", "3."],
)
def test_numbers_are_single_tokens(text: str):
    tokens, diagnostics = lex(text)

    assert diagnostics == []
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.NUMBER
    assert tokens[0].text == text


def test_number_followed_by_concat_is_not_a_fraction():
    tokens, _ = lex("1..2")

    assert _kinds_and_texts(tokens) == [
        (TokenKind.NUMBER, "1"),
        (TokenKind.OPERATOR, ".."),
        (TokenKind.NUMBER, "2"),
    ]


def test_quoted_string_escapes_are_interpreted():
    tokens, diagnostics = lex(r'"a\tb\n\65\x42\u{43}\\\"" ' + r"'it\'s'")

    assert diagnostics == []
    first, second = tokens
    assert first.kind == TokenKind.STRING
    assert first.string is not None
    assert first.string.raw == first.text
    assert first.string.value == 'a\tb\nAB' + 'C\\"'
    assert second.string is not None
    assert second.string.value == "it's"


def test_z_escape_skips_following_whitespace():
    tokens, _ = lex('"one\\z\n     two"')

    assert tokens[0].string is not None
    assert tokens[0].string.value == "onetwo"


def test_long_string_drops_first_newline():
    tokens, diagnostics = lex("[[\nhello\nworld]] [==[a]]b]==]")

    assert diagnostics == []
    assert [tok.string.value for tok in tokens if tok.string is not None] == ["hello\nworld", "a]]b"]


def test_unterminated_string_reports_diagnostic_and_keeps_going():
    tokens, diagnostics = lex('x = "open\ny = 1')

    assert [d.code for d in diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert [tok.text for tok in tokens][-3:] == ["y", "=", "1"]


def test_unterminated_long_comment_reports_diagnostic():
    _, diagnostics = lex("a --[[ never closed")

    assert [d.code for d in diagnostics] == ["LEXER_UNTERMINATED_COMMENT"]


def test_invalid_escape_is_reported_and_kept_verbatim():
    tokens, diagnostics = lex(r'"bad\q"')

    assert [d.code for d in diagnostics] == ["LEXER_INVALID_ESCAPE"]
    assert tokens[0].string is not None
    assert tokens[0].string.value == r"bad\q"


def test_decimal_escape_above_255_is_invalid():
    _, diagnostics = lex(r'"\256"')

    assert [d.code for d in diagnostics] == ["LEXER_INVALID_ESCAPE"]


def test_unexpected_character_is_dropped():
    tokens, diagnostics = lex("a $ b")

    assert [d.code for d in diagnostics] == ["LEXER_UNEXPECTED_CHARACTER"]
    assert diagnostics[0].range.as_tuple() == (2, 3)
    assert [tok.text for tok in tokens] == ["a", "b"]


def test_goto_can_be_lexed_as_identifier():
    keyword_tokens, _ = lex("goto")
    name_tokens, _ = lex("goto", goto_is_keyword=False)

    assert keyword_tokens[0].kind == TokenKind.KEYWORD
    assert name_tokens[0].kind == TokenKind.IDENTIFIER


def test_token_describe():
    tokens, _ = lex("foo 12 'hi' end (")

    assert [tok.describe() for tok in tokens] == [
        "name 'foo'",
        "number '12'",
        "string 'hi'",
        "'end'",
        "'('",
    ]


def test_lexer_exposes_state():
    lexer = Lexer("a")
    assert lexer.is_eof is False

    lexer.lex()

    assert lexer.is_eof is True
    assert lexer.position == 1
    assert lexer.source == "a"


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_lexer_accepts_all_valid_cases(case: LuaCase):
    tokens, diagnostics = lex(case.source)
    debug_dump_tokens(f"central::{case.name}", case.source, tokens)
    debug_dump_diagnostics(f"central::{case.name}", diagnostics)

    assert diagnostics == []


def test_dump_tokens_smoke(capsys: pytest.CaptureFixture[str]):
    tokens, diagnostics = lex("x = $")
    dump_tokens(tokens, diagnostics)

    out = capsys.readouterr().out
    assert "IDENTIFIER" in out
    assert "LEXER_UNEXPECTED_CHARACTER" in out
