from moonparse.lexer import lex
from moonparse.parser import TokenCursor
from moonparse.text import TextRange


def _cursor(source: str) -> TokenCursor:
    tokens, _ = lex(source)
    return TokenCursor(tuple(tokens))


def test_peek_does_not_move():
    cursor = _cursor("a b")

    first = cursor.peek()
    assert first is not None
    assert first.text == "a"
    assert cursor.peek() is first
    assert cursor.position == 0


def test_peek_ahead_and_past_end():
    cursor = _cursor("a b")

    second = cursor.peek(1)
    assert second is not None
    assert second.text == "b"
    assert cursor.peek(2) is None


def test_advance_returns_new_cursor():
    cursor = _cursor("a b c")
    moved = cursor.advance()

    assert cursor.position == 0
    assert moved.position == 1
    assert moved.tokens is cursor.tokens
    assert cursor.advance(2).position == 2


def test_at_end():
    cursor = _cursor("a")

    assert cursor.at_end is False
    assert cursor.advance().at_end is True
    assert TokenCursor(()).at_end is True


def test_depth_tracking():
    cursor = _cursor("a")
    deeper = cursor.descend().descend()

    assert deeper.depth == 2
    assert deeper.position == cursor.position
    assert deeper.at_depth(0).depth == 0


def test_current_range_and_description():
    cursor = _cursor("foo  (")

    assert cursor.current_range == TextRange(0, 3)
    assert cursor.describe_current() == "name 'foo'"

    end = cursor.advance(2)
    assert end.current_range == TextRange.empty(6)
    assert end.describe_current() == "end of input"


def test_current_range_of_empty_stream():
    cursor = TokenCursor(())

    assert cursor.current_range == TextRange.empty(0)
    assert cursor.describe_current() == "end of input"
