from hypothesis import given
from hypothesis import strategies as st

from pympc.Input import Cursor, Position


def test_peek_does_not_consume(make_cursor):
    cursor = make_cursor("ab")
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.position == Position(0, 0, 0)


def test_advance_tracks_rows_and_columns(make_cursor):
    cursor = make_cursor("a\nbc")
    assert [cursor.advance() for _ in range(4)] == ["a", "\n", "b", "c"]
    assert cursor.position == Position(4, 1, 2)


def test_end_of_input_is_not_an_error(make_cursor):
    cursor = make_cursor("x")
    cursor.advance()
    assert cursor.at_end()
    assert cursor.peek() is None
    assert cursor.advance() is None
    assert cursor.position == Position(1, 0, 1)


def test_multibyte_characters_are_single_units(make_cursor):
    cursor = make_cursor("é漢🎉x")
    assert cursor.advance() == "é"
    assert cursor.advance() == "漢"
    assert cursor.advance() == "🎉"
    assert cursor.position == Position(3, 0, 3)
    assert cursor.peek() == "x"
    assert cursor.prev() == "🎉"


def test_restore_rewinds_to_snapshot(make_cursor):
    cursor = make_cursor("ab\ncd")
    saved = cursor.position
    for _ in range(4):
        cursor.advance()
    cursor.restore(saved)
    assert cursor.position == saved
    assert cursor.peek() == "a"
    assert cursor.prev() is None


@given(st.text())
def test_position_matches_newline_count(text):
    cursor = Cursor(text)
    while cursor.advance() is not None:
        pass
    pos = cursor.position
    assert pos.offset == len(text)
    assert pos.row == text.count("\n")
    assert pos.col == len(text) - (text.rfind("\n") + 1)


@given(st.text())
def test_position_update_matches_cursor(text):
    expected = Position()
    for ch in text:
        expected = expected.update(ch)

    cursor = Cursor(text)
    while cursor.advance() is not None:
        pass
    assert cursor.position == expected


def test_position_str_is_one_based():
    assert str(Position(7, 2, 4)) == "line 3, column 5"
