# tests/conftest.py
import pytest

from pympc.Input import Cursor


@pytest.fixture
def make_cursor():
    def _make(input_data, filename="test"):
        return Cursor(input_data, filename)

    return _make


@pytest.fixture
def assert_consumed():
    """Checks the cursor consumed exactly `text`, with row/col matching its newlines."""
    def _check(cursor: Cursor, text: str):
        consumed = cursor.text[:cursor.offset]
        assert consumed == text
        assert cursor.position.row == consumed.count("\n")
        assert cursor.position.col == len(consumed) - (consumed.rfind("\n") + 1)

    return _check
