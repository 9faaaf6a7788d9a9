from typing import Any, Callable

from .Error import GrammarError
from .Parser import (
    Parser, AnyChar, Char, Range, OneOf, NoneOf, Satisfy, String,
    Pass, Fail, Lift, LiftVal, Anchor, State,
)


def _single(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise GrammarError(f"{what} expects a single character, got {c!r}")
    return c


def any_char() -> Parser:
    """Matches any one character; fails only at end of input."""
    return AnyChar()


def char(c: str) -> Parser:
    """Matches exactly the character c and returns it."""
    return Char(_single(c, "char"))


def char_range(start: str, end: str) -> Parser:
    """Matches a character between start and end, both inclusive."""
    _single(start, "char_range")
    _single(end, "char_range")
    if start > end:
        raise GrammarError(f"empty character range {start!r}-{end!r}")
    return Range(start, end)


def one_of(chars: str) -> Parser:
    """Matches any character in chars."""
    if not chars:
        raise GrammarError("one_of needs at least one character")
    return OneOf("".join(chars))


def none_of(chars: str) -> Parser:
    """
    Matches any character not in chars.

    At end of input it succeeds with "" and consumes nothing.
    """
    return NoneOf("".join(chars))


def satisfy(predicate: Callable[[str], bool], name: str = "satisfy") -> Parser:
    """Matches a character for which predicate is true; `name` labels failures."""
    return Satisfy(predicate, name)


def string(s: str) -> Parser:
    """Matches the exact string s and returns it."""
    return String(s)


def pass_() -> Parser:
    """Always succeeds with None, consuming nothing."""
    return Pass()


def fail(msg: str) -> Parser:
    """Always fails with msg and an empty expected set."""
    return Fail(msg)


def lift(f: Callable[[], Any]) -> Parser:
    """Succeeds with f(), called afresh on every parse."""
    return Lift(f)


def lift_val(value: Any) -> Parser:
    return LiftVal(value)


def anchor(predicate: Callable[[str, str], bool], name: str = "anchor") -> Parser:
    """
    Succeeds without consuming when predicate(prev, next) holds.

    prev is the last consumed character and next the upcoming one; either is
    "" at the start or end of input.
    """
    return Anchor(predicate, name)


def state() -> Parser:
    """Succeeds with the current Position, consuming nothing."""
    return State()


def eoi() -> Parser:
    return Anchor(lambda prev, nxt: nxt == "", "end of input")


def soi() -> Parser:
    return Anchor(lambda prev, nxt: prev == "", "start of input")


def _is_word(c: str) -> bool:
    return c != "" and (c.isalnum() or c == "_")


def boundary() -> Parser:
    """Word boundary: a word character on exactly one side (start and end count as non-word)."""
    return Anchor(lambda prev, nxt: _is_word(prev) != _is_word(nxt), "boundary")


def boundary_newline() -> Parser:
    """Gap between words: no word character on either side (start and end count as non-word)."""
    return Anchor(lambda prev, nxt: not _is_word(prev) and not _is_word(nxt), "boundary_newline")
