import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .Ast import AstNode, make_node
from .Error import ParseError
from .Input import Cursor
from .Parser import (
    Parser, AnyChar, Char, Range, OneOf, NoneOf, Satisfy, String,
    Pass, Fail, Lift, LiftVal, Anchor, State,
    And, Or, Many, Many1, Count, SepBy, SepBy1,
    Apply, Expect, Maybe, Lazy, Traced, Tag, Root,
)
from .Result import Failure, Ok, Result

log = logging.getLogger("pympc")


def _expected(cursor: Cursor, expected: str, message: str) -> Failure:
    """Matcher failure at the current (unconsumed) position."""
    return Failure(ParseError(cursor.position, message, frozenset([expected]),
                              cursor.filename, cursor.peek()))


def _match(cursor: Cursor, ok: bool, expected: str, message: str) -> Result:
    if ok:
        return Ok(cursor.advance())
    return _expected(cursor, expected, message)


Handler = Callable[[Any, Cursor], Result]

_HANDLERS: Dict[type, Handler] = {}


def _handles(cls: type) -> Callable[[Handler], Handler]:
    def register(func: Handler) -> Handler:
        _HANDLERS[cls] = func
        return func
    return register


def _handler(parser: Parser) -> Handler:
    # Handlers call each other through this lookup, so every level of grammar
    # nesting costs a single Python frame.
    try:
        return _HANDLERS[type(parser)]
    except KeyError:
        raise TypeError(f"not a parser: {parser!r}") from None


def evaluate(parser: Parser, cursor: Cursor) -> Result:
    """
    Run `parser` against `cursor`, consuming input as it matches.

    Evaluation recurses once per level of grammar nesting, so input nested
    deeper than the interpreter's recursion limit allows (a few hundred levels
    of a typical recursive grammar at the default limit) raises RecursionError.
    """
    return _handler(parser)(parser, cursor)


# --- Primitive matchers ---

@_handles(AnyChar)
def _any(parser: AnyChar, cursor: Cursor) -> Result:
    return _match(cursor, cursor.peek() is not None, "any character", "unexpected end of input")


@_handles(Char)
def _char(parser: Char, cursor: Cursor) -> Result:
    return _match(cursor, cursor.peek() == parser.char, parser.char, f"expected '{parser.char}'")


@_handles(Range)
def _range(parser: Range, cursor: Cursor) -> Result:
    c = cursor.peek()
    ok = c is not None and parser.start <= c <= parser.end
    bounds = f"{parser.start}-{parser.end}"
    return _match(cursor, ok, bounds, f"expected character in range {bounds}")


@_handles(OneOf)
def _one_of(parser: OneOf, cursor: Cursor) -> Result:
    c = cursor.peek()
    ok = c is not None and c in parser.chars
    return _match(cursor, ok, f"one of {parser.chars}", f"expected one of '{parser.chars}'")


@_handles(NoneOf)
def _none_of(parser: NoneOf, cursor: Cursor) -> Result:
    c = cursor.peek()
    if c is None:
        # End of input is not one of the excluded characters.
        return Ok("")
    return _match(cursor, c not in parser.chars, f"none of {parser.chars}",
                  f"unexpected one of '{parser.chars}'")


@_handles(Satisfy)
def _satisfy(parser: Satisfy, cursor: Cursor) -> Result:
    c = cursor.peek()
    ok = c is not None and parser.predicate(c)
    return _match(cursor, ok, parser.name, f"expected {parser.name}")


@_handles(String)
def _string(parser: String, cursor: Cursor) -> Result:
    # Reports the position of the first mismatch but leaves nothing consumed.
    start = cursor.position
    for expected in parser.string:
        if cursor.peek() != expected:
            failure = _expected(cursor, parser.string, f"expected '{parser.string}'")
            cursor.restore(start)
            return failure
        cursor.advance()
    return Ok(parser.string)


# --- Parsers that consume no input ---

@_handles(Pass)
def _pass(parser: Pass, cursor: Cursor) -> Result:
    return Ok(None)


@_handles(Fail)
def _fail(parser: Fail, cursor: Cursor) -> Result:
    return Failure(ParseError(cursor.position, parser.message, frozenset(),
                              cursor.filename, cursor.peek()))


@_handles(Lift)
def _lift(parser: Lift, cursor: Cursor) -> Result:
    return Ok(parser.func())


@_handles(LiftVal)
def _lift_val(parser: LiftVal, cursor: Cursor) -> Result:
    return Ok(parser.value)


@_handles(Anchor)
def _anchor(parser: Anchor, cursor: Cursor) -> Result:
    if parser.predicate(cursor.prev() or "", cursor.peek() or ""):
        return Ok(None)
    return _expected(cursor, parser.name, f"expected {parser.name}")


@_handles(State)
def _state(parser: State, cursor: Cursor) -> Result:
    return Ok(cursor.position)


# --- Sequencing and alternation ---

@_handles(And)
def _and(parser: And, cursor: Cursor) -> Result:
    values: List[Any] = []
    for p in parser.parsers:
        res = _handler(p)(p, cursor)
        if not res.is_ok():
            return res
        values.append(res.value)
    return Ok(parser.fold(len(values), values))


@_handles(Or)
def _or(parser: Or, cursor: Cursor) -> Result:
    start = cursor.position
    error: Optional[ParseError] = None
    for p in parser.parsers:
        res = _handler(p)(p, cursor)
        if res.is_ok():
            return res
        error = res.error if error is None else error.merge(res.error)
        cursor.restore(start)
    if error is None:
        error = ParseError(start, "no alternatives", frozenset(), cursor.filename, cursor.peek())
    return Failure(error)


# --- Repetition ---

def _repeat(parser: Parser, cursor: Cursor, values: List[Any]) -> None:
    """
    Apply `parser` until it fails, leaving the cursor where the failed attempt
    began. An iteration that succeeds without consuming input is kept and ends
    the loop, since repeating it could never make progress.
    """
    while True:
        before = cursor.position
        res = _handler(parser)(parser, cursor)
        if not res.is_ok():
            cursor.restore(before)
            return
        values.append(res.value)
        if cursor.offset == before.offset:
            return


def _repeat_separated(parser: Parser, sep: Parser, cursor: Cursor, values: List[Any]) -> None:
    while True:
        before = cursor.position
        res = _handler(sep)(sep, cursor)
        if res.is_ok():
            res = _handler(parser)(parser, cursor)
        if not res.is_ok():
            cursor.restore(before)
            return
        values.append(res.value)
        if cursor.offset == before.offset:
            return


@_handles(Many)
def _many(parser: Many, cursor: Cursor) -> Result:
    values: List[Any] = []
    _repeat(parser.parser, cursor, values)
    return Ok(parser.fold(len(values), values))


@_handles(Many1)
def _many1(parser: Many1, cursor: Cursor) -> Result:
    start = cursor.offset
    first = _handler(parser.parser)(parser.parser, cursor)
    if not first.is_ok():
        return first
    values = [first.value]
    if cursor.offset != start:
        _repeat(parser.parser, cursor, values)
    return Ok(parser.fold(len(values), values))


@_handles(Count)
def _count(parser: Count, cursor: Cursor) -> Result:
    values: List[Any] = []
    for _ in range(parser.n):
        res = _handler(parser.parser)(parser.parser, cursor)
        if not res.is_ok():
            return res
        values.append(res.value)
    return Ok(parser.fold(len(values), values))


@_handles(SepBy)
def _sep_by(parser: SepBy, cursor: Cursor) -> Result:
    start = cursor.position
    first = _handler(parser.parser)(parser.parser, cursor)
    if not first.is_ok():
        cursor.restore(start)
        return Ok(parser.fold(0, []))
    values = [first.value]
    if cursor.offset != start.offset:
        _repeat_separated(parser.parser, parser.sep, cursor, values)
    return Ok(parser.fold(len(values), values))


@_handles(SepBy1)
def _sep_by1(parser: SepBy1, cursor: Cursor) -> Result:
    start = cursor.offset
    first = _handler(parser.parser)(parser.parser, cursor)
    if not first.is_ok():
        return first
    values = [first.value]
    if cursor.offset != start:
        _repeat_separated(parser.parser, parser.sep, cursor, values)
    return Ok(parser.fold(len(values), values))


# --- Value transformers and helpers ---

@_handles(Apply)
def _apply(parser: Apply, cursor: Cursor) -> Result:
    res = _handler(parser.parser)(parser.parser, cursor)
    if not res.is_ok():
        return res
    return Ok(parser.func(res.value))


@_handles(Expect)
def _expect(parser: Expect, cursor: Cursor) -> Result:
    start = cursor.offset
    res = _handler(parser.parser)(parser.parser, cursor)
    if not res.is_ok() and res.error.position.offset == start:
        return Failure(res.error.with_expected(parser.expected))
    return res


@_handles(Maybe)
def _maybe(parser: Maybe, cursor: Cursor) -> Result:
    start = cursor.position
    res = _handler(parser.parser)(parser.parser, cursor)
    if not res.is_ok():
        cursor.restore(start)
        return Ok(None)
    return res


@_handles(Lazy)
def _lazy(parser: Lazy, cursor: Cursor) -> Result:
    target = parser.thunk()
    return _handler(target)(target, cursor)


@_handles(Traced)
def _traced(parser: Traced, cursor: Cursor) -> Result:
    log.debug("trying %s at %s", parser.name, cursor.position)
    res = _handler(parser.parser)(parser.parser, cursor)
    if res.is_ok():
        log.debug("%s matched %r, now at %s", parser.name, res.value, cursor.position)
    else:
        log.debug("%s failed: %s", parser.name, res.error)
    return res


# --- AST building ---

@_handles(Tag)
def _tag(parser: Tag, cursor: Cursor) -> Result:
    start = cursor.position
    res = _handler(parser.parser)(parser.parser, cursor)
    if not res.is_ok():
        return res
    return Ok(make_node(parser.tag, res.value, start))


@_handles(Root)
def _root(parser: Root, cursor: Cursor) -> Result:
    res = _handler(parser.parser)(parser.parser, cursor)
    if res.is_ok() and isinstance(res.value, AstNode):
        return Ok(res.value.retag(parser.tag))
    return res


# --- Entry points ---

def parse(filename: str, text: str, parser: Parser) -> Result:
    """
    Run `parser` once over `text` from its start.

    `filename` only labels diagnostics. Exceptions raised by fold, predicate
    or thunk callables inside the grammar are not caught.
    """
    cursor = Cursor(text, filename)
    log.debug("parsing %s (%d characters)", filename or "<input>", len(text))
    result = _handler(parser)(parser, cursor)
    if result.is_ok():
        log.debug("parse succeeded, consumed %d characters", cursor.offset)
    else:
        log.debug("parse failed: %s", result.error)
    return result


def run_parser(parser: Parser, input_str: str, source_name: str = "") -> Tuple[Any, Optional[ParseError]]:
    """Convenience wrapper returning (value, error) with exactly one of them set."""
    return parse(source_name, input_str, parser).as_tuple()
