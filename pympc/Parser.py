from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

# (count, values) -> value
FoldFn = Callable[[int, List[Any]], Any]


@dataclass(frozen=True, eq=False)
class Parser:
    """
    Base of the closed set of parser variants.

    Parsers are immutable descriptions of a grammar; nothing here runs. The
    evaluator in Eval.py dispatches on the concrete variant. Because nothing
    mutates a parser, one sub-parser can be shared by many parents and one
    grammar can serve many parses, including on different threads.
    """

    # Alternative (<|>)
    def __or__(self, other: 'Parser') -> 'Parser':
        left = self.parsers if isinstance(self, Or) else (self,)
        right = other.parsers if isinstance(other, Or) else (other,)
        return Or(left + right)

    # Sequence (&), yielding a pair
    def __and__(self, other: 'Parser') -> 'Parser':
        return And((self, other), lambda n, xs: tuple(xs))

    def map(self, f: Callable[[Any], Any]) -> 'Parser':
        return Apply(self, f)

    def label(self, msg: str) -> 'Parser':
        return Expect(self, msg)


# --- Primitive matchers ---

@dataclass(frozen=True, eq=False)
class AnyChar(Parser):
    pass


@dataclass(frozen=True, eq=False)
class Char(Parser):
    char: str


@dataclass(frozen=True, eq=False)
class Range(Parser):
    start: str
    end: str


@dataclass(frozen=True, eq=False)
class OneOf(Parser):
    chars: str


@dataclass(frozen=True, eq=False)
class NoneOf(Parser):
    chars: str


@dataclass(frozen=True, eq=False)
class Satisfy(Parser):
    predicate: Callable[[str], bool]
    name: str = "satisfy"


@dataclass(frozen=True, eq=False)
class String(Parser):
    string: str


# --- Parsers that consume no input ---

@dataclass(frozen=True, eq=False)
class Pass(Parser):
    pass


@dataclass(frozen=True, eq=False)
class Fail(Parser):
    message: str


@dataclass(frozen=True, eq=False)
class Lift(Parser):
    func: Callable[[], Any]


@dataclass(frozen=True, eq=False)
class LiftVal(Parser):
    value: Any


@dataclass(frozen=True, eq=False)
class Anchor(Parser):
    # (previous char, next char) -> bool; "" stands for start / end of input
    predicate: Callable[[str, str], bool]
    name: str = "anchor"


@dataclass(frozen=True, eq=False)
class State(Parser):
    pass


# --- Combinators ---

@dataclass(frozen=True, eq=False)
class And(Parser):
    parsers: Tuple[Parser, ...]
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class Or(Parser):
    parsers: Tuple[Parser, ...]


@dataclass(frozen=True, eq=False)
class Many(Parser):
    parser: Parser
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class Many1(Parser):
    parser: Parser
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class Count(Parser):
    n: int
    parser: Parser
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class SepBy(Parser):
    parser: Parser
    sep: Parser
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class SepBy1(Parser):
    parser: Parser
    sep: Parser
    fold: FoldFn


@dataclass(frozen=True, eq=False)
class Apply(Parser):
    parser: Parser
    func: Callable[[Any], Any]


@dataclass(frozen=True, eq=False)
class Expect(Parser):
    parser: Parser
    expected: str


@dataclass(frozen=True, eq=False)
class Maybe(Parser):
    parser: Parser


@dataclass(frozen=True, eq=False)
class Lazy(Parser):
    thunk: Callable[[], Parser]


@dataclass(frozen=True, eq=False)
class Traced(Parser):
    name: str
    parser: Parser


# --- AST building ---

@dataclass(frozen=True, eq=False)
class Tag(Parser):
    parser: Parser
    tag: str


@dataclass(frozen=True, eq=False)
class Root(Parser):
    parser: Parser
    tag: str = "root"
