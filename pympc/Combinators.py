from typing import Any, Callable, List, Optional

from .Error import GrammarError
from .Fold import to_list
from .Parser import (
    Parser, FoldFn, And, Or, Many, Many1, Count, SepBy, SepBy1,
    Apply, Expect, Maybe, Lazy, Traced, Tag, Root,
)


# 1. and_: Runs parsers in order and folds their results
def and_(parsers: List[Parser], fold: Optional[FoldFn] = None) -> Parser:
    """
    Applies each parser in turn. The first failure is returned as is and
    whatever was consumed before it stays consumed.
    """
    return And(tuple(parsers), fold or to_list)


# 2. or_: Tries alternatives in order until one succeeds
def or_(parsers: List[Parser]) -> Parser:
    """
    Tries each parser from the same starting point and returns the first
    success. When all fail, the error is the one that got furthest into the
    input, with the expected sets of equally far failures combined.
    """
    return Or(tuple(parsers))


# 3. many: Zero or more occurrences
def many(p: Parser, fold: Optional[FoldFn] = None) -> Parser:
    return Many(p, fold or to_list)


# 4. many1: One or more occurrences
def many1(p: Parser, fold: Optional[FoldFn] = None) -> Parser:
    """The first occurrence is mandatory; its failure is the combinator's failure."""
    return Many1(p, fold or to_list)


# 5. count: Exactly n occurrences
def count(n: int, p: Parser, fold: Optional[FoldFn] = None) -> Parser:
    if n < 0:
        raise GrammarError(f"count needs a non-negative repetition, got {n}")
    return Count(n, p, fold or to_list)


# 6. sep_by: Zero or more occurrences separated by sep
def sep_by(p: Parser, sep: Parser, fold: Optional[FoldFn] = None) -> Parser:
    """
    Parses zero or more p separated by sep; separator results are discarded.
    A trailing separator is left unconsumed.
    """
    return SepBy(p, sep, fold or to_list)


# 7. sep_by1: One or more occurrences separated by sep
def sep_by1(p: Parser, sep: Parser, fold: Optional[FoldFn] = None) -> Parser:
    return SepBy1(p, sep, fold or to_list)


# 8. apply: Transforms a successful result
def apply(p: Parser, f: Callable[[Any], Any]) -> Parser:
    return Apply(p, f)


# 9. expect: Names what p stands for in error messages
def expect(p: Parser, label: str) -> Parser:
    """
    If p fails without getting past its starting point, the error's expected
    set becomes just `label`.
    """
    return Expect(p, label)


# 10. maybe: Optional p, None when absent
def maybe(p: Parser) -> Parser:
    return Maybe(p)


# 11. lazy: Defers building a parser, for recursive grammars
def lazy(thunk: Callable[[], Parser]) -> Parser:
    return Lazy(thunk)


# 12. between: p surrounded by open and close, keeping p's value
def between(open: Parser, close: Parser, p: Parser) -> Parser:
    return And((open, p, close), lambda n, xs: xs[1])


# 13. traced: Logs entry, success and failure of p at DEBUG
def traced(name: str, p: Parser) -> Parser:
    return Traced(name, p)


# 14. tag: Wraps p's result into a tagged AST node
def tag(p: Parser, name: str) -> Parser:
    return Tag(p, name)


# 15. root: Marks a tagged result as the root of the tree
def root(p: Parser) -> Parser:
    """Renames the tag of an AstNode result to "root"; other values pass through."""
    return Root(p)
