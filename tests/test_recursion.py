import sys

from pympc.Char import digits
from pympc.Combinators import between, lazy, many, or_, sep_by
from pympc.Eval import run_parser
from pympc.Prim import char


def test_stack_safety():
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        n = 5000
        res, err = run_parser(many(char('a')), "a" * n)
    finally:
        sys.setrecursionlimit(limit)
    assert err is None
    assert len(res) == n


def nested_lists():
    value = or_([
        digits().map(int),
        between(char('['), char(']'), sep_by(lazy(lambda: value), char(','))),
    ])
    return value


def test_recursive_grammar():
    res, err = run_parser(nested_lists(), "[1,[2,3],[],[[4]]]")
    assert err is None
    assert res == [1, [2, 3], [], [[4]]]


def test_recursive_grammar_error():
    # The separated list stops quietly at ",[2;3]", so the closing bracket is what fails.
    _, err = run_parser(nested_lists(), "[1,[2;3]]")
    assert err.position.offset == 2
    assert err.expected == {"]"}
    assert err.received == ","


def test_deep_nesting():
    depth = 50
    res, err = run_parser(nested_lists(), "[" * depth + "]" * depth)
    assert err is None
    for _ in range(depth - 1):
        res = res[0]
    assert res == []


def test_nesting_beyond_one_hundred_levels():
    depth = 150
    res, err = run_parser(nested_lists(), "[" * depth + "1" + "]" * depth)
    assert err is None
    for _ in range(depth):
        res = res[0]
    assert res == 1
