"""
Stock fold functions.

A fold receives the number of sub-results and the sub-results themselves, in
parse order, and reduces them to a single value.
"""
from typing import Any, List

from .Ast import AstNode, gather_children
from .Input import Position


def to_list(n: int, xs: List[Any]) -> List[Any]:
    return list(xs)


def strfold(n: int, xs: List[Any]) -> str:
    """Concatenates the string values, skipping anything else."""
    return "".join(x for x in xs if isinstance(x, str))


def fst(n: int, xs: List[Any]) -> Any:
    return xs[0] if xs else None


def snd(n: int, xs: List[Any]) -> Any:
    return xs[1] if n > 1 else None


def lst(n: int, xs: List[Any]) -> Any:
    return xs[-1] if xs else None


def null(n: int, xs: List[Any]) -> None:
    return None


def count_fold(n: int, xs: List[Any]) -> int:
    return n


def ast_fold(n: int, xs: List[Any]) -> AstNode:
    """Gathers sub-results under one untagged node, see Ast.gather_children."""
    children = gather_children(xs)
    position = children[0].position if children else Position()
    return AstNode("", "", position, children)
