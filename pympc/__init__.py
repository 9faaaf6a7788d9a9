# Core
from .Input import Position, Cursor
from .Error import ParseError, MpcError, GrammarError
from .Result import Ok, Failure, Result
from .Ast import AstNode
from .Parser import Parser
from .Eval import parse, run_parser, evaluate

# Primitives
from .Prim import (
    any_char, char, char_range, one_of, none_of, satisfy, string,
    pass_, fail, lift, lift_val, anchor, state, eoi, soi, boundary,
    boundary_newline
)

# Combinators
from .Combinators import (
    and_, or_, many, many1, count, sep_by, sep_by1,
    apply, expect, maybe, lazy, between, traced, tag, root
)

# Folds
from .Fold import to_list, strfold, fst, snd, lst, null, count_fold, ast_fold

# Characters
from .Char import (
    whitespace, whitespaces, blank, newline, tab, escape,
    digit, hexdigit, octdigit, digits, hexdigits, octdigits,
    lower, upper, alpha, underscore, alphanum
)
