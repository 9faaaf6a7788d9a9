from .Combinators import many, many1, or_
from .Fold import strfold
from .Parser import Parser
from .Prim import char, char_range, one_of


# Whitespace
def whitespace() -> Parser:
    """One of space, tab, newline or carriage return."""
    return one_of(" \t\n\r")


def whitespaces() -> Parser:
    """Zero or more whitespace characters as one string."""
    return many(whitespace(), strfold)


def blank() -> Parser:
    """Space or tab."""
    return one_of(" \t")


def newline() -> Parser:
    return char('\n')


def tab() -> Parser:
    return char('\t')


def escape() -> Parser:
    return char('\\')


# Digits
def digit() -> Parser:
    return char_range('0', '9')


def hexdigit() -> Parser:
    return or_([char_range('0', '9'), char_range('a', 'f'), char_range('A', 'F')])


def octdigit() -> Parser:
    return char_range('0', '7')


def digits() -> Parser:
    return many1(digit(), strfold)


def hexdigits() -> Parser:
    return many1(hexdigit(), strfold)


def octdigits() -> Parser:
    return many1(octdigit(), strfold)


# Letters
def lower() -> Parser:
    return char_range('a', 'z')


def upper() -> Parser:
    return char_range('A', 'Z')


def alpha() -> Parser:
    return or_([lower(), upper()])


def underscore() -> Parser:
    return char('_')


def alphanum() -> Parser:
    return or_([alpha(), digit()])
