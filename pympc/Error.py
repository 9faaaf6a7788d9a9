from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from .Input import Position


def _quote(text: str) -> str:
    return "'" + text.replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r") + "'"


def describe_expected(expected: Iterable[str]) -> str:
    """'a' or 'b' style listing of an expected set, sorted for stable output."""
    items = [_quote(e) for e in sorted(expected)]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " or " + items[-1]


@dataclass(frozen=True)
class ParseError:
    """
    A positioned parse failure.

    `expected` names what the failing matcher(s) wanted at `position`. It is
    empty only for errors raised by an explicit `fail` parser, which carry just
    a `failure_message`. `received` is the character found there, or None at
    end of input. `notes` keeps explicit failure messages that were merged
    with expectations at the same position.
    """
    position: Position
    failure_message: str
    expected: FrozenSet[str] = field(default_factory=frozenset)
    filename: str = ""
    received: Optional[str] = None
    notes: Tuple[str, ...] = ()

    def explicit_messages(self) -> Tuple[str, ...]:
        """Messages from explicit `fail` parsers carried by this error."""
        if self.notes:
            return self.notes
        if not self.expected and self.failure_message:
            return (self.failure_message,)
        return ()

    def merge(self, other: 'ParseError') -> 'ParseError':
        """Combine two alternative failures, keeping the one that got further."""
        if other.position.offset > self.position.offset:
            return other
        if other.position.offset < self.position.offset:
            return self
        expected = self.expected | other.expected
        notes = tuple(dict.fromkeys(self.explicit_messages() + other.explicit_messages()))
        if expected:
            message = "; ".join(notes + (f"expected {describe_expected(expected)}",))
        else:
            message = " or ".join(notes)
        received = self.received if self.received is not None else other.received
        return ParseError(self.position, message, expected, self.filename, received, notes)

    def with_expected(self, label: str) -> 'ParseError':
        return ParseError(self.position, f"expected {_quote(label)}", frozenset([label]),
                          self.filename, self.received)

    def summary(self) -> str:
        if not self.expected:
            return self.failure_message
        found = "end of input" if self.received is None else _quote(self.received)
        return "; ".join(self.notes + (f"expected {describe_expected(self.expected)} at {found}",))

    def excerpt(self, text: str) -> str:
        """The offending source line with a caret under the failure column."""
        lines = text.split("\n")
        line = lines[self.position.row] if self.position.row < len(lines) else ""
        return f"{self}\n{line}\n{' ' * self.position.col}^"

    def __str__(self) -> str:
        name = self.filename or "<input>"
        return f"{name}:{self.position.row + 1}:{self.position.col + 1}: error: {self.summary()}"


class MpcError(Exception):
    """Raised by Result.unwrap() when the parse failed."""

    def __init__(self, error: ParseError):
        super().__init__(str(error))
        self.error = error


class GrammarError(ValueError):
    """A parser was constructed with arguments that can never make sense."""
