from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union

from .Error import MpcError, ParseError

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful parse carrying its value."""
    value: T

    @property
    def error(self) -> None:
        return None

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def as_tuple(self) -> Tuple[T, None]:
        return self.value, None


@dataclass(frozen=True)
class Failure:
    """A failed parse carrying its ParseError."""
    error: ParseError

    @property
    def value(self) -> None:
        return None

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise MpcError(self.error)

    def as_tuple(self) -> Tuple[None, ParseError]:
        return None, self.error


Result = Union[Ok[Any], Failure]
