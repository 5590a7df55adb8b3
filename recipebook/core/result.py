"""
Success/failure result values.

Operations that can fail in expected ways (unknown shorthand, incompatible units)
return a Result instead of raising, so callers handle both branches explicitly:

    convert(amount, UnitType.CUP).map(format_amount).get_or_default("")
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

S = TypeVar("S")
F = TypeVar("F")
T = TypeVar("T")


class Result(Generic[S, F]):
    succeeded: bool = False

    @property
    def failed(self) -> bool:
        return not self.succeeded

    def map(self, mapper: Callable[[S], T]) -> "Result[T, F]":
        """Apply `mapper` to the success value; failures pass through untouched."""
        if isinstance(self, Success):
            return Success(mapper(self.value))
        return self  # type: ignore[return-value]

    def and_then(self, next_fn: Callable[[S], "Result[T, F]"]) -> "Result[T, F]":
        """Chain another fallible operation onto a success."""
        if isinstance(self, Success):
            return next_fn(self.value)
        return self  # type: ignore[return-value]

    def map_failure(self, mapper: Callable[[F], T]) -> "Result[S, T]":
        if isinstance(self, Failure):
            return Failure(mapper(self.error))
        return self  # type: ignore[return-value]

    def on_success(self, handler: Callable[[S], Any]) -> "Result[S, F]":
        if isinstance(self, Success):
            handler(self.value)
        return self

    def on_failure(self, handler: Callable[[F], Any]) -> "Result[S, F]":
        if isinstance(self, Failure):
            handler(self.error)
        return self

    def get_or_default(self, default: T) -> "S | T":
        if isinstance(self, Success):
            return self.value
        return default

    def get_or_none(self) -> Optional[S]:
        return self.get_or_default(None)

    def get_or_raise(self) -> S:
        if isinstance(self, Success):
            return self.value
        error = self.error  # type: ignore[attr-defined]
        if isinstance(error, BaseException):
            raise error
        raise ValueError(str(error))

    def failure_or_none(self) -> Optional[F]:
        if isinstance(self, Failure):
            return self.error
        return None


@dataclass(frozen=True)
class Success(Result[S, F]):
    value: S
    succeeded: bool = True

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Result[S, F]):
    error: F
    succeeded: bool = False

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


def success(value: S) -> Result[S, Any]:
    return Success(value)


def failure(error: F) -> Result[Any, F]:
    return Failure(error)


def result_from_all(results: Iterable[Result[S, F]]) -> Result[list[S], F]:
    """
    Collapse many results into one.

    Success holding every value (in order) when all succeed, otherwise the first failure.
    """
    values: list[S] = []
    for result in results:
        if isinstance(result, Failure):
            return result  # type: ignore[return-value]
        values.append(result.value)  # type: ignore[attr-defined]
    return Success(values)
