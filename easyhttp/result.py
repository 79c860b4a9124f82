"""
Recoverable result values.

A ``Result`` is either a ``Success`` holding a value or a ``Failure`` holding
the exception that prevented the value from being produced. The synchronous
and asynchronous operations of the library both resolve to a ``Result``, so
callers compose outcomes the same way on both paths.
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful outcome."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: Any) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Apply ``func`` to the value, capturing any exception it raises."""
        return attempt(func, self.value)

    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        try:
            return func(self.value)
        except Exception as exc:
            return Failure(exc)

    def map_failure(self, func: Callable[[Exception], Exception]) -> "Result[T]":
        return self

    def on_success(self, action: Callable[[T], Any]) -> "Result[T]":
        action(self.value)
        return self

    def on_failure(self, action: Callable[[Exception], Any]) -> "Result[T]":
        return self


@dataclass(frozen=True)
class Failure:
    """A failed outcome carrying the exception that caused it."""

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        """Raise the stored error."""
        raise self.error

    def get_or_else(self, default: Any) -> Any:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Failure":
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> "Failure":
        return self

    def map_failure(self, func: Callable[[Exception], Exception]) -> "Failure":
        try:
            return Failure(func(self.error))
        except Exception as exc:
            return Failure(exc)

    def on_success(self, action: Callable[[Any], Any]) -> "Failure":
        return self

    def on_failure(self, action: Callable[[Exception], Any]) -> "Failure":
        action(self.error)
        return self


Result = Union[Success[T], Failure]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T]":
    """
    Run ``func`` and capture its outcome.

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt``,
    ``SystemExit`` and ``asyncio.CancelledError`` propagate.
    """
    try:
        return Success(func(*args, **kwargs))
    except Exception as exc:
        return Failure(exc)


async def attempt_async(
    func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
) -> "Result[T]":
    """Awaitable counterpart of :func:`attempt`."""
    try:
        return Success(await func(*args, **kwargs))
    except Exception as exc:
        return Failure(exc)
