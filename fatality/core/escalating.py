"""Escalating errors: a payload tagged as recoverable or fatal.

An ``EscalatingError`` is either ``NonFatal(error)`` or ``Fatal(error)``. The
variant is the only record of severity; the payload is carried untouched.

Every combinator below consumes the wrapper: once a combinator has been
invoked on a value, that logical error has been handled and the value should
not be passed to another combinator. Values are frozen, so reuse cannot
corrupt them, but a second call would mean a second recovery attempt.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union

from fatality.common.errors import EscalatedError
from fatality.core.result import Err, Ok

E = TypeVar("E")
E2 = TypeVar("E2")
T = TypeVar("T")

VARIANTS = ("NonFatal", "Fatal")


class EscalatingError(ABC, Generic[E]):
    """Base of the two severity variants.

    Abstract, and closed to every subclass but ``NonFatal`` and ``Fatal``.
    """

    label: ClassVar[str]
    error: E

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in VARIANTS:
            raise TypeError(f"EscalatingError is closed to {cls.__qualname__}; use NonFatal or Fatal")

    def __str__(self) -> str:
        return f"{self.label}: {self.error}"

    def is_error(self) -> bool:
        """Return True if this error is not fatal."""
        return isinstance(self, NonFatal)

    def is_fatal(self) -> bool:
        """Return True if this error is fatal."""
        return isinstance(self, Fatal)

    def into_inner(self) -> E:
        """Drop the severity tag and return the payload."""
        return self.error

    @abstractmethod
    def map(self, f: Callable[[E], E2]) -> EscalatingError[E2]:
        """Apply ``f`` to the payload, keeping the severity."""

    def escalate(self) -> Fatal[E]:
        """Make this error fatal."""
        return Fatal(self.error)

    def deescalate(self) -> NonFatal[E]:
        """Make this error non fatal."""
        return NonFatal(self.error)

    @abstractmethod
    def fatality(self) -> Ok[E] | Err[EscalatingError[E]]:
        """``Ok(payload)`` if non fatal, else ``Err(self)`` with the tag kept."""

    @abstractmethod
    def recover(self) -> Ok[E] | Err[E]:
        """``Ok(payload)`` if non fatal, else ``Err(payload)``."""

    @abstractmethod
    def recover_from_error(self, f: Recovery[E, T]) -> Ok[T] | Err[EscalatingError[E]]:
        """Recover a non fatal error with ``f``; fatal errors pass through."""

    @abstractmethod
    def recover_from_fatal(self, f: Recovery[E, T]) -> Ok[T] | Err[EscalatingError[E]]:
        """Recover a fatal error with ``f``; non fatal errors pass through."""

    def then(self, f: Recovery[E, T]) -> Ok[T] | Err[EscalatingError[E]]:
        """Recover from either severity with ``f``.

        The tag is dropped before ``f`` sees the payload. Use
        ``recover_from_error``/``recover_from_fatal`` when severity matters.
        """
        return f(self.error)

    @property
    def cause(self) -> BaseException | None:
        """The payload's own underlying cause, whatever this error's severity."""
        return getattr(self.error, "__cause__", None)

    def clone(self) -> EscalatingError[E]:
        try:
            payload = copy.deepcopy(self.error)
        except Exception:
            payload = self.error
        return type(self)(payload)

    def into_exception(self) -> EscalatedError:
        """Wrap this error in an exception so it can be raised."""
        exc = EscalatedError(self)
        if isinstance(self.error, BaseException):
            exc.__cause__ = self.error
        return exc


@dataclass(frozen=True)
class NonFatal(EscalatingError[E]):
    """A recoverable error."""

    label: ClassVar[str] = "Error"
    error: E

    def map(self, f: Callable[[E], E2]) -> NonFatal[E2]:
        return NonFatal(f(self.error))

    def fatality(self) -> Ok[E]:
        return Ok(self.error)

    def recover(self) -> Ok[E]:
        return Ok(self.error)

    def recover_from_error(self, f: Recovery[E, T]) -> Ok[T] | Err[EscalatingError[E]]:
        return f(self.error)

    def recover_from_fatal(self, f: Recovery[E, T]) -> Err[EscalatingError[E]]:
        return Err(self)


@dataclass(frozen=True)
class Fatal(EscalatingError[E]):
    """An error the caller must not recover from."""

    label: ClassVar[str] = "Fatal Error"
    error: E

    def map(self, f: Callable[[E], E2]) -> Fatal[E2]:
        return Fatal(f(self.error))

    def fatality(self) -> Err[EscalatingError[E]]:
        return Err(self)

    def recover(self) -> Err[E]:
        return Err(self.error)

    def recover_from_error(self, f: Recovery[E, T]) -> Err[EscalatingError[E]]:
        return Err(self)

    def recover_from_fatal(self, f: Recovery[E, T]) -> Ok[T] | Err[EscalatingError[E]]:
        return f(self.error)


Recovery = Callable[[E], Union[Ok[T], Err[EscalatingError[E]]]]
