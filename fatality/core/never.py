"""An error that can never happen.

``Never`` is the error type for operations whose signature is fallible but
whose implementation is not. It has no instances and cannot be subclassed,
so any branch handling one is dead code.
"""

from __future__ import annotations

from typing import NoReturn


class Never(Exception):
    """Uninhabited error type."""

    def __new__(cls, *args, **kwargs):
        raise TypeError("Never has no instances")

    def __init_subclass__(cls, **kwargs) -> None:
        raise TypeError("Never cannot be subclassed")

    def __str__(self) -> str:
        absurd(self)


def absurd(value: Never) -> NoReturn:
    """Mark a branch that receives a ``Never`` as unreachable."""
    raise AssertionError(f"Unreachable: {value!r}")
