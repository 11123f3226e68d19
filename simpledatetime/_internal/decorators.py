"""Custom decorators for simpledatetime.

This module provides decorator utilities for the library:
    - @structural_violation(message): Turn a method into one that always fails
    - @memoize: Simple memoization decorator

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, NoReturn, TypeVar, ParamSpec

from simpledatetime.errors import StructuralViolation

P = ParamSpec("P")
T = TypeVar("T")


def structural_violation(
    message: str,
) -> Callable[[Callable[..., Any]], Callable[..., NoReturn]]:
    """Mark a method as touching a dimension the value type does not model.

    The decorated method never runs: every call raises StructuralViolation,
    whatever the arguments. The original signature is kept for
    introspection.

    Args:
        message: Explanation included in the raised error.

    Returns:
        A decorator function.

    Examples:
        >>> class DateImmutable:
        ...     @structural_violation("Date represents a calendar date without time.")
        ...     def set_time(self, hour, minute, second=0, microsecond=0): ...

        >>> DateImmutable().set_time(12, 0)
        Traceback (most recent call last):
        ...
        StructuralViolation: set_time() is not supported on DateImmutable objects. ...
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., NoReturn]:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> NoReturn:
            raise StructuralViolation(
                f"{func.__name__}() is not supported on "
                f"{type(self).__name__} objects. {message}"
            )

        wrapper._structural_violation = True  # type: ignore[attr-defined]
        return wrapper

    return decorator


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Simple memoization decorator for functions with hashable arguments.

    Used for values that are expensive to build and never change, such as
    compiled keyword patterns.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.
    """
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "structural_violation",
    "memoize",
]
