"""@safe decorator for turning raised exceptions into Err."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from klaw_monads.result import Err, Ok, attempt

__all__ = ['safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised. Each call goes through
    ``result.attempt``, so UnwrapError and Propagate still escape.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        return attempt(lambda: wrapped(*args, **kwargs), exceptions=catch)

    if func is not None:
        return wrapper(func)
    return wrapper
