"""@early_return decorator for catching Propagate exceptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_monads._logging import log_debug
from klaw_monads.errors import Propagate

__all__ = ['early_return']


def early_return[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @early_return calls .bail() on an Err or
    on Nothing, the Propagate exception is caught and that Err or Nothing
    is returned from the function. This is the runtime counterpart of an
    "unwrap or return early" rewrite: bail() only asks the instance whether
    it failed and, if not, reads its value.

    Args:
        func: The function to wrap. Must return an Option or a Result.

    Returns:
        A wrapped function that catches Propagate and returns the carried value.

    Example:
        ```python
        @early_return
        def total(a: str, b: str) -> Result[int, Exception]:
            x = result.attempt(lambda: int(a)).bail()
            y = result.attempt(lambda: int(b)).bail()
            return Ok(x + y)

        total('1', '2')
        # Ok(value=3)
        total('1', 'two')
        # Err(error=ValueError(...))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            log_debug(__name__, 'early_return.propagated', function=getattr(wrapped, '__qualname__', repr(wrapped)))
            return p.value

    return wrapper(func)
