"""Exceptions raised by the Option and Result types.

``UnwrapError`` is a panic: extraction hit the wrong variant. ``Propagate``
is not an error at all but the control-flow signal behind ``bail()``; it
must only ever be caught by ``@early_return``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from klaw_monads.option import NothingType
    from klaw_monads.result import Err

__all__ = ['Propagate', 'UnwrapError']


class UnwrapError(RuntimeError):
    """Raised when ``unwrap``/``expect`` (or their error-channel twins) hit the wrong variant.

    This is a panic, not a checked failure: it signals a bug at the call site
    and is never produced by ``attempt`` or ``@safe``.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class Propagate(Exception):  # noqa: N818
    """Carries a failed Option or Result from ``bail()`` to ``@early_return``.

    ``attempt`` and ``@safe`` re-raise it untouched, so a bail inside an
    attempted thunk still ends the enclosing decorated function.
    """

    def __init__(self, failure: NothingType | Err[Any]) -> None:
        super().__init__(failure)
        self.value: NothingType | Err[Any] = failure

    def __str__(self) -> str:
        return f'bail() on {self.value!r} escaped without an @early_return function'
