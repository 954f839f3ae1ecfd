"""Result type: Ok[T] | Err[E] for explicit error handling.

Ok carries a value, Err carries an error of any type. Neither variant ever
stores the other channel's payload, so ``Err.map`` and ``Ok.map_err`` return
the receiver itself.

Example:
    ```python
    from klaw_monads import Err, Ok, result

    parsed = result.attempt(lambda: int('42'))
    print(parsed)  # Ok(value=42)

    failed = result.attempt(lambda: int('forty-two')).map_err(str)
    print(failed)  # Err(error="invalid literal for int() with base 10: 'forty-two'")

    oks, errs = result.split([Ok(1), Err('x'), Ok(2)])
    print(oks, errs)  # [1, 2] ['x']
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

import msgspec

from klaw_monads._logging import log_debug
from klaw_monads.errors import Propagate, UnwrapError
from klaw_monads.option import Nothing, NothingType, Option, Some

if TYPE_CHECKING:
    from klaw_monads.join import ResultJoin

__all__ = [
    'Err',
    'Ok',
    'Result',
    'attempt',
    'collect',
    'collect_errors',
    'filter_ok',
    'from_optional',
    'from_optional_else',
    'is_result',
    'join',
    'join_collect_errors',
    'join_keyed',
    'join_keyed_collect_errors',
    'split',
]

_MISSING: Any = object()


def _same_outcome_factory[E](error: E, error_else: Callable[[], E] | None) -> Callable[[], E]:
    """Resolve xor's eager/lazy same-outcome error into one factory."""
    if (error is _MISSING) == (error_else is None):
        msg = 'xor() takes exactly one of same_outcome_error or same_outcome_error_else'
        raise TypeError(msg)
    if error_else is not None:
        return error_else
    return lambda: error


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies the predicate."""
        return pred(self.value)

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there's no error to test."""
        return False

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        return Nothing

    def ok_or_none(self) -> T:
        """Return the value as a plain optional."""
        return self.value

    def err_or_none(self) -> None:
        """Return None since this is Ok."""
        return None

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Apply the ``ok`` branch to the value; ``err`` is never called."""
        return ok(self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[Any], U], f: Callable[[T], U]) -> U:
        """Apply f to the value, ignoring the default factory."""
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flatten[U, E](self: Ok[Result[U, E]]) -> Result[U, E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value

    def or_(self, _other: Result[T, Any]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def or_else(self, _f: Callable[[], Result[T, Any]]) -> Ok[T]:
        """Return self unchanged; the fallback factory is never called."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since self is Ok."""
        return other

    def and_else[U, E](self, f: Callable[[], Result[U, E]]) -> Result[U, E]:
        """Return the result produced by f since self is Ok."""
        return f()

    def xor[E](
        self,
        other: Result[T, E],
        same_outcome_error: E = _MISSING,
        *,
        same_outcome_error_else: Callable[[], E] | None = None,
    ) -> Result[T, E]:
        """Return self if other is Err, else Err(same_outcome_error).

        Exactly one of ``same_outcome_error`` or ``same_outcome_error_else``
        must be given; the factory only runs when other is Ok too.

        Examples:
            >>> Ok(1).xor(Err('x'), 'both')
            Ok(value=1)
            >>> Ok(1).xor(Ok(2), 'both')
            Err(error='both')
            >>> Ok(1).xor(Ok(2), same_outcome_error_else=lambda: 'both')
            Err(error='both')
        """
        make_error = _same_outcome_factory(same_outcome_error, same_outcome_error_else)
        if other.is_ok():
            return Err(make_error())
        return self

    def xor_else[E](self, f: Callable[[], Result[T, E]], same_outcome_error: Callable[[], E]) -> Result[T, E]:
        """Like xor; other is computed by f, the error only when both are Ok."""
        return self.xor(f(), same_outcome_error_else=same_outcome_error)

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since Ok has no error.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: expected Err, got Ok({self.value!r})')

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err_or[E](self, default: E) -> E:
        """Return the default error since this is Ok."""
        return default

    def unwrap_err_or_else[E](self, f: Callable[[], E]) -> E:
        """Compute and return a default error since this is Ok."""
        return f()

    def join(self, *others: Result[Any, Any]) -> ResultJoin[tuple[Any, ...], Any]:
        """Join with others, first Err wins.

        Examples:
            >>> Ok(1).join(Ok(2)).combine(lambda a, b: a + b)
            Ok(value=3)
        """
        from klaw_monads.join import result_join

        return result_join((self, *others))

    def join_collect_errors(self, *others: Result[Any, Any]) -> ResultJoin[tuple[Any, ...], list[Any]]:
        """Join with others, collecting the error of every Err among them."""
        from klaw_monads.join import result_join_collect_errors

        return result_join_collect_errors((self, *others))

    def tap(self, f: Callable[[Result[T, Any]], object]) -> Ok[T]:
        """Call f with this result for side effects and return self."""
        f(self)
        return self

    def tap_ok(self, f: Callable[[T], object]) -> Ok[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def tap_err(self, _f: Callable[[Any], object]) -> Ok[T]:
        """Return self without calling f."""
        return self

    def bail(self) -> T:
        """Return the contained value (no-op for Ok).

        For Err, bail raises Propagate so an @early_return function returns
        the Err immediately.
        """
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there's no value to test."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the error satisfies the predicate."""
        return pred(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        return Some(self.error)

    def ok_or_none(self) -> None:
        """Return None since this is Err."""
        return None

    def err_or_none(self) -> E:
        """Return the error as a plain optional."""
        return self.error

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Apply the ``err`` branch to the error; ``ok`` is never called."""
        return err(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[U](self, default: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Compute the default from the error."""
        return default(self.error)

    def and_then(self, _f: Callable[[Any], Result[Any, E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def or_[T](self, other: Result[T, E]) -> Result[T, E]:
        """Return other if it is Ok, else self."""
        if other.is_ok():
            return other
        return self

    def or_else[T](self, f: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Like or_, with other computed by f."""
        return self.or_(f())

    def and_(self, _other: Result[Any, E]) -> Err[E]:
        """Return self, keeping the original error."""
        return self

    def and_else(self, _f: Callable[[], Result[Any, E]]) -> Err[E]:
        """Return self without calling f."""
        return self

    def xor[T](
        self,
        other: Result[T, E],
        same_outcome_error: E = _MISSING,
        *,
        same_outcome_error_else: Callable[[], E] | None = None,
    ) -> Result[T, E]:
        """Return other if it is Ok, else Err(same_outcome_error).

        Both sides failing counts as the same outcome, so neither original
        error survives.
        """
        make_error = _same_outcome_factory(same_outcome_error, same_outcome_error_else)
        if other.is_ok():
            return other
        return Err(make_error())

    def xor_else[T](self, f: Callable[[], Result[T, E]], same_outcome_error: Callable[[], E]) -> Result[T, E]:
        """Like xor; other is computed by f, the error only when both are Err."""
        return self.xor(f(), same_outcome_error_else=same_outcome_error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}')

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: {self.error!r}')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def unwrap_err_or(self, _default: E) -> E:
        """Return the contained error, ignoring the default."""
        return self.error

    def unwrap_err_or_else(self, _f: Callable[[], E]) -> E:
        """Return the contained error, ignoring the fallback function."""
        return self.error

    def join(self, *_others: Result[Any, E]) -> ResultJoin[tuple[Any, ...], E]:
        """Return a failed join carrying this error; others are not inspected."""
        from klaw_monads.join import JoinErr

        return JoinErr(self.error)

    def join_collect_errors(self, *others: Result[Any, E]) -> ResultJoin[tuple[Any, ...], list[E]]:
        """Return a failed join carrying this error followed by every other error."""
        from klaw_monads.join import result_join_collect_errors

        return result_join_collect_errors((self, *others))

    def tap(self, f: Callable[[Result[Any, E]], object]) -> Err[E]:
        """Call f with this result for side effects and return self."""
        f(self)
        return self

    def tap_ok(self, _f: Callable[[Any], object]) -> Err[E]:
        """Return self without calling f."""
        return self

    def tap_err(self, f: Callable[[E], object]) -> Err[E]:
        """Call f with the error for side effects and return self."""
        f(self.error)
        return self

    def bail(self) -> NoReturn:
        """Raise Propagate to propagate this error up the call stack.

        When used inside a function decorated with @early_return, the Err
        will be caught and returned.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)


type Result[T, E = Exception] = Ok[T] | Err[E]


def from_optional[T, E](value: T | None, error: E) -> Result[T, E]:
    """Wrap a plain optional: None becomes Err(error), anything else Ok.

    Examples:
        >>> from_optional(3, 'missing')
        Ok(value=3)
        >>> from_optional(None, 'missing')
        Err(error='missing')
    """
    if value is None:
        return Err(error)
    return Ok(value)


def from_optional_else[T, E](value: T | None, f: Callable[[], E]) -> Result[T, E]:
    """Like from_optional, computing the error only when value is None."""
    if value is None:
        return Err(f())
    return Ok(value)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True only for instances built by this module.

    The check is on the exact class, so look-alike objects and subclasses
    of Ok or Err are rejected.
    """
    cls = type(value)
    return cls is Ok or cls is Err


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    from klaw_monads.join import scan_results

    return scan_results(results)


def collect_errors[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect an iterable of Results, gathering every error.

    Examples:
        >>> collect_errors([Err('a'), Ok(1), Err('b')])
        Err(error=['a', 'b'])
    """
    from klaw_monads.join import scan_results_collect_errors

    return scan_results_collect_errors(results)


def filter_ok[T](results: Iterable[Result[T, Any]]) -> list[T]:
    """Return the values of the Ok elements, in their original order."""
    return [result.value for result in results if result.is_ok()]


def split[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Partition results into (values, errors), each in original order."""
    oks: list[T] = []
    errs: list[E] = []
    for result in results:
        if result.is_ok():
            oks.append(result.value)
        else:
            errs.append(result.error)
    return oks, errs


@overload
def join[A, E](a: Result[A, E], /) -> ResultJoin[tuple[A], E]: ...


@overload
def join[A, B, E](a: Result[A, E], b: Result[B, E], /) -> ResultJoin[tuple[A, B], E]: ...


@overload
def join[A, B, C, E](a: Result[A, E], b: Result[B, E], c: Result[C, E], /) -> ResultJoin[tuple[A, B, C], E]: ...


@overload
def join[A, B, C, D, E](
    a: Result[A, E], b: Result[B, E], c: Result[C, E], d: Result[D, E], /
) -> ResultJoin[tuple[A, B, C, D], E]: ...


@overload
def join[E](*results: Result[Any, E]) -> ResultJoin[tuple[Any, ...], E]: ...


def join[E](*results: Result[Any, E]) -> ResultJoin[tuple[Any, ...], E]:
    """Join results positionally; the first Err wins."""
    from klaw_monads.join import result_join

    return result_join(results)


@overload
def join_collect_errors[A, E](a: Result[A, E], /) -> ResultJoin[tuple[A], list[E]]: ...


@overload
def join_collect_errors[A, B, E](a: Result[A, E], b: Result[B, E], /) -> ResultJoin[tuple[A, B], list[E]]: ...


@overload
def join_collect_errors[A, B, C, E](
    a: Result[A, E], b: Result[B, E], c: Result[C, E], /
) -> ResultJoin[tuple[A, B, C], list[E]]: ...


@overload
def join_collect_errors[A, B, C, D, E](
    a: Result[A, E], b: Result[B, E], c: Result[C, E], d: Result[D, E], /
) -> ResultJoin[tuple[A, B, C, D], list[E]]: ...


@overload
def join_collect_errors[E](*results: Result[Any, E]) -> ResultJoin[tuple[Any, ...], list[E]]: ...


def join_collect_errors[E](*results: Result[Any, E]) -> ResultJoin[tuple[Any, ...], list[E]]:
    """Join results positionally, collecting the error of every Err."""
    from klaw_monads.join import result_join_collect_errors

    return result_join_collect_errors(results)


def join_keyed[K, E](results: Mapping[K, Result[Any, E]]) -> Result[dict[K, Any], E]:
    """Join a mapping of results into a result of a dict with the same keys.

    Keys are visited in insertion order and the first Err wins.
    """
    from klaw_monads.join import scan_keyed_results

    return scan_keyed_results(results)


def join_keyed_collect_errors[K, E](results: Mapping[K, Result[Any, E]]) -> Result[dict[K, Any], list[E]]:
    """Join a mapping of results, collecting every error in key order.

    Examples:
        >>> join_keyed_collect_errors({'a': Err('a'), 'b': Err('b')})
        Err(error=['a', 'b'])
    """
    from klaw_monads.join import scan_keyed_results_collect_errors

    return scan_keyed_results_collect_errors(results)


def attempt[T](
    f: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Result[T, Any]:
    """Call f, returning Ok(result) or Err(exception) if it raises.

    The raised exception object is kept as-is as the error. UnwrapError and
    Propagate are never captured, even when they match ``exceptions``.

    Args:
        f: Zero-argument callable to run.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        Ok with f's return value, or Err with the exception it raised.
    """
    try:
        return Ok(f())
    except (UnwrapError, Propagate):
        raise
    except exceptions as exc:
        log_debug(__name__, 'attempt.captured', exc_type=type(exc).__name__)
        return Err(exc)
