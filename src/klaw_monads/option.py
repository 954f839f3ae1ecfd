"""Option type: Some[T] | Nothing for optional values.

The two variants are separate frozen structs joined by the ``Option`` type
alias. ``Nothing`` carries no payload, so the combinators below hand the
same singleton back whatever the payload type of the chain has become.

Module-level helpers cover the operations that act on several options at
once (``collect``, ``join``, ``join_keyed`` ...) and the conversions from
plain Python values (``from_optional``, ``attempt``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

import msgspec

from klaw_monads._logging import log_debug
from klaw_monads.errors import Propagate, UnwrapError

if TYPE_CHECKING:
    from klaw_monads.join import OptionJoin
    from klaw_monads.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'attempt',
    'collect',
    'filter_some',
    'from_optional',
    'is_option',
    'join',
    'join_keyed',
    'join_optional',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or combined with other options.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.or_(Some(0))
        Some(value=42)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies the predicate."""
        return pred(self.value)

    def to_optional(self) -> T | None:
        """Return the contained value as a plain optional."""
        return self.value

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from klaw_monads.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from klaw_monads.result import Ok

        return Ok(self.value)

    def match[U](self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:  # noqa: ARG002
        """Apply the ``some`` branch to the contained value.

        Args:
            some: Called with the value.
            nothing: Not called for Some.

        Returns:
            The result of ``some(value)``.
        """
        return some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the contained value, ignoring the default factory."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate is satisfied, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged; the fallback factory is never called."""
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since self is Some."""
        return other

    def and_else[U](self, f: Callable[[], Option[U]]) -> Option[U]:
        """Return the option produced by f since self is Some."""
        return f()

    def xor(self, other: Option[T]) -> Option[T]:
        """Return self if other is Nothing, else Nothing (both are Some)."""
        if other.is_some():
            return Nothing
        return self

    def xor_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Like xor, with other computed by f."""
        return self.xor(f())

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def join(self, *others: Option[Any]) -> OptionJoin[tuple[Any, ...]]:
        """Join this option with others into an OptionJoin.

        The tuple starts with this value followed by the others in order.
        The first Nothing among them decides the outcome.

        Examples:
            >>> Some(1).join(Some('a')).combine(lambda n, s: s * n)
            Some(value='a')
        """
        from klaw_monads.join import option_join

        return option_join((self, *others))

    def tap(self, f: Callable[[Option[T]], object]) -> Some[T]:
        """Call f with this option for side effects and return self."""
        f(self)
        return self

    def tap_some(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value for side effects and return self."""
        f(self.value)
        return self

    def tap_nothing(self, _f: Callable[[], object]) -> Some[T]:
        """Return self without calling f."""
        return self

    def bail(self) -> T:
        """Return the contained value (no-op for Some).

        For Nothing, bail raises Propagate so an @early_return function
        returns Nothing immediately.
        """
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there's no value to test."""
        return False

    def to_optional(self) -> None:
        """Return None since this is Nothing."""
        return None

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from klaw_monads.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from klaw_monads.result import Err

        return Err(f())

    def match[U](self, *, some: Callable[[Any], U], nothing: Callable[[], U]) -> U:  # noqa: ARG002
        """Call the ``nothing`` branch; ``some`` is never called."""
        return nothing()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Compute the default since there's no value to map."""
        return default()

    def and_then(self, _f: Callable[[Any], Option[Any]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def and_(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def and_else(self, _f: Callable[[], Option[Any]]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def xor[T](self, other: Option[T]) -> Option[T]:
        """Return other if it is Some, else Nothing."""
        if other.is_some():
            return other
        return self

    def xor_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Like xor, with other computed by f."""
        return self.xor(f())

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('Called unwrap on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: expected Some, got Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def join(self, *_others: Option[Any]) -> OptionJoin[tuple[Any, ...]]:
        """Return a failed join without inspecting the others."""
        from klaw_monads.join import JoinNothing

        return JoinNothing()

    def tap(self, f: Callable[[Option[Any]], object]) -> NothingType:
        """Call f with this option for side effects and return self."""
        f(self)
        return self

    def tap_some(self, _f: Callable[[Any], object]) -> NothingType:
        """Return self without calling f."""
        return self

    def tap_nothing(self, f: Callable[[], object]) -> NothingType:
        """Call f for side effects and return self."""
        f()
        return self

    def bail(self) -> NoReturn:
        """Raise Propagate to propagate Nothing up the call stack.

        When used inside a function decorated with @early_return, Nothing
        will be caught and returned.

        Raises:
            Propagate: Always, containing Nothing.
        """
        raise Propagate(self)

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_optional[T](value: T | None) -> Option[T]:
    """Wrap a plain optional: None becomes Nothing, anything else Some.

    Examples:
        >>> from_optional(0)
        Some(value=0)
        >>> from_optional(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True only for instances built by this module.

    The check is on the exact class, so look-alike objects exposing
    ``is_some``/``value`` and subclasses of Some are rejected.
    """
    cls = type(value)
    return cls is Some or cls is NothingType


def collect[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect an iterable of Options into an Option of list.

    Short-circuits on the first Nothing encountered.

    Examples:
        >>> collect([Some(1), Some(2)])
        Some(value=[1, 2])
        >>> collect([Some(1), Nothing])
        Nothing
    """
    from klaw_monads.join import scan_options

    return scan_options(options)


def filter_some[T](options: Iterable[Option[T]]) -> list[T]:
    """Return the payloads of the Some elements, in their original order."""
    return [option.value for option in options if option.is_some()]


@overload
def join[A](a: Option[A], /) -> OptionJoin[tuple[A]]: ...


@overload
def join[A, B](a: Option[A], b: Option[B], /) -> OptionJoin[tuple[A, B]]: ...


@overload
def join[A, B, C](a: Option[A], b: Option[B], c: Option[C], /) -> OptionJoin[tuple[A, B, C]]: ...


@overload
def join[A, B, C, D](
    a: Option[A], b: Option[B], c: Option[C], d: Option[D], /
) -> OptionJoin[tuple[A, B, C, D]]: ...


@overload
def join(*options: Option[Any]) -> OptionJoin[tuple[Any, ...]]: ...


def join(*options: Option[Any]) -> OptionJoin[tuple[Any, ...]]:
    """Join options positionally; the first Nothing wins.

    Examples:
        >>> join(Some(1), Some(2)).combine(lambda a, b: a + b)
        Some(value=3)
        >>> join(Some(1), Nothing).combine(lambda a, b: a + b)
        Nothing
    """
    from klaw_monads.join import option_join

    return option_join(options)


def join_optional(*values: Any) -> OptionJoin[tuple[Any, ...]]:
    """Join plain values positionally, treating None as Nothing."""
    from klaw_monads.join import option_join

    return option_join(from_optional(value) for value in values)


def join_keyed[K](options: Mapping[K, Option[Any]]) -> Option[dict[K, Any]]:
    """Join a mapping of options into an option of a dict with the same keys.

    Keys are visited in insertion order and the first Nothing wins.

    Examples:
        >>> join_keyed({'a': Some(1), 'b': Some(2)})
        Some(value={'a': 1, 'b': 2})
    """
    from klaw_monads.join import scan_keyed_options

    return scan_keyed_options(options)


def attempt[T](f: Callable[[], T]) -> Option[T]:
    """Call f, returning Some(result) or Nothing if it raises.

    The exception detail is discarded. UnwrapError and Propagate are not
    captured: a panic inside f stays a panic, and a bail inside f still
    reaches its @early_return function.

    Examples:
        >>> attempt(lambda: int('12'))
        Some(value=12)
        >>> attempt(lambda: int('twelve'))
        Nothing
    """
    try:
        return Some(f())
    except (UnwrapError, Propagate):
        raise
    except Exception as exc:
        log_debug(__name__, 'attempt.captured', exc_type=type(exc).__name__)
        return Nothing
