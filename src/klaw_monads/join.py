"""Join algebra: combine many independent Options or Results into one.

Two strategies are provided:

- first-failure-wins: positions are scanned in order and the first
  Nothing/Err decides the outcome; later positions are never inspected.
- collect-all-errors (Result only): every position is scanned and all
  errors are gathered, in positional order, into a list.

Positional joins produce a transient join value (``OptionJoin`` or
``ResultJoin``) whose ``combine``/``try_combine`` spread the collected tuple
into a function. Keyed joins work on a mapping and return a plain Option or
Result holding a dict.

Example:
    ```python
    from klaw_monads import Ok, Err, result

    result.join(Ok(2), Ok(3)).combine(lambda a, b: a * b)
    # Ok(value=6)

    result.join_collect_errors(Err('a'), Ok(1), Err('b')).into_result()
    # Err(error=['a', 'b'])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import msgspec

from klaw_monads.option import Nothing, NothingType, Option, Some
from klaw_monads.result import Err, Ok, Result

__all__ = [
    'JoinErr',
    'JoinNothing',
    'JoinOk',
    'JoinSome',
    'OptionJoin',
    'ResultJoin',
    'option_join',
    'result_join',
    'result_join_collect_errors',
    'scan_keyed_options',
    'scan_keyed_results',
    'scan_keyed_results_collect_errors',
    'scan_options',
    'scan_results',
    'scan_results_collect_errors',
]


# ---------------------------------------------------------------------
# Option joins
# ---------------------------------------------------------------------


class JoinSome[L](msgspec.Struct, frozen=True, gc=False):
    """Successful Option join holding every joined value, in order."""

    values: L

    def is_some(self) -> bool:
        """Return True since every joined option was Some."""
        return True

    def combine[U](self, f: Callable[..., U]) -> Some[U]:
        """Call f with the joined values spread positionally and wrap the result in Some."""
        return Some(f(*self.values))

    def try_combine[U](self, f: Callable[..., Option[U]]) -> Option[U]:
        """Call f with the joined values; f decides the outcome."""
        return f(*self.values)

    def into_option(self) -> Some[L]:
        """Return the joined tuple wrapped in Some."""
        return Some(self.values)


class JoinNothing(msgspec.Struct, frozen=True, gc=False):
    """Failed Option join: at least one joined option was Nothing."""

    def is_some(self) -> bool:
        """Return False since a joined option was Nothing."""
        return False

    def combine(self, _f: Callable[..., Any]) -> NothingType:
        """Return Nothing without calling f."""
        return Nothing

    def try_combine(self, _f: Callable[..., Option[Any]]) -> NothingType:
        """Return Nothing without calling f."""
        return Nothing

    def into_option(self) -> NothingType:
        """Return Nothing."""
        return Nothing


type OptionJoin[L] = JoinSome[L] | JoinNothing


def scan_options[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Return Some(list of values), or Nothing at the first absent option."""
    values: list[T] = []
    for option in options:
        if option.is_none():
            return Nothing
        values.append(option.value)
    return Some(values)


def option_join(options: Iterable[Option[Any]]) -> OptionJoin[tuple[Any, ...]]:
    """Build an OptionJoin from options, first Nothing wins."""
    scanned = scan_options(options)
    if scanned.is_some():
        return JoinSome(tuple(scanned.value))
    return JoinNothing()


def scan_keyed_options[K](options: Mapping[K, Option[Any]]) -> Option[dict[K, Any]]:
    """Return Some(dict) with the same keys, or Nothing at the first absent key."""
    values: dict[K, Any] = {}
    for key, option in options.items():
        if option.is_none():
            return Nothing
        values[key] = option.value
    return Some(values)


# ---------------------------------------------------------------------
# Result joins
# ---------------------------------------------------------------------


class JoinOk[L](msgspec.Struct, frozen=True, gc=False):
    """Successful Result join holding every joined value, in order."""

    values: L

    def is_ok(self) -> bool:
        """Return True since every joined result was Ok."""
        return True

    def combine[U](self, f: Callable[..., U]) -> Ok[U]:
        """Call f with the joined values spread positionally and wrap the result in Ok."""
        return Ok(f(*self.values))

    def try_combine[U, E](self, f: Callable[..., Result[U, E]]) -> Result[U, E]:
        """Call f with the joined values; f decides the outcome."""
        return f(*self.values)

    def into_result(self) -> Ok[L]:
        """Return the joined tuple wrapped in Ok."""
        return Ok(self.values)


class JoinErr[E](msgspec.Struct, frozen=True, gc=False):
    """Failed Result join.

    ``error`` is the first error for first-failure-wins joins and the list
    of every error for collecting joins.
    """

    error: E

    def is_ok(self) -> bool:
        """Return False since a joined result was Err."""
        return False

    def combine(self, _f: Callable[..., Any]) -> Err[E]:
        """Return Err(error) without calling f."""
        return Err(self.error)

    def try_combine(self, _f: Callable[..., Result[Any, Any]]) -> Err[E]:
        """Return Err(error) without calling f."""
        return Err(self.error)

    def into_result(self) -> Err[E]:
        """Return Err(error)."""
        return Err(self.error)


type ResultJoin[L, E] = JoinOk[L] | JoinErr[E]


def scan_results[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Return Ok(list of values), or the first Err encountered."""
    values: list[T] = []
    for result in results:
        if result.is_err():
            return result
        values.append(result.value)
    return Ok(values)


def scan_results_collect_errors[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Return Ok(list of values), or Err(list of every error in order)."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result.is_err():
            errors.append(result.error)
        else:
            values.append(result.value)
    if errors:
        return Err(errors)
    return Ok(values)


def result_join[E](results: Iterable[Result[Any, E]]) -> ResultJoin[tuple[Any, ...], E]:
    """Build a ResultJoin from results, first Err wins."""
    scanned = scan_results(results)
    if scanned.is_ok():
        return JoinOk(tuple(scanned.value))
    return JoinErr(scanned.error)


def result_join_collect_errors[E](
    results: Iterable[Result[Any, E]],
) -> ResultJoin[tuple[Any, ...], list[E]]:
    """Build a ResultJoin from results, collecting every Err."""
    scanned = scan_results_collect_errors(results)
    if scanned.is_ok():
        return JoinOk(tuple(scanned.value))
    return JoinErr(scanned.error)


def scan_keyed_results[K, E](results: Mapping[K, Result[Any, E]]) -> Result[dict[K, Any], E]:
    """Return Ok(dict) with the same keys, or the Err of the first failing key."""
    values: dict[K, Any] = {}
    for key, result in results.items():
        if result.is_err():
            return Err(result.error)
        values[key] = result.value
    return Ok(values)


def scan_keyed_results_collect_errors[K, E](
    results: Mapping[K, Result[Any, E]],
) -> Result[dict[K, Any], list[E]]:
    """Return Ok(dict), or Err(list of errors) ordered by key iteration."""
    values: dict[K, Any] = {}
    errors: list[E] = []
    for key, result in results.items():
        if result.is_err():
            errors.append(result.error)
            continue
        values[key] = result.value
    if errors:
        return Err(errors)
    return Ok(values)
