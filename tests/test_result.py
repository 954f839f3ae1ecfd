"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_monads import Err, Nothing, Ok, Result, Some, UnwrapError, result

from tests.strategies import errors, int_results, payloads, results


class TestResultCreation:
    """Tests for Ok/Err instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_err_creation(self):
        """Err wraps an error value."""
        exc = ValueError('something went wrong')
        assert Err(exc).error is exc

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('error')
        with pytest.raises(AttributeError):
            err.error = 'new error'  # type: ignore[misc]

    def test_pattern_matching(self):
        """Ok and Err work with structural pattern matching."""

        def describe(r: Result[int, str]) -> str:
            match r:
                case Ok(value):
                    return f'ok:{value}'
                case Err(error):
                    return f'err:{error}'

        assert describe(Ok(1)) == 'ok:1'
        assert describe(Err('x')) == 'err:x'


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_equality(self):
        """Variants compare by payload and by kind."""
        assert Ok(42) == Ok(42)
        assert Err('error') == Err('error')
        assert Ok(42) != Ok(43)
        assert Ok(42) != Err(42)

    def test_hashable(self):
        """Ok and Err instances are hashable."""
        assert {Ok(42): 'value'}[Ok(42)] == 'value'
        assert hash(Err('error')) == hash(Err('error'))


class TestResultQuerying:
    """Tests for is_ok(), is_err() and their predicate forms."""

    def test_predicates(self):
        """is_ok/is_err report the variant."""
        assert Ok(42).is_ok() is True
        assert Ok(42).is_err() is False
        assert Err('error').is_ok() is False
        assert Err('error').is_err() is True

    def test_is_ok_and(self):
        """is_ok_and tests the value of Ok only."""
        assert Ok(2).is_ok_and(lambda x: x == 2)
        assert not Err(2).is_ok_and(lambda x: True)

    def test_is_err_and(self):
        """is_err_and tests the error of Err only."""
        assert Err('boom').is_err_and(lambda e: e.startswith('b'))
        assert not Ok('boom').is_err_and(lambda e: True)

    @given(payloads, errors)
    def test_unwrap_properties(self, x, e):
        """Ok(x).unwrap() == x and Err(e).unwrap_err() == e."""
        assert Ok(x).unwrap() == x
        assert Err(e).unwrap_err() == e


class TestResultViews:
    """Tests for ok(), err(), ok_or_none() and err_or_none()."""

    def test_ok_views(self):
        """Ok has a Some success view and a Nothing failure view."""
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() == Nothing
        assert Ok(1).ok_or_none() == 1
        assert Ok(1).err_or_none() is None

    def test_err_views(self):
        """Err has a Nothing success view and a Some failure view."""
        assert Err('e').ok() == Nothing
        assert Err('e').err() == Some('e')
        assert Err('e').ok_or_none() is None
        assert Err('e').err_or_none() == 'e'


class TestResultUnwrap:
    """Tests for the unwrap/expect family and the defaulting operations."""

    def test_err_unwrap_raises(self):
        """Err.unwrap() raises UnwrapError mentioning the error."""
        with pytest.raises(UnwrapError, match="Called unwrap on Err: 'error'"):
            Err('error').unwrap()

    def test_ok_unwrap_err_raises(self):
        """Ok.unwrap_err() raises UnwrapError mentioning the value."""
        with pytest.raises(UnwrapError, match='Called unwrap_err on Ok: 1'):
            Ok(1).unwrap_err()

    def test_expect(self):
        """expect returns the value or raises with the message."""
        assert Ok(42).expect('should not fail') == 42
        with pytest.raises(UnwrapError, match='custom message'):
            Err('error').expect('custom message')

    def test_expect_err(self):
        """expect_err returns the error or raises with the message."""
        assert Err('bad').expect_err('should not fail') == 'bad'
        with pytest.raises(UnwrapError, match='wanted a failure'):
            Ok(1).expect_err('wanted a failure')

    def test_unwrap_or(self):
        """unwrap_or returns the value or the default."""
        assert Ok(42).unwrap_or(0) == 42
        assert Err('error').unwrap_or(0) == 0

    def test_unwrap_or_else_is_lazy(self, counter):
        """unwrap_or_else only calls the factory for Err."""
        factory = counter.returning(0)
        assert Ok(42).unwrap_or_else(factory) == 42
        assert counter.calls == 0
        assert Err('error').unwrap_or_else(factory) == 0
        assert counter.calls == 1

    def test_unwrap_err_or(self):
        """unwrap_err_or returns the error or the fallback error."""
        assert Err('bad').unwrap_err_or('less bad') == 'bad'
        assert Ok(1).unwrap_err_or('less bad') == 'less bad'

    def test_unwrap_err_or_else_is_lazy(self, counter):
        """unwrap_err_or_else only calls the factory for Ok."""
        factory = counter.returning('less bad')
        assert Err('bad').unwrap_err_or_else(factory) == 'bad'
        assert counter.calls == 0
        assert Ok(1).unwrap_err_or_else(factory) == 'less bad'
        assert counter.calls == 1


class TestResultMatch:
    """Tests for match()."""

    def test_ok_calls_ok_branch_only(self, counter):
        """Only the ok branch runs for Ok."""
        err_branch = counter.returning('err')
        assert Ok(2).match(ok=lambda x: x + 1, err=err_branch) == 3
        assert counter.calls == 0

    def test_err_calls_err_branch_only(self, counter):
        """Only the err branch runs for Err."""
        ok_branch = counter.returning('ok')
        assert Err('bad').match(ok=ok_branch, err=str.upper) == 'BAD'
        assert counter.calls == 0


class TestResultMap:
    """Tests for map, map_err, map_or, map_or_else, and_then and flatten."""

    def test_ok_map(self):
        """Ok.map() transforms the value."""
        assert Ok(5).map(lambda x: x * 2).map(str) == Ok('10')

    def test_err_map_never_calls(self, counter):
        """Err.map() keeps the error and never calls f."""
        err = Err('error')
        assert err.map(counter.returning(1)) is err
        assert counter.calls == 0

    def test_map_err(self):
        """map_err transforms only the error."""
        assert Ok(42).map_err(str.upper) == Ok(42)
        assert Err('error').map_err(str.upper) == Err('ERROR')

    def test_map_or(self):
        """map_or applies f or returns the default."""
        assert Ok(2).map_or(0, lambda x: x * 3) == 6
        assert Err('e').map_or(0, lambda x: x * 3) == 0

    def test_map_or_else(self):
        """map_or_else computes the default from the error."""
        assert Ok(2).map_or_else(len, lambda x: x * 3) == 6
        assert Err('abc').map_or_else(len, lambda x: x * 3) == 3

    def test_and_then(self):
        """and_then chains result-returning functions."""

        def positive(x):
            return Ok(x) if x > 0 else Err('not positive')

        assert Ok(5).and_then(positive) == Ok(5)
        assert Ok(-1).and_then(positive) == Err('not positive')
        assert Err('earlier').and_then(positive) == Err('earlier')

    def test_flatten(self):
        """flatten removes one level of nesting."""
        assert Ok(Ok(1)).flatten() == Ok(1)
        assert Ok(Err('e')).flatten() == Err('e')
        assert Err('e').flatten() == Err('e')

    @given(int_results)
    def test_failure_is_preserved_by_map(self, r):
        """Mapping never changes an Err."""
        if r.is_err():
            assert r.map(lambda x: x + 1) == r


class TestResultTruthTables:
    """Tests for or_, and_, xor and their lazy variants."""

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Ok(1), Ok(2), Ok(1)),
            (Ok(1), Err('r'), Ok(1)),
            (Err('l'), Ok(2), Ok(2)),
            (Err('l'), Err('r'), Err('l')),
        ],
    )
    def test_or(self, left, right, expected):
        """or_ follows the truth table, eager and lazy."""
        assert left.or_(right) == expected
        assert left.or_else(lambda: right) == expected

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Ok(1), Ok(2), Ok(2)),
            (Ok(1), Err('r'), Err('r')),
            (Err('l'), Ok(2), Err('l')),
            (Err('l'), Err('r'), Err('l')),
        ],
    )
    def test_and(self, left, right, expected):
        """and_ follows the truth table and keeps the original error."""
        assert left.and_(right) == expected
        assert left.and_else(lambda: right) == expected

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Ok(1), Ok(2), Err('same')),
            (Ok(1), Err('r'), Ok(1)),
            (Err('l'), Ok(2), Ok(2)),
            (Err('l'), Err('r'), Err('same')),
        ],
    )
    def test_xor(self, left, right, expected):
        """xor uses the same-outcome error whenever both sides agree."""
        assert left.xor(right, 'same') == expected
        assert left.xor_else(lambda: right, lambda: 'same') == expected

    def test_xor_else_error_only_built_for_same_outcome(self, counter):
        """The same-outcome error factory runs only when both sides agree."""
        factory = counter.returning('same')
        Ok(1).xor_else(lambda: Err('r'), factory)
        Err('l').xor_else(lambda: Ok(2), factory)
        assert counter.calls == 0
        Ok(1).xor_else(lambda: Ok(2), factory)
        assert counter.calls == 1

    def test_xor_lazy_error_with_plain_other(self, counter):
        """same_outcome_error_else pairs a plain other with a lazily built error."""
        factory = counter.returning('same')
        assert Ok(1).xor(Err('r'), same_outcome_error_else=factory) == Ok(1)
        assert Err('l').xor(Ok(2), same_outcome_error_else=factory) == Ok(2)
        assert counter.calls == 0
        assert Ok(1).xor(Ok(2), same_outcome_error_else=factory) == Err('same')
        assert Err('l').xor(Err('r'), same_outcome_error_else=factory) == Err('same')
        assert counter.calls == 2

    @pytest.mark.parametrize(
        'kwargs',
        [{}, {'same_outcome_error': 'e', 'same_outcome_error_else': lambda: 'e'}],
    )
    def test_xor_requires_exactly_one_error(self, kwargs):
        """Passing neither or both same-outcome errors is a TypeError."""
        with pytest.raises(TypeError, match='exactly one'):
            Ok(1).xor(Err('r'), **kwargs)
        with pytest.raises(TypeError, match='exactly one'):
            Err('l').xor(Ok(2), **kwargs)

    def test_or_else_not_called_for_ok(self, counter):
        """or_else never calls the producer for Ok."""
        Ok(1).or_else(counter.returning(Ok(2)))
        assert counter.calls == 0

    def test_and_else_not_called_for_err(self, counter):
        """and_else never calls the producer for Err."""
        Err('e').and_else(counter.returning(Ok(2)))
        assert counter.calls == 0

    @given(results, results)
    def test_and_keeps_first_error(self, left, right):
        """and_ on an Err always returns the receiver's error."""
        if left.is_err():
            assert left.and_(right) == left


class TestResultTap:
    """Tests for tap, tap_ok and tap_err."""

    def test_tap_runs_for_both(self):
        """tap runs for Ok and Err and returns the receiver."""
        seen = []
        assert Ok(1).tap(seen.append) == Ok(1)
        assert Err('e').tap(seen.append) == Err('e')
        assert seen == [Ok(1), Err('e')]

    def test_tap_ok_and_tap_err(self):
        """tap_ok/tap_err only run for their variant."""
        seen = []
        Ok(1).tap_ok(seen.append).tap_err(seen.append)
        Err('e').tap_ok(seen.append).tap_err(seen.append)
        assert seen == [1, 'e']

    def test_tap_ignores_return_value(self):
        """Whatever the hook returns, the receiver comes back."""
        assert Ok(1).tap_ok(lambda _: Err('ignored')) == Ok(1)


class TestResultHelpers:
    """Tests for the module-level helpers."""

    def test_from_optional(self):
        """None becomes Err(error), anything else Ok."""
        assert result.from_optional(3, 'missing') == Ok(3)
        assert result.from_optional(0, 'missing') == Ok(0)
        assert result.from_optional(None, 'missing') == Err('missing')

    def test_from_optional_else_is_lazy(self, counter):
        """The error factory only runs for None."""
        factory = counter.returning('missing')
        assert result.from_optional_else(3, factory) == Ok(3)
        assert counter.calls == 0
        assert result.from_optional_else(None, factory) == Err('missing')
        assert counter.calls == 1

    def test_is_result(self):
        """is_result accepts instances from this package only."""
        assert result.is_result(Ok(1))
        assert result.is_result(Err('e'))
        assert not result.is_result(Some(1))
        assert not result.is_result(None)

    def test_is_result_rejects_look_alikes(self):
        """Structurally similar values are not results."""

        class FakeOk:
            value = 1

            def is_err(self):
                return False

        assert not result.is_result(FakeOk())

    def test_collect(self):
        """collect short-circuits on the first Err."""
        assert result.collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
        assert result.collect([Ok(1), Err('a'), Err('b')]) == Err('a')

    def test_collect_errors(self):
        """collect_errors gathers every error in order."""
        assert result.collect_errors([Ok(1), Ok(2)]) == Ok([1, 2])
        assert result.collect_errors([Err('a'), Ok(1), Err('b')]) == Err(['a', 'b'])

    def test_filter_ok(self):
        """filter_ok keeps Ok values in order."""
        assert result.filter_ok([Ok(1), Err('x'), Ok(2)]) == [1, 2]

    def test_split(self):
        """split partitions into (values, errors)."""
        assert result.split([Ok(1), Err('x'), Ok(2)]) == ([1, 2], ['x'])
        assert result.split([]) == ([], [])

    @given(st.lists(int_results))
    def test_split_preserves_order(self, rs):
        """split keeps the relative order of both sides."""
        oks, errs = result.split(rs)
        assert oks == [r.value for r in rs if r.is_ok()]
        assert errs == [r.error for r in rs if r.is_err()]
        assert len(oks) + len(errs) == len(rs)

    def test_attempt_success(self):
        """attempt wraps the return value in Ok."""
        assert result.attempt(lambda: int('42')) == Ok(42)

    def test_attempt_preserves_exception(self):
        """attempt keeps the raised exception object verbatim."""
        exc = ValueError('bad')

        def boom():
            raise exc

        captured = result.attempt(boom)
        assert captured.is_err()
        assert captured.error is exc

    def test_attempt_then_map_err(self):
        """The captured exception can be turned into its message."""

        def boom():
            raise ValueError('bad')

        message = result.attempt(boom).map_err(str).expect_err('should have failed')
        assert message == 'bad'

    def test_attempt_with_exceptions(self):
        """Only the listed exception types are captured."""

        def type_error():
            raise TypeError('nope')

        assert result.attempt(type_error, exceptions=(TypeError,)).is_err()
        with pytest.raises(TypeError):
            result.attempt(type_error, exceptions=(ValueError,))

    def test_attempt_does_not_capture_unwrap_error(self):
        """A panic inside the thunk is re-raised even with broad exceptions."""
        with pytest.raises(UnwrapError):
            result.attempt(Err('e').unwrap, exceptions=(BaseException,))
