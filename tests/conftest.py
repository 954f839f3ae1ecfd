"""Pytest configuration and shared fixtures for klaw-monads tests."""

import pytest


@pytest.fixture
def counter():
    """Callable that records how many times it was invoked and returns a fixed value."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def returning(self, value):
            def produce(*_args):
                self.calls += 1
                return value

            return produce

    return Counter()
