"""Decorators: @early_return and @safe."""

from klaw_monads.decorators.early_return import early_return
from klaw_monads.decorators.safe import safe

__all__ = [
    'early_return',
    'safe',
]
