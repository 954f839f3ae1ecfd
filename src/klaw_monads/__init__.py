"""klaw-monads: Option and Result values with a join algebra for Python 3.13+.

Flat imports (preferred):
    from klaw_monads import Option, Some, Nothing, Result, Ok, Err
    from klaw_monads import early_return, safe

Module namespaces for the helpers that act on many values at once:
    from klaw_monads import option, result
    option.join(Some(1), Some(2)).combine(lambda a, b: a + b)
    result.join_collect_errors(Err('a'), Ok(1), Err('b')).into_result()
    result.split([Ok(1), Err('x')])
"""

from klaw_monads import option, result
from klaw_monads._config import MonadsConfig, get_config, init
from klaw_monads.decorators import early_return, safe
from klaw_monads.errors import Propagate, UnwrapError
from klaw_monads.join import (
    JoinErr,
    JoinNothing,
    JoinOk,
    JoinSome,
    OptionJoin,
    ResultJoin,
)
from klaw_monads.option import Nothing, NothingType, Option, Some, is_option
from klaw_monads.result import Err, Ok, Result, is_result

__all__ = [
    # Result types
    'Err',
    # Join types
    'JoinErr',
    'JoinNothing',
    'JoinOk',
    'JoinSome',
    # Configuration
    'MonadsConfig',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionJoin',
    # Propagation
    'Propagate',
    'Result',
    'ResultJoin',
    'Some',
    # Errors
    'UnwrapError',
    # Decorators
    'early_return',
    'get_config',
    'init',
    'is_option',
    'is_result',
    # Namespaces
    'option',
    'result',
    'safe',
]
