"""Result type and combinators."""

from castor.core.combinators import (
    Curried,
    apply_fn,
    apply_fn_keep_arg,
    apply_result,
    apply_result_of,
    apply_step,
    apply_step_keep_arg,
    curry,
    pure,
)
from castor.core.result import Failure, Result, Success

__all__ = [
    "Curried",
    "Failure",
    "Result",
    "Success",
    "apply_fn",
    "apply_fn_keep_arg",
    "apply_result",
    "apply_result_of",
    "apply_step",
    "apply_step_keep_arg",
    "curry",
    "pure",
]
