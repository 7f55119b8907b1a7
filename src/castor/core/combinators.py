"""Combinators for building and sequencing ``Result`` values.

Everything here is a specialisation of ``flat_map`` sequencing:

- ``pure`` lifts a plain value into a ``Success``.
- The ``apply_*`` family merges a boxed function with a boxed argument,
  always inspecting the function side first. The first failure found is
  returned unchanged and nothing further is invoked.
- ``curry`` turns an n-ary function into a ``Curried`` builder that
  accumulates one argument per call and finalises on the last one.
- ``apply_result`` / ``apply_result_of`` pair an upstream value with the
  output of a follow-up action, so a curried constructor can be threaded
  through a ``flat_map`` chain.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect
from typing import TYPE_CHECKING, Any

from castor.core.result import Failure, Result, Success
from castor.errors import InternalError

if TYPE_CHECKING:
    from collections.abc import Callable


def pure[A](x: A) -> Success[A]:
    """Lift a plain value into an always-succeeding ``Result``."""
    return Success(x)


# --- Applicative apply ---


def apply_fn[A, B, E](f: Result[Callable[[A], B], E], x: Result[A, E]) -> Result[B, E]:
    """Apply a boxed function to a boxed argument."""
    if isinstance(f, Failure):
        return f
    return x.map(f.value)


def apply_fn_keep_arg[A, B, E](
    f: Result[Callable[[A], B], E], x: Result[A, E]
) -> Result[tuple[B, A], E]:
    """Like ``apply_fn`` but keep the original argument next to the output.

    The argument is threaded forward so the next curried step can use it
    as its input.
    """
    if isinstance(f, Failure):
        return f
    if isinstance(x, Failure):
        return x
    return Success((f.value(x.value), x.value))


def apply_step_keep_arg[A, B, C, E](
    acc: Result[tuple[Callable[[B], C], A], E],
    step: Result[Callable[[A], Result[B, E]], E],
) -> Result[tuple[C, B], E]:
    """Run a fallible ``step`` on the threaded argument and feed its output on.

    ``acc`` holds a partially applied function and the value produced by
    the previous step. ``step`` is run on that value; on success its output
    is both applied to the function and threaded forward.
    """
    if isinstance(acc, Failure):
        return acc
    if isinstance(step, Failure):
        return step
    fn, arg = acc.value
    return step.value(arg).map(lambda produced: (fn(produced), produced))


def apply_step[A, B, C, E](
    acc: Result[tuple[Callable[[B], C], A], E],
    step: Result[Callable[[A], Result[B, E]], E],
) -> Result[C, E]:
    """Terminal form of ``apply_step_keep_arg``: keep only the applied output."""
    if isinstance(acc, Failure):
        return acc
    if isinstance(step, Failure):
        return step
    fn, arg = acc.value
    return step.value(arg).map(fn)


# --- Currying ---


@dataclass(frozen=True, slots=True)
class Curried:
    """Accumulates positional arguments for ``function`` one call at a time.

    Each call returns a new builder holding one more argument. The call
    that supplies the last argument finalises by invoking ``function``
    and returns its value instead of another builder.
    """

    function: Callable[..., Any]
    arity: int
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise InternalError(
                f"Cannot curry {_name(self.function)}: arity must be >= 1, got {self.arity}"
            )
        if len(self.args) >= self.arity:
            raise InternalError(
                f"Curried {_name(self.function)} already holds {len(self.args)} "
                f"of {self.arity} arguments"
            )

    @property
    def remaining(self) -> int:
        """Number of arguments still to be supplied."""
        return self.arity - len(self.args)

    def __call__(self, arg: Any) -> Any:
        args = (*self.args, arg)
        if len(args) == self.arity:
            return self.function(*args)
        return Curried(self.function, self.arity, args)


def curry(function: Callable[..., Any], arity: int | None = None) -> Curried:
    """Convert an n-ary function into a chain of single-argument calls.

    Args:
        function: Any callable taking positional arguments.
        arity: Number of arguments to collect. Inferred from the required
            positional parameters of ``function`` when omitted.

    Raises:
        InternalError: If the arity is not at least one.

    Example:
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1)(2)(3) == 6
    """
    if arity is None:
        arity = _positional_arity(function)
    return Curried(function, arity)


def _positional_arity(function: Callable[..., Any]) -> int:
    params = inspect.signature(function).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def _name(function: Callable[..., Any]) -> str:
    return getattr(function, "__qualname__", repr(function))


# --- applyResult adapters ---


def apply_result[A, B, E](
    result: Result[A, E], action: Callable[[A], B]
) -> Result[tuple[A, B], E]:
    """Pair a computed value with ``action(value)``.

    ``action`` is only called when ``result`` is a success.
    """
    return result.flat_map(lambda value: Success((value, action(value))))


def apply_result_of[A, B, C, E](
    step: Callable[[C], Result[A, E]], *, keep_intermediate: bool = True
) -> Callable[[tuple[C, Callable[[A], B]]], Result[Any, E]]:
    """Adapt a fallible ``step`` to consume ``(input, action)`` pairs.

    The returned adapter runs ``step(input)`` and, on success, calls
    ``action`` with the step's output. It is shaped to be handed straight
    to ``flat_map`` on the output of ``apply_result`` or of a previous
    adapter.

    Args:
        step: The fallible computation to run on the input.
        keep_intermediate: When true the adapter yields
            ``(step_output, action_output)``; when false only
            ``action_output``, which ends a chain.
    """

    def adapter(pair: tuple[C, Callable[[A], B]]) -> Result[Any, E]:
        value, action = pair
        if keep_intermediate:
            return step(value).flat_map(lambda out: Success((out, action(out))))
        return step(value).flat_map(lambda out: Success(action(out)))

    return adapter
