"""Bounded recursion evaluator.

Applies ``purpose_fn(data, depth)`` repeatedly for depth = 0 .. max_depth-1,
threading each return value into the next call. With ``stop_at_fixed_point``
the loop also stops as soon as a call returns a value equal to its input.
That exit is opt-in: a purpose function that reads ``depth`` can leave a
value unchanged at one depth and change it at a later one.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from telestate.errors import InvalidArgumentError

PurposeFn = Callable[[Any, int], Any]


@dataclass(frozen=True)
class RecursionTrace:
    """Outcome of one evaluation."""

    result: Any
    invocations: int
    reached_fixed_point: bool


def validate_max_depth(max_depth: object) -> int:
    # bool is an int subclass but never a sensible depth
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise InvalidArgumentError("max_depth", f"expected an integer, got {type(max_depth).__name__}")
    if max_depth < 0:
        raise InvalidArgumentError("max_depth", f"must be non-negative, got {max_depth}")
    return max_depth


def evaluate_traced(
    seed: Any,
    purpose_fn: PurposeFn,
    max_depth: int,
    *,
    stop_at_fixed_point: bool = False,
) -> RecursionTrace:
    """Run the evaluator and report how it terminated.

    Errors raised by *purpose_fn* propagate immediately; no partial result
    is returned. *seed* is never mutated.
    """
    if not callable(purpose_fn):
        raise InvalidArgumentError("purpose_fn", "must be callable")
    max_depth = validate_max_depth(max_depth)

    data = copy.deepcopy(seed)
    invocations = 0
    for depth in range(max_depth):
        result = purpose_fn(data, depth)
        invocations += 1
        if stop_at_fixed_point and result == data:
            return RecursionTrace(result=result, invocations=invocations, reached_fixed_point=True)
        data = result
    return RecursionTrace(result=data, invocations=invocations, reached_fixed_point=False)


def evaluate(
    seed: Any,
    purpose_fn: PurposeFn,
    max_depth: int,
    *,
    stop_at_fixed_point: bool = False,
) -> Any:
    """Return the final value of the bounded recursion seeded with *seed*."""
    return evaluate_traced(seed, purpose_fn, max_depth, stop_at_fixed_point=stop_at_fixed_point).result
