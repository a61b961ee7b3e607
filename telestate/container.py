"""Mutable state container.

StateContainer owns exactly one structured payload and exposes three
mutation entry points:

    self_determine  -- replace the payload with transform_fn(payload).
    teli_recurse    -- replace the payload with the bounded recursion result.
    transition      -- shallow-merge a patch and record a TransitionRecord.

Every mutation is atomic from the caller's perspective: when a
caller-supplied function raises, the payload is left exactly as it was and
the original exception propagates. No internal locking; callers sharing a
container across threads must serialise access themselves.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from telestate.clock import Clock, utc_now
from telestate.engine.recursion import PurposeFn, evaluate_traced, validate_max_depth
from telestate.errors import InvalidArgumentError, InvalidTransformResultError
from telestate.ledger.diff import diff
from telestate.ledger.history import TransitionHistory
from telestate.models.config import TelestateConfig
from telestate.models.transition import TransitionRecord
from telestate.models.values import ValueKind, classify
from telestate.observability.logging import get_logger
from telestate.observability.metrics import (
    delta_entries,
    recursion_invocations,
    self_determinations_total,
    transitions_total,
)

_logger = get_logger("container")

TransformFn = Callable[[Any], Any]


class StateContainer:
    """Wraps a structured payload behind a controlled mutation protocol."""

    def __init__(
        self,
        initial_data: Any = None,
        *,
        clock: Clock | None = None,
        config: TelestateConfig | None = None,
    ) -> None:
        self._config = config or TelestateConfig()
        self._clock = clock or utc_now
        self._data: Any = {} if initial_data is None else copy.deepcopy(initial_data)
        self._history = TransitionHistory(self._config.history.size)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def data(self) -> Any:
        """Deep copy of the current payload."""
        return copy.deepcopy(self._data)

    @property
    def history(self) -> tuple[TransitionRecord, ...]:
        """Copies of the retained transition records, oldest first."""
        return copy.deepcopy(self._history.records())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self._data!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def self_determine(self, transform_fn: TransformFn) -> StateContainer:
        """Replace the payload with ``transform_fn(payload)`` and return self.

        The transform receives a deep copy, so a transform that mutates its
        argument and then raises cannot corrupt the container.

        Raises:
            InvalidArgumentError: transform_fn is not callable.
            InvalidTransformResultError: transform_fn returned None.
        """
        if not callable(transform_fn):
            raise InvalidArgumentError("transform_fn", "must be callable")

        try:
            result = transform_fn(copy.deepcopy(self._data))
        except Exception as exc:
            self_determinations_total.labels(outcome="error").inc()
            _logger.warning("self_determine_failed", error=repr(exc))
            raise

        if result is None:
            self_determinations_total.labels(outcome="rejected").inc()
            _logger.warning("self_determine_rejected", reason="transform returned None")
            raise InvalidTransformResultError(result)

        self._data = result
        self_determinations_total.labels(outcome="applied").inc()
        _logger.debug("self_determine_applied", kind=str(classify(result)))
        return self

    def teli_recurse(self, purpose_fn: PurposeFn, max_depth: int | None = None) -> Any:
        """Run the bounded recursion on the payload, commit and return the result.

        ``purpose_fn(data, depth)`` is invoked at most *max_depth* times
        (default: ``config.recursion.default_max_depth``).

        Raises:
            InvalidArgumentError: purpose_fn is not callable, or max_depth is
                negative or not an integer.
        """
        if not callable(purpose_fn):
            raise InvalidArgumentError("purpose_fn", "must be callable")
        depth_limit = validate_max_depth(
            self._config.recursion.default_max_depth if max_depth is None else max_depth
        )

        try:
            trace = evaluate_traced(
                self._data,
                purpose_fn,
                depth_limit,
                stop_at_fixed_point=self._config.recursion.stop_at_fixed_point,
            )
        except Exception as exc:
            _logger.warning("teli_recurse_failed", max_depth=depth_limit, error=repr(exc))
            raise

        self._data = trace.result
        recursion_invocations.observe(trace.invocations)
        _logger.debug(
            "recursion_completed",
            max_depth=depth_limit,
            invocations=trace.invocations,
            fixed_point=trace.reached_fixed_point,
        )
        return copy.deepcopy(trace.result)

    def transition(self, new_state_fields: Mapping[str, Any]) -> TransitionRecord:
        """Shallow-merge *new_state_fields* into the payload and record the change.

        Fields in the patch override same-named fields; other fields are
        preserved. The merge commits once its delta has been computed; the
        returned record and the copy kept in history are independent.

        Raises:
            InvalidArgumentError: the patch or the current payload is not a
                mapping.
            CyclicStructureError: the merged payload contains a reference
                cycle; the payload is left unchanged.
        """
        if classify(new_state_fields) is not ValueKind.MAPPING:
            raise InvalidArgumentError(
                "new_state_fields", f"expected a mapping, got {type(new_state_fields).__name__}"
            )
        if classify(self._data) is not ValueKind.MAPPING:
            raise InvalidArgumentError(
                "state", f"transition requires a mapping payload, got {type(self._data).__name__}"
            )

        previous = copy.deepcopy(self._data)
        merged = {**previous, **copy.deepcopy(dict(new_state_fields))}
        current = copy.deepcopy(merged)
        # delta values must not alias previous/current
        delta = copy.deepcopy(diff(previous, current))
        record = TransitionRecord(
            previous=previous,
            current=current,
            delta=delta,
            sequence=self._history.next_sequence(),
            recorded_at=self._clock(),
        )

        self._data = merged
        self._history.append(copy.deepcopy(record))

        transitions_total.inc()
        delta_entries.observe(len(record.delta))
        _logger.info(
            "transition_committed",
            sequence=record.sequence,
            changed=record.changed_paths,
        )
        return record

    def revert(self) -> TransitionRecord:
        """Undo the newest retained transition and return its record.

        Raises:
            HistoryEmptyError: no transition is retained.
        """
        record = self._history.pop()
        self._data = copy.deepcopy(record.previous)
        _logger.info("transition_reverted", sequence=record.sequence)
        return record


def create_state(
    initial_data: Any = None,
    *,
    clock: Clock | None = None,
    config: TelestateConfig | None = None,
) -> StateContainer:
    """Create a StateContainer holding a deep copy of *initial_data* (default ``{}``).

    Without *config* the built-in TelestateConfig defaults apply; the
    TELESTATE_* environment variables are only honoured when the caller
    passes ``config=load_config()``.
    """
    container = StateContainer(initial_data, clock=clock, config=config)
    _logger.debug("state_created", kind=str(classify(container._data)))
    return container
