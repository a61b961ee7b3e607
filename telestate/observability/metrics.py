"""Prometheus metrics for telestate containers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

transitions_total = Counter(
    "telestate_transitions_total",
    "Committed state transitions",
)

self_determinations_total = Counter(
    "telestate_self_determinations_total",
    "self_determine() calls by outcome",
    ["outcome"],  # applied | rejected | error
)

recursion_invocations = Histogram(
    "telestate_recursion_invocations",
    "Purpose function invocations per teli_recurse() call",
    buckets=(0, 1, 2, 5, 10, 20, 50, 100, 1000),
)

delta_entries = Histogram(
    "telestate_delta_entries",
    "Number of field deltas per committed transition",
    buckets=(0, 1, 2, 5, 10, 25, 50, 100),
)
