"""Change tracking for telestate.

Submodules:
    diff     -- Recursive structural diff producing FieldDelta mappings.
    history  -- In-memory ring buffer of transition records.
"""

from telestate.ledger.diff import apply_delta, diff, invert, join_path, split_path
from telestate.ledger.history import TransitionHistory

__all__ = ["TransitionHistory", "apply_delta", "diff", "invert", "join_path", "split_path"]
