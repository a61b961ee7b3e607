"""telestate: self-transforming state containers with transition tracking.

Exports:
    create_state         -- build a StateContainer around a payload.
    StateContainer       -- self_determine / teli_recurse / transition.
    diff                 -- structural delta between two values.
    conspansive_duality  -- spatial/temporal/informational bundle.
    syntactic_semantic   -- container seeded with syntax and semantics.
    self_organize        -- pass-through to an organisation function.
"""

from telestate.container import StateContainer, create_state
from telestate.duality import (
    ConspansiveDuality,
    SyntacticSemantic,
    conspansive_duality,
    self_organize,
    syntactic_semantic,
)
from telestate.errors import (
    CyclicStructureError,
    HistoryEmptyError,
    InvalidArgumentError,
    InvalidTransformResultError,
    TelestateError,
)
from telestate.ledger.diff import apply_delta, diff, invert
from telestate.models.transition import ChangeKind, FieldDelta, TransitionRecord
from telestate.models.values import ABSENT

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "ChangeKind",
    "ConspansiveDuality",
    "CyclicStructureError",
    "FieldDelta",
    "HistoryEmptyError",
    "InvalidArgumentError",
    "InvalidTransformResultError",
    "StateContainer",
    "SyntacticSemantic",
    "TelestateError",
    "TransitionRecord",
    "apply_delta",
    "conspansive_duality",
    "create_state",
    "diff",
    "invert",
    "self_organize",
    "syntactic_semantic",
]
