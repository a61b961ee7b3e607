"""Free-standing helpers built on the container protocol.

    conspansive_duality -- bundle spatial/temporal/informational components.
    syntactic_semantic  -- a container seeded with syntax and semantics.
    self_organize       -- direct pass-through to an organisation function.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from telestate.clock import Clock
from telestate.container import StateContainer
from telestate.errors import InvalidArgumentError
from telestate.models.config import TelestateConfig

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ConspansiveDuality:
    """Three views of one structure that unify into a single mapping."""

    spatial: Any = field(default_factory=dict)
    temporal: Any = field(default_factory=dict)
    informational: Any = field(default_factory=dict)

    def unified(self) -> dict[str, Any]:
        """Return a fresh mapping holding deep copies of all three components."""
        return {
            "spatial": copy.deepcopy(self.spatial),
            "temporal": copy.deepcopy(self.temporal),
            "informational": copy.deepcopy(self.informational),
        }


def conspansive_duality(
    spatial: Any = None,
    temporal: Any = None,
    informational: Any = None,
) -> ConspansiveDuality:
    return ConspansiveDuality(
        spatial={} if spatial is None else copy.deepcopy(spatial),
        temporal={} if temporal is None else copy.deepcopy(temporal),
        informational={} if informational is None else copy.deepcopy(informational),
    )


class SyntacticSemantic(StateContainer):
    """Container whose payload pairs a syntax with its semantics."""

    def __init__(
        self,
        syntax: Any = None,
        semantics: Any = None,
        *,
        clock: Clock | None = None,
        config: TelestateConfig | None = None,
    ) -> None:
        super().__init__(
            {
                "syntax": {} if syntax is None else syntax,
                "semantics": {} if semantics is None else semantics,
            },
            clock=clock,
            config=config,
        )

    @property
    def syntax(self) -> Any:
        return copy.deepcopy(self._data.get("syntax"))

    @property
    def semantics(self) -> Any:
        return copy.deepcopy(self._data.get("semantics"))


def syntactic_semantic(
    syntax: Any = None,
    semantics: Any = None,
    *,
    clock: Clock | None = None,
    config: TelestateConfig | None = None,
) -> SyntacticSemantic:
    return SyntacticSemantic(syntax, semantics, clock=clock, config=config)


def self_organize(elements: T, organization_fn: Callable[[T], R]) -> R:
    """Return ``organization_fn(elements)``.

    Adds no behaviour of its own; *elements* is only mutated if the supplied
    function mutates it.
    """
    if not callable(organization_fn):
        raise InvalidArgumentError("organization_fn", "must be callable")
    return organization_fn(elements)
