"""Effects: what applying an action does to the state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from goapkit.localstate import LocalState
from goapkit.mutator import Mutator


@dataclass
class Effect:
    """The outcome of an action.

    ``state`` is filled in by the planner with the state reached after the
    mutators have been applied.
    """

    action: str
    mutators: list[Mutator] = field(default_factory=list)
    state: LocalState = field(default_factory=LocalState)
    cost: int = 1

    def __post_init__(self) -> None:
        self.action = str(self.action)
        self.mutators = list(self.mutators)
        for mutator in self.mutators:
            if not isinstance(mutator, Mutator):
                raise TypeError(f"expected a Mutator, got {mutator!r}")
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise TypeError(f"cost must be an int, got {self.cost!r}")
        if self.cost < 0:
            raise ValueError(f"cost must not be negative, got {self.cost}")

    def with_mutator(self, mutator: Mutator) -> Effect:
        """Return a copy of this effect with ``mutator`` appended."""
        return replace(self, mutators=[*self.mutators, mutator])

    def __hash__(self) -> int:
        return hash((tuple(self.mutators), self.state, self.cost))