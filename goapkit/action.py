"""Actions an agent can take, with their preconditions and effects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from goapkit.compare import Compare
from goapkit.effect import Effect
from goapkit.mutator import Mutator


@dataclass
class Action:
    """Something an agent can do when its preconditions hold.

    Only the first effect is used by the planner.
    """

    key: str = ""
    preconditions: list[tuple[str, Compare]] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.key = str(self.key)
        checked = []
        for key, compare in self.preconditions:
            if not isinstance(compare, Compare):
                raise TypeError(f"precondition for {key!r} must be a Compare, got {compare!r}")
            checked.append((str(key), compare))
        self.preconditions = checked
        self.effects = list(self.effects)
        for effect in self.effects:
            if not isinstance(effect, Effect):
                raise TypeError(f"expected an Effect, got {effect!r}")

    def with_effect(self, effect: Effect) -> Action:
        """Return a copy of this action with ``effect`` appended."""
        return replace(self, effects=[*self.effects, effect])

    def with_precondition(self, precondition: tuple[str, Compare]) -> Action:
        """Return a copy of this action with one more ``(key, compare)`` precondition."""
        key, compare = precondition
        return replace(self, preconditions=[*self.preconditions, (str(key), compare)])

    def with_mutator(self, mutator: Mutator) -> Action:
        """Return a copy with ``mutator`` added to the first effect.

        If the action has no effect yet, one named after the action is created.
        """
        if not self.effects:
            return replace(self, effects=[Effect(self.key).with_mutator(mutator)])
        first, *rest = self.effects
        return replace(self, effects=[first.with_mutator(mutator), *rest])

    def set_cost(self, new_cost: int) -> Action:
        """Return a copy with the first effect's cost replaced.

        Raises IndexError when the action has no effect.
        """
        if not self.effects:
            raise IndexError(f"action {self.key!r} has no effect to set a cost on")
        first, *rest = self.effects
        return replace(self, effects=[replace(first, cost=new_cost), *rest])

    def __hash__(self) -> int:
        return hash((self.key, tuple(self.preconditions), tuple(self.effects)))