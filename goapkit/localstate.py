"""The state the planner searches over."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from goapkit.datum import Datum

if TYPE_CHECKING:
    from goapkit.goal import Goal


@dataclass
class LocalState:
    """A mapping from state keys to their current :class:`Datum`."""

    data: dict[str, Datum] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.data = {str(key): Datum.of(value) for key, value in sorted(self.data.items())}

    def with_datum(self, key: str, value: Any) -> LocalState:
        """Return a copy of this state with ``key`` set to ``value``."""
        return LocalState({**self.data, str(key): Datum.of(value)})

    def distance_to_goal(self, goal: Goal) -> int:
        """Sum of distances to each goal requirement; missing keys count 1 each."""
        return sum(
            self.data[key].distance(compare.value) if key in self.data else 1
            for key, compare in goal.requirements.items()
        )

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.data.items(), key=lambda kv: kv[0])))