"""Goals: the requirements a final state has to meet."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from goapkit.compare import Compare


@dataclass
class Goal:
    """A mapping from state keys to the comparison each must satisfy."""

    requirements: dict[str, Compare] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, compare in self.requirements.items():
            if not isinstance(compare, Compare):
                raise TypeError(f"requirement for {key!r} must be a Compare, got {compare!r}")
        self.requirements = dict(sorted(self.requirements.items()))

    def with_req(self, key: str, compare: Compare) -> Goal:
        """Return a copy of this goal with one more (or a replaced) requirement."""
        return Goal({**self.requirements, str(key): compare})

    @classmethod
    def from_reqs(cls, preconditions: Iterable[tuple[str, Compare]]) -> Goal:
        """Build a goal from ``(key, compare)`` pairs; later keys win."""
        return cls({str(key): compare for key, compare in preconditions})

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.requirements.items(), key=lambda kv: kv[0])))