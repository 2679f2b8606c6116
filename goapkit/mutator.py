"""Changes applied to planner state by actions."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any

from goapkit.datum import Datum


class MutatorKind(enum.Enum):
    """What a :class:`Mutator` does to its key."""

    SET = "set"
    INCREMENT = "increment"
    DECREMENT = "decrement"


_SYMBOLS = {
    MutatorKind.SET: "=",
    MutatorKind.INCREMENT: "+",
    MutatorKind.DECREMENT: "-",
}


@dataclass(frozen=True)
class Mutator:
    """A change to one key of the state."""

    kind: MutatorKind
    key: str
    value: Datum

    @classmethod
    def set(cls, key: str, value: Any) -> Mutator:
        """Set ``key`` to ``value``."""
        return cls(MutatorKind.SET, str(key), Datum.of(value))

    @classmethod
    def increment(cls, key: str, value: Any) -> Mutator:
        """Increase ``key`` by ``value``."""
        return cls(MutatorKind.INCREMENT, str(key), Datum.of(value))

    @classmethod
    def decrement(cls, key: str, value: Any) -> Mutator:
        """Decrease ``key`` by ``value``."""
        return cls(MutatorKind.DECREMENT, str(key), Datum.of(value))


def apply_mutator(data: MutableMapping[str, Datum], mutator: Mutator) -> None:
    """Apply ``mutator`` to ``data`` in place.

    Increments and decrements of keys that are absent leave the data unchanged.
    """
    if mutator.kind is MutatorKind.SET:
        data[mutator.key] = mutator.value
    elif mutator.key in data:
        if mutator.kind is MutatorKind.INCREMENT:
            data[mutator.key] = data[mutator.key] + mutator.value
        else:
            data[mutator.key] = data[mutator.key] - mutator.value


def format_mutators(mutators: Iterable[Mutator]) -> str:
    """Render mutators as indented lines, one per mutator."""
    return "".join(
        f"\t\t{m.key} {_SYMBOLS[m.kind]} {m.value}\n" for m in mutators
    )