"""Comparisons used by preconditions and goal requirements."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from goapkit.datum import Datum

if TYPE_CHECKING:
    from goapkit.action import Action
    from goapkit.localstate import LocalState


class CompareKind(enum.Enum):
    """The relation a :class:`Compare` checks."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN_EQUALS = "greater_than_equals"
    LESS_THAN_EQUALS = "less_than_equals"


@dataclass(frozen=True)
class Compare:
    """A relation that a state value must satisfy against ``value``."""

    kind: CompareKind
    value: Datum

    @classmethod
    def equals(cls, value: Any) -> Compare:
        return cls(CompareKind.EQUALS, Datum.of(value))

    @classmethod
    def not_equals(cls, value: Any) -> Compare:
        return cls(CompareKind.NOT_EQUALS, Datum.of(value))

    @classmethod
    def greater_than_equals(cls, value: Any) -> Compare:
        return cls(CompareKind.GREATER_THAN_EQUALS, Datum.of(value))

    @classmethod
    def less_than_equals(cls, value: Any) -> Compare:
        return cls(CompareKind.LESS_THAN_EQUALS, Datum.of(value))


def compare_values(comparison: Compare, value: Datum) -> bool:
    """Whether ``value`` satisfies ``comparison``."""
    target = comparison.value
    if comparison.kind is CompareKind.EQUALS:
        return value == target
    if comparison.kind is CompareKind.NOT_EQUALS:
        return value != target
    if comparison.kind is CompareKind.GREATER_THAN_EQUALS:
        return value >= target
    return value <= target


def _lookup(state: LocalState, key: str) -> Datum:
    try:
        return state.data[key]
    except KeyError:
        raise KeyError(f"Couldn't find key {key!r} in LocalState") from None


def check_preconditions(state: LocalState, action: Action) -> bool:
    """Whether every precondition of ``action`` holds in ``state``.

    Raises KeyError when a precondition names a key the state lacks.
    """
    return all(
        compare_values(comparison, _lookup(state, key))
        for key, comparison in action.preconditions
    )