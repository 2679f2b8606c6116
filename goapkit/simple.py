"""Shorthands for building common kinds of actions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from goapkit.action import Action
from goapkit.effect import Effect
from goapkit.mutator import Mutator


def simple_action(name: str, key_to_mutate: str, from_value: Any) -> Action:
    """An action that sets one key to a value."""
    return Action(str(name)).with_mutator(Mutator.set(key_to_mutate, from_value))


def simple_multi_mutate_action(name: str, muts: Iterable[tuple[str, Any]]) -> Action:
    """An action that sets several keys, given as ``(key, value)`` pairs."""
    name = str(name)
    mutators = [Mutator.set(key, value) for key, value in muts]
    return Action(key=name, effects=[Effect(name, mutators)])


def simple_increment_action(name: str, key_to_mutate: str, from_value: Any) -> Action:
    """An action that increases one key by a value."""
    return Action(str(name)).with_mutator(Mutator.increment(key_to_mutate, from_value))


def simple_decrement_action(name: str, key_to_mutate: str, from_value: Any) -> Action:
    """An action that decreases one key by a value."""
    return Action(str(name)).with_mutator(Mutator.decrement(key_to_mutate, from_value))