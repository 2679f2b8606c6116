"""A* planning from a start state to a goal through a set of actions."""

from __future__ import annotations

import enum
import heapq
import itertools
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from goapkit.action import Action
from goapkit.compare import check_preconditions, compare_values
from goapkit.effect import Effect
from goapkit.goal import Goal
from goapkit.localstate import LocalState
from goapkit.mutator import apply_mutator, format_mutators

PlanResult = tuple[list["Node"], int]


@dataclass(frozen=True)
class Node:
    """A step of a plan: either the initial state or an applied effect."""

    value: Union[LocalState, Effect]

    def state(self) -> LocalState:
        """The state this node stands for."""
        if isinstance(self.value, Effect):
            return self.value.state
        return self.value

    @property
    def effect(self) -> Optional[Effect]:
        """The effect of this node, or None for the initial state."""
        return self.value if isinstance(self.value, Effect) else None


class PlanningStrategy(enum.Enum):
    """How the planner searches. Only start-to-goal search is available."""

    START_TO_GOAL = "start_to_goal"


def _heuristic(node: Node, goal: Goal) -> int:
    return node.state().distance_to_goal(goal)


def _successors(node: Node, actions: Sequence[Action]) -> Iterator[tuple[Node, int]]:
    state = node.state()
    for action in actions:
        if not check_preconditions(state, action) or not action.effects:
            continue
        first = action.effects[0]
        data = dict(state.data)
        for mutator in first.mutators:
            apply_mutator(data, mutator)
        effect = Effect(
            action=first.action,
            mutators=list(first.mutators),
            state=LocalState(data),
            cost=first.cost,
        )
        yield Node(effect), first.cost


def _is_goal(node: Node, goal: Goal) -> bool:
    data = node.state().data
    for key, comparison in goal.requirements.items():
        if key not in data:
            raise KeyError(f"Couldn't find key {key!r} in LocalState {data!r}")
        if not compare_values(comparison, data[key]):
            return False
    return True


def _reverse_path(nodes: list[Node], parents: list[tuple[int, int]], index: int) -> list[Node]:
    path = []
    while index >= 0:
        path.append(nodes[index])
        index = parents[index][0]
    path.reverse()
    return path


def make_plan_with_strategy(
    strategy: PlanningStrategy,
    start: LocalState,
    actions: Iterable[Action],
    goal: Goal,
) -> Optional[PlanResult]:
    """Search for the cheapest path of nodes from ``start`` to ``goal``.

    Returns ``(nodes, cost)`` or None when the goal cannot be reached.
    Raises KeyError when a goal or precondition names a key the state lacks.
    """
    if strategy is not PlanningStrategy.START_TO_GOAL:
        raise ValueError(f"unsupported planning strategy {strategy!r}")
    actions = list(actions)
    start_node = Node(LocalState(dict(start.data)))
    nodes: list[Node] = [start_node]
    index_of: dict[Node, int] = {start_node: 0}
    parents: list[tuple[int, int]] = [(-1, 0)]
    counter = itertools.count(1)
    # Lowest estimate first; among equal estimates, the most expensive so far first.
    heap: list[tuple[int, int, int, int]] = [(0, 0, 0, 0)]

    while heap:
        _, neg_cost, _, index = heapq.heappop(heap)
        cost = -neg_cost
        node = nodes[index]
        if _is_goal(node, goal):
            return _reverse_path(nodes, parents, index), cost
        if cost > parents[index][1]:
            continue
        for successor, move_cost in _successors(node, actions):
            new_cost = cost + move_cost
            existing = index_of.get(successor)
            if existing is None:
                target = len(nodes)
                nodes.append(successor)
                index_of[successor] = target
                parents.append((index, new_cost))
            elif parents[existing][1] > new_cost:
                target = existing
                parents[target] = (index, new_cost)
            else:
                continue
            estimate = new_cost + _heuristic(successor, goal)
            heapq.heappush(heap, (estimate, -new_cost, next(counter), target))
    return None


def make_plan(
    start: LocalState, actions: Iterable[Action], goal: Goal
) -> Optional[PlanResult]:
    """Find the cheapest path of nodes from ``start`` to ``goal``, or None."""
    return make_plan_with_strategy(PlanningStrategy.START_TO_GOAL, start, actions, goal)


def get_effects_from_plan(plan: Iterable[Node]) -> Iterator[Effect]:
    """Yield the effects of a plan's nodes, skipping the initial state."""
    for node in plan:
        if node.effect is not None:
            yield node.effect


def _quoted(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _state_lines(state: LocalState) -> str:
    return "".join(f"\t\t{key} = {value}\n" for key, value in sorted(state.data.items()))


def format_plan(plan: PlanResult) -> str:
    """Render a plan as readable text: each action, its mutators and the final state."""
    nodes, cost = plan
    parts = []
    last_state = LocalState()
    for node in nodes:
        effect = node.effect
        if effect is not None:
            parts.append(f"\t\t= DO ACTION {_quoted(effect.action)}\n")
            parts.append("\t\tMUTATES:\n")
            parts.append(format_mutators(effect.mutators))
            last_state = effect.state
        else:
            parts.append("\t\t= INITIAL STATE\n")
            parts.append(_state_lines(node.state()))
            last_state = node.state()
        parts.append("\n\t\t---\n")
    parts.append(f"\t\t= FINAL STATE (COST: {cost})\n")
    parts.append(_state_lines(last_state))
    return "".join(parts)