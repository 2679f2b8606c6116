"""An agent-level planner that keeps state, goals and the plan being executed."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from goapkit.action import Action
from goapkit.components import ActionComponent, DatumComponent
from goapkit.effect import Effect
from goapkit.goal import Goal
from goapkit.localstate import LocalState
from goapkit.planner import get_effects_from_plan, make_plan

logger = logging.getLogger(__name__)

ActionsMap = Mapping[str, tuple[Action, ActionComponent]]


@dataclass
class Plan:
    """A formulated plan.

    ``effects`` is a queue with the current effect last, so it can be popped.
    ``cost`` is the total cost, including effects already handled.
    """

    effects: list[Effect]
    cost: int
    goal: Goal = field(default_factory=Goal)


def find_plan(
    state: LocalState, actions: Sequence[Action], goals: Iterable[Goal]
) -> Optional[Plan]:
    """Plan for the first goal, in priority order, that can be reached from ``state``."""
    actions = list(actions)
    for goal in goals:
        result = make_plan(state, actions, goal)
        if result is None:
            continue
        nodes, cost = result
        if not nodes:
            continue
        effects = list(get_effects_from_plan(nodes))
        effects.reverse()
        return Plan(effects=effects, cost=cost, goal=goal)
    return None


class Planner:
    """Keeps an agent's planning state, its goals and the plan it is carrying out."""

    def __init__(
        self,
        components: Iterable[DatumComponent],
        goals: Iterable[Goal],
        actions_map: ActionsMap,
    ) -> None:
        self._actions_map: dict[str, tuple[Action, ActionComponent]] = dict(actions_map)
        self._actions: list[Action] = [action for action, _ in self._actions_map.values()]
        self.state = LocalState()
        for component in components:
            self.state.data[component.field_key()] = component.field_value()
        self.goals: list[Goal] = list(goals)
        self.current_action: Optional[Action] = None
        self.current_plan: Optional[Plan] = None

    @property
    def actions(self) -> list[Action]:
        """The actions available for planning."""
        return list(self._actions)

    def sync_state(self, components: Iterable[DatumComponent]) -> None:
        """Copy the values of ``components`` into the planning state.

        Raises ValueError when no component is given.
        """
        components = list(components)
        if not components:
            raise ValueError(
                "Didn't find any DatumComponents, make sure you pass every "
                "component you want to use with the planner"
            )
        for component in components:
            self.state.data[component.field_key()] = component.field_value()

    def update_plan(self, goals: Optional[Iterable[Goal]] = None) -> Optional[Plan]:
        """Make a new plan for ``goals`` (default: the planner's own goals).

        On failure the current action and plan are cleared and None is returned.
        """
        chosen = list(goals) if goals is not None else list(self.goals)
        state = LocalState(dict(self.state.data))
        plan = find_plan(state, self._actions, chosen)
        if plan is None:
            logger.warning("Failed to make a plan for any goal!")
            self.current_action = None
            self.current_plan = None
            return None
        self.current_plan = plan
        return plan

    def next_action(self, busy: bool = False) -> Optional[ActionComponent]:
        """Advance the plan and return the action component to carry out next.

        Returns None while ``busy`` (an action is still running), when there
        is no plan, or when the plan has just finished. Raises KeyError when
        the plan names an action that is not registered with the planner.
        """
        if busy:
            return None
        plan = self.current_plan
        if plan is None:
            logger.debug("No plan to execute")
            self.current_action = None
            return None
        if not plan.effects:
            logger.debug("Current plan is finished")
            self.current_plan = None
            self.current_action = None
            return None
        effect = plan.effects.pop()
        try:
            action, component = self._actions_map[effect.action]
        except KeyError:
            raise KeyError(
                f"Didn't find action {effect.action!r} registered in the planner's actions"
            ) from None
        self.current_action = action
        return component

    def __repr__(self) -> str:
        return (
            f"Planner(state={self.state!r}, goals={self.goals!r}, "
            f"actions={self._actions!r})"
        )


def create_planner(
    actions: Iterable[tuple[type[ActionComponent], Action]],
    state: Iterable[DatumComponent],
    goals: Iterable[Goal],
) -> tuple[Planner, tuple[DatumComponent, ...]]:
    """Build a planner from ``(ActionComponent class, Action)`` pairs, components and goals.

    Returns the planner and the state components, for the caller to keep.
    """
    actions_map: dict[str, tuple[Action, ActionComponent]] = {}
    for action_type, action in actions:
        if not (isinstance(action_type, type) and issubclass(action_type, ActionComponent)):
            raise TypeError(f"expected an ActionComponent class, got {action_type!r}")
        actions_map[action_type.key()] = (action, action_type())
    components = tuple(state)
    planner = Planner(components, list(goals), actions_map)
    return planner, components