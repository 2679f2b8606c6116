"""Small demonstrations of planning, runnable from the command line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from goapkit.action import Action
from goapkit.compare import Compare
from goapkit.effect import Effect
from goapkit.goal import Goal
from goapkit.localstate import LocalState
from goapkit.mutator import Mutator
from goapkit.planner import PlanResult, format_plan, get_effects_from_plan, make_plan
from goapkit.simple import simple_decrement_action, simple_increment_action

LONG_PLAN_EFFECTS = 11
LONG_PLAN_FINAL_STATE = (
    LocalState().with_datum("energy", 50).with_datum("hunger", 50).with_datum("gold", 7)
)


def _require(result: Optional[PlanResult]) -> PlanResult:
    if result is None:
        raise RuntimeError("no plan reaches the goal")
    return result


def basic_plan() -> PlanResult:
    """Plan how to stop being hungry, with every structure spelled out."""
    start = LocalState().with_datum("is_hungry", True)
    goal = Goal().with_req("is_hungry", Compare.equals(False))
    eat_action = Action(
        key="eat",
        preconditions=[],
        effects=[
            Effect(
                action="eat",
                mutators=[Mutator.set("is_hungry", False)],
                state=LocalState(),
                cost=1,
            )
        ],
    )
    return _require(make_plan(start, [eat_action], goal))


def _simple_plan() -> PlanResult:
    start = LocalState().with_datum("is_hungry", True)
    goal = Goal().with_req("is_hungry", Compare.equals(False))
    eat_action = Action("eat").with_mutator(Mutator.set("is_hungry", False))
    return _require(make_plan(start, [eat_action], goal))


def long_plan() -> PlanResult:
    """Plan how to rob seven gold while keeping energy and hunger in check."""
    start = LocalState().with_datum("energy", 30).with_datum("hunger", 70).with_datum("gold", 0)
    goal = Goal().with_req("gold", Compare.equals(7))

    sleep_action = Action("sleep").with_mutator(Mutator.increment("energy", 10))
    eat_action = simple_decrement_action("eat", "hunger", 10).with_precondition(
        ("energy", Compare.greater_than_equals(26))
    )
    rob_people = (
        simple_increment_action("rob", "gold", 1)
        .with_effect(
            Effect(
                action="rob",
                mutators=[Mutator.decrement("energy", 5), Mutator.increment("hunger", 5)],
                state=LocalState(),
                cost=1,
            )
        )
        .with_precondition(("hunger", Compare.less_than_equals(50)))
        .with_precondition(("energy", Compare.greater_than_equals(50)))
    )
    return _require(make_plan(start, [sleep_action, eat_action, rob_people], goal))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations and print its plan."""
    parser = argparse.ArgumentParser(prog="goapkit-demo", description=__doc__)
    parser.add_argument(
        "example",
        nargs="?",
        default="basic",
        choices=("basic", "simple", "long"),
        help="which demonstration to run (default: basic)",
    )
    args = parser.parse_args(argv)

    if args.example == "basic":
        print(format_plan(basic_plan()))
    elif args.example == "simple":
        plan = _simple_plan()
        print(repr(plan))
        print(format_plan(plan))
    else:
        plan = long_plan()
        effects = list(get_effects_from_plan(plan[0]))
        print(format_plan(plan))
        if len(effects) != LONG_PLAN_EFFECTS or effects[-1].state != LONG_PLAN_FINAL_STATE:
            print("The plan did not end where it was expected to.", file=sys.stderr)
            return 1
        return 0

    print()
    print("[Everything went as expected!]")
    return 0


if __name__ == "__main__":
    sys.exit(main())