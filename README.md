# goapkit

Goal-oriented action planning (GOAP) over plain data.

You describe the world as a `LocalState` of named values, say what you want
with a `Goal`, and list the `Action`s an agent may take. The planner runs an
A* search for the cheapest chain of actions that takes the start state to one
that satisfies the goal.

## Install

```
pip install goapkit
```

There are no runtime dependencies. For the test suite:

```
pip install "goapkit[test]"
pytest
```

## Concepts

- **`goapkit.datum.Datum`**: one value, a bool, a 64-bit integer, a float or
  an enum discriminant. `Datum.of(value)` picks the kind from the Python value
  (enum members use their integer value, or their position when the value is
  not an integer). Integers and floats can be added and subtracted; data of
  different kinds never compare equal, and `distance` between different kinds
  raises `TypeError`.
- **`goapkit.localstate.LocalState`**: a mapping of keys to data, built with
  `with_datum`. `distance_to_goal` sums the distances to a goal's values,
  counting 1 for each missing key.
- **`goapkit.compare.Compare`**: a test on one value: `Compare.equals`,
  `not_equals`, `greater_than_equals`, `less_than_equals`.
- **`goapkit.goal.Goal`**: requirements, one `Compare` per key, built with
  `with_req` or `Goal.from_reqs`.
- **`goapkit.mutator.Mutator`**: a change to the state: `Mutator.set`,
  `increment`, `decrement`. Incrementing or decrementing a key the state does
  not have leaves the state unchanged.
- **`goapkit.effect.Effect`**: the mutators an action applies and what it
  costs (1 by default).
- **`goapkit.action.Action`**: preconditions plus effects, built up with
  `with_precondition`, `with_mutator`, `with_effect` and `set_cost`. Only the
  first effect is used when planning.

All the builder methods return new objects and leave the original unchanged.

## Planning

```python
from goapkit.compare import Compare
from goapkit.goal import Goal
from goapkit.localstate import LocalState
from goapkit.planner import format_plan, get_effects_from_plan, make_plan
from goapkit.simple import simple_action

start = LocalState().with_datum("is_hungry", True).with_datum("is_tired", True)
goal = (
    Goal()
    .with_req("is_hungry", Compare.equals(False))
    .with_req("is_tired", Compare.equals(False))
)

eat = simple_action("eat", "is_hungry", False).with_precondition(
    ("is_tired", Compare.equals(False))
)
sleep = simple_action("sleep", "is_tired", False)

plan = make_plan(start, [eat, sleep], goal)
if plan is not None:
    print(format_plan(plan))
    for effect in get_effects_from_plan(plan[0]):
        print(effect.action)      # sleep, then eat
```

`make_plan` returns a pair of the path of `Node`s and its total cost, or
`None` when no sequence of actions reaches the goal. The first node holds the
start state; each later node holds the `Effect` applied, with `effect.state`
set to the state reached. A goal that already holds gives a plan of just the
start node and a cost of 0. A goal or precondition that names a key missing
from the state raises `KeyError`.

`make_plan_with_strategy` takes a `PlanningStrategy` as well; the only
strategy is `PlanningStrategy.START_TO_GOAL`.

`goapkit.simple` has shorthands: `simple_action` (set one key),
`simple_multi_mutate_action` (set several keys), `simple_increment_action`
and `simple_decrement_action`. Use `set_cost` to make some actions dearer so
the planner prefers cheaper routes.

## Components

`goapkit.components` describes state and actions as small classes whose key
is the class name in snake case (`to_snake_case("IsHungry")` is
`"is_hungry"`):

```python
from goapkit.components import ActionComponent, DatumComponent

class IsHungry(DatumComponent, kind=bool): ...
class EatAction(ActionComponent): ...

IsHungry.set(False)          # Mutator setting "is_hungry"
IsHungry.is_(False)          # ("is_hungry", Compare.equals(False))
EatAction.action()           # Action("eat_action")
```

`DatumComponent` also has `increase`, `decrease`, `is_not`, `is_more` and
`is_less`. `EnumComponent` holds enum values and raises `TypeError` for
`increase`, `decrease`, `is_more` and `is_less`; its `enum_type` class keyword
restricts the accepted values. `EnumDatum` is an enum base whose members have
a `datum()` method.

## Agents

`goapkit.agent` keeps one agent's planning state:

- `create_planner(actions, state, goals)` takes `(ActionComponent class,
  Action)` pairs, state components and goals in priority order, and returns
  the `Planner` with the components.
- `Planner.sync_state(components)` copies the components' current values into
  the planning state.
- `Planner.update_plan(goals=None)` plans for the first goal that can be
  reached and is not already met, storing it as `current_plan`; when none
  can, it clears the current plan and action and returns `None`.
- `Planner.next_action(busy=False)` pops the next step of the plan and
  returns the matching `ActionComponent`, or `None` while busy, without a
  plan, or when the plan has just finished.

`find_plan(state, actions, goals)` is the search behind `update_plan`.

## What it does not do

Planning is synchronous: `update_plan` runs the search in the caller's thread
and returns when it is done. There is no scheduler, game loop or background
task, and nothing carries out actions; the caller performs the component
returned by `next_action`, updates its components and calls `sync_state`.

## Demo

```
goapkit-demo [basic|simple|long]
```

prints one of the bundled example plans (`basic` by default). `long` exits
with status 1 if the plan does not end in the expected state.