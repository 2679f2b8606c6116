import pytest

from goapkit.agent import Plan, Planner, create_planner, find_plan
from goapkit.compare import Compare
from goapkit.components import ActionComponent, DatumComponent
from goapkit.datum import Datum
from goapkit.goal import Goal
from goapkit.localstate import LocalState
from goapkit.simple import simple_action

IS_HUNGRY_KEY = "is_hungry"
EAT_ACTION = "eat_action"
IS_TIRED_KEY = "is_tired"
SLEEP_ACTION = "sleep_action"


class EatAction(ActionComponent):
    pass


class SleepAction(ActionComponent):
    pass


class IsHungry(DatumComponent, kind=bool):
    pass


class IsTired(DatumComponent, kind=bool):
    pass


def _internal_planner():
    components = [IsHungry(True), IsTired(True)]
    goal = (
        Goal()
        .with_req(IS_HUNGRY_KEY, Compare.equals(False))
        .with_req(IS_TIRED_KEY, Compare.equals(False))
    )
    eat_action = simple_action(EAT_ACTION, IS_HUNGRY_KEY, False).with_precondition(
        (IS_TIRED_KEY, Compare.equals(False))
    )
    sleep_action = simple_action(SLEEP_ACTION, IS_TIRED_KEY, False)
    actions_map = {
        EAT_ACTION: (eat_action, EatAction()),
        SLEEP_ACTION: (sleep_action, SleepAction()),
    }
    return Planner(components, [goal], actions_map), components


def _external_planner():
    goal = Goal.from_reqs([IsHungry.is_(False), IsTired.is_(False)])
    eat_action = (
        EatAction.action()
        .with_precondition(IsTired.is_(False))
        .with_mutator(IsHungry.set(False))
    )
    sleep_action = SleepAction.action().with_mutator(IsTired.set(False))
    return create_planner(
        actions=[(EatAction, eat_action), (SleepAction, sleep_action)],
        state=[IsHungry(True), IsTired(True)],
        goals=[goal],
    )


def _run(planner, components, steps=10):
    hungry = next(c for c in components if isinstance(c, IsHungry))
    tired = next(c for c in components if isinstance(c, IsTired))
    performed = []
    for _ in range(steps):
        component = planner.next_action(busy=False)
        if component is None:
            break
        performed.append(component.action_type_name())
        if isinstance(component, EatAction):
            hungry.value = False
        elif isinstance(component, SleepAction):
            tired.value = False
        planner.sync_state(components)
    return performed


def test_basic_integration_internal():
    planner, components = _internal_planner()
    plan = planner.update_plan()
    assert plan is not None
    assert plan.cost == 2
    performed = _run(planner, components)
    assert performed == ["SleepAction", "EatAction"]
    assert planner.state.data[IS_HUNGRY_KEY] == Datum.of(False)
    assert planner.state.data[IS_TIRED_KEY] == Datum.of(False)
    assert planner.current_plan is None
    assert planner.current_action is None


def test_basic_integration_external():
    planner, components = _external_planner()
    assert components == (IsHungry(True), IsTired(True))
    assert planner.update_plan() is not None
    performed = _run(planner, list(components))
    assert performed == ["SleepAction", "EatAction"]
    assert planner.state.data["is_hungry"] == Datum.of(False)
    assert planner.state.data["is_tired"] == Datum.of(False)


def test_create_planner_initial_state():
    planner, _ = _external_planner()
    assert planner.state == LocalState().with_datum("is_hungry", True).with_datum("is_tired", True)
    assert sorted(a.key for a in planner.actions) == ["eat_action", "sleep_action"]


def test_create_planner_rejects_non_action_type():
    with pytest.raises(TypeError):
        create_planner(actions=[(int, EatAction.action())], state=[IsHungry(True)], goals=[])


def test_find_plan_orders_current_effect_last():
    planner, _ = _internal_planner()
    plan = find_plan(planner.state, planner.actions, planner.goals)
    assert [e.action for e in plan.effects] == [EAT_ACTION, SLEEP_ACTION]
    assert plan.cost == 2
    assert plan.goal == planner.goals[0]


def test_find_plan_falls_back_to_next_goal():
    state = LocalState().with_datum("is_hungry", True)
    unreachable = Goal().with_req("is_hungry", Compare.equals(False))
    reachable = Goal().with_req("is_hungry", Compare.equals(True))
    plan = find_plan(state, [], [unreachable, reachable])
    assert plan == Plan(effects=[], cost=0, goal=reachable)


def test_find_plan_none_when_unreachable():
    state = LocalState().with_datum("is_hungry", True)
    goal = Goal().with_req("is_hungry", Compare.equals(False))
    assert find_plan(state, [], [goal]) is None


def test_update_plan_failure_clears_plan():
    planner, _ = _internal_planner()
    planner.update_plan()
    planner.next_action()
    assert planner.current_action is not None
    impossible = Goal().with_req(IS_HUNGRY_KEY, Compare.equals(True)).with_req(
        IS_TIRED_KEY, Compare.equals(True)
    )
    planner.state = LocalState().with_datum(IS_HUNGRY_KEY, False).with_datum(IS_TIRED_KEY, False)
    assert planner.update_plan([impossible]) is None
    assert planner.current_plan is None
    assert planner.current_action is None


def test_next_action_busy_does_not_advance():
    planner, _ = _internal_planner()
    planner.update_plan()
    assert planner.next_action(busy=True) is None
    assert len(planner.current_plan.effects) == 2


def test_next_action_without_plan():
    planner, _ = _internal_planner()
    assert planner.next_action() is None
    assert planner.current_action is None


def test_next_action_sets_current_action():
    planner, _ = _internal_planner()
    planner.update_plan()
    component = planner.next_action()
    assert component == SleepAction()
    assert planner.current_action.key == SLEEP_ACTION


def test_next_action_unknown_action_raises():
    planner, _ = _internal_planner()
    planner.update_plan()
    planner.current_plan.effects[-1].action = "missing"
    with pytest.raises(KeyError):
        planner.next_action()


def test_sync_state_requires_components():
    planner, _ = _internal_planner()
    with pytest.raises(ValueError):
        planner.sync_state([])


def test_sync_state_updates_values():
    planner, _ = _internal_planner()
    planner.sync_state([IsHungry(False)])
    assert planner.state.data[IS_HUNGRY_KEY] == Datum.of(False)
    assert planner.state.data[IS_TIRED_KEY] == Datum.of(True)