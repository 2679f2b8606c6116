import pytest

from goapkit.action import Action
from goapkit.compare import Compare
from goapkit.effect import Effect
from goapkit.localstate import LocalState
from goapkit.mutator import Mutator


def test_default_action_is_empty():
    action = Action()
    assert action.key == ""
    assert action.preconditions == []
    assert action.effects == []


def test_with_mutator_creates_effect_named_after_action():
    mutator = Mutator.set("is_hungry", False)
    action = Action("eat").with_mutator(mutator)
    assert len(action.effects) == 1
    assert action.effects[0].action == "eat"
    assert action.effects[0].mutators == [mutator]
    assert action.effects[0].cost == 1


def test_with_mutator_appends_to_first_effect():
    first = Mutator.set("is_hungry", False)
    second = Mutator.set("is_tired", True)
    action = Action("eat").with_mutator(first).with_mutator(second)
    assert len(action.effects) == 1
    assert action.effects[0].mutators == [first, second]


def test_with_mutator_leaves_other_effects_alone():
    extra = Effect("rob", [Mutator.decrement("energy", 5)], LocalState(), 1)
    action = (
        Action("rob")
        .with_mutator(Mutator.increment("gold", 1))
        .with_effect(extra)
        .with_mutator(Mutator.increment("hunger", 5))
    )
    assert len(action.effects) == 2
    assert action.effects[1] == extra
    assert action.effects[0].mutators == [
        Mutator.increment("gold", 1),
        Mutator.increment("hunger", 5),
    ]


def test_with_precondition_appends_in_order():
    action = (
        Action("eat")
        .with_precondition(("is_tired", Compare.equals(False)))
        .with_precondition(("energy", Compare.greater_than_equals(25)))
    )
    assert action.preconditions == [
        ("is_tired", Compare.equals(False)),
        ("energy", Compare.greater_than_equals(25)),
    ]


def test_builders_do_not_modify_original():
    base = Action("eat")
    base.with_precondition(("is_tired", Compare.equals(False)))
    base.with_mutator(Mutator.set("is_hungry", False))
    base.with_effect(Effect("eat"))
    assert base == Action("eat")


def test_set_cost_changes_first_effect():
    action = Action("expensive_action").with_mutator(Mutator.increment("gold", 3)).set_cost(4)
    assert action.effects[0].cost == 4
    assert action.effects[0].mutators == [Mutator.increment("gold", 3)]


def test_set_cost_without_effect_raises():
    with pytest.raises(IndexError):
        Action("eat").set_cost(4)


def test_equal_actions_hash_equal():
    build = lambda: (
        Action("eat")
        .with_precondition(("is_tired", Compare.equals(False)))
        .with_mutator(Mutator.set("is_hungry", False))
    )
    a, b = build(), build()
    assert a == b
    assert hash(a) == hash(b)


def test_actions_with_different_keys_differ():
    mutator = Mutator.set("is_hungry", False)
    assert not Action("eat").with_mutator(mutator) == Action("drink").with_mutator(mutator)


def test_bad_precondition_rejected():
    with pytest.raises(TypeError):
        Action("eat", preconditions=[("is_tired", False)])