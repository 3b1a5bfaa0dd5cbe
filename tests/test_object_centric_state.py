"""Unit tests for object-centric states and matching objects between them."""

from __future__ import annotations

import pytest

from action_grounding.domains import ObjectClass, PropositionalFunction
from action_grounding.errors import TranslationFailureError
from action_grounding.states import (
    ExplicitObjectMatcher,
    ObjectCentricState,
    ObjectInstance,
    ValueObjectMatcher,
)


def test_copy_is_independent(blocks_state: ObjectCentricState) -> None:
    """Verify that changing a copied state leaves the original unchanged."""
    duplicate = blocks_state.copy()

    duplicate.set_value("block0", "x", 9)

    assert blocks_state.get_object("block0").values["x"] == 0
    original_class = blocks_state.get_object("block0").object_class
    assert duplicate.get_object("block0").object_class is original_class


def test_rename_preserves_order(blocks_state: ObjectCentricState) -> None:
    """Verify that renaming an object keeps its position in the state."""
    blocks_state.rename_object("block1", "middle")

    assert blocks_state.object_names == ["block0", "middle", "block2"]
    assert "block1" not in blocks_state

    with pytest.raises(ValueError):
        blocks_state.rename_object("middle", "block0")


def test_duplicate_object_names_are_rejected(block_class: ObjectClass) -> None:
    """Verify that a state can't contain two objects with the same name."""
    state = ObjectCentricState([ObjectInstance("b", block_class, {"x": 0, "y": 0})])

    with pytest.raises(ValueError):
        state.add_object(ObjectInstance("b", block_class, {"x": 1, "y": 1}))


def test_value_matcher_pairs_equal_objects(blocks_state: ObjectCentricState) -> None:
    """Verify that objects are matched by class and attribute values."""
    target = ObjectCentricState(reversed([obj.copy() for obj in blocks_state.objects]))
    for i, name in enumerate(target.object_names):
        target.rename_object(name, f"t{i}")

    mapping = ValueObjectMatcher().match(blocks_state, target)

    assert mapping == {"block0": "t2", "block1": "t1", "block2": "t0"}


def test_value_matcher_claims_each_target_once(block_class: ObjectClass) -> None:
    """Verify that two identical source objects are matched to distinct target objects."""
    source = ObjectCentricState(
        [ObjectInstance(n, block_class, {"x": 0, "y": 0}) for n in ("a", "b")],
    )
    target = ObjectCentricState([ObjectInstance("c", block_class, {"x": 0, "y": 0})])

    assert ValueObjectMatcher().match(source, target) == {"a": "c"}


def test_explicit_matcher_requires_target_objects(blocks_state: ObjectCentricState) -> None:
    """Verify that a correspondence naming a missing target object fails."""
    matcher = ExplicitObjectMatcher({"block0": "ghost"})

    with pytest.raises(TranslationFailureError):
        matcher.match(blocks_state, blocks_state.copy())


def test_propositional_function_groundings(blocks_state: ObjectCentricState) -> None:
    """Verify that a propositional function finds the object tuples for which it holds."""
    right_of = PropositionalFunction(
        "right_of",
        ("block", "block"),
        lambda s, a, b: s.get_object(a).values["x"] > s.get_object(b).values["x"],
    )

    groundings = right_of.all_true_groundings(blocks_state)

    assert set(groundings) == {("block1", "block0"), ("block2", "block0"), ("block2", "block1")}
    assert right_of.is_true(blocks_state, "block2", "block1")
