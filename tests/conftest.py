"""Define pytest fixtures providing a small grid world of blocks."""

from __future__ import annotations

from typing import Any

import pytest

from action_grounding.actions import (
    ActionParameter,
    ActionTemplate,
    EnumeratedType,
    FullModelActionTemplate,
    GroundedAction,
    TransitionProbability,
)
from action_grounding.domains import (
    Attribute,
    ObjectClass,
    PropositionalFunction,
    SingleAgentDomain,
)
from action_grounding.states import ObjectCentricState, ObjectInstance

DIRECTION = EnumeratedType("direction", ("N", "S", "E", "W"))
"""The four compass directions in which a block can move."""

OFFSETS = {"N": (0, 1), "S": (0, -1), "E": (1, 0), "W": (-1, 0)}


class MoveAll(FullModelActionTemplate):
    """Move every block one cell in a direction; with probability 0.2, nothing moves."""

    def perform_helper(self, state: ObjectCentricState, values: tuple[Any, ...]) -> Any:
        """Move every block in the direction bound to the action."""
        dx, dy = OFFSETS[values[0]]
        for obj in state.objects_of_class("block"):
            obj.values["x"] += dx
            obj.values["y"] += dy
        return state

    def transitions(self, state: ObjectCentricState, action: GroundedAction) -> list:
        """Enumerate the moved and unmoved successor states."""
        moved = self.perform_helper(state.copy(), action.arguments)
        return [TransitionProbability(moved, 0.8), TransitionProbability(state.copy(), 0.2)]


class Push(ActionTemplate):
    """Push a block one cell east; only blocks left of x = 3 can be pushed."""

    def _applicable(self, state: ObjectCentricState, values: tuple[Any, ...]) -> bool:
        """Check that the bound block is left of x = 3."""
        return state.get_object(values[0]).values["x"] < 3

    def perform_helper(self, state: ObjectCentricState, values: tuple[Any, ...]) -> Any:
        """Increment the x-coordinate of the bound block."""
        state.set_value(values[0], "x", state.get_object(values[0]).values["x"] + 1)
        return state


class Stack(ActionTemplate):
    """Stack two blocks; the order in which they are given doesn't matter."""

    def perform_helper(self, state: ObjectCentricState, values: tuple[Any, ...]) -> Any:
        """Place the first block on top of the second."""
        below = state.get_object(values[1])
        state.set_value(values[0], "x", below.values["x"])
        state.set_value(values[0], "y", below.values["y"] + 1)
        return state


class Slide(ActionTemplate):
    """Slide a block east by a given distance."""

    def perform_helper(self, state: ObjectCentricState, values: tuple[Any, ...]) -> Any:
        """Add the bound distance to the x-coordinate of the bound block."""
        block, distance = values
        state.set_value(block, "x", state.get_object(block).values["x"] + distance)
        return state


class Wait(ActionTemplate):
    """Do nothing."""

    def perform_helper(self, state: ObjectCentricState, values: tuple[Any, ...]) -> Any:
        """Return the state unchanged."""
        return state


@pytest.fixture
def x_attr() -> Attribute:
    """Define an integer attribute named `x`."""
    return Attribute("x", int)


@pytest.fixture
def y_attr() -> Attribute:
    """Define an integer attribute named `y`."""
    return Attribute("y", int)


@pytest.fixture
def block_class(x_attr: Attribute, y_attr: Attribute) -> ObjectClass:
    """Define an object class `block` with x- and y-coordinates."""
    return ObjectClass("block", [x_attr, y_attr])


@pytest.fixture
def grid_domain(
    x_attr: Attribute,
    y_attr: Attribute,
    block_class: ObjectClass,
) -> SingleAgentDomain:
    """Define a single-agent grid world domain containing all of the example actions."""
    domain = SingleAgentDomain("grid")
    domain.add_attribute(x_attr)
    domain.add_attribute(y_attr)
    domain.add_object_class(block_class)
    domain.add_propositional_function(
        PropositionalFunction(
            "on",
            ("block", "block"),
            lambda s, a, b: s.get_object(a).values["x"] == s.get_object(b).values["x"]
            and s.get_object(a).values["y"] == s.get_object(b).values["y"] + 1,
        ),
    )

    MoveAll("move", (ActionParameter("dir", DIRECTION),), domain)
    Push("push", (ActionParameter("target", "block"),), domain)
    Stack(
        "stack",
        (ActionParameter("top", "block", "blocks"), ActionParameter("bottom", "block", "blocks")),
        domain,
    )
    Slide("slide", (ActionParameter("target", "block"), ActionParameter("dist", int)), domain)
    Wait("wait", (), domain)
    return domain


@pytest.fixture
def blocks_state(block_class: ObjectClass) -> ObjectCentricState:
    """Define a state with three blocks on the grid."""
    return ObjectCentricState(
        [
            ObjectInstance("block0", block_class, {"x": 0, "y": 0}),
            ObjectInstance("block1", block_class, {"x": 2, "y": 0}),
            ObjectInstance("block2", block_class, {"x": 4, "y": 1}),
        ],
    )
