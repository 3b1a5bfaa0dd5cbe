"""Define classes to represent action templates (i.e., lifted, parameterized actions)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import product
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from action_grounding.actions.grounded_action import GroundedAction
from action_grounding.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from action_grounding.actions.environment import Environment, EnvironmentOutcome
    from action_grounding.actions.parameters import ActionParameter, ParameterType
    from action_grounding.domains.domain import Domain
    from action_grounding.states import ObjectCentricState, State


@dataclass(frozen=True)
class TransitionProbability:
    """A successor state paired with the probability of transitioning to it."""

    state: Any
    probability: float


class ActionTemplate(ABC):
    """A named action whose typed parameters are bound to produce grounded actions.

    Subclasses define the action's dynamics by implementing `perform_helper` and may restrict
    where it applies by overriding `_applicable`.
    """

    supports_full_model: ClassVar[bool] = False
    """Whether the template can enumerate every possible transition of a grounded action."""

    def __init__(
        self,
        name: str,
        parameters: tuple[ActionParameter, ...] = (),
        domain: Domain | None = None,
    ) -> None:
        """Initialize the action template and add it to the given domain, if any.

        :param name: Name of the action, unique within its domain
        :param parameters: Typed parameters of the action, in order
        :param domain: Domain to which the template is added (optional)
        """
        self.name = name
        self.parameters = tuple(parameters)
        self.domain = domain

        if domain is not None:
            domain.add_action_template(self)

    def __str__(self) -> str:
        """Return a readable string representation of the action template."""
        params = ", ".join(f"{p.name}: {p.type_name}" for p in self.parameters)
        return f"{self.name}({params})"

    @property
    def is_parameterized(self) -> bool:
        """Check whether the action template has any parameters."""
        return bool(self.parameters)

    @property
    def parameter_types(self) -> tuple[ParameterType, ...]:
        """Retrieve the type of each parameter, in order."""
        return tuple(p.type_ for p in self.parameters)

    @property
    def parameter_order_groups(self) -> tuple[str, ...]:
        """Retrieve the order group of each parameter, in order."""
        return tuple(p.group for p in self.parameters)

    def ground(self, *values: Any) -> GroundedAction:
        """Bind the given values to the template's parameters."""
        return GroundedAction(self, values)

    def applicable_in(self, state: State, action: GroundedAction) -> bool:
        """Evaluate whether the grounded action can be applied in the given state."""
        return self._applicable(state, action.arguments)

    def _applicable(self, state: State, values: tuple[Any, ...]) -> bool:
        """Evaluate whether the action can be applied in a state under the given values."""
        return True

    def sample(self, state: State, action: GroundedAction) -> State:
        """Sample a successor state by applying the grounded action to a copy of the state."""
        return self.perform_helper(state.copy(), action.arguments)

    @abstractmethod
    def perform_helper(self, state: State, values: tuple[Any, ...]) -> State:
        """Apply the action to the given state (which may be modified) and return the result.

        :param state: Copy of the state the action is applied in
        :param values: Values bound to the template's parameters, in order
        :return: Sampled successor state
        """

    def execute_in(self, env: Environment, action: GroundedAction) -> EnvironmentOutcome:
        """Execute the grounded action in an environment and return the reported outcome."""
        return env.execute_action(action)

    def all_grounded_actions(self, state: ObjectCentricState) -> list[GroundedAction]:
        """Compute every grounding of the template available in the given state.

        Object-reference parameters are bound to distinct objects of the matching class, and
        bindings that only differ by a permutation within an order group are produced once.

        :param state: State providing the objects that parameters may be bound to
        :return: List of grounded actions in a deterministic order
        :raises UnsupportedOperationError: If a parameter's values can't be enumerated
        """
        return [GroundedAction(self, values) for values in self._possible_bindings(state)]

    def all_applicable_grounded_actions(self, state: ObjectCentricState) -> list[GroundedAction]:
        """Compute every grounding of the template that is applicable in the given state."""
        return [a for a in self.all_grounded_actions(state) if a.applicable_in(state)]

    def _possible_bindings(self, state: ObjectCentricState) -> Iterator[tuple[Any, ...]]:
        """Yield each distinct tuple of values that could be bound to the parameters."""
        candidates = []
        for param in self.parameters:
            if param.is_object_reference:
                candidates.append([obj.name for obj in state.objects_of_class(param.type_name)])
            elif param.is_enumerated:
                candidates.append(list(param.type_.values))  # type: ignore[union-attr]
            else:
                raise UnsupportedOperationError(
                    f"Cannot enumerate groundings of '{self.name}' because parameter "
                    f"'{param.name}' has the unbounded type {param.type_name}.",
                )

        seen_keys: set[tuple] = set()
        for values in product(*candidates):
            objects = [v for p, v in zip(self.parameters, values) if p.is_object_reference]
            if len(set(objects)) != len(objects):
                continue  # Object parameters must be bound to distinct objects

            key = self._order_group_key(values)
            if key not in seen_keys:
                seen_keys.add(key)
                yield values

    def _order_group_key(self, values: tuple[Any, ...]) -> tuple:
        """Construct a key that is equal for bindings that are equivalent under order groups."""
        per_group: dict[str, list[str]] = {}
        for param, value in zip(self.parameters, values, strict=True):
            per_group.setdefault(param.group, []).append(str(value))

        return tuple((group, tuple(sorted(vals))) for group, vals in per_group.items())


class FullModelActionTemplate(ActionTemplate):
    """An action template that can enumerate the full distribution over successor states."""

    supports_full_model: ClassVar[bool] = True

    @abstractmethod
    def transitions(self, state: State, action: GroundedAction) -> list[TransitionProbability]:
        """Compute every successor state with nonzero probability under the grounded action.

        :param state: State the grounded action is applied in (not modified)
        :param action: Grounded action specifying the bound parameter values
        :return: List of successor states and their probabilities
        """
