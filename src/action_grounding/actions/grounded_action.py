"""Define classes to represent action templates bound to concrete parameter values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from action_grounding.actions.assignments import make_assignment
from action_grounding.errors import InvalidBindingError, UnsupportedOperationError
from action_grounding.io.string_utils import join_tokens, split_tokens
from action_grounding.states.object_matching import ValueObjectMatcher

if TYPE_CHECKING:
    from action_grounding.actions.assignments import Assignment
    from action_grounding.actions.environment import Environment, EnvironmentOutcome
    from action_grounding.actions.template import ActionTemplate, TransitionProbability
    from action_grounding.domains.domain import Domain
    from action_grounding.states import ObjectCentricState, ObjectMatcher, State

logger = logging.getLogger(__name__)


class GroundedAction:
    """An action template bound to a concrete parameter assignment.

    Grounded actions compare and hash by their action name alone, so two groundings of the
    same template are equal whatever their parameter values. Use StrictGroundedAction where
    parameter values must also be compared.
    """

    def __init__(self, template: ActionTemplate, values: Iterable[Any] = ()) -> None:
        """Initialize the grounded action by binding values to the template's parameters.

        :param template: Action template being grounded (shared, never copied)
        :param values: Values bound to the template's parameters, in order
        :raises InvalidBindingError: If the values don't fit the template's parameters
        """
        self.template = template
        self.assignment: Assignment = make_assignment(template.parameters, tuple(values))

    def __eq__(self, other: object) -> bool:
        """Evaluate whether this grounded action and another have the same action name."""
        if self is other:
            return True
        if not isinstance(other, GroundedAction):
            return NotImplemented

        return self.name == other.name

    def __hash__(self) -> int:
        """Compute a hash value from the action name."""
        return hash(self.name)

    def __str__(self) -> str:
        """Return the action name followed by its textual parameters, space-separated."""
        return join_tokens([self.name, *self.textual_parameters()])

    def __repr__(self) -> str:
        """Return an unambiguous string representation of the grounded action."""
        return f"{type(self).__name__}({self.name!r}, {list(self.arguments)!r})"

    @classmethod
    def from_text(cls, template: ActionTemplate, tokens: Sequence[str]) -> GroundedAction:
        """Construct a grounded action from the textual form of its parameters."""
        return cls(template, [p.from_token(t) for p, t in _pair(template, tokens)])

    @classmethod
    def parse(cls, domain: Domain, string: str) -> GroundedAction:
        """Construct a grounded action from its string form (e.g., "move N").

        :param domain: Domain containing the action template named by the first token
        :param string: Action name followed by textual parameters, whitespace-separated
        :return: Constructed grounded action
        :raises InvalidBindingError: If the string is empty or its parameters are invalid
        """
        tokens = split_tokens(string)
        if not tokens:
            raise InvalidBindingError("Cannot parse a grounded action from an empty string.")

        return cls.from_text(domain.get_action_template(tokens[0]), tokens[1:])

    @property
    def name(self) -> str:
        """Retrieve the name of the grounded action's template."""
        return self.template.name

    @property
    def is_parameterized(self) -> bool:
        """Check whether the grounded action's template has any parameters."""
        return self.template.is_parameterized

    @property
    def supports_full_model(self) -> bool:
        """Check whether the full transition distribution of the action can be enumerated."""
        return self.template.supports_full_model

    @property
    def arguments(self) -> tuple[Any, ...]:
        """Retrieve the bound values in parameter order."""
        return self.assignment.values

    def applicable_in(self, state: State) -> bool:
        """Evaluate whether the grounded action can be applied in the given state."""
        return self.template.applicable_in(state, self)

    def sample(self, state: State) -> State:
        """Sample a successor state from applying the grounded action in the given state."""
        try:
            return self.template.sample(state, self)
        except Exception as err:
            err.add_note(f"Raised while sampling action '{self}'.")
            raise

    def transitions(self, state: State) -> list[TransitionProbability]:
        """Compute the full distribution over successor states for the given state.

        :raises UnsupportedOperationError: If the template can't enumerate its transitions
        """
        if not self.supports_full_model:
            raise UnsupportedOperationError(
                f"Cannot compute the full transitions of '{self}' because action '{self.name}' "
                "has no full transition model. Use sample() to draw successor states instead.",
            )
        return self.template.transitions(state, self)  # type: ignore[attr-defined]

    def execute_in(self, env: Environment) -> EnvironmentOutcome:
        """Execute the grounded action in an environment and return the reported outcome."""
        logger.debug("Delegating execution of '%s' to %s.", self, type(env).__name__)
        try:
            return self.template.execute_in(env, self)
        except Exception as err:
            err.add_note(f"Raised while executing action '{self}' in the environment.")
            raise

    def translate_parameters(
        self,
        source: ObjectCentricState,
        target: ObjectCentricState,
        matcher: ObjectMatcher | None = None,
    ) -> GroundedAction:
        """Rebind the action's object parameters to the corresponding objects of another state.

        :param source: State in which the action's object parameters are bound
        :param target: State in which the returned action's object parameters are bound
        :param matcher: Object correspondence between the states (defaults to value matching)
        :return: Translated copy of the grounded action (an unchanged copy if it has no objects)
        :raises TranslationFailureError: If an object parameter has no match in the target state
        """
        translated = self.copy()
        if not self.assignment.is_object_parameterized:
            return translated

        matcher = ValueObjectMatcher() if matcher is None else matcher
        mapping = matcher.match(source, target)
        translated.assignment = self.assignment.remap_objects(mapping)
        return translated

    def copy(self) -> GroundedAction:
        """Return a grounded action with the same template and an independent assignment."""
        duplicate = object.__new__(type(self))
        duplicate.template = self.template
        duplicate.assignment = self.assignment.copy()
        return duplicate

    def rebind(self, param_name: str, value: Any) -> None:
        """Replace the value bound to the named parameter (meant for freshly made copies).

        :raises InvalidBindingError: If the parameter is unknown or the value doesn't fit it
        """
        for index, param in enumerate(self.template.parameters):
            if param.name == param_name:
                self.assignment.set_value(index, param.validate(value))
                return

        raise InvalidBindingError(f"Action '{self.name}' has no parameter named '{param_name}'.")

    def textual_parameters(self) -> list[str]:
        """Convert the bound values into one token per parameter."""
        return [p.to_token(v) for p, v in zip(self.template.parameters, self.arguments)]

    def init_from_text(self, tokens: Sequence[str]) -> None:
        """Replace the bound values with values parsed from one token per parameter."""
        values = tuple(p.from_token(t) for p, t in _pair(self.template, tokens))
        self.assignment = make_assignment(self.template.parameters, values)


class StrictGroundedAction(GroundedAction):
    """A grounded action that compares and hashes by action name and bound values."""

    def __eq__(self, other: object) -> bool:
        """Evaluate whether this grounded action and another have equal names and values."""
        if not isinstance(other, GroundedAction):
            return NotImplemented

        return self.name == other.name and self.arguments == other.arguments

    def __hash__(self) -> int:
        """Compute a hash value from the action name and bound values."""
        return hash((self.name, self.arguments))


def _pair(template: ActionTemplate, tokens: Sequence[str]) -> Iterable[tuple[Any, str]]:
    """Pair each parameter of the template with its token, checking the token count."""
    if len(tokens) != len(template.parameters):
        raise InvalidBindingError(
            f"Action '{template.name}' expects {len(template.parameters)} parameters, "
            f"not {len(tokens)}: {list(tokens)}",
        )
    return zip(template.parameters, tokens, strict=True)
