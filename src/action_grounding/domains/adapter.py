"""Define a domain generator that reshapes a stochastic game domain for a single agent.

The generated domain keeps the source domain's object model and the names and parameter
signatures of the selected agent actions. Its actions have no local dynamics, because the
outcome of an action depends on what the other agents choose; they can only be executed
through an environment that resolves the other agents' decisions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, NoReturn

from action_grounding.actions.template import ActionTemplate
from action_grounding.domains.domain import DomainGenerator, SingleAgentDomain
from action_grounding.errors import UnsupportedOperationError
from action_grounding.io.logging import log_info

if TYPE_CHECKING:
    from action_grounding.actions.grounded_action import GroundedAction
    from action_grounding.actions.parameters import ActionParameter
    from action_grounding.domains.agent_types import AgentAction, AgentType
    from action_grounding.domains.domain import StochasticGameDomain
    from action_grounding.states import State

DELEGATED_EXECUTION_MESSAGE = (
    "Actions of a domain adapted from a stochastic game cannot be performed locally, because "
    "their transition dynamics depend on the decisions of the other agents, which are unknown. "
    "Execute them through an Environment (e.g., GroundedAction.execute_in) instead."
)


class DelegatedActionTemplate(ActionTemplate):
    """An action template with an agent action's signature but no local dynamics."""

    def __init__(
        self,
        name: str,
        parameters: tuple[ActionParameter, ...],
        domain: SingleAgentDomain,
    ) -> None:
        """Initialize the template and add it to the given single-agent domain."""
        super().__init__(name, parameters, domain)

    @classmethod
    def from_agent_action(
        cls,
        agent_action: AgentAction,
        domain: SingleAgentDomain,
    ) -> DelegatedActionTemplate:
        """Construct a template with the same name and parameters as an agent action."""
        return cls(agent_action.name, agent_action.parameters, domain)

    def sample(self, state: State, action: GroundedAction) -> NoReturn:
        """Refuse to sample a successor state, whatever the given state or action.

        :raises UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(DELEGATED_EXECUTION_MESSAGE)

    def perform_helper(self, state: State, values: tuple[Any, ...]) -> NoReturn:
        """Refuse to apply the action to a state.

        :raises UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(DELEGATED_EXECUTION_MESSAGE)


class SingleAgentDomainAdapter(DomainGenerator):
    """Generates a single-agent domain from a stochastic game domain and chosen agent actions.

    The domain is built on the first call to `generate_domain`; later calls return the same
    domain object.
    """

    def __init__(self, source: StochasticGameDomain, actions: Iterable[AgentAction]) -> None:
        """Initialize the adapter.

        :param source: Stochastic game domain whose object model is shared with the result
        :param actions: Agent actions for which delegated action templates are created
        """
        self.source = source
        self.actions: tuple[AgentAction, ...] = tuple(actions)

        self._domain: SingleAgentDomain | None = None

    @classmethod
    def for_agent_type(
        cls,
        source: StochasticGameDomain,
        agent_type: AgentType,
    ) -> SingleAgentDomainAdapter:
        """Construct an adapter that selects every action available to the given agent type."""
        return cls(source, agent_type.actions)

    @property
    def is_built(self) -> bool:
        """Check whether the single-agent domain has been generated yet."""
        return self._domain is not None

    def generate_domain(self) -> SingleAgentDomain:
        """Return the single-agent domain, building it on the first call."""
        if self._domain is None:
            self._domain = self._build_domain()
        return self._domain

    def _build_domain(self) -> SingleAgentDomain:
        """Build a single-agent domain sharing the source domain's object model."""
        domain = SingleAgentDomain(self.source.name)

        for attribute in self.source.attributes:
            domain.add_attribute(attribute)
        for object_class in self.source.object_classes:
            domain.add_object_class(object_class)
        for prop_function in self.source.propositional_functions:
            domain.add_propositional_function(prop_function)

        for agent_action in self.actions:
            DelegatedActionTemplate.from_agent_action(agent_action, domain)

        action_names = ", ".join(a.name for a in self.actions)
        log_info(f"Adapted domain '{self.source.name}' for single-agent actions: {action_names}")
        return domain
