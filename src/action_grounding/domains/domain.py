"""Define classes to represent domains: the object model and actions of a decision process."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from action_grounding.actions.template import ActionTemplate
    from action_grounding.domains.agent_types import AgentAction, AgentType
    from action_grounding.domains.attributes import Attribute, ObjectClass, PropositionalFunction


class Domain:
    """A named collection of attributes, object classes, propositional functions, and actions.

    Every collection preserves insertion order. Adding a definition whose name is already in
    use replaces the earlier definition; avoiding duplicate names is the caller's job.
    """

    def __init__(self, name: str = "") -> None:
        """Initialize an empty domain with the given name."""
        self.name = name
        self._attributes: dict[str, Attribute] = {}
        self._object_classes: dict[str, ObjectClass] = {}
        self._prop_functions: dict[str, PropositionalFunction] = {}
        self._action_templates: dict[str, ActionTemplate] = {}

    def __str__(self) -> str:
        """Return a readable string representation of the domain."""
        return (
            f"{type(self).__name__}('{self.name}', classes={list(self._object_classes)}, "
            f"actions={list(self._action_templates)})"
        )

    @property
    def attributes(self) -> list[Attribute]:
        """Retrieve the domain's attributes in insertion order."""
        return list(self._attributes.values())

    @property
    def object_classes(self) -> list[ObjectClass]:
        """Retrieve the domain's object classes in insertion order."""
        return list(self._object_classes.values())

    @property
    def propositional_functions(self) -> list[PropositionalFunction]:
        """Retrieve the domain's propositional functions in insertion order."""
        return list(self._prop_functions.values())

    @property
    def action_templates(self) -> list[ActionTemplate]:
        """Retrieve the domain's action templates in insertion order."""
        return list(self._action_templates.values())

    def add_attribute(self, attribute: Attribute) -> None:
        """Add an attribute definition to the domain."""
        self._attributes[attribute.name] = attribute

    def add_object_class(self, object_class: ObjectClass) -> None:
        """Add an object class definition to the domain."""
        self._object_classes[object_class.name] = object_class

    def add_propositional_function(self, prop_function: PropositionalFunction) -> None:
        """Add a propositional function to the domain."""
        self._prop_functions[prop_function.name] = prop_function

    def add_action_template(self, template: ActionTemplate) -> None:
        """Add an action template to the domain."""
        self._action_templates[template.name] = template

    def get_attribute(self, name: str) -> Attribute:
        """Retrieve the named attribute.

        :raises KeyError: If the domain has no attribute with the given name
        """
        if name not in self._attributes:
            raise KeyError(f"Domain '{self.name}' has no attribute named '{name}'.")
        return self._attributes[name]

    def get_object_class(self, name: str) -> ObjectClass:
        """Retrieve the named object class.

        :raises KeyError: If the domain has no object class with the given name
        """
        if name not in self._object_classes:
            raise KeyError(f"Domain '{self.name}' has no object class named '{name}'.")
        return self._object_classes[name]

    def get_action_template(self, name: str) -> ActionTemplate:
        """Retrieve the named action template.

        :raises KeyError: If the domain has no action template with the given name
        """
        if name not in self._action_templates:
            raise KeyError(f"Domain '{self.name}' has no action named '{name}'.")
        return self._action_templates[name]


class SingleAgentDomain(Domain):
    """A domain whose action templates are chosen and executed by a single agent."""


class StochasticGameDomain(Domain):
    """A domain in which several agents act simultaneously.

    Agent actions are signatures only: the outcome of a joint action is resolved by the
    environment, so they carry no single-agent transition dynamics.
    """

    def __init__(self, name: str = "") -> None:
        """Initialize an empty stochastic game domain with the given name."""
        super().__init__(name)
        self._agent_actions: dict[str, AgentAction] = {}
        self._agent_types: dict[str, AgentType] = {}

    @property
    def agent_actions(self) -> list[AgentAction]:
        """Retrieve the domain's agent actions in insertion order."""
        return list(self._agent_actions.values())

    @property
    def agent_types(self) -> list[AgentType]:
        """Retrieve the domain's agent types in insertion order."""
        return list(self._agent_types.values())

    def add_agent_action(self, action: AgentAction) -> None:
        """Add an agent action signature to the domain."""
        self._agent_actions[action.name] = action

    def add_agent_type(self, agent_type: AgentType) -> None:
        """Add an agent type to the domain, along with any of its actions not yet added."""
        self._agent_types[agent_type.name] = agent_type
        for action in agent_type.actions:
            self._agent_actions.setdefault(action.name, action)

    def get_agent_action(self, name: str) -> AgentAction:
        """Retrieve the named agent action.

        :raises KeyError: If the domain has no agent action with the given name
        """
        if name not in self._agent_actions:
            raise KeyError(f"Domain '{self.name}' has no agent action named '{name}'.")
        return self._agent_actions[name]

    def get_agent_type(self, name: str) -> AgentType:
        """Retrieve the named agent type.

        :raises KeyError: If the domain has no agent type with the given name
        """
        if name not in self._agent_types:
            raise KeyError(f"Domain '{self.name}' has no agent type named '{name}'.")
        return self._agent_types[name]


class DomainGenerator(Protocol):
    """A protocol for objects that produce domains."""

    def generate_domain(self) -> Domain:
        """Return the generated domain."""
        ...
