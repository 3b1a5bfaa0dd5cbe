"""Define classes to represent the action vocabularies of agents in stochastic games."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from action_grounding.actions.parameters import ActionParameter
from action_grounding.io.yaml_utils import read_yaml_config, write_yaml_config


@dataclass(frozen=True)
class AgentAction:
    """The signature of an action that an agent may choose in a stochastic game."""

    name: str
    parameters: tuple[ActionParameter, ...] = ()

    def __str__(self) -> str:
        """Return a readable string representation of the agent action."""
        params = ", ".join(f"{p.name}: {p.type_name}" for p in self.parameters)
        return f"{self.name}({params})"

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        """Retrieve the type of each parameter, in order."""
        return tuple(p.type_ for p in self.parameters)

    @property
    def parameter_order_groups(self) -> tuple[str, ...]:
        """Retrieve the order group of each parameter, in order."""
        return tuple(p.group for p in self.parameters)

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the agent action into a dictionary ready to be exported as YAML data."""
        return {self.name: {"parameters": [p.to_yaml_data() for p in self.parameters]}}

    @classmethod
    def from_yaml_data(cls, name: str, data: dict[str, Any] | None) -> AgentAction:
        """Construct an agent action from data imported from YAML."""
        params_data = (data or {}).get("parameters") or []
        return AgentAction(name, tuple(ActionParameter.from_yaml_data(p) for p in params_data))


@dataclass(frozen=True)
class AgentType:
    """An agent role, defined by the actions available to agents in that role."""

    name: str
    actions: tuple[AgentAction, ...]

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the agent type into a dictionary ready to be exported as YAML data."""
        actions_data: dict[str, Any] = {}
        for action in self.actions:
            actions_data.update(action.to_yaml_data())

        return {self.name: {"actions": actions_data}}

    @classmethod
    def from_yaml_data(cls, name: str, data: dict[str, Any]) -> AgentType:
        """Construct an agent type from data imported from YAML.

        :param name: Name given to the constructed agent type
        :param data: Data loaded from YAML, mapping `actions` to per-action data
        :return: Constructed AgentType instance
        """
        actions = (AgentAction.from_yaml_data(a, d) for a, d in data["actions"].items())
        return AgentType(name, tuple(actions))


def load_agent_types(yaml_path: Path) -> list[AgentType]:
    """Load the agent types defined in a YAML file under its `agent_types` key."""
    yaml_data = read_yaml_config(yaml_path, required_keys={"agent_types"})
    return [AgentType.from_yaml_data(n, d) for n, d in yaml_data["agent_types"].items()]


def export_agent_types(agent_types: list[AgentType], yaml_path: Path) -> None:
    """Export the given agent types to a YAML file."""
    types_data: dict[str, Any] = {}
    for agent_type in agent_types:
        types_data.update(agent_type.to_yaml_data())

    write_yaml_config({"agent_types": types_data}, yaml_path)
