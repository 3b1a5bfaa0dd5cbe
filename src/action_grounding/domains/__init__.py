"""Import classes used to define domains and adapt them between agent settings."""

from .adapter import DELEGATED_EXECUTION_MESSAGE as DELEGATED_EXECUTION_MESSAGE
from .adapter import DelegatedActionTemplate as DelegatedActionTemplate
from .adapter import SingleAgentDomainAdapter as SingleAgentDomainAdapter
from .agent_types import AgentAction as AgentAction
from .agent_types import AgentType as AgentType
from .agent_types import export_agent_types as export_agent_types
from .agent_types import load_agent_types as load_agent_types
from .attributes import Attribute as Attribute
from .attributes import ObjectClass as ObjectClass
from .attributes import PropositionalFunction as PropositionalFunction
from .domain import Domain as Domain
from .domain import DomainGenerator as DomainGenerator
from .domain import SingleAgentDomain as SingleAgentDomain
from .domain import StochasticGameDomain as StochasticGameDomain
