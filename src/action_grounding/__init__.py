"""Import classes used to ground, execute, and translate parameterized actions."""

from .actions import ActionParameter as ActionParameter
from .actions import ActionTemplate as ActionTemplate
from .actions import EnumeratedType as EnumeratedType
from .actions import Environment as Environment
from .actions import EnvironmentOutcome as EnvironmentOutcome
from .actions import FullModelActionTemplate as FullModelActionTemplate
from .actions import GroundedAction as GroundedAction
from .actions import SimulatedEnvironment as SimulatedEnvironment
from .actions import StrictGroundedAction as StrictGroundedAction
from .actions import TransitionProbability as TransitionProbability
from .domains import AgentAction as AgentAction
from .domains import AgentType as AgentType
from .domains import Domain as Domain
from .domains import SingleAgentDomain as SingleAgentDomain
from .domains import SingleAgentDomainAdapter as SingleAgentDomainAdapter
from .domains import StochasticGameDomain as StochasticGameDomain
from .errors import ActionGroundingError as ActionGroundingError
from .errors import InvalidBindingError as InvalidBindingError
from .errors import TranslationFailureError as TranslationFailureError
from .errors import UnsupportedOperationError as UnsupportedOperationError
from .states import ObjectCentricState as ObjectCentricState
from .states import ObjectInstance as ObjectInstance
