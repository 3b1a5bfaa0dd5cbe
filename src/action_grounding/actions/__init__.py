"""Import classes used to structure action templates and their groundings."""

from .assignments import Assignment as Assignment
from .assignments import CompositeAssignment as CompositeAssignment
from .assignments import EmptyAssignment as EmptyAssignment
from .assignments import LiteralAssignment as LiteralAssignment
from .assignments import ObjectAssignment as ObjectAssignment
from .assignments import make_assignment as make_assignment
from .environment import Environment as Environment
from .environment import EnvironmentOutcome as EnvironmentOutcome
from .environment import SimulatedEnvironment as SimulatedEnvironment
from .grounded_action import GroundedAction as GroundedAction
from .grounded_action import StrictGroundedAction as StrictGroundedAction
from .parameters import ActionParameter as ActionParameter
from .parameters import EnumeratedType as EnumeratedType
from .template import ActionTemplate as ActionTemplate
from .template import FullModelActionTemplate as FullModelActionTemplate
from .template import TransitionProbability as TransitionProbability
