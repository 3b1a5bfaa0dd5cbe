"""Import classes used to represent object-centric states and match objects across them."""

from .object_centric_state import ObjectCentricState as ObjectCentricState
from .object_centric_state import ObjectInstance as ObjectInstance
from .object_centric_state import State as State
from .object_matching import ExplicitObjectMatcher as ExplicitObjectMatcher
from .object_matching import ObjectMatcher as ObjectMatcher
from .object_matching import ValueObjectMatcher as ValueObjectMatcher
