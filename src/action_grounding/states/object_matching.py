"""Define ways to find corresponding objects between two object-centric states."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol

from action_grounding.errors import TranslationFailureError

if TYPE_CHECKING:
    from action_grounding.states.object_centric_state import ObjectCentricState


class ObjectMatcher(Protocol):
    """A protocol for computing object correspondences between two states."""

    def match(self, source: ObjectCentricState, target: ObjectCentricState) -> dict[str, str]:
        """Map the names of objects in the source state to corresponding names in the target.

        :param source: State whose object names are keys of the returned map
        :param target: State whose object names are values of the returned map
        :return: Map from source object names to target object names
        """
        ...


class ValueObjectMatcher:
    """Match objects that belong to the same class and have equal attribute values."""

    def match(self, source: ObjectCentricState, target: ObjectCentricState) -> dict[str, str]:
        """Greedily match each source object to the first unclaimed equivalent target object.

        Source objects without any equivalent target object are left out of the result.
        """
        unclaimed = target.object_names
        matches: dict[str, str] = {}

        for obj in source.objects:
            for t_name in unclaimed:
                t_obj = target.get_object(t_name)
                if t_obj.class_name == obj.class_name and t_obj.values == obj.values:
                    matches[obj.name] = t_name
                    unclaimed.remove(t_name)
                    break

        return matches


class ExplicitObjectMatcher:
    """Match objects using a fixed correspondence between object names."""

    def __init__(self, correspondence: Mapping[str, str]) -> None:
        """Initialize the matcher using a map from source to target object names."""
        self.correspondence = dict(correspondence)

    def match(self, source: ObjectCentricState, target: ObjectCentricState) -> dict[str, str]:
        """Return the fixed correspondence, restricted to objects present in both states.

        :raises TranslationFailureError: If a mapped name is missing from the target state
        """
        matches: dict[str, str] = {}
        for s_name, t_name in self.correspondence.items():
            if s_name not in source:
                continue
            if t_name not in target:
                raise TranslationFailureError(
                    f"Object '{s_name}' maps to '{t_name}', which isn't in the target state.",
                )
            matches[s_name] = t_name

        return matches
