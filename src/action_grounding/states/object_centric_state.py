"""Define classes to represent the state of an object-centric environment."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Protocol, Self

if TYPE_CHECKING:
    from action_grounding.domains.attributes import ObjectClass


class State(Protocol):
    """A protocol for states that action templates can transition from."""

    def copy(self) -> Self:
        """Return an independent copy of the state."""
        ...


@dataclass
class ObjectInstance:
    """A named object of a particular object class, along with its attribute values."""

    name: str
    object_class: ObjectClass
    """Object class defining the attributes of the object (shared, never copied)."""

    values: dict[str, Any] = field(default_factory=dict)
    """Map from attribute names to the object's values for those attributes."""

    def __str__(self) -> str:
        """Return a readable string representation of the object."""
        values = ", ".join(f"{k}={v}" for k, v in self.values.items())
        return f"{self.name}: {self.class_name}({values})"

    @property
    def class_name(self) -> str:
        """Retrieve the name of the object's class."""
        return self.object_class.name

    def copy(self) -> ObjectInstance:
        """Return a copy of the object whose attribute values can be changed independently."""
        return ObjectInstance(self.name, self.object_class, deepcopy(self.values))


class ObjectCentricState:
    """The state of an object-centric environment, as an ordered collection of objects."""

    def __init__(self, objects: Iterable[ObjectInstance] = ()) -> None:
        """Initialize the state using the given objects."""
        self._objects: dict[str, ObjectInstance] = {}
        """Map from object names to object instances, in insertion order."""

        for obj in objects:
            self.add_object(obj)

    def __contains__(self, obj_name: str) -> bool:
        """Evaluate whether the named object exists in the state."""
        return obj_name in self._objects

    def __eq__(self, other: object) -> bool:
        """Evaluate whether this state and another contain identical objects."""
        if not isinstance(other, ObjectCentricState):
            return NotImplemented

        return self._objects == other._objects

    def __str__(self) -> str:
        """Create a readable string representation of the state."""
        objects = "\n\t".join(str(obj) for obj in self._objects.values())
        return f"ObjectCentricState(\n\t{objects}\n)"

    @property
    def objects(self) -> list[ObjectInstance]:
        """Retrieve the objects in the state in insertion order."""
        return list(self._objects.values())

    @property
    def object_names(self) -> list[str]:
        """Retrieve the names of the objects in the state in insertion order."""
        return list(self._objects)

    def copy(self) -> ObjectCentricState:
        """Return a deep copy of the state (object classes remain shared)."""
        return ObjectCentricState(obj.copy() for obj in self._objects.values())

    def get_object(self, obj_name: str) -> ObjectInstance:
        """Retrieve the named object.

        :raises KeyError: If no object has the given name
        """
        if obj_name not in self._objects:
            raise KeyError(f"Unknown object: '{obj_name}'.")
        return self._objects[obj_name]

    def objects_of_class(self, class_name: str) -> list[ObjectInstance]:
        """Retrieve all objects of the named class in insertion order."""
        return [obj for obj in self._objects.values() if obj.class_name == class_name]

    def add_object(self, obj: ObjectInstance) -> None:
        """Add an object to the state.

        :raises ValueError: If the state already contains an object with the same name
        """
        if obj.name in self._objects:
            raise ValueError(f"State already contains an object named '{obj.name}'.")
        self._objects[obj.name] = obj

    def remove_object(self, obj_name: str) -> ObjectInstance:
        """Remove the named object from the state and return it."""
        obj = self.get_object(obj_name)
        del self._objects[obj_name]
        return obj

    def rename_object(self, obj_name: str, new_name: str) -> None:
        """Rename an object while preserving its position in the state's ordering."""
        obj = self.get_object(obj_name)
        if new_name in self._objects and new_name != obj_name:
            raise ValueError(f"Cannot rename '{obj_name}': '{new_name}' already exists.")

        obj.name = new_name
        self._objects = {(new_name if k == obj_name else k): v for k, v in self._objects.items()}

    def set_value(self, obj_name: str, attribute: str, value: Any) -> None:
        """Set the value of an attribute of the named object."""
        self.get_object(obj_name).values[attribute] = value
