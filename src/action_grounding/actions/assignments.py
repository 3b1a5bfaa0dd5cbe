"""Define the closed set of parameter assignments a grounded action can hold.

The variant is chosen from the action template's parameters by `make_assignment`:

    EmptyAssignment - The template has no parameters.
    ObjectAssignment - Every parameter is an object reference.
    LiteralAssignment - Every parameter is enumerated or a typed literal.
    CompositeAssignment - Mixed; one part per consecutive run of parameters of the same kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

from action_grounding.errors import InvalidBindingError, TranslationFailureError

if TYPE_CHECKING:
    from action_grounding.actions.parameters import ActionParameter


@dataclass
class EmptyAssignment:
    """The assignment of an action template without parameters."""

    @property
    def values(self) -> tuple[Any, ...]:
        """Retrieve the assigned values in parameter order."""
        return ()

    @property
    def is_object_parameterized(self) -> bool:
        """Check whether any assigned value is an object reference."""
        return False

    def copy(self) -> EmptyAssignment:
        """Return an independent copy of the assignment."""
        return EmptyAssignment()

    def set_value(self, index: int, value: Any) -> None:
        """Replace the value at the given parameter index."""
        raise IndexError(f"Cannot set value {index} of an empty assignment.")

    def remap_objects(self, mapping: Mapping[str, str]) -> EmptyAssignment:
        """Return a copy whose object references are replaced using the given mapping."""
        return self.copy()


@dataclass
class ObjectAssignment:
    """An assignment binding names of objects to object-reference parameters."""

    objects: list[str] = field(default_factory=list)

    @property
    def values(self) -> tuple[Any, ...]:
        """Retrieve the assigned values in parameter order."""
        return tuple(self.objects)

    @property
    def is_object_parameterized(self) -> bool:
        """Check whether any assigned value is an object reference."""
        return True

    def copy(self) -> ObjectAssignment:
        """Return an independent copy of the assignment."""
        return ObjectAssignment(list(self.objects))

    def set_value(self, index: int, value: Any) -> None:
        """Replace the value at the given parameter index."""
        self.objects[index] = value

    def remap_objects(self, mapping: Mapping[str, str]) -> ObjectAssignment:
        """Return a copy whose object references are replaced using the given mapping.

        :raises TranslationFailureError: If an object reference is missing from the mapping
        """
        missing = [name for name in self.objects if name not in mapping]
        if missing:
            raise TranslationFailureError(
                f"No corresponding object in the target state for: {', '.join(missing)}.",
            )
        return ObjectAssignment([mapping[name] for name in self.objects])


@dataclass
class LiteralAssignment:
    """An assignment binding literal values to enumerated or typed-literal parameters."""

    literals: list[Any] = field(default_factory=list)

    @property
    def values(self) -> tuple[Any, ...]:
        """Retrieve the assigned values in parameter order."""
        return tuple(self.literals)

    @property
    def is_object_parameterized(self) -> bool:
        """Check whether any assigned value is an object reference."""
        return False

    def copy(self) -> LiteralAssignment:
        """Return an independent copy of the assignment."""
        return LiteralAssignment(list(self.literals))

    def set_value(self, index: int, value: Any) -> None:
        """Replace the value at the given parameter index."""
        self.literals[index] = value

    def remap_objects(self, mapping: Mapping[str, str]) -> LiteralAssignment:
        """Return a copy whose object references are replaced using the given mapping."""
        return self.copy()


@dataclass
class CompositeAssignment:
    """An assignment made of consecutive object and literal parts."""

    parts: list[ObjectAssignment | LiteralAssignment] = field(default_factory=list)

    @property
    def values(self) -> tuple[Any, ...]:
        """Retrieve the assigned values in parameter order."""
        return tuple(v for part in self.parts for v in part.values)

    @property
    def is_object_parameterized(self) -> bool:
        """Check whether any assigned value is an object reference."""
        return any(part.is_object_parameterized for part in self.parts)

    def copy(self) -> CompositeAssignment:
        """Return an independent copy of the assignment."""
        return CompositeAssignment([part.copy() for part in self.parts])

    def set_value(self, index: int, value: Any) -> None:
        """Replace the value at the given parameter index."""
        for part in self.parts:
            if index < len(part.values):
                part.set_value(index, value)
                return
            index -= len(part.values)
        raise IndexError("Assignment index out of range.")

    def remap_objects(self, mapping: Mapping[str, str]) -> CompositeAssignment:
        """Return a copy whose object references are replaced using the given mapping."""
        return CompositeAssignment([part.remap_objects(mapping) for part in self.parts])


Assignment = Union[EmptyAssignment, ObjectAssignment, LiteralAssignment, CompositeAssignment]
"""Any of the parameter assignment variants."""


def make_assignment(parameters: Sequence[ActionParameter], values: Sequence[Any]) -> Assignment:
    """Validate values against the given parameters and wrap them in an assignment.

    :param parameters: Parameters of an action template, in order
    :param values: Values bound to the parameters, in the same order
    :return: Assignment variant matching the kinds of the parameters
    :raises InvalidBindingError: If the number or types of values don't fit the parameters
    """
    if len(parameters) != len(values):
        raise InvalidBindingError(f"Expected {len(parameters)} values, not {len(values)}.")

    checked = [p.validate(v) for p, v in zip(parameters, values, strict=True)]
    if not checked:
        return EmptyAssignment()

    parts: list[ObjectAssignment | LiteralAssignment] = []
    pairs = zip(parameters, checked, strict=True)
    for is_object, run in groupby(pairs, key=lambda pair: pair[0].is_object_reference):
        run_values = [v for _, v in run]
        parts.append(ObjectAssignment(run_values) if is_object else LiteralAssignment(run_values))

    return parts[0] if len(parts) == 1 else CompositeAssignment(parts)
