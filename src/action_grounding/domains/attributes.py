"""Define the shared definitions that make up a domain's object model.

Attributes and object classes compare by identity: domains built from one another hold
references to the same definitions, so a change made through one domain is visible in all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import permutations
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from action_grounding.states import ObjectCentricState


@dataclass(eq=False)
class Attribute:
    """A named, typed property that objects of some classes carry."""

    name: str
    type_: type = float
    """Python type of the attribute's values."""

    semantics: str | None = None
    """Optional natural language description of the attribute's meaning."""


@dataclass(eq=False)
class ObjectClass:
    """A class of objects defined by the attributes its instances carry."""

    name: str
    attributes: list[Attribute] = field(default_factory=list)

    @property
    def attribute_names(self) -> list[str]:
        """Retrieve the names of the class's attributes in order."""
        return [a.name for a in self.attributes]

    def add_attribute(self, attribute: Attribute) -> None:
        """Add an attribute to the object class."""
        self.attributes.append(attribute)


class PropositionalFunction:
    """A named relation over typed objects, evaluated in an object-centric state."""

    def __init__(
        self,
        name: str,
        parameter_classes: tuple[str, ...],
        evaluate: Callable[..., bool],
    ) -> None:
        """Initialize the propositional function.

        :param name: Name of the propositional function
        :param parameter_classes: Object class names expected by each parameter
        :param evaluate: Callable taking a state and object names, returning whether it holds
        """
        self.name = name
        self.parameter_classes = parameter_classes
        self._evaluate = evaluate

    def __str__(self) -> str:
        """Return a readable string representation of the propositional function."""
        return f"{self.name}({', '.join(self.parameter_classes)})"

    def is_true(self, state: ObjectCentricState, *obj_names: str) -> bool:
        """Evaluate whether the function holds for the named objects in the given state."""
        if len(obj_names) != len(self.parameter_classes):
            raise ValueError(
                f"{self.name} expects {len(self.parameter_classes)} objects, "
                f"not {len(obj_names)}.",
            )
        return bool(self._evaluate(state, *obj_names))

    def all_true_groundings(self, state: ObjectCentricState) -> list[tuple[str, ...]]:
        """Compute every tuple of distinct, correctly-typed objects for which the function holds."""
        names = state.object_names
        return [
            args
            for args in permutations(names, len(self.parameter_classes))
            if all(
                state.get_object(n).class_name == c
                for n, c in zip(args, self.parameter_classes, strict=True)
            )
            and self.is_true(state, *args)
        ]
