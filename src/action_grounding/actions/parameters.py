"""Define classes to represent typed parameters of action templates.

A parameter has one of three kinds, determined by its type:

    object reference - The type is a string naming an object class; values are object names.
    enumerated - The type is an EnumeratedType; values are drawn from a closed set of tokens.
    typed literal - The type is one of the Python types int, float, bool, or str.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Union

from action_grounding.errors import InvalidBindingError
from action_grounding.io.string_utils import is_token

LITERAL_TYPES: dict[str, type] = {"int": int, "float": float, "bool": bool, "str": str}
"""Map from names to the Python types usable as typed-literal parameter types."""


@dataclass(frozen=True)
class EnumeratedType:
    """A named, closed set of literal values (e.g., the compass directions N, S, E, W)."""

    name: str
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        """Verify that every value of the enumerated type is a valid token."""
        for value in self.values:
            if not is_token(value):
                raise ValueError(f"Enumerated type '{self.name}' has an invalid value: {value!r}")

    def __contains__(self, value: object) -> bool:
        """Evaluate whether the given value belongs to the enumerated type."""
        return value in self.values


ParameterType = Union[str, EnumeratedType, type]
"""An object class name, an enumerated type, or a Python literal type."""


@dataclass(frozen=True)
class ActionParameter:
    """A typed parameter of an action template."""

    name: str
    """Name of the lifted parameter."""

    type_: ParameterType
    """Object class name, enumerated type, or Python literal type expected by the parameter."""

    order_group: str | None = None
    """Parameters sharing an order group are interchangeable (defaults to the parameter name)."""

    semantics: str | None = None
    """Optional natural language description of the parameter's meaning."""

    def __post_init__(self) -> None:
        """Verify that the parameter's type is one of the supported parameter kinds."""
        if isinstance(self.type_, type) and self.type_ not in LITERAL_TYPES.values():
            raise TypeError(f"{self.name}: unsupported literal parameter type {self.type_!r}.")
        if not isinstance(self.type_, (str, EnumeratedType, type)):
            raise TypeError(f"{self.name}: unsupported parameter type {self.type_!r}.")

    def __str__(self) -> str:
        """Create a readable string representation of the parameter."""
        semantics = f": {self.semantics}" if self.semantics else ""
        return f"{self.name} (type {self.type_name}){semantics}"

    @property
    def type_name(self) -> str:
        """Retrieve a human-readable name for the parameter's type."""
        if isinstance(self.type_, str):
            return self.type_
        return self.type_.name if isinstance(self.type_, EnumeratedType) else self.type_.__name__

    @property
    def group(self) -> str:
        """Retrieve the name of the parameter's order group."""
        return self.order_group if self.order_group is not None else self.name

    @property
    def is_object_reference(self) -> bool:
        """Check whether the parameter's values are names of objects."""
        return isinstance(self.type_, str)

    @property
    def is_enumerated(self) -> bool:
        """Check whether the parameter's values come from a closed set."""
        return isinstance(self.type_, EnumeratedType)

    def validate(self, value: Any) -> Any:
        """Verify that a value may be bound to this parameter and return it.

        :raises InvalidBindingError: If the value doesn't fit the parameter's type
        """
        if isinstance(self.type_, EnumeratedType):
            valid = value in self.type_
        elif isinstance(self.type_, str):
            valid = isinstance(value, str) and is_token(value)
        elif self.type_ is float:
            valid = isinstance(value, (int, float)) and not isinstance(value, bool)
            if valid:
                try:
                    value = float(value)
                except OverflowError as err:
                    raise InvalidBindingError(
                        f"Value of parameter '{self.name}' is too large for a float.",
                    ) from err
        elif self.type_ is int:
            valid = isinstance(value, int) and not isinstance(value, bool)
            if valid and not _fits_token(value):
                raise InvalidBindingError(
                    f"Value of parameter '{self.name}' has too many digits to write as a token.",
                )
        elif self.type_ is str:
            valid = isinstance(value, str) and is_token(value)
        else:
            valid = isinstance(value, self.type_)

        if not valid:
            raise InvalidBindingError(
                f"Cannot bind {value!r} to parameter '{self.name}' of type {self.type_name}.",
            )
        return value

    def to_token(self, value: Any) -> str:
        """Convert a bound value into its textual token."""
        value = self.validate(value)
        return repr(value) if self.type_ is float else str(value)

    def from_token(self, token: str) -> Any:
        """Parse a textual token into a value for this parameter.

        :raises InvalidBindingError: If the token can't be parsed as the parameter's type
        """
        if not is_token(token):
            raise InvalidBindingError(f"Parameter '{self.name}' got an invalid token: {token!r}")

        if self.type_ is bool:
            if token not in ("True", "False"):
                raise InvalidBindingError(f"Parameter '{self.name}' expects True/False: {token}")
            return token == "True"

        if self.type_ in (int, float):
            try:
                return self.validate(self.type_(token))
            except ValueError as err:
                raise InvalidBindingError(
                    f"Cannot parse '{token}' as {self.type_name} for parameter '{self.name}'.",
                ) from err

        return self.validate(token)

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the parameter into a dictionary ready to be exported as YAML data."""
        data: dict[str, Any] = {"name": self.name}
        if isinstance(self.type_, EnumeratedType):
            data.update({"enum": self.type_.name, "values": list(self.type_.values)})
        elif isinstance(self.type_, str):
            data["class"] = self.type_
        else:
            data["literal"] = self.type_.__name__

        if self.order_group is not None:
            data["order_group"] = self.order_group
        if self.semantics is not None:
            data["semantics"] = self.semantics

        return data

    @classmethod
    def from_yaml_data(cls, data: dict[str, Any]) -> ActionParameter:
        """Construct a parameter from data imported from YAML.

        :param data: Dictionary with a `name` and exactly one of `class`, `enum`, or `literal`
        :return: Constructed ActionParameter instance
        """
        kinds = [k for k in ("class", "enum", "literal") if k in data]
        if len(kinds) != 1:
            raise KeyError(f"Parameter data needs one of class, enum, or literal: {data}")

        type_: ParameterType
        if "class" in data:
            type_ = str(data["class"])
        elif "enum" in data:
            type_ = EnumeratedType(str(data["enum"]), tuple(str(v) for v in data["values"]))
        else:
            if data["literal"] not in LITERAL_TYPES:
                raise ValueError(f"Unknown literal parameter type: '{data['literal']}'.")
            type_ = LITERAL_TYPES[data["literal"]]

        return ActionParameter(
            name=data["name"],
            type_=type_,
            order_group=data.get("order_group"),
            semantics=data.get("semantics"),
        )


def _fits_token(value: int) -> bool:
    """Check whether an integer is within the interpreter's limit on digits in int strings."""
    limit = sys.get_int_max_str_digits()
    return limit == 0 or abs(value) < 10**limit
