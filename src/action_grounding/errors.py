"""Define the errors raised when grounding, executing, or translating actions."""


class ActionGroundingError(Exception):
    """Base class for errors raised by the action grounding layer."""


class UnsupportedOperationError(ActionGroundingError, NotImplementedError):
    """An error raised when an action template lacks the capability an operation requires."""


class InvalidBindingError(ActionGroundingError, ValueError):
    """An error raised when a parameter assignment doesn't match an action's parameters."""


class TranslationFailureError(ActionGroundingError, LookupError):
    """An error raised when an object parameter can't be resolved in a target state."""
