"""Define an interface for environments in which grounded actions are executed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from action_grounding.actions.grounded_action import GroundedAction
    from action_grounding.states import State

logger = logging.getLogger(__name__)

RewardFunction = Callable[[Any, "GroundedAction", Any], float]
"""Maps a state, an action taken in it, and the resulting state to a scalar reward."""

TerminalFunction = Callable[[Any], bool]
"""Evaluates whether a state is terminal."""


@dataclass(frozen=True)
class EnvironmentOutcome:
    """The result of executing a grounded action in an environment."""

    observation: Any
    """Observation of the environment before the action was executed."""

    action: GroundedAction
    next_observation: Any
    """Observation of the environment after the action was executed."""

    reward: float
    terminated: bool
    """True if the environment reached a terminal state, else False."""


class Environment(Protocol):
    """An interface to an environment that executes grounded actions.

    How the environment resolves the behavior of any other agents is up to the environment.
    """

    def current_observation(self) -> Any:
        """Retrieve an observation of the environment's current state."""
        ...

    def execute_action(self, action: GroundedAction) -> EnvironmentOutcome:
        """Execute the grounded action and report its outcome."""
        ...

    def last_reward(self) -> float:
        """Retrieve the reward received for the most recently executed action."""
        ...

    def is_in_terminal_state(self) -> bool:
        """Evaluate whether the environment is in a terminal state."""
        ...

    def reset_environment(self) -> None:
        """Reset the environment to an initial state."""
        ...


class SimulatedEnvironment:
    """An environment that steps forward by sampling grounded actions' local dynamics."""

    def __init__(
        self,
        initial_state: State,
        reward_function: RewardFunction,
        terminal_function: TerminalFunction,
    ) -> None:
        """Initialize the simulated environment.

        :param initial_state: State the environment starts in (and resets to)
        :param reward_function: Function scoring each transition
        :param terminal_function: Function identifying terminal states
        """
        self.initial_state = initial_state
        self.reward_function = reward_function
        self.terminal_function = terminal_function

        self._state = initial_state.copy()
        self._last_reward = 0.0

    def current_observation(self) -> State:
        """Retrieve a copy of the environment's current state."""
        return self._state.copy()

    def execute_action(self, action: GroundedAction) -> EnvironmentOutcome:
        """Sample the action's successor state, then score and record the transition."""
        previous = self._state
        next_state = action.sample(previous)

        self._last_reward = self.reward_function(previous, action, next_state)
        self._state = next_state

        terminated = self.is_in_terminal_state()
        logger.debug(
            "Executed '%s' (reward %s, terminated %s).", action, self._last_reward, terminated
        )

        return EnvironmentOutcome(
            observation=previous.copy(),
            action=action.copy(),
            next_observation=next_state.copy(),
            reward=self._last_reward,
            terminated=terminated,
        )

    def last_reward(self) -> float:
        """Retrieve the reward received for the most recently executed action."""
        return self._last_reward

    def is_in_terminal_state(self) -> bool:
        """Evaluate whether the environment's current state is terminal."""
        return bool(self.terminal_function(self._state))

    def reset_environment(self) -> None:
        """Return the environment to a copy of its initial state."""
        self._state = self.initial_state.copy()
        self._last_reward = 0.0
