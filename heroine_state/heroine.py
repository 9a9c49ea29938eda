"""
The heroine actor.

Owns exactly one current state and delegates each tick to it, replacing the
state with whatever the tick returns.
"""

from typing import Optional

import structlog

from .errors import StateTransitionError
from .state.machine import HeroineState, Walking
from .state.models import StateName

logger = structlog.get_logger(__name__)


class Heroine:
    """Actor whose behavior is governed by its current state."""

    def __init__(self, initial_state: Optional[HeroineState] = None) -> None:
        self._state: HeroineState = initial_state if initial_state is not None else Walking()

    @property
    def state(self) -> HeroineState:
        return self._state

    @property
    def state_name(self) -> StateName:
        return self._state.name

    def update(self) -> None:
        """Run one tick of the current state and adopt its successor."""
        current = self._state
        successor = current.update_state(self)

        if not isinstance(successor, HeroineState):
            logger.error(
                "State returned no successor",
                current_state=current.name.value,
                returned=repr(successor)
            )
            raise StateTransitionError(
                f"{type(current).__name__} returned {successor!r} instead of a state",
                current_state=current.name.value,
                attempted_transition=type(successor).__name__
            )

        self._state = successor
