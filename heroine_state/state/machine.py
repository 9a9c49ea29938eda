"""
Core heroine state machine logic.

Each tick the current state prints its label, reads the wall clock and
returns either itself or a fresh instance of the other state. Guards are
evaluated on every tick, so a guard that holds on consecutive ticks would
fire on each of them.
"""

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional, TextIO

from ..config.defaults import TransitionParams
from ..logging.config import get_state_logger, log_state_transition
from ..utils.time import format_epoch_seconds, is_divisible, wall_clock_seconds
from .models import StateName

if TYPE_CHECKING:
    from ..heroine import Heroine

Clock = Callable[[], int]

state_logger = get_state_logger(__name__)


class HeroineState(ABC):
    """
    A behavior the heroine can be in.

    Args:
        transitions: Guard moduli shared by both states
        clock: Returns whole epoch seconds, defaults to the wall clock
        output: Stream the label is written to, defaults to stdout
    """

    name: StateName
    label: str

    def __init__(
        self,
        transitions: Optional[TransitionParams] = None,
        clock: Optional[Clock] = None,
        output: Optional[TextIO] = None
    ) -> None:
        self.transitions = transitions or TransitionParams()
        self.clock = clock or wall_clock_seconds
        self.output = output

    @property
    @abstractmethod
    def modulus(self) -> int:
        """Epoch-second divisor that triggers the transition out of this state."""

    @abstractmethod
    def next_state(self) -> "HeroineState":
        """Build the state this one hands over to."""

    def update_state(self, heroine: "Heroine") -> "HeroineState":
        """
        Run one tick of this state.

        Args:
            heroine: The actor being updated; not consulted by the guards

        Returns:
            self when the guard does not hold, otherwise a new instance of
            the other state
        """
        print(self.label, file=self.output or sys.stdout, flush=True)

        seconds = self.clock()
        if not is_divisible(seconds, self.modulus):
            state_logger.debug(
                "State retained",
                state=self.name.value,
                epoch_seconds=seconds,
                modulus=self.modulus
            )
            return self

        successor = self.next_state()
        log_state_transition(
            state_logger,
            actor=type(heroine).__name__,
            from_state=self.name.value,
            to_state=successor.name.value,
            trigger=f"epoch_seconds % {self.modulus} == 0",
            context={
                "epoch_seconds": seconds,
                "timestamp": format_epoch_seconds(seconds)
            }
        )
        return successor

    def _spawn(self, state_cls: type) -> "HeroineState":
        return state_cls(transitions=self.transitions, clock=self.clock, output=self.output)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Walking(HeroineState):
    """Walking behavior; switches to jumping on multiples of 3 seconds."""

    name = StateName.WALKING
    label = "walking"

    @property
    def modulus(self) -> int:
        return self.transitions.walking_to_jumping_modulus

    def next_state(self) -> HeroineState:
        return self._spawn(Jumping)


class Jumping(HeroineState):
    """Jumping behavior; switches to walking on multiples of 7 seconds."""

    name = StateName.JUMPING
    label = "Jumping"

    @property
    def modulus(self) -> int:
        return self.transitions.jumping_to_walking_modulus

    def next_state(self) -> HeroineState:
        return self._spawn(Walking)
