"""
Structured exception hierarchy for the heroine state machine.
"""

from .system_failures import (
    HeroineStateError,
    StateTransitionError,
    ConfigurationError,
)

__all__ = [
    "HeroineStateError",
    "StateTransitionError",
    "ConfigurationError",
]
