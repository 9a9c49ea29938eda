"""
Error classifications for the heroine state machine.

None of these are expected during normal operation: the clock is treated as
infallible and the states always hand back a defined successor.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class HeroineStateError(Exception):
    """Base class for all heroine state machine failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class StateTransitionError(HeroineStateError):
    """A state produced something other than a defined successor state."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition


class ConfigurationError(HeroineStateError):
    """Configuration file could not be read or failed validation."""

    def __init__(self, message: str, errors: Optional[List["ValidationError"]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
