"""Tests for the error hierarchy."""

import pytest

from heroine_state.config.validation import ValidationError
from heroine_state.errors import (
    ConfigurationError,
    HeroineStateError,
    StateTransitionError,
)


class TestErrorClassification:
    """Test error attributes and inheritance."""

    def test_base_error_context(self):
        error = HeroineStateError("boom", context={"tick": 3})
        assert str(error) == "boom"
        assert error.context == {"tick": 3}
        assert error.recoverable is False

    def test_base_error_default_context(self):
        assert HeroineStateError("boom").context == {}

    def test_state_transition_error(self):
        error = StateTransitionError(
            "no successor",
            current_state="walking",
            attempted_transition="NoneType",
            context={"epoch_seconds": 9}
        )
        assert isinstance(error, HeroineStateError)
        assert error.current_state == "walking"
        assert error.attempted_transition == "NoneType"
        assert error.context == {"epoch_seconds": 9}

    def test_configuration_error(self):
        errors = [ValidationError(field="timing.tick_interval_seconds", message="bad", value=-1)]
        error = ConfigurationError("invalid", errors=errors, source="heroine.yaml")

        assert isinstance(error, HeroineStateError)
        assert error.errors == errors
        assert error.source == "heroine.yaml"

    def test_configuration_error_defaults(self):
        error = ConfigurationError("invalid")
        assert error.errors == []
        assert error.source is None

    def test_catchable_as_base(self):
        with pytest.raises(HeroineStateError):
            raise StateTransitionError("no successor")
