"""Default configuration parameters for the heroine state machine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingParams:
    """Tick loop timing parameters."""
    tick_interval_seconds: float = 1.0               # Pause between ticks


@dataclass(frozen=True)
class TransitionParams:
    """Epoch-second guards for state transitions."""
    walking_to_jumping_modulus: int = 3              # Walking -> Jumping when seconds % 3 == 0
    jumping_to_walking_modulus: int = 7              # Jumping -> Walking when seconds % 7 == 0


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    timing: TimingParams
    transitions: TransitionParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        timing=TimingParams(),
        transitions=TransitionParams(),
        logging=LoggingParams(),
    )
