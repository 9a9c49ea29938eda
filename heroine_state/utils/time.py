"""
Wall-clock helpers used by the state guards.

Guards only need whole epoch seconds, so everything here works on integer
seconds since 1970-01-01T00:00:00Z.
"""

from datetime import datetime, timezone


def wall_clock_seconds() -> int:
    """
    Read the current wall-clock time.

    Returns:
        Whole seconds since the Unix epoch, fractional part truncated
    """
    return int(datetime.now(timezone.utc).timestamp())


def is_divisible(seconds: int, modulus: int) -> bool:
    """Check whether an epoch second falls on a multiple of modulus."""
    return seconds % modulus == 0


def format_epoch_seconds(seconds: int) -> str:
    """
    Format epoch seconds for logging.

    Args:
        seconds: Seconds since the Unix epoch

    Returns:
        ISO8601 formatted UTC string
    """
    return datetime.fromtimestamp(seconds, tz=timezone.utc).isoformat()
