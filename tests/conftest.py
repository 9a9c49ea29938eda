"""Pytest configuration and shared fixtures."""

import io
from typing import Callable, Iterator, List

import pytest

from heroine_state.config.defaults import TransitionParams
from heroine_state.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Route structlog through stdlib logging so stdout only carries state lines."""
    configure_logging(level="WARNING")


@pytest.fixture
def fixed_clock() -> Callable[[int], Callable[[], int]]:
    """Build a clock that always reports the given epoch second."""
    def build(seconds: int) -> Callable[[], int]:
        return lambda: seconds
    return build


@pytest.fixture
def sequence_clock() -> Callable[[List[int]], Callable[[], int]]:
    """Build a clock that reports the given epoch seconds one call at a time."""
    def build(seconds: List[int]) -> Callable[[], int]:
        values: Iterator[int] = iter(seconds)
        return lambda: next(values)
    return build


@pytest.fixture
def transitions() -> TransitionParams:
    """Default transition guards: walking % 3, jumping % 7."""
    return TransitionParams()


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream capturing state labels."""
    return io.StringIO()
