#!/usr/bin/env python3
"""
State Machine Demo - Heroine State

Replays a scripted sequence of epoch seconds through the heroine so the
walking/jumping transitions can be watched without waiting on the wall clock:
- WALKING → JUMPING on multiples of 3
- JUMPING → WALKING on multiples of 7

Run: python examples/state_machine_demo.py
"""

from heroine_state.engine import TickLoop
from heroine_state.heroine import Heroine
from heroine_state.logging.config import configure_logging
from heroine_state.state.machine import Walking


def scripted_clock(seconds: list[int]):
    """Clock returning the scripted seconds in order."""
    values = iter(seconds)
    return lambda: next(values)


def main() -> None:
    # INFO shows each transition on stderr next to the labels on stdout
    configure_logging(level="INFO")

    seconds = list(range(1, 22))
    heroine = Heroine(Walking(clock=scripted_clock(seconds)))
    loop = TickLoop(heroine, interval_seconds=0.2)

    ticks = loop.run(max_ticks=len(seconds))
    print(f"\n{ticks} ticks, final state: {heroine.state_name.value}")


if __name__ == "__main__":
    main()
