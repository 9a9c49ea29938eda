"""
Tick loop driving the heroine.

One tick updates the heroine once, then the loop pauses for the tick
interval. The pause waits on a stop event, so SIGINT/SIGTERM or stop() end
the loop after the tick in progress.
"""

import signal
import threading
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .heroine import Heroine
from .state.machine import Walking

logger = structlog.get_logger(__name__)


class TickLoop:
    """Repeatedly ticks a heroine at a fixed interval until stopped."""

    def __init__(
        self,
        heroine: Heroine,
        interval_seconds: float = 1.0,
        stop_event: Optional[threading.Event] = None
    ) -> None:
        self.logger = logger
        self.heroine = heroine
        self.interval_seconds = interval_seconds
        self._stop_event = stop_event or threading.Event()

    @classmethod
    def from_config(cls, config: DefaultConfig) -> "TickLoop":
        """Build a loop around a fresh walking heroine."""
        heroine = Heroine(Walking(transitions=config.transitions))
        return cls(heroine, interval_seconds=config.timing.tick_interval_seconds)

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Request the loop to end after the current tick."""
        self._stop_event.set()

    def install_signal_handlers(self) -> None:
        """Stop the loop on SIGINT and SIGTERM. Must be called from the main thread."""
        signal.signal(signal.SIGINT, self._handle_signal)
        signal.signal(signal.SIGTERM, self._handle_signal)

    def _handle_signal(self, signum: int, frame: Any) -> None:
        # Logging and Event.set() take locks the interrupted main thread may be holding
        threading.Thread(
            target=self._request_stop,
            args=(signal.Signals(signum).name,),
            name="tick-loop-stop",
            daemon=True
        ).start()

    def _request_stop(self, signame: str) -> None:
        self.logger.info("Shutdown signal received", signal=signame)
        self.stop()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick until stopped.

        Args:
            max_ticks: Upper bound on ticks, unbounded when None

        Returns:
            Number of ticks executed
        """
        ticks = 0
        self.logger.info(
            "Tick loop started",
            interval_seconds=self.interval_seconds,
            max_ticks=max_ticks,
            initial_state=self.heroine.state_name.value
        )

        while not self._stop_event.is_set():
            self.heroine.update()
            ticks += 1
            self.logger.debug("Tick completed", tick=ticks, state=self.heroine.state_name.value)

            if max_ticks is not None and ticks >= max_ticks:
                break

            self._stop_event.wait(self.interval_seconds)

        self.logger.info("Tick loop stopped", ticks=ticks, final_state=self.heroine.state_name.value)
        return ticks
