"""Click session — wires channels, run state and engine together.

The control surface only ever talks to a ClickSession: it sends complete
configuration values and flips the run flag.  Nothing here blocks on the
engine thread.
"""
from __future__ import annotations

from typing import Callable, Optional

from clicker.core.channels import ConfigChannel, RunStateCell
from clicker.core.constants import POLL_INTERVAL_S, SHUTDOWN_TIMEOUT_S
from clicker.core.engine import ClickEngine
from clicker.core.models import ClickInterval, ClickOptions, ClickPosition


class ClickSession:
    """Producer side of the engine's channels plus the shared run flag."""

    def __init__(
        self,
        emitter,
        log_callback:  Optional[Callable[[str, str], None]] = None,
        poll_interval: float = POLL_INTERVAL_S,
    ) -> None:
        self._interval_tx: ConfigChannel[ClickInterval] = ConfigChannel("interval")
        self._options_tx:  ConfigChannel[ClickOptions]  = ConfigChannel("options")
        self._position_tx: ConfigChannel[ClickPosition] = ConfigChannel("position")
        self._run_state = RunStateCell()
        self._log = log_callback or (lambda level, msg: None)

        self.engine = ClickEngine(
            interval_rx   = self._interval_tx,
            options_rx    = self._options_tx,
            position_rx   = self._position_tx,
            run_state     = self._run_state,
            emitter       = emitter,
            log_callback  = log_callback,
            poll_interval = poll_interval,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def send_interval(self, interval: ClickInterval) -> None:
        self._interval_tx.send(interval)

    def send_options(self, options: ClickOptions) -> None:
        self._options_tx.send(options)

    def send_position(self, position: ClickPosition) -> None:
        self._position_tx.send(position)

    # ------------------------------------------------------------------
    # Run state
    # ------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._run_state.get()

    def start(self) -> None:
        self._run_state.set(True)

    def stop(self) -> None:
        self._run_state.set(False)

    def toggle(self) -> bool:
        """Flip the run flag; returns the new value."""
        return self._run_state.toggle()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def launch(self) -> None:
        """Start the engine thread."""
        self.engine.start()

    def close(self, timeout: float = SHUTDOWN_TIMEOUT_S) -> None:
        """Stop clicking, disconnect the channels and join the engine."""
        self._run_state.set(False)
        for channel in (self._interval_tx, self._options_tx, self._position_tx):
            channel.close()
        self.engine.shutdown(timeout)
        self._log("DEBUG", "click session closed")
