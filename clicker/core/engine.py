"""Click automation engine.

Architecture
------------
ClickEngine (one instance per session)
  └─ engine thread (threading.Thread, daemon)
       loop until shutdown():
         1. read RunStateCell          → Idle / Active
         2. drain interval / options / position channels into the snapshot
         3. Active only: one emission round through the EventEmitter,
            then wait the configured interval
         4. wait POLL_INTERVAL_S

The engine never calls back into the control surface.  Diagnostics go
through ``log_callback(level, message)``, which the GUI relays to its
log panel.
"""
from __future__ import annotations

import dataclasses
import threading
import time
from enum import Enum
from typing import Callable, Optional

from clicker.core.channels import ConfigChannel, RunStateCell
from clicker.core.constants import (
    LOCK_TIMEOUT_S, POLL_INTERVAL_S, SHUTDOWN_TIMEOUT_S, SLEEP_CHUNK_S,
)
from clicker.core.models import (
    ButtonPress, ButtonRelease, ClickInterval, ClickOptions, ClickPosition,
    EngineSnapshot, Fixed, MouseMove,
)


class EngineState(Enum):
    IDLE   = "idle"
    ACTIVE = "active"


class ClickEngine:
    """Background loop that turns the current configuration into clicks.

    Parameters
    ----------
    interval_rx, options_rx, position_rx : ConfigChannel
        Consumer ends of the three configuration channels.
    run_state : RunStateCell
        Shared run/stop flag, re-read every cycle.
    emitter
        Anything with ``emit(event) -> bool``; normally an EventEmitter.
    poll_interval : float
        Seconds to wait between cycles.
    """

    def __init__(
        self,
        interval_rx:   ConfigChannel[ClickInterval],
        options_rx:    ConfigChannel[ClickOptions],
        position_rx:   ConfigChannel[ClickPosition],
        run_state:     RunStateCell,
        emitter,
        log_callback:  Optional[Callable[[str, str], None]] = None,
        poll_interval: float = POLL_INTERVAL_S,
    ) -> None:
        self._interval_rx   = interval_rx
        self._options_rx    = options_rx
        self._position_rx   = position_rx
        self._run_state     = run_state
        self._emitter       = emitter
        self._poll_interval = poll_interval
        self._log = log_callback or (lambda level, msg: None)

        self._snapshot    = EngineSnapshot()
        self._state       = EngineState.IDLE
        self._rounds      = 0
        self._stop_event  = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> EngineSnapshot:
        """A copy of the engine's current configuration."""
        return dataclasses.replace(self._snapshot)

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def rounds_completed(self) -> int:
        return self._rounds

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Spawn the engine thread.

        A no-op while a previous thread is still alive, including one
        whose shutdown timed out and is still winding down.
        """
        if self.is_alive:
            return
        # Fresh event per run: an old thread keeps its own, already set.
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._run, args=(stop_event,), name="click-engine", daemon=True,
        )
        self._thread.start()

    def shutdown(self, timeout: float = SHUTDOWN_TIMEOUT_S) -> None:
        """Ask the loop to exit and wait up to ``timeout`` for the thread."""
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        if thread is not threading.current_thread():
            thread.join(timeout)
        if not thread.is_alive():
            self._thread = None

    def step(self) -> None:
        """Run exactly one loop cycle on the calling thread."""
        self._cycle(self._stop_event)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def _run(self, stop_event: threading.Event) -> None:
        self._log("DEBUG", "click engine thread started")
        while not stop_event.is_set():
            try:
                self._cycle(stop_event)
            except Exception as exc:      # noqa: BLE001
                self._log("ERROR", f"engine cycle failed: {exc!r}")
            stop_event.wait(self._poll_interval)
        self._update_state(False)
        self._log("DEBUG", "click engine thread stopped")

    def _cycle(self, stop_event: threading.Event) -> None:
        running = self._poll_run_state()
        changes = self._drain_config()
        # Swap in a whole new snapshot; readers never see a half update.
        self._snapshot = dataclasses.replace(self._snapshot, running=running, **changes)
        self._update_state(running)

        if running:
            self._emission_round()
            self._wait_interval(stop_event)

    def _poll_run_state(self) -> bool:
        running = self._run_state.try_get(LOCK_TIMEOUT_S)
        if running is None:
            self._log("WARNING", "run state is busy; treating as idle this cycle")
            return False
        return running

    def _drain_config(self) -> dict:
        changes: dict = {}

        interval = self._interval_rx.latest()
        if interval is not None:
            changes["interval"] = interval
            changes["delay"]    = interval.to_duration()
            self._log("DEBUG", f"interval set to {changes['delay'].total_ms} ms")

        options = self._options_rx.latest()
        if options is not None:
            changes["options"] = options
            self._log("DEBUG", f"options set to {options.button.value} / {options.click_type.value}")

        position = self._position_rx.latest()
        if position is not None:
            changes["position"] = position
            self._log("DEBUG", f"position set to {position!r}")

        return changes

    def _update_state(self, running: bool) -> None:
        new_state = EngineState.ACTIVE if running else EngineState.IDLE
        if new_state is self._state:
            return
        self._state = new_state
        if new_state is EngineState.ACTIVE:
            self._log("INFO", "clicking started")
        else:
            self._log("INFO", f"clicking stopped ({self._rounds} rounds so far)")

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emission_round(self) -> None:
        snap   = self._snapshot
        button = snap.options.button

        if isinstance(snap.position, Fixed):
            self._emitter.emit(MouseMove(snap.position.x, snap.position.y))

        for _ in range(snap.options.click_type.repeat_count):
            self._emitter.emit(ButtonPress(button))
            self._emitter.emit(ButtonRelease(button))

        self._rounds += 1

    def _wait_interval(self, stop_event: threading.Event) -> None:
        """Wait out the configured interval.

        Broken into SLEEP_CHUNK_S slices; returns early on shutdown or as
        soon as the run flag drops.
        """
        total = self._snapshot.delay.total_seconds()
        if total <= 0:
            return
        deadline = time.monotonic() + total
        while not stop_event.is_set():
            left = deadline - time.monotonic()
            if left <= 0:
                return
            if not self._run_state.try_get(LOCK_TIMEOUT_S):
                return
            stop_event.wait(min(SLEEP_CHUNK_S, left))
