"""Centralised tunables and magic numbers.

All numeric constants that control runtime behaviour are collected here
so they are easy to find, document, and adjust.
"""

# ---------------------------------------------------------------------------
# Engine  (clicker/core/engine.py)
# ---------------------------------------------------------------------------
POLL_INTERVAL_S    = 0.005   # pause between loop cycles; bounds Idle→Active latency
SLEEP_CHUNK_S      = 0.05    # seconds between shutdown/run-state polls during long waits
LOCK_TIMEOUT_S     = 0.05    # run-state read gives up after this and assumes Idle
SHUTDOWN_TIMEOUT_S = 2.0     # join timeout for the engine thread

# ---------------------------------------------------------------------------
# Emitter  (clicker/core/emitter.py)
# ---------------------------------------------------------------------------
SETTLE_DELAY_S = 0.020   # pause after each synthetic event so the OS catches up

# ---------------------------------------------------------------------------
# Timing  (clicker/core/timing.py)
# ---------------------------------------------------------------------------
MAX_DURATION_SECONDS = 2**64 - 1   # whole seconds of the largest Duration
NANOS_PER_MILLI      = 1_000_000
NANOS_PER_SECOND     = 1_000_000_000
