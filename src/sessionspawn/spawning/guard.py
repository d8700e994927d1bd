"""One-shot spawn latch.

The guard moves IDLE -> PENDING when an attempt starts, then either commits
(PENDING -> COMMITTED, permanent) or releases back to IDLE on failure. Re-entrant
or duplicate triggers see PENDING or COMMITTED and back off, so the first caller
wins without any ordering between triggers.

Event delivery is normally single-threaded; the lock only matters when a host
delivers events from OS threads.
"""

from __future__ import annotations

import threading
from enum import Enum, auto


class GuardState(Enum):
    IDLE = auto()
    PENDING = auto()
    COMMITTED = auto()


class SpawnGuard:
    """Check-and-set latch. Never resets once committed."""

    def __init__(self) -> None:
        self._state = GuardState.IDLE
        self._lock = threading.Lock()

    @property
    def state(self) -> GuardState:
        return self._state

    @property
    def is_set(self) -> bool:
        return self._state is GuardState.COMMITTED

    def acquire(self) -> GuardState:
        """Try to start an attempt.

        Returns:
            The state before the call. Only IDLE means the caller now owns the
            attempt and must later commit() or release().
        """
        with self._lock:
            prior = self._state
            if prior is GuardState.IDLE:
                self._state = GuardState.PENDING
            return prior

    def commit(self) -> None:
        """Mark the attempt successful. Permanent.

        Raises:
            RuntimeError: If no attempt is pending.
        """
        with self._lock:
            if self._state is not GuardState.PENDING:
                raise RuntimeError(f"Cannot commit spawn guard in state {self._state.name}")
            self._state = GuardState.COMMITTED

    def release(self) -> None:
        """Abandon a pending attempt so a later trigger may try again."""
        with self._lock:
            if self._state is GuardState.PENDING:
                self._state = GuardState.IDLE
