from datetime import UTC, datetime, timedelta
from threading import Lock

from payment_initiation.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider using system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test time provider with a controllable fixed timestamp.

    Reads and updates are serialized, so one test thread can move the
    clock while worker threads read it (e.g. idempotency expiry tests).
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_utc(fixed_time)
        self._fixed_time = fixed_time
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._validate_utc(new_time)
        with self._lock:
            self._fixed_time = new_time

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by delta and return the new time."""
        if delta < timedelta(0):
            raise ValueError(f"Cannot move the clock backwards, got {delta}")
        with self._lock:
            self._fixed_time = self._fixed_time + delta
            return self._fixed_time

    def _validate_utc(self, dt: datetime) -> None:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
