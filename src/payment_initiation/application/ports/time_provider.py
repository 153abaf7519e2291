from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Clock used for order timestamps and idempotency expiry.

    Implementations return UTC-aware datetimes only. The business
    calendar date ("today" for the execution-date rule) is derived from
    now() by the caller in the configured business timezone.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current instant, tzinfo=datetime.UTC."""
        ...
