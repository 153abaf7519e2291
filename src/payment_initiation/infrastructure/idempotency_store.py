from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING

from payment_initiation.application.ports import IdempotencyStore
from payment_initiation.domain.entities import IdempotencyRecord
from payment_initiation.domain.exceptions import IdempotencyConflictError

if TYPE_CHECKING:
    from payment_initiation.application.ports import TimeProvider
    from payment_initiation.domain.value_objects import IdempotencyKey, PaymentOrderId

logger = logging.getLogger(__name__)


class InMemoryIdempotencyStore(IdempotencyStore):
    """In-memory idempotency store with an atomic conditional insert.

    Implementation notes:
    - One lock guards the record dict; save() checks and inserts while
      holding it, which is the in-process equivalent of a unique index
    - Expiry is evaluated against the injected TimeProvider on every call
    - Expired records are replaced on save() and dropped by purge_expired()

    Limitations:
    - Single-process only; a multi-instance deployment needs a shared
      store with a real unique constraint
    """

    def __init__(self, time_provider: TimeProvider) -> None:
        self._time_provider = time_provider
        self._records: dict[IdempotencyKey, IdempotencyRecord] = {}
        self._lock = Lock()

    def exists(self, key: IdempotencyKey) -> bool:
        return self._find_live(key) is not None

    def save(self, key: IdempotencyKey, order_id: PaymentOrderId) -> IdempotencyRecord:
        with self._lock:
            now = self._time_provider.now()
            existing = self._records.get(key)
            if existing is not None and not existing.is_expired(now):
                raise IdempotencyConflictError(key.value)

            record = IdempotencyRecord.create(key=key, order_id=order_id, created_at=now)
            self._records[key] = record
            return record

    def find_order_id(self, key: IdempotencyKey) -> PaymentOrderId | None:
        record = self._find_live(key)
        if record is None:
            return None
        return record.order_id

    def purge_expired(self) -> int:
        """Drop expired records and return how many were removed."""
        with self._lock:
            now = self._time_provider.now()
            expired = [key for key, record in self._records.items() if record.is_expired(now)]
            for key in expired:
                del self._records[key]

        if expired:
            logger.debug("Purged %d expired idempotency records", len(expired))
        return len(expired)

    def _find_live(self, key: IdempotencyKey) -> IdempotencyRecord | None:
        with self._lock:
            record = self._records.get(key)
            if record is None or record.is_expired(self._time_provider.now()):
                return None
            return record
