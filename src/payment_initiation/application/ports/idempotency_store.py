from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_initiation.domain.entities import IdempotencyRecord
    from payment_initiation.domain.value_objects import IdempotencyKey, PaymentOrderId


class IdempotencyStore(ABC):
    """Port for durable idempotency-key bookkeeping.

    Contract:
    - Records expire IDEMPOTENCY_TTL (24h) after creation; the store owns expiry
    - exists() and find_order_id() MUST ignore expired records
    - save() MUST be an atomic "insert only if key absent or expired"
      (a unique constraint, a compare-and-swap put, ...). It is the only
      thing that stops two concurrent callers with the same key from both
      succeeding.

    Known limitation:
    A store offering only a separate exists-then-insert pair cannot honor
    save()'s contract; between the two calls a concurrent caller can insert
    the same key. Such an adapter must not be presented as race-free.
    """

    @abstractmethod
    def exists(self, key: IdempotencyKey) -> bool:
        """Return True if an unexpired record holds the key."""

    @abstractmethod
    def save(self, key: IdempotencyKey, order_id: PaymentOrderId) -> IdempotencyRecord:
        """Atomically bind key to order_id unless an unexpired record holds it.

        An expired record for the same key is replaced.

        Returns:
            The stored record.

        Raises:
            IdempotencyConflictError: If an unexpired record already holds the key.
            StoreError: On any other storage failure.
        """

    @abstractmethod
    def find_order_id(self, key: IdempotencyKey) -> PaymentOrderId | None:
        """Return the order bound to key, or None if absent or expired."""
