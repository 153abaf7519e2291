from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_initiation.domain.exceptions import (
    DuplicatePaymentOrderError,
    IdempotencyConflictError,
)
from payment_initiation.domain.value_objects import IdempotencyKey

if TYPE_CHECKING:
    from payment_initiation.application.ports import IdempotencyStore
    from payment_initiation.domain.value_objects import PaymentOrderId

logger = logging.getLogger(__name__)


class IdempotencyGuard:
    """Suppresses duplicate payment order creation for a client idempotency key.

    Absent or blank keys opt out of deduplication: both operations are then
    no-ops and the store is never called.

    The guard holds no locks. Its check() and the later save() straddle
    aggregate construction and persistence, so only the store's atomic
    conditional insert in save() stops two concurrent callers with the same
    key from both succeeding. The caller that loses that race gets
    DuplicatePaymentOrderError from save(), after its own order has already
    been persisted.
    """

    def __init__(self, idempotency_store: IdempotencyStore) -> None:
        self._store = idempotency_store

    def check(self, key: str | None) -> None:
        """Fail if key is already bound to an unexpired payment order.

        Raises:
            DuplicatePaymentOrderError: With the order id already bound to key.
            InvalidIdempotencyKeyError: If a non-blank key is malformed.
        """
        if IdempotencyKey.is_blank(key):
            logger.debug("Idempotency key is absent or blank, skipping check")
            return

        idempotency_key = IdempotencyKey(value=key)
        existing_order_id = self._store.find_order_id(idempotency_key)
        if existing_order_id is not None:
            logger.warning(
                "Duplicate payment order detected with idempotency key: %s",
                idempotency_key.value,
                extra={
                    "idempotency_key": idempotency_key.value,
                    "order_id": existing_order_id.value,
                },
            )
            raise DuplicatePaymentOrderError(idempotency_key.value, existing_order_id)

        logger.debug("Idempotency check passed for key: %s", idempotency_key.value)

    def save(self, key: str | None, order_id: PaymentOrderId) -> None:
        """Bind key to the persisted order id for the idempotency window.

        Raises:
            DuplicatePaymentOrderError: If a concurrent caller bound the key first.
            StoreError: Any other store failure, unchanged.
        """
        if IdempotencyKey.is_blank(key):
            logger.debug("Idempotency key is absent or blank, skipping save")
            return

        idempotency_key = IdempotencyKey(value=key)
        try:
            self._store.save(idempotency_key, order_id)
        except IdempotencyConflictError:
            winner_order_id = self._store.find_order_id(idempotency_key)
            if winner_order_id is None:
                # the winning record expired in between; nothing to point the client at
                raise
            logger.warning(
                "Lost idempotency race for key %s; order %s stays persisted without a key",
                idempotency_key.value,
                order_id.value,
                extra={
                    "idempotency_key": idempotency_key.value,
                    "order_id": order_id.value,
                },
            )
            raise DuplicatePaymentOrderError(idempotency_key.value, winner_order_id) from None

        logger.debug(
            "Saved idempotency key: %s -> %s",
            idempotency_key.value,
            order_id.value,
        )
