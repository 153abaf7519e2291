from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from payment_initiation.domain.value_objects import IdempotencyKey, PaymentOrderId

IDEMPOTENCY_TTL = timedelta(hours=24)


@dataclass(frozen=True, slots=True)
class IdempotencyRecord:
    """Binding of an idempotency key to the payment order it created.

    Records are never mutated. Once expired, a record no longer blocks the
    key; removing it is the storage collaborator's job.
    """

    key: IdempotencyKey
    order_id: PaymentOrderId
    created_at: datetime
    expires_at: datetime

    @classmethod
    def create(
        cls,
        key: IdempotencyKey,
        order_id: PaymentOrderId,
        created_at: datetime,
    ) -> IdempotencyRecord:
        return cls(
            key=key,
            order_id=order_id,
            created_at=created_at,
            expires_at=created_at + IDEMPOTENCY_TTL,
        )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
