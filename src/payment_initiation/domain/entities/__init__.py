"""Domain entities - Objects with identity and lifecycle."""

from payment_initiation.domain.entities.idempotency_record import (
    IDEMPOTENCY_TTL,
    IdempotencyRecord,
)
from payment_initiation.domain.entities.payment_order import PaymentOrder, PaymentStatus

__all__ = [
    "IDEMPOTENCY_TTL",
    "IdempotencyRecord",
    "PaymentOrder",
    "PaymentStatus",
]
