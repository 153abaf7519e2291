"""Value objects - Immutable objects defined by their attributes."""

from payment_initiation.domain.value_objects.amount import Amount
from payment_initiation.domain.value_objects.iban import IBAN
from payment_initiation.domain.value_objects.idempotency_key import IdempotencyKey
from payment_initiation.domain.value_objects.payment_order_id import PaymentOrderId

__all__ = [
    "IBAN",
    "Amount",
    "IdempotencyKey",
    "PaymentOrderId",
]
