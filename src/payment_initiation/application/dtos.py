"""Data Transfer Objects for use case input/output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime
    from decimal import Decimal

    from payment_initiation.domain.entities import PaymentStatus
    from payment_initiation.domain.value_objects import PaymentOrderId


@dataclass(frozen=True, slots=True)
class InitiatePaymentOrderCommand:
    """Input DTO for the InitiatePaymentOrder use case.

    Fields arrive raw from an inbound adapter; any of them may be missing.
    The use case validates them before anything else happens.
    """

    reference: str | None
    debtor_account: str | None
    creditor_account: str | None
    amount: Decimal | int | float | str | None
    currency: str | None
    requested_execution_date: date | None
    remittance_information: str | None = None
    idempotency_key: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentOrderStatusInfo:
    """Output DTO for the RetrievePaymentOrderStatus use case."""

    order_id: PaymentOrderId
    status: PaymentStatus
    last_updated_at: datetime


class PaymentOrderAction(Enum):
    """Status changes a caller can request on an existing order."""

    PROCESS = "process"
    SETTLE = "settle"
    REJECT = "reject"
    CANCEL = "cancel"
