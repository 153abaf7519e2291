from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from payment_initiation.domain.entities import PaymentOrder
from payment_initiation.domain.exceptions import (
    InvalidIdempotencyKeyError,
    InvalidPaymentOrderError,
    StoreError,
)
from payment_initiation.domain.value_objects import IBAN, Amount, IdempotencyKey

if TYPE_CHECKING:
    from datetime import tzinfo

    from payment_initiation.application.dtos import InitiatePaymentOrderCommand
    from payment_initiation.application.idempotency_guard import IdempotencyGuard
    from payment_initiation.application.ports import OrderStore, TimeProvider

logger = logging.getLogger(__name__)


class InitiatePaymentOrderUseCase:
    """Orchestrates idempotent payment order initiation.

    Responsibilities, in this order:
    - Validate the raw command (no side effects on failure)
    - Check the idempotency key, before any domain object is built
    - Build value objects and the PaymentOrder aggregate
    - Persist the order
    - Record key -> persisted order id, only after the save succeeded

    The last step never runs for an order that failed to persist, so an
    idempotency record cannot point at a missing order. Store failures are
    propagated unchanged; the use case neither retries nor rolls back.
    """

    def __init__(
        self,
        order_store: OrderStore,
        idempotency_guard: IdempotencyGuard,
        time_provider: TimeProvider,
        business_timezone: tzinfo = UTC,
    ) -> None:
        self._order_store = order_store
        self._idempotency_guard = idempotency_guard
        self._time_provider = time_provider
        self._business_timezone = business_timezone

    def execute(self, command: InitiatePaymentOrderCommand) -> PaymentOrder:
        """Create and persist a new payment order.

        Args:
            command: Raw initiation request.

        Returns:
            The persisted PaymentOrder in PENDING status.

        Raises:
            InvalidPaymentOrderError: Missing or malformed field, or a business rule failed.
            InvalidIBANError: An account is not IBAN-shaped.
            InvalidAmountError: Unknown currency or amount rounding to zero.
            DuplicatePaymentOrderError: The idempotency key is already bound.
            StoreError: Persistence failed.
        """
        logger.info(
            "Initiating payment order with reference: %s, idempotency key: %s",
            command.reference,
            command.idempotency_key,
            extra={"reference": command.reference, "idempotency_key": command.idempotency_key},
        )

        self._validate(command)
        self._idempotency_guard.check(command.idempotency_key)

        order = self._create_payment_order(command)

        try:
            saved_order = self._order_store.save(order)
        except StoreError:
            logger.exception(
                "Failed to persist payment order - reference: %s, idempotency key: %s",
                command.reference,
                command.idempotency_key,
            )
            raise

        self._idempotency_guard.save(command.idempotency_key, saved_order.id)

        logger.info(
            "Payment order initiated successfully: %s",
            saved_order.id.value,
            extra={"order_id": saved_order.id.value, "reference": saved_order.reference},
        )
        return saved_order

    def _validate(self, command: InitiatePaymentOrderCommand) -> None:
        """Raise InvalidPaymentOrderError for the first invalid field."""
        try:
            _require_text(command.reference, "Payment order reference")
            _require_text(command.debtor_account, "Debtor account")
            _require_text(command.creditor_account, "Creditor account")
            _require_positive_amount(command.amount)
            _require_text(command.currency, "Currency")
            _require_calendar_date(command.requested_execution_date)

            if not IdempotencyKey.is_blank(command.idempotency_key):
                IdempotencyKey(value=command.idempotency_key)
        except InvalidIdempotencyKeyError as e:
            raise InvalidPaymentOrderError(f"Invalid payment order command: {e}") from e
        except InvalidPaymentOrderError as e:
            logger.warning("Payment order command validation failed: %s", e)
            raise

    def _create_payment_order(self, command: InitiatePaymentOrderCommand) -> PaymentOrder:
        now = self._time_provider.now()
        today = now.astimezone(self._business_timezone).date()

        return PaymentOrder.create(
            reference=command.reference,
            debtor_account=IBAN.of(command.debtor_account),
            creditor_account=IBAN.of(command.creditor_account),
            instructed_amount=Amount.of(command.amount, command.currency),
            remittance_information=command.remittance_information,
            requested_execution_date=command.requested_execution_date,
            now=now,
            today=today,
        )


def _require_text(value: str | None, field_name: str) -> None:
    if value is None:
        raise InvalidPaymentOrderError(f"{field_name} is required")
    if not isinstance(value, str) or not value.strip():
        raise InvalidPaymentOrderError(f"{field_name} cannot be blank")


def _require_positive_amount(value: Decimal | int | float | str | None) -> None:
    if value is None:
        raise InvalidPaymentOrderError("Amount is required")

    if isinstance(value, bool):
        raise InvalidPaymentOrderError("Amount must be a number")

    try:
        amount = Decimal(repr(value) if isinstance(value, float) else str(value).strip())
    except InvalidOperation as e:
        raise InvalidPaymentOrderError("Amount must be a number") from e

    if not amount.is_finite() or amount <= 0:
        raise InvalidPaymentOrderError("Amount must be positive")


def _require_calendar_date(value: date | None) -> None:
    if value is None:
        raise InvalidPaymentOrderError("Execution date is required")
    # datetime is a date subclass but cannot be compared with one
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidPaymentOrderError("Execution date must be a calendar date")
