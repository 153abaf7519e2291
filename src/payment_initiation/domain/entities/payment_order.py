"""PaymentOrder aggregate root with status state machine behavior."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from payment_initiation.domain.exceptions import (
    InvalidPaymentOrderError,
    InvalidStateTransitionError,
)
from payment_initiation.domain.value_objects import PaymentOrderId

if TYPE_CHECKING:
    from datetime import date, datetime

    from payment_initiation.domain.value_objects import IBAN, Amount


class PaymentStatus(Enum):
    """Payment order lifecycle statuses."""

    PENDING = "pending"
    PROCESSING = "processing"
    SETTLED = "settled"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: PaymentStatus) -> bool:
        return target in _ALLOWED_TRANSITIONS[self]


# Terminal statuses map to the empty set: they are absorbing.
_ALLOWED_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset(
        {
            PaymentStatus.PROCESSING,
            PaymentStatus.SETTLED,
            PaymentStatus.REJECTED,
            PaymentStatus.CANCELLED,
        }
    ),
    PaymentStatus.PROCESSING: frozenset(
        {
            PaymentStatus.PROCESSING,
            PaymentStatus.SETTLED,
            PaymentStatus.REJECTED,
        }
    ),
    PaymentStatus.SETTLED: frozenset(),
    PaymentStatus.REJECTED: frozenset(),
    PaymentStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True, slots=True, eq=False)
class PaymentOrder:
    """Payment order aggregate root.

    PaymentOrder is immutable (frozen dataclass). Every status change
    returns a new snapshot with the same id and created_at, and a
    refreshed last_updated_at. Identity is the id alone: two snapshots of
    the same order compare equal whatever their status.

    State machine:
        - pending → processing | settled | rejected (mark_as_*)
        - processing → processing | settled | rejected (mark_as_*)
        - pending → cancelled (cancel)
        - settled, rejected, cancelled are terminal

    Use the create() factory to construct new orders with validation.
    """

    id: PaymentOrderId
    reference: str
    debtor_account: IBAN
    creditor_account: IBAN
    instructed_amount: Amount
    remittance_information: str | None
    requested_execution_date: date
    status: PaymentStatus
    created_at: datetime
    last_updated_at: datetime

    @classmethod
    def create(
        cls,
        reference: str,
        debtor_account: IBAN,
        creditor_account: IBAN,
        instructed_amount: Amount,
        remittance_information: str | None,
        requested_execution_date: date,
        *,
        now: datetime,
        today: date | None = None,
    ) -> PaymentOrder:
        """Factory method to create a new PENDING payment order.

        Args:
            reference: Client-supplied reference, must not be blank.
            debtor_account: Account to debit.
            creditor_account: Account to credit; must differ from the debtor.
            instructed_amount: Amount to transfer.
            remittance_information: Optional free text for the creditor.
            requested_execution_date: Must not be before today.
            now: Creation timestamp (UTC).
            today: Business calendar date; defaults to now.date().

        Returns:
            A new PaymentOrder with a fresh id and created_at == last_updated_at.

        Raises:
            InvalidPaymentOrderError: If any creation rule is violated.
        """
        if today is None:
            today = now.date()

        if reference is None or not reference.strip():
            raise InvalidPaymentOrderError("Payment order reference cannot be blank")

        if debtor_account is None or creditor_account is None:
            raise InvalidPaymentOrderError("Debtor and creditor accounts are required")

        if instructed_amount is None:
            raise InvalidPaymentOrderError("Instructed amount is required")

        if requested_execution_date is None:
            raise InvalidPaymentOrderError("Execution date is required")

        if debtor_account == creditor_account:
            raise InvalidPaymentOrderError("Debtor and creditor accounts cannot be the same")

        if requested_execution_date < today:
            raise InvalidPaymentOrderError(
                f"Execution date cannot be in the past: {requested_execution_date.isoformat()} "
                f"is before {today.isoformat()}"
            )

        return cls(
            id=PaymentOrderId.generate(),
            reference=reference,
            debtor_account=debtor_account,
            creditor_account=creditor_account,
            instructed_amount=instructed_amount,
            remittance_information=remittance_information,
            requested_execution_date=requested_execution_date,
            status=PaymentStatus.PENDING,
            created_at=now,
            last_updated_at=now,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def mark_as_processing(self, now: datetime) -> PaymentOrder:
        """Move the order to PROCESSING.

        Raises:
            InvalidStateTransitionError: If the order is in a terminal status.
        """
        return self._transition_to(PaymentStatus.PROCESSING, now)

    def mark_as_settled(self, now: datetime) -> PaymentOrder:
        """Move the order to SETTLED (terminal).

        Raises:
            InvalidStateTransitionError: If the order is in a terminal status.
        """
        return self._transition_to(PaymentStatus.SETTLED, now)

    def mark_as_rejected(self, now: datetime) -> PaymentOrder:
        """Move the order to REJECTED (terminal).

        Raises:
            InvalidStateTransitionError: If the order is in a terminal status.
        """
        return self._transition_to(PaymentStatus.REJECTED, now)

    def cancel(self, now: datetime) -> PaymentOrder:
        """Cancel the order.

        Raises:
            InvalidStateTransitionError: If the order is not PENDING.
        """
        if self.status != PaymentStatus.PENDING:
            raise InvalidStateTransitionError(
                f"Cannot cancel payment order in status {self.status.value}; "
                f"must be in {PaymentStatus.PENDING.value} status"
            )
        return self._transition_to(PaymentStatus.CANCELLED, now)

    def _transition_to(self, target: PaymentStatus, now: datetime) -> PaymentOrder:
        if not self.status.can_transition_to(target):
            raise InvalidStateTransitionError(
                f"Cannot transition payment order {self.id.value} "
                f"from {self.status.value} to {target.value}"
            )

        # last_updated_at never moves backwards, even with a lagging clock
        return replace(
            self,
            status=target,
            last_updated_at=max(now, self.last_updated_at),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaymentOrder):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
