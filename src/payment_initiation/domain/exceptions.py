"""Domain exceptions for payment-initiation.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidIBANError
    │   ├── InvalidAmountError
    │   ├── CurrencyMismatchError
    │   ├── InvalidPaymentOrderIdError
    │   ├── InvalidIdempotencyKeyError
    │   └── InvalidPaymentOrderError
    ├── State & Transition Errors
    │   └── InvalidStateTransitionError
    ├── Not Found Errors
    │   └── PaymentOrderNotFoundError
    └── Idempotency Errors
        └── DuplicatePaymentOrderError (client retry, HTTP 409)

    StoreError (collaborator failure, not a domain error)
    └── IdempotencyConflictError

None of these are retried by the core.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_initiation.domain.value_objects.payment_order_id import PaymentOrderId


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidIBANError(DomainException):
    """Raised when an account number is absent or not IBAN-shaped."""


class InvalidAmountError(DomainException):
    """Raised when an amount is absent, not positive, or has an unknown currency."""


class CurrencyMismatchError(DomainException):
    """Raised when two amounts in different currencies are compared."""


class InvalidPaymentOrderIdError(DomainException):
    """Raised when a payment order ID is absent, blank or not a string."""


class InvalidIdempotencyKeyError(DomainException):
    """Raised when an idempotency key is blank or not a string."""


class InvalidPaymentOrderError(DomainException):
    """Raised when a payment order request or aggregate breaks a business rule.

    Covers missing or blank required fields, non-positive amounts,
    debtor == creditor and execution dates in the past. This is a
    CLIENT ERROR (HTTP 400); the caller must fix the input.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a status transition violates the payment order state machine.

    Examples of invalid transitions:
        - settled → anything (terminal state)
        - rejected → anything (terminal state)
        - cancelled → anything (terminal state)
        - processing → cancelled (only pending orders can be cancelled)
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class PaymentOrderNotFoundError(DomainException):
    """Raised when a payment order cannot be found by ID.

    This is a client error (HTTP 404) indicating the requested
    payment order does not exist.
    """

    def __init__(self, order_id: PaymentOrderId) -> None:
        super().__init__(f"Payment order not found: {order_id.value}")
        self.order_id = order_id


# =============================================================================
# Idempotency Errors
# =============================================================================


class DuplicatePaymentOrderError(DomainException):
    """Raised when an idempotency key is already bound to a payment order.

    This is a CLIENT ERROR (HTTP 409 Conflict). The client should fetch
    the existing order by ``existing_order_id`` instead of retrying the
    creation.
    """

    def __init__(self, idempotency_key: str, existing_order_id: PaymentOrderId) -> None:
        super().__init__(
            f"Duplicate payment order detected. Idempotency key: {idempotency_key}, "
            f"existing order: {existing_order_id.value}"
        )
        self.idempotency_key = idempotency_key
        self.existing_order_id = existing_order_id


# =============================================================================
# Collaborator Errors
# =============================================================================


class StoreError(Exception):
    """Opaque failure reported by a storage collaborator.

    Not a DomainException: the core propagates these unchanged and never
    retries them. Retry policy belongs to the storage adapter.
    """


class IdempotencyConflictError(StoreError):
    """Raised by an IdempotencyStore when an unexpired record already holds the key.

    This is the signal of the store's atomic conditional insert: two
    concurrent callers raced on the same key and this one lost.
    """

    def __init__(self, idempotency_key: str) -> None:
        super().__init__(f"Idempotency key already recorded: {idempotency_key}")
        self.idempotency_key = idempotency_key
