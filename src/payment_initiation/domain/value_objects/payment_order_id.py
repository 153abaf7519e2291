from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from payment_initiation.domain.exceptions import InvalidPaymentOrderIdError

PREFIX = "PO-"


@dataclass(frozen=True, slots=True)
class PaymentOrderId:
    """Value object for payment order identifiers.

    Generated IDs have the form "PO-<uuid4>". IDs read back from a store
    are treated as opaque and only need to be non-blank.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidPaymentOrderIdError("Payment order ID cannot be blank")

    @classmethod
    def generate(cls) -> PaymentOrderId:
        """Generate a new unique PaymentOrderId."""
        return cls(value=f"{PREFIX}{uuid4()}")

    @classmethod
    def from_string(cls, id_str: str | None) -> PaymentOrderId:
        """Parse a PaymentOrderId from its string representation.

        Raises:
            InvalidPaymentOrderIdError: If the input is None, not a string, or blank.
        """
        if id_str is None:
            raise InvalidPaymentOrderIdError("Payment order ID is required")
        if not isinstance(id_str, str):
            raise InvalidPaymentOrderIdError(
                f"Payment order ID must be a string, got {type(id_str).__name__}"
            )
        return cls(value=id_str.strip())

    def __str__(self) -> str:
        return self.value
