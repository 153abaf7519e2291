from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_initiation.domain.entities import PaymentOrder
    from payment_initiation.domain.value_objects import PaymentOrderId


class OrderStore(ABC):
    """Port for payment order persistence.

    Contract:
    - find_by_id() / find_by_reference() return None when nothing matches (no exception)
    - save() performs upsert: creates if new, replaces the snapshot if the id exists
    - Failures are reported as StoreError and are propagated unchanged by the core
    - Implementations MUST be safe to call from concurrent threads; the core
      holds no locks of its own
    """

    @abstractmethod
    def save(self, order: PaymentOrder) -> PaymentOrder:
        """Persist a payment order snapshot (upsert semantics).

        Args:
            order: The order to save.

        Returns:
            The order as persisted. Callers must use the returned instance,
            notably its id, rather than the argument.

        Raises:
            StoreError: If the order could not be persisted.
        """

    @abstractmethod
    def find_by_id(self, order_id: PaymentOrderId) -> PaymentOrder | None:
        """Retrieve a payment order by ID.

        Returns:
            The latest saved snapshot, or None if the order does not exist.
        """

    @abstractmethod
    def find_by_reference(self, reference: str) -> PaymentOrder | None:
        """Retrieve a payment order by its client-supplied reference.

        References are not unique; when several orders share one, the
        earliest saved order is returned.
        """

    @abstractmethod
    def exists_by_id(self, order_id: PaymentOrderId) -> bool:
        """Return True if an order with this ID has been saved."""
