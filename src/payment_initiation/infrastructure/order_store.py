from __future__ import annotations

import copy
from threading import Lock
from typing import TYPE_CHECKING

from payment_initiation.application.ports import OrderStore

if TYPE_CHECKING:
    from payment_initiation.domain.entities import PaymentOrder
    from payment_initiation.domain.value_objects import PaymentOrderId


class InMemoryOrderStore(OrderStore):
    """In-memory payment order store for tests and single-process use.

    Implementation notes:
    - Dict keyed by PaymentOrderId, insertion order = first save order
    - Returns deep copies to mimic database detachment
    - Thread-safe: one lock guards the dict, since the core holds no locks
    """

    def __init__(self) -> None:
        self._orders: dict[PaymentOrderId, PaymentOrder] = {}
        self._lock = Lock()

    def save(self, order: PaymentOrder) -> PaymentOrder:
        stored = copy.deepcopy(order)
        with self._lock:
            self._orders[order.id] = stored
        return copy.deepcopy(stored)

    def find_by_id(self, order_id: PaymentOrderId) -> PaymentOrder | None:
        with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            return None
        return copy.deepcopy(order)

    def find_by_reference(self, reference: str) -> PaymentOrder | None:
        with self._lock:
            order = next(
                (o for o in self._orders.values() if o.reference == reference),
                None,
            )
        if order is None:
            return None
        return copy.deepcopy(order)

    def exists_by_id(self, order_id: PaymentOrderId) -> bool:
        with self._lock:
            return order_id in self._orders

    def count(self) -> int:
        """Number of stored orders."""
        with self._lock:
            return len(self._orders)
