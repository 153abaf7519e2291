from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_initiation.application.dtos import PaymentOrderAction

if TYPE_CHECKING:
    from datetime import datetime

    from payment_initiation.application.ports import OrderStore, TimeProvider
    from payment_initiation.application.use_cases.retrieve_payment_order import (
        RetrievePaymentOrderUseCase,
    )
    from payment_initiation.domain.entities import PaymentOrder
    from payment_initiation.domain.value_objects import PaymentOrderId

logger = logging.getLogger(__name__)


def _apply(order: PaymentOrder, action: PaymentOrderAction, now: datetime) -> PaymentOrder:
    if action is PaymentOrderAction.PROCESS:
        return order.mark_as_processing(now)
    if action is PaymentOrderAction.SETTLE:
        return order.mark_as_settled(now)
    if action is PaymentOrderAction.REJECT:
        return order.mark_as_rejected(now)
    return order.cancel(now)


class TransitionPaymentOrderUseCase:
    """Applies a status change to a stored order and persists the new snapshot.

    The transition rules live in the PaymentOrder aggregate; this use case
    only loads, delegates and saves. It holds no lock: two concurrent
    transitions on one order are last-writer-wins unless the store
    enforces optimistic concurrency.
    """

    def __init__(
        self,
        retrieve_payment_order: RetrievePaymentOrderUseCase,
        order_store: OrderStore,
        time_provider: TimeProvider,
    ) -> None:
        self._retrieve_payment_order = retrieve_payment_order
        self._order_store = order_store
        self._time_provider = time_provider

    def execute(self, order_id: PaymentOrderId, action: PaymentOrderAction) -> PaymentOrder:
        """Apply action to the order and persist the result.

        Raises:
            PaymentOrderNotFoundError: No order has this id.
            InvalidStateTransitionError: The aggregate refused the transition.
            StoreError: Persistence failed.
        """
        order = self._retrieve_payment_order.execute(order_id)

        updated = _apply(order, action, self._time_provider.now())
        saved = self._order_store.save(updated)

        logger.info(
            "Payment order %s moved from %s to %s",
            order_id.value,
            order.status.value,
            saved.status.value,
            extra={"order_id": order_id.value, "action": action.value},
        )
        return saved
