from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_initiation.application.dtos import PaymentOrderStatusInfo
from payment_initiation.domain.exceptions import PaymentOrderNotFoundError

if TYPE_CHECKING:
    from payment_initiation.application.ports import OrderStore
    from payment_initiation.domain.entities import PaymentOrder
    from payment_initiation.domain.value_objects import PaymentOrderId

logger = logging.getLogger(__name__)


class RetrievePaymentOrderUseCase:
    """Fetches a payment order by id."""

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def execute(self, order_id: PaymentOrderId) -> PaymentOrder:
        """Return the latest snapshot of the order.

        Raises:
            PaymentOrderNotFoundError: No order has this id.
        """
        logger.debug("Retrieving payment order: %s", order_id.value)

        order = self._order_store.find_by_id(order_id)
        if order is None:
            logger.warning(
                "Payment order not found: %s",
                order_id.value,
                extra={"order_id": order_id.value},
            )
            raise PaymentOrderNotFoundError(order_id)

        return order


class RetrievePaymentOrderStatusUseCase:
    """Projects a payment order onto its status information."""

    def __init__(self, retrieve_payment_order: RetrievePaymentOrderUseCase) -> None:
        self._retrieve_payment_order = retrieve_payment_order

    def execute(self, order_id: PaymentOrderId) -> PaymentOrderStatusInfo:
        """Return id, status and last update time of the order.

        Raises:
            PaymentOrderNotFoundError: No order has this id.
        """
        order = self._retrieve_payment_order.execute(order_id)

        logger.debug("Payment order status retrieved: %s -> %s", order_id.value, order.status.value)
        return PaymentOrderStatusInfo(
            order_id=order.id,
            status=order.status,
            last_updated_at=order.last_updated_at,
        )
