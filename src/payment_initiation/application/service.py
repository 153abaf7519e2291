from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING

from payment_initiation.application.dtos import PaymentOrderAction
from payment_initiation.application.idempotency_guard import IdempotencyGuard
from payment_initiation.application.use_cases import (
    InitiatePaymentOrderUseCase,
    RetrievePaymentOrderStatusUseCase,
    RetrievePaymentOrderUseCase,
    TransitionPaymentOrderUseCase,
)
from payment_initiation.domain.value_objects import PaymentOrderId

if TYPE_CHECKING:
    from datetime import tzinfo

    from payment_initiation.application.dtos import (
        InitiatePaymentOrderCommand,
        PaymentOrderStatusInfo,
    )
    from payment_initiation.application.ports import IdempotencyStore, OrderStore, TimeProvider
    from payment_initiation.domain.entities import PaymentOrder


class PaymentOrderService:
    """Use-case surface consumed by inbound adapters (HTTP, messaging, CLI).

    Wires the use cases around one pair of stores and accepts order ids
    either as PaymentOrderId or as their string form.
    """

    def __init__(
        self,
        order_store: OrderStore,
        idempotency_store: IdempotencyStore,
        time_provider: TimeProvider,
        business_timezone: tzinfo = UTC,
    ) -> None:
        retrieve = RetrievePaymentOrderUseCase(order_store)

        self._initiate = InitiatePaymentOrderUseCase(
            order_store=order_store,
            idempotency_guard=IdempotencyGuard(idempotency_store),
            time_provider=time_provider,
            business_timezone=business_timezone,
        )
        self._retrieve = retrieve
        self._retrieve_status = RetrievePaymentOrderStatusUseCase(retrieve)
        self._transition = TransitionPaymentOrderUseCase(
            retrieve_payment_order=retrieve,
            order_store=order_store,
            time_provider=time_provider,
        )

    def initiate(self, command: InitiatePaymentOrderCommand) -> PaymentOrder:
        return self._initiate.execute(command)

    def retrieve(self, order_id: PaymentOrderId | str) -> PaymentOrder:
        return self._retrieve.execute(_as_order_id(order_id))

    def retrieve_status(self, order_id: PaymentOrderId | str) -> PaymentOrderStatusInfo:
        return self._retrieve_status.execute(_as_order_id(order_id))

    def mark_as_processing(self, order_id: PaymentOrderId | str) -> PaymentOrder:
        return self._transition.execute(_as_order_id(order_id), PaymentOrderAction.PROCESS)

    def mark_as_settled(self, order_id: PaymentOrderId | str) -> PaymentOrder:
        return self._transition.execute(_as_order_id(order_id), PaymentOrderAction.SETTLE)

    def mark_as_rejected(self, order_id: PaymentOrderId | str) -> PaymentOrder:
        return self._transition.execute(_as_order_id(order_id), PaymentOrderAction.REJECT)

    def cancel(self, order_id: PaymentOrderId | str) -> PaymentOrder:
        return self._transition.execute(_as_order_id(order_id), PaymentOrderAction.CANCEL)


def _as_order_id(order_id: PaymentOrderId | str) -> PaymentOrderId:
    if isinstance(order_id, PaymentOrderId):
        return order_id
    return PaymentOrderId.from_string(order_id)
