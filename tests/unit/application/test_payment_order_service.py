"""End-to-end tests through PaymentOrderService with in-memory adapters."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from payment_initiation.application.dtos import InitiatePaymentOrderCommand
from payment_initiation.application.service import PaymentOrderService
from payment_initiation.domain.entities import PaymentStatus
from payment_initiation.domain.exceptions import (
    DuplicatePaymentOrderError,
    InvalidPaymentOrderIdError,
    InvalidStateTransitionError,
    PaymentOrderNotFoundError,
)
from payment_initiation.infrastructure import (
    FixedTimeProvider,
    InMemoryIdempotencyStore,
    InMemoryOrderStore,
)


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def service(order_store: InMemoryOrderStore, time_provider: FixedTimeProvider) -> PaymentOrderService:
    return PaymentOrderService(
        order_store=order_store,
        idempotency_store=InMemoryIdempotencyStore(time_provider),
        time_provider=time_provider,
    )


@pytest.fixture
def command(debtor_iban: str, creditor_iban: str, today: date) -> InitiatePaymentOrderCommand:
    return InitiatePaymentOrderCommand(
        reference="REF-1",
        debtor_account=debtor_iban,
        creditor_account=creditor_iban,
        amount=Decimal("1500.00"),
        currency="EUR",
        requested_execution_date=today + timedelta(days=1),
        idempotency_key="k1",
    )


class TestPaymentOrderServiceScenario:
    def test_initiate_then_retry_with_same_key(
        self,
        service: PaymentOrderService,
        command: InitiatePaymentOrderCommand,
        order_store: InMemoryOrderStore,
    ) -> None:
        order = service.initiate(command)

        assert order.status == PaymentStatus.PENDING
        assert service.retrieve_status(order.id).status == PaymentStatus.PENDING

        with pytest.raises(DuplicatePaymentOrderError) as exc_info:
            service.initiate(command)

        assert exc_info.value.idempotency_key == "k1"
        assert exc_info.value.existing_order_id == order.id
        assert order_store.count() == 1

    def test_lifecycle_through_string_ids(
        self,
        service: PaymentOrderService,
        command: InitiatePaymentOrderCommand,
        time_provider: FixedTimeProvider,
    ) -> None:
        order_id = service.initiate(command).id.value

        time_provider.advance(timedelta(minutes=1))
        service.mark_as_processing(order_id)
        settled_at = time_provider.advance(timedelta(minutes=1))
        service.mark_as_settled(order_id)

        info = service.retrieve_status(order_id)
        assert info.status == PaymentStatus.SETTLED
        assert info.last_updated_at == settled_at

        with pytest.raises(InvalidStateTransitionError):
            service.mark_as_rejected(order_id)

    def test_cancel_pending_order(
        self, service: PaymentOrderService, command: InitiatePaymentOrderCommand
    ) -> None:
        order = service.initiate(command)

        cancelled = service.cancel(order.id)

        assert cancelled.status == PaymentStatus.CANCELLED
        assert service.retrieve(order.id).status == PaymentStatus.CANCELLED

    def test_unknown_id_raises_not_found(self, service: PaymentOrderService) -> None:
        with pytest.raises(PaymentOrderNotFoundError):
            service.retrieve_status("PO-does-not-exist")

    def test_blank_id_string_is_rejected(self, service: PaymentOrderService) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            service.retrieve("   ")

    def test_non_string_id_is_rejected(self, service: PaymentOrderService) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            service.retrieve_status(42)  # type: ignore[arg-type]
