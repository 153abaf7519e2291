"""Composition root: builds a ready-to-use PaymentOrderService."""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_initiation.application.service import PaymentOrderService
from payment_initiation.config import get_settings
from payment_initiation.infrastructure import (
    InMemoryIdempotencyStore,
    InMemoryOrderStore,
    SystemTimeProvider,
)
from payment_initiation.logging_config import setup_logging

if TYPE_CHECKING:
    from payment_initiation.application.ports import TimeProvider
    from payment_initiation.config import PaymentInitiationSettings


def create_payment_order_service(
    settings: PaymentInitiationSettings | None = None,
    time_provider: TimeProvider | None = None,
    configure_logging: bool = True,
) -> PaymentOrderService:
    """Wire the service with in-memory stores.

    Args:
        settings: Defaults to get_settings().
        time_provider: Defaults to the system clock.
        configure_logging: Attach the package log handler from settings.
    """
    settings = settings or get_settings()
    time_provider = time_provider or SystemTimeProvider()

    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)

    return PaymentOrderService(
        order_store=InMemoryOrderStore(),
        idempotency_store=InMemoryIdempotencyStore(time_provider),
        time_provider=time_provider,
        business_timezone=settings.business_tzinfo(),
    )
