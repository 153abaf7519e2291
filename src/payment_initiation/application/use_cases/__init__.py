"""Use cases - One class per application operation, each with an execute() method."""

from payment_initiation.application.use_cases.initiate_payment_order import (
    InitiatePaymentOrderUseCase,
)
from payment_initiation.application.use_cases.retrieve_payment_order import (
    RetrievePaymentOrderStatusUseCase,
    RetrievePaymentOrderUseCase,
)
from payment_initiation.application.use_cases.transition_payment_order import (
    TransitionPaymentOrderUseCase,
)

__all__ = [
    "InitiatePaymentOrderUseCase",
    "RetrievePaymentOrderStatusUseCase",
    "RetrievePaymentOrderUseCase",
    "TransitionPaymentOrderUseCase",
]
