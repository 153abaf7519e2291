"""Ports - Abstract interfaces for external collaborators.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_initiation.application.ports.idempotency_store import IdempotencyStore
from payment_initiation.application.ports.order_store import OrderStore
from payment_initiation.application.ports.time_provider import TimeProvider

__all__ = [
    "IdempotencyStore",
    "OrderStore",
    "TimeProvider",
]
