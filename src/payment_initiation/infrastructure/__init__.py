"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory order and idempotency stores
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_initiation.infrastructure.idempotency_store import InMemoryIdempotencyStore
from payment_initiation.infrastructure.order_store import InMemoryOrderStore
from payment_initiation.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryIdempotencyStore",
    "InMemoryOrderStore",
    "SystemTimeProvider",
]
