"""Application layer - Use cases, idempotency guard and port definitions.

This layer contains:
- Use Cases: initiation, retrieval and status transitions of payment orders
- IdempotencyGuard: duplicate-request suppression over an IdempotencyStore
- Ports: Abstract interfaces for storage and time collaborators
- DTOs: Data transfer objects for use case input/output
- PaymentOrderService: the use-case surface for inbound adapters

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
