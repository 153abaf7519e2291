"""Domain layer - Payment order aggregate, value objects and business rules.

This layer contains:
- Entities: PaymentOrder (aggregate root) and IdempotencyRecord
- Value Objects: Amount, IBAN, PaymentOrderId, IdempotencyKey
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
