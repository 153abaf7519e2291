from __future__ import annotations

from dataclasses import dataclass

from payment_initiation.domain.exceptions import InvalidIdempotencyKeyError


@dataclass(frozen=True, slots=True)
class IdempotencyKey:
    """Domain value object for client-supplied idempotency keys.

    Keys are opaque: any non-blank string is accepted and compared
    verbatim, so " k1" and "k1" are different keys.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidIdempotencyKeyError(
                f"Idempotency key must be a string, got {type(self.value).__name__}"
            )

        if self.is_blank(self.value):
            raise InvalidIdempotencyKeyError("Idempotency key cannot be blank")

    @staticmethod
    def is_blank(raw: str | None) -> bool:
        """True when no key was supplied, i.e. deduplication is not requested."""
        return raw is None or (isinstance(raw, str) and not raw.strip())

    def __str__(self) -> str:
        return self.value
