from __future__ import annotations

import re
from dataclasses import dataclass

from payment_initiation.domain.exceptions import InvalidIBANError

IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}$")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class IBAN:
    """Value object for International Bank Account Numbers.

    Whitespace is removed and letters are upper-cased on construction; the
    normalized form is canonical and drives equality. Only the structure
    (country code, check digits, BBAN) is validated, not the checksum.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidIBANError(f"IBAN must be a string, got {self.value!r}")

        normalized = _WHITESPACE.sub("", self.value).upper()

        if not IBAN_PATTERN.match(normalized):
            raise InvalidIBANError(f"Invalid IBAN format: {self.value}")

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, raw: str | None) -> IBAN:
        """Parse an IBAN from raw input, e.g. "ES79 2100 0813 6101 2345 6789".

        Raises:
            InvalidIBANError: If raw is None or malformed after normalization.
        """
        if raw is None:
            raise InvalidIBANError("IBAN is required")
        return cls(value=raw)

    def formatted(self) -> str:
        """Return the IBAN grouped in blocks of 4 characters for display."""
        return " ".join(self.value[i : i + 4] for i in range(0, len(self.value), 4))

    def __str__(self) -> str:
        return self.value
