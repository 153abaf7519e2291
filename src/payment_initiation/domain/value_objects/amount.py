from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from payment_initiation.domain.exceptions import CurrencyMismatchError, InvalidAmountError

SCALE = Decimal("0.01")

# Active ISO 4217 alphabetic codes, excluding funds, metals and testing codes.
ISO_4217_CODES = frozenset(
    {
        "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
        "BAM", "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BRL",
        "BSD", "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHF", "CLP", "CNY",
        "COP", "CRC", "CUP", "CVE", "CZK", "DJF", "DKK", "DOP", "DZD", "EGP",
        "ERN", "ETB", "EUR", "FJD", "FKP", "GBP", "GEL", "GHS", "GIP", "GMD",
        "GNF", "GTQ", "GYD", "HKD", "HNL", "HTG", "HUF", "IDR", "ILS", "INR",
        "IQD", "IRR", "ISK", "JMD", "JOD", "JPY", "KES", "KGS", "KHR", "KMF",
        "KPW", "KRW", "KWD", "KYD", "KZT", "LAK", "LBP", "LKR", "LRD", "LSL",
        "LYD", "MAD", "MDL", "MGA", "MKD", "MMK", "MNT", "MOP", "MRU", "MUR",
        "MVR", "MWK", "MXN", "MYR", "MZN", "NAD", "NGN", "NIO", "NOK", "NPR",
        "NZD", "OMR", "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "PYG", "QAR",
        "RON", "RSD", "RUB", "RWF", "SAR", "SBD", "SCR", "SDG", "SEK", "SGD",
        "SHP", "SLE", "SOS", "SRD", "SSP", "STN", "SVC", "SYP", "SZL", "THB",
        "TJS", "TMT", "TND", "TOP", "TRY", "TTD", "TWD", "TZS", "UAH", "UGX",
        "USD", "UYU", "UZS", "VED", "VES", "VND", "VUV", "WST", "XAF", "XCD",
        "XCG", "XOF", "XPF", "YER", "ZAR", "ZMW", "ZWG",
    }
)


@dataclass(frozen=True, slots=True)
class Amount:
    """Value object for a positive monetary amount in an ISO 4217 currency.

    The value is always normalized to 2 fractional digits (half-up), and
    must stay strictly positive after that normalization. Use the of()
    factory to build one from raw input.
    """

    value: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal) or not self.value.is_finite():
            raise InvalidAmountError(f"Amount value must be a finite Decimal, got {self.value!r}")

        if self.currency not in ISO_4217_CODES:
            raise InvalidAmountError(f"Unknown ISO 4217 currency code: {self.currency!r}")

        try:
            normalized = self.value.quantize(SCALE, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise InvalidAmountError(f"Amount value out of range: {self.value}") from e

        if normalized <= 0:
            raise InvalidAmountError(f"Amount must be greater than 0, got {self.value}")

        if normalized.as_tuple() != self.value.as_tuple():
            object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: Decimal | int | float | str | None, currency_code: str | None) -> Amount:
        """Build an Amount from raw input.

        Args:
            value: The amount. Floats go through their shortest repr,
                so 1500.12345 becomes Decimal("1500.12345") before rounding.
            currency_code: ISO 4217 code; surrounding whitespace and case
                are ignored.

        Returns:
            An Amount rounded half-up to 2 decimals.

        Raises:
            InvalidAmountError: If the value is absent, not numeric or not
                positive, or the currency is absent or unknown.
        """
        if value is None:
            raise InvalidAmountError("Amount value is required")
        if currency_code is None:
            raise InvalidAmountError("Currency code is required")
        if not isinstance(currency_code, str):
            raise InvalidAmountError(f"Unknown ISO 4217 currency code: {currency_code!r}")

        return cls(value=_to_decimal(value), currency=currency_code.strip().upper())

    @property
    def currency_code(self) -> str:
        return self.currency

    def is_greater_than(self, other: Amount) -> bool:
        """Return True if this amount is strictly greater than other.

        Raises:
            CurrencyMismatchError: If the currencies differ.
        """
        self._ensure_same_currency(other)
        return self.value > other.value

    def _ensure_same_currency(self, other: Amount) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot compare amounts with different currencies: "
                f"{self.currency} vs {other.currency}"
            )

    def __str__(self) -> str:
        return f"{self.value} {self.currency}"


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    # bool is an int subclass; True must not become 1.00
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount value must be numeric, got {value!r}")

    if isinstance(value, Decimal):
        return value

    if isinstance(value, float):
        value = repr(value)

    try:
        return Decimal(str(value).strip()) if isinstance(value, str) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAmountError(f"Amount value must be numeric, got {value!r}") from e
