from uuid import UUID

import pytest

from payment_initiation.domain.exceptions import InvalidPaymentOrderIdError
from payment_initiation.domain.value_objects import PaymentOrderId


class TestPaymentOrderIdGeneration:
    def test_generate_uses_po_prefix_and_uuid4(self) -> None:
        order_id = PaymentOrderId.generate()

        assert order_id.value.startswith("PO-")
        assert UUID(order_id.value.removeprefix("PO-")).version == 4

    def test_generate_returns_unique_ids(self) -> None:
        ids = {PaymentOrderId.generate() for _ in range(100)}

        assert len(ids) == 100


class TestPaymentOrderIdFromString:
    def test_round_trips_generated_id(self) -> None:
        order_id = PaymentOrderId.generate()

        assert PaymentOrderId.from_string(order_id.value) == order_id

    def test_accepts_opaque_values(self) -> None:
        order_id = PaymentOrderId.from_string("legacy-42")

        assert order_id.value == "legacy-42"

    def test_trims_whitespace(self) -> None:
        assert PaymentOrderId.from_string("  PO-1  ").value == "PO-1"

    def test_raises_for_none(self) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            PaymentOrderId.from_string(None)

    def test_raises_for_blank(self) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            PaymentOrderId.from_string("   ")

    def test_raises_for_non_string(self) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            PaymentOrderId.from_string(42)  # type: ignore[arg-type]

    def test_direct_construction_rejects_empty(self) -> None:
        with pytest.raises(InvalidPaymentOrderIdError):
            PaymentOrderId(value="")


class TestPaymentOrderIdValueSemantics:
    def test_is_frozen(self) -> None:
        order_id = PaymentOrderId.generate()

        with pytest.raises(AttributeError):
            order_id.value = "PO-other"  # type: ignore[misc]

    def test_usable_as_dict_key(self) -> None:
        order_id = PaymentOrderId.from_string("PO-1")

        assert {order_id: "x"}[PaymentOrderId.from_string("PO-1")] == "x"

    def test_not_equal_to_raw_string(self) -> None:
        assert PaymentOrderId.from_string("PO-1") != "PO-1"  # type: ignore[comparison-overlap]
