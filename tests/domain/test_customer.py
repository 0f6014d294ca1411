"""Tests for CustomerRecord."""

import pytest
from pydantic import ValidationError

from customer_manager.domain.customer import CustomerRecord
from customer_manager.infrastructure.database.schema import Customer


class TestCustomerRecord:
    def test_minimal(self) -> None:
        record = CustomerRecord(name="Acme")
        assert record.id is None
        assert record.email is None
        assert record.phone is None
        assert record.address is None

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            CustomerRecord()  # type: ignore[call-arg]

    def test_from_orm_object(self) -> None:
        row = Customer(id=5, name="Acme", email="ops@acme.test", phone="555-0100", address="1 Main")
        record = CustomerRecord.model_validate(row)
        assert record == CustomerRecord(
            id=5, name="Acme", email="ops@acme.test", phone="555-0100", address="1 Main"
        )

    def test_to_data(self) -> None:
        record = CustomerRecord(id=1, name="Acme", email="ops@acme.test")
        assert record.to_data() == {
            "id": 1,
            "name": "Acme",
            "email": "ops@acme.test",
            "phone": None,
            "address": None,
        }

    def test_frozen(self) -> None:
        record = CustomerRecord(name="Acme")
        with pytest.raises(ValidationError):
            record.name = "Other"  # type: ignore[misc]
